"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Callable, Generator

import pytest

from src.db.memory_repository import InMemoryGameRepository
from src.tictactoe.game import Game


@pytest.fixture
def repository() -> Generator[InMemoryGameRepository, None, None]:
    """Fresh registry for every test."""
    repo = InMemoryGameRepository()
    yield repo


@pytest.fixture
def game_after() -> Callable[..., Game]:
    """Call the inner function with the cell indices to play (in order) on a new game."""

    def _play(*cells: int) -> Game:
        game = Game.new_game()
        for cell in cells:
            assert game.play_move(cell), f"Setup move on cell {cell} was rejected"
        return game

    return _play


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Services read TICTACTOE_* variables; tests start from the defaults unless they set them."""
    monkeypatch.delenv("TICTACTOE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TICTACTOE_DEFAULT_ASCENDING", raising=False)
