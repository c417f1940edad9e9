"""
Protocol for the session registry.

The registry maps a game ID to the GameModel of a running tic-tac-toe session.
Sessions only need to live as long as the process: nothing is expected to survive a restart.
"""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """Where the service keeps the sessions between interaction events"""

    def get_game(self, game_id: UUID) -> GameModel | None:
        """The session's history, view pointer and sort order, or None for an unknown ID."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Register a new session (normally the single empty board) and hand out its ID."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite the session after a move, jump or order toggle. None if the ID is unknown."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """End the session. Returns the last stored state, or None if the ID is unknown."""
        ...
