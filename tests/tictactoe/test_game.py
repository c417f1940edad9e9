"""Unit tests for /src/tictactoe/game.py"""

from typing import Any, Callable

import pytest

from src.core.exceptions import GameStateError, InvalidNavigationError
from src.core.models import GameModel
from src.core.shared_types import Mark, Status
from src.tictactoe.board import Board
from src.tictactoe.game import Game, MoveDescriptor, Snapshot, mark_to_move
from src.tictactoe.square import Square

GameAfter = Callable[..., Game]

# X:0,1,5,6,8 and O:2,3,4,7 in playing order, no three in a row
DRAW_SEQUENCE = (0, 2, 1, 3, 5, 4, 6, 7, 8)
# X takes the top row
X_WINS_SEQUENCE = (0, 4, 1, 5, 2)


# -- CREATION LOGIC --
def test_new_game() -> None:
    game = Game.new_game()
    assert game.history == [Snapshot(Board.empty(), None)]
    assert game.current_move == 0
    assert game.ascending
    assert game.x_is_next
    assert game.next_player == Mark.X
    assert game.status_text == "Next player: X"


def test_new_game_descending() -> None:
    assert not Game.new_game(ascending=False).ascending


def test_game_model_roundtrip(game_after: GameAfter) -> None:
    game = game_after(0, 4, 1)
    game.jump_to(1)
    game.toggle_order()

    model = game.to_model()
    assert model == GameModel(
        history_boards=[".........", "X........", "X...O....", "XX..O...."],
        history_moves=[None, 0, 4, 1],
        current_move=1,
        ascending=False,
    )
    assert Game.from_model(model) == game


def _model(**overrides: Any) -> GameModel:
    fields: dict[str, Any] = dict(
        history_boards=[".........", "X........"],
        history_moves=[None, 0],
        current_move=1,
        ascending=True,
    )
    fields.update(overrides)
    return GameModel(**fields)


@pytest.mark.parametrize(
    "overrides",
    [
        {"history_boards": [], "history_moves": []},  # empty history
        {"history_moves": [None]},  # lengths differ
        {"history_boards": [".........", "Z........"]},  # unreadable board
        {"history_boards": ["X........", "X........"], "history_moves": [None, 0]},  # not starting empty
        {"history_moves": [0, 0]},  # starting board with a move
        {"history_moves": [None, None]},  # later snapshot without a move
        {"history_moves": [None, 9]},  # move out of range
        {"history_moves": [None, 1]},  # recorded cell differs from the changed cell
        {"history_boards": [".........", "O........"]},  # O cannot move first
        {"history_boards": [".........", "XX......."]},  # two cells changed at once
        {"current_move": 2},  # pointer past the end
        {"current_move": -1},  # negative pointer
    ],
)
def test_invalid_models(overrides: dict[str, Any]) -> None:
    with pytest.raises(GameStateError):
        _ = Game.from_model(_model(**overrides))


def test_model_with_move_after_win() -> None:
    """No snapshot can follow a decided board"""
    boards = [".........", "X........", "X...O....", "XX..O....", "XX..OO...", "XXX.OO...", "XXX.OOO.."]
    moves = [None, 0, 4, 1, 5, 2, 6]
    with pytest.raises(GameStateError):
        _ = Game.from_model(
            GameModel(history_boards=boards, history_moves=moves, current_move=0, ascending=True)
        )


# -- PLAYING MOVES --
def test_legal_move_appends_snapshot() -> None:
    game = Game.new_game()
    assert game.play_move(4)
    assert len(game.history) == 2
    assert game.current_move == 1
    assert game.history[1] == Snapshot(Board.from_string("....X...."), 4)
    assert game.next_player == Mark.O


def test_moves_alternate(game_after: GameAfter) -> None:
    game = game_after(0, 1, 2, 3)
    assert game.current_board.to_string() == "XOXO....."
    assert game.x_is_next


@pytest.mark.parametrize("move", range(9))
def test_turn_parity(move: int) -> None:
    assert mark_to_move(move) == (Mark.X if move % 2 == 0 else Mark.O)


def test_occupied_cell_is_ignored(game_after: GameAfter) -> None:
    game = game_after(0, 4)
    history_before = list(game.history)

    assert not game.play_move(4)
    assert not game.play_move(0)
    assert game.history == history_before
    assert game.current_move == 2


@pytest.mark.parametrize("cell", [-1, 9, 100, 2.0, "4", None, True])
def test_invalid_cell_is_ignored(cell: Any) -> None:
    game = Game.new_game()
    assert not game.play_move(cell)
    assert game == Game.new_game()


def test_scenario_x_wins_top_row(game_after: GameAfter) -> None:
    """X:0, O:4, X:1, O:5, X:2 --> X wins on the top row. Nothing can be played afterwards."""
    game = game_after(*X_WINS_SEQUENCE)

    outcome = game.outcome
    assert outcome.status == Status.WIN
    assert outcome.winner == Mark.X
    assert outcome.line == (0, 1, 2)
    assert game.winning_line == (0, 1, 2)
    assert game.status_text == "Winner: X"

    for cell in (3, 6, 7, 8):
        assert not game.play_move(cell)
    assert len(game.history) == 6
    assert game.current_move == 5


def test_o_wins(game_after: GameAfter) -> None:
    game = game_after(0, 2, 1, 4, 8, 6)
    assert game.outcome.winner == Mark.O
    assert game.outcome.line == (2, 4, 6)
    assert game.status_text == "Winner: O"


def test_scenario_draw(game_after: GameAfter) -> None:
    game = game_after(*DRAW_SEQUENCE)

    assert game.current_board.to_string() == "XXOOOXXOX"
    assert game.outcome.status == Status.DRAW
    assert game.status_text == "Draw"
    assert game.winning_line == ()
    assert len(game.history) == 10


def test_scenario_jump_back_and_branch(game_after: GameAfter) -> None:
    """After 3 moves, go back to move 1 and play cell 4: the old move 2 and 3 are discarded."""
    game = game_after(0, 8, 1)
    game.jump_to(1)

    assert game.play_move(4)
    assert len(game.history) == 3
    assert game.current_move == 2
    assert game.current_board.to_string() == "X...O...."
    assert [snapshot.cell_index for snapshot in game.history] == [None, 0, 4]


def test_playing_from_start_discards_everything(game_after: GameAfter) -> None:
    game = game_after(0, 4, 1)
    game.jump_to(0)

    assert game.play_move(8)
    assert len(game.history) == 2
    assert game.current_board.to_string() == "........X"


def test_play_again_before_a_win(game_after: GameAfter) -> None:
    """Going back to a board before the winning move allows a different continuation"""
    game = game_after(*X_WINS_SEQUENCE)
    game.jump_to(4)

    assert game.play_move(8)
    assert game.outcome.status == Status.IN_PROGRESS
    assert len(game.history) == 6
    assert game.history[-1].cell_index == 8


def test_ignored_move_keeps_future(game_after: GameAfter) -> None:
    """A rejected move after jumping back does not truncate anything"""
    game = game_after(0, 4, 1)
    game.jump_to(1)

    assert not game.play_move(0)
    assert len(game.history) == 4
    assert game.current_move == 1


def test_earlier_snapshots_are_not_changed(game_after: GameAfter) -> None:
    game = game_after(0, 4)
    first_boards = [snapshot.board for snapshot in game.history]

    game.play_move(8)
    assert [snapshot.board for snapshot in game.history[:3]] == first_boards
    assert game.history[2].board.is_empty_cell(8)


# -- NAVIGATION --
def test_jump_to(game_after: GameAfter) -> None:
    game = game_after(0, 4, 1)
    game.jump_to(2)

    assert game.current_move == 2
    assert len(game.history) == 4
    assert game.current_board.to_string() == "X...O...."
    assert game.x_is_next
    assert game.status_text == "Next player: X"


def test_jump_to_odd_move_gives_o_the_turn(game_after: GameAfter) -> None:
    game = game_after(0, 4, 1)
    game.jump_to(1)
    assert game.next_player == Mark.O


def test_jump_back_to_a_decided_board_blocks_moves(game_after: GameAfter) -> None:
    game = game_after(*X_WINS_SEQUENCE)
    game.jump_to(0)
    game.jump_to(5)
    assert not game.play_move(8)


@pytest.mark.parametrize("move", [-1, 4, 10])
def test_jump_out_of_history(game_after: GameAfter, move: int) -> None:
    game = game_after(0, 4, 1)
    with pytest.raises(InvalidNavigationError):
        game.jump_to(move)
    assert game.current_move == 3


# -- DISPLAY ORDER AND MOVE LIST --
def test_toggle_order(game_after: GameAfter) -> None:
    game = game_after(0, 4)
    assert game.order_label == "Sort list Ascending"

    game.toggle_order()
    assert not game.ascending
    assert game.order_label == "Sort list Descending"
    assert len(game.history) == 3
    assert game.current_move == 2

    game.toggle_order()
    assert game.ascending


def test_move_list(game_after: GameAfter) -> None:
    game = game_after(0, 7)
    game.jump_to(1)

    assert game.move_list == [
        MoveDescriptor(move=0, square=None, is_current=False),
        MoveDescriptor(move=1, square=Square(0, 0), is_current=True),
        MoveDescriptor(move=2, square=Square(2, 1), is_current=False),
    ]
    assert [descriptor.description for descriptor in game.move_list] == [
        "Go to game start",
        "You are at move #1",
        "Go to move #2 - (2, 1)",
    ]


def test_move_list_descending(game_after: GameAfter) -> None:
    game = game_after(0, 7)
    game.toggle_order()
    assert [descriptor.move for descriptor in game.move_list] == [2, 1, 0]
    assert game.move_list[0].description == "You are at move #2"


def test_game_start_is_current_on_new_game() -> None:
    (descriptor,) = Game.new_game().move_list
    assert descriptor.description == "You are at move #0"
