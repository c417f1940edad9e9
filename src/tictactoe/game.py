"""
The Game class is the entrypoint into the domain layer for the service layer.
It owns the history of board snapshots, the pointer to the snapshot currently viewed, and the display order of the move list.
Everything else (outcome, whose turn it is, status text, the move list) is derived on demand from those three.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import GameStateError, InvalidBoardError, InvalidNavigationError
from src.core.models import GameModel
from src.core.shared_types import Mark, Status
from src.tictactoe.board import Board
from src.tictactoe.outcome import Outcome, evaluate
from src.tictactoe.square import BOARD_SIZE, Square

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """One board in the history, plus the cell that was played to reach it (None for the empty starting board)."""

    board: Board
    cell_index: Optional[int] = None

    @property
    def square(self) -> Optional[Square]:
        return None if self.cell_index is None else Square.from_index(self.cell_index)


@dataclass(frozen=True)
class MoveDescriptor:
    """A single entry of the move list as the presentation layer shows it."""

    move: int
    square: Optional[Square]
    is_current: bool

    @property
    def description(self) -> str:
        # The entry you are looking at is a marker, not something to click on
        if self.is_current:
            return f"You are at move #{self.move}"
        if self.square is None:
            return "Go to game start"
        return f"Go to move #{self.move} - ({self.square.row}, {self.square.col})"


def mark_to_move(move: int) -> Mark:
    """X moves at even positions in the history, O at odd ones."""
    return Mark.X if move % 2 == 0 else Mark.O


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    history: list[Snapshot] = field(default_factory=lambda: [Snapshot(Board.empty())])
    current_move: int = 0
    ascending: bool = True

    @classmethod
    def new_game(cls, ascending: bool = True) -> Self:
        """Start from the single empty board."""
        return cls(
            history=[Snapshot(Board.empty())], current_move=0, ascending=ascending
        )

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        if not model.history_boards:
            raise GameStateError("History cannot be empty.")
        if len(model.history_boards) != len(model.history_moves):
            raise GameStateError(
                f"History has {len(model.history_boards)} boards but {len(model.history_moves)} moves."
            )

        try:
            boards = [Board.from_string(board) for board in model.history_boards]
        except InvalidBoardError as e:
            raise GameStateError(f"Invalid board in history: {e}") from e

        history = [
            Snapshot(board, cell_index)
            for board, cell_index in zip(boards, model.history_moves)
        ]
        _validate_history(history)

        if not (0 <= model.current_move < len(history)):
            raise GameStateError(
                f"Current move {model.current_move} is outside the history (0 - {len(history) - 1})."
            )

        return cls(
            history=history, current_move=model.current_move, ascending=model.ascending
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            history_boards=[snapshot.board.to_string() for snapshot in self.history],
            history_moves=[snapshot.cell_index for snapshot in self.history],
            current_move=self.current_move,
            ascending=self.ascending,
        )

    def play_move(self, cell_index: int) -> bool:
        """
        Attempt to play the cell on the board currently viewed.
        -----

        Illegal moves are ignored: nothing changes and False is returned.
        A legal move:
        1. places the mark of the player to move on a copy of the viewed board
        2. drops every snapshot after the viewed one (playing after going back in time overwrites the old future)
        3. appends the new snapshot and moves the pointer onto it
        """
        rejection = self._rejection_reason(cell_index)
        if rejection is not None:
            logger.debug("Ignoring move on cell %r: %s", cell_index, rejection)
            return False

        mover = self.next_player
        new_board = self.current_board.place(cell_index, mover)

        del self.history[self.current_move + 1 :]
        self.history.append(Snapshot(new_board, cell_index))
        self.current_move = len(self.history) - 1
        logger.debug(
            "%s played cell %d (move #%d)", mover, cell_index, self.current_move
        )

        outcome = self.outcome
        if outcome.status == Status.WIN:
            logger.info("%s wins on line %s", outcome.winner, outcome.line)
        elif outcome.status == Status.DRAW:
            logger.info("Game ended in a draw")
        return True

    def jump_to(self, move: int) -> None:
        """Move the view pointer. History is left as is."""
        if not (0 <= move < len(self.history)):
            raise InvalidNavigationError(
                f"Cannot jump to move {move}. History holds moves 0 - {len(self.history) - 1}."
            )
        self.current_move = move

    def toggle_order(self) -> None:
        self.ascending = not self.ascending

    # --- DERIVED STATE ---
    @property
    def current_board(self) -> Board:
        return self.history[self.current_move].board

    @property
    def x_is_next(self) -> bool:
        return self.current_move % 2 == 0

    @property
    def next_player(self) -> Mark:
        return mark_to_move(self.current_move)

    @property
    def outcome(self) -> Outcome:
        return evaluate(self.current_board)

    @property
    def winning_line(self) -> tuple[int, ...]:
        return self.outcome.winning_line

    @property
    def status_text(self) -> str:
        outcome = self.outcome
        if outcome.status == Status.WIN:
            return f"Winner: {outcome.winner}"
        if outcome.status == Status.DRAW:
            return "Draw"
        return f"Next player: {self.next_player}"

    @property
    def move_list(self) -> list[MoveDescriptor]:
        """One descriptor per snapshot, in the display order chosen by the player."""
        moves = [
            MoveDescriptor(
                move=move,
                square=snapshot.square,
                is_current=move == self.current_move,
            )
            for move, snapshot in enumerate(self.history)
        ]
        return moves if self.ascending else moves[::-1]

    @property
    def order_label(self) -> str:
        return f"Sort list {'Ascending' if self.ascending else 'Descending'}"

    # -- PRIVATE HELPERS ---
    def _rejection_reason(self, cell_index: int) -> Optional[str]:
        """Why the move cannot be played on the viewed board (None if it can)."""
        if isinstance(cell_index, bool) or not isinstance(cell_index, int):
            return "not a cell index"
        if not (0 <= cell_index < BOARD_SIZE):
            return "out of range"
        if not self.current_board.is_empty_cell(cell_index):
            return "cell is occupied"
        if self.outcome.is_decided:
            return "game is already decided"
        return None


def _validate_history(history: list[Snapshot]) -> None:
    """
    Every snapshot after the first must follow from its predecessor by a single legal move
    ----

    * the first snapshot is the empty board, without a move
    * exactly one cell changed, from empty to the mark of the player to move, at the recorded index
    * no move was played on a board that was already decided
    """
    first = history[0]
    if first.cell_index is not None or first.board != Board.empty():
        raise GameStateError("History must start with the empty board.")

    for move in range(1, len(history)):
        previous, snapshot = history[move - 1], history[move]
        cell_index = snapshot.cell_index

        if not isinstance(cell_index, int) or not (0 <= cell_index < BOARD_SIZE):
            raise GameStateError(f"Move #{move} has no valid cell index: {cell_index!r}")

        if evaluate(previous.board).is_decided:
            raise GameStateError(f"Move #{move} was played after the game was decided.")

        changed = previous.board.differing_cells(snapshot.board)
        expected_mark = mark_to_move(move - 1)
        if (
            changed != [cell_index]
            or not previous.board.is_empty_cell(cell_index)
            or snapshot.board.cell(cell_index) != expected_mark
        ):
            raise GameStateError(
                f"Move #{move} does not follow from move #{move - 1} by {expected_mark} playing cell {cell_index}."
            )
