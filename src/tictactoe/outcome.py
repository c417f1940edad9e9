"""
Classifies a board: still in progress, won by one of the players (and on which line), or a draw.

Pure functions only; the Game calls evaluate() whenever it needs to know the outcome instead of storing it.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.shared_types import Mark, Status
from src.tictactoe.board import Board

Line = tuple[int, int, int]

# Scanned in this order: the first complete line wins the tie-break.
WINNING_LINES: tuple[Line, ...] = (
    # rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # diagonals
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass(frozen=True)
class Outcome:
    status: Status
    winner: Optional[Mark] = None
    line: Optional[Line] = None

    @property
    def is_decided(self) -> bool:
        return self.status != Status.IN_PROGRESS

    @property
    def winning_line(self) -> tuple[int, ...]:
        """Cells to highlight. Empty unless somebody won."""
        return self.line if self.line is not None else ()


IN_PROGRESS = Outcome(Status.IN_PROGRESS)
DRAW = Outcome(Status.DRAW)


def evaluate(board: Board) -> Outcome:
    for line in WINNING_LINES:
        winner = _completed_by(board, line)
        if winner is not None:
            return Outcome(Status.WIN, winner=winner, line=line)

    return DRAW if board.is_full() else IN_PROGRESS


def _completed_by(board: Board, line: Line) -> Optional[Mark]:
    """The mark filling all three cells of the line, if any"""
    a, b, c = (board.cell(index) for index in line)
    if a is not None and a == b == c:
        return a
    return None
