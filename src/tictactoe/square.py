"""
A square (cell) on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Board is always 3x3. Kept as a constant so the row/column arithmetic reads clearly
BOARD_DIMENSIONS = (3, 3)
BOARD_SIZE = BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]


@dataclass(frozen=True)
class Square:
    row: int
    col: int

    @classmethod
    def from_index(cls, index: int) -> Square:
        """Row-major index: 0 - 8 get converted to (0,0) - (2,2)"""
        return cls(index // BOARD_DIMENSIONS[1], index % BOARD_DIMENSIONS[1])
