"""The Game board: an immutable value of 9 cells in row-major order."""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import IllegalMoveError, InvalidBoardError
from src.core.shared_types import Mark
from src.tictactoe.square import BOARD_SIZE

Cell = Optional[Mark]

EMPTY_CHARACTER = "."


@dataclass(frozen=True)
class Board:
    cells: tuple[Cell, ...]

    def __post_init__(self) -> None:
        # frozen: store the cells as a tuple whatever sequence was passed in
        object.__setattr__(self, "cells", tuple(self.cells))
        if len(self.cells) != BOARD_SIZE:
            raise InvalidBoardError(
                f"Board needs exactly {BOARD_SIZE} cells, got {len(self.cells)}."
            )
        if any(cell is not None and not isinstance(cell, Mark) for cell in self.cells):
            raise InvalidBoardError(f"Unknown cell value in {self.cells!r}")

    @classmethod
    def empty(cls) -> Self:
        return cls((None,) * BOARD_SIZE)

    @classmethod
    def from_string(cls, board_str: str) -> Self:
        """Construct a board from its compact notation.

        One character per cell, read in row-major order:
        * 'X' or 'O' for a played cell
        * '.' for an empty cell
        ex. "X.O.X...." means X on cells 0 and 4, O on cell 2.
        """
        cells: list[Cell] = []
        for character in board_str:
            if character == EMPTY_CHARACTER:
                cells.append(None)
            elif character in Mark.__members__:
                cells.append(Mark(character))
            else:
                raise InvalidBoardError(
                    f"Cannot interpret {character!r} in {board_str!r} as a cell."
                )
        return cls(tuple(cells))

    def to_string(self) -> str:
        return "".join(
            EMPTY_CHARACTER if cell is None else cell.value for cell in self.cells
        )

    def cell(self, index: int) -> Cell:
        return self.cells[index]

    def is_empty_cell(self, index: int) -> bool:
        return self.cells[index] is None

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def place(self, index: int, mark: Mark) -> Self:
        """Return a new board with the mark on the given cell. The original board is left untouched."""
        if not self.is_empty_cell(index):
            raise IllegalMoveError(f"Cell {index} is already occupied.")
        cells = list(self.cells)
        cells[index] = mark
        return type(self)(tuple(cells))

    def differing_cells(self, other: "Board") -> list[int]:
        """Indices of the cells that hold a different value on the other board."""
        return [
            index
            for index, (mine, theirs) in enumerate(zip(self.cells, other.cells))
            if mine != theirs
        ]
