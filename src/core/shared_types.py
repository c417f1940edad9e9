"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    WIN = "win"
    DRAW = "draw"


# --- Empty cells are represented by None on the board, so Mark only holds the two players' symbols


class Mark(StrEnum):
    X = "X"
    O = "O"  # noqa: E741
