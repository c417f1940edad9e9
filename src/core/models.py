"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the request/response layer (higher) and the domain/registry layers (lower) use the model defined here
(Decouples the data model specific to each layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass

# Type aliases to make GameModel easier to read
BoardString = str
CellIndex = int


@dataclass
class GameModel:
    """Transport-safe representation of a tic-tac-toe session used between Service, registry, and Game layers."""

    history_boards: list[BoardString]
    history_moves: list[CellIndex | None]
    current_move: int
    ascending: bool
