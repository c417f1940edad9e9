"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Mark, Status


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    ascending: Optional[bool] = None


class GetGameRequest(BaseModel):
    game_id: UUID


class PlayMoveRequest(BaseModel):
    """Any integer is accepted as cell index. The Game ignores moves it cannot play."""

    game_id: UUID
    cell_index: int


class JumpToRequest(BaseModel):
    game_id: UUID
    move: int

    @field_validator("move")
    @classmethod
    def validate_move(cls, value: int) -> int:
        if value < 0:
            raise InvalidRequestError(f"Cannot jump to a negative move: {value}")
        return value


class ToggleOrderRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class MoveEntry(BaseModel):
    move: int
    row: Optional[int]
    col: Optional[int]
    description: str
    is_current: bool


class GameResponse(BaseModel):
    game_id: UUID
    squares: list[Optional[Mark]]
    status: Status
    status_text: str
    winner: Optional[Mark]
    winning_line: list[int]
    x_is_next: bool
    current_move: int
    ascending: bool
    order_label: str
    moves: list[MoveEntry]
