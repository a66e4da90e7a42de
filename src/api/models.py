"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Status
from src.tour.square import from_algebraic, is_valid_square

Square = int


def parse_square(value: int | str) -> Square:
    """Squares can be sent as an index (0-63) or in algebraic notation ('a1'-'h8')."""
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.isdigit():
            value = int(stripped)
        else:
            try:
                return from_algebraic(stripped)
            except ValueError as exc:
                raise InvalidRequestError(
                    f"Cannot interpret {value!r} as a valid square name."
                ) from exc

    if not is_valid_square(value):
        raise InvalidRequestError(f"Square {value!r} is not on the board (0-63).")
    return value


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    position: Optional[int | str] = None

    @field_validator("position")
    @classmethod
    def validate_position(cls, value: Optional[int | str]) -> Optional[Square]:
        if value is None:
            return value
        return parse_square(value)


class RestartGameRequest(BaseModel):
    game_id: UUID
    position: Optional[int | str] = None

    @field_validator("position")
    @classmethod
    def validate_position(cls, value: Optional[int | str]) -> Optional[Square]:
        if value is None:
            return value
        return parse_square(value)


class MoveRequest(BaseModel):
    game_id: UUID
    target: int | str

    @field_validator("target")
    @classmethod
    def validate_target(cls, value: int | str) -> Square:
        return parse_square(value)


class UndoRequest(BaseModel):
    game_id: UUID


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    started: bool
    position: Optional[Square]
    history: list[Square]
    legal_moves: list[Square]
    status: Status
    changed: bool = True
