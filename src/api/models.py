"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import ClickOutcome, Color

PieceGlyph = str


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    """
    A click on a square.

    NOTE: Coordinates outside the board are NOT rejected here. The game treats them as a rejected move instead.
    """

    row: int
    col: int

    @field_validator(*["row", "col"], mode="before")
    @classmethod
    def validate_coordinate(cls, value: object) -> object:
        # pydantic would happily turn True into 1, but a boolean is never a coordinate
        if isinstance(value, bool):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a row or column index."
            )
        return value


# --- RESPONSE MODELS ---
class SquareResponse(BaseModel):
    row: int
    col: int
    name: str


class GameResponse(BaseModel):
    board: list[list[PieceGlyph]]
    position: str
    current_player: Color
    selected_square: Optional[SquareResponse]
    legal_destinations: list[SquareResponse]
    last_outcome: Optional[ClickOutcome] = None


class HealthResponse(BaseModel):
    status: str
