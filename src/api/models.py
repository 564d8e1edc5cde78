"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.chess.square import BOARD_SIZE
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, GameStatus


def _validate_coordinate(value: int) -> int:
    if not 0 <= value < BOARD_SIZE:
        raise InvalidRequestError(
            f"Cannot interpret {value!r} as a row/column. Must lie in [0, {BOARD_SIZE})."
        )
    return value


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    from_row: int
    from_col: int
    to_row: int
    to_col: int

    @field_validator(*["from_row", "from_col", "to_row", "to_col"])
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        return _validate_coordinate(value)


class LegalMovesRequest(BaseModel):
    row: int
    col: int

    @field_validator(*["row", "col"])
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        return _validate_coordinate(value)


# --- RESPONSE MODELS ---
class MoveModel(BaseModel):
    from_row: int
    from_col: int
    to_row: int
    to_col: int


class GameResponse(BaseModel):
    board: list[list[str]]
    color_to_move: Color
    status: GameStatus
    status_color: Optional[Color] = None
    last_move: Optional[MoveModel] = None
    automated_move: Optional[MoveModel] = None
    # the automated side was to move but had no move at all
    no_legal_move: bool = False


class LegalMovesResponse(BaseModel):
    row: int
    col: int
    moves: list[MoveModel]
