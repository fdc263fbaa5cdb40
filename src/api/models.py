"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.chess.fen import is_valid_position, is_valid_square
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PieceType, Status


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    """The human plays `human_color`, the computer the other color. White always moves first unless stated otherwise."""

    human_color: Color = Color.WHITE
    starting_fen: Optional[str] = None
    color_to_move: Color = Color.WHITE

    @field_validator("starting_fen")
    @classmethod
    def validate_starting_fen(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        value = value.strip()
        if not is_valid_position(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as the piece placement part of a FEN string."
            )
        return value


class SelectSquareRequest(BaseModel):
    game_id: UUID
    square: str

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not is_valid_square(value):
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name."
            )
        return value


class AIMoveRequest(BaseModel):
    game_id: UUID


class GetGameRequest(BaseModel):
    game_id: UUID


class ResetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class MoveHistoryItem(BaseModel):
    color: Color
    piece: PieceType
    from_square: str
    to_square: str
    description: str


class CapturedPiecesResponse(BaseModel):
    """Pieces taken BY each color"""

    white: list[PieceType]
    black: list[PieceType]


class GameResponse(BaseModel):
    game_id: UUID
    board_fen: str
    active_color: Color
    human_color: Color
    status: Status
    winner: Optional[Color]
    move_history: list[MoveHistoryItem]
    captured: CapturedPiecesResponse
    selected_square: Optional[str]
    candidate_squares: list[str]
    ai_to_move: bool
