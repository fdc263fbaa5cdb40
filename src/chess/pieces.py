"""Defines the types of chess pieces"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self


class PieceType(Enum):
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()

    @property
    def opponent(self) -> Color:
        return Color.BLACK if self == Color.WHITE else Color.WHITE


AVAILABLE_COLOR_NAMES = [color.name for color in Color]

FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}


PIECE_POINTS: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 0,
}

# Glyphs used to draw a board as text
PIECE_SYMBOLS: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.KING): "\u2654",
    (Color.WHITE, PieceType.QUEEN): "\u2655",
    (Color.WHITE, PieceType.ROOK): "\u2656",
    (Color.WHITE, PieceType.BISHOP): "\u2657",
    (Color.WHITE, PieceType.KNIGHT): "\u2658",
    (Color.WHITE, PieceType.PAWN): "\u2659",
    (Color.BLACK, PieceType.KING): "\u265a",
    (Color.BLACK, PieceType.QUEEN): "\u265b",
    (Color.BLACK, PieceType.ROOK): "\u265c",
    (Color.BLACK, PieceType.BISHOP): "\u265d",
    (Color.BLACK, PieceType.KNIGHT): "\u265e",
    (Color.BLACK, PieceType.PAWN): "\u265f",
}


@dataclass(frozen=True)
class Piece:
    """Pieces are values: two white pawns are the same piece, wherever they stand."""

    type: PieceType
    color: Color

    @property
    def points(self) -> int:
        return PIECE_POINTS[self.type]

    @property
    def symbol(self) -> str:
        return PIECE_SYMBOLS[(self.color, self.type)]

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        piece_type = FEN_TO_PIECE[character.lower()]
        return cls(piece_type, color)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.type].upper()
            if self.color == Color.WHITE
            else PIECE_TO_FEN[self.type].lower()
        )

    def promoted_to(self, new_type: PieceType) -> Piece:
        """A new piece of the same color (the original stays untouched)"""
        return Piece(new_type, self.color)
