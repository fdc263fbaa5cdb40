"""
Type definitions used across layers (transport-level names for API, service and db layers)
"""

from enum import StrEnum


class Status(StrEnum):
    PLAYING = "playing"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"


# --- NOTE The domain layer (src/chess) has its own Color / PieceType enums. These are their string versions for transport.
class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"
