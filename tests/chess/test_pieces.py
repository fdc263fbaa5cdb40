"""Unit tests for /src/chess/pieces.py"""

from dataclasses import FrozenInstanceError

import pytest

from src.chess.pieces import (
    FEN_TO_PIECE,
    PIECE_POINTS,
    PIECE_TO_FEN,
    Color,
    Piece,
    PieceType,
)


@pytest.mark.parametrize("char", [char.upper() for char in FEN_TO_PIECE.keys()])
def test_creating_white_piece_from_fen(char: str) -> None:
    """Capital letters are used for white pieces"""
    piece = Piece.from_fen(char)
    assert piece.type == FEN_TO_PIECE[char.lower()]
    assert piece.color == Color.WHITE


@pytest.mark.parametrize("char", [char.lower() for char in FEN_TO_PIECE.keys()])
def test_creating_black_piece_from_fen(char: str) -> None:
    """Lower case letters are used for black pieces"""
    piece = Piece.from_fen(char)
    assert piece.type == FEN_TO_PIECE[char.lower()]
    assert piece.color == Color.BLACK


@pytest.mark.parametrize("piece_type", list(PieceType))
def test_pieces_to_fen(piece_type: PieceType) -> None:
    assert Piece(piece_type, Color.WHITE).to_fen() == PIECE_TO_FEN[piece_type].upper()
    assert Piece(piece_type, Color.BLACK).to_fen() == PIECE_TO_FEN[piece_type].lower()


@pytest.mark.parametrize(
    "piece_type, points",
    [
        (PieceType.PAWN, 1),
        (PieceType.KNIGHT, 3),
        (PieceType.BISHOP, 3),
        (PieceType.ROOK, 5),
        (PieceType.QUEEN, 9),
        (PieceType.KING, 0),
    ],
)
def test_piece_values(piece_type: PieceType, points: int) -> None:
    """The king is worth nothing: it can never actually be taken"""
    assert PIECE_POINTS[piece_type] == points
    assert Piece(piece_type, Color.BLACK).points == points


@pytest.mark.parametrize("color", list(Color))
def test_promotion_to_queen(color: Color) -> None:
    """Promotion creates a new piece. The pawn itself cannot be changed (it might be shared by other boards)"""
    pawn = Piece(PieceType.PAWN, color)
    queen = pawn.promoted_to(PieceType.QUEEN)
    assert queen == Piece(PieceType.QUEEN, color)
    assert pawn.type == PieceType.PAWN

    with pytest.raises(FrozenInstanceError):
        pawn.type = PieceType.QUEEN  # type: ignore[misc]


def test_opponent_color() -> None:
    assert Color.WHITE.opponent == Color.BLACK
    assert Color.BLACK.opponent == Color.WHITE


@pytest.mark.parametrize(
    "piece, symbol",
    [
        (Piece(PieceType.KING, Color.WHITE), "♔"),
        (Piece(PieceType.QUEEN, Color.BLACK), "♛"),
        (Piece(PieceType.PAWN, Color.BLACK), "♟"),
    ],
)
def test_piece_symbol(piece: Piece, symbol: str) -> None:
    assert piece.symbol == symbol
