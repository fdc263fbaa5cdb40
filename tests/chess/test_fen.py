"""Unit tests for /src/chess/fen.py"""

import pytest

from src.chess.fen import (
    EMPTY_POSITION,
    STARTING_POSITION,
    is_valid_position,
    is_valid_square,
)


@pytest.mark.parametrize(
    "position",
    [
        STARTING_POSITION,
        EMPTY_POSITION,
        "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR",
        "2kr1b1r/p1p1pppp/2p2n2/3q2B1/6Q1/2NP4/PPP2PPP/R4RK1",
    ],
)
def test_valid_positions(position: str) -> None:
    assert is_valid_position(position)


@pytest.mark.parametrize(
    "position",
    [
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP",  # only 7 rows
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR/8",  # 9 rows
        "rnbqkbnr/ppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR",  # row with 7 squares
        "rnbqkbnr/pppppppp/9/8/8/8/PPPPPPPP/RNBQKBNR",  # row with 9 squares
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNX",  # unknown piece
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",  # full FEN, not just the placement
    ],
)
def test_invalid_positions(position: str) -> None:
    assert not is_valid_position(position)


@pytest.mark.parametrize("square", ["a1", "h8", "e4", "d5"])
def test_valid_squares(square: str) -> None:
    assert is_valid_square(square)


@pytest.mark.parametrize("square", ["i1", "a9", "a0", "e", "e44", "4e", ""])
def test_invalid_squares(square: str) -> None:
    assert not is_valid_square(square)
