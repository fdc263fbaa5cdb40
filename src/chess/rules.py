"""
Rules that need more than the movement geometry of a single piece:

* is a king in check?
* which moves are legal (do not leave your own king in check)?
* has the game ended (checkmate / stalemate)?

Hypothetical moves are played on throwaway copies of the board. The board passed in is never changed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Self

from src.chess.board import Board
from src.chess.moves import Move, pseudo_legal_moves
from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square


class Status(Enum):
    PLAYING = auto()
    CHECKMATE = auto()
    STALEMATE = auto()


@dataclass(frozen=True)
class GameStatus:
    """Playing, Checkmate(winner) or Stalemate. Only a checkmate has a winner."""

    status: Status
    winner: Optional[Color] = None

    @classmethod
    def playing(cls) -> Self:
        return cls(Status.PLAYING)

    @classmethod
    def checkmate(cls, winner: Color) -> Self:
        return cls(Status.CHECKMATE, winner)

    @classmethod
    def stalemate(cls) -> Self:
        return cls(Status.STALEMATE)

    @property
    def is_over(self) -> bool:
        return self.status != Status.PLAYING


# --- CHECK DETECTION ---
def is_in_check(board: Board, color: Color) -> bool:
    """
    Is the king of this color attacked by any of the opponent's pieces?
    ----

    Does not care whose turn it is.
    A board without a king of this color is never in check.
    """
    king_square = board.locate(Piece(PieceType.KING, color))
    if king_square is None:
        return False

    return any(
        king_square in pseudo_legal_moves(board, square)
        for square in board.locate_color(color.opponent)
    )


# --- LEGAL MOVES ---
def leaves_king_in_check(board: Board, from_square: Square, to_square: Square) -> bool:
    """
    plan:
    1. Copy the board
    2. make the candidate move (no promotion: it does not change whether your own king is attacked)
    3. determine if the mover's king is in check on the new board
    """
    color = board.piece(from_square).color
    hypothetical = board.move_piece(from_square, to_square)
    return is_in_check(hypothetical, color)


def legal_moves(board: Board, square: Square) -> list[Square]:
    """The pseudo-legal destinations that do not put (or leave) your own king in check"""
    return [
        target
        for target in pseudo_legal_moves(board, square)
        if not leaves_king_in_check(board, square, target)
    ]


def all_legal_moves(board: Board, color: Color) -> list[Move]:
    """Every legal move of this color: ordered by starting square (row, then column), then destination."""
    return [
        Move(from_square=square, to_square=target)
        for square in board.locate_color(color)
        for target in legal_moves(board, square)
    ]


def has_any_legal_move(board: Board, color: Color) -> bool:
    return any(legal_moves(board, square) for square in board.locate_color(color))


# --- CHECKS FOR ENDING THE GAME ---
def is_checkmate(board: Board, color: Color) -> bool:
    return is_in_check(board, color) and not has_any_legal_move(board, color)


def is_stalemate(board: Board, color: Color) -> bool:
    return not is_in_check(board, color) and not has_any_legal_move(board, color)


def evaluate_status(board: Board, color_to_move: Color) -> GameStatus:
    """
    Evaluated after a move, for the color that is about to move next.

    NOTE a checkmate is always won by the opponent of the color to move (the player that just made the move).
    """
    if is_checkmate(board, color_to_move):
        return GameStatus.checkmate(winner=color_to_move.opponent)
    if is_stalemate(board, color_to_move):
        return GameStatus.stalemate()
    return GameStatus.playing()
