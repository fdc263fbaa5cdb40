"""Play a (validated) move on the board: returns the new board, plus what was captured."""

from dataclasses import dataclass
from typing import Optional

from src.chess.board import Board
from src.chess.moves import Move, is_promotion_move
from src.chess.pieces import Piece, PieceType
from src.chess.square import Square


@dataclass(frozen=True)
class ExecutedMove:
    board: Board
    move: Move

    @property
    def captured(self) -> Optional[Piece]:
        return self.move.captured


def apply_move(board: Board, from_square: Square, to_square: Square) -> ExecutedMove:
    """
    Board update for a single move
    ---

    1. Whatever stands on the destination is captured (can be nothing)
    2. the moving piece replaces it, the starting square is emptied
    3. a pawn reaching the first/final row is promoted to a queen (no other choice)

    NOTE this does not check legality. Callers should only pass legal moves (see rules.legal_moves).
    """
    moving_piece = board.piece(from_square)
    captured_piece = board.piece(to_square)
    new_board = board.move_piece(from_square, to_square)

    promotion = moving_piece is not None and is_promotion_move(moving_piece, to_square)
    if promotion:
        new_board = board.without_piece(from_square).with_piece(
            to_square, moving_piece.promoted_to(PieceType.QUEEN)
        )

    move = Move(
        from_square=from_square,
        to_square=to_square,
        captured=captured_piece,
        is_promotion=promotion,
    )
    return ExecutedMove(new_board, move)
