"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the pseudo-legal destinations for each piece type.

Whether a move leaves your own king in check is decided later (see rules.py)
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece(self, square: Square) -> Optional[Piece]: ...
    def is_empty(self, square: Square) -> bool: ...


Vector = tuple[int, int]


@dataclass(frozen=True)
class Move:
    """basic definition of a move. Annotated with the capture / promotion once it has been played."""

    from_square: Square
    to_square: Square
    captured: Optional[Piece] = None
    is_promotion: bool = False

    def to_uci(self) -> str:
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}"


# White moves UP the board (towards row 0), black moves DOWN (towards row 7)
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
PROMOTION_ROWS: tuple[int, int] = (0, 7)

DIAGONALS: list[Vector] = [(1, 1), (-1, 1), (1, -1), (-1, -1)]
STRAIGHTS: list[Vector] = [(1, 0), (-1, 0), (0, 1), (0, -1)]
KNIGHT_DELTAS: list[Vector] = [
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
]
KING_DELTAS: list[Vector] = DIAGONALS + STRAIGHTS


# --- MOVEMENT RULES ---
def raycasting_move(
    square: Square, board: Board, directions: list[Vector]
) -> list[Square]:
    """
    Raycasting algorithm
    -----

    The main trick we use to check the 'line of sight of a piece'.
    We define move directions and move along them until we hit another piece or
    the edge of the board.

    Every square found this way has a clear path from the starting square.
    """
    player_color = board.piece(square).color

    targets: list[Square] = []
    for d_row, d_col in directions:
        target_square = square
        while True:
            target_square = target_square.offset(d_row, d_col)
            if not target_square.is_within_bounds():
                break

            if not board.is_empty(target_square):
                # only the first occupied square counts, and only if it is the opponent's: then it can be captured.
                if board.piece(target_square).color != player_color:
                    targets.append(target_square)
                break

            targets.append(target_square)
    return targets


def single_step_move(
    square: Square, board: Board, deltas: list[Vector]
) -> list[Square]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that just jump to a square"""
    player_color = board.piece(square).color
    targets: list[Square] = []
    for d_row, d_col in deltas:
        target_square = square.offset(d_row, d_col)
        if not target_square.is_within_bounds():
            continue

        occupant = board.piece(target_square)
        if occupant is None or occupant.color != player_color:
            targets.append(target_square)

    return targets


def candidate_pawn_moves(square: Square, board: Board) -> list[Square]:
    """
    A pawn:
    - moves by a single square forward, onto an empty square.
    - can move by two from its home row, if both squares in front of it are empty
    - takes diagonally (and only moves diagonally when taking)

    NOTE: No en passant in this game.
    """
    color = board.piece(square).color
    forward = PAWN_DIRECTION[color]
    targets: list[Square] = []

    one_step = square.offset(forward, 0)
    if one_step.is_within_bounds() and board.is_empty(one_step):
        targets.append(one_step)
        two_steps = square.offset(2 * forward, 0)
        if square.row == PAWN_HOME_ROW[color] and board.is_empty(two_steps):
            targets.append(two_steps)

    for d_col in (-1, 1):
        target_square = square.offset(forward, d_col)
        if not target_square.is_within_bounds():
            continue
        occupant = board.piece(target_square)
        if occupant is not None and occupant.color != color:
            targets.append(target_square)
    return targets


def candidate_knight_moves(square: Square, board: Board) -> list[Square]:
    """Knights always move such that |delta_row| + |delta_col| = 3 (and not in a straight line)"""
    return single_step_move(square, board, KNIGHT_DELTAS)


def candidate_bishop_moves(square: Square, board: Board) -> list[Square]:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    return raycasting_move(square, board, DIAGONALS)


def candidate_rook_moves(square: Square, board: Board) -> list[Square]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(square, board, STRAIGHTS)


def candidate_queen_moves(square: Square, board: Board) -> list[Square]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return candidate_bishop_moves(square, board) + candidate_rook_moves(square, board)


def candidate_king_moves(square: Square, board: Board) -> list[Square]:
    """The king can move by a single square at the time. No castling."""
    return single_step_move(square, board, KING_DELTAS)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Square, Board], list[Square]]
MOVEMENT_RULES: dict[PieceType, CandidateMovesFn] = {
    PieceType.PAWN: candidate_pawn_moves,
    PieceType.KNIGHT: candidate_knight_moves,
    PieceType.BISHOP: candidate_bishop_moves,
    PieceType.ROOK: candidate_rook_moves,
    PieceType.QUEEN: candidate_queen_moves,
    PieceType.KING: candidate_king_moves,
}


def pseudo_legal_moves(board: Board, square: Square) -> list[Square]:
    """
    Destinations the piece on the square could move to, according to its movement rule.
    Ignores whether this leaves your own king in check.

    Sorted by row, then column. An empty square has no moves.
    """
    piece = board.piece(square)
    if piece is None:
        return []
    movement_rule = MOVEMENT_RULES[piece.type]
    return sorted(set(movement_rule(square, board)))


def is_path_clear(board: Board, from_square: Square, to_square: Square) -> bool:
    """
    Are all squares strictly in between the two squares empty?

    Only meaningful for squares on a common rank, file or diagonal (anything else is trivially clear: there is nothing in between).
    """
    d_row = to_square.row - from_square.row
    d_col = to_square.col - from_square.col
    if not (d_row == 0 or d_col == 0 or abs(d_row) == abs(d_col)):
        return True

    step = ((d_row > 0) - (d_row < 0), (d_col > 0) - (d_col < 0))
    square = from_square.offset(*step)
    while square != to_square:
        if not board.is_empty(square):
            return False
        square = square.offset(*step)
    return True


def is_promotion_move(piece: Piece, to_square: Square) -> bool:
    """A pawn reaching the first or the final row"""
    return piece.type == PieceType.PAWN and to_square.row in PROMOTION_ROWS
