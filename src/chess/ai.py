"""
The computer opponent.

No search tree: every legal move gets a score, and the best one is played.

    score = jitter in [0, 10) + 10 x value of the captured piece + 50 if the move gives check

The jitter is there to give the opponent some personality (it does not always play the same move).
"""

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional

from src.chess.board import Board
from src.chess.game import GameState, play_move
from src.chess.moves import Move
from src.chess.pieces import Color
from src.chess.rules import all_legal_moves, is_in_check

_log = logging.getLogger(__name__)

# Returns a float in [0, 1). Swap it out for a fixed value in tests.
RandomSource = Callable[[], float]

JITTER_RANGE = 10
CAPTURE_WEIGHT = 10
CHECK_BONUS = 50


@dataclass(frozen=True)
class ScoredMove:
    move: Move
    score: float


def score_move(board: Board, move: Move, random_source: RandomSource) -> float:
    """Score a single (legal) move. The move is tried out on a copy of the board."""
    mover = board.piece(move.from_square).color
    captured = board.piece(move.to_square)
    hypothetical = board.move_piece(move.from_square, move.to_square)

    score = random_source() * JITTER_RANGE
    if captured is not None:
        score += CAPTURE_WEIGHT * captured.points
    if is_in_check(hypothetical, mover.opponent):
        score += CHECK_BONUS
    return score


def score_moves(
    board: Board, color: Color, random_source: RandomSource = random.random
) -> list[ScoredMove]:
    return [
        ScoredMove(move, score_move(board, move, random_source))
        for move in all_legal_moves(board, color)
    ]


def select_move(
    board: Board, color: Color, random_source: RandomSource = random.random
) -> Optional[Move]:
    """
    Pick the highest scoring move. On a tie, the move found first wins.
    Returns None if there is no legal move at all.
    """
    best: Optional[ScoredMove] = None
    for scored in score_moves(board, color, random_source):
        if best is None or scored.score > best.score:
            best = scored
    return best.move if best else None


def play_ai_move(
    state: GameState, color: Color, random_source: RandomSource = random.random
) -> GameState:
    """Let the computer play a move for `color`. Nothing happens if it is not its turn or the game has ended."""
    if state.status.is_over or state.active_color != color:
        return state

    move = select_move(state.board, color, random_source)
    if move is None:
        # should already have been picked up as checkmate / stalemate after the previous move
        _log.warning("No legal move found for %s", color.name.lower())
        return state

    _log.debug("AI (%s) plays %s", color.name.lower(), move.to_uci())
    return play_move(state, move.from_square, move.to_square)
