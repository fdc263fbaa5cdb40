"""Unit tests for /src/chess/ai.py"""

from unittest.mock import Mock

import pytest

from src.chess.ai import (
    CAPTURE_WEIGHT,
    CHECK_BONUS,
    play_ai_move,
    score_move,
    score_moves,
    select_move,
)
from src.chess.board import Board
from src.chess.fen import EMPTY_POSITION
from src.chess.game import GameState, new_game
from src.chess.moves import Move
from src.chess.pieces import Color, Piece, PieceType
from src.chess.rules import GameStatus, all_legal_moves
from src.chess.square import Square


def sq(name: str) -> Square:
    return Square.from_algebraic(name)


def board_with(*placements: tuple[str, str]) -> Board:
    board = Board.from_fen(EMPTY_POSITION)
    for fen_char, name in placements:
        board = board.with_piece(sq(name), Piece.from_fen(fen_char))
    return board


def no_jitter() -> float:
    return 0.0


# -- SCORING ---
def test_quiet_move_scores_only_jitter() -> None:
    board = Board.starting_position()
    move = Move(sq("e7"), sq("e5"))
    assert score_move(board, move, no_jitter) == 0.0
    assert score_move(board, move, lambda: 0.5) == pytest.approx(5.0)


@pytest.mark.parametrize(
    "victim, value",
    [("P", 1), ("N", 3), ("B", 3), ("R", 5), ("Q", 9)],
)
def test_capture_scores_ten_times_piece_value(victim: str, value: int) -> None:
    # black rook takes on a1, kings far away so no check is involved
    board = board_with(("r", "a8"), (victim, "a1"), ("k", "g8"), ("K", "h6"))
    score = score_move(board, Move(sq("a8"), sq("a1")), no_jitter)
    assert score == CAPTURE_WEIGHT * value


def test_giving_check_scores_fifty() -> None:
    board = board_with(("r", "a8"), ("K", "e1"), ("k", "h8"))
    assert score_move(board, Move(sq("a8"), sq("a1")), no_jitter) == CHECK_BONUS
    assert score_move(board, Move(sq("a8"), sq("a2")), no_jitter) == 0


def test_capture_and_check_add_up() -> None:
    board = board_with(("r", "a8"), ("N", "a1"), ("K", "e1"), ("k", "h8"))
    assert score_move(board, Move(sq("a8"), sq("a1")), no_jitter) == 30 + 50


def test_score_moves_covers_all_legal_moves() -> None:
    board = Board.starting_position()
    random_source = Mock(return_value=0.25)
    scored = score_moves(board, Color.BLACK, random_source)
    assert [s.move for s in scored] == all_legal_moves(board, Color.BLACK)
    assert all(s.score == pytest.approx(2.5) for s in scored)
    assert random_source.call_count == 20


# -- SELECTION ---
def test_prefers_the_most_valuable_capture() -> None:
    """Black queen can take a pawn or a rook (no kings on the board, so no checks to consider)"""
    board = board_with(("q", "d5"), ("P", "d2"), ("R", "a5"))
    move = select_move(board, Color.BLACK, no_jitter)
    assert move == Move(sq("d5"), sq("a5"))


def test_prefers_check_over_small_capture() -> None:
    """Taking a pawn (10) loses against giving check (50): the rook swings over to the h-file"""
    board = board_with(("r", "b8"), ("P", "b2"), ("K", "h1"), ("k", "a6"))
    move = select_move(board, Color.BLACK, no_jitter)
    assert move == Move(sq("b8"), sq("h8"))


def test_tie_goes_to_the_first_move_found() -> None:
    """Without jitter every quiet move scores 0. The first one in enumeration order wins."""
    board = Board.starting_position()
    move = select_move(board, Color.BLACK, no_jitter)
    assert move == all_legal_moves(board, Color.BLACK)[0]
    assert move == Move(sq("b8"), sq("a6"))


def test_jitter_decides_between_quiet_moves() -> None:
    """Highest random draw wins: make the 3rd candidate draw the largest number"""
    board = Board.starting_position()
    draws = iter([0.1, 0.2, 0.9] + [0.0] * 17)
    move = select_move(board, Color.BLACK, lambda: next(draws))
    assert move == all_legal_moves(board, Color.BLACK)[2]


def test_capture_beats_any_jitter() -> None:
    """Jitter is at most just under 10, a pawn capture adds 10"""
    board = Board.from_fen("rnbqkbnr/ppp1pppp/8/3p4/4P3/8/PPPP1PPP/RNBQKBNR")
    candidates = all_legal_moves(board, Color.BLACK)
    capture = Move(sq("d5"), sq("e4"))
    assert capture in candidates

    move = select_move(board, Color.BLACK, lambda: 0.999)
    assert move == capture


def test_no_legal_moves_selects_nothing() -> None:
    board = Board.from_fen("k7/8/1QK5/8/8/8/8/8")
    assert select_move(board, Color.BLACK, no_jitter) is None


# -- PLAYING THE MOVE ---
def test_play_ai_move_updates_game_state() -> None:
    state = new_game()
    after_white = GameState(
        board=state.board.move_piece(sq("e2"), sq("e4")),
        active_color=Color.BLACK,
    )
    after_black = play_ai_move(after_white, Color.BLACK, no_jitter)

    assert after_black.active_color == Color.WHITE
    assert len(after_black.history) == 1
    assert after_black.history[0].piece.color == Color.BLACK
    assert after_black.board != after_white.board


def test_play_ai_move_records_capture() -> None:
    board = Board.from_fen("rnbqkbnr/ppp1pppp/8/3p4/4P3/8/PPPP1PPP/RNBQKBNR")
    state = GameState(board=board, active_color=Color.BLACK)
    after = play_ai_move(state, Color.BLACK, no_jitter)
    assert after.captured.black == (Piece(PieceType.PAWN, Color.WHITE),)
    assert after.captured.white == ()


def test_play_ai_move_not_its_turn() -> None:
    state = new_game()
    assert play_ai_move(state, Color.BLACK, no_jitter) is state


def test_play_ai_move_game_over() -> None:
    state = GameState(
        board=Board.from_fen("k7/8/1QK5/8/8/8/8/8"),
        active_color=Color.BLACK,
        status=GameStatus.stalemate(),
    )
    assert play_ai_move(state, Color.BLACK, no_jitter) is state


def test_play_ai_move_without_legal_moves() -> None:
    """Should not happen in a real game (already caught as stalemate), but must not fail"""
    state = GameState(board=Board.from_fen("k7/8/1QK5/8/8/8/8/8"), active_color=Color.BLACK)
    assert play_ai_move(state, Color.BLACK, no_jitter) is state
