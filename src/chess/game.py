"""
The Game state is the entrypoint into the domain layer for the service layer.

A GameState is never changed in place: playing a move (or resetting the game) returns a new GameState.
The service layer stores whichever state is current.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Self

from src.chess.board import Board
from src.chess.executor import apply_move
from src.chess.fen import is_valid_square
from src.chess.pieces import AVAILABLE_COLOR_NAMES, Color, Piece
from src.chess.rules import GameStatus, Status, evaluate_status, legal_moves
from src.chess.square import Square
from src.core.exceptions import GameStateError
from src.core.models import GameModel

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveHistoryEntry:
    from_square: Square
    to_square: Square
    piece: Piece

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        """<piece FEN letter><from><to>, ex. 'Pe2e4'"""
        piece = Piece.from_fen(notation[0])
        from_square = Square.from_algebraic(notation[1:3])
        to_square = Square.from_algebraic(notation[3:5])
        return cls(from_square, to_square, piece)

    def to_notation(self) -> str:
        return f"{self.piece.to_fen()}{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}"

    def describe(self) -> str:
        """How the move log shows it: 'e2 → e4'"""
        return f"{self.from_square.to_algebraic()} → {self.to_square.to_algebraic()}"


@dataclass(frozen=True)
class CapturedPieces:
    """The pieces each color has taken from its opponent, in the order they were taken."""

    white: tuple[Piece, ...] = ()
    black: tuple[Piece, ...] = ()

    def by(self, color: Color) -> tuple[Piece, ...]:
        return self.white if color == Color.WHITE else self.black

    def with_capture(self, color: Color, piece: Optional[Piece]) -> CapturedPieces:
        if piece is None:
            return self
        if color == Color.WHITE:
            return replace(self, white=self.white + (piece,))
        return replace(self, black=self.black + (piece,))


@dataclass(frozen=True)
class Selection:
    """
    The square the human player has clicked on, plus where that piece could go.
    Transient presentation state: it is not part of the GameState.
    """

    square: Optional[Square] = None
    destinations: tuple[Square, ...] = ()


@dataclass(frozen=True)
class GameState:
    board: Board = field(default_factory=Board.starting_position)
    active_color: Color = Color.WHITE
    status: GameStatus = field(default_factory=GameStatus.playing)
    history: tuple[MoveHistoryEntry, ...] = ()
    captured: CapturedPieces = field(default_factory=CapturedPieces)

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a GameState from the information the Service layer actually has"""

        # Validation
        status_name = model.status.upper()
        if status_name not in Status.__members__:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join([status.name.lower() for status in Status])}"
            )
        _assert_color_name(model.active_color)
        if model.winner is not None:
            _assert_color_name(model.winner)

        # create the GameState
        board = Board.from_fen(model.board_fen)
        winner = Color[model.winner.upper()] if model.winner else None
        history = tuple(
            MoveHistoryEntry.from_notation(entry) for entry in model.move_history
        )
        captured = CapturedPieces(
            white=tuple(Piece.from_fen(c) for c in model.captured.get("white", "")),
            black=tuple(Piece.from_fen(c) for c in model.captured.get("black", "")),
        )
        return cls(
            board=board,
            active_color=Color[model.active_color.upper()],
            status=GameStatus(Status[status_name], winner),
            history=history,
            captured=captured,
        )

    def to_model(self, human_color: Color, selection: Selection) -> GameModel:
        """Encode back into a format the Service layer uses (together with the session info the service keeps)"""
        return GameModel(
            board_fen=self.board.to_fen(),
            active_color=self.active_color.name.lower(),
            status=self.status.status.name.lower(),
            winner=self.status.winner.name.lower() if self.status.winner else None,
            human_color=human_color.name.lower(),
            move_history=[entry.to_notation() for entry in self.history],
            captured={
                color.name.lower(): "".join(p.to_fen() for p in self.captured.by(color))
                for color in Color
            },
            selected_square=(
                selection.square.to_algebraic() if selection.square else None
            ),
        )


def _assert_color_name(name: str) -> None:
    if name.upper() not in AVAILABLE_COLOR_NAMES:
        raise GameStateError(
            f"Invalid color: {name!r}. Pick one from {','.join([c.lower() for c in AVAILABLE_COLOR_NAMES])}"
        )


def selection_from_model(state: GameState, model: GameModel) -> Selection:
    """Recompute the destinations of a stored selection (they are not persisted)"""
    if model.selected_square is None or not is_valid_square(model.selected_square):
        return Selection()
    square = Square.from_algebraic(model.selected_square)
    return Selection(square, tuple(legal_destinations(state, square)))


# --- DOMAIN LAYER API CALLED BY SERVICE ---
def new_game(
    board: Optional[Board] = None, color_to_move: Color = Color.WHITE
) -> GameState:
    """Standard starting position, white to move. A custom position is checked right away (it could already be over)."""
    if board is None:
        return GameState()
    return GameState(
        board=board,
        active_color=color_to_move,
        status=evaluate_status(board, color_to_move),
    )


def reset_game(state: GameState) -> GameState:
    """Throw away everything about the current game. All fields get reinitialized at once."""
    _log.debug("Resetting game after %d moves", len(state.history))
    return new_game()


def legal_destinations(state: GameState, square: Square) -> list[Square]:
    """Where the piece on the square can go. Only pieces of the color to move have any destinations."""
    if state.status.is_over or not square.is_within_bounds():
        return []
    piece = state.board.piece(square)
    if piece is None or piece.color != state.active_color:
        return []
    return legal_moves(state.board, square)


def play_move(state: GameState, from_square: Square, to_square: Square) -> GameState:
    """
    Attempt to make a move
    -----

    An illegal attempt (no piece, wrong color, not a legal destination, game already over) is ignored: the same state comes back.

    1. update the board (capture + promotion handled by the executor)
    2. update the (history of) moves
    3. update the captured pieces of the player that moved
    4. update game status (checked for the opponent, who is about to move)
    5. still playing? It is now the opponent's turn.
    """
    if to_square not in legal_destinations(state, from_square):
        _log.debug(
            "Ignoring move %s -> %s", from_square.to_algebraic(), to_square.to_algebraic()
        )
        return state

    mover = state.active_color
    moving_piece = state.board.piece(from_square)
    executed = apply_move(state.board, from_square, to_square)

    entry = MoveHistoryEntry(from_square, to_square, moving_piece)
    status = evaluate_status(executed.board, mover.opponent)
    _log.debug(
        "%s played %s\n%s", mover.name.lower(), entry.describe(), executed.board.render()
    )
    if status.is_over:
        _log.info("Game over: %s", status)

    return GameState(
        board=executed.board,
        active_color=mover if status.is_over else mover.opponent,
        status=status,
        history=state.history + (entry,),
        captured=state.captured.with_capture(mover, executed.captured),
    )


def select_square(
    state: GameState, selection: Selection, square: Square
) -> tuple[GameState, Selection]:
    """
    The only input of the player: a click on a square.
    -----

    * nothing selected yet: clicking a piece of the color to move selects it (with its legal destinations)
    * something selected: clicking one of its destinations plays the move, clicking anything else does nothing

    The selection is cleared after the second click, whatever happened.
    """
    if selection.square is not None:
        if square in selection.destinations:
            state = play_move(state, selection.square, square)
        return state, Selection()

    if state.status.is_over or not square.is_within_bounds():
        return state, Selection()

    piece = state.board.piece(square)
    if piece is None or piece.color != state.active_color:
        return state, Selection()
    return state, Selection(square, tuple(legal_destinations(state, square)))
