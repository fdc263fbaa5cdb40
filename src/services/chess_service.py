"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
import random
from threading import Lock
from uuid import UUID

from src.api.models import (
    AIMoveRequest,
    CapturedPiecesResponse,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveHistoryItem,
    ResetGameRequest,
    SelectSquareRequest,
)
from src.chess.ai import RandomSource, play_ai_move
from src.chess.board import Board
from src.chess.game import (
    GameState,
    Selection,
    new_game,
    reset_game,
    select_square,
    selection_from_model,
)
from src.chess.pieces import Color
from src.chess.square import Square
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Color as ColorName
from src.core.shared_types import PieceType as PieceTypeName
from src.core.shared_types import Status as StatusName
from src.db.repository import GameRepository

_log = logging.getLogger(__name__)


class ChessService:
    """Orchestration of layers for a game of a human player against the computer."""

    def __init__(
        self, repository: GameRepository, random_source: RandomSource = random.random
    ) -> None:
        self.repo = repository
        self.random_source = random_source
        # games for which the computer is computing a move right now
        self._thinking: set[UUID] = set()
        self._thinking_lock = Lock()

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Human player requested a new game."""

        human_color = Color[request.human_color.name]
        if request.starting_fen is None:
            state = new_game()
        else:
            state = new_game(
                Board.from_fen(request.starting_fen),
                Color[request.color_to_move.name],
            )

        stored_game, game_id = self.repo.create_game(
            state.to_model(human_color, Selection())
        )
        _log.info("Created game %s (human plays %s)", game_id, request.human_color)
        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def select_square(self, request: SelectSquareRequest) -> GameResponse:
        """
        The human player clicked on a square.
        ----

        Ignored (selection cleared) while it is the computer's turn, or while the computer is still thinking.
        """
        stored_model = self._fetch_game(request.game_id)
        state = GameState.from_model(stored_model)
        human_color = Color[stored_model.human_color.upper()]
        selection = selection_from_model(state, stored_model)

        if state.active_color != human_color or request.game_id in self._thinking:
            new_state, new_selection = state, Selection()
        else:
            new_state, new_selection = select_square(
                state, selection, Square.from_algebraic(request.square)
            )

        after_click = new_state.to_model(human_color, new_selection)
        self.repo.update_game(request.game_id, after_click)
        return self._create_game_response(request.game_id, after_click)

    def ai_move(self, request: AIMoveRequest) -> GameResponse:
        """
        The computer plays its move ("compute best move now").
        ----

        The presentation layer decides when to call this (ex. after a short delay). A request that arrives while a
        previous one for the same game is still being computed does nothing, and so does a request on the human's turn.
        """
        with self._thinking_lock:
            already_thinking = request.game_id in self._thinking
            self._thinking.add(request.game_id)
        if already_thinking:
            _log.debug("Already thinking about game %s", request.game_id)
            return self.get_game_state(GetGameRequest(game_id=request.game_id))

        try:
            model = self._fetch_game(request.game_id)
            state = GameState.from_model(model)
            human_color = Color[model.human_color.upper()]
            after_move = play_ai_move(state, human_color.opponent, self.random_source)
            # not the computer's turn (or game over): leave the stored game alone
            if after_move is not state:
                model = after_move.to_model(human_color, Selection())
                self.repo.update_game(request.game_id, model)
        finally:
            with self._thinking_lock:
                self._thinking.discard(request.game_id)

        return self._create_game_response(request.game_id, model)

    def reset_game(self, request: ResetGameRequest) -> GameResponse:
        """Start over from the standard starting position. The human keeps their color."""
        stored_model = self._fetch_game(request.game_id)
        human_color = Color[stored_model.human_color.upper()]
        state = reset_game(GameState.from_model(stored_model))
        model = state.to_model(human_color, Selection())
        self.repo.update_game(request.game_id, model)
        _log.info("Reset game %s", request.game_id)
        return self._create_game_response(request.game_id, model)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self.repo.delete_game(request.game_id)
        _log.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        state = GameState.from_model(model)
        selection = selection_from_model(state, model)
        human_color = Color[model.human_color.upper()]

        return GameResponse(
            game_id=game_id,
            board_fen=model.board_fen,
            active_color=ColorName(model.active_color),
            human_color=ColorName(model.human_color),
            status=StatusName(model.status),
            winner=ColorName(model.winner) if model.winner else None,
            move_history=[
                MoveHistoryItem(
                    color=ColorName(entry.piece.color.name.lower()),
                    piece=PieceTypeName(entry.piece.type.name.lower()),
                    from_square=entry.from_square.to_algebraic(),
                    to_square=entry.to_square.to_algebraic(),
                    description=entry.describe(),
                )
                for entry in state.history
            ],
            captured=CapturedPiecesResponse(
                white=[
                    PieceTypeName(p.type.name.lower())
                    for p in state.captured.by(Color.WHITE)
                ],
                black=[
                    PieceTypeName(p.type.name.lower())
                    for p in state.captured.by(Color.BLACK)
                ],
            ),
            selected_square=model.selected_square,
            candidate_squares=[sq.to_algebraic() for sq in selection.destinations],
            ai_to_move=(
                not state.status.is_over and state.active_color != human_color
            ),
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
