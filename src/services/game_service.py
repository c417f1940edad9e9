"""Orchestration of communication from the presentation layer to business logic and the session registry (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    JumpToRequest,
    MoveEntry,
    PlayMoveRequest,
    ToggleOrderRequest,
)
from src.core.config import Settings, configure_logging
from src.core.exceptions import InvalidNavigationError, RepositoryError
from src.core.models import GameModel
from src.db.repository import GameRepository
from src.tictactoe.game import Game

logger = logging.getLogger(__name__)


class GameService:
    """Orchestration of layers for tic-tac-toe sessions. Every method handles exactly one interaction event."""

    def __init__(
        self, repository: GameRepository, settings: Settings | None = None
    ) -> None:
        self.repo = repository
        self.settings = settings if settings is not None else Settings.from_env()
        configure_logging(self.settings.log_level)

    # -- Interaction events ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a session on the empty board."""
        ascending = (
            request.ascending
            if request.ascending is not None
            else self.settings.default_ascending
        )
        new_game = Game.new_game(ascending=ascending)
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info("Created game %s", game_id)
        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve the current projection of the game (used to (re)render)."""
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def play_move(self, request: PlayMoveRequest) -> GameResponse:
        """Play a cell on the board currently viewed. Illegal moves leave the game untouched."""
        stored_model = self._fetch_game(request.game_id)
        game = Game.from_model(stored_model)

        if not game.play_move(request.cell_index):
            logger.info(
                "Game %s: ignored move on cell %r", request.game_id, request.cell_index
            )
            return self._create_game_response(request.game_id, stored_model)

        return self._store_and_respond(request.game_id, game)

    def jump_to(self, request: JumpToRequest) -> GameResponse:
        """Time travel: view an earlier (or later) snapshot of the history."""
        game = Game.from_model(self._fetch_game(request.game_id))
        try:
            game.jump_to(request.move)
        except InvalidNavigationError:
            logger.warning(
                "Game %s: rejected jump to move %r", request.game_id, request.move
            )
            raise
        return self._store_and_respond(request.game_id, game)

    def toggle_order(self, request: ToggleOrderRequest) -> GameResponse:
        """Flip the display order of the move list."""
        game = Game.from_model(self._fetch_game(request.game_id))
        game.toggle_order()
        return self._store_and_respond(request.game_id, game)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to end a session."""
        if self.repo.delete_game(request.game_id) is None:
            raise RepositoryError(f"Game with {request.game_id=} not found.")
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _store_and_respond(self, game_id: UUID, game: Game) -> GameResponse:
        updated = game.to_model()
        if self.repo.update_game(game_id, updated) is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return self._create_game_response(game_id, updated)

    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        game = Game.from_model(model)
        outcome = game.outcome
        return GameResponse(
            game_id=game_id,
            squares=list(game.current_board.cells),
            status=outcome.status,
            status_text=game.status_text,
            winner=outcome.winner,
            winning_line=list(outcome.winning_line),
            x_is_next=game.x_is_next,
            current_move=game.current_move,
            ascending=game.ascending,
            order_label=game.order_label,
            moves=[
                MoveEntry(
                    move=descriptor.move,
                    row=descriptor.square.row if descriptor.square is not None else None,
                    col=descriptor.square.col if descriptor.square is not None else None,
                    description=descriptor.description,
                    is_current=descriptor.is_current,
                )
                for descriptor in game.move_list
            ],
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
