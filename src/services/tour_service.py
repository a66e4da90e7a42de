"""Orchestration of communication from API layer to the puzzle core and persistence layers (and the reverse direction)."""

import logging
from typing import Optional
from uuid import UUID

from src.api.models import (
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    NewGameRequest,
    RestartGameRequest,
    UndoRequest,
)
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.db.repository import GameRepository
from src.tour.game import (
    Command,
    Move,
    NewGame,
    NewGameAt,
    RandomSource,
    Undo,
    handle,
)
from src.tour.state import GameState

logger = logging.getLogger(__name__)


class TourService:
    """Orchestration of layers for the knight's tour puzzle."""

    def __init__(
        self, repository: GameRepository, rng: Optional[RandomSource] = None
    ) -> None:
        self.repo = repository
        self.rng = rng

    # -- API logic ---
    def create_new_game(self, request: NewGameRequest) -> GameResponse:
        """Player asked for a fresh puzzle."""

        # Start from the instructions screen and apply the "new game" command
        command = self._new_game_command(request.position)
        new_state = handle(GameState.unstarted(), command, rng=self.rng)

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(new_state.to_model())

        # Return a GameResponse
        return self._create_game_response(game_id, GameState.from_model(stored_game))

    def restart_game(self, request: RestartGameRequest) -> GameResponse:
        """Discard the visits of an existing game and start over (allowed in any state)."""
        command = self._new_game_command(request.position)
        return self._apply_command(request.game_id, command)

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Move attempt. Squares that are not a legal move leave the game as it is."""
        return self._apply_command(request.game_id, Move(request.target))

    def undo_move(self, request: UndoRequest) -> GameResponse:
        """Take back the last move, if there is one."""
        return self._apply_command(request.game_id, Undo())

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state, the client redraws purely from this."""
        state = self._fetch_state(request.game_id)
        return self._create_game_response(request.game_id, state)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        if self.repo.delete_game(request.game_id) is None:
            raise RepositoryError(f"Game with {request.game_id=} not found.")

    # -- Internal helpers --
    def _apply_command(self, game_id: UUID, command: Command) -> GameResponse:
        """Compute the next state, only write it back if it changed."""

        # Retrieve persisted state
        state = self._fetch_state(game_id)

        # Let the controller decide
        new_state = handle(state, command, rng=self.rng)
        changed = new_state != state

        if changed:
            self.repo.update_game(game_id, new_state.to_model())
        else:
            logger.info("Game %s: %s had no effect.", game_id, command)

        return self._create_game_response(game_id, new_state, changed=changed)

    def _new_game_command(self, position: Optional[int]) -> Command:
        return NewGame() if position is None else NewGameAt(position)

    def _create_game_response(
        self, game_id: UUID, state: GameState, changed: bool = True
    ) -> GameResponse:
        """Convert a GameState to a GameResponse (for game with given ID.)"""
        return GameResponse(
            game_id=game_id,
            started=state.started,
            position=state.position,
            history=list(state.history),
            legal_moves=list(state.legal_moves),
            status=state.status,
            changed=changed,
        )

    def _fetch_state(self, game_id: UUID) -> GameState:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model: GameModel | None = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return GameState.from_model(game_model)
