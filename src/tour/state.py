"""
Representation of the puzzle at one moment: where the knight stands, where it has been and where it may go.

A GameState is never changed in place. The controller (src/tour/game.py) builds a new one for every accepted command.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Self

from src.core.exceptions import GameStateError
from src.core.models import GameModel
from src.core.shared_types import Status
from src.tour.moves import legal_moves as compute_legal_moves
from src.tour.square import NUM_SQUARES, Square, is_valid_square


def derive_status(started: bool, visited: int, num_legal_moves: int) -> Status:
    """Solved wins over unsolvable: a full board has no legal moves left either."""
    if not started:
        return Status.NOT_STARTED
    if visited == NUM_SQUARES:
        return Status.SOLVED
    if num_legal_moves == 0:
        return Status.UNSOLVABLE
    return Status.IN_PROGRESS


def validate_history(history: Iterable[Square]) -> tuple[Square, ...]:
    """A history must be non-empty, on the board and visit no square twice."""
    squares = tuple(history)
    if not squares:
        raise GameStateError("A started game needs at least one visited square.")
    if len(squares) > NUM_SQUARES:
        raise GameStateError(
            f"History visits {len(squares)} squares, the board only has {NUM_SQUARES}."
        )
    off_board = [square for square in squares if not is_valid_square(square)]
    if off_board:
        raise GameStateError(f"Squares not on the board: {off_board}")
    if len(set(squares)) != len(squares):
        raise GameStateError("History visits a square more than once.")
    return squares


@dataclass(frozen=True)
class GameState:
    position: Optional[Square]
    history: tuple[Square, ...]  # most recent first, history[0] == position
    legal_moves: tuple[Square, ...]  # ascending
    started: bool

    @classmethod
    def unstarted(cls) -> Self:
        """Before the first 'new game' command the board only shows the instructions."""
        return cls(position=None, history=(), legal_moves=(), started=False)

    @classmethod
    def from_history(cls, history: Iterable[Square]) -> Self:
        """Rebuild a started game from its visits (most recent first). Legal moves get recomputed."""
        squares = validate_history(history)
        position = squares[0]
        return cls(
            position=position,
            history=squares,
            legal_moves=compute_legal_moves(position, squares),
            started=True,
        )

    @property
    def status(self) -> Status:
        return derive_status(self.started, len(self.history), len(self.legal_moves))

    @property
    def visited_count(self) -> int:
        return len(self.history)

    @property
    def remaining_squares(self) -> int:
        return NUM_SQUARES - self.visited_count

    @property
    def tour(self) -> tuple[Square, ...]:
        """The visits in the order they were made (starting square first)."""
        return tuple(reversed(self.history))

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a GameState from the information the Service layer actually has"""

        # Validation
        if model.status not in [status.value for status in Status]:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join([status.value for status in Status])}"
            )

        if not model.started:
            if model.history:
                raise GameStateError("A game that has not started cannot have visits.")
            state = cls.unstarted()
        else:
            state = cls.from_history(model.history)
            if model.position != state.position:
                raise GameStateError(
                    f"Position {model.position} does not match the last visited square {state.position}."
                )

        # status is derived, a stored status that disagrees points at corrupted data
        if state.status != Status(model.status):
            raise GameStateError(
                f"Stored status {model.status!r} does not match the game ({state.status.value!r})."
            )
        return state

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            position=self.position,
            history=list(self.history),
            started=self.started,
            status=self.status.value,
        )
