"""
The controller is the entrypoint into the domain layer for the service layer.

It implements the state machine of the puzzle:

* start_new_game: (re)start from a chosen or random square
* apply_move: jump the knight to a highlighted square
* undo_last_move: take back exactly one jump

Every operation takes a GameState and returns a GameState. Requests that are not allowed
(clicking a square that is not highlighted, undoing with nothing to undo, moving before the
game started) return the state unchanged instead of raising.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional, Protocol

from src.core.shared_types import Status
from src.tour.moves import legal_moves
from src.tour.square import NUM_SQUARES, Square, is_valid_square
from src.tour.state import GameState

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Just the part of random.Random the controller needs"""

    def randrange(self, stop: int) -> int: ...


def start_new_game(
    state: Optional[GameState] = None,
    position: Optional[Square] = None,
    rng: Optional[RandomSource] = None,
) -> GameState:
    """
    Start (or restart) the puzzle
    ----

    Allowed from any state, also after the puzzle is solved or stuck. All previous visits are discarded.
    Without a requested position the knight is placed on a random square drawn from `rng`.
    """
    if position is None:
        position = (rng or random.SystemRandom()).randrange(NUM_SQUARES)
    elif not is_valid_square(position):
        logger.debug("Ignoring new game on square %r: not on the board.", position)
        return state if state is not None else GameState.unstarted()

    history = (position,)
    logger.debug("New game started on square %d.", position)
    return GameState(
        position=position,
        history=history,
        legal_moves=legal_moves(position, history),
        started=True,
    )


def apply_move(state: GameState, target: Square) -> GameState:
    """Jump to `target` if it is one of the current legal moves."""
    if not state.started:
        logger.debug("Ignoring move to %r: game has not started.", target)
        return state
    if not is_valid_square(target) or target not in state.legal_moves:
        logger.debug(
            "Ignoring move to %r: not in legal moves %s.", target, state.legal_moves
        )
        return state

    history = (target, *state.history)
    new_state = GameState(
        position=target,
        history=history,
        legal_moves=legal_moves(target, history),
        started=True,
    )
    logger.debug(
        "Knight moved %d -> %d (%d visited, status: %s).",
        state.position,
        target,
        new_state.visited_count,
        new_state.status,
    )
    return new_state


def undo_last_move(state: GameState) -> GameState:
    """Take back the most recent jump. The starting square itself cannot be undone."""
    if not state.started or len(state.history) <= 1:
        logger.debug("Ignoring undo: no move to take back.")
        return state

    # the previous position was the second most recent visit, everything after it stays
    history = state.history[1:]
    position = history[0]
    logger.debug("Undid move %d -> %d.", position, state.position)
    return GameState(
        position=position,
        history=history,
        legal_moves=legal_moves(position, history),
        started=True,
    )


def status(state: GameState) -> Status:
    return state.status


# --- COMMANDS ---
# What the outer layer sends in. Explicit variants instead of optional arguments.
@dataclass(frozen=True)
class NewGame:
    """Start on a random square"""


@dataclass(frozen=True)
class NewGameAt:
    position: Square


@dataclass(frozen=True)
class Move:
    target: Square


@dataclass(frozen=True)
class Undo:
    pass


Command = NewGame | NewGameAt | Move | Undo


def handle(
    state: GameState, command: Command, rng: Optional[RandomSource] = None
) -> GameState:
    """Dispatch a command to the matching operation. Callers can ignore the result if it `is` the old state."""
    if isinstance(command, NewGame):
        return start_new_game(state, rng=rng)
    if isinstance(command, NewGameAt):
        return start_new_game(state, position=command.position)
    if isinstance(command, Move):
        return apply_move(state, command.target)
    if isinstance(command, Undo):
        return undo_last_move(state)
    logger.debug("Ignoring unknown command %r.", command)
    return state
