"""
Errors raised by the layers around the puzzle core.

The core itself never raises for an illegal command: a disallowed move or undo is a no-op.
These are for data that cannot be trusted (stored records, incoming requests).
"""


class GameError(Exception):
    """Base class for all errors of this application."""


class GameStateError(GameError):
    """Stored or transported data does not describe a valid game."""


class InvalidRequestError(GameError, ValueError):
    """A request could not be interpreted.

    Subclasses ValueError so pydantic validators turn it into a ValidationError.
    """


class RepositoryError(GameError):
    """The requested game is unknown to the store."""
