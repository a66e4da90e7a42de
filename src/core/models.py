"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from typing import Optional

from src.core.shared_types import Status

Square = int


@dataclass
class GameModel:
    """Transport-safe representation of a puzzle used between API, Service, DB, and Game layers.

    Legal moves are not stored: they are recomputed from position + history.
    """

    position: Optional[Square]
    history: list[Square] = field(default_factory=list)
    started: bool = False
    status: str = Status.NOT_STARTED
