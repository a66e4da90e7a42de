"""
Application settings

Defaults are fine for running the tests and a local session. Override with environment variables:

* KNIGHTS_TOUR_DATABASE_URL (default: in-memory SQLite, so nothing outlives the process)
* KNIGHTS_TOUR_ECHO_SQL
* KNIGHTS_TOUR_LOG_LEVEL
"""

import logging
import os
from typing import Mapping, Optional, Self

from pydantic import BaseModel, field_validator

ENV_PREFIX = "KNIGHTS_TOUR_"
LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    database_url: str = "sqlite:///:memory:"
    echo_sql: bool = False
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level {value!r}. Pick one from {','.join(LOG_LEVELS)}"
            )
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Self:
        """Collect the fields that are set in the environment, pydantic does the parsing."""
        environ = os.environ if environ is None else environ
        values = {
            name: environ[f"{ENV_PREFIX}{name.upper()}"]
            for name in cls.model_fields
            if f"{ENV_PREFIX}{name.upper()}" in environ
        }
        return cls(**values)


def configure_logging(settings: Settings) -> None:
    """Call once from the host program. Library modules only call logging.getLogger(__name__)."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
