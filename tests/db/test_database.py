"""Unit tests for src/db/database.py"""

from sqlalchemy import inspect

from src.core.config import Settings
from src.core.models import GameModel
from src.db.database import build_engine, build_session_factory, get_db
from src.db.sql_repository import SQLGameRepository


def test_tables_created_on_engine_construction() -> None:
    engine = build_engine(Settings())
    assert "games" in inspect(engine).get_table_names()


def test_sessions_share_the_in_memory_database() -> None:
    """A game stored through one session is visible to the next one."""
    session_factory = build_session_factory(Settings())

    sessions = get_db(session_factory)
    first = next(sessions)
    _, game_id = SQLGameRepository(first).create_game(GameModel(position=None))
    sessions.close()

    second = next(get_db(session_factory))
    assert SQLGameRepository(second).get_game(game_id) is not None
