"""Generate database sessions"""

from typing import Generator, Optional

from sqlalchemy import Engine, StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings
from src.db.schema import Base


def build_engine(settings: Settings) -> Engine:
    """Create the engine and make sure all tables exist."""
    if settings.database_url.startswith("sqlite") and ":memory:" in settings.database_url:
        # every connection to an in-memory database would otherwise get its own empty database
        engine = create_engine(
            settings.database_url,
            echo=settings.echo_sql,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(settings.database_url, echo=settings.echo_sql)
    Base.metadata.create_all(bind=engine)
    return engine


def build_session_factory(settings: Optional[Settings] = None) -> sessionmaker[Session]:
    settings = settings or Settings.from_env()
    return sessionmaker(autoflush=False, bind=build_engine(settings))


def get_db(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
