"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base
from src.tour.moves import legal_moves
from src.tour.square import NUM_SQUARES

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        Base.metadata.drop_all(bind=engine)
        db.close()


def find_tour(start: int) -> list[int]:
    """
    A complete tour from `start`, in visit order. Only used to drive the game to a solved state.

    Depth first search, trying the squares with the fewest onward moves first (Warnsdorff's rule),
    which on an 8x8 board finds a tour almost without backtracking.
    """
    path = [start]
    visited = {start}

    def _onward(square: int) -> int:
        return len(legal_moves(square, visited | {square}))

    def _search() -> bool:
        if len(path) == NUM_SQUARES:
            return True
        candidates = sorted(legal_moves(path[-1], visited), key=lambda sq: (_onward(sq), sq))
        for square in candidates:
            path.append(square)
            visited.add(square)
            if _search():
                return True
            path.pop()
            visited.remove(square)
        return False

    if not _search():
        raise RuntimeError(f"No tour found from square {start}")
    return path


@pytest.fixture(scope="session")
def corner_tour() -> list[int]:
    return find_tour(0)
