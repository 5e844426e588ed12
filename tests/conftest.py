"""
- Spins up a temp in-memory SQLite DB for the repository tests
- Provides a fake clock and a scripted color source so rounds are predictable
- Provides a client fixture (TestClient(app)) whose routes use an in-memory
  store built on that clock and color source
"""
import pytest
from itertools import cycle
from typing import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from simon.config import Timing
from simon.db import Base
from simon.main import app, get_store
from simon.store import GameStore
from simon import models  # noqa: F401

TEST_DATABASE_URL = "sqlite+pysqlite:///:memory:"

# Default pacing: first round playback = 800 + 1 * (400 + 150) ms
TIMING = Timing(flash_ms=400, gap_ms=150, pre_playback_ms=800, post_match_ms=1000)


class FakeClock:
    """Time only moves when a test says so."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def colors():
    """red, blue, red, blue, ..."""
    script = cycle(["red", "blue"])
    return lambda: next(script)


@pytest.fixture
def memory_store(clock, colors):
    return GameStore(draw_color=colors, clock=clock, timing=TIMING, initial_high_score=6)


@pytest.fixture(scope="session")
def engine():
    # StaticPool + check_same_thread=False: one in-memory DB shared across threads
    engine = create_engine(
        TEST_DATABASE_URL,
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def db_session(engine) -> Generator:
    """Provide a clean session per test with rollback."""
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    db = TestingSessionLocal()
    try:
        yield db
        db.rollback()
    finally:
        db.close()

@pytest.fixture(autouse=True)
def _clean_db(engine):
    """The repository commits, so rows would leak between tests."""
    with engine.begin() as conn:
        conn.execute(text("DELETE FROM games"))
        conn.execute(text("DELETE FROM scoreboard"))
    yield

@pytest.fixture
def client(memory_store):
    app.dependency_overrides[get_store] = lambda: memory_store
    yield TestClient(app)
    app.dependency_overrides.clear()
