"""
Single place to:
- Read DATABASE_URL (via simon.config, which loads .env)
- Create a SQLAlchemy Engine
- Create a Session factory (SessionLocal) for per-request DB sessions
- Provide get_db() dependency for FastAPI routes

The default URL is an in-memory SQLite database, so nothing outlives the
process unless DATABASE_URL points somewhere else.
"""

from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool

from .config import DATABASE_URL


def make_engine(url: str):
    if url.startswith("sqlite") and ":memory:" in url:
        # One shared connection, otherwise each thread would see a different empty DB
        return create_engine(
            url,
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if url.startswith("sqlite"):
        # Requests run on worker threads
        return create_engine(url, future=True, connect_args={"check_same_thread": False})
    # pool_pre_ping=True = auto-detect dead connections (helps with long-lived processes)
    return create_engine(url, pool_pre_ping=True, echo=False, future=True)


engine = make_engine(DATABASE_URL)

# Each request gets its own session from this factory.
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

# Base class for ORM models.
class Base(DeclarativeBase):
    pass

# FastAPI dependency that yields a DB session for the duration of a request.
def get_db() -> Generator:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
