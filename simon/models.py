"""
SQLAlchemy ORM models.

Tables:
- games: one row per cabinet (sequence and attempt stored as JSON, plus flags
  and the round timeline)
- scoreboard: single-row high score (mirrors the in-memory Scoreboard)

Column names match the in-memory dataclasses so simon.controller can drive
either one.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import String, Integer, Float, Boolean, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from .db import Base
from .config import INITIAL_HIGH_SCORE

class Game(Base):
    __tablename__ = "games"

    # UUIDs generated in code; stored as strings
    id: Mapped[str] = mapped_column(String(36), primary_key=True)

    # Colors, stored as JSON arrays of strings
    sequence: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    attempt: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_score: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # Flags & banner
    in_progress: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    player_turn: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    message: Mapped[str] = mapped_column(String(32), nullable=False, default="Simon")

    # Round timeline, epoch seconds
    round_started_at: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    turn_opens_at: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    next_round_at: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

# For simplicity: store exactly one row with id=1.
class Scoreboard(Base):
    __tablename__ = "scoreboard"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=1)
    high_score: Mapped[int] = mapped_column(Integer, default=INITIAL_HIGH_SCORE)
    games_played: Mapped[int] = mapped_column(Integer, default=0)
