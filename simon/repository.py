"""
DB-backed repository that mirrors the in-memory GameStore API.

Public methods:
- create() -> GameState
- get(game_id) -> GameState | None
- start(game_id) -> GameState | None
- choose(game_id, color) -> ChoiceResponse | None
- quit(game_id) -> GameState | None
- get_scoreboard() -> ScoreboardOut
- reset_scoreboard() -> None

The FastAPI routes do not care which of the two stores they get.
"""

from __future__ import annotations

import logging
from datetime import datetime
from time import time
from typing import Callable, Optional
from uuid import uuid4

from sqlalchemy.orm import Session

from . import config, controller
from .config import Timing
from .models import Game as GameORM, Scoreboard as ScoreboardORM
from .random_client import fetch_color
from .schemas import ChoiceResponse, GameState, ScoreboardOut
from .types import Color

logger = logging.getLogger(__name__)


class DBGameStore:
    """Same behavior as the in-memory GameStore, one SQLAlchemy session per request."""

    def __init__(
        self,
        db: Session,
        draw_color: Callable[[], Color] = fetch_color,
        clock: Callable[[], float] = time,
        timing: Optional[Timing] = None,
        initial_high_score: Optional[int] = None,
    ):
        self.db = db
        self._draw_color = draw_color
        self._clock = clock
        self._timing = timing or config.TIMING
        self._initial_high_score = (
            config.INITIAL_HIGH_SCORE if initial_high_score is None else initial_high_score
        )

    # --- helpers ---

    def _get_or_create_scoreboard(self) -> ScoreboardORM:
        scoreboard = self.db.get(ScoreboardORM, 1)
        if not scoreboard:
            scoreboard = ScoreboardORM(id=1, high_score=self._initial_high_score, games_played=0)
            self.db.add(scoreboard)
            self.db.commit()
            self.db.refresh(scoreboard)
        return scoreboard

    def _load(self, game_id: str) -> Optional[GameORM]:
        game = self.db.get(GameORM, game_id)
        if game is not None:
            controller.tick(game, self._draw_color, self._clock(), self._timing)
        return game

    def _state(self, game: GameORM, scoreboard: ScoreboardORM) -> GameState:
        return controller.to_game_state(game, scoreboard.high_score, self._timing)

    # --- public API ---

    def create(self) -> GameState:
        now = self._clock()
        game = GameORM(
            id=str(uuid4()),
            sequence=[],
            attempt=[],
            score=0,
            in_progress=False,
            player_turn=False,
            message="Simon",
            created_at=datetime.utcnow(),
            updated_at=now,
        )
        self.db.add(game)
        scoreboard = self._get_or_create_scoreboard()
        self.db.commit()
        self.db.refresh(game)
        return self._state(game, scoreboard)

    def get(self, game_id: str) -> Optional[GameState]:
        game = self._load(game_id)
        if not game:
            return None
        scoreboard = self._get_or_create_scoreboard()
        # tick() may have moved the timeline forward
        self.db.commit()
        return self._state(game, scoreboard)

    def start(self, game_id: str) -> Optional[GameState]:
        game = self._load(game_id)
        if not game:
            return None
        scoreboard = self._get_or_create_scoreboard()
        controller.start(game, scoreboard, self._draw_color, self._clock(), self._timing)
        self.db.commit()
        return self._state(game, scoreboard)

    def choose(self, game_id: str, color: Color) -> Optional[ChoiceResponse]:
        game = self._load(game_id)
        if not game:
            return None
        scoreboard = self._get_or_create_scoreboard()
        outcome = controller.choose(game, scoreboard, color, self._clock(), self._timing)
        self.db.commit()
        return ChoiceResponse(outcome=outcome, state=self._state(game, scoreboard))

    def quit(self, game_id: str) -> Optional[GameState]:
        game = self._load(game_id)
        if not game:
            return None
        scoreboard = self._get_or_create_scoreboard()
        controller.quit_game(game, scoreboard, self._clock())
        self.db.commit()
        return self._state(game, scoreboard)

    def get_scoreboard(self) -> ScoreboardOut:
        scoreboard = self._get_or_create_scoreboard()
        return ScoreboardOut(high_score=scoreboard.high_score, games_played=scoreboard.games_played)

    def reset_scoreboard(self) -> None:
        scoreboard = self._get_or_create_scoreboard()
        scoreboard.high_score = self._initial_high_score
        scoreboard.games_played = 0
        self.db.commit()
        logger.info("Scoreboard reset")
