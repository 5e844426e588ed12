"""
In-memory store
Holds game state in memory. The high score lives here too, so it only lasts
as long as the process.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional
from uuid import uuid4
from time import time
from threading import RLock

from . import config, controller
from .config import Timing
from .random_client import fetch_color
from .schemas import ChoiceResponse, GameState, ScoreboardOut
from .types import Color, Message

logger = logging.getLogger(__name__)

@dataclass
class Game:
    id: str
    sequence: List[Color] = field(default_factory=list)
    attempt: List[Color] = field(default_factory=list)
    score: int = 0
    in_progress: bool = False
    player_turn: bool = False
    message: Message = "Simon"
    last_score: Optional[int] = None
    # Timeline (epoch seconds)
    round_started_at: Optional[float] = None
    turn_opens_at: Optional[float] = None
    next_round_at: Optional[float] = None
    created_at: float = field(default_factory=time)
    updated_at: float = field(default_factory=time)

@dataclass
class Scoreboard:
    high_score: int = config.INITIAL_HIGH_SCORE
    games_played: int = 0


class GameStore:
    def __init__(
        self,
        draw_color: Callable[[], Color] = fetch_color,
        clock: Callable[[], float] = time,
        timing: Optional[Timing] = None,
        initial_high_score: Optional[int] = None,
    ) -> None:
        self._games: Dict[str, Game] = {}
        self._lock = RLock()
        self._draw_color = draw_color
        self._clock = clock
        self._timing = timing or config.TIMING
        self._initial_high_score = (
            config.INITIAL_HIGH_SCORE if initial_high_score is None else initial_high_score
        )
        self._scoreboard = Scoreboard(high_score=self._initial_high_score)

    # --- helpers ---

    def _load(self, game_id: str) -> Optional[Game]:
        """Fetch a game and bring its timeline up to now. Call with the lock held."""
        game = self._games.get(game_id)
        if game is not None:
            controller.tick(game, self._draw_color, self._clock(), self._timing)
        return game

    def _state(self, game: Game) -> GameState:
        return controller.to_game_state(game, self._scoreboard.high_score, self._timing)

    # --- public API ---

    def create(self) -> GameState:
        game = Game(id=str(uuid4()))
        with self._lock:
            self._games[game.id] = game
            return self._state(game)

    def get(self, game_id: str) -> Optional[GameState]:
        with self._lock:
            game = self._load(game_id)
            if game is None:
                return None
            return self._state(game)

    def start(self, game_id: str) -> Optional[GameState]:
        with self._lock:
            game = self._load(game_id)
            if game is None:
                return None
            controller.start(game, self._scoreboard, self._draw_color, self._clock(), self._timing)
            return self._state(game)

    def choose(self, game_id: str, color: Color) -> Optional[ChoiceResponse]:
        with self._lock:
            game = self._load(game_id)
            if game is None:
                return None
            outcome = controller.choose(game, self._scoreboard, color, self._clock(), self._timing)
            return ChoiceResponse(outcome=outcome, state=self._state(game))

    def quit(self, game_id: str) -> Optional[GameState]:
        with self._lock:
            game = self._load(game_id)
            if game is None:
                return None
            controller.quit_game(game, self._scoreboard, self._clock())
            return self._state(game)

    def get_scoreboard(self) -> ScoreboardOut:
        with self._lock:
            return ScoreboardOut(
                high_score=self._scoreboard.high_score,
                games_played=self._scoreboard.games_played,
            )

    def reset_scoreboard(self) -> None:
        with self._lock:
            self._scoreboard = Scoreboard(high_score=self._initial_high_score)
        logger.info("Scoreboard reset")
