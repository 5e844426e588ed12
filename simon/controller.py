"""
Game controller transitions, shared by the in-memory store and the DB store.

Every function takes a game record and a scoreboard record. Both stores use
the same attribute names, so the dataclasses in store.py and the ORM rows in
models.py go through exactly the same rules:

  game:       sequence, attempt, score, in_progress, player_turn, message,
              round_started_at, turn_opens_at, next_round_at, last_score,
              updated_at
  scoreboard: high_score, games_played

Lists are always reassigned, never mutated in place, so SQLAlchemy notices
the change on JSON columns.

There is no sleeping here: the timeline is a set of timestamps (epoch
seconds) and tick() moves the game forward when they have passed.
"""

import logging
from typing import Callable

from .config import Timing
from .engine import beats_high_score, check_choice, playback_duration_ms, playback_schedule
from .schemas import FlashStepOut, GameState, PlaybackOut
from .types import Color, Outcome

logger = logging.getLogger(__name__)

ColorSource = Callable[[], Color]


def begin_round(game, draw_color: ColorSource, at: float, timing: Timing) -> None:
    game.attempt = []
    game.score += 1
    game.sequence = list(game.sequence) + [draw_color()]

    game.player_turn = False
    game.message = "Simon"
    game.round_started_at = at
    game.turn_opens_at = at + playback_duration_ms(len(game.sequence), timing) / 1000.0
    game.next_round_at = None
    game.updated_at = at
    logger.debug(f"Round {game.score + 1} started with {len(game.sequence)} color(s)")


def tick(game, draw_color: ColorSource, now: float, timing: Timing) -> None:
    if not game.in_progress:
        return

    # Post-match pause is over: the next round starts when it was scheduled
    if game.next_round_at is not None and now >= game.next_round_at:
        begin_round(game, draw_color, game.next_round_at, timing)

    # Playback is over: hand the board to the player
    if not game.player_turn and game.turn_opens_at is not None and now >= game.turn_opens_at:
        game.player_turn = True
        game.message = "Your Turn"
        game.turn_opens_at = None


def start(game, scoreboard, draw_color: ColorSource, now: float, timing: Timing) -> bool:
    """Start trigger. Returns False (and changes nothing) while a game runs."""
    if game.in_progress:
        return False

    game.in_progress = True
    game.last_score = None
    game.sequence = []
    # begin_round bumps this to 0 for the first round
    game.score = -1
    scoreboard.games_played += 1

    begin_round(game, draw_color, now, timing)
    logger.info("Game started")
    return True


def choose(game, scoreboard, color: Color, now: float, timing: Timing) -> Outcome:
    """
    Choice trigger. Choices outside the player's turn are dropped, not queued.
    """
    if not game.player_turn:
        logger.debug(f"Ignored choice {color!r}: not the player's turn")
        return "ignored"

    game.attempt = list(game.attempt) + [color]
    game.updated_at = now

    result = check_choice(game.sequence, game.attempt)
    if result == "mismatch":
        end_game(game, scoreboard, "Game Over!", now)
        return "game_over"

    if result == "complete":
        game.player_turn = False
        game.next_round_at = now + timing.post_match_ms / 1000.0
        return "round_complete"

    return "accepted"


def quit_game(game, scoreboard, now: float) -> bool:
    return end_game(game, scoreboard, "Simon", now)


def end_game(game, scoreboard, message: str, now: float) -> bool:
    if not game.in_progress:
        return False

    game.player_turn = False
    game.in_progress = False
    game.message = message
    game.last_score = game.score

    new_high = beats_high_score(game.score, scoreboard.high_score)
    if new_high:
        scoreboard.high_score = game.score
    logger.info(f"Game ended ({message}) with score {game.score}; new high score: {new_high}")

    game.sequence = []
    game.attempt = []
    game.score = 0
    game.round_started_at = None
    game.turn_opens_at = None
    game.next_round_at = None
    game.updated_at = now
    return True


# --- Small DTO builder so both stores answer with the same shape ---

def to_game_state(game, high_score: int, timing: Timing) -> GameState:
    playback = None
    if game.in_progress and game.sequence:
        playback = PlaybackOut(
            sequence=list(game.sequence),
            flash_ms=timing.flash_ms,
            gap_ms=timing.gap_ms,
            pre_playback_ms=timing.pre_playback_ms,
            post_match_ms=timing.post_match_ms,
            total_ms=playback_duration_ms(len(game.sequence), timing),
            steps=[
                FlashStepOut(color=color, on_ms=on_ms, off_ms=off_ms)
                for color, on_ms, off_ms in playback_schedule(game.sequence, timing)
            ],
        )

    return GameState(
        game_id=game.id,
        in_progress=game.in_progress,
        player_turn=game.player_turn,
        message=game.message,
        score=game.score,
        high_score=high_score,
        last_score=game.last_score,
        attempt_length=len(game.attempt),
        round_started_at=game.round_started_at,
        turn_opens_at=game.turn_opens_at,
        next_round_at=game.next_round_at,
        playback=playback,
    )
