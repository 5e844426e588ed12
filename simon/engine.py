"""
Pure game logic (no HTTP, no storage, no clock).

- check_choice: is the player's attempt still a prefix of the sequence?
- playback_schedule / playback_duration_ms: when each flash turns on and off
- beats_high_score: the high score only moves on a strictly better score
"""

from typing import List, Tuple

from .config import Timing
from .types import Color, Sequence

COLORS: Tuple[Color, ...] = ("red", "green", "blue", "yellow")


def check_choice(sequence: Sequence, attempt: Sequence) -> str:
    """
    Compare the newest entry of the attempt with the sequence.

    Example:
      sequence = ["red", "blue", "blue"]
      attempt  = ["red"]                  -> "partial"
      attempt  = ["red", "green"]         -> "mismatch"
      attempt  = ["red", "blue", "blue"]  -> "complete"

    Only the last position is checked: earlier entries were already
    checked when they were entered.
    """
    n = len(attempt)
    if n == 0 or n > len(sequence):
        raise ValueError("Attempt must be non-empty and no longer than the sequence.")

    last = n - 1
    if attempt[last] != sequence[last]:
        return "mismatch"
    if n == len(sequence):
        return "complete"
    return "partial"


def playback_duration_ms(length: int, timing: Timing) -> int:
    # pre-playback pause, then one flash + one gap per color
    return timing.pre_playback_ms + length * (timing.flash_ms + timing.gap_ms)


def playback_schedule(sequence: Sequence, timing: Timing) -> List[Tuple[Color, int, int]]:
    """
    Returns (color, on_ms, off_ms) for every flash, relative to the start of
    the round.

    Example (default pacing):
      ["red", "green"] -> [("red", 800, 1200), ("green", 1350, 1750)]
    """
    steps = []
    step = timing.flash_ms + timing.gap_ms
    for index, color in enumerate(sequence):
        on_ms = timing.pre_playback_ms + index * step
        steps.append((color, on_ms, on_ms + timing.flash_ms))
    return steps


def beats_high_score(score: int, high_score: int) -> bool:
    return score > high_score
