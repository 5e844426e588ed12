"""
Testing pure game logic.
"""

import pytest

from simon.config import Timing
from simon.engine import (
    COLORS,
    beats_high_score,
    check_choice,
    playback_duration_ms,
    playback_schedule,
)

def test_four_colors():
    assert COLORS == ("red", "green", "blue", "yellow")

def test_check_choice_partial_complete_and_mismatch():
    sequence = ["red", "blue", "blue"]

    assert check_choice(sequence, ["red"]) == "partial"
    assert check_choice(sequence, ["red", "blue"]) == "partial"
    assert check_choice(sequence, ["red", "blue", "blue"]) == "complete"
    # Only the newest entry matters; the first one was checked earlier
    assert check_choice(sequence, ["red", "green"]) == "mismatch"

def test_check_choice_rejects_empty_or_too_long_attempt():
    with pytest.raises(ValueError):
        check_choice(["red"], [])
    with pytest.raises(ValueError):
        check_choice(["red"], ["red", "red"])

def test_playback_schedule_default_pacing():
    timing = Timing()
    steps = playback_schedule(["red", "green", "yellow"], timing)

    assert steps == [
        ("red", 800, 1200),
        ("green", 1350, 1750),
        ("yellow", 1900, 2300),
    ]
    # last flash off + one gap
    assert playback_duration_ms(3, timing) == 2450

def test_playback_duration_custom_pacing():
    timing = Timing(flash_ms=100, gap_ms=50, pre_playback_ms=0, post_match_ms=0)
    assert playback_duration_ms(0, timing) == 0
    assert playback_duration_ms(4, timing) == 600

def test_high_score_needs_strictly_better_score():
    assert beats_high_score(7, 6) is True
    assert beats_high_score(6, 6) is False
    assert beats_high_score(0, 6) is False
