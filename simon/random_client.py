"""
- HTTP call with clear fallback
Draw one random color. With SIMON_RANDOM_SOURCE=random.org we ask random.org
for an index 0..3; if anything goes wrong (no internet, timeout, bad
response), we fall back to a local secure random generator so the game still
works. The default source is local.
"""

import logging
from secrets import randbelow
from typing import Optional

import requests

from . import config
from .engine import COLORS
from .types import Color

logger = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/integers/"


def _local_index() -> int:
    # randbelow(4) gives us a number between 0 and 3
    return randbelow(len(COLORS))


def _remote_index() -> int:
    params = {
        "num": 1,             # one color per round
        "min": 0,
        "max": len(COLORS) - 1,
        "col": 1,
        "base": 10,
        "format": "plain",
        "rnd": "new",
    }

    # keep network quick; if it takes too long, we will just fallback
    response = requests.get(RANDOM_URL, params=params, timeout=3.0)
    response.raise_for_status()

    # The body looks like: "2\n"
    text = response.text.strip()
    value = int(text)
    if value < 0 or value >= len(COLORS):
        raise ValueError(f"random.org number {value} out of range 0..{len(COLORS) - 1}.")
    return value


def fetch_color(source: Optional[str] = None) -> Color:
    source = source or config.RANDOM_SOURCE
    if source == "random.org":
        try:
            return COLORS[_remote_index()]
        except (requests.RequestException, ValueError) as exc:
            logger.warning(f"random.org unavailable, using local random: {exc}")
    return COLORS[_local_index()]
