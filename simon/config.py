"""
Single place to read settings from the environment (or a local .env).

Pacing is in milliseconds and matches the classic board:
- flash:        how long a button stays lit
- gap:          pause between two flashes
- pre_playback: pause before the sequence starts playing
- post_match:   pause after a full correct answer, before the next round
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .types import StoreBackend

# dev convenience; in prod the platform injects env vars
load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from None
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}.")
    return value


def _choice_env(name: str, default: str, allowed: tuple) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value not in allowed:
        raise ValueError(f"{name} must be one of {', '.join(allowed)}; got {value!r}.")
    return value


@dataclass(frozen=True)
class Timing:
    flash_ms: int = 400
    gap_ms: int = 150
    pre_playback_ms: int = 800
    post_match_ms: int = 1000


def load_timing() -> Timing:
    return Timing(
        flash_ms=_int_env("SIMON_FLASH_MS", 400),
        gap_ms=_int_env("SIMON_GAP_MS", 150),
        pre_playback_ms=_int_env("SIMON_PRE_PLAYBACK_MS", 800),
        post_match_ms=_int_env("SIMON_POST_MATCH_MS", 1000),
    )


APP_ENV = os.getenv("APP_ENV", "local")
STORE_BACKEND: StoreBackend = _choice_env("SIMON_STORE_BACKEND", "memory", ("memory", "db"))
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+pysqlite:///:memory:")
RANDOM_SOURCE = _choice_env("SIMON_RANDOM_SOURCE", "local", ("local", "random.org"))
INITIAL_HIGH_SCORE = _int_env("SIMON_INITIAL_HIGH_SCORE", 6)
LOG_LEVEL = os.getenv("SIMON_LOG_LEVEL", "INFO").upper()

TIMING = load_timing()
