"""Environment-backed defaults for a match and its host.

Default difficulty, random seed and computer reply delay, read from
TTT_DIFFICULTY, TTT_SEED and TTT_BOT_DELAY. CLI flags override these values.
"""

from __future__ import annotations

import os

from .difficulty import DEFAULT_DIFFICULTY, Difficulty


def default_difficulty() -> Difficulty:
    raw = os.getenv("TTT_DIFFICULTY")
    return Difficulty.parse(raw) if raw else DEFAULT_DIFFICULTY


def default_seed() -> int | None:
    raw = os.getenv("TTT_SEED")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"TTT_SEED must be an integer, got {raw!r}") from None


def bot_delay() -> float:
    """Seconds a host waits before letting the computer reply."""
    raw = os.getenv("TTT_BOT_DELAY")
    if not raw:
        return 0.0
    try:
        delay = float(raw)
    except ValueError:
        raise ValueError(f"TTT_BOT_DELAY must be a number, got {raw!r}") from None
    if delay < 0:
        raise ValueError(f"TTT_BOT_DELAY must be >= 0, got {delay}")
    return delay
