"""
Difficulty levels for the computer opponent.

Each level maps to the probability that the engine plays its computed best
move instead of a uniformly random legal one.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Union


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    IMPOSSIBLE = "impossible"

    @property
    def probability(self) -> float:
        return DIFFICULTY_LEVELS[self]

    @classmethod
    def parse(cls, level: Union["Difficulty", str, None]) -> "Difficulty":
        """Resolve a level or its name; anything unrecognised falls back to medium."""
        if isinstance(level, cls):
            return level
        if isinstance(level, str):
            try:
                return cls(level.strip().lower())
            except ValueError:
                pass
        logging.warning("Unknown difficulty %r, using %s", level, DEFAULT_DIFFICULTY.value)
        return DEFAULT_DIFFICULTY


DIFFICULTY_LEVELS = {
    Difficulty.EASY: 0.1,
    Difficulty.MEDIUM: 0.5,
    Difficulty.HARD: 0.9,
    Difficulty.IMPOSSIBLE: 1.0,
}

DEFAULT_DIFFICULTY = Difficulty.MEDIUM

LEVEL_NAMES = [d.value for d in Difficulty]
