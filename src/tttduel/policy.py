"""
Move distributions and expected outcomes induced by a difficulty level.
"""
from functools import lru_cache
from typing import Sequence, Tuple

import numpy as np

from .board import BOARD_SIZE, O, X, get_winner, legal_moves, place
from .difficulty import Difficulty
from .engine import choose_best_move, terminal_score


def move_distribution(board: Sequence[str], difficulty: Difficulty,
                      computer: str = O, human: str = X) -> np.ndarray:
    """Probability of each cell being returned by get_best_move."""
    legal = legal_moves(board)
    pol = np.zeros(BOARD_SIZE)
    if not legal:
        return pol
    p = difficulty.probability
    pol[legal] = (1.0 - p) / len(legal)
    pol[choose_best_move(board, computer, human)] += p
    return pol


@lru_cache(maxsize=None)
def _expected_vs_random_t(board_t: Tuple[str, ...], difficulty: Difficulty, computer_to_move: bool,
                          computer: str, human: str) -> float:
    w = get_winner(board_t)
    if w is not None:
        return float(terminal_score(w, computer))
    legal = legal_moves(board_t)
    if computer_to_move:
        pol = move_distribution(board_t, difficulty, computer, human)
        return float(sum(
            pol[mv] * _expected_vs_random_t(place(board_t, mv, computer), difficulty, False, computer, human)
            for mv in legal
        ))
    vs = [
        _expected_vs_random_t(place(board_t, mv, human), difficulty, True, computer, human)
        for mv in legal
    ]
    return float(np.mean(vs))


def expected_score_vs_random(board: Sequence[str], difficulty: Difficulty, computer_to_move: bool = True,
                             computer: str = O, human: str = X) -> float:
    """Expected computer score (+1 win, 0 tie, -1 loss) against a uniformly random opponent."""
    return _expected_vs_random_t(tuple(board), difficulty, computer_to_move, computer, human)
