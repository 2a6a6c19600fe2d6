"""
Decision engine: exhaustive minimax from the computer's perspective, plus
difficulty-weighted substitution of a random legal move.
Scoring:
- Computer win = +1, human win = -1, tie = 0. No depth discount.
- Among tied best moves, when the best value is a win, the first move (index
  order) that wins on this very ply is taken; otherwise the first tied move.
  This is not a fastest-win search, only a same-ply preference.
- The search is computed before the random draw, so the best move does not
  depend on the random source.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from .board import O, TIE, X, get_winner, legal_moves, place
from .difficulty import Difficulty
from .tactics import wins_immediately

WIN = 1
LOSS = -1
DRAW = 0


def terminal_score(winner: str, computer: str) -> int:
    if winner == TIE:
        return DRAW
    return WIN if winner == computer else LOSS


@lru_cache(maxsize=None)
def _minimax_t(board_t: Tuple[str, ...], maximizing: bool, computer: str, human: str) -> int:
    winner = get_winner(board_t)
    if winner is not None:
        return terminal_score(winner, computer)
    symbol = computer if maximizing else human
    scores = [
        _minimax_t(place(board_t, mv, symbol), not maximizing, computer, human)
        for mv in legal_moves(board_t)
    ]
    return max(scores) if maximizing else min(scores)


def minimax(board: Sequence[str], maximizing: bool, computer: str = O, human: str = X) -> int:
    """Game value of `board` for the computer, with `maximizing` meaning computer to move."""
    return _minimax_t(tuple(board), maximizing, computer, human)


def score_moves(board: Sequence[str], computer: str = O, human: str = X) -> Dict[int, int]:
    board_t = tuple(board)
    return {
        mv: _minimax_t(place(board_t, mv, computer), False, computer, human)
        for mv in legal_moves(board_t)
    }


def best_moves(board: Sequence[str], computer: str = O, human: str = X) -> Tuple[int, List[int]]:
    """Return the best score and every move achieving it, in index order."""
    scores = score_moves(board, computer, human)
    if not scores:
        raise ValueError("No legal moves: the board is full")
    best_score = max(scores.values())
    return best_score, [mv for mv, s in scores.items() if s == best_score]


def choose_best_move(board: Sequence[str], computer: str = O, human: str = X) -> int:
    board_t = tuple(board)
    if get_winner(board_t) is not None:
        raise ValueError("Game already decided: no move to search")
    best_score, candidates = best_moves(board_t, computer, human)
    if best_score == WIN:
        for mv in candidates:
            if wins_immediately(board_t, computer, mv):
                return mv
    return candidates[0]


def default_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def get_best_move(
    board: Sequence[str],
    difficulty: Union[Difficulty, str] = Difficulty.MEDIUM,
    rng=None,
    computer: str = O,
    human: str = X,
) -> int:
    """Pick the computer's move.

    `rng` is anything with `random()` and `choice(seq)`; a numpy Generator or
    a `random.Random` both work. With probability `difficulty.probability` the
    minimax move is returned, otherwise a uniform choice over all empty cells.
    """
    difficulty = Difficulty.parse(difficulty)
    board_t = tuple(board)
    legal = legal_moves(board_t)
    if not legal:
        raise ValueError("No legal moves: the board is full")
    best = choose_best_move(board_t, computer, human)
    if rng is None:
        rng = default_rng()
    sample = rng.random()
    if sample > difficulty.probability:
        move = int(rng.choice(legal))
        logging.debug("Random move %d (sample=%.3f > p=%.2f, best was %d)",
                      move, sample, difficulty.probability, best)
        return move
    logging.debug("Best move %d (sample=%.3f <= p=%.2f)", best, sample, difficulty.probability)
    return best
