"""
Board: 9 cells in row-major order (index = row*3 + col), rules and winner checks.
Notes:
- Cells hold EMPTY, X or O. X is the human and always starts.
- Snapshots handed out are tuples so callers cannot alias the live grid.
"""
from __future__ import annotations

import logging
import operator
from typing import List, Optional, Sequence, Tuple

EMPTY = ""
X = "X"
O = "O"
TIE = "tie"
SYMBOLS = (X, O)
BOARD_SIZE = 9

WIN_CONDITIONS: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)

_EMPTY_CHARS = ".-_"


def other_symbol(symbol: str) -> str:
    if symbol not in SYMBOLS:
        raise ValueError(f"Unknown symbol: {symbol!r}")
    return O if symbol == X else X


def get_winner(board: Sequence[str]) -> Optional[str]:
    for a, b, c in WIN_CONDITIONS:
        v = board[a]
        if v != EMPTY and v == board[b] and v == board[c]:
            return v
    return None if EMPTY in board else TIE


def legal_moves(board: Sequence[str]) -> List[int]:
    return [i for i, v in enumerate(board) if v == EMPTY]


def place(board: Sequence[str], index: int, symbol: str) -> Tuple[str, ...]:
    if symbol not in SYMBOLS:
        raise ValueError(f"Unknown symbol: {symbol!r}")
    cells = list(board)
    cells[index] = symbol
    return tuple(cells)


def serialize_board(board: Sequence[str]) -> str:
    return ''.join(v if v != EMPTY else '.' for v in board)


def deserialize_board(text: str) -> Tuple[str, ...]:
    raw = text.strip().upper()
    if len(raw) != BOARD_SIZE or any(c not in "XO" + _EMPTY_CHARS for c in raw):
        raise ValueError("Board string must be 9 chars of X, O or '.'")
    return tuple(EMPTY if c in _EMPTY_CHARS else c for c in raw)


def is_valid_state(board: Sequence[str]) -> bool:
    """True when the board is reachable by alternating play with X first."""
    x_count, o_count = board.count(X), board.count(O)
    if not (x_count == o_count or x_count == o_count + 1):
        return False

    def count_wins(p: str) -> int:
        return sum(1 for line in WIN_CONDITIONS if all(board[i] == p for i in line))

    x_wins, o_wins = count_wins(X), count_wins(O)
    if x_wins and o_wins:
        return False
    if x_wins and x_count != o_count + 1:
        return False
    if o_wins and x_count != o_count:
        return False
    return True


def side_to_move(board: Sequence[str]) -> str:
    return X if board.count(X) == board.count(O) else O


class Board:
    """The live grid owned by a match. Mutated only through set_square."""

    def __init__(self) -> None:
        self._cells: List[str] = [EMPTY] * BOARD_SIZE

    def get_board(self) -> Tuple[str, ...]:
        return tuple(self._cells)

    def set_square(self, index: int, symbol: str) -> bool:
        if symbol not in SYMBOLS:
            raise ValueError(f"Unknown symbol: {symbol!r}")
        if isinstance(index, bool):
            return False
        try:
            index = operator.index(index)
        except TypeError:
            return False
        if 0 <= index < BOARD_SIZE and self._cells[index] == EMPTY:
            self._cells[index] = symbol
            return True
        return False

    def reset_board(self) -> None:
        logging.debug("Resetting board")
        self._cells = [EMPTY] * BOARD_SIZE

    def __repr__(self) -> str:
        return f"Board({serialize_board(self._cells)!r})"
