"""
Tactics and simple motifs: immediate wins and blocks.
"""
from typing import List, Sequence

from .board import EMPTY, get_winner, other_symbol, place


def immediate_winning_moves(board: Sequence[str], symbol: str) -> List[int]:
    wins: List[int] = []
    for i, v in enumerate(board):
        if v != EMPTY:
            continue
        if get_winner(place(board, i, symbol)) == symbol:
            wins.append(i)
    return wins


def wins_immediately(board: Sequence[str], symbol: str, move: int) -> bool:
    return board[move] == EMPTY and get_winner(place(board, move, symbol)) == symbol


def gives_opponent_immediate_win(board: Sequence[str], symbol: str, move: int) -> bool:
    if board[move] != EMPTY:
        return False
    child = place(board, move, symbol)
    if get_winner(child) is not None:
        return False
    return len(immediate_winning_moves(child, other_symbol(symbol))) > 0
