"""tttduel package.

Tic-tac-toe board, minimax decision engine with tunable difficulty, and the
match controller that hosts (CLI, GUI) drive.

Convenience imports are exposed for common workflows.
"""

from .board import Board, get_winner
from .difficulty import Difficulty
from .engine import choose_best_move, get_best_move
from .match import Match, Player

__all__ = [
    "Board",
    "get_winner",
    "Difficulty",
    "choose_best_move",
    "get_best_move",
    "Match",
    "Player",
]
