"""
Match controller: whose turn it is, when the game is over, and the single
mutating entry point `play_turn` that hosts use to advance a game.

States are AwaitingMove(current player) and GameOver(outcome). The outcome is
always recomputed from the board. A Match is not re-entrant: hosts must
serialize calls (e.g. by disabling input until a turn resolves).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from . import config
from .board import O, TIE, X, Board, get_winner
from .difficulty import Difficulty
from .engine import default_rng, get_best_move


@dataclass(frozen=True)
class Player:
    name: str
    symbol: str
    is_computer: bool = False


class Match:
    def __init__(
        self,
        difficulty: Union[Difficulty, str, None] = None,
        rng=None,
        vs_computer: bool = True,
        auto_reply: bool = True,
    ) -> None:
        self.board = Board()
        self.player_one = Player("Player 1", X)
        self.player_two = Player("Player 2", O, is_computer=vs_computer)
        self.difficulty = (
            Difficulty.parse(difficulty) if difficulty is not None else config.default_difficulty()
        )
        self.rng = rng if rng is not None else default_rng(config.default_seed())
        # When off, the host calls play_computer_turn itself (e.g. after a delay).
        self.auto_reply = auto_reply
        self.current_player = self.player_one
        self.is_game_over = False

    @property
    def players(self) -> Tuple[Player, Player]:
        return self.player_one, self.player_two

    def get_board(self) -> Tuple[str, ...]:
        return self.board.get_board()

    def get_game_over_status(self) -> bool:
        return self.is_game_over

    def get_current_player(self) -> Player:
        return self.current_player

    def get_outcome(self) -> Optional[str]:
        return get_winner(self.board.get_board())

    def is_computer_turn(self) -> bool:
        return not self.is_game_over and self.current_player.is_computer

    def set_difficulty(self, level: Union[Difficulty, str]) -> Difficulty:
        self.difficulty = Difficulty.parse(level)
        logging.info("Difficulty set to: %s", self.difficulty.value)
        return self.difficulty

    def play_turn(self, index: int) -> bool:
        logging.debug("Player: %s", self.current_player.name)
        if self.is_game_over or not self.board.set_square(index, self.current_player.symbol):
            logging.debug("Invalid move or game over (index=%r)", index)
            return False

        winner = get_winner(self.board.get_board())
        if winner is not None:
            self.is_game_over = True
            logging.info("Game over: %s", self.result_message())
            return True

        self._switch_player()
        if self.auto_reply and self.current_player.is_computer:
            self.play_computer_turn()
        return True

    def play_computer_turn(self) -> bool:
        if not self.is_computer_turn():
            return False
        computer = self.current_player.symbol
        human = self.player_one.symbol if computer != self.player_one.symbol else self.player_two.symbol
        move = get_best_move(self.board.get_board(), self.difficulty, self.rng, computer=computer, human=human)
        logging.debug("%s plays %d", self.current_player.name, move)
        return self.play_turn(move)

    def reset_game(self) -> None:
        self.board.reset_board()
        self.is_game_over = False
        self.current_player = self.player_one

    def _switch_player(self) -> None:
        self.current_player = self.player_two if self.current_player is self.player_one else self.player_one

    def turn_message(self) -> str:
        if self.is_game_over:
            return "Game Over. Press RESTART"
        return f"It's {self.current_player.name}'s turn."

    def result_message(self) -> str:
        outcome = self.get_outcome()
        if not self.is_game_over or outcome is None:
            return ""
        if outcome == TIE:
            return "It's a tie!"
        winner = self.player_one if outcome == self.player_one.symbol else self.player_two
        return f"{winner.name} wins!"
