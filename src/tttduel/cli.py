from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import TextIO

from . import config
from .board import get_winner, is_valid_state, deserialize_board, other_symbol, side_to_move
from .difficulty import LEVEL_NAMES, Difficulty
from .engine import choose_best_move, default_rng, get_best_move, score_moves
from .match import Match
from .policy import expected_score_vs_random, move_distribution
from .tactics import gives_opponent_immediate_win


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt-duel", description="Tic-tac-toe against a minimax opponent")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("--seed", type=int, default=None, help="Seed for the computer's random source (env: TTT_SEED)")
    p.add_argument(
        "--difficulty",
        choices=LEVEL_NAMES,
        default=None,
        help="easy|medium|hard|impossible (env: TTT_DIFFICULTY, default: medium)",
    )

    p_play = sub.add_parser("play", help="Play an interactive game on stdin/stdout")
    p_play.add_argument("--two-player", action="store_true", help="Two humans, no computer opponent")
    p_play.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds to wait before the computer replies (env: TTT_BOT_DELAY)",
    )

    p_best = sub.add_parser("best-move", help="Print the engine's move for the side to move")
    p_best.add_argument("--board", required=True, help="Board string, e.g. XX.OO.... (row-major)")

    p_an = sub.add_parser("analyze", help="Minimax scores and difficulty distribution for the side to move")
    p_an.add_argument("--board", required=True, help="Board string, e.g. XX.OO.... (row-major)")

    return p


def render_board(board) -> str:
    cells = [v if v else str(i) for i, v in enumerate(board)]
    rows = [" | ".join(cells[r * 3:r * 3 + 3]) for r in range(3)]
    return "\n---------\n".join(rows)


def _parse_board(raw: str):
    try:
        board = deserialize_board(raw)
    except ValueError as e:
        logging.error("Invalid board string: %s", e)
        return None
    if not is_valid_state(board):
        logging.error("Board is not a valid reachable state.")
        return None
    if get_winner(board) is not None:
        logging.error("Board is already decided: %s", get_winner(board))
        return None
    return board


def run_play(match: Match, delay: float, stdin: TextIO, stdout: TextIO) -> int:
    def show() -> None:
        print(render_board(match.get_board()), file=stdout)
        print(match.result_message() or match.turn_message(), file=stdout)

    show()
    for line in stdin:
        cmd = line.strip().lower()
        if not cmd:
            continue
        if cmd in ("q", "quit"):
            break
        if cmd in ("r", "restart"):
            match.reset_game()
            show()
            continue
        if cmd.startswith("d "):
            match.set_difficulty(cmd[2:])
            continue
        try:
            index = int(cmd)
        except ValueError:
            logging.error("Enter a cell 0-8, 'r' to restart, 'd <level>' or 'q' to quit")
            continue
        if not match.play_turn(index):
            logging.error("Invalid move or game over")
            continue
        if match.is_computer_turn():
            show()
            if delay > 0:
                time.sleep(delay)
            match.play_computer_turn()
        show()
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("ttt-duel"))
        except Exception:
            print("unknown")
        return 0

    try:
        seed = ns.seed if ns.seed is not None else config.default_seed()
        difficulty = Difficulty.parse(ns.difficulty) if ns.difficulty else config.default_difficulty()
        delay = ns.delay if getattr(ns, "delay", None) is not None else config.bot_delay()
    except ValueError as e:
        logging.error("%s", e)
        return 2
    if delay < 0:
        logging.error("Delay must be >= 0: %s", delay)
        return 2

    if ns.cmd == "play":
        match = Match(difficulty=difficulty, rng=default_rng(seed),
                      vs_computer=not ns.two_player, auto_reply=False)
        return run_play(match, delay, sys.stdin, sys.stdout)

    if ns.cmd in ("best-move", "analyze"):
        board = _parse_board(ns.board)
        if board is None:
            return 2
        computer = side_to_move(board)
        human = other_symbol(computer)

        if ns.cmd == "best-move":
            move = get_best_move(board, difficulty, default_rng(seed), computer=computer, human=human)
            logging.info("to_move=%s difficulty=%s move=%d", computer, difficulty.value, move)
            return 0

        scores = score_moves(board, computer, human)
        pol = move_distribution(board, difficulty, computer, human)
        logging.info(
            "to_move=%s best=%d scores=%s unsafe=%s",
            computer,
            choose_best_move(board, computer, human),
            scores,
            [mv for mv in scores if gives_opponent_immediate_win(board, computer, mv)],
        )
        logging.info(
            "difficulty=%s distribution=%s expected_vs_random=%.3f",
            difficulty.value,
            {i: round(float(pol[i]), 3) for i in scores},
            expected_score_vs_random(board, difficulty, True, computer, human),
        )
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
