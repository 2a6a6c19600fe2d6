import io
import logging

import pytest

import tttduel.cli as cli
from tttduel.cli import main, render_board


@pytest.fixture(autouse=True)
def _env(monkeypatch, caplog):
    for var in ("TTT_DIFFICULTY", "TTT_SEED", "TTT_BOT_DELAY"):
        monkeypatch.delenv(var, raising=False)
    caplog.set_level(logging.INFO)


def _feed(monkeypatch, text: str) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_best_move_takes_immediate_win(caplog):
    assert main(["--difficulty", "impossible", "best-move", "--board", "XX.OO...."]) == 0
    assert "to_move=X" in caplog.text
    assert "move=2" in caplog.text


def test_best_move_blocks(caplog):
    assert main(["--difficulty", "impossible", "best-move", "--board", "XX..O...."]) == 0
    assert "to_move=O" in caplog.text
    assert "move=2" in caplog.text


def test_analyze_reports_scores_and_distribution(caplog):
    assert main(["--difficulty", "easy", "analyze", "--board", "X........"]) == 0
    assert "best=4" in caplog.text
    assert "distribution=" in caplog.text
    assert "expected_vs_random=" in caplog.text


def test_analyze_flags_moves_that_hand_over_a_win(caplog):
    assert main(["--difficulty", "impossible", "analyze", "--board", "XX..O...."]) == 0
    assert "best=2" in caplog.text
    assert "unsafe=[3, 5, 6, 7, 8]" in caplog.text


@pytest.mark.parametrize("bad", ["abc", "XX.OO...", "XXXOOO...", "XXXOO....", "XOXXOOOXX"])
def test_invalid_or_finished_boards_exit_2(bad):
    assert main(["best-move", "--board", bad]) == 2
    assert main(["analyze", "--board", bad]) == 2


def test_invalid_env_seed_exits_2(monkeypatch):
    monkeypatch.setenv("TTT_SEED", "not-a-number")
    assert main(["best-move", "--board", "X........"]) == 2


def test_play_two_player_to_a_win(monkeypatch, capsys):
    _feed(monkeypatch, "0\n3\n1\n4\n2\nq\n")
    assert main(["play", "--two-player"]) == 0
    out = capsys.readouterr().out
    assert "It's Player 2's turn." in out
    assert "Player 1 wins!" in out


def test_play_against_computer(monkeypatch, capsys, caplog):
    _feed(monkeypatch, "4\nabc\n4\nr\nq\n")
    assert main(["--seed", "3", "--difficulty", "impossible", "play"]) == 0
    out = capsys.readouterr().out
    assert out.count("It's Player 1's turn.") >= 3
    assert "Invalid move or game over" in caplog.text
    assert "Enter a cell 0-8" in caplog.text


def test_play_waits_before_computer_reply(monkeypatch, capsys):
    slept = []
    monkeypatch.setattr(cli.time, "sleep", lambda s: slept.append(s))
    _feed(monkeypatch, "4\nq\n")
    assert main(["--difficulty", "impossible", "play", "--delay", "0.5"]) == 0
    assert slept == [0.5]
    assert "It's Player 2's turn." in capsys.readouterr().out


def test_play_changes_difficulty(monkeypatch, caplog):
    _feed(monkeypatch, "d hard\nq\n")
    assert main(["play"]) == 0
    assert "Difficulty set to: hard" in caplog.text


def test_render_board_labels_empty_cells():
    text = render_board(("X", "", "", "", "O", "", "", "", ""))
    assert text.splitlines()[0] == "X | 1 | 2"
    assert text.splitlines()[2] == "3 | O | 5"


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out
