"""Unit tests for /connectfour/interfaces/cli.py"""

from typing import List

import pytest

from connectfour.game.rules import Status
from connectfour.interfaces.cli import SimpleCLI, main


def make_cli(inputs: List[str]):
    """CLI reading from a fixed list of answers and collecting what it prints."""
    answers = iter(inputs)
    output: List[str] = []
    cli = SimpleCLI(input_fn=lambda prompt: next(answers), output_fn=output.append)
    return cli, output


def test_replay_reports_each_drop(scenario_moves: List[int]) -> None:
    cli, output = make_cli([])
    moves = ",".join(str(c) for c in scenario_moves)
    assert cli.run(["replay", "--moves", moves]) == 0
    assert "column 0: row 5, CONTINUE" in output
    assert "column 1: row 2, WON" in output
    assert "Player red won!" in output
    assert output[-1] == "Status: WON"
    assert cli.game.status == Status.WON


def test_replay_names_and_markers() -> None:
    cli, output = make_cli([])
    cli.run(["replay", "--player1", "Ann", "--marker1", "A", "--moves", "3"])
    assert "Ann dropped into column 3 (row 5)" in output


def test_replay_reports_rejections() -> None:
    cli, output = make_cli([])
    assert cli.run(["replay", "--height", "4", "--width", "4", "--moves", "0,0,0,0,0,9"]) == 0
    assert "column 0: rejected, COLUMN_FULL" in output
    assert "column 9: rejected, INVALID_COLUMN" in output


def test_replay_bad_move_list() -> None:
    cli, output = make_cli([])
    assert cli.run(["replay", "--moves", "1,x"]) == 1
    assert output == ["Error parsing moves: '1,x'"]


def test_too_small_board() -> None:
    cli, output = make_cli([])
    assert cli.run(["replay", "--height", "3", "--moves", "0"]) == 1
    assert output == ["The board must be at least 4x4."]
    assert cli.game is None


def test_missing_command() -> None:
    cli, output = make_cli([])
    assert cli.run([]) == 1
    assert "Please specify a command" in output[0]


def test_play_handles_bad_input_and_quits() -> None:
    cli, output = make_cli(["x", "9", "0", "q"])
    assert cli.run(["play"]) == 0
    assert "Invalid input. Enter a column number, 'q' or 'r'." in output
    assert "That column does not exist." in output
    assert "red dropped into column 0 (row 5)" in output
    assert output[-1] == "Quitting game."
    assert cli.game.move_count == 1


def test_play_restart() -> None:
    cli, output = make_cli(["0", "r", "q"])
    cli.run(["play"])
    assert "Game restarted." in output
    assert cli.game.move_count == 0


def test_play_until_win_then_decline_rematch(scenario_moves: List[int]) -> None:
    cli, output = make_cli([str(c) for c in scenario_moves] + ["n"])
    assert cli.run(["play"]) == 0
    assert "Player red won!" in output
    assert cli.game.status == Status.WON


def test_play_rematch_resets_board(scenario_moves: List[int]) -> None:
    cli, output = make_cli([str(c) for c in scenario_moves] + ["y", "q"])
    cli.run(["play"])
    assert cli.game.status == Status.IN_PROGRESS
    assert cli.game.move_count == 0


def test_main_returns_exit_status(capsys: pytest.CaptureFixture) -> None:
    assert main(["replay", "--moves", "0"]) == 0
    assert "Status: IN_PROGRESS" in capsys.readouterr().out


def test_unknown_debug_level_is_refused() -> None:
    cli, _ = make_cli([])
    with pytest.raises(SystemExit):
        cli.run(["replay", "--debug-level", "loud", "--moves", "0"])
