"""Command line tests via Typer's runner."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from npuzzle.engine.solvability import is_solvable
from npuzzle.models.board import Board
from npuzzle_frontend.cli.rich.app import delay_for, render_board
from npuzzle_frontend.io import read_board
from npuzzle_frontend.main import app

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"

runner = CliRunner()


def test_solve_plain_output() -> None:
    result = runner.invoke(app, ["solve", str(FIXTURES_DIR / "puzzle04.txt")])
    assert result.exit_code == 0
    assert "Minimum number of moves = 4" in result.stdout


def test_solve_unsolvable_exit_code() -> None:
    result = runner.invoke(app, ["solve", str(FIXTURES_DIR / "puzzle3x3-unsolvable.txt")])
    assert result.exit_code == 1
    assert "No solution possible" in result.stdout


def test_solve_malformed_file() -> None:
    result = runner.invoke(app, ["solve", str(FIXTURES_DIR / "malformed-duplicate.txt")])
    assert result.exit_code == 2


def test_solve_missing_file() -> None:
    result = runner.invoke(app, ["solve", str(FIXTURES_DIR / "does-not-exist.txt")])
    assert result.exit_code == 2


def test_solve_aborts_at_expansion_ceiling() -> None:
    result = runner.invoke(
        app,
        ["solve", str(FIXTURES_DIR / "puzzle04.txt"), "--max-expansions", "1"],
    )
    assert result.exit_code == 2


def test_expansion_ceiling_from_environment() -> None:
    result = runner.invoke(
        app,
        ["solve", str(FIXTURES_DIR / "puzzle04.txt")],
        env={"NPUZZLE_MAX_EXPANSIONS": "1"},
    )
    assert result.exit_code == 2


def test_solve_rich_frontend_without_animation() -> None:
    result = runner.invoke(
        app,
        ["solve", str(FIXTURES_DIR / "puzzle2x2-01.txt"), "-f", "rich", "--no-animate"],
    )
    assert result.exit_code == 0
    assert "Completed in 1 move" in result.stdout
    assert "Manhattan" in result.stdout


def test_solve_rich_frontend_unsolvable() -> None:
    result = runner.invoke(
        app,
        ["solve", str(FIXTURES_DIR / "puzzle2x2-unsolvable.txt"), "-f", "rich", "--no-animate"],
    )
    assert result.exit_code == 1
    assert "No solution possible" in result.stdout


def test_check_command() -> None:
    ok = runner.invoke(app, ["check", str(FIXTURES_DIR / "puzzle04.txt")])
    assert ok.exit_code == 0
    assert "Solvable" in ok.stdout

    bad = runner.invoke(app, ["check", str(FIXTURES_DIR / "puzzle2x2-unsolvable.txt")])
    assert bad.exit_code == 1


def test_generate_writes_solvable_puzzle(tmp_path: Path) -> None:
    out = tmp_path / "puzzles" / "gen.txt"
    result = runner.invoke(app, ["generate", "-s", "4", "--seed", "5", "-o", str(out)])
    assert result.exit_code == 0
    board = read_board(out)
    assert board.size == 4
    assert is_solvable(board)


def test_generate_to_stdout_is_parseable() -> None:
    result = runner.invoke(app, ["generate", "-s", "3", "--seed", "9", "--shuffles", "20"])
    assert result.exit_code == 0
    assert result.stdout.startswith("3\n")


@pytest.mark.parametrize("moves, expected", [(0, 0.7), (10, 0.7), (11, 0.15), (49, 0.15), (50, 0.05)])
def test_animation_delay_schedule(moves: int, expected: float) -> None:
    assert delay_for(moves) == expected


def test_render_board_shows_step_and_heuristics() -> None:
    board = Board.from_rows([[8, 1, 3], [4, 0, 2], [7, 6, 5]])
    table = render_board(board, step=2)
    assert table.title == "Step 2"
    assert table.caption == "Hamming: 5    Manhattan: 10"
    assert len(table.columns) == 3
    assert len(table.rows) == 3
    assert render_board(board).title is None
