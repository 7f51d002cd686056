"""Puzzle file reader and plain text printer."""

from __future__ import annotations

from pathlib import Path

import pytest

from npuzzle.engine.puzzlesolver import Solver
from npuzzle.models.board import Board
from npuzzle_frontend.io import (
    PuzzleFormatError,
    format_board,
    format_solution,
    parse_board,
    read_board,
)

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


# -- reader -------------------------------------------------------------------


def test_read_board_from_file() -> None:
    board = read_board(FIXTURES_DIR / "puzzle04.txt")
    assert board == Board.from_rows([[0, 1, 3], [4, 2, 5], [7, 8, 6]])
    assert board.blank_pos == (0, 0)


def test_parse_ignores_layout_whitespace() -> None:
    assert parse_board("2 1 0\n\n 3   2") == Board.from_rows([[1, 0], [3, 2]])


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   \n",
        "3\n1 2 x\n",
        "1\n0\n",
        "2\n1 2 3\n",
        "2\n1 2 3 0 4\n",
        "2\n1 2 3 4\n",
        "2\n1 1 3 0\n",
    ],
)
def test_parse_rejects_malformed_text(text: str) -> None:
    with pytest.raises(PuzzleFormatError):
        parse_board(text)


@pytest.mark.parametrize("name", ["malformed-short.txt", "malformed-duplicate.txt"])
def test_read_rejects_malformed_files(name: str) -> None:
    with pytest.raises(ValueError):
        read_board(FIXTURES_DIR / name)


# -- printer ------------------------------------------------------------------


def test_format_board_matches_file_format() -> None:
    board = Board.from_rows([[1, 0], [3, 2]])
    text = format_board(board)
    assert text == "2\n 1  0 \n 3  2 \n"
    assert parse_board(text) == board


def test_format_solution_lists_every_board() -> None:
    text = format_solution(Solver(Board.from_rows([[1, 0], [3, 2]])))
    assert text == (
        "Minimum number of moves = 1\n"
        "2\n 1  0 \n 3  2 \n\n"
        "2\n 1  2 \n 3  0 \n\n"
    )


def test_format_solution_unsolvable() -> None:
    text = format_solution(Solver(Board.from_rows([[2, 1], [3, 0]])))
    assert text == "No solution possible\n"
