"""Plain text output — the same layout as the puzzle file format."""

from __future__ import annotations

from npuzzle.engine.puzzlesolver import Solver
from npuzzle.models.board import Board


def format_board(board: Board) -> str:
    """Return the size on one line, then one line per row of ``%2d`` cells."""
    lines = [str(board.size)]
    for row in board.tiles:
        lines.append("".join(f"{v:2d} " for v in row))
    return "\n".join(lines) + "\n"


def format_solution(solver: Solver) -> str:
    """Header line, then every board of the path, each followed by a blank line."""
    if not solver.is_solvable():
        return "No solution possible\n"
    header = f"Minimum number of moves = {solver.moves()}\n"
    return header + "".join(format_board(board) + "\n" for board in solver.solution())
