"""Inversion-parity solvability test."""

from __future__ import annotations

from npuzzle.models.board import Board


def count_inversions(board: Board) -> int:
    """Count tile pairs that appear in reverse order, reading row-major.

    The blank is skipped.
    """
    flat = [v for v in board.flat() if v != 0]
    inversions = 0
    for i in range(len(flat)):
        for j in range(i + 1, len(flat)):
            if flat[i] > flat[j]:
                inversions += 1
    return inversions


def is_solvable(board: Board) -> bool:
    """Return True if *board* can reach the goal state.

    - n odd: inversions must be even
    - n even: (inversions + blank_row_from_bottom) must be odd,
      counting rows 1-based from the bottom
    """
    n = board.size
    inversions = count_inversions(board)
    if n % 2 == 1:
        return inversions % 2 == 0
    blank_row_from_bottom = n - board.blank_pos[0]
    return (inversions + blank_row_from_bottom) % 2 == 1
