"""Puzzle file reader.

A puzzle file holds whitespace-separated integers: the board size ``n``
followed by ``n`` rows of ``n`` tiles, with ``0`` for the blank::

    3
     0  1  3
     4  2  5
     7  8  6
"""

from __future__ import annotations

import logging
from pathlib import Path

from npuzzle.models.board import Board

logger = logging.getLogger(__name__)


class PuzzleFormatError(ValueError):
    """Puzzle text that does not describe a valid board."""


def parse_board(text: str) -> Board:
    """Parse puzzle text into a validated :class:`Board`."""
    tokens = text.split()
    if not tokens:
        raise PuzzleFormatError("Puzzle is empty.")

    try:
        values = [int(tok) for tok in tokens]
    except ValueError as exc:
        raise PuzzleFormatError(f"Puzzle contains a non-integer value: {exc}") from exc

    size, flat = values[0], values[1:]
    if size < 2:
        raise PuzzleFormatError(f"Board size must be at least 2, got {size}.")
    if len(flat) != size * size:
        raise PuzzleFormatError(
            f"Expected {size * size} tiles for a {size}×{size} board, got {len(flat)}."
        )
    if sorted(flat) != list(range(size * size)):
        raise PuzzleFormatError(
            f"Tiles must be a permutation of 0..{size * size - 1}."
        )

    return Board.from_flat(size, flat)


def read_board(path: Path) -> Board:
    """Read and parse the puzzle file at *path*."""
    logger.debug("Reading puzzle from %s", path)
    return parse_board(Path(path).read_text())
