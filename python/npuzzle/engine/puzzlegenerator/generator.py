"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from npuzzle.models.board import Board

logger = logging.getLogger(__name__)


class PuzzleGenerator:
    """Creates solvable puzzles by shuffling from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}.")
        return Board.solved(size)

    @staticmethod
    def scramble(
        board: Board,
        shuffles: int | None = None,
        rng: random.Random | None = None,
    ) -> Board:
        """Return *board* after *shuffles* random blank moves.

        A move never undoes the one before it.  Every result is reachable
        from *board*, so a solvable input stays solvable.
        """
        rng = rng or random.Random()
        num_shuffles = board.size * board.size * 100 if shuffles is None else shuffles
        prev: Board | None = None

        for _ in range(num_shuffles):
            neighbors = [b for b in board.neighbors() if b != prev]
            prev, board = board, rng.choice(neighbors)
        return board

    @staticmethod
    def generate(size: int, shuffles: int | None = None, seed: int | None = None) -> Board:
        """Return a random *solvable* board of the given size, never the goal."""
        rng = random.Random(seed)
        start = PuzzleGenerator.solved(size)
        board = PuzzleGenerator.scramble(start, shuffles, rng)

        # Ensure the board is not already solved
        if board.is_goal():
            logger.debug("Scramble landed on the goal; adding one more move")
            board = PuzzleGenerator.scramble(board, 1, rng)

        return board
