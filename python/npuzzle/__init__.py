"""Optimal sliding-tile puzzle solver."""

from npuzzle.engine.puzzlesolver import (
    UNSOLVABLE_MOVES,
    SearchStatus,
    SolveResult,
    Solver,
    SolverState,
)
from npuzzle.errors import InvalidArgumentError, SearchAbortedError, SolverError
from npuzzle.models import Board, Direction

__all__ = [
    "UNSOLVABLE_MOVES",
    "Board",
    "Direction",
    "InvalidArgumentError",
    "SearchAbortedError",
    "SearchStatus",
    "SolveResult",
    "Solver",
    "SolverError",
    "SolverState",
]
