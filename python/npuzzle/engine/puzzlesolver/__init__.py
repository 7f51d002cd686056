from npuzzle.engine.puzzlesolver.solver import (
    UNSOLVABLE_MOVES,
    SearchStatus,
    SolveResult,
    Solver,
    SolverState,
)

__all__ = ["UNSOLVABLE_MOVES", "SearchStatus", "SolveResult", "Solver", "SolverState"]
