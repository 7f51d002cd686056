"""Sliding puzzle solver — A* over Manhattan distance."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from time import perf_counter

from npuzzle.engine.frontier import Frontier
from npuzzle.engine.searchnode import SearchNode
from npuzzle.engine.solvability import is_solvable
from npuzzle.errors import InvalidArgumentError, SearchAbortedError, SolverError
from npuzzle.models.board import Board, Direction

logger = logging.getLogger(__name__)

UNSOLVABLE_MOVES = -1


class SolverState(StrEnum):
    SOLVABLE = "solvable"
    UNSOLVABLE = "unsolvable"


class SearchStatus(StrEnum):
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"
    ABORTED = "aborted"


@dataclass(frozen=True)
class SolveResult:
    """Outcome of one search run."""

    status: SearchStatus
    moves: int
    solution: tuple[Board, ...]
    expanded: int = 0
    generated: int = 0
    elapsed: float = 0.0

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED


class Solver:
    """Finds a shortest slide sequence from *initial* to the goal board.

    Solvability is decided once, here, by the inversion-parity test.  The
    search itself runs on the first call to :meth:`solve` (or to any query
    that needs its result) and is cached afterwards.

    *max_expansions* bounds the number of expanded nodes; hitting it ends
    the search with :attr:`SearchStatus.ABORTED`.
    """

    def __init__(self, initial: Board | None, max_expansions: int | None = None) -> None:
        if initial is None:
            raise InvalidArgumentError("Initial board cannot be None.")
        if max_expansions is not None and max_expansions < 1:
            raise InvalidArgumentError("max_expansions must be a positive integer.")

        self.initial = initial
        self.max_expansions = max_expansions
        self.state = SolverState.SOLVABLE if is_solvable(initial) else SolverState.UNSOLVABLE
        self._result: SolveResult | None = None
        logger.info("%d×%d board is %s", initial.size, initial.size, self.state)

    # -- search ---------------------------------------------------------------

    def solve(self) -> SolveResult:
        """Run the search (once) and return its result."""
        if self._result is None:
            if self.state is SolverState.UNSOLVABLE:
                self._result = SolveResult(
                    status=SearchStatus.UNSOLVABLE,
                    moves=UNSOLVABLE_MOVES,
                    solution=(),
                )
            else:
                self._result = self._search()
            logger.info(
                "Search %s: moves=%d expanded=%d generated=%d elapsed=%.3fs",
                self._result.status,
                self._result.moves,
                self._result.expanded,
                self._result.generated,
                self._result.elapsed,
            )
        return self._result

    def _search(self) -> SolveResult:
        t0 = perf_counter()
        frontier = Frontier()
        closed: set[Board] = set()
        expanded = 0

        frontier.push(SearchNode(self.initial, 0, None))

        while frontier:
            current = frontier.pop()

            if current.board.is_goal():
                return SolveResult(
                    status=SearchStatus.SOLVED,
                    moves=current.moves,
                    solution=tuple(current.path()),
                    expanded=expanded,
                    generated=frontier.pushed,
                    elapsed=perf_counter() - t0,
                )

            if self.max_expansions is not None and expanded >= self.max_expansions:
                logger.warning(
                    "Expansion ceiling of %d reached; %d nodes still queued",
                    self.max_expansions,
                    len(frontier),
                )
                return SolveResult(
                    status=SearchStatus.ABORTED,
                    moves=UNSOLVABLE_MOVES,
                    solution=(),
                    expanded=expanded,
                    generated=frontier.pushed,
                    elapsed=perf_counter() - t0,
                )

            # The closed set is only consulted here, so a board already on
            # the frontier can be queued (and expanded) again.
            closed.add(current.board)
            expanded += 1

            previous = current.previous.board if current.previous is not None else None
            for neighbor in current.board.neighbors():
                if neighbor != previous and neighbor not in closed:
                    frontier.push(SearchNode(neighbor, current.moves + 1, current))

        raise SolverError("Frontier exhausted on a board that passed the parity test.")

    # -- queries --------------------------------------------------------------

    def is_solvable(self) -> bool:
        return self.state is SolverState.SOLVABLE

    def moves(self) -> int:
        """Minimum number of moves, or ``UNSOLVABLE_MOVES`` if unsolvable."""
        result = self.solve()
        if result.status is SearchStatus.ABORTED:
            raise SearchAbortedError(result.expanded)
        return result.moves

    def solution(self) -> list[Board]:
        """Boards from the initial board to the goal, or ``[]`` if unsolvable."""
        result = self.solve()
        if result.status is SearchStatus.ABORTED:
            raise SearchAbortedError(result.expanded)
        return list(result.solution)

    def directions(self) -> list[Direction]:
        """The solution as tile moves, ``[]`` if solved or unsolvable."""
        path = self.solution()
        return [a.direction_to(b) for a, b in zip(path, path[1:])]

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        if board.is_goal():
            return None
        moves = Solver(board).directions()
        return moves[0] if moves else None
