"""Exceptions raised by the puzzle core."""

from __future__ import annotations


class SolverError(Exception):
    """Base class for solver failures."""


class InvalidArgumentError(SolverError, ValueError):
    """A required argument was missing or unusable."""


class SearchAbortedError(SolverError):
    """The search stopped at its expansion ceiling before reaching the goal."""

    def __init__(self, expanded: int) -> None:
        super().__init__(
            f"Search aborted after {expanded} expansions without reaching the goal."
        )
        self.expanded = expanded
