"""Min-priority queue of search nodes."""

from __future__ import annotations

import heapq
import itertools

from npuzzle.engine.searchnode import SearchNode


class Frontier:
    """Binary min-heap keyed by ``moves + heuristic``.

    Equal priorities pop in insertion order.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, SearchNode]] = []
        self._counter = itertools.count()
        self.pushed: int = 0
        self.peak: int = 0

    def push(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (node.priority, next(self._counter), node))
        self.pushed += 1
        self.peak = max(self.peak, len(self._heap))

    def pop(self) -> SearchNode:
        """Remove and return the lowest-priority node.

        Raises ``IndexError`` when the frontier is empty.
        """
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
