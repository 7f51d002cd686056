"""Shared fixtures: exhaustive breadth-first distances from the goal."""

from __future__ import annotations

from collections import deque

import pytest

from npuzzle.models.board import Board


def _bfs_from_goal(size: int) -> dict[tuple[int, ...], int]:
    """Map every board reachable from the goal (as a flat tuple) to its distance.

    Works on flat tuples rather than ``Board`` objects so the 3×3 table
    (181,440 states) stays quick to build.
    """
    nn = size * size
    adj: list[tuple[int, ...]] = []
    for i in range(nn):
        r, c = divmod(i, size)
        nb: list[int] = []
        if r > 0:        nb.append(i - size)
        if r < size - 1: nb.append(i + size)
        if c > 0:        nb.append(i - 1)
        if c < size - 1: nb.append(i + 1)
        adj.append(tuple(nb))

    goal = Board.solved(size).flat()
    dist = {goal: 0}
    queue = deque([goal])
    while queue:
        s = queue.popleft()
        z = s.index(0)
        d = dist[s] + 1
        for j in adj[z]:
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            t = tuple(lst)
            if t not in dist:
                dist[t] = d
                queue.append(t)
    return dist


@pytest.fixture(scope="session")
def bfs_2x2() -> dict[tuple[int, ...], int]:
    return _bfs_from_goal(2)


@pytest.fixture(scope="session")
def bfs_3x3() -> dict[tuple[int, ...], int]:
    return _bfs_from_goal(3)
