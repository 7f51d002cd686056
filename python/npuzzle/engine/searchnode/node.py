"""A* search node: one board on a partial path from the start."""

from __future__ import annotations

from dataclasses import dataclass, field

from npuzzle.models.board import Board


@dataclass(frozen=True, eq=False)
class SearchNode:
    """A board reached after ``moves`` slides, linked to the node before it.

    The Manhattan heuristic is computed once here and never again.
    Nodes compare by identity; many live nodes may share one ancestor chain.
    """

    board: Board
    moves: int
    previous: SearchNode | None = None
    heuristic: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "heuristic", self.board.manhattan_distance())

    @property
    def priority(self) -> int:
        return self.moves + self.heuristic

    def path(self) -> list[Board]:
        """Boards from the root of the chain to this node, inclusive."""
        boards: list[Board] = []
        node: SearchNode | None = self
        while node is not None:
            boards.append(node.board)
            node = node.previous
        boards.reverse()
        return boards
