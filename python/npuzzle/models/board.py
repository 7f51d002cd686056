"""Board model for the sliding puzzle."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import StrEnum


class Direction(StrEnum):
    """Direction a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset from the blank to the tile that slides into it.
# UP   -> tile at (br+1, bc) moves up    -> blank shifts down
# DOWN -> tile at (br-1, bc) moves down  -> blank shifts up
# LEFT -> tile at (br, bc+1) moves left  -> blank shifts right
# RIGHT-> tile at (br, bc-1) moves right -> blank shifts left
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


@dataclass(frozen=True)
class Board:
    """One immutable puzzle configuration.

    Tiles are stored as a tuple of row tuples. 0 represents the blank space.
    Two boards are equal (and hash alike) when their size and tiles match;
    ``blank_pos`` is derived from the tiles.
    """

    size: int
    tiles: tuple[tuple[int, ...], ...]
    blank_pos: tuple[int, int] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == 0:
                    object.__setattr__(self, "blank_pos", (r, c))
                    return
        object.__setattr__(self, "blank_pos", (self.size - 1, self.size - 1))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        """Create a board from a square list of rows.

        Example::

            Board.from_rows([[1, 2], [3, 0]])
        """
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError(f"Expected {size} values in every row of a {size}×{size} board.")
        return cls(size=size, tiles=tuple(tuple(row) for row in rows))

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls(
            size=size,
            tiles=tuple(tuple(flat[r * size : (r + 1) * size]) for r in range(size)),
        )

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal board (tiles in order, blank bottom-right)."""
        return cls.from_flat(size, [*range(1, size * size), 0])

    # -- queries --------------------------------------------------------------

    def dimension(self) -> int:
        return self.size

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def flat(self) -> tuple[int, ...]:
        """Row-major tuple of every cell, blank included."""
        return tuple(v for row in self.tiles for v in row)

    def rows(self) -> list[list[int]]:
        return [list(row) for row in self.tiles]

    def is_goal(self) -> bool:
        """Check if all tiles are in their goal positions."""
        expected = 1
        for r in range(self.size):
            for c in range(self.size):
                if r == self.size - 1 and c == self.size - 1:
                    return self.tiles[r][c] == 0
                if self.tiles[r][c] != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col

    # -- heuristics -----------------------------------------------------------

    def hamming_distance(self) -> int:
        """Number of tiles out of place (the blank is not counted)."""
        n = self.size
        count = 0
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v != 0 and v != r * n + c + 1:
                    count += 1
        return count

    def manhattan_distance(self) -> int:
        """Sum of row and column offsets of every tile from its goal cell."""
        n = self.size
        dist = 0
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == 0:
                    continue
                gr, gc = divmod(v - 1, n)
                dist += abs(r - gr) + abs(c - gc)
        return dist

    # -- successors -----------------------------------------------------------

    def neighbors(self) -> Iterator[Board]:
        """Yield the boards one blank move away.

        The blank is swapped with the cell above, below, left and right of
        it, in that order, skipping cells off the grid.
        """
        br, bc = self.blank_pos
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = br + dr, bc + dc
            if 0 <= nr < self.size and 0 <= nc < self.size:
                yield self._swap((nr, nc))

    def slide(self, direction: Direction) -> Board | None:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns ``None`` if there is no tile on that side of the blank.
        """
        br, bc = self.blank_pos
        dr, dc = _OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < self.size and 0 <= tc < self.size):
            return None
        return self._swap((tr, tc))

    def direction_to(self, other: Board) -> Direction:
        """Return the tile move that turns this board into *other*."""
        if other.size == self.size:
            br, bc = self.blank_pos
            tr, tc = other.blank_pos
            for direction, offset in _OFFSETS.items():
                if offset == (tr - br, tc - bc) and self._swap((tr, tc)) == other:
                    return direction
        raise ValueError("Boards are not one slide apart.")

    # -- helpers --------------------------------------------------------------

    def _swap(self, target: tuple[int, int]) -> Board:
        br, bc = self.blank_pos
        tr, tc = target
        grid = [list(row) for row in self.tiles]
        grid[br][bc], grid[tr][tc] = grid[tr][tc], grid[br][bc]
        return Board(size=self.size, tiles=tuple(tuple(row) for row in grid))
