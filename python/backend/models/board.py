"""Board model for the sliding puzzle solver."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from backend.models.exceptions import InvalidBoardError

Tiles = tuple[tuple[int, ...], ...]

# Blank offsets in the order neighbors are generated: up, down, left, right.
_BLANK_STEPS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Direction(StrEnum):
    """Direction a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class Board:
    """Immutable sliding puzzle configuration.

    Tiles are stored as a tuple of row tuples. 0 represents the blank space.
    Two boards are equal when every cell matches.

    The plain constructor trusts its arguments; use :meth:`from_rows` or
    :meth:`from_flat` for caller-supplied grids.
    """

    size: int
    tiles: Tiles
    blank_pos: tuple[int, int] = field(compare=False)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        """Create a board from a list of rows, validating the grid.

        Example::

            Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
        """
        size = len(rows)
        for r, row in enumerate(rows):
            if len(row) != size:
                raise InvalidBoardError(
                    f"Row {r} has {len(row)} tiles, expected {size} "
                    f"for a {size}×{size} board."
                )
        return cls.from_flat(size, [v for row in rows for v in row])

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list, validating the grid.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if size < 2:
            raise InvalidBoardError(f"Board size must be at least 2, got {size}.")
        if len(flat) != size * size:
            raise InvalidBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise InvalidBoardError(
                f"Tiles must be a permutation of 0..{size * size - 1}, "
                f"got {list(flat)}."
            )
        tiles = tuple(
            tuple(int(v) for v in flat[r * size : (r + 1) * size])
            for r in range(size)
        )
        blank = list(flat).index(0)
        return cls(size=size, tiles=tiles, blank_pos=divmod(blank, size))

    @classmethod
    def goal(cls, size: int) -> Board:
        """Return the goal board (all tiles in order, blank bottom-right)."""
        flat = list(range(1, size * size)) + [0]
        return cls.from_flat(size, flat)

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def flat(self) -> tuple[int, ...]:
        return tuple(v for row in self.tiles for v in row)

    def hamming(self) -> int:
        """Number of tiles (blank excluded) out of their goal position."""
        n = self.size
        return sum(
            1
            for r, row in enumerate(self.tiles)
            for c, v in enumerate(row)
            if v != 0 and v != r * n + c + 1
        )

    def manhattan(self) -> int:
        """Sum of the grid distances of every tile to its goal cell."""
        n = self.size
        distance = 0
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v != 0:
                    goal_r, goal_c = divmod(v - 1, n)
                    distance += abs(r - goal_r) + abs(c - goal_c)
        return distance

    def is_solved(self) -> bool:
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

    # -- transitions ----------------------------------------------------------

    def neighbors(self) -> list[Board]:
        """Return every board reachable by sliding one tile into the blank.

        The blank is tried moving up, down, left, then right; moves that
        would leave the grid are skipped, so the result holds 2 to 4 boards.
        """
        br, bc = self.blank_pos
        result: list[Board] = []
        for dr, dc in _BLANK_STEPS:
            nr, nc = br + dr, bc + dc
            if 0 <= nr < self.size and 0 <= nc < self.size:
                result.append(self._swap((nr, nc)))
        return result

    def direction_to(self, other: Board) -> Direction:
        """Return the tile move that turns this board into *other*.

        Raises ``ValueError`` if *other* is not a neighbor of this board.
        """
        if other not in self.neighbors():
            raise ValueError("Boards are not one slide apart.")
        br, bc = self.blank_pos
        nr, nc = other.blank_pos
        # The tile moves opposite to the blank.
        offsets = {
            (1, 0): Direction.UP,
            (-1, 0): Direction.DOWN,
            (0, 1): Direction.LEFT,
            (0, -1): Direction.RIGHT,
        }
        return offsets[(nr - br, nc - bc)]

    # -- helpers --------------------------------------------------------------

    def _swap(self, target: tuple[int, int]) -> Board:
        br, bc = self.blank_pos
        tr, tc = target
        # Rows the slide does not touch are shared with this board.
        rows = list(self.tiles)
        blank_row = list(rows[br])
        if tr == br:
            blank_row[bc], blank_row[tc] = blank_row[tc], 0
        else:
            target_row = list(rows[tr])
            blank_row[bc], target_row[tc] = target_row[tc], 0
            rows[tr] = tuple(target_row)
        rows[br] = tuple(blank_row)
        return Board(size=self.size, tiles=tuple(rows), blank_pos=(tr, tc))
