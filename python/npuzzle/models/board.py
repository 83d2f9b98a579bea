"""Board model for the sliding puzzle."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from npuzzle.models.errors import InvalidArgument


class Direction(StrEnum):
    """Direction in which a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset from the blank to the tile that slides into it.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down → blank shifts up
# LEFT → tile at (br, bc+1) moves left → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right→ blank shifts left
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


@dataclass(frozen=True)
class Board:
    """An immutable n×n sliding puzzle board.

    Tiles are stored as a tuple of row tuples. 0 represents the blank.
    Two boards are equal (and hash equal) when their layouts match.
    """

    tiles: Sequence[Sequence[int]]
    size: int = field(init=False, compare=False)
    blank_pos: tuple[int, int] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        grid = self.tiles
        if grid is None:
            raise InvalidArgument("Board grid must not be None.")
        try:
            rows = tuple(tuple(row) for row in grid)
        except TypeError as exc:
            raise InvalidArgument(f"Board grid must be a sequence of rows: {exc}") from exc
        n = len(rows)
        if n == 0:
            raise InvalidArgument("Board grid must have at least one row.")
        for r, row in enumerate(rows):
            if len(row) != n:
                raise InvalidArgument(
                    f"Board grid must be square: row {r} has {len(row)} "
                    f"tiles, expected {n}."
                )

        blank_pos: tuple[int, int] | None = None
        for r, row in enumerate(rows):
            for c, v in enumerate(row):
                if v == 0:
                    blank_pos = (r, c)
                    break
            if blank_pos is not None:
                break
        if blank_pos is None:
            raise InvalidArgument("Board grid has no blank (0) tile.")

        # frozen dataclass: normalise fields through object.__setattr__
        object.__setattr__(self, "tiles", rows)
        object.__setattr__(self, "size", n)
        object.__setattr__(self, "blank_pos", blank_pos)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise InvalidArgument(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls([flat[r * size : (r + 1) * size] for r in range(size)])

    # -- queries --------------------------------------------------------------

    def dimension(self) -> int:
        return self.size

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def _goal_value(self, row: int, col: int) -> int:
        n = self.size
        if row == n - 1 and col == n - 1:
            return 0
        return row * n + col + 1

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        return self.tiles[row][col] == self._goal_value(row, col)

    def hamming(self) -> int:
        """Number of non-blank tiles out of place."""
        count = 0
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v != 0 and v != self._goal_value(r, c):
                    count += 1
        return count

    def manhattan(self) -> int:
        """Sum of the row and column distances of every tile to its goal cell."""
        n = self.size
        dist = 0
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == 0:
                    continue
                goal_row, goal_col = divmod(v - 1, n)
                dist += abs(r - goal_row) + abs(c - goal_col)
        return dist

    def is_goal(self) -> bool:
        """Check if all tiles are in their goal positions."""
        for r in range(self.size):
            for c in range(self.size):
                if not self.is_tile_correct(r, c):
                    return False
        return True

    # -- derived boards -------------------------------------------------------

    def twin(self) -> Board:
        """Return the board with the first two non-blank tiles swapped.

        Tiles are scanned in row-major order and the blank is never moved.
        Swapping two tiles flips the permutation parity, so exactly one of a
        board and its twin can reach the goal. A board with fewer than two
        tiles (1×1) has nothing to swap and its twin is an equal copy.
        """
        n = self.size
        cells = [(r, c) for r in range(n) for c in range(n) if self.tiles[r][c] != 0]
        if len(cells) < 2:
            return Board(self.tiles)
        (r1, c1), (r2, c2) = cells[0], cells[1]
        return self._swapped((r1, c1), (r2, c2))

    def neighbors(self) -> list[Board]:
        """Return every board one tile slide away.

        Callers must not rely on the order of the returned list.
        """
        out: list[Board] = []
        for direction in Direction:
            board = self.slide(direction)
            if board is not None:
                out.append(board)
        return out

    def slide(self, direction: Direction) -> Board | None:
        """Return the board after sliding a tile in *direction* into the blank.

        ``Direction.UP`` moves the tile **below** the blank upward. Returns
        ``None`` when no tile sits on that side of the blank.
        """
        br, bc = self.blank_pos
        dr, dc = _OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < self.size and 0 <= tc < self.size):
            return None
        return self._swapped((br, bc), (tr, tc))

    def _swapped(self, a: tuple[int, int], b: tuple[int, int]) -> Board:
        rows = [list(row) for row in self.tiles]
        (ar, ac), (br, bc) = a, b
        rows[ar][ac], rows[br][bc] = rows[br][bc], rows[ar][ac]
        return Board(rows)

    # -- formatting -----------------------------------------------------------

    def __str__(self) -> str:
        lines = [str(self.size)]
        for row in self.tiles:
            lines.append("".join(f"{v:2d} " for v in row))
        return "\n".join(lines) + "\n"
