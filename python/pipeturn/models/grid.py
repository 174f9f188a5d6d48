"""Grid model for the pipe-rotation puzzle."""

from __future__ import annotations

import random
import sys
from collections import deque
from collections.abc import Callable, Iterator

from pipeturn.models.errors import (
    CapacityOverflow,
    IndexOutOfRange,
    SizeInvalid,
    SizeMissing,
    TileCountMismatch,
)
from pipeturn.models.tile import Direction, Tile, TileKind

# (direction, row offset, col offset)
_STEPS: tuple[tuple[Direction, int, int], ...] = (
    (Direction.UP, -1, 0),
    (Direction.RIGHT, 0, 1),
    (Direction.DOWN, 1, 0),
    (Direction.LEFT, 0, -1),
)


class Grid:
    """A rectangular, row-major field of tiles.

    The text form is a ``<height>,<width>`` header followed by one line of
    tile codes per row::

        2,2
        79
        13

    ``len(tiles) == height * width`` always holds; structural edits swap
    in the new dimension and the new tile list together.
    """

    def __init__(self, height: int, width: int, tiles: list[Tile]) -> None:
        _check_size(height, width)
        if len(tiles) != height * width:
            raise ValueError(
                f"Expected {height * width} tiles for a {height}×{width} grid, "
                f"got {len(tiles)}."
            )
        self._height = height
        self._width = width
        self._tiles = tiles

    # -- construction helpers -------------------------------------------------

    @classmethod
    def empty(cls, height: int, width: int) -> Grid:
        return cls.from_generator(height, width, lambda _r, _c: Tile.empty())

    @classmethod
    def from_generator(
        cls, height: int, width: int, f: Callable[[int, int], Tile]
    ) -> Grid:
        """Create a grid by calling ``f(row, col)`` for each cell, row by row."""
        _check_size(height, width)
        tiles = [f(r, c) for r in range(height) for c in range(width)]
        return cls(height, width, tiles)

    @classmethod
    def parse(cls, text: str) -> Grid:
        """Create a grid from its text form.

        Example::

            Grid.parse("1,2\\n><\\n")
        """
        lines = [line.removesuffix("\r") for line in text.split("\n")]
        while lines and lines[-1] == "":
            lines.pop()
        if not lines:
            raise SizeMissing("Missing size line.")

        parts = lines[0].split(",")
        if len(parts) < 2:
            raise SizeMissing(f"Size line {lines[0]!r} is not '<height>,<width>'.")
        height = _parse_dimension("height", parts[0])
        width = _parse_dimension("width", parts[1])
        if height * width > sys.maxsize:
            raise CapacityOverflow(f"A {height}×{width} grid has too many tiles.")

        rows = lines[1:]
        tiles: list[Tile] = []
        for line in rows:
            tiles.extend(Tile.parse(ch) for ch in line)

        if len(rows) != height or any(len(line) != width for line in rows):
            raise TileCountMismatch(
                f"Expected {height} rows of {width} tiles, got row lengths "
                f"{[len(line) for line in rows]}."
            )
        return cls(height, width, tiles)

    def serialize(self) -> str:
        lines = [f"{self._height},{self._width}"]
        for r in range(self._height):
            row = self._tiles[r * self._width : (r + 1) * self._width]
            lines.append("".join(tile.format() for tile in row))
        return "\n".join(lines) + "\n"

    # -- queries --------------------------------------------------------------

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def tiles(self) -> tuple[Tile, ...]:
        return tuple(self._tiles)

    def rows(self) -> Iterator[list[Tile]]:
        for r in range(self._height):
            yield self._tiles[r * self._width : (r + 1) * self._width]

    def get(self, row: int, col: int) -> Tile:
        """Return the tile at (row, col).

        The tile is the grid's own object: mutating it mutates the grid.
        """
        return self._tiles[self._index(row, col)]

    def set(self, row: int, col: int, tile: Tile) -> None:
        self._tiles[self._index(row, col)] = tile

    def rotate(self, row: int, col: int) -> None:
        """Turn the tile at (row, col) one step clockwise."""
        self.get(row, col).rotate_in_place()

    def solved(self, require_non_empty: bool = True) -> bool:
        """Check if every edge of every tile is matched.

        A cell passes when it opens no edge off the grid and agrees with
        its right and down neighbours; the up and left edges are covered
        by the neighbour's own check. With *require_non_empty* an
        all-empty grid never counts as solved.

        This is a local check: two separate closed networks both pass.
        See ``components`` for the number of networks.
        """
        last_row = self._height - 1
        last_col = self._width - 1
        for r in range(self._height):
            for c in range(self._width):
                tile = self._tiles[r * self._width + c]
                if (
                    (r == 0 and tile.is_open(Direction.UP))
                    or (r == last_row and tile.is_open(Direction.DOWN))
                    or (c == 0 and tile.is_open(Direction.LEFT))
                    or (c == last_col and tile.is_open(Direction.RIGHT))
                ):
                    return False
                if c < last_col and not tile.fits(
                    Direction.RIGHT, self._tiles[r * self._width + c + 1]
                ):
                    return False
                if r < last_row and not tile.fits(
                    Direction.DOWN, self._tiles[(r + 1) * self._width + c]
                ):
                    return False

        if require_non_empty:
            return any(tile.kind is not TileKind.EMPTY for tile in self._tiles)
        return True

    def components(self) -> int:
        """Count the separate pipe networks.

        Two non-empty neighbours belong to the same network when both are
        open towards each other.
        """
        seen: set[tuple[int, int]] = set()
        count = 0
        for r in range(self._height):
            for c in range(self._width):
                if (r, c) in seen or self.get(r, c).kind is TileKind.EMPTY:
                    continue
                count += 1
                seen.add((r, c))
                queue = deque([(r, c)])
                while queue:
                    cr, cc = queue.popleft()
                    tile = self.get(cr, cc)
                    for direction, dr, dc in _STEPS:
                        nr, nc = cr + dr, cc + dc
                        if not (0 <= nr < self._height and 0 <= nc < self._width):
                            continue
                        if (nr, nc) in seen or not tile.is_open(direction):
                            continue
                        if self.get(nr, nc).is_open(direction.opposite()):
                            seen.add((nr, nc))
                            queue.append((nr, nc))
        return count

    # -- structural edits -----------------------------------------------------

    def insert_row(self, index: int) -> None:
        """Insert a row of empty tiles so that it becomes row *index*."""
        if not 0 <= index <= self._height:
            raise IndexOutOfRange(
                f"Row insert index {index} outside 0..{self._height}."
            )
        at = index * self._width
        new_row = [Tile.empty() for _ in range(self._width)]
        self._tiles, self._height = (
            self._tiles[:at] + new_row + self._tiles[at:],
            self._height + 1,
        )

    def remove_row(self, index: int) -> None:
        """Remove row *index*; does nothing if it is the only row."""
        if self._height == 1:
            return
        if not 0 <= index < self._height:
            raise IndexOutOfRange(
                f"Row index {index} outside 0..{self._height - 1}."
            )
        at = index * self._width
        self._tiles, self._height = (
            self._tiles[:at] + self._tiles[at + self._width :],
            self._height - 1,
        )

    def insert_column(self, index: int) -> None:
        """Insert a column of empty tiles so that it becomes column *index*."""
        if not 0 <= index <= self._width:
            raise IndexOutOfRange(
                f"Column insert index {index} outside 0..{self._width}."
            )
        tiles: list[Tile] = []
        for row in self.rows():
            tiles.extend(row[:index])
            tiles.append(Tile.empty())
            tiles.extend(row[index:])
        self._tiles, self._width = tiles, self._width + 1

    def remove_column(self, index: int) -> None:
        """Remove column *index*; does nothing if it is the only column."""
        if self._width == 1:
            return
        if not 0 <= index < self._width:
            raise IndexOutOfRange(
                f"Column index {index} outside 0..{self._width - 1}."
            )
        tiles: list[Tile] = []
        for row in self.rows():
            tiles.extend(row[:index])
            tiles.extend(row[index + 1 :])
        self._tiles, self._width = tiles, self._width - 1

    # -- randomness -----------------------------------------------------------

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Give every tile a random direction in place; kinds stay put."""
        for tile in self._tiles:
            tile.shuffle(rng)

    # -- helpers --------------------------------------------------------------

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise IndexOutOfRange(
                f"Cell ({row}, {col}) is outside a "
                f"{self._height}×{self._width} grid."
            )
        return row * self._width + col

    def copy(self) -> Grid:
        return Grid(self._height, self._width, [t.copy() for t in self._tiles])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._height == other._height
            and self._width == other._width
            and self._tiles == other._tiles
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid.parse({self.serialize()!r})"

    def __str__(self) -> str:
        return self.serialize()


def _check_size(height: int, width: int) -> None:
    if height < 1 or width < 1:
        raise ValueError(f"Grid size must be at least 1×1, got {height}×{width}.")
    if height * width > sys.maxsize:
        raise CapacityOverflow(f"A {height}×{width} grid has too many tiles.")


def _parse_dimension(name: str, raw: str) -> int:
    if not raw.isascii() or not raw.isdigit():
        raise SizeInvalid(f"Grid {name} {raw!r} is not a decimal number.")
    value = int(raw)
    if value == 0:
        raise SizeInvalid(f"Grid {name} must not be zero.")
    return value
