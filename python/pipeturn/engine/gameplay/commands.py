"""Commands accepted by ``Game.apply``."""

from __future__ import annotations

from dataclasses import dataclass

from pipeturn.models.grid import Grid
from pipeturn.models.tile import Direction, Tile


@dataclass(frozen=True)
class Noop:
    """Do nothing."""


@dataclass(frozen=True)
class Reset:
    """Swap in a new grid, e.g. to switch or restart a level."""

    grid: Grid


@dataclass(frozen=True)
class MoveCursor:
    direction: Direction


@dataclass(frozen=True)
class RotateCursorTile:
    """Turn the tile under the cursor clockwise."""


@dataclass(frozen=True)
class RotateTileAt:
    row: int
    col: int


@dataclass(frozen=True)
class ReplaceCursorTile:
    tile: Tile


@dataclass(frozen=True)
class ReplaceTileAt:
    row: int
    col: int
    tile: Tile


@dataclass(frozen=True)
class InsertRow:
    """Insert a row of empty tiles at ``index``."""

    index: int


@dataclass(frozen=True)
class RemoveRow:
    index: int


@dataclass(frozen=True)
class InsertColumn:
    """Insert a column of empty tiles at ``index``."""

    index: int


@dataclass(frozen=True)
class RemoveColumn:
    index: int


Command = (
    Noop
    | Reset
    | MoveCursor
    | RotateCursorTile
    | RotateTileAt
    | ReplaceCursorTile
    | ReplaceTileAt
    | InsertRow
    | RemoveRow
    | InsertColumn
    | RemoveColumn
)
