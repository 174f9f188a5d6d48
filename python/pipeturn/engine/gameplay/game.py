"""Core gameplay logic: applies commands and keeps the solved flag current."""

from __future__ import annotations

import logging

from pipeturn import config
from pipeturn.engine.gameplay.commands import (
    Command,
    InsertColumn,
    InsertRow,
    MoveCursor,
    Noop,
    RemoveColumn,
    RemoveRow,
    ReplaceCursorTile,
    ReplaceTileAt,
    Reset,
    RotateCursorTile,
    RotateTileAt,
)
from pipeturn.models.grid import Grid
from pipeturn.models.tile import Direction, Tile

logger = logging.getLogger(__name__)


class Game:
    """Owns a grid, a cursor and a cached solved flag.

    The grid handed in (at construction or by ``Reset``) is copied, so
    later changes to the caller's object cannot go behind the flag.

    All changes go through ``apply``. Each command that touches the grid
    recomputes the solved flag before returning, so ``solved`` is never
    stale.
    """

    def __init__(
        self, grid: Grid | None = None, require_non_empty: bool | None = None
    ) -> None:
        self.require_non_empty = (
            config.REQUIRE_NON_EMPTY
            if require_non_empty is None
            else require_non_empty
        )
        self._grid = grid.copy() if grid is not None else Grid.empty(1, 1)
        self._row = 0
        self._col = 0
        self._solved = self._grid.solved(self.require_non_empty)

    # -- queries --------------------------------------------------------------

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def cursor(self) -> tuple[int, int]:
        return (self._row, self._col)

    @property
    def row(self) -> int:
        return self._row

    @property
    def col(self) -> int:
        return self._col

    @property
    def solved(self) -> bool:
        return self._solved

    # -- commands -------------------------------------------------------------

    def apply(self, command: Command) -> None:
        """Apply *command* to this game.

        Raises ``IndexOutOfRange`` for an explicit cell or index outside
        the grid; the game is left unchanged in that case.
        """
        logger.debug("apply %r at cursor %s", command, self.cursor)

        if isinstance(command, Noop):
            return
        if isinstance(command, Reset):
            self._reset(command.grid)
        elif isinstance(command, MoveCursor):
            self._move_cursor(command.direction)
        elif isinstance(command, RotateCursorTile):
            self._rotate_tile(self._row, self._col)
        elif isinstance(command, RotateTileAt):
            self._rotate_tile(command.row, command.col)
        elif isinstance(command, ReplaceCursorTile):
            self._replace_tile(self._row, self._col, command.tile)
        elif isinstance(command, ReplaceTileAt):
            self._replace_tile(command.row, command.col, command.tile)
        elif isinstance(command, InsertRow):
            self._insert_row(command.index)
        elif isinstance(command, RemoveRow):
            self._remove_row(command.index)
        elif isinstance(command, InsertColumn):
            self._insert_column(command.index)
        elif isinstance(command, RemoveColumn):
            self._remove_column(command.index)
        else:
            raise TypeError(f"Unknown command: {command!r}")

    # -- helpers --------------------------------------------------------------

    def _refresh(self) -> None:
        self._solved = self._grid.solved(self.require_non_empty)

    def _reset(self, grid: Grid) -> None:
        self._grid = grid.copy()
        self._row = 0
        self._col = 0
        self._refresh()

    def _move_cursor(self, direction: Direction) -> None:
        if direction is Direction.UP and self._row > 0:
            self._row -= 1
        elif direction is Direction.DOWN and self._row < self._grid.height - 1:
            self._row += 1
        elif direction is Direction.LEFT and self._col > 0:
            self._col -= 1
        elif direction is Direction.RIGHT and self._col < self._grid.width - 1:
            self._col += 1

    def _rotate_tile(self, row: int, col: int) -> None:
        self._grid.rotate(row, col)
        self._refresh()

    def _replace_tile(self, row: int, col: int, tile: Tile) -> None:
        self._grid.set(row, col, tile.copy())
        self._refresh()

    def _insert_row(self, index: int) -> None:
        self._grid.insert_row(index)
        if self._row >= index:
            self._row += 1
        self._refresh()

    def _remove_row(self, index: int) -> None:
        if self._grid.height == 1:
            return
        self._grid.remove_row(index)
        self._row = min(self._row, self._grid.height - 1)
        self._refresh()

    def _insert_column(self, index: int) -> None:
        self._grid.insert_column(index)
        if self._col >= index:
            self._col += 1
        self._refresh()

    def _remove_column(self, index: int) -> None:
        if self._grid.width == 1:
            return
        self._grid.remove_column(index)
        self._col = min(self._col, self._grid.width - 1)
        self._refresh()
