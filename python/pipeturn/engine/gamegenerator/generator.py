"""Generates random tiles and grids, and scrambles levels for play."""

from __future__ import annotations

import logging
import random

from pipeturn import config
from pipeturn.models.grid import Grid
from pipeturn.models.tile import Tile

logger = logging.getLogger(__name__)


class GameGenerator:
    """Builds and scrambles puzzles. Every method takes an optional ``rng``."""

    @staticmethod
    def random_tile(
        rng: random.Random | None = None, allow_empty: bool = False
    ) -> Tile:
        return Tile.random(rng, allow_empty)

    @staticmethod
    def random_grid(
        height: int,
        width: int,
        rng: random.Random | None = None,
        allow_empty: bool = True,
    ) -> Grid:
        """Return a grid of random tiles. It is almost never solvable."""
        return Grid.from_generator(
            height, width, lambda _r, _c: Tile.random(rng, allow_empty)
        )

    @staticmethod
    def scramble(grid: Grid, rng: random.Random | None = None) -> None:
        """Scramble *grid* in-place by giving every tile a random direction."""
        grid.shuffle(rng)

    @staticmethod
    def generate(
        level: str | Grid,
        rng: random.Random | None = None,
        max_attempts: int = 100,
        require_non_empty: bool | None = None,
    ) -> Grid:
        """Return a scrambled copy of *level* that is not already solved.

        *level* is a grid or its text form. Some levels cannot be unsolved
        by turning tiles (an all-empty grid, when empty grids count as
        solved); after *max_attempts* tries the last scramble is returned
        as it is.
        """
        if require_non_empty is None:
            require_non_empty = config.REQUIRE_NON_EMPTY
        grid = Grid.parse(level) if isinstance(level, str) else level.copy()

        for attempt in range(1, max_attempts + 1):
            GameGenerator.scramble(grid, rng)
            if not grid.solved(require_non_empty):
                logger.debug("Scrambled %dx%d level in %d attempt(s)",
                             grid.height, grid.width, attempt)
                return grid

        logger.info("Level stayed solved after %d scrambles", max_attempts)
        return grid
