"""Walks a player through the levels of a catalog."""

from __future__ import annotations

import logging
import random

from pipeturn.engine.gamegenerator import GameGenerator
from pipeturn.engine.gameplay.commands import Command, Reset
from pipeturn.engine.gameplay.game import Game
from pipeturn.engine.levels import LevelCatalog

logger = logging.getLogger(__name__)


class LevelSession:
    """Starts, restarts and switches levels on a single ``Game``.

    Each start scrambles a fresh copy of the level text. Switching levels
    wraps around at either end of the catalog.
    """

    def __init__(
        self,
        catalog: LevelCatalog,
        rng: random.Random | None = None,
        game: Game | None = None,
    ) -> None:
        self.catalog = catalog
        self.rng = rng
        self.game = game if game is not None else Game()
        self.level: int | None = None
        if len(catalog):
            self.start(0)

    def start(self, index: int) -> None:
        if not 0 <= index < len(self.catalog):
            raise IndexError(
                f"Level {index} outside 0..{len(self.catalog) - 1}."
            )
        grid = GameGenerator.generate(self.catalog[index], self.rng)
        self.game.apply(Reset(grid))
        self.level = index
        logger.info("Started level %d (%s)", index, self.catalog.names[index])

    def restart(self) -> None:
        if self.level is not None:
            self.start(self.level)

    def next_level(self) -> None:
        if not len(self.catalog):
            return
        nxt = 0 if self.level is None else self.level + 1
        self.start(nxt % len(self.catalog))

    def previous_level(self) -> None:
        if not len(self.catalog):
            return
        prev = 0 if self.level is None else self.level - 1
        self.start(prev % len(self.catalog))

    def apply(self, command: Command) -> None:
        self.game.apply(command)

    @property
    def solved(self) -> bool:
        return self.game.solved
