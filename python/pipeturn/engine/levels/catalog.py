"""Read-only, ordered catalog of level texts."""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterator, Sequence
from pathlib import Path

from pipeturn import config
from pipeturn.models.errors import ParseError
from pipeturn.models.grid import Grid

logger = logging.getLogger(__name__)


class LevelCatalog(Sequence[str]):
    """Level texts loaded once from ``*.txt`` files, ordered by file name.

    Every level is parsed while loading, so a broken file stops the host
    before a session starts rather than in the middle of one.
    """

    def __init__(self, names: list[str], texts: list[str]) -> None:
        if len(names) != len(texts):
            raise ValueError("Every level needs exactly one name.")
        self._names = tuple(names)
        self._texts = tuple(texts)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_directory(cls, directory: Path) -> LevelCatalog:
        paths = sorted(p for p in directory.glob("*.txt") if p.is_file())
        names: list[str] = []
        texts: list[str] = []
        for path in paths:
            text = path.read_text(encoding="utf-8")
            try:
                Grid.parse(text)
            except ParseError as exc:
                exc.add_note(f"while loading level file {path}")
                raise
            names.append(path.stem)
            texts.append(text)

        logger.info("Loaded %d level(s) from %s", len(texts), directory)
        return cls(names, texts)

    # -- queries --------------------------------------------------------------

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def parse(self, index: int) -> Grid:
        """Return a fresh grid for level *index*."""
        return Grid.parse(self._texts[index])

    def __getitem__(self, index: int) -> str:  # type: ignore[override]
        return self._texts[index]

    def __len__(self) -> int:
        return len(self._texts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._texts)


@functools.cache
def default_catalog() -> LevelCatalog:
    """Return the process-wide catalog, loading it on first use."""
    return LevelCatalog.from_directory(config.LEVELS_DIR)
