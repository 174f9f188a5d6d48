"""Paths and settings, overridable from the environment.

``PIPETURN_LEVELS_DIR``         directory of ``*.txt`` level files
``PIPETURN_LOG_LEVEL``          log level for the command-line tool
``PIPETURN_REQUIRE_NON_EMPTY``  ``0`` lets an all-empty grid count as solved
"""

from __future__ import annotations

import os
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/pipeturn/
ASSETS_DIR = ROOT / "engine" / "levels" / "assets"


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off", "")


LEVELS_DIR = Path(os.getenv("PIPETURN_LEVELS_DIR", str(ASSETS_DIR)))
LOG_LEVEL = os.getenv("PIPETURN_LOG_LEVEL", "WARNING").upper()
REQUIRE_NON_EMPTY = _env_flag("PIPETURN_REQUIRE_NON_EMPTY", True)
