from pipeturn.models.errors import (
    CapacityOverflow,
    IndexOutOfRange,
    InvalidTileCode,
    ParseError,
    SizeInvalid,
    SizeMissing,
    TileCountMismatch,
)
from pipeturn.models.grid import Grid
from pipeturn.models.tile import Direction, Tile, TileKind

__all__ = [
    "CapacityOverflow",
    "Direction",
    "Grid",
    "IndexOutOfRange",
    "InvalidTileCode",
    "ParseError",
    "SizeInvalid",
    "SizeMissing",
    "Tile",
    "TileCountMismatch",
    "TileKind",
]
