"""Errors raised by the puzzle models."""

from __future__ import annotations


class ParseError(ValueError):
    """A level text could not be turned into a grid."""


class SizeMissing(ParseError):
    """The ``<height>,<width>`` header line is absent or incomplete."""


class SizeInvalid(ParseError):
    """A header dimension is not a positive decimal integer."""


class TileCountMismatch(ParseError):
    """The tile rows do not match the declared dimensions."""


class InvalidTileCode(ParseError):
    """A character does not name any tile."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Invalid tile code: {code!r}")
        self.code = code


class CapacityOverflow(ParseError):
    """``height * width`` is larger than a grid can hold."""


class IndexOutOfRange(IndexError):
    """A row, column or cell address lies outside the grid."""
