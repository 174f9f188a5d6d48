"""Tile model for the pipe-rotation puzzle.

A tile is one cell's pipe piece. Its *kind* fixes the shape and its
*direction* fixes how that shape is turned. Each tile has a one-character
code used by the level text format::

     7- -8- -9        ^ > v <   endpoints
     |   |   |        /         straight, vertical
                      -         straight, horizontal
     |   |   |        (space)   empty
     4- -5- -6
     |   |   |
                      The numbers follow a numeric keypad:
     |   |   |        each one's open edges point the way
     1- -2- -3        its neighbours on the keypad do.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import StrEnum

from pipeturn.models.errors import InvalidTileCode


class Direction(StrEnum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @classmethod
    def random(cls, rng: random.Random | None = None) -> Direction:
        return (rng or random).choice(_CLOCKWISE)

    def rotate_clockwise(self) -> Direction:
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % 4]

    def opposite(self) -> Direction:
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 2) % 4]

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)


_CLOCKWISE: tuple[Direction, ...] = (
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
)


class TileKind(StrEnum):
    EMPTY = "empty"
    ENDPOINT = "endpoint"
    STRAIGHT = "straight"
    ELBOW = "elbow"
    TEE = "tee"
    CROSS = "cross"

    @property
    def oriented(self) -> bool:
        """Whether tiles of this kind carry a direction."""
        return self not in (TileKind.EMPTY, TileKind.CROSS)


@dataclass(eq=False)
class Tile:
    """A rotatable puzzle piece.

    ``direction`` means something different for each kind:

    - ``ENDPOINT``: the single open edge.
    - ``STRAIGHT``: the axis; ``UP`` and ``DOWN`` are the same tile.
    - ``ELBOW``: the edge a clockwise turn starts from, so ``UP`` opens
      up and right.
    - ``TEE``: the one closed edge.

    ``EMPTY`` and ``CROSS`` have no direction.
    """

    kind: TileKind
    direction: Direction | None = None

    def __post_init__(self) -> None:
        if self.kind.oriented and self.direction is None:
            raise ValueError(f"A {self.kind} tile needs a direction.")
        if not self.kind.oriented and self.direction is not None:
            raise ValueError(f"A {self.kind} tile has no direction.")

    # -- construction helpers -------------------------------------------------

    @classmethod
    def empty(cls) -> Tile:
        return cls(TileKind.EMPTY)

    @classmethod
    def endpoint(cls, direction: Direction) -> Tile:
        return cls(TileKind.ENDPOINT, direction)

    @classmethod
    def straight(cls, direction: Direction) -> Tile:
        return cls(TileKind.STRAIGHT, direction)

    @classmethod
    def elbow(cls, direction: Direction) -> Tile:
        return cls(TileKind.ELBOW, direction)

    @classmethod
    def tee(cls, direction: Direction) -> Tile:
        return cls(TileKind.TEE, direction)

    @classmethod
    def cross(cls) -> Tile:
        return cls(TileKind.CROSS)

    @classmethod
    def random(
        cls, rng: random.Random | None = None, allow_empty: bool = False
    ) -> Tile:
        """Return a tile of random kind and direction."""
        kinds = list(TileKind) if allow_empty else list(TileKind)[1:]
        kind = (rng or random).choice(kinds)
        return cls(kind, Direction.random(rng) if kind.oriented else None)

    @classmethod
    def parse(cls, code: str) -> Tile:
        """Create a tile from its one-character code.

        Raises ``InvalidTileCode`` for anything that is not a tile code.
        """
        try:
            kind, direction = _FROM_CODE[code]
        except (KeyError, TypeError):
            raise InvalidTileCode(code) from None
        return cls(kind, direction)

    # -- queries --------------------------------------------------------------

    def is_open(self, direction: Direction) -> bool:
        """Check if a pipe leaves this tile through the *direction* edge."""
        kind = self.kind
        if kind is TileKind.EMPTY:
            return False
        if kind is TileKind.CROSS:
            return True
        assert self.direction is not None
        if kind is TileKind.ENDPOINT:
            return direction == self.direction
        if kind is TileKind.STRAIGHT:
            return direction.is_horizontal == self.direction.is_horizontal
        if kind is TileKind.ELBOW:
            return direction in (self.direction, self.direction.rotate_clockwise())
        return direction != self.direction

    def fits(self, direction: Direction, other: Tile) -> bool:
        """Check if *other*, lying towards *direction*, agrees on the shared edge."""
        return self.is_open(direction) == other.is_open(direction.opposite())

    def format(self) -> str:
        if self.kind is TileKind.STRAIGHT:
            assert self.direction is not None
            return "-" if self.direction.is_horizontal else "/"
        return _TO_CODE[(self.kind, self.direction)]

    # -- mutation -------------------------------------------------------------

    def rotate(self) -> Tile:
        """Return this tile turned one step clockwise."""
        turned = self.copy()
        turned.rotate_in_place()
        return turned

    def rotate_in_place(self) -> None:
        if self.direction is not None:
            self.direction = self.direction.rotate_clockwise()

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Give this tile a random direction, keeping its kind."""
        if self.kind.oriented:
            self.direction = Direction.random(rng)

    def copy(self) -> Tile:
        return Tile(self.kind, self.direction)

    # -- dunder ---------------------------------------------------------------

    def _key(self) -> tuple[TileKind, Direction | None]:
        if self.kind is TileKind.STRAIGHT and self.direction is not None:
            axis = Direction.LEFT if self.direction.is_horizontal else Direction.UP
            return (self.kind, axis)
        return (self.kind, self.direction)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return self._key() == other._key()

    # Tiles turn in place, so they compare by value but are not hashable.
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.format()


_FROM_CODE: dict[str, tuple[TileKind, Direction | None]] = {
    " ": (TileKind.EMPTY, None),
    "^": (TileKind.ENDPOINT, Direction.UP),
    ">": (TileKind.ENDPOINT, Direction.RIGHT),
    "v": (TileKind.ENDPOINT, Direction.DOWN),
    "<": (TileKind.ENDPOINT, Direction.LEFT),
    "/": (TileKind.STRAIGHT, Direction.UP),
    "-": (TileKind.STRAIGHT, Direction.LEFT),
    "1": (TileKind.ELBOW, Direction.UP),
    "7": (TileKind.ELBOW, Direction.RIGHT),
    "9": (TileKind.ELBOW, Direction.DOWN),
    "3": (TileKind.ELBOW, Direction.LEFT),
    "8": (TileKind.TEE, Direction.UP),
    "6": (TileKind.TEE, Direction.RIGHT),
    "2": (TileKind.TEE, Direction.DOWN),
    "4": (TileKind.TEE, Direction.LEFT),
    "5": (TileKind.CROSS, None),
}

_TO_CODE: dict[tuple[TileKind, Direction | None], str] = {
    v: k for k, v in _FROM_CODE.items() if v[0] is not TileKind.STRAIGHT
}
