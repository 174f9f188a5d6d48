"""Grid tests: text format, solve check, structural edits and networks."""

from __future__ import annotations

import random
import sys

import pytest

from pipeturn.models.errors import (
    CapacityOverflow,
    IndexOutOfRange,
    InvalidTileCode,
    SizeInvalid,
    SizeMissing,
    TileCountMismatch,
)
from pipeturn.models.grid import Grid
from pipeturn.models.tile import Direction, Tile, TileKind

LOOP = "2,2\n79\n13\n"
KEYPAD = "3,3\n789\n456\n123\n"
SPUR = "4,4\n7-89\n/ //\n/ ^/\n1--3\n"


def _codes(grid: Grid) -> list[str]:
    """Rows of tile codes, for compact assertions."""
    return ["".join(t.format() for t in row) for row in grid.rows()]


# -- construction -------------------------------------------------------------


def test_empty_grid() -> None:
    grid = Grid.empty(2, 3)
    assert (grid.height, grid.width) == (2, 3)
    assert len(grid.tiles) == 6
    assert all(t == Tile.empty() for t in grid.tiles)


@pytest.mark.parametrize(("height", "width"), [(0, 3), (3, 0), (0, 0), (-1, 2)])
def test_empty_rejects_zero_size(height: int, width: int) -> None:
    with pytest.raises(ValueError):
        Grid.empty(height, width)


def test_from_generator_calls_row_major() -> None:
    calls: list[tuple[int, int]] = []

    def make(row: int, col: int) -> Tile:
        calls.append((row, col))
        return Tile.cross() if row == col else Tile.empty()

    grid = Grid.from_generator(2, 2, make)
    assert calls == [(0, 0), (0, 1), (1, 0), (1, 1)]
    assert _codes(grid) == ["5 ", " 5"]


def test_tile_count_must_match_size() -> None:
    with pytest.raises(ValueError):
        Grid(2, 2, [Tile.empty()] * 3)


# -- text format --------------------------------------------------------------


def test_parse_loop() -> None:
    grid = Grid.parse(LOOP)
    assert (grid.height, grid.width) == (2, 2)
    assert grid.get(0, 0) == Tile.elbow(Direction.RIGHT)
    assert grid.get(1, 1) == Tile.elbow(Direction.LEFT)


@pytest.mark.parametrize("text", [LOOP, KEYPAD, SPUR, "1,3\n < \n"], ids=repr)
def test_serialize_inverts_parse(text: str) -> None:
    assert Grid.parse(text).serialize() == text


def test_parse_accepts_missing_final_newline_and_crlf() -> None:
    assert Grid.parse("2,2\n79\n13").serialize() == LOOP
    assert Grid.parse("2,2\r\n79\r\n13\r\n") == Grid.parse(LOOP)
    assert Grid.parse(LOOP + "\n\n") == Grid.parse(LOOP)


def test_round_trip_after_edits() -> None:
    rng = random.Random(7)
    grid = Grid.from_generator(3, 4, lambda _r, _c: Tile.random(rng, allow_empty=True))
    for _ in range(10):
        grid.rotate(rng.randrange(3), rng.randrange(4))
    grid.insert_column(2)
    grid.insert_row(3)

    again = Grid.parse(grid.serialize())
    assert again == grid
    assert (again.height, again.width) == (4, 5)


@pytest.mark.parametrize(
    ("text", "error"),
    [
        ("", SizeMissing),
        ("\n", SizeMissing),
        ("3\n", SizeMissing),
        ("a,2\n  \n", SizeInvalid),
        ("2,-1\n", SizeInvalid),
        ("0,2\n", SizeInvalid),
        ("2,0\n", SizeInvalid),
        ("1, 2\n><\n", SizeInvalid),
        ("2,2\n79\n", TileCountMismatch),
        ("2,2\n79\n13\n79\n", TileCountMismatch),
        ("2,2\n7\n913\n", TileCountMismatch),
        ("1,2\n>x\n", InvalidTileCode),
        ("1,1\n5\x0c", InvalidTileCode),
        ("2,1\n/\x0c/\n", InvalidTileCode),
        ("1,2\n>\x85<\n", InvalidTileCode),
        ("1,2\n>\u2028<\n", InvalidTileCode),
        (f"{sys.maxsize},2\n", CapacityOverflow),
    ],
    ids=repr,
)
def test_parse_errors(text: str, error: type[Exception]) -> None:
    with pytest.raises(error):
        Grid.parse(text)


# -- access -------------------------------------------------------------------


def test_get_returns_live_tile() -> None:
    grid = Grid.parse(LOOP)
    grid.get(0, 1).rotate_in_place()
    assert grid.get(0, 1) == Tile.elbow(Direction.LEFT)


def test_set_and_rotate() -> None:
    grid = Grid.empty(1, 2)
    grid.set(0, 0, Tile.endpoint(Direction.UP))
    grid.rotate(0, 0)
    assert _codes(grid) == ["> "]


@pytest.mark.parametrize(
    ("row", "col"), [(2, 0), (0, 2), (-1, 0), (0, -1), (5, 5)], ids=str
)
def test_out_of_range(row: int, col: int) -> None:
    grid = Grid.parse(LOOP)
    with pytest.raises(IndexOutOfRange):
        grid.get(row, col)
    with pytest.raises(IndexOutOfRange):
        grid.set(row, col, Tile.cross())
    with pytest.raises(IndexError):
        grid.rotate(row, col)


# -- solve check --------------------------------------------------------------


@pytest.mark.parametrize(
    "text",
    [
        "1,2\n><\n",
        LOOP,
        KEYPAD,
        SPUR,
        "3,3\nv  \n/  \n1-<\n",
        "2,1\nv\n^\n",
    ],
    ids=repr,
)
def test_solved_levels(text: str) -> None:
    assert Grid.parse(text).solved()


@pytest.mark.parametrize(
    "text",
    [
        "1,1\n^\n",
        "1,1\n5\n",
        "1,2\n>>\n",
        "1,2\n< \n",
        "2,2\n79\n31\n",
        "2,2\n97\n13\n",
        "1,3\n>-/\n",
    ],
    ids=repr,
)
def test_unsolved_levels(text: str) -> None:
    assert not Grid.parse(text).solved()


@pytest.mark.parametrize(("height", "width"), [(1, 1), (2, 3), (5, 5)])
def test_all_empty_is_never_solved(height: int, width: int) -> None:
    grid = Grid.empty(height, width)
    assert not grid.solved()
    assert grid.solved(require_non_empty=False)


def test_dangling_endpoint_is_not_solved() -> None:
    for code in "^>v<":
        assert not Grid.parse(f"3,3\n   \n {code} \n   \n").solved(), code


def test_open_boundary_is_not_solved() -> None:
    assert not Grid.parse("2,1\n^\nv\n").solved()
    assert not Grid.parse("1,2\n<>\n").solved()
    assert not Grid.parse("3,1\n/\n/\n/\n").solved()


def test_one_turn_breaks_a_solved_loop() -> None:
    grid = Grid.parse(LOOP)
    grid.rotate(1, 0)
    assert not grid.solved()
    for _ in range(3):
        grid.rotate(1, 0)
    assert grid.solved()


def test_disjoint_networks_still_solve() -> None:
    grid = Grid.parse("2,2\n><\n><\n")
    assert grid.solved()
    assert grid.components() == 2


# -- networks -----------------------------------------------------------------


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        (LOOP, 1),
        (KEYPAD, 1),
        (SPUR, 1),
        ("3,3\n   \n   \n   \n", 0),
        ("1,3\n^ ^\n", 2),
        ("1,2\n>>\n", 2),
    ],
    ids=repr,
)
def test_components(text: str, expected: int) -> None:
    assert Grid.parse(text).components() == expected


# -- structural edits ---------------------------------------------------------


def test_insert_row_at_top() -> None:
    grid = Grid.parse(LOOP)
    grid.insert_row(0)
    assert grid.height == 3
    assert len(grid.tiles) == 6
    assert _codes(grid) == ["  ", "79", "13"]


def test_insert_row_at_bottom() -> None:
    grid = Grid.parse(LOOP)
    grid.insert_row(2)
    assert _codes(grid) == ["79", "13", "  "]


def test_remove_row() -> None:
    grid = Grid.parse(KEYPAD)
    grid.remove_row(1)
    assert grid.height == 2
    assert _codes(grid) == ["789", "123"]


def test_remove_last_row_is_noop() -> None:
    grid = Grid.parse("1,2\n><\n")
    grid.remove_row(0)
    assert grid.height == 1
    assert _codes(grid) == ["><"]


def test_insert_column() -> None:
    grid = Grid.parse(LOOP)
    grid.insert_column(1)
    assert grid.width == 3
    assert _codes(grid) == ["7 9", "1 3"]

    grid.insert_column(3)
    assert _codes(grid) == ["7 9 ", "1 3 "]


def test_remove_column() -> None:
    grid = Grid.parse(KEYPAD)
    grid.remove_column(0)
    assert grid.width == 2
    assert len(grid.tiles) == 6
    assert _codes(grid) == ["89", "56", "23"]


def test_remove_last_column_is_noop() -> None:
    grid = Grid.parse("2,1\nv\n^\n")
    grid.remove_column(0)
    assert grid.width == 1
    assert _codes(grid) == ["v", "^"]


@pytest.mark.parametrize(
    ("method", "index"),
    [
        ("insert_row", -1),
        ("insert_row", 3),
        ("remove_row", 2),
        ("remove_row", -1),
        ("insert_column", 3),
        ("remove_column", 2),
    ],
    ids=str,
)
def test_edit_index_out_of_range(method: str, index: int) -> None:
    grid = Grid.parse(LOOP)
    with pytest.raises(IndexOutOfRange):
        getattr(grid, method)(index)
    assert grid == Grid.parse(LOOP)


# -- shuffle ------------------------------------------------------------------


def test_shuffle_keeps_kinds_and_positions() -> None:
    grid = Grid.parse(SPUR)
    kinds = [t.kind for t in grid.tiles]
    grid.shuffle(random.Random(1))
    assert [t.kind for t in grid.tiles] == kinds
    assert all(
        t == Tile.empty() for t in grid.tiles if t.kind is TileKind.EMPTY
    )


def test_copy_is_independent() -> None:
    grid = Grid.parse(LOOP)
    clone = grid.copy()
    clone.rotate(0, 0)
    assert grid == Grid.parse(LOOP)
    assert clone != grid
