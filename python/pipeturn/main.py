"""Pipe-rotation puzzle tools.

Usage::

    pipeturn levels                   # list the bundled levels
    pipeturn check level.txt          # validate a level file
    pipeturn scramble --level 3 -S 7  # print a scrambled bundled level
    pipeturn new 4 5 --random         # print a fresh grid to edit
"""

import logging
import random
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from pipeturn import config
from pipeturn.engine.gamegenerator import GameGenerator
from pipeturn.engine.levels import LevelCatalog, default_catalog
from pipeturn.models.errors import ParseError
from pipeturn.models.grid import Grid

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(add_completion=False, help="Pipe-rotation puzzle tools.")


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.LOG_LEVEL,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[bold red]error:[/bold red] {escape(message)}")
    return typer.Exit(code=1)


def _load(path: Path) -> Grid:
    try:
        return Grid.parse(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise _fail(f"cannot read {path}: {exc.strerror}") from exc
    except ParseError as exc:
        raise _fail(f"{path}: {exc}") from exc


def _catalog() -> LevelCatalog:
    try:
        return default_catalog()
    except ParseError as exc:
        notes = " ".join(getattr(exc, "__notes__", ()))
        raise _fail(f"{exc} {notes}".strip()) from exc


def _rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed)


# -- commands -----------------------------------------------------------------


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Show debug logging.",
    ),
) -> None:
    """Pipe-rotation puzzle tools."""
    _setup_logging(verbose)


@app.command()
def levels() -> None:
    """List the levels in the catalog."""
    catalog = _catalog()

    table = Table(title="Levels", header_style="bold cyan")
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Size", justify="center")
    table.add_column("Solved as shipped", justify="center")

    for i, name in enumerate(catalog.names):
        grid = catalog.parse(i)
        if grid.solved(config.REQUIRE_NON_EMPTY):
            solved = "[green]yes[/green]"
        else:
            solved = "[red]no[/red]"
        table.add_row(str(i), name, f"{grid.height}×{grid.width}", solved)

    console.print(table)


@app.command()
def check(
    path: Path = typer.Argument(..., help="Level file to check."),
) -> None:
    """Parse a level file and report whether it is solved."""
    grid = _load(path)
    networks = grid.components()
    console.print(f"[bold]{escape(path.name)}[/bold]: {grid.height}×{grid.width}")
    if grid.solved(config.REQUIRE_NON_EMPTY):
        console.print(f"  [bold green]solved[/bold green] ({networks} network(s))")
    else:
        console.print(f"  [yellow]not solved[/yellow] ({networks} network(s))")


@app.command()
def scramble(
    path: Optional[Path] = typer.Argument(
        None, help="Level file to scramble.",
    ),
    level: Optional[int] = typer.Option(
        None, "-l", "--level",
        min=0,
        help="Scramble a catalog level instead of a file.",
    ),
    seed: Optional[int] = typer.Option(
        None, "-S", "--seed",
        help="Random seed, for repeatable output.",
    ),
) -> None:
    """Print a level with every tile turned at random."""
    if (path is None) == (level is None):
        raise _fail("give exactly one of a level file or --level")

    if path is not None:
        grid = _load(path)
    else:
        catalog = _catalog()
        if level >= len(catalog):
            raise _fail(f"no level {level}; the catalog has {len(catalog)}")
        grid = catalog.parse(level)

    typer.echo(GameGenerator.generate(grid, _rng(seed)).serialize(), nl=False)


@app.command()
def new(
    height: int = typer.Argument(..., min=1, help="Number of rows."),
    width: int = typer.Argument(..., min=1, help="Number of columns."),
    random_tiles: bool = typer.Option(
        False, "-r", "--random",
        help="Fill with random tiles instead of empty ones.",
    ),
    seed: Optional[int] = typer.Option(
        None, "-S", "--seed",
        help="Random seed, for repeatable output.",
    ),
) -> None:
    """Print a new grid in the level text format."""
    if random_tiles:
        grid = GameGenerator.random_grid(height, width, _rng(seed))
    else:
        grid = Grid.empty(height, width)
    typer.echo(grid.serialize(), nl=False)


if __name__ == "__main__":
    app()
