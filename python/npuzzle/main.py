"""Sliding puzzle solver.

Usage::

    npuzzle puzzle04.txt              # solve a puzzle file (Rich output)
    npuzzle puzzle04.txt -f vanilla   # plain text output
    npuzzle -s 3 --seed 7             # solve a random 3×3 puzzle
    npuzzle puzzle3x3-unsolvable.txt --timeout 5 -v
"""

import importlib
import logging
import random
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.engine.gameloader import load_board
from npuzzle.models.errors import InvalidArgument

MIN_SIZE = 2
MAX_SIZE = 5
DEFAULT_SIZE = 3

err_console = Console(stderr=True)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "npuzzle.frontend.cli.vanilla.app",
    Frontend.rich: "npuzzle.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    path: Optional[Path] = typer.Argument(
        None,
        exists=True, dir_okay=False, readable=True,
        help="Puzzle file. Omit to solve a random puzzle.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Output frontend.",
    ),
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        help=f"Size of a random puzzle ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for the random puzzle.",
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout",
        min=0.0,
        help="Give up after this many seconds.",
    ),
    visited: bool = typer.Option(
        False, "--visited",
        help="Never expand the same board twice (uses more memory).",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Solve a sliding puzzle with A* search."""
    _configure_logging(verbose)

    if path is None:
        board = GameGenerator.generate(size, random.Random(seed))
    else:
        try:
            board = load_board(path)
        except InvalidArgument as exc:
            err_console.print(f"[bold red]Invalid puzzle {path}:[/bold red] {exc}")
            raise typer.Exit(code=2) from exc

    mod = importlib.import_module(_RUNNERS[frontend])
    code = mod.run(board, timeout=timeout, track_visited=visited)
    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()
