#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    python main.py solve board.txt          # plain-text solution
    python main.py solve -f rich < in.txt   # Rich terminal rendering
    python main.py generate -s 3 --seed 7   # print a random solvable board
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

from backend.engine.gamegenerator import MAX_SIZE, MIN_SIZE, GameGenerator
from backend.engine.gamesolver import Solver
from backend.models.exceptions import PuzzleError
from frontend.cli.reader import read_grid
from frontend.cli.vanilla.app import render_board

logger = logging.getLogger("sliding_solver")

EXIT_UNSOLVABLE = 1
EXIT_BAD_INPUT = 2


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.command()
def solve(
    path: Optional[Path] = typer.Argument(
        None,
        help="File holding the initial grid. Reads stdin when omitted or '-'.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="How to render the outcome.",
    ),
    size: Optional[int] = typer.Option(
        None, "-s", "--size",
        min=2,
        help="Grid size. Inferred from the input when omitted.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress to stderr.",
    ),
) -> None:
    """Find a minimum-move solution for a puzzle grid."""
    _configure_logging(verbose)

    try:
        board = read_grid(path, size)
    except (OSError, PuzzleError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=EXIT_BAD_INPUT)

    logger.debug("Read %d×%d board", board.size, board.size)
    solver = Solver(board)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(solver)

    if not solver.is_solvable():
        raise typer.Exit(code=EXIT_UNSOLVABLE)


@app.command()
def generate(
    size: int = typer.Option(
        3, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    steps: Optional[int] = typer.Option(
        None, "--steps",
        min=1,
        help="Random slides away from the goal. Defaults to 100 per cell.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible board.",
    ),
) -> None:
    """Print a random solvable board in the format `solve` reads."""
    board = GameGenerator.generate(size, steps, random.Random(seed))
    typer.echo(str(board.size))
    typer.echo(render_board(board))


if __name__ == "__main__":
    app()
