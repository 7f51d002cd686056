"""Sliding Puzzle Solver.

Usage::

    npuzzle solve puzzle04.txt               # plain text output
    npuzzle solve puzzle04.txt -f rich       # animated Rich terminal view
    npuzzle check puzzle3x3-unsolvable.txt   # solvability only
    npuzzle generate -s 4 --seed 7           # write a random solvable puzzle
"""

from __future__ import annotations

import importlib
import logging
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from npuzzle.engine.puzzlegenerator import PuzzleGenerator
from npuzzle.engine.puzzlesolver import Solver
from npuzzle.errors import SearchAbortedError
from npuzzle.models.board import Board
from npuzzle_frontend.io.printer import format_board, format_solution
from npuzzle_frontend.io.reader import PuzzleFormatError, read_board

EXIT_UNSOLVABLE = 1
EXIT_ERROR = 2

err_console = Console(stderr=True)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    plain = "plain"
    rich = "rich"


_RUNNERS = {
    Frontend.rich: "npuzzle_frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _load(path: Path) -> Board:
    try:
        return read_board(path)
    except (OSError, PuzzleFormatError) as exc:
        err_console.print(f"[red]Cannot read {path}:[/red] {exc}")
        raise typer.Exit(EXIT_ERROR) from exc


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.command()
def solve(
    path: Path = typer.Argument(..., help="Puzzle file to solve."),
    frontend: Frontend = typer.Option(
        Frontend.plain, "-f", "--frontend",
        help="How to show the solution.",
    ),
    animate: bool = typer.Option(
        True, "--animate/--no-animate",
        help="Play the solution back step by step (rich frontend).",
    ),
    delay: Optional[float] = typer.Option(
        None, "--delay",
        min=0.0,
        help="Seconds between animation steps. Defaults to a pace chosen from the solution length.",
    ),
    max_expansions: Optional[int] = typer.Option(
        None, "--max-expansions",
        min=1,
        envvar="NPUZZLE_MAX_EXPANSIONS",
        help="Give up after expanding this many search nodes.",
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log search progress."),
) -> None:
    """Find the minimum number of moves that solves a puzzle."""
    _configure_logging(verbose)
    solver = Solver(_load(path), max_expansions=max_expansions)

    try:
        solver.solve()
        if frontend is Frontend.plain:
            typer.echo(format_solution(solver), nl=False)
        else:
            mod = importlib.import_module(_RUNNERS[frontend])
            mod.run(solver, animate=animate, delay=delay)
    except SearchAbortedError as exc:
        err_console.print(f"[yellow]{exc}[/yellow]")
        raise typer.Exit(EXIT_ERROR) from exc

    if not solver.is_solvable():
        raise typer.Exit(EXIT_UNSOLVABLE)


@app.command()
def check(path: Path = typer.Argument(..., help="Puzzle file to check.")) -> None:
    """Report whether a puzzle can be solved, without searching."""
    _configure_logging(False)
    solver = Solver(_load(path))
    if solver.is_solvable():
        typer.echo("Solvable")
        return
    typer.echo("No solution possible")
    raise typer.Exit(EXIT_UNSOLVABLE)


@app.command()
def generate(
    size: int = typer.Option(
        3, "-s", "--size",
        min=2, max=8,
        help="Grid size (2-8).",
    ),
    shuffles: Optional[int] = typer.Option(
        None, "--shuffles",
        min=0,
        help="Random blank moves from the goal. Defaults to size*size*100.",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed."),
    out: Optional[Path] = typer.Option(None, "-o", "--out", help="Write here instead of stdout."),
) -> None:
    """Write a random solvable puzzle in the puzzle file format."""
    _configure_logging(False)
    text = format_board(PuzzleGenerator.generate(size, shuffles=shuffles, seed=seed))
    if out is None:
        typer.echo(text, nl=False)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text)


if __name__ == "__main__":
    app()
