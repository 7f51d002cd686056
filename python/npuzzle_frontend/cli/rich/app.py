"""Rich terminal frontend — tables, colours, and panels.

Renders a board as a styled grid and plays back a solution path one
board at a time.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.engine.puzzlesolver import Solver
from npuzzle.models.board import Board

console = Console()

DEFAULT_DELAY = 0.7
MEDIUM_DELAY = 0.15
FAST_DELAY = 0.05


# -- helpers ------------------------------------------------------------------


def delay_for(moves: int) -> float:
    """Seconds to pause between boards; longer solutions play faster."""
    if moves >= 50:
        return FAST_DELAY
    if moves > 10:
        return MEDIUM_DELAY
    return DEFAULT_DELAY


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, step: int | None = None) -> Table:
    """Grid of tiles, captioned with the board's heuristics.

    Tiles already home are cyan, misplaced ones red.  *step*, when given,
    becomes the table title.
    """
    width = len(str(board.size * board.size - 1))
    table = Table(
        title=None if step is None else f"Step {step}",
        title_style="bold cyan",
        caption=(
            f"Hamming: {board.hamming_distance()}"
            f"    Manhattan: {board.manhattan_distance()}"
        ),
        caption_style="yellow",
        show_header=False,
        box=rich.box.HEAVY,
        border_style="white",
        padding=(0, 1),
    )
    # wide enough that the caption never splits a word on a 2×2 board
    for _ in range(board.size):
        table.add_column(width=max(width, 3), justify="center")

    for r, row in enumerate(board.tiles):
        table.add_row(*(_cell(board, r, c, val, width) for c, val in enumerate(row)))

    return table


def _cell(board: Board, row: int, col: int, val: int, width: int) -> str:
    if val == 0:
        return " " * width
    style = "bold bright_cyan" if board.is_tile_correct(row, col) else "bold red"
    return f"[{style}]{val:>{width}}[/{style}]"


def render_step(board: Board, step: int, total: int) -> Panel:
    """Board panel with its position in the solution."""
    size = board.size
    return Panel(
        Align.center(render_board(board, step)),
        title=f"[bold cyan]Solution  {size}×{size}[/bold cyan]",
        subtitle=f"[dim]{total} moves[/dim]",
        border_style="cyan",
        padding=(1, 2),
    )


def _draw_unsolvable(board: Board) -> None:
    size = board.size
    panel = Panel(
        Group(
            Align.center(render_board(board)),
            Align.center(Text("\n  No solution possible.\n", style="bold red")),
        ),
        title=f"[bold red]Unsolvable  {size}×{size}[/bold red]",
        border_style="red",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


def _draw_summary(moves: int) -> None:
    message = Text()
    if moves > 1:
        message.append(f"\n  Completed in {moves} moves.\n", style="bold green")
    elif moves == 1:
        message.append("\n  Completed in 1 move.\n", style="bold green")
    else:
        message.append("\n  Already solved!\n", style="bold green")
    console.print(Align.center(message))


# -- public entry point -------------------------------------------------------


def run(solver: Solver, animate: bool = True, delay: float | None = None) -> None:
    """Show the solution of *solver*, animated when *animate* is set.

    *delay* overrides the per-step pause chosen from the solution length.
    """
    if not solver.is_solvable():
        _draw_unsolvable(solver.initial)
        return

    moves = solver.moves()
    path = solver.solution()
    pause = delay_for(moves) if delay is None else delay

    for step, board in enumerate(path):
        if animate:
            console.clear()
        console.print()
        console.print(Align.center(render_step(board, step, moves)))
        if animate and step < moves:
            time.sleep(pause)

    _draw_summary(moves)
