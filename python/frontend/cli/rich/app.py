"""Rich terminal frontend — tables, colours, and panels.

Shares the solver backend with the vanilla CLI but renders every step of
the solution as a styled grid, with tiles already in place highlighted.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver import Solver
from backend.models.board import Board, Direction

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _render_step(index: int, board: Board, direction: Direction | None) -> Panel:
    title = f"[cyan]Step {index}[/cyan]"
    if direction is not None:
        title += f" [dim]({direction.value})[/dim]"
    return Panel(
        Align.center(_render_board(board)),
        title=title,
        border_style="dim",
        padding=(0, 1),
    )


# -- outcome screens ----------------------------------------------------------


def _draw_unsolvable(solver: Solver) -> None:
    body = Group(
        Align.center(_render_board(solver.initial)),
        Align.center(Text("\nNo solution exists.", style="bold red")),
    )
    panel = Panel(
        body,
        title="[bold red]Unsolvable[/bold red]",
        border_style="red",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


def _draw_solution(solver: Solver) -> None:
    boards = solver.solution() or []
    directions: list[Direction | None] = [None, *(solver.directions() or [])]
    size = solver.initial.size

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(solver.moves()), style="bold yellow")
    stats.append("    Expanded: ", style="dim")
    stats.append(str(solver.stats.expanded), style="bold yellow")
    stats.append("    Enqueued: ", style="dim")
    stats.append(str(solver.stats.enqueued), style="bold yellow")

    steps = [
        _render_step(i, board, direction)
        for i, (board, direction) in enumerate(zip(boards, directions))
    ]

    panel = Panel(
        Group(Align.center(stats), Text(""), Columns(steps, equal=True)),
        title=f"[bold green]Solution  {size}×{size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )
    console.print()
    console.print(panel)


# -- public entry point -------------------------------------------------------


def run(solver: Solver) -> None:
    """Render the outcome of *solver* with Rich."""
    if solver.is_solvable():
        _draw_solution(solver)
    else:
        _draw_unsolvable(solver)
