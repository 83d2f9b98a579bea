"""Rich terminal frontend — tables, colours, and panels.

Prints the initial board, solves it, then shows every board of the
solution as its own panel.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.engine.gamesolver import Solver
from npuzzle.models.board import Board
from npuzzle.models.errors import SearchTimeout

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


def _board_panel(board: Board, title: str, style: str = "bright_blue") -> Panel:
    stats = Text()
    stats.append("hamming ", style="dim")
    stats.append(str(board.hamming()), style="bold yellow")
    stats.append("   manhattan ", style="dim")
    stats.append(str(board.manhattan()), style="bold yellow")

    return Panel(
        Group(Align.center(_render_board(board)), Align.center(stats)),
        title=title,
        border_style=style,
        padding=(1, 2),
    )


# -- entry point ---------------------------------------------------------------


def run(board: Board, timeout: float | None = None, track_visited: bool = False) -> int:
    """Solve *board* and print the result. Returns the process exit code."""
    size = board.size
    console.print()
    console.print(
        Align.center(
            _board_panel(board, f"[bold cyan]Initial  {size}×{size}[/bold cyan]")
        )
    )

    try:
        with console.status("[cyan]Solving…[/cyan]"):
            solver = Solver(board, timeout=timeout, track_visited=track_visited)
    except SearchTimeout as exc:
        console.print(Align.center(Text(str(exc), style="bold red")))
        return 1

    if not solver.is_solvable():
        console.print(Align.center(Text("No solution possible", style="bold red")))
        return 0

    console.print(
        Align.center(
            Text(f"Minimum number of moves = {solver.moves()}", style="bold green")
        )
    )
    directions = solver.directions() or []
    for i, step in enumerate(solver.solution() or []):
        if i == 0:
            continue
        title = f"[bold cyan]Move {i}/{solver.moves()}[/bold cyan]  ({directions[i - 1].value})"
        console.print(Align.center(_board_panel(step, title, style="cyan")))

    stats = solver.stats
    console.print(
        Align.center(
            Text(
                f"{stats.expanded} expanded · {stats.generated} generated · "
                f"{stats.elapsed:.2f}s",
                style="dim",
            )
        )
    )
    return 0
