"""Vanilla terminal frontend — no third-party dependencies.

Uses only print and ANSI codes. Solution boards are written in the same
text format the loader reads, so the output can be fed back in.
"""

from __future__ import annotations

import sys

from npuzzle.engine.gamesolver import Solver
from npuzzle.models.board import Board
from npuzzle.models.errors import SearchTimeout


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


def _colour(text: str, code: str) -> str:
    if not sys.stdout.isatty():
        return text
    return f"{code}{text}{_R}"


# -- entry point ---------------------------------------------------------------


def run(board: Board, timeout: float | None = None, track_visited: bool = False) -> int:
    """Solve *board* and print the result. Returns the process exit code."""
    print(f"initial Manhattan: {board.manhattan()}")
    print(board)

    try:
        solver = Solver(board, timeout=timeout, track_visited=track_visited)
    except SearchTimeout as exc:
        print(_colour(str(exc), _RED))
        return 1

    if not solver.is_solvable():
        print(_colour("No solution possible", _RED))
        return 0

    print(_colour(f"Minimum number of moves = {solver.moves()}", _G))
    for step in solver.solution() or []:
        print(step)

    stats = solver.stats
    print(
        _colour(
            f"{stats.expanded} expanded, {stats.generated} generated, "
            f"{stats.elapsed:.2f}s",
            _DIM,
        )
    )
    return 0
