"""Sliding puzzle solver: immutable boards and twin-board A* search."""

from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.engine.gameloader import format_board, load_board, parse_board
from npuzzle.engine.gamesolver import SearchStats, Solver, SolverState
from npuzzle.models import (
    Board,
    Direction,
    GridFormatError,
    InvalidArgument,
    SearchTimeout,
)

__all__ = [
    "Board",
    "Direction",
    "GameGenerator",
    "GridFormatError",
    "InvalidArgument",
    "SearchStats",
    "SearchTimeout",
    "Solver",
    "SolverState",
    "format_board",
    "load_board",
    "parse_board",
]
