"""Reads and writes puzzles in the plain-text grid format.

The format is the board size ``n`` followed by ``n * n`` whitespace-separated
integers in row-major order, ``0`` marking the blank::

    3
     0  1  3
     4  2  5
     7  8  6
"""

from __future__ import annotations

from pathlib import Path

from npuzzle.models.board import Board
from npuzzle.models.errors import GridFormatError


def parse_board(text: str) -> Board:
    """Parse puzzle text into a :class:`Board`."""
    tokens = text.split()
    if not tokens:
        raise GridFormatError("Puzzle text is empty.")

    try:
        values = [int(tok) for tok in tokens]
    except ValueError as exc:
        raise GridFormatError(f"Puzzle text contains a non-integer: {exc}") from exc

    n, tiles = values[0], values[1:]
    if n < 1:
        raise GridFormatError(f"Board size must be positive, got {n}.")
    if len(tiles) != n * n:
        raise GridFormatError(
            f"Expected {n * n} tiles for a {n}×{n} board, got {len(tiles)}."
        )
    return Board.from_flat(n, tiles)


def load_board(path: Path | str) -> Board:
    """Read a puzzle file and return its board."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise GridFormatError(f"Puzzle file {path} is not UTF-8 text: {exc}") from exc
    return parse_board(text)


def format_board(board: Board) -> str:
    """Return *board* in the format accepted by :func:`parse_board`."""
    return str(board)
