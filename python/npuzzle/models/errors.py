"""Exceptions raised by the puzzle models and engine."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """A board or solver was constructed from absent or malformed input."""


class GridFormatError(InvalidArgument):
    """Puzzle text could not be parsed into a board."""


class SearchTimeout(Exception):
    """The solver gave up because its time limit was reached."""

    def __init__(self, timeout: float, expanded: int) -> None:
        super().__init__(
            f"Search aborted after {timeout:g}s ({expanded} nodes expanded)."
        )
        self.timeout = timeout
        self.expanded = expanded
