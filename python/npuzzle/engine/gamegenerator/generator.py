"""Generates sliding puzzle boards."""

from __future__ import annotations

import random

from npuzzle.models.board import Board, Direction
from npuzzle.models.errors import InvalidArgument


class GameGenerator:
    """Creates goal, scrambled and random boards.

    Every method takes an optional ``random.Random``; pass a seeded one for
    reproducible boards.
    """

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        if size < 1:
            raise InvalidArgument(f"Board size must be positive, got {size}.")
        flat = list(range(1, size * size)) + [0]
        return Board.from_flat(size, flat)

    @staticmethod
    def scramble(
        board: Board,
        rng: random.Random | None = None,
        shuffles: int | None = None,
    ) -> Board:
        """Return *board* after a random walk of valid moves.

        The walk never immediately undoes its previous move, so the result
        is always solvable when *board* is.
        """
        if board.size < 2:
            raise InvalidArgument(f"Cannot scramble a {board.size}×{board.size} board.")
        rng = rng or random.Random()
        if shuffles is None:
            shuffles = board.size * board.size * 100
        prev: Board | None = None

        for _ in range(shuffles):
            neighbors = board.neighbors()
            if prev in neighbors and len(neighbors) > 1:
                neighbors.remove(prev)
            prev, board = board, rng.choice(neighbors)
        return board

    @staticmethod
    def generate(size: int, rng: random.Random | None = None) -> Board:
        """Return a random *solvable* board of the given size."""
        if size < 2:
            raise InvalidArgument(f"Cannot scramble a {size}×{size} board.")
        rng = rng or random.Random()
        goal = GameGenerator.solved(size)
        while True:
            board = GameGenerator.scramble(goal, rng)
            # Ensure the board is not already solved
            if not board.is_goal():
                return board

    @staticmethod
    def random_board(size: int, rng: random.Random | None = None) -> Board:
        """Return a uniformly random arrangement; half of them are unsolvable."""
        if size < 1:
            raise InvalidArgument(f"Board size must be positive, got {size}.")
        rng = rng or random.Random()
        flat = list(range(size * size))
        rng.shuffle(flat)
        return Board.from_flat(size, flat)

    @staticmethod
    def walk(board: Board, directions: list[Direction]) -> Board:
        """Apply *directions* in order; raise if any slide is impossible."""
        for i, direction in enumerate(directions):
            moved = board.slide(direction)
            if moved is None:
                raise InvalidArgument(
                    f"Move {i} ({direction.value}) is invalid at blank "
                    f"{board.blank_pos}."
                )
            board = moved
        return board
