"""Generator tests: goal boards, scrambles, random boards and replay."""

from __future__ import annotations

import random

import pytest

from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.models.board import Board, Direction
from npuzzle.models.errors import InvalidArgument


def test_solved_3x3() -> None:
    assert GameGenerator.solved(3) == Board([[1, 2, 3], [4, 5, 6], [7, 8, 0]])


def test_solved_rejects_non_positive_size() -> None:
    with pytest.raises(InvalidArgument):
        GameGenerator.solved(0)


@pytest.mark.parametrize("size", [2, 3, 4])
def test_generate_is_not_solved(size: int) -> None:
    board = GameGenerator.generate(size, random.Random(size))
    assert board.size == size
    assert not board.is_goal()
    assert sorted(v for row in board.tiles for v in row) == list(range(size * size))


def test_generate_rejects_1x1() -> None:
    with pytest.raises(InvalidArgument):
        GameGenerator.generate(1)


def test_seeded_generation_is_reproducible() -> None:
    a = GameGenerator.generate(4, random.Random(42))
    b = GameGenerator.generate(4, random.Random(42))
    assert a == b


def test_scramble_returns_new_board() -> None:
    goal = GameGenerator.solved(3)
    board = GameGenerator.scramble(goal, random.Random(0), shuffles=1)
    assert board in goal.neighbors()
    assert goal.is_goal()


def test_scramble_zero_shuffles() -> None:
    goal = GameGenerator.solved(3)
    assert GameGenerator.scramble(goal, random.Random(0), shuffles=0) == goal


def test_scramble_never_steps_straight_back() -> None:
    # Two shuffles from the goal corner cannot return to the goal.
    goal = GameGenerator.solved(3)
    for seed in range(20):
        assert GameGenerator.scramble(goal, random.Random(seed), shuffles=2) != goal


def test_random_board_is_a_permutation() -> None:
    rng = random.Random(7)
    for _ in range(20):
        board = GameGenerator.random_board(4, rng)
        assert sorted(v for row in board.tiles for v in row) == list(range(16))


def test_walk_applies_moves() -> None:
    board = Board([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
    assert GameGenerator.walk(board, [Direction.LEFT]).is_goal()


def test_walk_rejects_impossible_move() -> None:
    with pytest.raises(InvalidArgument):
        GameGenerator.walk(GameGenerator.solved(3), [Direction.UP])


def test_scramble_rejects_1x1() -> None:
    with pytest.raises(InvalidArgument):
        GameGenerator.scramble(GameGenerator.solved(1), random.Random(0), shuffles=3)
