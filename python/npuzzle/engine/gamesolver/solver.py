"""Sliding puzzle solver: A* over a board and its twin in lock-step.

Exactly one of a board and its twin (the board with its first two tiles
swapped) can reach the goal. Searching both side by side, one expansion
each per round, settles solvability without computing any parity: the
first frontier to pop a goal board wins.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from enum import Enum
from time import perf_counter

from npuzzle.models.board import Board, Direction
from npuzzle.models.errors import InvalidArgument, SearchTimeout

logger = logging.getLogger(__name__)

ROOT = -1  # predecessor index of a frontier's starting node


class SolverState(Enum):
    RUNNING = "running"
    SOLVED_ORIGINAL = "solved-original"
    SOLVED_TWIN = "solved-twin"


@dataclass(frozen=True, slots=True)
class SearchNode:
    """A board reached after *moves* slides, linked to its predecessor.

    *previous* is an index into the owning frontier's arena, or ``ROOT``.
    """

    board: Board
    moves: int
    previous: int
    priority: int


@dataclass
class SearchStats:
    """Counters for one solve.

    *peak_frontier* counts heap entries across both frontiers. With a closed
    set that includes entries for boards already expanded, which are dropped
    when popped.
    """

    expanded: int = 0
    generated: int = 0
    peak_frontier: int = 0
    elapsed: float = 0.0


class _Frontier:
    """Min-priority queue of search nodes backed by an append-only arena.

    Heap entries are ``(priority, index)``; since arena indices grow with
    every push, equal priorities pop in insertion order.
    """

    def __init__(self, start: Board, track_visited: bool) -> None:
        self.nodes: list[SearchNode] = []
        self._heap: list[tuple[int, int]] = []
        self._closed: set[Board] | None = set() if track_visited else None
        self.push(start, 0, ROOT)

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, board: Board, moves: int, previous: int) -> None:
        index = len(self.nodes)
        node = SearchNode(board, moves, previous, moves + board.manhattan())
        self.nodes.append(node)
        heapq.heappush(self._heap, (node.priority, index))

    def pop(self) -> int | None:
        """Return the arena index of the best unexpanded node, or ``None``."""
        while self._heap:
            _, index = heapq.heappop(self._heap)
            if self._closed is not None and self.nodes[index].board in self._closed:
                continue
            return index
        return None

    def expand(self, index: int) -> int:
        """Push the successors of node *index*; return how many were pushed."""
        node = self.nodes[index]
        previous = self.nodes[node.previous].board if node.previous != ROOT else None
        if self._closed is not None:
            self._closed.add(node.board)

        pushed = 0
        for board in node.board.neighbors():
            if board == previous:
                continue
            if self._closed is not None and board in self._closed:
                continue
            self.push(board, node.moves + 1, index)
            pushed += 1
        return pushed

    def path(self, index: int) -> list[Board]:
        """Walk predecessor links back from *index* and return start → node."""
        boards: list[Board] = []
        while index != ROOT:
            node = self.nodes[index]
            boards.append(node.board)
            index = node.previous
        boards.reverse()
        return boards


class Solver:
    """Finds a minimum-move solution for a board, or proves there is none.

    The whole search runs inside the constructor. An unsolvable board is a
    normal outcome: check :meth:`is_solvable` before using :meth:`moves` or
    :meth:`solution`.

    *timeout* (seconds) bounds the search; when it is reached
    :class:`SearchTimeout` is raised. *track_visited* adds a closed set to
    each frontier so no board is expanded twice. It trades memory for fewer
    expansions and does not change the results.
    """

    def __init__(
        self,
        initial: Board,
        *,
        timeout: float | None = None,
        track_visited: bool = False,
    ) -> None:
        if initial is None:
            raise InvalidArgument("Solver needs an initial board.")
        if timeout is not None and timeout < 0:
            raise InvalidArgument(f"timeout must be non-negative, got {timeout}.")

        self.initial = initial
        self.state = SolverState.RUNNING
        self.stats = SearchStats()
        self._solution: list[Board] | None = None

        self._search(timeout, track_visited)

    # -- search ---------------------------------------------------------------

    def _search(self, timeout: float | None, track_visited: bool) -> None:
        logger.debug(
            "Solving %d×%d board (manhattan=%d, track_visited=%s)",
            self.initial.size,
            self.initial.size,
            self.initial.manhattan(),
            track_visited,
        )
        t0 = perf_counter()
        original = _Frontier(self.initial, track_visited)
        twin = _Frontier(self.initial.twin(), track_visited)
        stats = self.stats

        while self.state is SolverState.RUNNING:
            if timeout is not None and perf_counter() - t0 >= timeout:
                stats.elapsed = perf_counter() - t0
                logger.warning(
                    "Search timed out after %.3fs (%d expanded)",
                    stats.elapsed,
                    stats.expanded,
                )
                raise SearchTimeout(timeout, stats.expanded)

            stats.peak_frontier = max(stats.peak_frontier, len(original) + len(twin))
            a = original.pop()
            b = twin.pop()

            if a is None:
                # Only reachable with a closed set: the original's whole
                # component was exhausted without meeting the goal.
                self.state = SolverState.SOLVED_TWIN
            elif original.nodes[a].board.is_goal():
                self.state = SolverState.SOLVED_ORIGINAL
                self._solution = original.path(a)
            elif b is not None and twin.nodes[b].board.is_goal():
                self.state = SolverState.SOLVED_TWIN
            else:
                stats.generated += original.expand(a)
                stats.expanded += 1
                if b is not None:
                    stats.generated += twin.expand(b)
                    stats.expanded += 1

        stats.elapsed = perf_counter() - t0
        logger.info(
            "Search finished: %s, moves=%d, expanded=%d, generated=%d, "
            "peak_frontier=%d, elapsed=%.3fs",
            self.state.value,
            self.moves(),
            stats.expanded,
            stats.generated,
            stats.peak_frontier,
            stats.elapsed,
        )

    # -- results --------------------------------------------------------------

    def is_solvable(self) -> bool:
        return self.state is SolverState.SOLVED_ORIGINAL

    def moves(self) -> int:
        """Minimum number of moves to solve the initial board; -1 if unsolvable."""
        if self._solution is None:
            return -1
        return len(self._solution) - 1

    def solution(self) -> list[Board] | None:
        """Boards of a shortest solution, initial and goal included.

        Returns ``None`` if the board is unsolvable.
        """
        if self._solution is None:
            return None
        return list(self._solution)

    def directions(self) -> list[Direction] | None:
        """The shortest solution as tile slides, or ``None`` if unsolvable."""
        if self._solution is None:
            return None
        return [
            _direction_between(before, after)
            for before, after in zip(self._solution, self._solution[1:])
        ]

    def hint(self) -> Direction | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        directions = self.directions()
        return directions[0] if directions else None


def _direction_between(before: Board, after: Board) -> Direction:
    """Direction of the tile slide that turns *before* into *after*."""
    (br, bc), (ar, ac) = before.blank_pos, after.blank_pos
    # the blank travels opposite to the sliding tile
    if ar == br + 1:
        return Direction.UP
    if ar == br - 1:
        return Direction.DOWN
    if ac == bc + 1:
        return Direction.LEFT
    return Direction.RIGHT
