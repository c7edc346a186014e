"""Sliding puzzle solver — A* over board states with the Manhattan heuristic.

The solver keeps a binary heap of :class:`SearchNode` entries ordered by
``moves + manhattan``.  Children that would undo the move that produced
their parent are never enqueued, so a board may sit in the frontier more
than once with different move counts.  A board is expanded at most once:
with a consistent heuristic its first expansion already carries the fewest
moves, and later copies are dropped when they reach the top of the heap.
This keeps the search finite when the goal is unreachable.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass

from backend.models.board import Board, Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class SearchNode:
    """A visited board together with how the search reached it."""

    board: Board
    parent: SearchNode | None
    moves: int
    priority: int

    @classmethod
    def root(cls, board: Board) -> SearchNode:
        return cls(board=board, parent=None, moves=0, priority=board.manhattan())

    def child(self, board: Board) -> SearchNode:
        moves = self.moves + 1
        return SearchNode(
            board=board,
            parent=self,
            moves=moves,
            priority=board.manhattan() + moves,
        )

    def path(self) -> list[Board]:
        """Boards from the root down to this node, inclusive."""
        boards: list[Board] = []
        node: SearchNode | None = self
        while node is not None:
            boards.append(node.board)
            node = node.parent
        boards.reverse()
        return boards


@dataclass(frozen=True)
class SearchStats:
    expanded: int
    enqueued: int
    max_frontier: int


class Solver:
    """Finds a minimum-move solution for *initial*, or proves there is none.

    The whole search runs inside the constructor; afterwards the instance
    only answers queries about the outcome.
    """

    def __init__(self, initial: Board) -> None:
        self.initial = initial
        self._goal_node: SearchNode | None = None
        self.stats = SearchStats(expanded=0, enqueued=0, max_frontier=0)
        self._search()

    # -- search ---------------------------------------------------------------

    def _search(self) -> None:
        counter = itertools.count()
        root = SearchNode.root(self.initial)
        frontier: list[tuple[int, int, SearchNode]] = [
            (root.priority, next(counter), root)
        ]
        expanded: set[Board] = set()
        enqueued = 1
        max_frontier = 1

        logger.debug(
            "Searching %d×%d board (manhattan=%d, hamming=%d)",
            self.initial.size,
            self.initial.size,
            root.priority,
            self.initial.hamming(),
        )

        while frontier:
            _, _, node = heapq.heappop(frontier)

            if node.board.is_solved():
                self._goal_node = node
                break

            if node.board in expanded:
                continue
            expanded.add(node.board)

            previous = node.parent.board if node.parent is not None else None
            for neighbor in node.board.neighbors():
                if neighbor == previous:
                    continue
                child = node.child(neighbor)
                heapq.heappush(frontier, (child.priority, next(counter), child))
                enqueued += 1

            max_frontier = max(max_frontier, len(frontier))

        self.stats = SearchStats(
            expanded=len(expanded),
            enqueued=enqueued,
            max_frontier=max_frontier,
        )

        if self._goal_node is None:
            logger.info(
                "No solution: frontier exhausted after %d expansions",
                self.stats.expanded,
            )
        else:
            logger.info(
                "Solved in %d moves (%d expansions, %d enqueued)",
                self._goal_node.moves,
                self.stats.expanded,
                self.stats.enqueued,
            )

    # -- queries --------------------------------------------------------------

    def is_solvable(self) -> bool:
        return self._goal_node is not None

    def moves(self) -> int:
        """Number of moves in the minimal solution, or -1 if unsolvable."""
        if self._goal_node is None:
            return -1
        return self._goal_node.moves

    def solution(self) -> list[Board] | None:
        """Boards from the initial board to the goal, or ``None`` if unsolvable."""
        if self._goal_node is None:
            return None
        return self._goal_node.path()

    def directions(self) -> list[Direction] | None:
        """Tile moves that replay :meth:`solution`, or ``None`` if unsolvable."""
        boards = self.solution()
        if boards is None:
            return None
        return [a.direction_to(b) for a, b in zip(boards, boards[1:])]
