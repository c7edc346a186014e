"""Solver test suite.

Optimality is checked against a breadth-first search over the full state
space of small boards: every 2×2 configuration and a seeded sample of
scrambled 3×3 configurations.
"""

from __future__ import annotations

import random
from collections import deque

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver import SearchNode, Solver
from backend.models.board import Board, Direction

GOAL_3x3 = [[1, 2, 3], [4, 5, 6], [7, 8, 0]]


# -- helpers ------------------------------------------------------------------


def _bfs_distances(size: int) -> dict[Board, int]:
    """Distance to the goal for every board reachable from the goal."""
    goal = Board.goal(size)
    distances = {goal: 0}
    queue = deque([goal])
    while queue:
        board = queue.popleft()
        for neighbor in board.neighbors():
            if neighbor not in distances:
                distances[neighbor] = distances[board] + 1
                queue.append(neighbor)
    return distances


def _replay(board: Board, directions: list[Direction]) -> Board:
    """Apply tile moves to *board* by picking the matching neighbor."""
    for direction in directions:
        matches = [n for n in board.neighbors() if board.direction_to(n) == direction]
        assert len(matches) == 1, f"{direction.value} is not a legal move"
        board = matches[0]
    return board


def _assert_valid_path(solver: Solver, initial: Board) -> None:
    path = solver.solution()
    assert path is not None
    assert len(path) == solver.moves() + 1
    assert path[0] == initial
    assert path[-1].is_solved()
    for prev, curr in zip(path, path[1:]):
        assert curr in prev.neighbors()


@pytest.fixture(scope="module")
def distances_3x3() -> dict[Board, int]:
    return _bfs_distances(3)


# -- concrete scenarios -------------------------------------------------------


def test_already_solved() -> None:
    board = Board.from_rows(GOAL_3x3)
    solver = Solver(board)

    assert solver.is_solvable()
    assert solver.moves() == 0
    assert solver.solution() == [board]
    assert solver.directions() == []


def test_one_move_from_goal() -> None:
    board = Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
    solver = Solver(board)

    assert solver.is_solvable()
    assert solver.moves() == 1
    path = solver.solution()
    assert path is not None
    assert len(path) == 2
    assert path[-1] == Board.from_rows(GOAL_3x3)
    assert solver.directions() == [Direction.LEFT]


def test_known_optimal_length() -> None:
    board = Board.from_rows([[0, 1, 3], [4, 2, 5], [7, 8, 6]])
    solver = Solver(board)

    assert solver.moves() == 4
    _assert_valid_path(solver, board)
    assert _replay(board, solver.directions() or []).is_solved()


@pytest.mark.timeout(600)
def test_single_swap_is_unsolvable() -> None:
    board = Board.from_rows([[1, 2, 3], [4, 5, 6], [8, 7, 0]])
    solver = Solver(board)

    assert not solver.is_solvable()
    assert solver.moves() == -1
    assert solver.solution() is None
    assert solver.directions() is None
    # Every board in the reachable half of the space was expanded once.
    assert solver.stats.expanded == 181440


def test_unsolvable_2x2() -> None:
    solver = Solver(Board.from_rows([[2, 1], [3, 0]]))

    assert not solver.is_solvable()
    assert solver.moves() == -1
    assert solver.solution() is None
    assert solver.stats.expanded == 12


# -- optimality ---------------------------------------------------------------


def test_every_2x2_board_is_solved_optimally() -> None:
    distances = _bfs_distances(2)
    assert len(distances) == 12

    for board, distance in distances.items():
        solver = Solver(board)
        assert solver.is_solvable()
        assert solver.moves() == distance
        _assert_valid_path(solver, board)


@pytest.mark.parametrize("seed", range(25))
def test_scrambled_3x3_matches_bfs(seed: int, distances_3x3: dict[Board, int]) -> None:
    rng = random.Random(seed)
    board = GameGenerator.generate(3, steps=rng.randint(5, 40), rng=rng)
    solver = Solver(board)

    assert solver.is_solvable()
    assert solver.moves() == distances_3x3[board]
    _assert_valid_path(solver, board)
    assert _replay(board, solver.directions() or []).is_solved()


@pytest.mark.parametrize("seed", range(5))
def test_scrambled_4x4_path_is_valid(seed: int) -> None:
    rng = random.Random(seed)
    board = GameGenerator.generate(4, steps=14, rng=rng)
    solver = Solver(board)

    assert solver.is_solvable()
    assert board.manhattan() <= solver.moves() <= 14
    _assert_valid_path(solver, board)


def test_manhattan_is_admissible(distances_3x3: dict[Board, int]) -> None:
    rng = random.Random(1234)
    sample = rng.sample(sorted(distances_3x3, key=Board.flat), 2000)
    for board in sample:
        assert board.manhattan() <= distances_3x3[board]
        assert (board.manhattan() == 0) == board.is_solved()


# -- search bookkeeping -------------------------------------------------------


def test_search_nodes_link_child_to_parent() -> None:
    root = SearchNode.root(Board.from_rows([[1, 2, 3], [4, 5, 6], [0, 7, 8]]))
    child = root.child(root.board.neighbors()[-1])

    assert root.parent is None
    assert root.moves == 0
    assert root.priority == root.board.manhattan()
    assert child.parent is root
    assert child.moves == 1
    assert child.priority == child.board.manhattan() + 1
    assert child.path() == [root.board, child.board]


def test_stats_are_recorded() -> None:
    solver = Solver(Board.from_rows([[1, 2, 3], [4, 5, 6], [0, 7, 8]]))

    assert solver.moves() == 2
    assert solver.stats.expanded >= solver.moves()
    assert solver.stats.enqueued > solver.stats.expanded
    assert solver.stats.max_frontier >= 1


def test_children_never_undo_the_parent_move() -> None:
    # Root has two children; expanding the one on the path skips its parent,
    # so it adds two more instead of three.
    solver = Solver(Board.from_rows([[1, 2, 3], [4, 5, 6], [0, 7, 8]]))

    assert solver.stats.expanded == 2
    assert solver.stats.enqueued == 5
