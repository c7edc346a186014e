"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import random

from backend.models.board import Board

MIN_SIZE = 2
MAX_SIZE = 8


class GameGenerator:
    """Creates solvable puzzles by walking the blank away from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.goal(size)

    @staticmethod
    def default_steps(size: int) -> int:
        return size * size * 100

    @staticmethod
    def scramble(
        board: Board, steps: int, rng: random.Random | None = None
    ) -> Board:
        """Return the board reached after *steps* random slides from *board*.

        A slide never undoes the one before it unless it is the only option.
        """
        rng = rng or random.Random()
        previous: Board | None = None

        for _ in range(steps):
            candidates = board.neighbors()
            if previous in candidates and len(candidates) > 1:
                candidates.remove(previous)
            previous, board = board, rng.choice(candidates)
        return board

    @staticmethod
    def generate(
        size: int, steps: int | None = None, rng: random.Random | None = None
    ) -> Board:
        """Return a random *solvable* board of the given size."""
        if not MIN_SIZE <= size <= MAX_SIZE:
            raise ValueError(f"Size must be between {MIN_SIZE} and {MAX_SIZE}.")
        if steps is None:
            steps = GameGenerator.default_steps(size)
        if steps < 1:
            raise ValueError("A scramble needs at least one step.")

        rng = rng or random.Random()
        board = GameGenerator.scramble(GameGenerator.solved(size), steps, rng)

        # Ensure the board is not already solved
        if board.is_solved():
            board = GameGenerator.scramble(board, 1, rng)

        return board
