"""Vanilla terminal frontend — no third-party dependencies.

Prints the solver outcome as plain text: the move count, then every board
of the solution as rows of space-separated tiles.
"""

from __future__ import annotations

import sys
from typing import TextIO

from backend.engine.gamesolver import Solver
from backend.models.board import Board

UNSOLVABLE_MESSAGE = "No solution exists."


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> str:
    """Return the board as N lines of N space-separated tiles."""
    return "\n".join(" ".join(str(v) for v in row) for row in board.tiles)


def render_solution(solver: Solver) -> str:
    boards = solver.solution()
    if boards is None:
        return UNSOLVABLE_MESSAGE + "\n"

    lines = [f"Minimum number of moves = {solver.moves()}", "Solution:"]
    for board in boards:
        lines.append(render_board(board))
        lines.append("")
    return "\n".join(lines) + "\n"


# -- public entry point -------------------------------------------------------


def run(solver: Solver, out: TextIO | None = None) -> None:
    """Write the outcome of *solver* to *out* (stdout by default)."""
    if out is None:
        out = sys.stdout
    out.write(render_solution(solver))
    out.flush()
