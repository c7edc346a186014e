"""Reads an initial puzzle grid from text.

Accepted layout — blank lines and ``#`` comments are ignored, and the size
header is optional::

    # an 8-puzzle
    3
    1 2 3
    4 5 6
    7 0 8
"""

from __future__ import annotations

import math
import sys
from pathlib import Path

from backend.models.board import Board
from backend.models.exceptions import (
    InvalidCharacterError,
    InvalidDimensionsError,
    MissingGridError,
)


def _tokenize(text: str) -> list[list[int]]:
    lines: list[list[int]] = []
    for lineno, line in enumerate(text.splitlines(), 1):
        trimmed = line.split("#", 1)[0].strip()
        if not trimmed:
            continue
        try:
            lines.append([int(tok) for tok in trimmed.split()])
        except ValueError:
            raise InvalidCharacterError(
                f"Line {lineno}: expected integers, got {trimmed!r}"
            ) from None
    return lines


def parse_grid(text: str, size: int | None = None) -> Board:
    """Parse *text* into a validated :class:`Board`.

    When *size* is not given it comes from a single-integer header line,
    or failing that from the tile count, which must be a perfect square.
    A header matching an explicit *size* is skipped.
    """
    lines = _tokenize(text)
    if not lines:
        raise MissingGridError("No tiles found in input.")

    if len(lines[0]) == 1 and len(lines) > 1:
        header = lines[0][0]
        body = [v for line in lines[1:] for v in line]
        if len(body) == header * header and size in (None, header):
            size = header
            lines = lines[1:]

    tiles = [v for line in lines for v in line]

    if size is None:
        size = math.isqrt(len(tiles))
        if size * size != len(tiles):
            raise InvalidDimensionsError(
                f"{len(tiles)} tiles do not form a square grid."
            )
    elif len(tiles) != size * size:
        raise InvalidDimensionsError(
            f"Expected {size * size} tiles for a {size}×{size} board, "
            f"got {len(tiles)}."
        )

    return Board.from_flat(size, tiles)


def read_grid(path: Path | None, size: int | None = None) -> Board:
    """Read a grid from *path*, or from stdin when *path* is ``None`` or ``-``."""
    if path is None or str(path) == "-":
        text = sys.stdin.read()
    else:
        text = path.read_text(encoding="utf-8")
    return parse_grid(text, size)
