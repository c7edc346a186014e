from backend.models.board import Board, Direction
from backend.models.exceptions import (
    GridParseError,
    InvalidBoardError,
    InvalidCharacterError,
    InvalidDimensionsError,
    MissingGridError,
    PuzzleError,
)

__all__ = [
    "Board",
    "Direction",
    "GridParseError",
    "InvalidBoardError",
    "InvalidCharacterError",
    "InvalidDimensionsError",
    "MissingGridError",
    "PuzzleError",
]
