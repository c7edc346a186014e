"""Exceptions raised for malformed boards and malformed puzzle input."""


class PuzzleError(Exception):
    """Base class for every error raised by the puzzle backend."""


class InvalidBoardError(PuzzleError, ValueError):
    """Raised when a grid is not a valid N×N permutation of 0..N²-1."""


class GridParseError(PuzzleError):
    """Base class for errors while reading a grid from text."""


class MissingGridError(GridParseError):
    pass


class InvalidCharacterError(GridParseError):
    pass


class InvalidDimensionsError(GridParseError):
    pass
