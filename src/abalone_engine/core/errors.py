"""Exceptions raised by the board engine and game session."""


class AbaloneError(Exception):
    """Base class for engine errors."""
    pass


class InvalidCellError(AbaloneError, ValueError):
    """Raised when a cell index is outside the 61-cell board."""

    def __init__(self, index):
        super().__init__(f"Invalid cell index {index!r}, must be in [0, 60]")
        self.index = index


class IllegalMoveError(AbaloneError, ValueError):
    """Raised when a move that fails the legality rules is applied."""
    pass


class GameOverError(AbaloneError):
    """Raised when a move is played after the game has ended."""
    pass
