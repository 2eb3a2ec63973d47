"""
errors.py - Error types raised by the Connect Four board

Every error is a local condition the caller can recover from; the board
raises them and never reports them itself.
"""


class Connect4Error(Exception):
    """Base class for all Connect Four board errors."""


class InvalidDimensions(Connect4Error, ValueError):
    """Raised when a board is created narrower or shorter than four cells."""


class GameAlreadyFinished(Connect4Error):
    """Raised when a piece is placed on a board that already has a result."""


class ColumnOutOfRange(Connect4Error, IndexError):
    """Raised when a column index falls outside the board."""


class ColumnFull(Connect4Error):
    """Raised when a column has no room left for another piece."""


class InvalidPlayer(Connect4Error, ValueError):
    """Raised when a player identifier is negative."""


class BatchPositionError(Connect4Error):
    """
    Wraps a placement error raised while applying a sequence of moves.

    Attributes:
        position: 1-based position of the failing move in the sequence
        cause: The underlying placement error
    """

    def __init__(self, position: int, cause: Connect4Error):
        super().__init__(f"move at pos {position} caused an error: {cause}")
        self.position = position
        self.cause = cause
