"""
utils.py - Constants, enumerations and rendering helpers for Connect Four

This module provides the game constants, the player and direction
enumerations, and the ASCII board renderer shared by the board and the
command-line runners.
"""

from enum import Enum, IntEnum, auto
from typing import Dict, Tuple
import numpy as np

# Game constants
DEFAULT_ROWS = 6
DEFAULT_COLS = 7
MIN_DIMENSION = 4  # Smallest legal width or height
CONNECT_N = 4  # Number of pieces in a row to win

EMPTY = -1  # Cell value for an unoccupied cell
FULL = -1   # Column fill pointer once a column has no capacity left
DRAW = -1   # Outcome winner value for a drawn game


class Player(IntEnum):
    """The two players driven by the runners and by batch placement."""
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        return Player.ONE

    def __str__(self):
        if self == Player.ONE:
            return "X"
        return "O"


class Direction(Enum):
    """Enumeration representing the axes checked for a win."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()  # Diagonal from bottom-left to top-right
    DIAGONAL_DOWN = auto()  # Diagonal from top-left to bottom-right


# Each axis as a pair of opposite (row, col) unit vectors, in scan order.
# Rows are indexed from the top, so "down" is +1.
AXIS_VECTORS: Dict[Direction, Tuple[Tuple[int, int], Tuple[int, int]]] = {
    Direction.HORIZONTAL: ((0, 1), (0, -1)),
    Direction.VERTICAL: ((1, 0), (-1, 0)),
    Direction.DIAGONAL_UP: ((-1, 1), (1, -1)),
    Direction.DIAGONAL_DOWN: ((-1, -1), (1, 1)),
}


def cell_symbol(value: int) -> str:
    """
    Get the character used to draw a cell.

    Args:
        value: The cell value

    Returns:
        A single-character string for the cell
    """
    if value == EMPTY:
        return " "
    if value in (Player.ONE, Player.TWO):
        return str(Player(value))
    return str(value)[-1]


def render_board_ascii(board: np.ndarray) -> str:
    """
    Render the board as ASCII art.

    Args:
        board: The game grid, rows indexed from the top

    Returns:
        ASCII representation of the board
    """
    rows, cols = board.shape
    result = []
    result.append("|" + "-" * (cols * 2 - 1) + "|")

    for row in range(rows):
        cells = [cell_symbol(int(board[row, col])) for col in range(cols)]
        result.append("|" + " ".join(cells) + "|")

    result.append("|" + "-" * (cols * 2 - 1) + "|")

    # Column numbers wrap after 9 so the frame stays aligned
    result.append("|" + " ".join(str(i % 10) for i in range(cols)) + "|")

    return "\n".join(result)
