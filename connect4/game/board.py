"""
board.py - Board representation and piece placement for Connect Four

This module implements the Board class which owns the grid, tracks how much
room is left in each column, and ends the game when a placement wins or
fills the board.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np

from connect4.game.errors import (BatchPositionError, ColumnFull, ColumnOutOfRange,
                                  Connect4Error, GameAlreadyFinished,
                                  InvalidDimensions, InvalidPlayer)
from connect4.game.rules import is_draw, winning_direction
from connect4.utils import (DEFAULT_COLS, DEFAULT_ROWS, DRAW, EMPTY, FULL,
                            MIN_DIMENSION, Player, render_board_ascii)


@dataclass(frozen=True)
class Outcome:
    """Result of a placement that ended the game."""
    winner: int  # Player identifier, or DRAW

    @property
    def is_draw(self) -> bool:
        return self.winner == DRAW


class Board:
    """
    Represents a Connect Four game board.

    Rows are indexed from the top, so pieces fall toward the highest row
    index. ``column_fill[c]`` holds the row the next piece in column ``c``
    will occupy, or FULL once the column is full.
    """

    def __init__(self, width: int = DEFAULT_COLS, height: int = DEFAULT_ROWS):
        """
        Initialize an empty board.

        Args:
            width: Number of columns, at least 4
            height: Number of rows, at least 4

        Raises:
            InvalidDimensions: If either dimension is below 4
        """
        if width < MIN_DIMENSION:
            raise InvalidDimensions(
                f"width must be at least {MIN_DIMENSION} (this is Connect Four after all)")
        if height < MIN_DIMENSION:
            raise InvalidDimensions(
                f"height must be at least {MIN_DIMENSION} (this is Connect Four after all)")

        self._width = width
        self._height = height
        self.grid = np.full((height, width), EMPTY, dtype=int)
        self.column_fill: List[int] = [height - 1] * width
        self.finished = False

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def is_column_full(self, column: int) -> bool:
        """Check if a column has no room left."""
        return self.column_fill[column] == FULL

    def valid_columns(self) -> List[int]:
        """
        Get the columns that still accept a piece.

        Returns:
            List of column indices, empty once the game is finished
        """
        if self.finished:
            return []
        return [col for col in range(self._width) if not self.is_column_full(col)]

    def place_piece(self, column: int, player: int) -> Optional[Outcome]:
        """
        Drop a piece for a player into a column.

        Args:
            column: The column to place a piece (0-indexed)
            player: Non-negative player identifier

        Returns:
            An Outcome if the move won or drew the game, None if play continues

        Raises:
            GameAlreadyFinished: If the game already has a result
            ColumnOutOfRange: If the column is outside the board
            ColumnFull: If the column has no room left
            InvalidPlayer: If the player identifier is negative
        """
        if self.finished:
            raise GameAlreadyFinished("can't place more pieces on a completed board")

        if not 0 <= column < self._width:
            raise ColumnOutOfRange(
                f"invalid move: column must be between 0 and {self._width - 1}")

        if self.is_column_full(column):
            raise ColumnFull(f"invalid move: column {column} is full")

        if player < 0:
            raise InvalidPlayer(f"invalid player {player}: identifiers must be non-negative")

        row = self.column_fill[column]
        self.grid[row, column] = player
        self.column_fill[column] = row - 1

        return self._evaluate(row, column, player)

    def place_all_pieces(self, columns: Iterable[int]) -> Optional[Outcome]:
        """
        Play a sequence of moves, alternating players starting with player 1.

        Stops at the first move that wins or draws and ignores the rest.

        Args:
            columns: Column for each successive move

        Returns:
            The Outcome of the game, or None if the moves ran out first

        Raises:
            BatchPositionError: If a move is rejected, with its 1-based position
        """
        player = Player.ONE
        for position, column in enumerate(columns, start=1):
            try:
                outcome = self.place_piece(column, player)
            except Connect4Error as e:
                raise BatchPositionError(position, e) from e

            if outcome is not None:
                return outcome

            player = player.other()

        return None

    def _evaluate(self, row: int, column: int, player: int) -> Optional[Outcome]:
        """Check the placement at (row, column) for a win or a full board."""
        if winning_direction(self.grid, row, column) is not None:
            self._finish()
            return Outcome(winner=int(player))

        if is_draw(self.column_fill):
            self._finish()
            return Outcome(winner=DRAW)

        return None

    def _finish(self) -> None:
        self.finished = True
        self.grid.flags.writeable = False

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            A writable copy of the grid
        """
        return self.grid.copy()

    def render(self) -> str:
        """Render the board as a string."""
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
