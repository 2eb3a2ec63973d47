"""
rules.py - Win and draw evaluation for Connect Four

The checks here only look at the lines through the most recently placed
piece, so a placement costs O(width + height) rather than a full board scan.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from connect4.utils import AXIS_VECTORS, CONNECT_N, EMPTY, FULL, Direction

Coord = Tuple[int, int]


def is_valid_position(grid: np.ndarray, row: int, col: int) -> bool:
    """Check if a position is within the grid boundaries."""
    rows, cols = grid.shape
    return 0 <= row < rows and 0 <= col < cols


def count_direction(grid: np.ndarray, player: int, row: int, col: int,
                    row_dir: int, col_dir: int, limit: int) -> int:
    """
    Count contiguous pieces belonging to a player in one direction.

    The scan starts at the cell next to (row, col) and moves at most
    ``limit`` steps, stopping at the first cell that is off the grid or does
    not hold ``player``.

    Args:
        grid: The game grid
        player: Player identifier to match
        row: Row of the starting cell (not counted)
        col: Column of the starting cell (not counted)
        row_dir: Row step, -1, 0 or 1
        col_dir: Column step, -1, 0 or 1
        limit: Maximum number of cells to examine

    Returns:
        Number of matching cells found
    """
    matches = 0
    r, c = row, col
    for _ in range(limit):
        r += row_dir
        c += col_dir
        if not is_valid_position(grid, r, c) or grid[r, c] != player:
            break
        matches += 1
    return matches


def winning_direction(grid: np.ndarray, row: int, col: int,
                      connect_n: int = CONNECT_N) -> Optional[Direction]:
    """
    Find the axis on which the piece at (row, col) completes a winning run.

    Args:
        grid: The game grid
        row: Row of the piece just placed
        col: Column of the piece just placed
        connect_n: Run length needed to win

    Returns:
        The first winning Direction in scan order, or None
    """
    player = grid[row, col]
    if player == EMPTY:
        return None

    needed = connect_n - 1
    for direction, ((dr1, dc1), (dr2, dc2)) in AXIS_VECTORS.items():
        first = count_direction(grid, player, row, col, dr1, dc1, needed)
        if first == needed:
            return direction

        # Only scan as far as needed to finish the run
        second = count_direction(grid, player, row, col, dr2, dc2, needed - first)
        if first + second >= needed:
            return direction

    return None


def winning_line(grid: np.ndarray, row: int, col: int,
                 connect_n: int = CONNECT_N) -> List[Coord]:
    """
    Get the cells of the winning run through (row, col).

    Returns:
        List of (row, col) positions ordered by column then row, or an empty
        list if the piece at (row, col) did not win
    """
    direction = winning_direction(grid, row, col, connect_n)
    if direction is None:
        return []

    player = grid[row, col]
    (dr1, dc1), (dr2, dc2) = AXIS_VECTORS[direction]
    rows, cols = grid.shape
    span = max(rows, cols)

    back = count_direction(grid, player, row, col, dr2, dc2, span)
    forward = count_direction(grid, player, row, col, dr1, dc1, span)

    start = (row + dr2 * back, col + dc2 * back)
    line = [(start[0] + dr1 * i, start[1] + dc1 * i) for i in range(back + forward + 1)]
    return sorted(line, key=lambda rc: (rc[1], rc[0]))


def is_draw(column_fill: Sequence[int]) -> bool:
    """Check whether every column has reached the full sentinel."""
    return all(fill == FULL for fill in column_fill)
