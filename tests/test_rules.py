"""Tests for the win and draw evaluation helpers."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from connect4.game.rules import count_direction, is_draw, winning_direction, winning_line
from connect4.utils import EMPTY, FULL, Direction


@pytest.fixture
def grid():
    return np.full((6, 7), EMPTY, dtype=int)


def test_count_direction_stops_at_opponent(grid):
    grid[5, 0:3] = 1
    grid[5, 3] = 2
    assert count_direction(grid, 1, 5, 0, 0, 1, 3) == 2
    assert count_direction(grid, 1, 5, 2, 0, 1, 3) == 0


def test_count_direction_stops_at_boundary(grid):
    grid[5, 0:4] = 1
    assert count_direction(grid, 1, 5, 1, 0, -1, 3) == 1
    assert count_direction(grid, 1, 5, 0, 1, 0, 3) == 0


def test_count_direction_respects_limit(grid):
    grid[5, :] = 1
    assert count_direction(grid, 1, 5, 0, 0, 1, 2) == 2
    assert count_direction(grid, 1, 5, 0, 0, 1, 0) == 0


def test_count_direction_stops_at_empty(grid):
    grid[5, 0] = 1
    grid[5, 2] = 1
    assert count_direction(grid, 1, 5, 0, 0, 1, 3) == 0


@pytest.mark.parametrize("cells,placed,direction", [
    ([(5, 1), (5, 2), (5, 3), (5, 4)], (5, 2), Direction.HORIZONTAL),
    ([(2, 6), (3, 6), (4, 6), (5, 6)], (2, 6), Direction.VERTICAL),
    ([(5, 0), (4, 1), (3, 2), (2, 3)], (4, 1), Direction.DIAGONAL_UP),
    ([(2, 3), (3, 4), (4, 5), (5, 6)], (5, 6), Direction.DIAGONAL_DOWN),
])
def test_winning_direction(grid, cells, placed, direction):
    for r, c in cells:
        grid[r, c] = 2
    assert winning_direction(grid, *placed) == direction
    assert winning_line(grid, *placed) == sorted(cells, key=lambda rc: (rc[1], rc[0]))


def test_no_win_with_three(grid):
    grid[5, 0:3] = 1
    assert winning_direction(grid, 5, 1) is None
    assert winning_line(grid, 5, 1) == []


def test_no_win_from_empty_cell(grid):
    assert winning_direction(grid, 0, 0) is None


def test_winning_line_covers_long_run(grid):
    grid[5, 1:6] = 1
    assert winning_line(grid, 5, 3) == [(5, c) for c in range(1, 6)]


def test_custom_run_length(grid):
    grid[5, 0:3] = 1
    assert winning_direction(grid, 5, 2, connect_n=3) == Direction.HORIZONTAL


def test_is_draw():
    assert is_draw([FULL] * 7)
    assert not is_draw([FULL] * 6 + [0])
    assert not is_draw([5] * 7)
