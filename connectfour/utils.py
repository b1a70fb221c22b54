"""
utils.py - Constants, enumerations and pure win-detection helpers

This module provides the board constants, the four scan directions and the
side-effect free functions used to find win lines on a seat grid. Every
function takes the grid and the seat it inspects as explicit arguments.
"""

from enum import Enum, auto
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

# Game constants
DEFAULT_HEIGHT = 6
DEFAULT_WIDTH = 7
CONNECT_N = 4  # Number of pieces in a row to win
MIN_SIZE = CONNECT_N

# Cell values: 0 is empty, otherwise the seat (1 or 2) of the owner
EMPTY = 0
SEATS = (1, 2)

Cell = Tuple[int, int]


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Direction vectors (row, col) for each direction, row 0 is the top
DIRECTION_VECTORS: Dict[Direction, Cell] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def is_integer(value) -> bool:
    """True for int and numpy integers, False for bool and everything else."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def is_valid_position(grid: np.ndarray, row: int, col: int) -> bool:
    """
    Check if a position is within the grid boundaries.

    Args:
        grid: The seat grid
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    height, width = grid.shape
    return 0 <= row < height and 0 <= col < width


def line_from(row: int, col: int, direction: Direction) -> List[Cell]:
    """Build the CONNECT_N cells starting at (row, col) going in direction."""
    dr, dc = DIRECTION_VECTORS[direction]
    return [(row + dr * i, col + dc * i) for i in range(CONNECT_N)]


def is_win_line(grid: np.ndarray, seat: int, line: Sequence[Cell]) -> bool:
    """
    Check whether a candidate line is a win line for seat.

    Args:
        grid: The seat grid
        seat: Seat value to look for
        line: Candidate cells as (row, col) pairs

    Returns:
        True if every cell is on the grid and occupied by seat
    """
    return all(
        is_valid_position(grid, row, col) and grid[row, col] == seat
        for row, col in line
    )


def iter_win_lines(grid: np.ndarray, seat: int) -> Iterator[List[Cell]]:
    """Yield every win line for seat, scanning each origin in each direction."""
    height, width = grid.shape
    for row in range(height):
        for col in range(width):
            for direction in Direction:
                line = line_from(row, col, direction)
                if is_win_line(grid, seat, line):
                    yield line


def has_win(grid: np.ndarray, seat: int) -> bool:
    """
    Scan the whole grid for a win line belonging to seat.

    Args:
        grid: The seat grid
        seat: Seat value to look for

    Returns:
        True if at least one win line exists
    """
    return next(iter_win_lines(grid, seat), None) is not None


def check_win_at_position(grid: np.ndarray, row: int, col: int) -> bool:
    """
    Check if the piece at the given position is part of a win line.

    Only lines passing through (row, col) are counted, which gives the same
    answer as has_win() when (row, col) holds the most recent piece.

    Args:
        grid: The seat grid
        row: Row index where piece was placed
        col: Column index where piece was placed

    Returns:
        True if the piece completes CONNECT_N in a row, False otherwise
    """
    seat = grid[row, col]
    if seat == EMPTY:
        return False

    for dr, dc in DIRECTION_VECTORS.values():
        count = 1  # Start with 1 for the piece just placed

        # Check in the positive direction
        r, c = row + dr, col + dc
        while is_valid_position(grid, r, c) and grid[r, c] == seat:
            count += 1
            r += dr
            c += dc

        # Check in the negative direction
        r, c = row - dr, col - dc
        while is_valid_position(grid, r, c) and grid[r, c] == seat:
            count += 1
            r -= dr
            c -= dc

        if count >= CONNECT_N:
            return True

    return False


def find_win_line(grid: np.ndarray, seat: int) -> Optional[List[Cell]]:
    """Return the first win line for seat in scan order, or None."""
    return next(iter_win_lines(grid, seat), None)


def render_board_ascii(grid: np.ndarray, symbols: Dict[int, str]) -> str:
    """
    Render the grid as ASCII art.

    Args:
        grid: The seat grid
        symbols: Single character per seat

    Returns:
        ASCII representation of the board
    """
    height, width = grid.shape
    border = "|" + "-" * (width * 2 - 1) + "|"

    result = [border]
    for row in range(height):
        cells = [symbols.get(int(grid[row, col]), " ") for col in range(width)]
        result.append("|" + " ".join(cells) + "|")
    result.append(border)

    # Column numbers wrap past 9 so every column keeps a single character
    result.append("|" + " ".join(str(i % 10) for i in range(width)) + "|")

    return "\n".join(result)
