"""
board.py - Board representation and gravity mechanics for Connect Four

The Board stores a height x width numpy grid of seats (0 empty, 1 or 2 for
the occupying player). Row 0 is the top row, pieces settle on the lowest
empty row of a column. The board knows nothing about turns or players; the
GameState in rules.py drives it.
"""

from typing import List, Optional, Tuple

import numpy as np

from connectfour.debug import debug
from connectfour.exceptions import InvalidColumnError, InvalidDimensionsError
from connectfour.utils import (DEFAULT_HEIGHT, DEFAULT_WIDTH, EMPTY, MIN_SIZE, SEATS,
                               check_win_at_position, find_win_line, has_win, is_integer)


class Board:
    """
    A fixed-size Connect Four grid.

    Cells only ever change from empty to occupied; clear() discards every
    piece at once.
    """

    def __init__(self, height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH):
        """
        Create an empty board.

        Raises:
            InvalidDimensionsError: if either dimension is not an integer of at
                least CONNECT_N
        """
        if not (is_integer(height) and is_integer(width)) or height < MIN_SIZE or width < MIN_SIZE:
            raise InvalidDimensionsError(height, width, MIN_SIZE)

        debug.debug(f"Initializing {height}x{width} board", "board")
        self.height = height
        self.width = width
        self.clear()

    def clear(self):
        """Discard every piece."""
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)
        self.moves_made: List[int] = []
        self.last_move: Optional[Tuple[int, int]] = None

    def in_range(self, column) -> bool:
        """True if column is an integer in [0, width)."""
        return is_integer(column) and 0 <= column < self.width

    def top_open_row(self, column: int) -> Optional[int]:
        """
        Find the row a piece dropped into column would land on.

        Args:
            column: Column index (0-indexed)

        Returns:
            The lowest empty row index, or None if the column is full

        Raises:
            InvalidColumnError: if column is outside the board
        """
        if not self.in_range(column):
            raise InvalidColumnError(column, self.width)

        for row in range(self.height - 1, -1, -1):
            if self.grid[row, column] == EMPTY:
                return row
        return None

    def place(self, column: int, seat: int) -> Optional[int]:
        """
        Drop a piece for seat into column.

        Returns:
            The row the piece landed on, or None if the column is full
        """
        if seat not in SEATS:
            raise ValueError(f"Seat must be one of {SEATS}, got {seat!r}")

        row = self.top_open_row(column)
        if row is None:
            debug.debug(f"Column {column} is full", "board")
            return None

        debug.trace(f"Placing seat {seat} at ({row}, {column})", "board")
        self.grid[row, column] = seat
        self.last_move = (row, column)
        self.moves_made.append(column)
        return row

    def cell(self, row: int, column: int) -> int:
        return int(self.grid[row, column])

    def valid_columns(self) -> List[int]:
        """Columns whose top cell is still empty."""
        return [col for col in range(self.width) if self.grid[0, col] == EMPTY]

    def is_full(self) -> bool:
        """True if no empty cell remains."""
        return not np.any(self.grid == EMPTY)

    def empty_count(self) -> int:
        return int(np.count_nonzero(self.grid == EMPTY))

    def has_win(self, seat: int) -> bool:
        """Full scan for a win line owned by seat."""
        return has_win(self.grid, seat)

    def last_move_wins(self) -> bool:
        """Check only the lines through the most recent piece."""
        if self.last_move is None:
            return False

        row, col = self.last_move
        return check_win_at_position(self.grid, row, col)

    def winning_line(self, seat: int) -> List[Tuple[int, int]]:
        return find_win_line(self.grid, seat) or []

    def get_state(self) -> np.ndarray:
        """Copy of the seat grid."""
        return self.grid.copy()
