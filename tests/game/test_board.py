"""Unit tests for /connectfour/game/board.py"""

import numpy as np
import pytest

from connectfour.exceptions import InvalidColumnError, InvalidDimensionsError
from connectfour.game.board import Board


@pytest.mark.parametrize(
    "height, width",
    [(3, 7), (6, 3), (0, 0), (-1, 5), (6.0, 7), (6, "7"), (True, 7), (None, 7)],
)
def test_bad_dimensions_are_rejected(height, width) -> None:
    with pytest.raises(InvalidDimensionsError):
        Board(height, width)


def test_new_board_is_empty() -> None:
    board = Board(5, 8)
    assert board.grid.shape == (5, 8)
    assert board.empty_count() == 40
    assert not board.is_full()
    assert board.last_move is None
    assert board.valid_columns() == list(range(8))


@pytest.mark.parametrize("column", range(7))
def test_first_piece_lands_on_bottom_row(column: int) -> None:
    board = Board()
    assert board.top_open_row(column) == 5
    assert board.place(column, 1) == 5
    assert board.cell(5, column) == 1
    assert board.last_move == (5, column)


def test_column_fills_then_reports_none() -> None:
    board = Board(4, 4)
    rows = [board.place(2, 1 + i % 2) for i in range(4)]
    assert rows == [3, 2, 1, 0]
    assert board.top_open_row(2) is None

    before = board.get_state()
    assert board.place(2, 1) is None
    assert np.array_equal(board.grid, before)
    assert board.valid_columns() == [0, 1, 3]


@pytest.mark.parametrize("column", [-1, 7, 100, 1.5, "3", None, True])
def test_top_open_row_out_of_range(column) -> None:
    board = Board()
    assert not board.in_range(column)
    with pytest.raises(InvalidColumnError):
        board.top_open_row(column)


def test_place_rejects_unknown_seat() -> None:
    with pytest.raises(ValueError):
        Board().place(0, 3)


def test_clear_discards_every_piece() -> None:
    board = Board(4, 4)
    for column in range(4):
        board.place(column, 1)
    board.clear()
    assert not board.grid.any()
    assert board.moves_made == []
    assert board.last_move is None


def test_is_full() -> None:
    board = Board(4, 4)
    for column in range(4):
        for i in range(4):
            board.place(column, 1 + (i + column // 2) % 2)
    assert board.is_full()
    assert board.empty_count() == 0
    assert board.valid_columns() == []


def test_last_move_wins_and_winning_line() -> None:
    board = Board()
    for column in range(4):
        board.place(column, 2)
    assert board.last_move_wins()
    assert board.has_win(2)
    assert not board.has_win(1)
    assert board.winning_line(2) == [(5, 0), (5, 1), (5, 2), (5, 3)]
    assert board.winning_line(1) == []


def test_get_state_returns_copy() -> None:
    board = Board()
    state = board.get_state()
    state[5, 0] = 1
    assert board.cell(5, 0) == 0


def test_numpy_integer_dimensions() -> None:
    board = Board(np.int64(4), np.int32(5))
    assert board.grid.shape == (4, 5)
