"""
Pytest will auto-discover / import this file called 'conftest.py'.
Fixtures shared by the game and interface tests live here.
"""

from typing import List

import pytest

from connectfour.game.rules import GameState, Player

# A then B alternate in column 0, then A stacks column 1 while B builds column 2.
# The 11th drop gives A four in column 1 (rows 5, 4, 3, 2).
SCENARIO_MOVES = [0, 0, 0, 0, 1, 2, 1, 2, 1, 2, 1]

# Fills a 6x7 board without anyone connecting four. Final owner of a cell is
# (rows from bottom + f(column)) % 2 with f = 0, 0, 1, 1, 0, 0, 1.
TIE_MOVES = (
    [0, 2, 2, 0, 0, 2, 2, 0, 0, 2, 2, 0]
    + [1, 3, 3, 1, 1, 3, 3, 1, 1, 3, 3, 1]
    + [4, 6, 6, 4, 4, 6, 6, 4, 4, 6, 6, 4]
    + [5] * 6
)

# On a 4x4 board the last drop (B, column 3) completes B's top row and fills the board.
WIN_ON_LAST_CELL_MOVES = [0, 1, 0, 2, 1, 0, 1, 0, 2, 1, 2, 2, 3, 3, 3, 3]


@pytest.fixture
def player_a() -> Player:
    return Player("A", "A")


@pytest.fixture
def player_b() -> Player:
    return Player("B", "B")


@pytest.fixture
def game(player_a: Player, player_b: Player) -> GameState:
    """Standard 6x7 game, A to move."""
    return GameState(6, 7, player_a, player_b)


@pytest.fixture
def scenario_moves() -> List[int]:
    return list(SCENARIO_MOVES)


@pytest.fixture
def tie_moves() -> List[int]:
    return list(TIE_MOVES)


@pytest.fixture
def win_on_last_cell_moves() -> List[int]:
    return list(WIN_ON_LAST_CELL_MOVES)
