"""
rules.py - Game state management for Connect Four

This module provides:
1. The Player value object and the result types returned by drop_piece()
2. GameState, which owns one game's board, players, turn and status
3. The functional interface used by front ends: new_game(), drop_piece()
   and reset_game()

Gameplay errors never raise. drop_piece() returns either Placed or
Rejected and leaves the game untouched when it rejects.
"""

import threading
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Tuple, Union

import numpy as np

from connectfour.debug import debug
from connectfour.exceptions import InvalidDimensionsError
from connectfour.game.board import Board
from connectfour.utils import EMPTY, SEATS, render_board_ascii


@dataclass(frozen=True)
class Player:
    """A participant. The marker is an opaque token (a color name in the UI)."""
    display_name: str
    marker: str

    @classmethod
    def create(cls, marker: str, display_name: Optional[str] = None) -> 'Player':
        """Build a player, naming it after its marker when no name is given."""
        name = (display_name or "").strip()
        return cls(display_name=name or marker, marker=marker)

    def __str__(self) -> str:
        return self.display_name


class Status(Enum):
    """Lifecycle of a game."""
    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()

    def is_game_over(self) -> bool:
        return self != Status.IN_PROGRESS


class Outcome(Enum):
    """What a successful drop did to the game."""
    CONTINUE = auto()
    WON = auto()
    TIED = auto()


class RejectReason(Enum):
    INVALID_COLUMN = auto()
    COLUMN_FULL = auto()
    GAME_OVER = auto()
    INVALID_DIMENSIONS = auto()


@dataclass(frozen=True)
class Placed:
    """A piece landed at (row, column)."""
    row: int
    column: int
    outcome: Outcome

    @property
    def accepted(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    """The request was refused and nothing changed."""
    reason: RejectReason

    @property
    def accepted(self) -> bool:
        return False


DropResult = Union[Placed, Rejected]


class GameListener:
    """
    Receives notifications from a GameState.

    Subclass and override what you need; the defaults do nothing.
    """

    def piece_landed(self, game: 'GameState', row: int, column: int, player: Player) -> None:
        pass

    def game_ended(self, game: 'GameState', status: Status, winner: Optional[Player]) -> None:
        pass


class GameState:
    """
    One Connect Four game between two players.

    drop_piece() and reset_game() are the only mutating operations and are
    serialized by a per-game lock. Everything else is a read-only query.
    """

    def __init__(self, height: int, width: int, player1: Player, player2: Player):
        """
        Start a fresh game with player1 to move.

        Raises:
            InvalidDimensionsError: if height or width is below 4
        """
        self.board = Board(height, width)
        self.player1 = player1
        self.player2 = player2
        self._lock = threading.RLock()
        self._listeners: List[GameListener] = []
        self._start()
        debug.debug(f"New game {height}x{width}: {player1} vs {player2}", "game")

    def _start(self):
        # the turn is a seat, so a Player object passed for both seats still alternates
        self.current_seat = 1
        self.winner_seat = EMPTY
        self.status = Status.IN_PROGRESS

    @property
    def current_player(self) -> Player:
        return self.player_at(self.current_seat)

    @property
    def winner(self) -> Optional[Player]:
        return self.player_at(self.winner_seat)

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def move_count(self) -> int:
        return len(self.board.moves_made)

    @property
    def last_move(self) -> Optional[Tuple[int, int]]:
        return self.board.last_move

    def seats_of(self, player: Player) -> List[int]:
        """Board values held by player: [1], [2], [1, 2] or [] for a stranger."""
        seats = [seat for seat in SEATS if self.player_at(seat) is player]
        # equal-valued copies still resolve
        return seats or [seat for seat in SEATS if self.player_at(seat) == player]

    def player_at(self, seat: int) -> Optional[Player]:
        return {1: self.player1, 2: self.player2}.get(seat)

    # -- queries --

    def cell(self, row: int, column: int) -> Optional[Player]:
        """The player occupying (row, column), None when empty."""
        return self.player_at(self.board.cell(row, column))

    def grid(self) -> np.ndarray:
        """Copy of the seat grid (0 empty, 1 player1, 2 player2)."""
        return self.board.get_state()

    def top_open_row(self, column: int) -> Optional[int]:
        """
        Row a piece dropped into column would land on, None if full.

        Raises:
            InvalidColumnError: if column is outside [0, width)
        """
        return self.board.top_open_row(column)

    def valid_columns(self) -> List[int]:
        if self.status.is_game_over():
            return []
        return self.board.valid_columns()

    def has_win(self, player: Player) -> bool:
        """True if player owns any four-in-a-row on the board."""
        return any(self.board.has_win(seat) for seat in self.seats_of(player))

    def is_full(self) -> bool:
        return self.board.is_full()

    def winning_line(self) -> List[Tuple[int, int]]:
        """Cells of the winner's line, empty unless the game is won."""
        if self.winner_seat == EMPTY:
            return []
        return self.board.winning_line(self.winner_seat)

    # -- listeners --

    def add_listener(self, listener: GameListener):
        self._listeners.append(listener)

    def remove_listener(self, listener: GameListener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    # -- mutations --

    def drop_piece(self, column: int) -> DropResult:
        """
        Drop the current player's piece into column.

        Args:
            column: Column index (0-indexed)

        Returns:
            Placed(row, column, outcome) on success, Rejected(reason) otherwise
        """
        with self._lock:
            result, mover = self._apply_drop(column)

        if isinstance(result, Placed):
            self._notify(result, mover)
        return result

    def _apply_drop(self, column: int) -> Tuple[DropResult, Optional[Player]]:
        if self.status.is_game_over():
            debug.debug(f"Rejected drop in column {column!r}: game is over ({self.status.name})", "game")
            return Rejected(RejectReason.GAME_OVER), None

        if not self.board.in_range(column):
            debug.debug(f"Rejected drop: column {column!r} out of range", "game")
            return Rejected(RejectReason.INVALID_COLUMN), None

        seat = self.current_seat
        mover = self.player_at(seat)
        row = self.board.place(column, seat)
        if row is None:
            debug.debug(f"Rejected drop: column {column} is full", "game")
            return Rejected(RejectReason.COLUMN_FULL), None

        # Win takes priority over a board that filled on the same move
        debug.start_timer(f"win_check:{id(self)}")
        won = self.board.last_move_wins()
        debug.end_timer(f"win_check:{id(self)}", "game")

        if won:
            self.status = Status.WON
            self.winner_seat = seat
            outcome = Outcome.WON
            debug.info(f"{mover} wins with a piece at ({row}, {column})", "game")
        elif self.board.is_full():
            self.status = Status.TIED
            outcome = Outcome.TIED
            debug.info("Board is full, game tied", "game")
        else:
            self.current_seat = 3 - seat
            outcome = Outcome.CONTINUE
            debug.debug(f"Switching to {self.current_player}", "game")

        return Placed(row, column, outcome), mover

    def _notify(self, result: Placed, mover: Player):
        for listener in list(self._listeners):
            listener.piece_landed(self, result.row, result.column, mover)

        if result.outcome == Outcome.WON:
            status, winner = Status.WON, mover
        elif result.outcome == Outcome.TIED:
            status, winner = Status.TIED, None
        else:
            return

        for listener in list(self._listeners):
            listener.game_ended(self, status, winner)

    def reset_game(self):
        """Empty the board and hand the first move back to player1."""
        with self._lock:
            debug.debug("Resetting game", "game")
            self.board.clear()
            self._start()

    # -- rendering --

    def render(self) -> str:
        symbols = {1: self.player1.marker[:1] or "1", 2: self.player2.marker[:1] or "2"}
        if symbols[1] == symbols[2]:
            symbols = {1: "X", 2: "O"}
        return render_board_ascii(self.board.grid, symbols)

    def __str__(self) -> str:
        return self.render()


def new_game(height: int, width: int, player1: Player, player2: Player) -> Union[GameState, Rejected]:
    """
    Create a game, or Rejected(INVALID_DIMENSIONS) when the board is too small.
    """
    try:
        return GameState(height, width, player1, player2)
    except InvalidDimensionsError as e:
        debug.warning(str(e), "game")
        return Rejected(RejectReason.INVALID_DIMENSIONS)


def drop_piece(game: GameState, column: int) -> DropResult:
    return game.drop_piece(column)


def reset_game(game: GameState) -> None:
    game.reset_game()
