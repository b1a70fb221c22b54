"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, the game state machine
and the Gymnasium adapter (connectfour.game.env, imported on demand).
"""

from connectfour.game.board import Board
from connectfour.game.rules import (DropResult, GameListener, GameState, Outcome, Placed,
                                    Player, Rejected, RejectReason, Status, drop_piece,
                                    new_game, reset_game)

__all__ = ['Board', 'DropResult', 'GameListener', 'GameState', 'Outcome', 'Placed',
           'Player', 'Rejected', 'RejectReason', 'Status', 'drop_piece', 'new_game',
           'reset_game']
