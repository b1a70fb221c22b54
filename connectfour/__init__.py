"""
connectfour - Connect Four rules engine

This package provides the board, the turn-based game state machine and
win detection for Connect Four, plus a terminal front end, a game
registry and a Gymnasium environment that drive it.
"""

# Version number
__version__ = '0.1.0'
