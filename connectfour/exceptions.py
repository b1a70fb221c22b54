"""
exceptions.py - Errors raised for misuse of the engine's constructors and queries

Gameplay problems (bad column, full column, finished game) are reported as
Rejected results by drop_piece() and never raised.
"""


class ConnectFourError(Exception):
    """Base class for engine errors."""


class InvalidDimensionsError(ConnectFourError, ValueError):
    """Board smaller than CONNECT_N in either direction."""

    def __init__(self, height: int, width: int, minimum: int):
        self.height = height
        self.width = width
        super().__init__(
            f"Board must be at least {minimum}x{minimum}, got {height}x{width}"
        )


class InvalidColumnError(ConnectFourError, IndexError):
    """Column index outside [0, width)."""

    def __init__(self, column, width: int):
        self.column = column
        self.width = width
        super().__init__(f"Column {column!r} out of range 0..{width - 1}")
