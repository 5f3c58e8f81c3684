from __future__ import annotations


class HexError(Exception):
    """Base class for errors raised by the hex core."""


class IllegalMoveError(HexError, ValueError):
    """A proposed move was rejected by the board."""

    def __init__(self, message: str, cell=None) -> None:
        super().__init__(message)
        self.cell = cell


class OutOfRangeError(IllegalMoveError):
    pass


class CellTakenError(IllegalMoveError):
    pass


class TurnOrderError(HexError, RuntimeError):
    """Move applied for a player whose turn it is not."""


class GameOverError(HexError, ValueError):
    pass


class GameInvariantError(HexError, AssertionError):
    """Board reached a position that hex rules say cannot exist."""


class MoveSourceExhausted(HexError, RuntimeError):
    pass
