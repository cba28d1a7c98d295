"""
Exceptions raised by the game engine.

OutOfRangeError means the caller passed coordinates outside the grid and is
always propagated. IllegalMoveError covers ordinary misclicks (occupied cell,
wrong game state); the Game turns those into silent no-ops.
"""


class GameError(Exception):
    """Base class for all engine errors."""


class OutOfRangeError(GameError, IndexError):
    """Coordinates fall outside the board."""

    def __init__(self, row: int, col: int, width: int, height: int):
        super().__init__(
            f"Invalid position ({row}, {col}). "
            f"Row must be 0-{height - 1}, column 0-{width - 1}."
        )
        self.row = row
        self.col = col


class IllegalMoveError(GameError):
    """A move that the rules do not allow right now."""


class OccupiedError(IllegalMoveError):
    """The target cell already holds a marker."""

    def __init__(self, row: int, col: int, marker_id: str):
        super().__init__(f"Cell ({row}, {col}) is already occupied by {marker_id}")
        self.row = row
        self.col = col


class IllegalStateError(GameError):
    """An operation was called in a game state that does not allow it."""
