"""
Move validator for TicTacToe.
Decides whether a placement is allowed right now.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from .game import Game


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. The round must be in progress
    2. Can only place on empty cells

    Coordinates outside the board are not a rule violation but a caller
    bug, so they raise OutOfRangeError from the board instead of producing
    an invalid result.
    """

    def validate_move(self, game: "Game", row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game: The game being played.
            row: Row to place the marker.
            col: Column to place the marker.

        Returns:
            ValidationResult with is_valid and error_message.

        Raises:
            OutOfRangeError: If (row, col) is not on the board.
        """
        # Range is checked first so bad coordinates raise in every state
        marker = game.board.marker_at(row, col)

        if not game.state.accepts_moves:
            return ValidationResult(
                is_valid=False,
                error_message=f"No round in progress (state is {game.state.name})"
            )

        if marker is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {marker.id}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game: "Game") -> List[Tuple[int, int]]:
        """
        Get all cells the active player may place on.

        Returns:
            List of (row, col) valid move positions (empty when no round is running).
        """
        if not game.state.accepts_moves:
            return []
        return game.board.get_empty_cells()
