"""
Win checker for TicTacToe.
Decides the round outcome right after a marker is placed.
"""

from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .board import Axis, Board
from .players import Marker


class RoundResult(Enum):
    """Outcome of a round after the latest placement."""
    IN_PROGRESS = "in_progress"
    WIN_A = "win_a"         # Slot 0 won
    WIN_B = "win_b"         # Slot 1 won
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self != RoundResult.IN_PROGRESS

    @property
    def winner_index(self) -> Optional[int]:
        """Slot of the winning player, or None when nobody has won."""
        if self == RoundResult.WIN_A:
            return 0
        if self == RoundResult.WIN_B:
            return 1
        return None

    @classmethod
    def win_for(cls, player_index: int) -> "RoundResult":
        return cls.WIN_A if player_index == 0 else cls.WIN_B


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Only the lines through the latest placement can have just been
    completed, so instead of rescanning the whole board we check the row,
    the column and (on square boards) both diagonals. That is
    O(width + height) per placement.

    Both diagonals are checked even when the cell is not on them. A
    diagonal only counts when every cell holds the marker, so this never
    reports a false win; it is just wasted work on large boards.
    """

    @staticmethod
    def _all_match(cells: Sequence[Optional[Marker]], marker: Marker) -> bool:
        return all(cell == marker for cell in cells)

    def check_line(self, board: Board, axis: Axis, index: int, marker: Marker) -> bool:
        """
        Check if every cell of one row or column holds the marker.

        Args:
            board: The game board.
            axis: Axis.ROW or Axis.COLUMN.
            index: Which row or column.
            marker: The marker to look for.

        Returns:
            True if the whole line is filled with the marker.
        """
        return self._all_match(board.line(axis, index), marker)

    def winning_line(
        self,
        board: Board,
        row: int,
        col: int,
        marker: Marker
    ) -> Optional[List[Tuple[int, int]]]:
        """
        Find a line through (row, col) completed by the marker.

        Args:
            board: The game board.
            row: Row of the latest placement.
            col: Column of the latest placement.
            marker: The marker that was placed.

        Returns:
            The winning line as list of (row, col), or None.
        """
        if self.check_line(board, Axis.ROW, row, marker):
            return board.line_cells(Axis.ROW, row)

        if self.check_line(board, Axis.COLUMN, col, marker):
            return board.line_cells(Axis.COLUMN, col)

        if board.is_square:
            size = board.width
            if self._all_match(board.diagonal(), marker):
                return [(i, i) for i in range(size)]
            if self._all_match(board.anti_diagonal(), marker):
                return [(i, size - 1 - i) for i in range(size)]

        return None

    def check_win(self, board: Board, row: int, col: int, marker: Marker) -> bool:
        return self.winning_line(board, row, col, marker) is not None

    def evaluate(
        self,
        board: Board,
        row: int,
        col: int,
        marker: Marker,
        active_player_index: int
    ) -> RoundResult:
        """
        Work out the round result after a placement.

        A win goes to whoever is active right now, so this must be called
        before the turn passes to the other player.

        Args:
            board: The game board, with the marker already placed.
            row: Row of the placement.
            col: Column of the placement.
            marker: The marker that was placed.
            active_player_index: Slot (0 or 1) of the player who placed it.

        Returns:
            WIN_A / WIN_B, DRAW when the board is full, else IN_PROGRESS.
        """
        if self.check_win(board, row, col, marker):
            return RoundResult.win_for(active_player_index)

        if board.is_full():
            return RoundResult.DRAW

        return RoundResult.IN_PROGRESS
