"""
Board model for TicTacToe.
A fixed-size grid where each cell is empty (None) or holds a Marker.
"""

import logging
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from .config import GameConfig
from .errors import OccupiedError, OutOfRangeError
from .players import Marker

logger = logging.getLogger(__name__)


class Axis(Enum):
    """Direction of a straight line across the board."""
    ROW = "row"
    COLUMN = "column"


class Board:
    """
    A width x height grid of cells addressed by (row, col).

    The board always guards its own cells: placing on an occupied cell
    raises OccupiedError and never overwrites the existing marker.
    """

    def __init__(self, width: Optional[int] = None, height: Optional[int] = None):
        """
        Create an empty board.

        Args:
            width: Number of columns. Defaults to GameConfig.BOARD_WIDTH.
            height: Number of rows. Defaults to GameConfig.BOARD_HEIGHT.
        """
        width = GameConfig.BOARD_WIDTH if width is None else width
        height = GameConfig.BOARD_HEIGHT if height is None else height
        if width < 1 or height < 1:
            raise ValueError(f"Board must have at least one cell, got {width}x{height}")

        # None means empty, otherwise a Marker
        self._cells = np.full((height, width), None, dtype=object)

    @property
    def width(self) -> int:
        return self._cells.shape[1]

    @property
    def height(self) -> int:
        return self._cells.shape[0]

    @property
    def is_square(self) -> bool:
        return self.width == self.height

    def _check_range(self, row: int, col: int):
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise OutOfRangeError(row, col, self.width, self.height)

    def place_at(self, row: int, col: int, marker: Marker):
        """
        Put a marker in a cell.

        Args:
            row: Row index.
            col: Column index.
            marker: The marker to place.

        Raises:
            OutOfRangeError: If (row, col) is not on the board.
            OccupiedError: If the cell already holds a marker.
        """
        self._check_range(row, col)
        existing = self._cells[row, col]
        if existing is not None:
            raise OccupiedError(row, col, existing.id)
        self._cells[row, col] = marker
        logger.debug("Placed %s at (%d, %d)", marker.id, row, col)

    def marker_at(self, row: int, col: int) -> Optional[Marker]:
        """Get the marker in a cell, or None if it is empty."""
        self._check_range(row, col)
        return self._cells[row, col]

    def is_empty_at(self, row: int, col: int) -> bool:
        return self.marker_at(row, col) is None

    def is_full(self) -> bool:
        """True when no empty cell remains."""
        return all(cell is not None for cell in self._cells.flat)

    def clear(self):
        """Empty every cell."""
        self._cells.fill(None)

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples, in row-major order.
        """
        return [
            (row, col)
            for row in range(self.height)
            for col in range(self.width)
            if self._cells[row, col] is None
        ]

    def line(self, axis: Axis, index: int) -> List[Optional[Marker]]:
        """
        Get the cells along one row or one column.

        Args:
            axis: Axis.ROW or Axis.COLUMN.
            index: Which row or column.

        Returns:
            List of markers (None for empty cells).
        """
        if axis == Axis.ROW:
            self._check_range(index, 0)
            return list(self._cells[index, :])
        self._check_range(0, index)
        return list(self._cells[:, index])

    def line_cells(self, axis: Axis, index: int) -> List[Tuple[int, int]]:
        """Coordinates along one row or one column."""
        if axis == Axis.ROW:
            return [(index, col) for col in range(self.width)]
        return [(row, index) for row in range(self.height)]

    def diagonal(self) -> List[Optional[Marker]]:
        """Top-left to bottom-right diagonal."""
        return list(self._cells.diagonal())

    def anti_diagonal(self) -> List[Optional[Marker]]:
        """Top-right to bottom-left diagonal."""
        return list(np.fliplr(self._cells).diagonal())

    def copy(self) -> "Board":
        """Create a copy of the board (markers are immutable, so shallow is fine)."""
        new_board = Board(self.width, self.height)
        new_board._cells = self._cells.copy()
        return new_board

    def to_text(self) -> str:
        """Render the board as text, using the first letter of each marker id."""
        header = "    " + "   ".join(str(col) for col in range(self.width))
        divider = "  +" + "---+" * self.width
        lines = [header, divider]
        for row in range(self.height):
            symbols = []
            for col in range(self.width):
                marker = self._cells[row, col]
                symbols.append(marker.id[0].upper() if marker and marker.id else " ")
            lines.append(f"{row} | " + " | ".join(symbols) + " |")
            lines.append(divider)
        return "\n".join(lines)
