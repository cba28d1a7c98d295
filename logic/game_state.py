"""
Game lifecycle states and move records.
"""

from dataclasses import dataclass
from enum import Enum


class GameState(Enum):
    """
    Where the game is in its lifecycle.

    NEW --start round--> IN_PROGRESS --result--> STOPPED --start round--> IN_PROGRESS
    Any state --reset--> NEW
    """
    NEW = "new"
    IN_PROGRESS = "in_progress"
    STOPPED = "stopped"

    @property
    def accepts_moves(self) -> bool:
        return self == GameState.IN_PROGRESS


@dataclass(frozen=True)
class Move:
    """
    A move made during the current round.
    """
    player_index: int       # Slot of the player who moved (0 or 1)
    row: int
    col: int
    marker_id: str          # Id of the marker that was placed
