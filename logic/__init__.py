"""
Logic module for scoreboard TicTacToe.
Handles the board, players, rounds, scoring and input gating.
"""

from .board import Axis, Board
from .config import GameConfig
from .controller import BoardView, GameController, PlayerView
from .errors import (
    GameError,
    IllegalMoveError,
    IllegalStateError,
    OccupiedError,
    OutOfRangeError,
)
from .game import Game
from .game_state import GameState, Move
from .move_validator import MoveValidator, ValidationResult
from .players import TEAMS, Marker, Player, Score, Team
from .win_checker import RoundResult, WinChecker

__version__ = "1.0.0"
