"""
Game state machine for scoreboard TicTacToe.
Tracks players, turns, rounds and scores, and drives the board.
"""

import logging
from typing import List, Optional, Tuple

from .board import Board
from .config import GameConfig
from .errors import IllegalMoveError, IllegalStateError
from .game_state import GameState, Move
from .move_validator import MoveValidator
from .players import Player, team_order
from .win_checker import RoundResult, WinChecker

logger = logging.getLogger(__name__)


class Game:
    """
    A game session spanning several rounds.

    Players are created when the first round starts and keep their scores
    until the game is reset. Each round starts from an empty board.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Create a new game in the NEW state with no players.

        Args:
            config: Game configuration. Uses defaults if not provided.
        """
        self.config = config or GameConfig()
        self.board = Board(self.config.BOARD_WIDTH, self.config.BOARD_HEIGHT)
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        self.state = GameState.NEW
        self.players: List[Optional[Player]] = [None, None]
        self.active_player_index = 0

        # Current round bookkeeping
        self.moves: List[Move] = []
        self.result = RoundResult.IN_PROGRESS
        self.winning_line: Optional[List[Tuple[int, int]]] = None
        self.rounds_played = 0

    # ---------------------------------------------------------------- reads

    def get_state(self) -> GameState:
        return self.state

    def get_player(self, slot: int) -> Optional[Player]:
        """Get the player in slot 0 or 1, or None before players exist."""
        if slot not in (0, 1):
            raise IndexError(f"Player slot must be 0 or 1, got {slot}")
        return self.players[slot]

    def get_active_player_index(self) -> int:
        return self.active_player_index

    def get_active_player(self) -> Player:
        """
        Get the player whose turn it is.

        Raises:
            IllegalStateError: If players have not been created yet.
        """
        player = self.players[self.active_player_index]
        if player is None:
            raise IllegalStateError("No players yet - start a round first")
        return player

    # ------------------------------------------------------------ lifecycle

    def initialize_players(self, name_a: str, name_b: str):
        """
        Create both players, bound to the fixed teams in slot order.

        Any string is accepted as a name, including "".

        Args:
            name_a: Name of the slot 0 player.
            name_b: Name of the slot 1 player.

        Raises:
            IllegalStateError: If the game is not NEW.
        """
        if self.state != GameState.NEW:
            raise IllegalStateError(
                f"Players can only be set up in a NEW game (state is {self.state.name})"
            )

        team_a, team_b = team_order(self.config)
        self.players = [Player(name_a, team_a), Player(name_b, team_b)]
        logger.info(
            "Players ready: %r (%s) vs %r (%s)",
            name_a, team_a.name, name_b, team_b.name
        )

    def start_new_round(self, name_a: str = "", name_b: str = "") -> bool:
        """
        Start a round.

        From NEW the players are created first (using the given names).
        From STOPPED the board is cleared and scores carry over. A round
        that is already in progress is left alone.

        Returns:
            True if a round was started.
        """
        if self.state == GameState.IN_PROGRESS:
            logger.debug("Round already in progress, ignoring start")
            return False

        if self.state == GameState.NEW:
            self.initialize_players(name_a, name_b)
        else:
            self.board.clear()
            if self.config.RESET_TURN_EACH_ROUND:
                self.active_player_index = 0

        self.moves = []
        self.result = RoundResult.IN_PROGRESS
        self.winning_line = None
        self.state = GameState.IN_PROGRESS
        self.rounds_played += 1

        logger.info(
            "Round %d started, %s to move",
            self.rounds_played, self.get_active_player().name or f"player {self.active_player_index + 1}"
        )
        return True

    def reset_game(self):
        """Drop players and scores, clear the board and go back to NEW."""
        self.board.clear()
        self.players = [None, None]
        self.active_player_index = 0
        self.moves = []
        self.result = RoundResult.IN_PROGRESS
        self.winning_line = None
        self.rounds_played = 0
        self.state = GameState.NEW
        logger.info("Game reset")

    # ------------------------------------------------------------- gameplay

    def place_marker_at(self, row: int, col: int) -> bool:
        """
        Place the active player's marker.

        Illegal moves (no round running, cell taken) are ignored and return
        False. Coordinates off the board raise OutOfRangeError.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if the marker was placed.
        """
        validation = self.validator.validate_move(self, row, col)
        if not validation.is_valid:
            logger.debug("Ignoring move at (%d, %d): %s", row, col, validation.error_message)
            return False

        player = self.get_active_player()
        try:
            self.board.place_at(row, col, player.marker)
        except IllegalMoveError as exc:
            logger.debug("Ignoring move at (%d, %d): %s", row, col, exc)
            return False

        self.moves.append(Move(
            player_index=self.active_player_index,
            row=row,
            col=col,
            marker_id=player.marker.id
        ))

        # Result is attributed to the active player, so evaluate before switching turns
        self.result = self.win_checker.evaluate(
            self.board, row, col, player.marker, self.active_player_index
        )

        if self.result.is_terminal:
            self.state = GameState.STOPPED
            if self.result.winner_index is not None:
                self.winning_line = self.win_checker.winning_line(self.board, row, col, player.marker)
                score = player.increment_score()
                logger.info("%s wins round %d (score %d)", player.name or player.team_name,
                            self.rounds_played, score)
            else:
                logger.info("Round %d is a draw", self.rounds_played)

        self.active_player_index = 1 - self.active_player_index
        return True

    def get_valid_moves(self) -> List[Tuple[int, int]]:
        return self.validator.get_valid_moves(self)

    def scores(self) -> Tuple[int, int]:
        """Both players' scores as (slot 0, slot 1); zeros before players exist."""
        return tuple(p.score_value if p else 0 for p in self.players)
