"""
Input handling for TicTacToe.
Turns clicks and button presses into Game operations.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .game import Game
from .game_state import GameState
from .win_checker import RoundResult

logger = logging.getLogger(__name__)

NameProvider = Callable[[], Tuple[str, str]]


@dataclass
class PlayerView:
    """What a renderer needs to show about one player."""
    name: str
    team_name: str
    score: int
    image_path: str


@dataclass
class BoardView:
    """
    Snapshot of everything a renderer draws.
    """
    state: GameState
    result: RoundResult
    players: List[Optional[PlayerView]]
    active_player_index: int
    cells: List[List[Optional[str]]]        # Marker image path per cell, None if empty
    winning_line: Optional[List[Tuple[int, int]]]


class GameController:
    """
    Translates input events into Game operations.

    Each event is only forwarded when the game state allows it:
    - cell clicks while a round is in progress
    - "start round" when the game is NEW or STOPPED
    - "reset" at any time
    Anything else is ignored.
    """

    def __init__(
        self,
        game: Optional[Game] = None,
        name_provider: Optional[NameProvider] = None,
        on_change: Optional[Callable[[BoardView], None]] = None
    ):
        """
        Args:
            game: The game to drive. A new one if not provided.
            name_provider: Called when the first round starts; returns the
                two player names. Both names are "" if not provided.
            on_change: Called with a fresh BoardView after every accepted event.
        """
        self.game = game or Game()
        self.name_provider = name_provider or (lambda: ("", ""))
        self.on_change = on_change

    def on_cell_clicked(self, row: int, col: int) -> bool:
        """Handle a click on a board cell. Returns True if a marker was placed."""
        if not self.game.state.accepts_moves:
            logger.debug("Cell (%d, %d) clicked with no round running", row, col)
            return False

        placed = self.game.place_marker_at(row, col)
        if placed:
            self._notify()
        return placed

    def on_start_round_clicked(self) -> bool:
        """Handle the start-round button. Returns True if a round started."""
        state = self.game.state
        if state == GameState.IN_PROGRESS:
            logger.debug("Start pressed during a round, ignoring")
            return False

        if state == GameState.NEW:
            name_a, name_b = self.name_provider()
            started = self.game.start_new_round(name_a, name_b)
        else:
            started = self.game.start_new_round()

        if started:
            self._notify()
        return started

    def on_reset_clicked(self):
        """Handle the reset button."""
        self.game.reset_game()
        self._notify()

    def render_state(self) -> BoardView:
        """Build a snapshot of the game for drawing."""
        game = self.game
        board = game.board

        players: List[Optional[PlayerView]] = []
        for player in game.players:
            if player is None:
                players.append(None)
                continue
            players.append(PlayerView(
                name=player.name,
                team_name=player.team_name,
                score=player.score_value,
                image_path=player.marker.image_path
            ))

        cells = []
        for row in range(board.height):
            row_cells = []
            for col in range(board.width):
                marker = board.marker_at(row, col)
                row_cells.append(marker.image_path if marker else None)
            cells.append(row_cells)

        return BoardView(
            state=game.state,
            result=game.result,
            players=players,
            active_player_index=game.active_player_index,
            cells=cells,
            winning_line=game.winning_line
        )

    def _notify(self):
        if self.on_change is not None:
            self.on_change(self.render_state())
