"""
Main entry point for scoreboard TicTacToe.

Opens the Tkinter window by default, or plays in the terminal with --no-ui.
Two players take turns on the same machine; scores carry over between rounds
until the game is reset.
"""

import argparse
import logging
import re
from typing import Optional, Tuple

from logic.config import GameConfig
from logic.controller import BoardView, GameController
from logic.errors import OutOfRangeError
from logic.game import Game
from logic.game_state import GameState
from logic.log import configure_logging
from logic.win_checker import RoundResult

logger = logging.getLogger(__name__)

COORDINATE_RE = re.compile(r"-?[0-9]+")
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

HELP_TEXT = """Commands:
  <row> <col>  place a marker, e.g. "1 2"
  s            start a round
  r            reset the game (scores are lost)
  q            quit"""


class ConsoleGame:
    """
    Terminal front end. Reads commands from input() and prints the board.
    """

    def __init__(self, config: Optional[GameConfig] = None, input_func=input):
        self.config = config or GameConfig()
        self.input_func = input_func
        self.controller = GameController(
            Game(self.config),
            name_provider=self._ask_names,
            on_change=self._print_view
        )

    def _ask_names(self) -> Tuple[str, str]:
        names = []
        for slot, team_key in enumerate(self.config.TEAM_ORDER):
            team_name = self.config.TEAM_DEFINITIONS[team_key][0]
            names.append(self.input_func(f"Name for player {slot + 1} ({team_name}): ").strip())
        return names[0], names[1]

    def _print_view(self, view: BoardView):
        """Print the board and game info."""
        game = self.controller.game
        print()
        print(game.board.to_text())

        for slot, player in enumerate(view.players):
            if player is not None:
                print(f"  {player.name or f'Player {slot + 1}'} ({player.team_name}): {player.score}")

        if view.state == GameState.IN_PROGRESS:
            player = view.players[view.active_player_index]
            print(f"\nCurrent turn: {player.name or f'Player {view.active_player_index + 1}'}")
        elif view.state == GameState.STOPPED:
            if view.result == RoundResult.DRAW:
                print("\n🤝 It's a DRAW!")
            else:
                winner = view.players[view.result.winner_index]
                print(f"\n🏆 {(winner.name or 'Player ' + str(view.result.winner_index + 1)).upper()} WINS!")
            print("Type 's' for another round.")
        else:
            print("\nNew game. Type 's' to start.")

    def handle(self, command: str) -> bool:
        """
        Handle one line of input.

        Returns:
            False when the player wants to quit.
        """
        command = command.strip().lower()
        if command in ("q", "quit"):
            return False
        if command in ("s", "start"):
            if not self.controller.on_start_round_clicked():
                print("A round is already in progress.")
            return True
        if command in ("r", "reset"):
            self.controller.on_reset_clicked()
            return True

        parts = command.replace(",", " ").split()
        if len(parts) != 2 or not all(COORDINATE_RE.fullmatch(p) for p in parts):
            print(HELP_TEXT)
            return True

        row, col = int(parts[0]), int(parts[1])
        try:
            placed = self.controller.on_cell_clicked(row, col)
        except OutOfRangeError as exc:
            print(exc)
            return True
        if not placed:
            print("Illegal move, try again.")
        return True

    def run(self):
        """Main input loop."""
        print(HELP_TEXT)
        self._print_view(self.controller.render_state())
        while True:
            try:
                line = self.input_func("> ")
            except EOFError:
                break
            if not self.handle(line):
                break


def build_parser() -> argparse.ArgumentParser:
    """Command line options."""
    parser = argparse.ArgumentParser(description="Two-player TicTacToe with a scoreboard")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the terminal instead of opening a window"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: TICTACTOE_LOG_LEVEL or INFO)"
    )
    parser.add_argument(
        "--reset-turn-each-round",
        action="store_true",
        help="Give the first move of every round to player 1"
    )

    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    config = GameConfig()
    if args.reset_turn_each_round:
        config.RESET_TURN_EACH_ROUND = True

    if args.no_ui:
        try:
            ConsoleGame(config).run()
        except KeyboardInterrupt:
            print("\n\nGame interrupted by user.")
        finally:
            print("Goodbye!")
        return

    from ui import TicTacToeUI
    TicTacToeUI(config).run()


if __name__ == "__main__":
    main()
