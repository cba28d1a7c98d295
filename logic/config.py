"""
Game configuration for scoreboard TicTacToe.
Board size, teams, turn policy, logging and window settings.
"""

import os


class GameConfig:
    """
    Configuration class for the game engine and its views.
    Change these values to tweak the game!
    """

    # ==================== BOARD SETTINGS ====================
    # Classic TicTacToe is a 3x3 grid
    BOARD_WIDTH = 3
    BOARD_HEIGHT = 3

    # ==================== TEAM SETTINGS ====================
    # Where marker images live (relative to the working directory)
    IMAGE_DIR = "images"

    # Registry key -> (team name, image file)
    # Slot 0 always plays the first team, slot 1 the second
    TEAM_DEFINITIONS = {
        "NEIL": ("Neilts", "neil.jpg"),
        "GUS": ("Gusses", "gus.jpg"),
    }
    TEAM_ORDER = ["NEIL", "GUS"]

    # ==================== TURN SETTINGS ====================
    # When False, the active player carries over from the last round
    # (only a full reset hands the first move back to slot 0)
    RESET_TURN_EACH_ROUND = False

    # ==================== LOGGING ====================
    LOG_LEVEL = os.getenv("TICTACTOE_LOG_LEVEL", "INFO").upper()
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # ==================== WINDOW SETTINGS ====================
    CELL_SIZE_PX = 120
    BACKGROUND = '#1a1a2e'
    CELL_BACKGROUND = '#16213e'
    HIGHLIGHT = '#ffd700'

    def image_path(self, filename: str) -> str:
        """Build the asset path for a marker image file."""
        return f"{self.IMAGE_DIR}/{filename}"
