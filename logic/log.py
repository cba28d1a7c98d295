"""
Logging setup shared by the window and console front ends.
"""

import logging
from typing import Optional

from .config import GameConfig


def configure_logging(level: Optional[str] = None, config: Optional[GameConfig] = None) -> None:
    """
    Configure root logging for the application.

    Args:
        level: Level name (e.g. "DEBUG"). Defaults to GameConfig.LOG_LEVEL,
            which itself reads TICTACTOE_LOG_LEVEL from the environment.
        config: Game configuration. Uses defaults if not provided.
    """
    config = config or GameConfig()
    level = (level or config.LOG_LEVEL).upper()

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=level, format=config.LOG_FORMAT)
    root_logger.setLevel(level)
