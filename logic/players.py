"""
Players, teams and the markers they place.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .config import GameConfig


@dataclass(frozen=True)
class Marker:
    """
    A mark placed on the board.
    """
    id: str             # Unique name of the marker (same as the team name)
    image_path: str     # Where the marker image is stored


@dataclass(frozen=True)
class Team:
    """A named side. The team decides which marker its player places."""
    name: str
    marker: Marker

    @classmethod
    def create(cls, name: str, image_path: str) -> "Team":
        """Build a team whose marker is identified by the team name."""
        return cls(name=name, marker=Marker(id=name, image_path=image_path))


@dataclass
class Score:
    """A player's score. Starts at zero and only ever goes up by one."""
    value: int = 0

    def increment(self) -> int:
        self.value += 1
        return self.value


@dataclass
class Player:
    """
    A player in the game.

    The score lives as long as the player does: it survives board clears
    between rounds but not a full game reset.
    """
    name: str
    team: Team
    score: Score = field(default_factory=Score)

    @property
    def team_name(self) -> str:
        return self.team.name

    @property
    def marker(self) -> Marker:
        return self.team.marker

    @property
    def score_value(self) -> int:
        return self.score.value

    def increment_score(self) -> int:
        return self.score.increment()


def build_teams(config: Optional[GameConfig] = None) -> Dict[str, Team]:
    """
    Build the registry of available teams from the configuration.

    Args:
        config: Game configuration. Uses defaults if not provided.

    Returns:
        Dict of registry key (e.g. "NEIL") to Team.
    """
    config = config or GameConfig()
    return {
        key: Team.create(name, config.image_path(filename))
        for key, (name, filename) in config.TEAM_DEFINITIONS.items()
    }


def team_order(config: Optional[GameConfig] = None) -> List[Team]:
    """Teams in slot order (slot 0 first)."""
    config = config or GameConfig()
    teams = build_teams(config)
    return [teams[key] for key in config.TEAM_ORDER]


# Default registry
TEAMS = build_teams()
