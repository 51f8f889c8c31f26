"""
Player profile models.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from petak_fudbal.models.awards import PlayerStats, TrophyCabinet
from petak_fudbal.models.match import Outcome, Side
from petak_fudbal.models.rivalry import RivalryRecord


class PlayerMatchEntry(BaseModel):
    """One match from a player's point of view."""

    match_id: str
    date: datetime
    side: Side
    goals_for: int
    goals_against: int
    outcome: Outcome
    goals: int = 0
    assists: int = 0
    mvp: bool = False

    @property
    def score(self) -> str:
        """Score from the player's side, e.g. '5:3'."""
        return f"{self.goals_for}:{self.goals_against}"


class PlayerProfile(BaseModel):
    """All-time profile of a single player."""

    stats: PlayerStats
    recent_form: list[Outcome] = Field(
        description="Results of the last five matches, most recent first"
    )
    trophies: TrophyCabinet
    matches: list[PlayerMatchEntry] = Field(
        default_factory=list, description="Every match played, most recent first"
    )
    nemeses: list[RivalryRecord] = Field(
        default_factory=list, description="Opponents with the worst head-to-head record"
    )
    dominated: list[RivalryRecord] = Field(
        default_factory=list, description="Opponents with the best head-to-head record"
    )
