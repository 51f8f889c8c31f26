"""
Match list models.

Side-versus-side summaries for a selection of matches, full per-player
leaderboards, and the detail of a single match.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from petak_fudbal.models.match import PlayerLite, Side


class PeriodSummary(BaseModel):
    """Head-to-head score of side A against side B over a set of matches."""

    played: int = 0
    wins_a: int = 0
    wins_b: int = 0
    draws: int = 0
    goals_a: int = 0
    goals_b: int = 0


class LeaderboardEntry(BaseModel):
    """A player's total in one leaderboard."""

    id: str
    name: str
    slug: str | None = None
    image_url: str | None = None
    value: int


class Leaderboards(BaseModel):
    """Every visible player ranked by goals, assists and MVPs."""

    goals: list[LeaderboardEntry] = Field(default_factory=list)
    assists: list[LeaderboardEntry] = Field(default_factory=list)
    mvps: list[LeaderboardEntry] = Field(default_factory=list)


class MatchDetail(BaseModel):
    """One match with its lineups and per-player event totals by side."""

    id: str
    date: datetime
    home_score: int
    away_score: int
    winner: Side | None = Field(default=None, description="None for a draw")
    lineup_a: list[PlayerLite] = Field(default_factory=list)
    lineup_b: list[PlayerLite] = Field(default_factory=list)
    scorers_a: list[LeaderboardEntry] = Field(default_factory=list)
    scorers_b: list[LeaderboardEntry] = Field(default_factory=list)
    assists_a: list[LeaderboardEntry] = Field(default_factory=list)
    assists_b: list[LeaderboardEntry] = Field(default_factory=list)
    mvps: list[PlayerLite] = Field(default_factory=list)
