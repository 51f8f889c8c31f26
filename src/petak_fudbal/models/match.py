"""
Match, team-membership and match-event row models.

These mirror the rows returned by the data store: one row per match, one
row per player per side per match, and one row per goal/assist/MVP
attribution. Player data is embedded (denormalised) on team and event rows.
"""

from datetime import date, datetime, time
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class Side(str, Enum):
    """The two fixed sides of the league. A is home, B is away."""

    A = "A"
    B = "B"


class EventType(str, Enum):
    """Kinds of per-player match events."""

    GOAL = "goal"
    ASSIST = "assist"
    MVP = "mvp"


class Outcome(str, Enum):
    """Result of a match from one side's point of view."""

    WIN = "W"
    DRAW = "D"
    LOSS = "L"


class PlayerLite(BaseModel):
    """Player summary embedded on team and event rows."""

    id: str
    name: str
    slug: str | None = None
    image_url: str | None = None
    is_public: bool | None = None


class MatchRow(BaseModel):
    """A single played fixture between side A (home) and side B (away)."""

    id: str
    date: datetime
    home_score: int = Field(ge=0)
    away_score: int = Field(ge=0)

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        # Plain calendar dates ("2025-03-14") are stored for most matches.
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime.combine(value, time.min)
        if isinstance(value, str) and len(value) == 10:
            return datetime.combine(date.fromisoformat(value), time.min)
        return value

    def goals_for(self, side: Side) -> int:
        return self.home_score if side == Side.A else self.away_score

    def goals_against(self, side: Side) -> int:
        return self.away_score if side == Side.A else self.home_score

    def outcome_for(self, side: Side) -> Outcome:
        scored = self.goals_for(side)
        conceded = self.goals_against(side)
        if scored > conceded:
            return Outcome.WIN
        if scored < conceded:
            return Outcome.LOSS
        return Outcome.DRAW


class TeamRow(BaseModel):
    """A player's membership on one side for one match."""

    match_id: str
    team: Side
    player_id: str | None = None
    players: PlayerLite | None = None


class EventRow(BaseModel):
    """A goal, assist or MVP attribution within a match."""

    match_id: str
    player_id: str | None = None
    type: EventType
    value: int | None = Field(
        default=None, description="Aggregated count; missing means 1"
    )
    players: PlayerLite | None = None

    @property
    def amount(self) -> int:
        """Event value with the missing-means-one default applied."""
        return 1 if self.value is None else self.value
