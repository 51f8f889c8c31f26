"""
Award models.

Every award is a full tie-set: all players sharing the best value win.
An award with no eligible players is reported as value 0 with no winners.
"""

from pydantic import BaseModel, Field, computed_field

from petak_fudbal.models.period import Period


class Winner(BaseModel):
    """A player holding the best value in an award category."""

    id: str
    name: str
    slug: str | None = None
    image_url: str | None = None
    value: int | float
    extra: str | None = Field(default=None, description="Human readable context")


class MaxAward(BaseModel):
    """Award won by the highest value."""

    max: int | float = 0
    winners: list[Winner] = Field(default_factory=list)


class MinAward(BaseModel):
    """Award won by the lowest value (fewest losses, fewest conceded)."""

    min: int | float = 0
    winners: list[Winner] = Field(default_factory=list)


class PlayerStats(BaseModel):
    """Consolidated per-player stats over a set of matches."""

    id: str
    name: str
    slug: str | None = None
    image_url: str | None = None
    played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals: int = 0
    assists: int = 0
    mvps: int = 0
    goals_conceded: int = 0

    @property
    def record(self) -> str:
        """W-D-L string, e.g. '5-1-2'."""
        return f"{self.wins}-{self.draws}-{self.losses}"


class AwardsReport(BaseModel):
    """All award categories computed over one selection of matches."""

    goals: MaxAward = Field(description="Golden Boot: most goals")
    assists: MaxAward = Field(description="Assist King: most assists")
    mvps: MaxAward = Field(description="Most MVP awards")
    ironman: MaxAward = Field(description="Most matches played")
    ga: MaxAward = Field(description="Most goals + assists")
    goal_rate: MaxAward = Field(description="Goals per match")
    assist_rate: MaxAward = Field(description="Assists per match")
    mvp_rate: MaxAward = Field(description="MVPs per match")
    form: MaxAward = Field(description="Best win rate")
    least_losses: MinAward = Field(description="Fewest losses")
    stub: MinAward = Field(description="Fewest goals conceded while playing")


class DominanceEntry(BaseModel):
    """A player who won several categories in one period."""

    id: str
    name: str
    slug: str | None = None
    image_url: str | None = None
    count: int
    categories: list[str]


class PeriodAwards(BaseModel):
    """Awards for one period of an awards history."""

    period: Period
    label: str
    match_count: int
    awards: AwardsReport


class YearAwardsHistory(BaseModel):
    """Awards for a year as a whole and for each month that has matches."""

    year: str
    season: PeriodAwards | None = Field(
        default=None, description="Whole-year card, absent when the year has no matches"
    )
    months: list[PeriodAwards] = Field(default_factory=list)


class TrophyCabinet(BaseModel):
    """How many periods (months and years) a player won each headline award."""

    golden_boot: int = 0
    assist_king: int = 0
    mvp: int = 0
    ironman: int = 0

    @computed_field
    @property
    def total(self) -> int:
        return self.golden_boot + self.assist_king + self.mvp + self.ironman
