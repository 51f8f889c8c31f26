"""Pydantic models and schemas."""

from petak_fudbal.models.awards import (
    AwardsReport,
    DominanceEntry,
    MaxAward,
    MinAward,
    PeriodAwards,
    PlayerStats,
    TrophyCabinet,
    Winner,
    YearAwardsHistory,
)
from petak_fudbal.models.match import (
    EventRow,
    EventType,
    MatchRow,
    Outcome,
    PlayerLite,
    Side,
    TeamRow,
)
from petak_fudbal.models.period import Period, PeriodMode, YearPeriods
from petak_fudbal.models.player import PlayerMatchEntry, PlayerProfile
from petak_fudbal.models.rivalry import RivalryMode, RivalryRecord
from petak_fudbal.models.scoreboard import (
    LeaderboardEntry,
    Leaderboards,
    MatchDetail,
    PeriodSummary,
)

__all__ = [
    # Awards
    "AwardsReport",
    "DominanceEntry",
    "MaxAward",
    "MinAward",
    "PeriodAwards",
    "PlayerStats",
    "TrophyCabinet",
    "Winner",
    "YearAwardsHistory",
    # Match rows
    "EventRow",
    "EventType",
    "MatchRow",
    "Outcome",
    "PlayerLite",
    "Side",
    "TeamRow",
    # Periods
    "Period",
    "PeriodMode",
    "YearPeriods",
    # Player
    "PlayerMatchEntry",
    "PlayerProfile",
    # Rivalries
    "RivalryMode",
    "RivalryRecord",
    # Match lists
    "LeaderboardEntry",
    "Leaderboards",
    "MatchDetail",
    "PeriodSummary",
]
