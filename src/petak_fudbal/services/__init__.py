"""Business logic services."""

from petak_fudbal.services.awards import (
    compute_awards,
    compute_player_stats,
    event_totals,
    is_public,
    winners_by_max,
    winners_by_min,
)
from petak_fudbal.services.history import (
    build_year_history,
    compute_dominance,
    count_trophies,
)
from petak_fudbal.services.matches import (
    build_match_detail,
    compute_leaderboards,
    list_matches,
    summarize_period,
)
from petak_fudbal.services.periods import (
    list_periods_for_year,
    list_years,
    match_ids_for_period,
)
from petak_fudbal.services.players import build_player_profile, player_match_log
from petak_fudbal.services.rivalries import compute_rivalries, rank_rivalries

__all__ = [
    # Awards engine
    "compute_awards",
    "compute_player_stats",
    "event_totals",
    "is_public",
    "winners_by_max",
    "winners_by_min",
    # Periods
    "list_periods_for_year",
    "list_years",
    "match_ids_for_period",
    # History
    "build_year_history",
    "compute_dominance",
    "count_trophies",
    # Players
    "build_player_profile",
    "player_match_log",
    # Match lists
    "build_match_detail",
    "compute_leaderboards",
    "list_matches",
    "summarize_period",
    # Rivalries
    "compute_rivalries",
    "rank_rivalries",
]
