"""API package - FastAPI routes and dependencies."""

from petak_fudbal.api.dependencies import (
    ClientManager,
    LeagueDataDep,
    PeriodDep,
    SettingsDep,
    SupabaseClientDep,
    get_league_data,
    get_period,
    get_supabase_client,
)

__all__ = [
    "ClientManager",
    "get_supabase_client",
    "get_league_data",
    "get_period",
    "SupabaseClientDep",
    "LeagueDataDep",
    "PeriodDep",
    "SettingsDep",
]
