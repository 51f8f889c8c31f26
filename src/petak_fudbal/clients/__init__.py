"""External API clients."""

from petak_fudbal.clients.supabase import LeagueData, SupabaseAPIError, SupabaseClient

__all__ = ["SupabaseClient", "SupabaseAPIError", "LeagueData"]
