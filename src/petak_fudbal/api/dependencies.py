"""
API Dependencies

Shared dependencies for FastAPI route handlers including
client management, league data loading and period parsing.
"""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Query
from pydantic import ValidationError

from petak_fudbal.clients.supabase import LeagueData, SupabaseAPIError, SupabaseClient
from petak_fudbal.config import Settings, get_settings
from petak_fudbal.models.period import Period

logger = logging.getLogger(__name__)


class ClientManager:
    """
    Manages SupabaseClient lifecycle for the application.

    Creates a single client instance that can be reused across requests.
    """

    _client: SupabaseClient | None = None

    @classmethod
    async def get_client(cls) -> SupabaseClient:
        """Get or create the SupabaseClient instance."""
        if cls._client is None:
            cls._client = SupabaseClient()
            await cls._client.__aenter__()
        return cls._client

    @classmethod
    async def close_client(cls) -> None:
        """Close the SupabaseClient instance."""
        if cls._client is not None:
            await cls._client.__aexit__(None, None, None)
            cls._client = None


async def get_supabase_client() -> SupabaseClient:
    """Dependency to get the SupabaseClient."""
    return await ClientManager.get_client()


async def get_league_data(
    client: Annotated[SupabaseClient, Depends(get_supabase_client)],
) -> LeagueData:
    """
    Dependency to load the league rows for a request.

    Raises HTTPException (502) if the data store cannot be read.
    """
    try:
        return await LeagueData.create(client)
    except SupabaseAPIError as e:
        logger.error("Failed to load league data: %s", e.message)
        raise HTTPException(
            status_code=502,
            detail=f"Could not load league data: {e.message}",
        ) from e


def get_period(
    year: Annotated[
        str | None, Query(description="Year, e.g. 2025 (omit for all-time)")
    ] = None,
    month: Annotated[
        str | None, Query(description="Month '01'..'12' (requires year)")
    ] = None,
) -> Period | None:
    """
    Dependency to parse an optional period from query parameters.

    Raises HTTPException (422) for a month without a year or bad values.
    """
    if year is None:
        if month is not None:
            raise HTTPException(status_code=422, detail="month requires year")
        return None

    try:
        if month is None:
            return Period.for_year(year)
        return Period.for_month(year, month.zfill(2))
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=e.errors(include_url=False, include_context=False, include_input=False),
        ) from e


# Type aliases for cleaner route signatures
SupabaseClientDep = Annotated[SupabaseClient, Depends(get_supabase_client)]
LeagueDataDep = Annotated[LeagueData, Depends(get_league_data)]
PeriodDep = Annotated[Period | None, Depends(get_period)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


# Common query parameters
MinMatchesQuery = Annotated[
    int | None,
    Query(description="Minimum matches played (defaults to configured value)", ge=0),
]
