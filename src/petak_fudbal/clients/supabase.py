"""
Async Supabase (PostgREST) Client

Read-only access to the league tables: matches, match_teams and
match_events, with the embedded player summary on team and event rows.
Uses httpx for async HTTP requests with connection pooling.

PostgREST documentation: https://postgrest.org/en/stable/references/api.html
"""

import asyncio
import logging
from datetime import tzinfo
from typing import Any, TypeVar
from zoneinfo import ZoneInfo

import httpx
from pydantic import BaseModel, ValidationError

from petak_fudbal.config import Settings, get_settings
from petak_fudbal.models import (
    AwardsReport,
    DominanceEntry,
    EventRow,
    Leaderboards,
    MatchDetail,
    MatchRow,
    Period,
    PeriodSummary,
    PlayerProfile,
    RivalryMode,
    RivalryRecord,
    TeamRow,
    YearAwardsHistory,
    YearPeriods,
)
from petak_fudbal.services.awards import compute_awards
from petak_fudbal.services.history import build_year_history, compute_dominance
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
from petak_fudbal.services.players import build_player_profile
from petak_fudbal.services.rivalries import compute_rivalries, rank_rivalries

logger = logging.getLogger(__name__)

RowT = TypeVar("RowT", bound=BaseModel)

PLAYER_EMBED = "players(id,name,slug,image_url,is_public)"
MATCH_SELECT = "id,date,home_score,away_score"
EVENT_SELECT = f"match_id,player_id,type,value,{PLAYER_EMBED}"
TEAM_SELECT = f"match_id,team,player_id,{PLAYER_EMBED}"

# Orderings are unique per row so Range pages stay stable between requests
MATCH_ORDER = "date.desc,id.asc"
EVENT_ORDER = "match_id.asc,type.asc,player_id.asc,value.asc"
TEAM_ORDER = "match_id.asc,team.asc,player_id.asc"

# Rows requested per Range; the server may return fewer (PostgREST max-rows)
PAGE_SIZE = 1000


class SupabaseAPIError(Exception):
    """Exception raised for data store errors."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class SupabaseClient:
    """
    Async read-only client for the league's Supabase REST API.

    Usage:
        async with SupabaseClient() as client:
            matches = await client.get_matches()
            events = await client.get_events()
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or get_settings()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "SupabaseClient":
        """Create HTTP client on context entry."""
        key = self.settings.supabase_anon_key
        self._client = httpx.AsyncClient(
            base_url=f"{self.settings.supabase_url.rstrip('/')}/rest/v1",
            timeout=httpx.Timeout(self.settings.supabase_timeout),
            headers={
                "Accept": "application/json",
                "apikey": key,
                "Authorization": f"Bearer {key}",
            },
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close HTTP client on context exit."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get the HTTP client, raising if not initialized."""
        if self._client is None:
            raise RuntimeError(
                "SupabaseClient must be used as async context manager: "
                "async with SupabaseClient() as client: ..."
            )
        return self._client

    async def _get_page(
        self, table: str, params: dict[str, str], start: int, end: int
    ) -> list[dict[str, Any]]:
        """Fetch one range of rows from a table."""
        try:
            response = await self.client.get(
                f"/{table}",
                params=params,
                headers={"Range-Unit": "items", "Range": f"{start}-{end}"},
            )
        except httpx.HTTPError as e:
            raise SupabaseAPIError(f"Request to {table} failed: {e}") from e

        # 416: the range starts past the last row
        if response.status_code == 416:
            return []

        if response.status_code not in (200, 206):
            raise SupabaseAPIError(
                f"API request failed: {table}",
                status_code=response.status_code,
            )

        return response.json() or []

    async def _get_all(self, table: str, select: str, order: str) -> list[dict[str, Any]]:
        """Fetch every row of a table, page by page."""
        params = {"select": select, "order": order}

        rows: list[dict[str, Any]] = []
        start = 0
        while True:
            page = await self._get_page(table, params, start, start + PAGE_SIZE - 1)
            # A short page is not the end: the server may cap rows per response.
            if not page:
                break
            rows.extend(page)
            start += len(page)

        logger.debug("Fetched %d rows from %s", len(rows), table)
        return rows

    @staticmethod
    def _parse_rows(table: str, rows: list[dict[str, Any]], model: type[RowT]) -> list[RowT]:
        """Validate raw rows, skipping (and logging) any that do not fit the model."""
        parsed: list[RowT] = []
        for row in rows:
            try:
                parsed.append(model.model_validate(row))
            except ValidationError as e:
                logger.warning(
                    "Skipping malformed %s row: %s", table, e.errors(include_url=False)
                )
        return parsed

    # ==================== Table Endpoints ====================

    async def get_matches(self) -> list[MatchRow]:
        """
        Get all matches, most recent first.

        Returns:
            List of MatchRow objects
        """
        rows = await self._get_all("matches", MATCH_SELECT, order=MATCH_ORDER)
        return self._parse_rows("matches", rows, MatchRow)

    async def get_events(self) -> list[EventRow]:
        """
        Get all goal/assist/MVP events with their embedded player.

        Returns:
            List of EventRow objects
        """
        rows = await self._get_all("match_events", EVENT_SELECT, order=EVENT_ORDER)
        return self._parse_rows("match_events", rows, EventRow)

    async def get_teams(self) -> list[TeamRow]:
        """
        Get all team-membership rows with their embedded player.

        Returns:
            List of TeamRow objects
        """
        rows = await self._get_all("match_teams", TEAM_SELECT, order=TEAM_ORDER)
        return self._parse_rows("match_teams", rows, TeamRow)


class LeagueData:
    """
    Snapshot of the league's rows with convenient award and stats lookups.

    All lookups run the pure services over the in-memory rows using the
    configured thresholds and timezone.
    """

    def __init__(
        self,
        matches: list[MatchRow],
        events: list[EventRow],
        teams: list[TeamRow],
        settings: Settings | None = None,
    ):
        self.matches = matches
        self.events = events
        self.teams = teams
        self.settings = settings or get_settings()

    @classmethod
    async def create(cls, client: SupabaseClient) -> "LeagueData":
        """
        Factory method to create a LeagueData by fetching all required rows.

        Args:
            client: SupabaseClient instance

        Returns:
            Initialized LeagueData
        """
        matches, events, teams = await asyncio.gather(
            client.get_matches(),
            client.get_events(),
            client.get_teams(),
        )
        logger.info(
            "Loaded %d matches, %d events, %d team rows",
            len(matches),
            len(events),
            len(teams),
        )
        return cls(matches=matches, events=events, teams=teams, settings=client.settings)

    @property
    def tz(self) -> tzinfo:
        return ZoneInfo(self.settings.timezone)

    def years(self) -> list[str]:
        """Years with matches, most recent first."""
        return list_years(self.matches, self.tz)

    def periods_for_year(self, year: str) -> YearPeriods:
        return list_periods_for_year(self.matches, year, self.tz)

    def match_ids_for(self, period: Period | None) -> list[str]:
        """Match ids in a period; every match when period is None."""
        if period is None:
            return [m.id for m in self.matches]
        return match_ids_for_period(self.matches, period, self.tz)

    def awards_for(
        self,
        period: Period | None = None,
        min_matches_eff: int | None = None,
        min_matches_form: int | None = None,
    ) -> AwardsReport:
        """Awards for a period, or all-time when period is None."""
        return compute_awards(
            matches=self.matches,
            events=self.events,
            teams=self.teams,
            match_ids=self.match_ids_for(period),
            min_matches_eff=(
                self.settings.min_matches_eff if min_matches_eff is None else min_matches_eff
            ),
            min_matches_form=(
                self.settings.min_matches_form if min_matches_form is None else min_matches_form
            ),
        )

    def year_history(self, year: str) -> YearAwardsHistory:
        return build_year_history(
            matches=self.matches,
            events=self.events,
            teams=self.teams,
            year=year,
            tz=self.tz,
            min_matches_eff=self.settings.min_matches_eff,
            min_matches_form=self.settings.min_matches_form,
        )

    def dominance(
        self, period: Period | None = None, min_categories: int = 2
    ) -> list[DominanceEntry]:
        return compute_dominance(self.awards_for(period), min_categories)

    def player_profile(self, player_id: str) -> PlayerProfile | None:
        return build_player_profile(
            player_id=player_id,
            matches=self.matches,
            events=self.events,
            teams=self.teams,
            tz=self.tz,
            min_duels=self.settings.min_duels,
        )

    def matches_for(self, period: Period | None = None) -> list[MatchRow]:
        """Matches in a period (all-time when None), most recent first."""
        return list_matches(self.matches, self.match_ids_for(period), self.tz)

    def period_summary(self, period: Period | None = None) -> PeriodSummary:
        return summarize_period(self.matches, self.match_ids_for(period))

    def leaderboards(self, period: Period | None = None) -> Leaderboards:
        return compute_leaderboards(self.events, self.match_ids_for(period))

    def match_detail(self, match_id: str) -> MatchDetail | None:
        return build_match_detail(
            match_id=match_id,
            matches=self.matches,
            events=self.events,
            teams=self.teams,
        )

    def rivalries(
        self,
        mode: RivalryMode = RivalryMode.NEMESIS,
        min_duels: int | None = None,
        limit: int | None = 30,
        player_id: str | None = None,
        period: Period | None = None,
    ) -> list[RivalryRecord]:
        records = compute_rivalries(
            matches=self.matches,
            teams=self.teams,
            match_ids=self.match_ids_for(period),
        )
        return rank_rivalries(
            records,
            mode=mode,
            min_duels=self.settings.min_duels if min_duels is None else min_duels,
            limit=limit,
            player_id=player_id,
        )
