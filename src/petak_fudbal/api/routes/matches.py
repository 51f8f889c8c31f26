"""
Match API Routes

Endpoints for the match list of a period, the side A vs side B summary,
full leaderboards and single-match detail.
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path

from petak_fudbal.api.dependencies import LeagueDataDep, PeriodDep
from petak_fudbal.models.match import MatchRow
from petak_fudbal.models.scoreboard import Leaderboards, MatchDetail, PeriodSummary

router = APIRouter()


@router.get(
    "",
    response_model=list[MatchRow],
    summary="List matches",
    description="Matches of a year, a month of a year, or all-time; most recent first.",
)
async def get_matches(data: LeagueDataDep, period: PeriodDep) -> list[MatchRow]:
    """List matches in the selected period."""
    return data.matches_for(period)


@router.get(
    "/summary",
    response_model=PeriodSummary,
    summary="Get side A vs side B summary",
    description="Wins, draws and goals of each side over the selected period.",
)
async def get_period_summary(data: LeagueDataDep, period: PeriodDep) -> PeriodSummary:
    """Get the head-to-head score between the two sides."""
    return data.period_summary(period)


@router.get(
    "/leaderboards",
    response_model=Leaderboards,
    summary="Get leaderboards",
    description="Every player ranked by goals, assists and MVPs, then by name.",
)
async def get_leaderboards(data: LeagueDataDep, period: PeriodDep) -> Leaderboards:
    """Get full goal, assist and MVP rankings."""
    return data.leaderboards(period)


@router.get(
    "/{match_id}",
    response_model=MatchDetail,
    summary="Get match detail",
    description="Score, lineups and per-player goals, assists and MVP by side.",
)
async def get_match_detail(
    data: LeagueDataDep,
    match_id: Annotated[str, Path(description="Match ID")],
) -> MatchDetail:
    """Get a single match."""
    detail = data.match_detail(match_id)
    if detail is None:
        raise HTTPException(status_code=404, detail=f"Match not found: {match_id}")
    return detail
