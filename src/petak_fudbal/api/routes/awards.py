"""
Awards API Routes

Endpoints for period awards, yearly award histories and dominance.
"""

from typing import Annotated

from fastapi import APIRouter, Path, Query

from petak_fudbal.api.dependencies import LeagueDataDep, MinMatchesQuery, PeriodDep
from petak_fudbal.models.awards import AwardsReport, DominanceEntry, YearAwardsHistory

router = APIRouter()


@router.get(
    "",
    response_model=AwardsReport,
    summary="Get awards for a period",
    description=(
        "Compute every award category for a year, a month of a year, "
        "or all-time when no year is given. Tied players share an award."
    ),
)
async def get_awards(
    data: LeagueDataDep,
    period: PeriodDep,
    min_matches_eff: MinMatchesQuery = None,
    min_matches_form: MinMatchesQuery = None,
) -> AwardsReport:
    """Get all award categories for the selected period."""
    return data.awards_for(period, min_matches_eff, min_matches_form)


@router.get(
    "/history/{year}",
    response_model=YearAwardsHistory,
    summary="Get awards history for a year",
    description="Awards for the whole year and for each month that has matches.",
)
async def get_awards_history(
    data: LeagueDataDep,
    year: Annotated[str, Path(description="Year, e.g. 2025", pattern=r"^\d{4}$")],
) -> YearAwardsHistory:
    """Get the season card and monthly cards for a year."""
    return data.year_history(year)


@router.get(
    "/dominance",
    response_model=list[DominanceEntry],
    summary="Get dominance table",
    description="Players winning several non-rate award categories in the same period.",
)
async def get_dominance(
    data: LeagueDataDep,
    period: PeriodDep,
    min_categories: Annotated[
        int, Query(description="Minimum categories won", ge=1, le=8)
    ] = 2,
) -> list[DominanceEntry]:
    """Get players who won at least `min_categories` categories."""
    return data.dominance(period, min_categories)
