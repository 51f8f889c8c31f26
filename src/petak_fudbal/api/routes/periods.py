"""
Period API Routes

Endpoints listing the years and months that have matches.
"""

from typing import Annotated

from fastapi import APIRouter, Path

from petak_fudbal.api.dependencies import LeagueDataDep
from petak_fudbal.models.period import YearPeriods

router = APIRouter()


@router.get(
    "/years",
    response_model=list[str],
    summary="List years",
    description="Years with at least one match, most recent first.",
)
async def get_years(data: LeagueDataDep) -> list[str]:
    """List years with matches."""
    return data.years()


@router.get(
    "/{year}",
    response_model=YearPeriods,
    summary="List periods of a year",
    description="Months with matches (January first) and the whole-year period.",
)
async def get_year_periods(
    data: LeagueDataDep,
    year: Annotated[str, Path(description="Year, e.g. 2025", pattern=r"^\d{4}$")],
) -> YearPeriods:
    """List the selectable periods of a year."""
    return data.periods_for_year(year)
