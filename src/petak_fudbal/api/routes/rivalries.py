"""
Rivalries API Routes

Endpoint for head-to-head nemesis and domination rankings.
"""

from typing import Annotated

from fastapi import APIRouter, Query

from petak_fudbal.api.dependencies import LeagueDataDep, PeriodDep
from petak_fudbal.models.rivalry import RivalryMode, RivalryRecord

router = APIRouter()


@router.get(
    "",
    response_model=list[RivalryRecord],
    summary="Get rivalries",
    description=(
        "Head-to-head records ranked as nemesis (worst net results first) "
        "or domination (best first)."
    ),
)
async def get_rivalries(
    data: LeagueDataDep,
    period: PeriodDep,
    mode: Annotated[RivalryMode, Query(description="Ranking mode")] = RivalryMode.NEMESIS,
    min_duels: Annotated[
        int | None, Query(description="Minimum meetings", ge=1, le=50)
    ] = None,
    limit: Annotated[int, Query(description="Maximum rows", ge=1, le=200)] = 30,
    player_id: Annotated[
        str | None, Query(description="Only this player's rivalries")
    ] = None,
) -> list[RivalryRecord]:
    """Get ranked head-to-head records."""
    return data.rivalries(
        mode=mode,
        min_duels=min_duels,
        limit=limit,
        player_id=player_id,
        period=period,
    )
