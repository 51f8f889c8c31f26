"""
Player API Routes

Endpoint for a player's all-time profile.
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path

from petak_fudbal.api.dependencies import LeagueDataDep
from petak_fudbal.models.player import PlayerProfile

router = APIRouter()


@router.get(
    "/{player_id}",
    response_model=PlayerProfile,
    summary="Get player profile",
    description="All-time stats, last five results and trophy counts for a player.",
)
async def get_player_profile(
    data: LeagueDataDep,
    player_id: Annotated[str, Path(description="Player ID")],
) -> PlayerProfile:
    """Get a public player's profile."""
    profile = data.player_profile(player_id)
    if profile is None:
        raise HTTPException(status_code=404, detail=f"Player not found: {player_id}")
    return profile
