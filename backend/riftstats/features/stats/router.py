"""Player statistics endpoints."""

from fastapi import APIRouter

from riftstats.core.http import http_exception_for

from .dependencies import StatsServiceDep
from .schemas import PlayerStatsResponse, StatsSnapshot

router = APIRouter(tags=["stats"])


@router.get("/players/{puuid}/stats", response_model=StatsSnapshot)
async def get_player_stats(puuid: str, stats_service: StatsServiceDep):
    """Compute the player's statistics from stored matches."""
    try:
        return await stats_service.compute_stats(puuid)
    except Exception as e:
        raise http_exception_for(e) from e


@router.post("/players/{puuid}/update-stats", response_model=PlayerStatsResponse)
async def update_player_stats(puuid: str, stats_service: StatsServiceDep):
    """Recompute the player's statistics and store the snapshot."""
    try:
        return await stats_service.materialize_stats(puuid)
    except Exception as e:
        raise http_exception_for(e) from e
