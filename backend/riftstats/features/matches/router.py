"""Match API endpoints."""

from fastapi import APIRouter, HTTPException

from riftstats.core.http import http_exception_for

from .dependencies import MatchIngestionServiceDep, MatchServiceDep
from .schemas import IngestResponse, MatchDetailResponse, MatchResponse

router = APIRouter(tags=["matches"])


@router.post("/api/players/{puuid}/fetch-matches", response_model=IngestResponse)
async def fetch_player_matches(puuid: str, ingestion: MatchIngestionServiceDep):
    """
    Ingest the player's recent matches from Riot.

    Safe to repeat: already stored matches are skipped, so a retry after a
    failure only fetches what is still missing.
    """
    try:
        processed_count = await ingestion.ingest_recent_matches(puuid)
    except Exception as e:
        raise http_exception_for(e) from e

    return IngestResponse(
        message=f"Processed {processed_count} new matches",
        processed_count=processed_count,
    )


@router.get("/players/{puuid}/matches", response_model=list[MatchResponse])
async def get_player_matches(puuid: str, match_service: MatchServiceDep):
    """Get the player's stored matches, newest first."""
    try:
        return await match_service.get_player_matches(puuid)
    except Exception as e:
        raise http_exception_for(e) from e


@router.get(
    "/players/{puuid}/champions/{champion}", response_model=list[MatchResponse]
)
async def get_player_champion_matches(
    puuid: str, champion: str, match_service: MatchServiceDep
):
    """Get the player's stored matches on one champion, newest first."""
    try:
        return await match_service.get_player_champion_matches(puuid, champion)
    except Exception as e:
        raise http_exception_for(e) from e


@router.get("/matches/{match_id}", response_model=list[MatchDetailResponse])
async def get_match(match_id: str, match_service: MatchServiceDep):
    """Get every stored row of a match with the players' Riot IDs."""
    try:
        rows = await match_service.get_match(match_id)
    except Exception as e:
        raise http_exception_for(e) from e

    if not rows:
        raise HTTPException(status_code=404, detail="Match not found")
    return rows
