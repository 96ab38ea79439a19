"""Player API endpoints."""

import structlog
from fastapi import APIRouter, Path

from riftstats.core.http import http_exception_for

from .dependencies import PlayerServiceDep
from .schemas import PlayerSearchResponse

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["players"])

# Riot ID validation constants
RIOT_ID_NAME_MAX_LENGTH = 16
RIOT_ID_TAG_MAX_LENGTH = 5


@router.get("/api/search/{game_name}/{tag_line}", response_model=PlayerSearchResponse)
async def search_player(
    player_service: PlayerServiceDep,
    game_name: str = Path(..., min_length=3, max_length=RIOT_ID_NAME_MAX_LENGTH),
    tag_line: str = Path(..., min_length=2, max_length=RIOT_ID_TAG_MAX_LENGTH),
):
    """
    Look up a player by Riot ID and store it.

    Repeated searches update the stored profile in place.
    """
    try:
        player = await player_service.search_player(game_name.strip(), tag_line.strip())
    except Exception as e:
        logger.error(
            "player_search_failed",
            game_name=game_name,
            tag_line=tag_line,
            error=str(e),
        )
        raise http_exception_for(e) from e

    return PlayerSearchResponse(
        message="Player found and stored!",
        player=player,
        puuid=player.puuid,
    )
