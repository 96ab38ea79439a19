"""Match service: read access to a player's stored matches."""

import structlog

from .repository import MatchRepositoryInterface
from .schemas import MatchDetailResponse, MatchResponse

logger = structlog.get_logger(__name__)


class MatchService:
    """Service for reading stored match data. Never calls the Riot API."""

    def __init__(self, repository: MatchRepositoryInterface):
        """Initialize match service.

        :param repository: Match repository
        """
        self.repository = repository

    async def get_player_matches(self, puuid: str) -> list[MatchResponse]:
        """Get a player's stored matches, newest first."""
        matches = await self.repository.find_by_player(puuid)
        return [MatchResponse.model_validate(match) for match in matches]

    async def get_player_champion_matches(
        self, puuid: str, champion: str
    ) -> list[MatchResponse]:
        """Get a player's stored matches on one champion, newest first."""
        matches = await self.repository.find_by_player(puuid, champion=champion)
        return [MatchResponse.model_validate(match) for match in matches]

    async def get_match(self, match_id: str) -> list[MatchDetailResponse]:
        """Get every stored row of a match; empty if the match is unknown."""
        rows = await self.repository.find_by_match_id(match_id)
        logger.debug("match_rows_retrieved", match_id=match_id, count=len(rows))
        return rows
