"""Anti-Corruption Layer (Gateway) for Riot Match API.

Isolates the matches feature from the Riot client: callers get plain
match ID lists and validated match DTOs.
"""

from typing import TYPE_CHECKING

import structlog
from pydantic import ValidationError

from riftstats.core.riot_api.errors import RiotAPIError
from riftstats.core.riot_api.models import MatchDTO

if TYPE_CHECKING:
    from riftstats.core.riot_api.client import RiotAPIClient

logger = structlog.get_logger(__name__)


class RiotMatchGateway:
    """Gateway to Riot Match API - Anti-Corruption Layer."""

    def __init__(self, riot_client: "RiotAPIClient"):
        """Initialize gateway with Riot API client.

        :param riot_client: Riot API client instance
        """
        self.riot_client = riot_client

    async def fetch_recent_match_ids(self, puuid: str, count: int = 20) -> list[str]:
        """Fetch a player's most recent match IDs, newest first.

        The order returned by Riot is kept as-is.

        :param puuid: Player PUUID
        :param count: Maximum number of match IDs
        :returns: List of match IDs
        :raises RiotAPIError: If API call fails or the payload is malformed
        """
        try:
            match_list = await self.riot_client.get_match_list_by_puuid(
                puuid=puuid, start=0, count=count
            )
        except ValidationError as e:
            logger.warning("match_list_payload_invalid", puuid=puuid, error=str(e))
            raise RiotAPIError(f"Malformed match list payload for {puuid}") from e

        match_ids = list(match_list.match_ids)

        logger.debug("match_history_fetched", puuid=puuid, count=len(match_ids))

        return match_ids

    async def fetch_match_detail(self, match_id: str) -> MatchDTO:
        """Fetch full match detail.

        :param match_id: Riot match identifier
        :returns: Validated match DTO
        :raises RiotAPIError: If API call fails or the payload is malformed
        """
        try:
            match = await self.riot_client.get_match(match_id)
        except ValidationError as e:
            logger.warning("match_payload_invalid", match_id=match_id, error=str(e))
            raise RiotAPIError(f"Malformed match payload for {match_id}") from e

        logger.debug(
            "match_fetched_from_riot_api",
            match_id=match_id,
            participants=len(match.info.participants),
        )

        return match
