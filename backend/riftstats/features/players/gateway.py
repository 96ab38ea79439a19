"""
Riot API Gateway - Anti-Corruption Layer for Players Feature.

Combines the account and summoner lookups into one player profile and
translates Riot's camelCase DTOs to our PlayerORM.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from .orm_models import PlayerORM

if TYPE_CHECKING:
    from riftstats.core.riot_api.client import RiotAPIClient

logger = structlog.get_logger(__name__)


class RiotPlayerGateway:
    """Anti-Corruption Layer for Riot account and summoner endpoints."""

    def __init__(self, riot_api_client: "RiotAPIClient"):
        """
        Initialize gateway with Riot API client.

        :param riot_api_client: Low-level Riot API client
        """
        self._client = riot_api_client

    async def fetch_player_profile(self, game_name: str, tag_line: str) -> PlayerORM:
        """
        Fetch player profile from Riot API and transform to our domain model.

        :param game_name: Riot ID game name
        :param tag_line: Riot ID tag line
        :returns: Transient PlayerORM (not yet persisted)
        :raises RiotAPIError: If either API call fails
        """
        account = await self._client.get_account_by_riot_id(game_name, tag_line)
        summoner = await self._client.get_summoner_by_puuid(account.puuid)

        logger.debug(
            "player_profile_fetched",
            puuid=account.puuid,
            game_name=account.game_name,
            tag_line=account.tag_line,
        )

        # Riot returns the canonical casing of the name and tag
        return PlayerORM(
            puuid=account.puuid,
            game_name=account.game_name,
            tag_line=account.tag_line,
            summoner_level=summoner.summoner_level,
            profile_icon_id=summoner.profile_icon_id,
        )
