"""Player service: look up a Riot ID and keep the player row current."""

import structlog

from .gateway import RiotPlayerGateway
from .repository import PlayerRepositoryInterface
from .schemas import PlayerResponse

logger = structlog.get_logger(__name__)


class PlayerService:
    """Thin orchestration over the Riot gateway and the player repository."""

    def __init__(
        self, repository: PlayerRepositoryInterface, riot_gateway: RiotPlayerGateway
    ):
        """Initialize player service.

        :param repository: Player repository
        :param riot_gateway: Anti-Corruption Layer for Riot account/summoner API
        """
        self.repository = repository
        self.riot_gateway = riot_gateway

    async def search_player(self, game_name: str, tag_line: str) -> PlayerResponse:
        """Fetch a player by Riot ID and upsert it by PUUID.

        Searching the same player again updates name, tag, level and icon
        in place rather than creating a second row.

        :raises RiotAPIError: If the Riot API lookup fails
        :raises DatabaseError: If the upsert fails
        """
        profile = await self.riot_gateway.fetch_player_profile(game_name, tag_line)
        player = await self.repository.upsert(profile)

        logger.info(
            "player_search_stored",
            puuid=player.puuid,
            game_name=player.game_name,
            tag_line=player.tag_line,
        )
        return PlayerResponse.model_validate(player)
