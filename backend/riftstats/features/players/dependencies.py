"""Dependencies for the players feature.

Injects repository and gateway into service following dependency inversion principle.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from riftstats.core.database import get_db
from riftstats.core.dependencies import get_riot_client
from riftstats.core.riot_api.client import RiotAPIClient

from .gateway import RiotPlayerGateway
from .repository import PlayerRepositoryInterface, SQLAlchemyPlayerRepository
from .service import PlayerService


async def get_player_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PlayerRepositoryInterface:
    """Get player repository instance."""
    return SQLAlchemyPlayerRepository(db)


async def get_riot_player_gateway(
    riot_client: Annotated[RiotAPIClient, Depends(get_riot_client)],
) -> RiotPlayerGateway:
    """Get Riot player gateway instance."""
    return RiotPlayerGateway(riot_client)


async def get_player_service(
    repository: Annotated[PlayerRepositoryInterface, Depends(get_player_repository)],
    gateway: Annotated[RiotPlayerGateway, Depends(get_riot_player_gateway)],
) -> PlayerService:
    """Get player service instance."""
    return PlayerService(repository, gateway)


# Type aliases for cleaner dependency injection
PlayerServiceDep = Annotated[PlayerService, Depends(get_player_service)]

__all__ = [
    "get_player_repository",
    "get_riot_player_gateway",
    "get_player_service",
    "PlayerServiceDep",
]
