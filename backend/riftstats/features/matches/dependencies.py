"""Dependencies for the matches feature.

Injects repository and gateway into services following dependency inversion principle.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from riftstats.core.config import get_global_settings
from riftstats.core.database import get_db
from riftstats.core.dependencies import get_riot_client
from riftstats.core.riot_api.client import RiotAPIClient

from .gateway import RiotMatchGateway
from .ingestion import MatchIngestionService
from .repository import MatchRepositoryInterface, SQLAlchemyMatchRepository
from .service import MatchService


async def get_match_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MatchRepositoryInterface:
    """Get match repository instance.

    :param db: Database session
    :returns: Match repository implementation
    """
    return SQLAlchemyMatchRepository(db)


async def get_riot_match_gateway(
    riot_client: Annotated[RiotAPIClient, Depends(get_riot_client)],
) -> RiotMatchGateway:
    """Get Riot match gateway instance.

    :param riot_client: Riot API client
    :returns: Riot match gateway
    """
    return RiotMatchGateway(riot_client)


async def get_match_service(
    repository: Annotated[MatchRepositoryInterface, Depends(get_match_repository)],
) -> MatchService:
    """Get match service instance."""
    return MatchService(repository)


async def get_match_ingestion_service(
    repository: Annotated[MatchRepositoryInterface, Depends(get_match_repository)],
    gateway: Annotated[RiotMatchGateway, Depends(get_riot_match_gateway)],
) -> MatchIngestionService:
    """Get match ingestion service instance.

    :param repository: Match repository
    :param gateway: Riot match gateway (Anti-Corruption Layer)
    :returns: Ingestion service configured with the match history size
    """
    settings = get_global_settings()
    return MatchIngestionService(
        repository, gateway, match_history_count=settings.match_history_count
    )


# Type aliases for cleaner dependency injection
MatchServiceDep = Annotated[MatchService, Depends(get_match_service)]
MatchIngestionServiceDep = Annotated[
    MatchIngestionService, Depends(get_match_ingestion_service)
]

__all__ = [
    "get_match_repository",
    "get_riot_match_gateway",
    "get_match_service",
    "get_match_ingestion_service",
    "MatchServiceDep",
    "MatchIngestionServiceDep",
]
