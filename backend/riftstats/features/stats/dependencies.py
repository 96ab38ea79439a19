"""Dependencies for the stats feature."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from riftstats.core.database import get_db

from .repository import SQLAlchemyStatsRepository, StatsRepositoryInterface
from .service import StatsService


async def get_stats_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> StatsRepositoryInterface:
    """Get stats repository instance."""
    return SQLAlchemyStatsRepository(db)


async def get_stats_service(
    repository: Annotated[StatsRepositoryInterface, Depends(get_stats_repository)],
) -> StatsService:
    """Get stats service instance."""
    return StatsService(repository)


# Type aliases for cleaner dependency injection
StatsServiceDep = Annotated[StatsService, Depends(get_stats_service)]

__all__ = ["get_stats_repository", "get_stats_service", "StatsServiceDep"]
