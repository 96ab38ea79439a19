"""Repository pattern implementation for players feature."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from riftstats.core.database import dialect_insert
from riftstats.core.decorators import repository_error_handler

from .orm_models import PlayerORM

logger = structlog.get_logger(__name__)


class PlayerRepositoryInterface(ABC):
    """Interface for player repository."""

    @abstractmethod
    async def upsert(self, player: PlayerORM) -> PlayerORM:
        """Insert a player or overwrite its profile fields on PUUID conflict.

        :param player: Transient player carrying the fetched profile
        :returns: The stored player row
        """
        pass


class SQLAlchemyPlayerRepository(PlayerRepositoryInterface):
    """SQLAlchemy implementation of player repository."""

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session."""
        self.db = db

    @repository_error_handler("PlayerRepository")
    async def upsert(self, player: PlayerORM) -> PlayerORM:
        """Insert or update player using ON CONFLICT (puuid)."""
        now = datetime.now(timezone.utc)
        profile = dict(
            game_name=player.game_name,
            tag_line=player.tag_line,
            summoner_level=player.summoner_level,
            profile_icon_id=player.profile_icon_id,
            last_updated=now,
        )

        insert_stmt = dialect_insert(self.db, PlayerORM).values(
            puuid=player.puuid, **profile
        )
        stmt = (
            insert_stmt.on_conflict_do_update(
                index_elements=["puuid"],
                set_=profile,
            )
            .returning(PlayerORM)
            .execution_options(populate_existing=True)
        )

        result = await self.db.execute(stmt)
        stored = result.scalar_one()
        await self.db.commit()

        logger.info("player_upserted", puuid=stored.puuid, riot_id=stored.riot_id)

        return stored
