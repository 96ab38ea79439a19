"""Repository pattern implementation for matches feature.

This module provides data access abstraction following the Repository pattern,
encapsulating all database operations on stored player matches.
"""

from abc import ABC, abstractmethod
from typing import Optional

import structlog
from sqlalchemy import select, desc
from sqlalchemy.ext.asyncio import AsyncSession

from riftstats.core.database import dialect_insert
from riftstats.core.decorators import repository_error_handler
from riftstats.features.players.orm_models import PlayerORM

from .orm_models import MatchORM
from .schemas import MatchCreate, MatchDetailResponse

logger = structlog.get_logger(__name__)


class MatchRepositoryInterface(ABC):
    """Interface for match repository following Repository pattern."""

    @abstractmethod
    async def exists(self, match_id: str, puuid: str) -> bool:
        """Check whether a match is already stored for a player.

        Args:
            match_id: Match identifier
            puuid: Player PUUID

        Returns:
            True if a (match_id, puuid) row exists
        """
        pass

    @abstractmethod
    async def insert_match(self, match: MatchCreate) -> bool:
        """Insert a match row; never updates an existing one.

        Args:
            match: Normalized match statistics

        Returns:
            False if a row with the same (match_id, puuid) was already there
        """
        pass

    @abstractmethod
    async def find_by_player(
        self, puuid: str, champion: Optional[str] = None
    ) -> list[MatchORM]:
        """Find a player's stored matches, newest game start first.

        Args:
            puuid: Player PUUID
            champion: Optional champion name filter

        Returns:
            List of MatchORM objects
        """
        pass

    @abstractmethod
    async def find_by_match_id(self, match_id: str) -> list[MatchDetailResponse]:
        """Find every stored row of a match with the player's Riot ID.

        Args:
            match_id: Match identifier

        Returns:
            One entry per player the match was stored for
        """
        pass


class SQLAlchemyMatchRepository(MatchRepositoryInterface):
    """SQLAlchemy implementation of match repository."""

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session.

        Args:
            db: SQLAlchemy async session
        """
        self.db = db

    @repository_error_handler("MatchRepository")
    async def exists(self, match_id: str, puuid: str) -> bool:
        """Check whether a match is already stored for a player."""
        stmt = select(MatchORM.match_id).where(
            MatchORM.match_id == match_id,
            MatchORM.puuid == puuid,
        )
        result = await self.db.execute(stmt)
        return result.first() is not None

    @repository_error_handler("MatchRepository")
    async def insert_match(self, match: MatchCreate) -> bool:
        """Insert a match row using ON CONFLICT (match_id, puuid) DO NOTHING.

        Each insert commits on its own, so rows stored earlier in an
        ingestion run survive a later failure.
        """
        stmt = (
            dialect_insert(self.db, MatchORM)
            .values(**match.model_dump())
            .on_conflict_do_nothing(index_elements=["match_id", "puuid"])
            .returning(MatchORM.match_id)
        )
        result = await self.db.execute(stmt)
        inserted = result.scalar_one_or_none() is not None
        await self.db.commit()

        if inserted:
            logger.debug("match_created", match_id=match.match_id, puuid=match.puuid)
        else:
            logger.info(
                "match_insert_conflict_ignored",
                match_id=match.match_id,
                puuid=match.puuid,
            )

        return inserted

    @repository_error_handler("MatchRepository")
    async def find_by_player(
        self, puuid: str, champion: Optional[str] = None
    ) -> list[MatchORM]:
        """Find a player's stored matches, newest game start first."""
        stmt = (
            select(MatchORM)
            .where(MatchORM.puuid == puuid)
            .order_by(desc(MatchORM.game_start), desc(MatchORM.match_id))
        )
        if champion:
            stmt = stmt.where(MatchORM.champion == champion)

        result = await self.db.execute(stmt)
        matches = list(result.scalars().all())

        logger.debug(
            "matches_found_for_player",
            puuid=puuid,
            champion=champion,
            count=len(matches),
        )

        return matches

    @repository_error_handler("MatchRepository")
    async def find_by_match_id(self, match_id: str) -> list[MatchDetailResponse]:
        """Find every stored row of a match with the player's Riot ID."""
        stmt = (
            select(MatchORM, PlayerORM.game_name, PlayerORM.tag_line)
            .outerjoin(PlayerORM, PlayerORM.puuid == MatchORM.puuid)
            .where(MatchORM.match_id == match_id)
            .order_by(MatchORM.puuid)
        )
        result = await self.db.execute(stmt)

        return [
            MatchDetailResponse.model_validate(match).model_copy(
                update={"game_name": game_name, "tag_line": tag_line}
            )
            for match, game_name, tag_line in result.all()
        ]
