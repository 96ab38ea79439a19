"""Repository for match aggregates and the materialized stats table."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import structlog
from sqlalchemy import case, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from riftstats.core.database import dialect_insert
from riftstats.core.decorators import repository_error_handler
from riftstats.features.matches.orm_models import MatchORM

from .orm_models import PlayerStatsORM
from .schemas import StatsSnapshot

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class MatchAggregate:
    """Raw SQL aggregates over one player's matches (unrounded)."""

    total_games: int
    wins: int
    total_kills: int
    total_deaths: int
    total_assists: int
    avg_kda: float
    avg_cs: float
    avg_gold: float
    avg_damage: float


class StatsRepositoryInterface(ABC):
    """Interface for stats repository."""

    @abstractmethod
    async def aggregate_player_matches(self, puuid: str) -> MatchAggregate:
        """Aggregate counts, sums and averages over a player's matches."""
        pass

    @abstractmethod
    async def get_favorite_champion(self, puuid: str) -> Optional[str]:
        """Most played champion, None without matches.

        Ties go to the alphabetically first champion name.
        """
        pass

    @abstractmethod
    async def upsert_stats(self, puuid: str, snapshot: StatsSnapshot) -> PlayerStatsORM:
        """Write the player's summary row, replacing any previous one."""
        pass


class SQLAlchemyStatsRepository(StatsRepositoryInterface):
    """SQLAlchemy implementation of stats repository."""

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session."""
        self.db = db

    @repository_error_handler("StatsRepository")
    async def aggregate_player_matches(self, puuid: str) -> MatchAggregate:
        """Aggregate counts, sums and averages over a player's matches."""
        stmt = select(
            func.count().label("total_games"),
            func.coalesce(func.sum(case((MatchORM.win, 1), else_=0)), 0).label("wins"),
            func.coalesce(func.sum(MatchORM.kills), 0).label("total_kills"),
            func.coalesce(func.sum(MatchORM.deaths), 0).label("total_deaths"),
            func.coalesce(func.sum(MatchORM.assists), 0).label("total_assists"),
            func.coalesce(func.avg(MatchORM.kda), 0).label("avg_kda"),
            func.coalesce(func.avg(MatchORM.cs), 0).label("avg_cs"),
            func.coalesce(func.avg(MatchORM.gold), 0).label("avg_gold"),
            func.coalesce(func.avg(MatchORM.damage), 0).label("avg_damage"),
        ).where(MatchORM.puuid == puuid)

        row = (await self.db.execute(stmt)).one()

        return MatchAggregate(
            total_games=int(row.total_games),
            wins=int(row.wins),
            total_kills=int(row.total_kills),
            total_deaths=int(row.total_deaths),
            total_assists=int(row.total_assists),
            avg_kda=float(row.avg_kda),
            avg_cs=float(row.avg_cs),
            avg_gold=float(row.avg_gold),
            avg_damage=float(row.avg_damage),
        )

    @repository_error_handler("StatsRepository")
    async def get_favorite_champion(self, puuid: str) -> Optional[str]:
        """Most played champion (ties: alphabetically first)."""
        games = func.count().label("games")
        stmt = (
            select(MatchORM.champion, games)
            .where(MatchORM.puuid == puuid)
            .group_by(MatchORM.champion)
            .order_by(desc(games), MatchORM.champion)
            .limit(1)
        )
        row = (await self.db.execute(stmt)).first()
        return row.champion if row else None

    @repository_error_handler("StatsRepository")
    async def upsert_stats(self, puuid: str, snapshot: StatsSnapshot) -> PlayerStatsORM:
        """Insert or overwrite the summary row using ON CONFLICT (puuid)."""
        values = {**snapshot.model_dump(), "last_updated": datetime.now(timezone.utc)}

        stmt = (
            dialect_insert(self.db, PlayerStatsORM)
            .values(puuid=puuid, **values)
            .on_conflict_do_update(index_elements=["puuid"], set_=values)
            .returning(PlayerStatsORM)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        stored = result.scalar_one()
        await self.db.commit()

        logger.info(
            "player_stats_materialized",
            puuid=puuid,
            total_games=stored.total_games,
        )

        return stored
