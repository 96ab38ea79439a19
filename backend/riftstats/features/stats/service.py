"""Stats service: player summary statistics derived from stored matches."""

from decimal import Decimal, ROUND_HALF_UP

import structlog

from .repository import MatchAggregate, StatsRepositoryInterface
from .schemas import NO_FAVORITE_CHAMPION, PlayerStatsResponse, StatsSnapshot

logger = structlog.get_logger(__name__)

_TWO_PLACES = Decimal("0.01")


def round_half_up(value: float) -> float:
    """Round to 2 decimals, halves away from zero (SQL ROUND semantics)."""
    return float(Decimal(str(value)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def build_stats_snapshot(
    aggregate: MatchAggregate, favorite_champion: str | None
) -> StatsSnapshot:
    """Turn raw aggregates into a rounded snapshot.

    A player without matches gets zeros everywhere and the "None" champion.
    """
    if aggregate.total_games == 0:
        return StatsSnapshot()

    return StatsSnapshot(
        total_games=aggregate.total_games,
        wins=aggregate.wins,
        losses=aggregate.total_games - aggregate.wins,
        win_rate=round_half_up(aggregate.wins * 100 / aggregate.total_games),
        avg_kda=round_half_up(aggregate.avg_kda),
        favorite_champion=favorite_champion or NO_FAVORITE_CHAMPION,
        total_kills=aggregate.total_kills,
        total_deaths=aggregate.total_deaths,
        total_assists=aggregate.total_assists,
        avg_cs=round_half_up(aggregate.avg_cs),
        avg_gold=round_half_up(aggregate.avg_gold),
        avg_damage=round_half_up(aggregate.avg_damage),
    )


class StatsService:
    """Computes player statistics; only ever reads match rows."""

    def __init__(self, repository: StatsRepositoryInterface):
        """Initialize stats service.

        :param repository: Stats repository
        """
        self.repository = repository

    async def compute_stats(self, puuid: str) -> StatsSnapshot:
        """Aggregate the player's stored matches at read time."""
        aggregate = await self.repository.aggregate_player_matches(puuid)
        favorite = None
        if aggregate.total_games:
            favorite = await self.repository.get_favorite_champion(puuid)

        snapshot = build_stats_snapshot(aggregate, favorite)

        logger.debug(
            "player_stats_computed",
            puuid=puuid,
            total_games=snapshot.total_games,
            win_rate=snapshot.win_rate,
        )
        return snapshot

    async def materialize_stats(self, puuid: str) -> PlayerStatsResponse:
        """Compute the snapshot and overwrite the player's summary row."""
        snapshot = await self.compute_stats(puuid)
        stored = await self.repository.upsert_stats(puuid, snapshot)
        return PlayerStatsResponse.model_validate(stored)
