"""Pydantic schemas for player statistics."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

NO_FAVORITE_CHAMPION = "None"


class StatsSnapshot(BaseModel):
    """Aggregated statistics over a player's stored matches."""

    total_games: int = Field(0, ge=0)
    wins: int = Field(0, ge=0)
    losses: int = Field(0, ge=0)
    win_rate: float = Field(0, ge=0, le=100, description="Win percentage, 2 decimals")
    avg_kda: float = Field(0, ge=0)
    favorite_champion: str = Field(
        NO_FAVORITE_CHAMPION, description="Most played champion"
    )
    total_kills: int = Field(0, ge=0)
    total_deaths: int = Field(0, ge=0)
    total_assists: int = Field(0, ge=0)
    avg_cs: float = Field(0, ge=0)
    avg_gold: float = Field(0, ge=0)
    avg_damage: float = Field(0, ge=0)

    model_config = ConfigDict(from_attributes=True)


class PlayerStatsResponse(StatsSnapshot):
    """Materialized snapshot as stored in the summary table."""

    puuid: str
    last_updated: datetime
