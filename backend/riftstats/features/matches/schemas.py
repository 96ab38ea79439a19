"""Pydantic schemas for the matches feature."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


ITEM_SLOTS = tuple(f"item{slot}" for slot in range(7))


class MatchBase(BaseModel):
    """Base Match schema with common attributes."""

    match_id: str = Field(..., max_length=64, description="Match identifier")
    champion: str = Field(..., description="Champion name played")
    kills: int = Field(..., ge=0)
    deaths: int = Field(..., ge=0)
    assists: int = Field(..., ge=0)
    kda: float = Field(..., ge=0, description="(kills + assists) / max(deaths, 1)")
    win: bool
    game_mode: Optional[str] = Field(None, max_length=32, description="Game mode")
    game_duration: int = Field(..., ge=0, description="Game duration in seconds")
    items: dict[str, Optional[int]] = Field(
        ..., description="Item IDs keyed item0..item6"
    )
    cs: int = Field(..., ge=0, description="Combined creep score")
    gold: int = Field(..., ge=0, description="Gold earned")
    damage: int = Field(..., ge=0, description="Damage dealt to champions")
    game_start: datetime = Field(..., description="Game start instant")


class MatchCreate(MatchBase):
    """Normalized match statistics for one player, ready to insert."""

    puuid: str = Field(..., max_length=78, description="Player PUUID")


class MatchResponse(MatchBase):
    """Schema for a stored match returned to clients."""

    model_config = ConfigDict(from_attributes=True)


class MatchDetailResponse(MatchCreate):
    """Stored match row joined with the player's Riot ID."""

    game_name: Optional[str] = None
    tag_line: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class IngestResponse(BaseModel):
    """Result of ingesting a player's recent matches."""

    message: str
    processed_count: int = Field(..., ge=0, description="Newly stored matches")
