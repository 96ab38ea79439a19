"""Pydantic schemas for the players feature."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PlayerResponse(BaseModel):
    """Schema for player response data."""

    puuid: str = Field(..., description="Player's PUUID")
    game_name: str = Field(..., description="Riot ID game name")
    tag_line: str = Field(..., description="Riot ID tag line")
    summoner_level: Optional[int] = Field(None, description="Summoner level")
    profile_icon_id: Optional[int] = Field(None, description="Profile icon ID")
    last_updated: datetime

    model_config = ConfigDict(from_attributes=True)


class PlayerSearchResponse(BaseModel):
    """Schema returned after a player search stores the player."""

    message: str
    player: PlayerResponse
    puuid: str
