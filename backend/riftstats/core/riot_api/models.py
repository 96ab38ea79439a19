"""Pydantic models for Riot API response data."""

from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict, field_validator


class AccountDTO(BaseModel):
    """Riot Account information."""

    puuid: str
    game_name: str = Field(..., alias="gameName")
    tag_line: str = Field(..., alias="tagLine")

    model_config = ConfigDict(populate_by_name=True)


class SummonerDTO(BaseModel):
    """League of Legends Summoner information."""

    puuid: str
    profile_icon_id: int = Field(..., alias="profileIconId")
    summoner_level: int = Field(..., alias="summonerLevel")

    model_config = ConfigDict(populate_by_name=True)


class MatchListDTO(BaseModel):
    """Match list response, most recent match first."""

    match_ids: List[str] = Field(..., alias="matchIds")
    start: int
    count: int
    puuid: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class ParticipantChallengesDTO(BaseModel):
    """Subset of the participant ``challenges`` block we read."""

    jungle_cs_before_10_minutes: float = Field(0, alias="jungleCsBefore10Minutes")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("jungle_cs_before_10_minutes", mode="before")
    @classmethod
    def null_as_zero(cls, value):
        return 0 if value is None else value


class ParticipantDTO(BaseModel):
    """Match participant information."""

    puuid: str
    champion_name: str = Field(..., alias="championName")
    kills: int
    deaths: int
    assists: int
    win: bool
    gold_earned: int = Field(0, alias="goldEarned")
    total_damage_dealt_to_champions: int = Field(
        0, alias="totalDamageDealtToChampions"
    )

    # Creep score sources, absent on some queues
    total_minions_killed: int = Field(0, alias="totalMinionsKilled")
    neutral_minions_killed: int = Field(0, alias="neutralMinionsKilled")
    objectives_epic_monster_kills: int = Field(0, alias="objectivesEpicMonsterKills")
    objectives_monster_kills: int = Field(0, alias="objectivesMonsterKills")
    challenges: ParticipantChallengesDTO = Field(
        default_factory=ParticipantChallengesDTO
    )

    # Item slots, 0 or missing when empty
    item0: Optional[int] = None
    item1: Optional[int] = None
    item2: Optional[int] = None
    item3: Optional[int] = None
    item4: Optional[int] = None
    item5: Optional[int] = None
    item6: Optional[int] = None

    model_config = ConfigDict(populate_by_name=True)

    @field_validator(
        "total_minions_killed",
        "neutral_minions_killed",
        "objectives_epic_monster_kills",
        "objectives_monster_kills",
        mode="before",
    )
    @classmethod
    def null_count_as_zero(cls, value):
        """Riot sends null for counters some queues do not track."""
        return 0 if value is None else value

    @field_validator("challenges", mode="before")
    @classmethod
    def null_challenges_as_empty(cls, value):
        return {} if value is None else value


class MatchInfoDTO(BaseModel):
    """Match information."""

    game_mode: Optional[str] = Field(None, alias="gameMode")
    game_duration: int = Field(..., alias="gameDuration")
    game_start_timestamp: int = Field(..., alias="gameStartTimestamp")
    participants: List[ParticipantDTO]

    model_config = ConfigDict(populate_by_name=True)


class MatchMetadataDTO(BaseModel):
    """Match metadata."""

    match_id: str = Field(..., alias="matchId")
    participants: List[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class MatchDTO(BaseModel):
    """Complete match data."""

    metadata: MatchMetadataDTO
    info: MatchInfoDTO

    @property
    def match_id(self) -> str:
        """Get match ID from metadata."""
        return self.metadata.match_id

    model_config = ConfigDict(populate_by_name=True)
