"""Shared fixtures: in-memory SQLite store and Riot payload factories."""

from typing import Any, Callable, Dict, List, Optional

import pytest
import pytest_asyncio

from riftstats.core.database import DatabaseManager

# Register every table on Base.metadata before create_all
import riftstats.features.matches.orm_models  # noqa: F401
import riftstats.features.players.orm_models  # noqa: F401
import riftstats.features.stats.orm_models  # noqa: F401

TARGET_PUUID = "target-puuid-" + "x" * 65


@pytest_asyncio.fixture
async def test_db_manager():
    """In-memory SQLite database with all tables created."""
    manager = DatabaseManager("sqlite+aiosqlite:///:memory:")
    await manager.create_tables()
    yield manager
    await manager.close()


@pytest_asyncio.fixture
async def db_session(test_db_manager):
    """Database session bound to the in-memory database."""
    async with test_db_manager.get_session() as session:
        yield session


@pytest.fixture
def target_puuid() -> str:
    """PUUID of the player whose matches are ingested."""
    return TARGET_PUUID


@pytest.fixture
def participant_factory() -> Callable[..., Dict[str, Any]]:
    """Build a Riot participant payload (camelCase, as Riot sends it)."""

    def _make(puuid: str, **overrides: Any) -> Dict[str, Any]:
        participant = {
            "puuid": puuid,
            "championName": "Ahri",
            "kills": 7,
            "deaths": 3,
            "assists": 9,
            "win": True,
            "goldEarned": 12500,
            "totalDamageDealtToChampions": 24000,
            "totalMinionsKilled": 180,
            "neutralMinionsKilled": 12,
            "objectivesEpicMonsterKills": 1,
            "objectivesMonsterKills": 3,
            "challenges": {"jungleCsBefore10Minutes": 4},
            "item0": 3089,
            "item1": 3020,
            "item2": 4645,
            "item3": 0,
            "item4": 3135,
            "item5": 0,
            "item6": 3363,
        }
        participant.update(overrides)
        return participant

    return _make


@pytest.fixture
def match_payload_factory(participant_factory) -> Callable[..., Dict[str, Any]]:
    """Build a Riot match-v5 detail payload."""

    def _make(
        match_id: str,
        participants: Optional[List[Dict[str, Any]]] = None,
        game_start_timestamp: int = 1710000000000,
        game_mode: str = "CLASSIC",
        game_duration: int = 1800,
    ) -> Dict[str, Any]:
        if participants is None:
            participants = [
                participant_factory(TARGET_PUUID),
                participant_factory("other-puuid", championName="Zed", win=False),
            ]
        return {
            "metadata": {
                "matchId": match_id,
                "participants": [p["puuid"] for p in participants],
            },
            "info": {
                "gameMode": game_mode,
                "gameDuration": game_duration,
                "gameStartTimestamp": game_start_timestamp,
                "participants": participants,
            },
        }

    return _make
