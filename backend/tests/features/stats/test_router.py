"""Tests for player statistics endpoints."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from riftstats.core.exceptions import DatabaseError
from riftstats.features.stats.dependencies import get_stats_service
from riftstats.features.stats.schemas import PlayerStatsResponse, StatsSnapshot
from riftstats.main import app


@pytest.fixture
def mock_stats_service():
    service = AsyncMock()
    app.dependency_overrides[get_stats_service] = lambda: service
    yield service
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


def test_get_stats(client, mock_stats_service):
    mock_stats_service.compute_stats.return_value = StatsSnapshot(
        total_games=3,
        wins=2,
        losses=1,
        win_rate=66.67,
        avg_kda=4.56,
        favorite_champion="Ahri",
    )

    response = client.get("/players/p1/stats")

    assert response.status_code == 200
    data = response.json()
    assert data["win_rate"] == 66.67
    assert data["favorite_champion"] == "Ahri"
    mock_stats_service.compute_stats.assert_awaited_once_with("p1")


def test_get_stats_for_unknown_player(client, mock_stats_service):
    mock_stats_service.compute_stats.return_value = StatsSnapshot()

    response = client.get("/players/nobody/stats")

    assert response.status_code == 200
    assert response.json()["total_games"] == 0
    assert response.json()["favorite_champion"] == "None"


def test_update_stats(client, mock_stats_service):
    mock_stats_service.materialize_stats.return_value = PlayerStatsResponse(
        puuid="p1",
        total_games=1,
        wins=1,
        win_rate=100.0,
        last_updated=datetime(2024, 3, 9, tzinfo=timezone.utc),
    )

    response = client.post("/players/p1/update-stats")

    assert response.status_code == 200
    assert response.json()["puuid"] == "p1"
    assert response.json()["win_rate"] == 100.0


def test_database_failure_returns_500(client, mock_stats_service):
    mock_stats_service.compute_stats.side_effect = DatabaseError(
        "connection lost",
        service="StatsRepository",
        operation="aggregate_player_matches",
    )

    response = client.get("/players/p1/stats")

    assert response.status_code == 500
