"""Tests for the Riot match gateway."""

from unittest.mock import AsyncMock

import pytest
from pydantic import ValidationError

from riftstats.core.riot_api.client import RiotAPIClient
from riftstats.core.riot_api.errors import RiotAPIError
from riftstats.core.riot_api.models import MatchDTO, MatchListDTO
from riftstats.features.matches.gateway import RiotMatchGateway


@pytest.fixture
def riot_client():
    return AsyncMock(spec=RiotAPIClient)


@pytest.fixture
def gateway(riot_client):
    return RiotMatchGateway(riot_client)


async def test_fetch_recent_match_ids_keeps_riot_order(gateway, riot_client):
    riot_client.get_match_list_by_puuid.return_value = MatchListDTO(
        match_ids=["NA1_9", "NA1_3", "NA1_7"], start=0, count=20, puuid="p1"
    )

    match_ids = await gateway.fetch_recent_match_ids("p1", count=20)

    assert match_ids == ["NA1_9", "NA1_3", "NA1_7"]
    riot_client.get_match_list_by_puuid.assert_awaited_once_with(
        puuid="p1", start=0, count=20
    )


async def test_fetch_match_detail_returns_dto(gateway, riot_client, match_payload_factory):
    match = MatchDTO.model_validate(match_payload_factory("NA1_1"))
    riot_client.get_match.return_value = match

    assert await gateway.fetch_match_detail("NA1_1") is match


async def test_malformed_match_payload_becomes_riot_error(gateway, riot_client):
    with pytest.raises(ValidationError) as exc_info:
        MatchDTO.model_validate({"metadata": {}})
    riot_client.get_match.side_effect = exc_info.value

    with pytest.raises(RiotAPIError, match="Malformed match payload"):
        await gateway.fetch_match_detail("NA1_1")
