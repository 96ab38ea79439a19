"""Tests for recent-match ingestion."""

from unittest.mock import AsyncMock, call

import httpx
import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from riftstats.core.exceptions import DatabaseError, IngestionError
from riftstats.core.http import http_exception_for
from riftstats.core.riot_api.client import RiotAPIClient
from riftstats.core.riot_api.errors import (
    RateLimitError,
    RiotAPIError,
    ServiceUnavailableError,
)
from riftstats.core.riot_api.models import MatchDTO
from riftstats.features.matches.gateway import RiotMatchGateway
from riftstats.features.matches.ingestion import MatchIngestionService
from riftstats.features.matches.orm_models import MatchORM
from riftstats.features.matches.repository import (
    MatchRepositoryInterface,
    SQLAlchemyMatchRepository,
)
from riftstats.features.matches.transformers import MatchExtractor


@pytest.fixture
def match_details(match_payload_factory):
    """Three matches, oldest NA1_1 to newest NA1_3."""
    return {
        f"NA1_{i}": MatchDTO.model_validate(
            match_payload_factory(f"NA1_{i}", game_start_timestamp=1710000000000 + i)
        )
        for i in (1, 2, 3)
    }


@pytest.fixture
def gateway(match_details):
    gateway = AsyncMock(spec=RiotMatchGateway)
    gateway.fetch_recent_match_ids.return_value = ["NA1_3", "NA1_2", "NA1_1"]
    gateway.fetch_match_detail.side_effect = lambda match_id: match_details[match_id]
    return gateway


@pytest.fixture
def repository(db_session):
    return SQLAlchemyMatchRepository(db_session)


@pytest.fixture
def service(repository, gateway):
    return MatchIngestionService(repository, gateway)


async def count_rows(db_session) -> int:
    return await db_session.scalar(select(func.count()).select_from(MatchORM))


async def test_ingests_all_new_matches(service, gateway, db_session, target_puuid):
    processed = await service.ingest_recent_matches(target_puuid)

    assert processed == 3
    assert await count_rows(db_session) == 3
    gateway.fetch_recent_match_ids.assert_awaited_once_with(target_puuid, 20)


async def test_processes_ids_in_order_received(service, gateway, target_puuid):
    await service.ingest_recent_matches(target_puuid)

    assert gateway.fetch_match_detail.await_args_list == [
        call("NA1_3"),
        call("NA1_2"),
        call("NA1_1"),
    ]


async def test_second_run_is_idempotent(service, gateway, db_session, target_puuid):
    assert await service.ingest_recent_matches(target_puuid) == 3
    gateway.fetch_match_detail.reset_mock()

    assert await service.ingest_recent_matches(target_puuid) == 0

    assert await count_rows(db_session) == 3
    gateway.fetch_match_detail.assert_not_awaited()


async def test_only_missing_matches_are_fetched(
    service, gateway, repository, match_details, target_puuid
):
    await repository.insert_match(
        MatchExtractor.extract(match_details["NA1_2"], target_puuid)
    )

    processed = await service.ingest_recent_matches(target_puuid)

    assert processed == 2
    assert call("NA1_2") not in gateway.fetch_match_detail.await_args_list


async def test_match_without_player_is_skipped(
    service,
    gateway,
    match_details,
    match_payload_factory,
    participant_factory,
    db_session,
    target_puuid,
):
    match_details["NA1_2"] = MatchDTO.model_validate(
        match_payload_factory(
            "NA1_2", participants=[participant_factory("someone-else")]
        )
    )

    processed = await service.ingest_recent_matches(target_puuid)

    assert processed == 2
    assert await count_rows(db_session) == 2


async def test_empty_match_history(service, gateway, target_puuid):
    gateway.fetch_recent_match_ids.return_value = []

    assert await service.ingest_recent_matches(target_puuid) == 0
    gateway.fetch_match_detail.assert_not_awaited()


async def test_uses_configured_history_count(repository, gateway, target_puuid):
    service = MatchIngestionService(repository, gateway, match_history_count=5)

    await service.ingest_recent_matches(target_puuid)

    gateway.fetch_recent_match_ids.assert_awaited_once_with(target_puuid, 5)


async def test_source_failure_aborts_but_keeps_inserted_rows(
    service, gateway, match_details, db_session, target_puuid
):
    def fail_on_oldest(match_id):
        if match_id == "NA1_1":
            raise ServiceUnavailableError("Service unavailable", status_code=503)
        return match_details[match_id]

    gateway.fetch_match_detail.side_effect = fail_on_oldest

    with pytest.raises(IngestionError) as exc_info:
        await service.ingest_recent_matches(target_puuid)

    assert exc_info.value.processed_count == 2
    assert isinstance(exc_info.value.original_error, ServiceUnavailableError)
    assert await count_rows(db_session) == 2

    # Retry resumes with only the missing match
    gateway.fetch_match_detail.side_effect = lambda match_id: match_details[match_id]
    gateway.fetch_match_detail.reset_mock()

    assert await service.ingest_recent_matches(target_puuid) == 1
    assert gateway.fetch_match_detail.await_args_list == [call("NA1_1")]


async def test_rate_limit_on_match_list_surfaces(service, gateway, target_puuid):
    gateway.fetch_recent_match_ids.side_effect = RateLimitError(
        "Rate limit exceeded", status_code=429, retry_after=10
    )

    with pytest.raises(IngestionError) as exc_info:
        await service.ingest_recent_matches(target_puuid)

    assert isinstance(exc_info.value.original_error, RateLimitError)
    assert exc_info.value.processed_count == 0
    gateway.fetch_match_detail.assert_not_awaited()


async def test_store_failure_aborts(gateway, target_puuid):
    repository = AsyncMock(spec=MatchRepositoryInterface)
    repository.exists.side_effect = DatabaseError(
        "connection refused",
        original_error=OperationalError("SELECT 1", {}, Exception("down")),
    )
    service = MatchIngestionService(repository, gateway)

    with pytest.raises(IngestionError) as exc_info:
        await service.ingest_recent_matches(target_puuid)

    assert isinstance(exc_info.value.original_error, DatabaseError)
    gateway.fetch_match_detail.assert_not_awaited()


async def test_insert_conflict_is_not_counted(gateway, target_puuid):
    """A concurrent run stored the row between exists() and insert."""
    repository = AsyncMock(spec=MatchRepositoryInterface)
    repository.exists.return_value = False
    repository.insert_match.side_effect = [True, False, True]
    service = MatchIngestionService(repository, gateway)

    assert await service.ingest_recent_matches(target_puuid) == 2
    assert repository.insert_match.await_count == 3


def riot_service(repository, handler) -> MatchIngestionService:
    """Ingestion wired to a real Riot client over a mock HTTP transport."""
    client = RiotAPIClient(api_key="RGAPI-test", transport=httpx.MockTransport(handler))
    return MatchIngestionService(repository, RiotMatchGateway(client))


def serve(match_ids, details):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/ids"):
            return match_ids
        return details[request.url.path.rsplit("/", 1)[-1]]

    return handler


async def test_non_json_match_detail_is_a_source_error(repository, target_puuid):
    handler = serve(
        httpx.Response(200, json=["NA1_1"]),
        {"NA1_1": httpx.Response(200, text="<html>gateway</html>")},
    )
    service = riot_service(repository, handler)

    with pytest.raises(IngestionError) as exc_info:
        await service.ingest_recent_matches(target_puuid)

    assert isinstance(exc_info.value.original_error, RiotAPIError)
    assert exc_info.value.processed_count == 0
    assert http_exception_for(exc_info.value).status_code == 502


@pytest.mark.parametrize(
    "body",
    [{"matchIds": ["NA1_1"]}, "NA1_1", [1, 2]],
    ids=["object", "string", "non-string-ids"],
)
async def test_unexpected_match_list_is_a_source_error(
    repository, target_puuid, body
):
    service = riot_service(repository, serve(httpx.Response(200, json=body), {}))

    with pytest.raises(IngestionError) as exc_info:
        await service.ingest_recent_matches(target_puuid)

    assert isinstance(exc_info.value.original_error, RiotAPIError)
    assert http_exception_for(exc_info.value).status_code == 502


async def test_null_creep_score_fields_count_as_zero(
    repository, db_session, target_puuid, participant_factory, match_payload_factory
):
    participant = participant_factory(
        target_puuid,
        totalMinionsKilled=150,
        neutralMinionsKilled=None,
        objectivesEpicMonsterKills=None,
        challenges=None,
    )
    payload = match_payload_factory("NA1_1", participants=[participant])
    handler = serve(
        httpx.Response(200, json=["NA1_1"]),
        {"NA1_1": httpx.Response(200, json=payload)},
    )
    service = riot_service(repository, handler)

    assert await service.ingest_recent_matches(target_puuid) == 1

    stored = await db_session.scalar(select(MatchORM))
    assert stored.cs == 150
