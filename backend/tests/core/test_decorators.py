"""Tests for repository decorators."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from riftstats.core.decorators import repository_error_handler
from riftstats.core.exceptions import DatabaseError


class FakeRepository:
    def __init__(self):
        self.db = AsyncMock()

    @repository_error_handler("FakeRepository")
    async def failing(self, puuid: str) -> None:
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    @repository_error_handler("FakeRepository")
    async def working(self, puuid: str) -> str:
        return puuid


async def test_sqlalchemy_error_becomes_database_error():
    repo = FakeRepository()

    with pytest.raises(DatabaseError) as exc_info:
        await repo.failing("p1")

    error = exc_info.value
    assert error.service == "FakeRepository"
    assert error.operation == "failing"
    assert error.context == {"puuid": "p1"}
    assert isinstance(error.original_error, OperationalError)
    assert str(error).startswith("[FakeRepository.failing] Database error:")
    repo.db.rollback.assert_awaited_once()


async def test_successful_call_passes_through():
    repo = FakeRepository()

    assert await repo.working("p1") == "p1"
    repo.db.rollback.assert_not_awaited()


async def test_other_exceptions_propagate_unchanged():
    repo = FakeRepository()

    @repository_error_handler("FakeRepository")
    async def broken(self) -> None:
        raise KeyError("x")

    with pytest.raises(KeyError):
        await broken(repo)
