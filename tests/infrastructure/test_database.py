"""Database Session Manager — error mapping and connection release on every exit path.

Tests:
    - Operational / pool-timeout failures map to StoreUnavailableError
    - Driver and generic SQLAlchemy failures map to StoreError
    - The session is closed on success, on store failure, on domain errors
      raised inside the block, and on cancellation
    - health_check reports True against a live store, False otherwise
"""

import asyncio

import pytest
from sqlalchemy.exc import (
    DBAPIError, OperationalError, SQLAlchemyError, TimeoutError as PoolTimeoutError,
)

from mythos_atlas.core.errors import (
    InvalidInputError, StoreError, StoreUnavailableError,
)
from mythos_atlas.infrastructure import database
from mythos_atlas.infrastructure.database import DatabaseSessionManager


class FakeSession:
    def __init__(self, fail_with: BaseException | None = None):
        self.closed = False
        self.fail_with = fail_with

    async def execute(self, *args, **kwargs):
        if self.fail_with is not None:
            raise self.fail_with

    async def close(self):
        self.closed = True


def _manager_with(session: FakeSession) -> DatabaseSessionManager:
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager._session_factory = lambda: session
    return manager


async def test_session_closed_after_success():
    fake = FakeSession()
    async with _manager_with(fake).session() as db:
        assert db is fake
    assert fake.closed


@pytest.mark.parametrize("exc", [
    OperationalError("SELECT 1", {}, Exception("connection refused")),
    PoolTimeoutError("QueuePool limit reached"),
    ConnectionRefusedError("refused"),
])
async def test_unavailable_store_maps_to_store_unavailable(exc):
    fake = FakeSession(fail_with=exc)
    with pytest.raises(StoreUnavailableError) as info:
        async with _manager_with(fake).session("list_deities") as db:
            await db.execute("SELECT 1")
    assert info.value.operation == "list_deities"
    assert fake.closed


@pytest.mark.parametrize("exc", [
    DBAPIError("SELECT bogus", {}, Exception("syntax error")),
    SQLAlchemyError("mapper failure"),
])
async def test_query_failures_map_to_store_error(exc):
    fake = FakeSession(fail_with=exc)
    with pytest.raises(StoreError) as info:
        async with _manager_with(fake).session() as db:
            await db.execute("SELECT bogus")
    assert not isinstance(info.value, StoreUnavailableError)
    assert info.value.code == "STORE_ERROR"
    assert fake.closed


async def test_domain_errors_pass_through_and_release_session():
    fake = FakeSession()
    with pytest.raises(InvalidInputError):
        async with _manager_with(fake).session():
            raise InvalidInputError("bad", "id")
    assert fake.closed


async def test_cancellation_releases_session():
    fake = FakeSession()
    entered = asyncio.Event()

    async def borrow_forever():
        async with _manager_with(fake).session():
            entered.set()
            await asyncio.sleep(3600)

    task = asyncio.create_task(borrow_forever())
    await entered.wait()
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert fake.closed


async def test_health_check_true_against_live_store(db_manager):
    assert await db_manager.health_check() is True


async def test_health_check_false_when_store_down():
    fake = FakeSession(fail_with=OperationalError("SELECT 1", {}, Exception("down")))
    assert await _manager_with(fake).health_check() is False


def test_get_db_manager_requires_init(monkeypatch):
    monkeypatch.setattr(database, "db_manager", None)
    with pytest.raises(RuntimeError):
        database.get_db_manager()
