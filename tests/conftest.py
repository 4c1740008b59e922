"""Pytest configuration and fixtures for the users service.

Uses users_service.main:app for HTTP tests. API tests replace the
UserService dependency with a mock; integration tests need a real
Postgres reachable through DATABASE_URL and are skipped otherwise.
"""

import os
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from users_service.api.dependencies import get_query_executor, get_user_service
from users_service.application.dtos.user import UserRecord
from users_service.application.services import UserService
from users_service.core.config import get_settings
from users_service.infrastructure.persistence import (
    Base,
    SqlAlchemyQueryExecutor,
    create_engine,
)
from users_service.main import app


def _make_record(
    user_id: str = "910c5d73-4078-4050-934f-96e05d2e0a34",
    email: str = "user@host.example",
    created_at: datetime | None = None,
) -> UserRecord:
    return UserRecord(
        id=user_id,
        email=email,
        created_at=created_at or datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def make_record():
    """Factory for UserRecord values returned by the mocked service."""
    return _make_record


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI).

    raise_app_exceptions=False so 500 responses from the generic handler
    reach the test instead of the re-raised exception.
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def user_service_mock():
    """Mocked UserService installed as the request dependency."""
    service = AsyncMock(spec=UserService)
    app.dependency_overrides[get_user_service] = lambda: service
    yield service
    app.dependency_overrides.pop(get_user_service, None)


@pytest.fixture
async def db_executor() -> SqlAlchemyQueryExecutor:
    """Query executor on a real Postgres; creates the users table if missing.

    Requires DATABASE_URL. Rows created by tests are left in place (use a
    test database). Also routes the app's requests to this executor.
    """
    if not os.environ.get("DATABASE_URL"):
        pytest.skip("Postgres not configured: set DATABASE_URL to run integration tests")
    get_settings.cache_clear()
    engine = create_engine(get_settings())
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    executor = SqlAlchemyQueryExecutor(engine)
    app.dependency_overrides[get_query_executor] = lambda: executor
    yield executor
    app.dependency_overrides.pop(get_query_executor, None)
    await engine.dispose()
