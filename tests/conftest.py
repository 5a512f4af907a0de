"""
Global test fixtures for Unread Archive.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Mock Redis session store (fakeredis)
- Form payload factories
- FastAPI app and clients wired to the mocks
"""

import sys
from datetime import datetime, timezone, timedelta
from pathlib import Path
from typing import Generator
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like Motor
    for testing purposes.
    """
    from mongomock_motor import AsyncMongoMockClient
    return AsyncMongoMockClient()


@pytest.fixture
def mock_archive_db(mock_async_mongo_client):
    """Provide a mock archive database."""
    return mock_async_mongo_client["unreadArchive_test"]


# =============================================================================
# Redis Fixtures (fakeredis)
# =============================================================================

@pytest.fixture
def mock_async_redis():
    """Create an async mock Redis client using fakeredis."""
    import fakeredis
    return fakeredis.FakeAsyncRedis(decode_responses=True)


@pytest.fixture
def session_store(mock_async_redis):
    """Redis session store over fakeredis with a one hour TTL."""
    from app.services.session_store import RedisSessionStore
    return RedisSessionStore(mock_async_redis, ttl_seconds=3600)


# =============================================================================
# Form Payload Fixtures
# =============================================================================

@pytest.fixture
def signup_data() -> dict:
    """Sign up form payload."""
    return {
        "name": "Ada Reader",
        "email": "ada@example.com",
        "password": "SecurePassword123!",
    }


@pytest.fixture
def signin_data(signup_data) -> dict:
    """Sign in form payload matching signup_data."""
    return {
        "email": signup_data["email"],
        "password": signup_data["password"],
    }


@pytest.fixture
def article_data() -> dict:
    """Write form payload with only the required fields."""
    return {
        "title": "Notes on Nagomi",
        "content": "Balance is less a destination than a habit. " * 10,
    }


@pytest.fixture
def book_data() -> dict:
    """Admin create-book form payload."""
    return {
        "title": "The Way of Nagomi",
        "description": "Explains a Japanese concept of effortless balance.",
        "image": "https://example.com/nagomi.jpg",
    }


@pytest.fixture
def timestamps() -> list[datetime]:
    """Three distinct creation times, oldest first."""
    base = datetime(2025, 1, 1, tzinfo=timezone.utc)
    return [base + timedelta(days=i) for i in range(3)]


# =============================================================================
# FastAPI App and Client Fixtures
# =============================================================================

@pytest.fixture
def app(mock_archive_db, session_store):
    """
    FastAPI app with MongoDB and the session store replaced by mocks.

    Startup index creation and shutdown cleanup are patched out so the
    lifespan never reaches a real server.
    """
    from app.database.connections import get_archive_db
    from app.dependencies.session import get_session_store
    from app.main import app as fastapi_app

    async def _db():
        return mock_archive_db

    async def _sessions():
        return session_store

    fastapi_app.dependency_overrides[get_archive_db] = _db
    fastapi_app.dependency_overrides[get_session_store] = _sessions

    with patch("app.main.init_database", new=AsyncMock()), \
         patch("app.main.close_connections", new=AsyncMock()):
        yield fastapi_app

    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Use this for synchronous endpoint testing.
    """
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def async_client(app):
    """
    Create an async test client.

    Requests and direct database assertions share one event loop.
    Redirects are not followed so Location headers can be asserted.
    """
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        follow_redirects=False,
    ) as ac:
        yield ac
