"""
Todoolittle Backend: Test Configuration (conftest.py)
======================================================

Fixtures:
    ├── mock_db_session: AsyncMock session for service unit tests (no DB)
    ├── test_settings:   Settings pointed at a throwaway SQLite file
    ├── test_app:        create_app(test_settings) with tables created
    └── test_client:     HTTPX AsyncClient talking to test_app over ASGI
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from todoolittle.config import Settings
from todoolittle.main import create_app


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_list(mock_db_session):
            mock_db_session.execute.return_value.scalars.return_value.all.return_value = []
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings isolated from the developer's environment and .env file."""
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'todoolittle-test.sqlite3'}",
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def test_app(test_settings):
    """
    A fresh app on its own SQLite file.

    ASGITransport does not run the lifespan, so tables are created here.
    """
    app = create_app(test_settings)
    database = app.state.context.database
    await database.create_all()
    yield app
    await database.dispose()


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Async HTTP client routed straight into the app (no server).

    Redirects are not followed, so tests can assert on 303 responses.
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
