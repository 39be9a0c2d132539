"""
Todoolittle Backend: Health Check & Settings Tests
====================================================
"""

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from pydantic import ValidationError

from todoolittle import __version__
from todoolittle.config import Settings


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy(self, test_client):
        response = await test_client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["version"] == __version__
        assert body["uptime_seconds"] >= 0

    @pytest.mark.asyncio
    async def test_unhealthy_when_database_unreachable(self, test_client, test_app, caplog):
        with patch.object(test_app.state.context.database, "ping", AsyncMock(return_value=False)):
            response = await test_client.get("/health")

        assert response.status_code == 503
        assert response.json()["database"] == "disconnected"
        assert "database unreachable" in caplog.text


class TestSettings:

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.database_url.startswith("sqlite+aiosqlite:///")
        assert settings.log_level == "INFO"
        assert Path(settings.templates_dir, "greeting.html").is_file()

    def test_log_level_is_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:////srv/todos.sqlite3")
        monkeypatch.setenv("BACKEND_PORT", "8080")
        settings = Settings(_env_file=None)
        assert settings.database_url == "sqlite+aiosqlite:////srv/todos.sqlite3"
        assert settings.backend_port == 8080

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("sqlite+aiosqlite:///./db/todoolittle.sqlite3", Path("./db/todoolittle.sqlite3")),
            ("sqlite+aiosqlite:////var/lib/todos.sqlite3", Path("/var/lib/todos.sqlite3")),
            ("sqlite+aiosqlite://", None),
            ("sqlite+aiosqlite:///:memory:", None),
            ("postgresql+asyncpg://u:p@localhost/todos", None),
        ],
    )
    def test_sqlite_path(self, url, expected):
        assert Settings(_env_file=None, database_url=url).sqlite_path == expected
