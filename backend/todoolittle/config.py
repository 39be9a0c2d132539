"""
Todoolittle Backend: Application Configuration
================================================

What:  Typed settings loaded from environment variables (or a .env file).
Why:   Type coercion and validation happen once, when the app is built,
       instead of the first time a value is read.
How:   pydantic-settings reads the environment; create_app() receives the
       resulting Settings object and passes it into the AppContext.

There is deliberately no module-level `settings` instance. Call Settings()
where the process starts (the app factory, Alembic's env.py, __main__) and
hand the object down.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import make_url

PACKAGE_ROOT = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development: a SQLite file
    under ./db and uvicorn bound to localhost.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # Format: sqlite+aiosqlite:///<path>  (three slashes + relative path,
    # four slashes for an absolute one)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./db/todoolittle.sqlite3",
        description="Async SQLAlchemy connection URL for the todo store",
    )

    db_pool_pre_ping: bool = Field(default=True)

    # What: Create missing tables on startup (Base.metadata.create_all)
    # Set to false when the schema is managed by `alembic upgrade head`.
    db_create_tables: bool = Field(default=True)

    # ── Views ─────────────────────────────────────────────────────────────
    templates_dir: str = Field(default=str(PACKAGE_ROOT / "templates"))

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="127.0.0.1")
    backend_port: int = Field(default=4567, ge=1024, le=65535)

    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @property
    def sqlite_path(self) -> Optional[Path]:
        """
        What: Filesystem path of the database file, for SQLite URLs only.
        Why:  SQLite will not create missing parent directories itself.
        Returns None for in-memory databases and non-SQLite backends.
        """
        url = make_url(self.database_url)
        if url.get_backend_name() != "sqlite":
            return None
        if not url.database or url.database == ":memory:":
            return None
        return Path(url.database)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DATABASE_URL and database_url both work
    }
