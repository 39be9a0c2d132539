"""
Todoolittle Backend: Database Session Management
==================================================

What:  Async SQLAlchemy engine and session factory, wrapped in a Database
       object owned by the AppContext.
How:   One engine per application instance; one AsyncSession per request,
       committed on success and rolled back on error.
Who:   Built by AppContext.from_settings(); sessions are handed to route
       handlers through the get_db_session dependency.

Storage:
    The store is a single SQLite file accessed through aiosqlite. SQLite
    serializes writers with a file lock, so a single INSERT is atomic and
    every SELECT sees a consistent snapshot. No explicit isolation level is
    configured.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from todoolittle.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares one metadata object between the models, Database.create_all()
    and Alembic's autogenerate.
    """
    pass


class Database:
    """
    Owns the engine and session factory for one application instance.

    Tests build one per temporary SQLite file.
    """

    def __init__(self, url: str, *, pool_pre_ping: bool = True, echo: bool = False):
        self.url = url
        self.engine: AsyncEngine = create_async_engine(
            url,
            pool_pre_ping=pool_pre_ping,
            echo=echo,
        )
        # expire_on_commit=False: ORM attributes stay readable after commit,
        # outside the session that loaded them
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.database_url,
            pool_pre_ping=settings.db_pool_pre_ping,
            echo=settings.log_level == "DEBUG",
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Yield a session; commit if the block succeeds, roll back if it raises.

        Exceptions are re-raised after rollback so the global handlers can
        answer with the appropriate status code.
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create any missing tables registered on Base.metadata."""
        # Models must be imported so they register with Base.metadata
        from todoolittle.models import todo  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ensured at %s", self.engine.url.render_as_string(hide_password=True))

    async def ping(self) -> bool:
        """Run SELECT 1; return False instead of raising when the store is unreachable."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.warning("Database ping failed: %s", str(e))
            return False
        return True

    async def dispose(self) -> None:
        """Close every pooled connection. Called on application shutdown."""
        await self.engine.dispose()
