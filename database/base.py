"""Database base configuration and session management."""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

IN_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


def utcnow() -> datetime:
    """Naive UTC timestamp, as stored in SQLite DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _enable_wal(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()


class Database:
    """
    Owns the async engine and session factory for one SQLite store.

    Lifecycle is explicit: construct on startup, ``await init()`` to create
    the schema, ``await close()`` on shutdown.
    """

    def __init__(self, url: str, echo: bool = False, **engine_kwargs):
        self.url = url
        self.engine = create_async_engine(url, echo=echo, **engine_kwargs)
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        if ":memory:" not in url:
            event.listen(self.engine.sync_engine, "connect", _enable_wal)

    @classmethod
    def from_settings(cls, settings) -> "Database":
        """Create database handle from application settings."""
        return cls(settings.database_url, echo=settings.debug)

    @classmethod
    def in_memory(cls) -> "Database":
        """
        Isolated in-memory store for tests.

        StaticPool keeps a single connection so every session sees the same
        in-memory database.
        """
        return cls(
            IN_MEMORY_URL,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

    async def init(self) -> None:
        """Create all tables and indexes if they don't exist."""
        # Model modules must be imported so their tables are registered
        import database.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ready at %s", self.url)

    async def close(self) -> None:
        """Close database connections."""
        await self.engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Transactional session: commit on success, rollback on error."""
        async with self.session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
