from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import TypeVar

from sqlalchemy import MetaData, event, text
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine as _create_async_engine
from sqlalchemy.orm import DeclarativeBase

from devkit.config import ServiceSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")

UNIQUE_VIOLATION_SQLSTATE = "23505"
SESSION_TIME_ZONE = "Europe/London"
MIGRATION_SESSION_SETTINGS = (
    f"SET TIME ZONE '{SESSION_TIME_ZONE}'",
    "SET lock_timeout = '5s'",
    "SET statement_timeout = '120s'",
)


class Base(DeclarativeBase):
    """Declarative base shared by every ORM table of the directory."""


def normalize_postgres_dsn(dsn: str) -> str:
    """Point plain postgres URLs at the psycopg 3 driver."""
    for prefix in ("postgres://", "postgresql://"):
        if dsn.startswith(prefix):
            return "postgresql+psycopg://" + dsn[len(prefix):]
    return dsn


def create_async_engine(dsn: str, *, time_zone: str = SESSION_TIME_ZONE, pool_recycle: int = 1800) -> AsyncEngine:
    engine = _create_async_engine(
        normalize_postgres_dsn(dsn),
        pool_pre_ping=True,
        pool_recycle=pool_recycle,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _set_session_time_zone(dbapi_connection, _connection_record) -> None:  # type: ignore[no-untyped-def]
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute(f"SET TIME ZONE '{time_zone}'")
        finally:
            cursor.close()

    return engine


def configure_alembic_connection(connection) -> None:
    for statement in MIGRATION_SESSION_SETTINGS:
        connection.execute(text(statement))
    connection.commit()


def is_transient_db_error(exc: Exception) -> bool:
    if isinstance(exc, OperationalError):
        return True
    return isinstance(exc, DBAPIError) and bool(exc.connection_invalidated)


def is_unique_violation(exc: Exception) -> bool:
    """True for a postgres unique-constraint failure (SQLSTATE 23505)."""
    if not isinstance(exc, IntegrityError):
        return False
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    return sqlstate == UNIQUE_VIOLATION_SQLSTATE


async def create_all_tables(engine: AsyncEngine, metadata: MetaData) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)


class AsyncDatabaseManager:
    """Lazily connected engine plus a retrying unit-of-work helper.

    Nothing touches the network until the first ``connect`` or ``session``,
    so stores can be wired at import time without a reachable database.
    """

    def __init__(
        self,
        dsn: str,
        *,
        max_retries: int = 3,
        base_delay_seconds: float = 0.2,
    ) -> None:
        self._dsn = normalize_postgres_dsn(dsn)
        self._max_retries = max_retries
        self._base_delay_seconds = base_delay_seconds
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @classmethod
    def from_settings(cls, settings: ServiceSettings) -> AsyncDatabaseManager:
        if not settings.DATABASE_URL:
            raise RuntimeError("DATABASE_URL is required for the postgres backend")
        return cls(settings.DATABASE_URL)

    @property
    def connected(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("database manager is not connected")
        return self._engine

    async def connect(self) -> None:
        if self._engine is None:
            self._engine = create_async_engine(self._dsn)
            self._session_factory = async_sessionmaker(self._engine, expire_on_commit=False)
        async with self._engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def disconnect(self) -> None:
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        if self._session_factory is None:
            await self.connect()
        assert self._session_factory is not None
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def run_with_session(self, fn: Callable[[AsyncSession], Awaitable[T]]) -> T:
        attempt = 0
        while True:
            try:
                async with self.session() as session:
                    return await fn(session)
            except Exception as exc:
                attempt += 1
                if attempt >= self._max_retries or not is_transient_db_error(exc):
                    raise
                delay = self._base_delay_seconds * (2 ** (attempt - 1))
                logger.warning(
                    "db_transient_error_retry",
                    extra={"component": "db", "attempt": attempt, "delay_seconds": delay},
                )
                await self.disconnect()
                await asyncio.sleep(delay)
