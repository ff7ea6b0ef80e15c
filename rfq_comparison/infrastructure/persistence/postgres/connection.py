"""PostgreSQL database connection management.

This module provides async database connection management using SQLAlchemy 2.0
with connection pooling.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from sqlalchemy.engine.url import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine

from rfq_comparison.infrastructure.persistence.postgres.models import Base
from rfq_comparison.infrastructure.persistence.postgres.session_factory import (
    SessionFactory,
)
from rfq_comparison.shared.config.settings import get_settings

logger = structlog.get_logger(__name__)


class DatabaseConnection:
    """Manages PostgreSQL database connections with async support."""

    def __init__(self, database_url: str | None = None):
        """Initialize database connection manager.

        Args:
            database_url: Optional database URL, defaults to settings
        """
        self.database_url = database_url or get_settings().database.postgres_dsn
        self._engine: AsyncEngine | None = None
        self._session_factory: SessionFactory | None = None

    async def initialize(self) -> None:
        """Initialize the database engine and session factory."""
        if self._engine is not None:
            return

        settings = get_settings()
        engine_kwargs: dict = {"echo": settings.debug_mode}
        if make_url(self.database_url).get_backend_name() == "postgresql":
            db_settings = settings.database
            engine_kwargs.update(
                pool_size=db_settings.db_pool_size,
                max_overflow=db_settings.db_max_overflow,
                pool_timeout=db_settings.db_pool_timeout,
                pool_recycle=db_settings.db_pool_recycle,
                pool_pre_ping=True,
            )

        self._engine = create_async_engine(self.database_url, **engine_kwargs)
        self._session_factory = SessionFactory(self._engine)
        logger.info(
            "database_connection_initialized",
            url=make_url(self.database_url).render_as_string(hide_password=True),
        )

    async def create_tables(self) -> None:
        """Create missing tables for the ORM models."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("database_tables_ensured")

    async def close(self) -> None:
        """Close the database engine."""
        if self._engine:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("database_connection_closed")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession]:
        """Get an async database session.

        Yields:
            AsyncSession: Database session committed on success
        """
        if self._session_factory is None:
            await self.initialize()

        assert self._session_factory is not None  # noqa: S101
        async with self._session_factory.get_session() as session:
            yield session

    @property
    def engine(self) -> AsyncEngine:
        """Get the async engine instance.

        Raises:
            RuntimeError: If not initialized
        """
        if self._engine is None:
            raise RuntimeError("Database connection not initialized")
        return self._engine


# Global connection instance
_db_connection: DatabaseConnection | None = None


async def get_db_connection() -> DatabaseConnection:
    """Get or create the global database connection.

    Returns:
        DatabaseConnection: The initialized connection manager
    """
    global _db_connection
    if _db_connection is None:
        _db_connection = DatabaseConnection()
        await _db_connection.initialize()
    return _db_connection


async def close_db_connection() -> None:
    """Dispose of the global database connection, if any."""
    global _db_connection
    if _db_connection is not None:
        await _db_connection.close()
        _db_connection = None
