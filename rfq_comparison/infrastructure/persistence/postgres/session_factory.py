"""Session factory for PostgreSQL with dependency injection support.

This module provides a session factory that creates database sessions
with transaction management for the repository layer.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

logger = structlog.get_logger(__name__)


class SessionFactory:
    """Factory for creating database sessions with dependency injection support."""

    def __init__(self, engine: AsyncEngine):
        """Initialize the session factory with an async engine.

        Args:
            engine: The SQLAlchemy async engine
        """
        self.engine = engine
        self.async_session = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession]:
        """Get a database session with automatic transaction management.

        The transaction is committed when the block exits normally and
        rolled back if it raises.

        Yields:
            AsyncSession: A database session

        Example:
            async with session_factory.get_session() as session:
                repository = PostgresComparisonRepository(session)
                await repository.update(comparison)
        """
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                logger.debug("session_rolled_back")
                raise
