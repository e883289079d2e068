"""PostgreSQL engine and unit-of-work sessions."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tullamore.config import DatabaseSettings


class Database:
    """Owns the async engine and hands out one session per unit of work."""

    def __init__(self, settings: DatabaseSettings, echo: bool = False) -> None:
        self.engine: AsyncEngine = create_async_engine(
            settings.url,
            echo=echo,
            pool_pre_ping=True,
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
        )
        # Repositories flush explicitly; models returned after commit stay usable
        self.sessionmaker = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Open a session that commits on success and rolls back on error."""
        async with self.sessionmaker() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn(
                    "Rolling back session", error=str(e), error_type=type(e).__name__
                )
                await session.rollback()
                raise

    async def dispose(self) -> None:
        await self.engine.dispose()
