"""Database connection and session management."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from finyx.core.config import settings


def to_async_url(url: str) -> str:
    """Convert postgres:// and postgresql:// URLs to postgresql+asyncpg://."""
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


class DatabaseSessionManager:
    """
    Manages database connections and sessions.

    Uses SQLAlchemy async engine for non-blocking database operations.
    One manager is built per store; nothing here is module-global.
    """

    def __init__(self):
        self._engine: AsyncEngine | None = None
        self._sessionmaker = None

    @property
    def initialized(self) -> bool:
        return self._sessionmaker is not None

    def init(self, database_url: str | None = None, **engine_options) -> None:
        """
        Initialize the database engine and session factory.

        Args:
            database_url: Optional override for the database URL
            engine_options: Extra keyword arguments for create_async_engine
        """
        url = to_async_url(database_url or settings.database_url)

        if url.startswith("postgresql+asyncpg://"):
            engine_options.setdefault("pool_size", settings.db_pool_size)
            engine_options.setdefault("max_overflow", settings.db_max_overflow)

        self._engine = create_async_engine(
            url,
            echo=settings.debug,
            pool_pre_ping=True,
            **engine_options,
        )
        self.bind(self._engine)

    def bind(self, engine: AsyncEngine) -> None:
        """Use an existing engine, e.g. one created by a test fixture."""
        self._engine = engine
        self._sessionmaker = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )

    async def close(self):
        """Close the database engine."""
        if self._engine:
            await self._engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Provide a transactional scope around operations.

        Yields:
            An async database session
        """
        if self._sessionmaker is None:
            raise RuntimeError("Database not initialized. Call init() first.")

        session = self._sessionmaker()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
