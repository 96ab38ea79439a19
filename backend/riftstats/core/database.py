"""Database connection and session management using SQLAlchemy with async support."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    create_async_engine,
    async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from .config import get_global_settings


class DatabaseManager:
    """Database connection and session manager."""

    def __init__(self, database_url: Optional[str] = None):
        """Initialize database manager with async engine.

        :param database_url: Async SQLAlchemy URL (uses settings if None)
        """
        settings = get_global_settings()
        self.database_url = database_url or settings.database_url

        engine_kwargs: dict = {"echo": settings.debug}
        if self.database_url.startswith("sqlite"):
            # A single shared connection keeps in-memory databases alive
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}

        self.engine = create_async_engine(self.database_url, **engine_kwargs)

        # Create async session factory
        self.async_session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get a database session with proper cleanup."""
        async with self.async_session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_tables(self) -> None:
        """Create all database tables."""
        from .models import Base

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        """Close database connections."""
        await self.engine.dispose()


# Global database manager instance
db_manager = DatabaseManager()


# Dependency for FastAPI routes
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for getting a database session."""
    async with db_manager.get_session() as session:
        yield session


def dialect_insert(session: AsyncSession, model):
    """Build an INSERT that supports ``ON CONFLICT`` for the session's dialect.

    PostgreSQL in production, SQLite for local runs and tests.
    """
    if session.get_bind().dialect.name == "sqlite":
        return sqlite.insert(model)
    return postgresql.insert(model)
