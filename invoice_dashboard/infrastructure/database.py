"""Database Session Manager: owns the async engine and its session factory.

Invariants:
    - One manager per process, opened in the FastAPI lifespan and closed at shutdown
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection

Design Decisions:
    - The manager is held on app.state, not a module global; services receive
      its session_factory explicitly
    - expire_on_commit=False: committed rows stay readable after the session closes
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages the async engine, session factory, rollback and health checks."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def open(
        cls, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ) -> "DatabaseSessionManager":
        """Create the pooled engine. SQLite URLs skip pool sizing."""
        options: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            options.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        return cls(create_async_engine(database_url, **options))

    async def close(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self.session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False
