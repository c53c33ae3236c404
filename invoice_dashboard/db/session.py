"""Async Session Factory: builds the store handle handed to the query engine.

Invariants:
    - expire_on_commit=False so rows stay readable after the session commits
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)


def create_session_factory(
    database_url: str | None = None, engine: AsyncEngine | None = None,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory for a URL or an existing engine."""
    if engine is None:
        if database_url is None:
            raise ValueError("database_url or engine is required")
        engine = create_async_engine(database_url, echo=False)
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
