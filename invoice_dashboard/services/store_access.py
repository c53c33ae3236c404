"""Store Access: the single boundary where SQLAlchemy failures become DataAccessError.

Invariants:
    - A failure is logged exactly once, with the operation name and any extra context
    - The raw SQLAlchemy exception is chained, never re-raised to callers
    - Domain errors raised inside the block (e.g. ResourceNotFoundError) pass through untouched
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from invoice_dashboard.core.errors import DataAccessError, ErrorContext

logger = logging.getLogger(__name__)


@asynccontextmanager
async def store_call(
    session_factory: async_sessionmaker[AsyncSession],
    operation: str,
    failure_message: str,
    invoice_id: str | None = None,
) -> AsyncIterator[AsyncSession]:
    """Open a session for one operation and normalize store failures."""
    try:
        async with session_factory() as db:
            yield db
    except SQLAlchemyError as e:
        logger.error(
            f"Database error during {operation}: {e}",
            extra={"operation": operation, "invoice_id": invoice_id},
        )
        raise DataAccessError(
            failure_message, operation, ErrorContext(invoice_id=invoice_id),
        ) from e
