"""Invoice Dashboard API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DashboardError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database engine opened on startup and disposed on shutdown via lifespan;
      query engine and invoice actions live on app.state
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from invoice_dashboard.api.error_handlers import register_error_handlers
from invoice_dashboard.api.routes import customers, dashboard, health, invoices
from invoice_dashboard.config import get_settings
from invoice_dashboard.infrastructure.database import DatabaseSessionManager
from invoice_dashboard.infrastructure.observability import setup_logging
from invoice_dashboard.services.invoice_actions import InvoiceActions
from invoice_dashboard.services.query_engine import InvoiceQueryEngine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager.open(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.db_manager = db_manager
    app.state.query_engine = InvoiceQueryEngine(
        db_manager.session_factory, amount_match=settings.amount_match,
    )
    app.state.invoice_actions = InvoiceActions(db_manager.session_factory)
    logger.info("Invoice Dashboard API started")
    yield
    logger.info("Invoice Dashboard API shutting down")
    await db_manager.close()


app = FastAPI(
    title="Invoice Dashboard API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(invoices.router)
app.include_router(customers.router)
app.include_router(dashboard.router)

register_error_handlers(app)
