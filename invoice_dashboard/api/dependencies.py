"""Route Dependencies: hand the lifespan-owned services to request handlers.

Invariants:
    - Services live on app.state; nothing here constructs an engine
    - Tests replace these through app.dependency_overrides
"""

from fastapi import Request

from invoice_dashboard.services.invoice_actions import InvoiceActions
from invoice_dashboard.services.query_engine import InvoiceQueryEngine


def _state_attr(request: Request, name: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        raise RuntimeError("Database not initialized")
    return value


def get_query_engine(request: Request) -> InvoiceQueryEngine:
    return _state_attr(request, "query_engine")


def get_invoice_actions(request: Request) -> InvoiceActions:
    return _state_attr(request, "invoice_actions")
