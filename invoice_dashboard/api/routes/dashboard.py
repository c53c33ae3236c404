"""Dashboard Routes: summary cards, revenue chart and latest invoices.

Invariants:
    - Nothing here depends on the invoice search query
"""

from fastapi import APIRouter, Depends

from invoice_dashboard.api.dependencies import get_query_engine
from invoice_dashboard.schemas.dashboard import CardSummary, RevenueRecord
from invoice_dashboard.schemas.invoice import LatestInvoice
from invoice_dashboard.services.query_engine import InvoiceQueryEngine

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


@router.get("/cards", response_model=CardSummary)
async def get_card_summary(engine: InvoiceQueryEngine = Depends(get_query_engine)):
    return await engine.card_summary()


@router.get("/revenue", response_model=list[RevenueRecord])
async def get_revenue(engine: InvoiceQueryEngine = Depends(get_query_engine)):
    return await engine.fetch_revenue()


@router.get("/latest-invoices", response_model=list[LatestInvoice])
async def get_latest_invoices(
    engine: InvoiceQueryEngine = Depends(get_query_engine),
):
    return await engine.fetch_latest_invoices()
