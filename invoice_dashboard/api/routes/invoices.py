"""Invoice Routes: filtered listing, lookup and create/update/delete.

Invariants:
    - page is validated >= 1 before reaching the engine
    - GET /{id} turns the engine's None into a 404 ResourceNotFoundError
    - Delete failures surface as error responses, never as 204
"""

from fastapi import APIRouter, Depends, Query, status

from invoice_dashboard.api.dependencies import get_invoice_actions, get_query_engine
from invoice_dashboard.core.errors import ResourceNotFoundError
from invoice_dashboard.schemas.invoice import (
    InvoiceCreate, InvoiceDetail, InvoicePageResponse, InvoiceUpdate,
)
from invoice_dashboard.services.invoice_actions import InvoiceActions
from invoice_dashboard.services.query_engine import InvoiceQueryEngine

router = APIRouter(prefix="/api/v1/invoices", tags=["invoices"])


@router.get("", response_model=InvoicePageResponse)
async def list_invoices(
    query: str = "",
    page: int = Query(1, ge=1),
    engine: InvoiceQueryEngine = Depends(get_query_engine),
):
    """One page of invoices matching query, plus the page count."""
    result = await engine.search(query, page)
    pages = await engine.count_pages(query)
    return InvoicePageResponse(rows=result.rows, page=page, total_pages=pages)


@router.get("/pages")
async def count_invoice_pages(
    query: str = "",
    engine: InvoiceQueryEngine = Depends(get_query_engine),
):
    return {"total_pages": await engine.count_pages(query)}


@router.get("/{invoice_id}", response_model=InvoiceDetail)
async def get_invoice(
    invoice_id: str, engine: InvoiceQueryEngine = Depends(get_query_engine),
):
    invoice = await engine.get_invoice_by_id(invoice_id)
    if invoice is None:
        raise ResourceNotFoundError("Invoice", invoice_id)
    return invoice


@router.post(
    "", response_model=InvoiceDetail, status_code=status.HTTP_201_CREATED,
)
async def create_invoice(
    body: InvoiceCreate, actions: InvoiceActions = Depends(get_invoice_actions),
):
    return await actions.create_invoice(body)


@router.put("/{invoice_id}", response_model=InvoiceDetail)
async def update_invoice(
    invoice_id: str,
    body: InvoiceUpdate,
    actions: InvoiceActions = Depends(get_invoice_actions),
):
    return await actions.update_invoice(invoice_id, body)


@router.delete("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invoice(
    invoice_id: str, actions: InvoiceActions = Depends(get_invoice_actions),
):
    await actions.delete_invoice(invoice_id)
