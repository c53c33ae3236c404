"""Customer Routes: selection list and the searchable customer table."""

from fastapi import APIRouter, Depends

from invoice_dashboard.api.dependencies import get_query_engine
from invoice_dashboard.schemas.customer import CustomerField, CustomerSummary
from invoice_dashboard.services.query_engine import InvoiceQueryEngine

router = APIRouter(prefix="/api/v1/customers", tags=["customers"])


@router.get("", response_model=list[CustomerField])
async def list_customers(engine: InvoiceQueryEngine = Depends(get_query_engine)):
    return await engine.list_customers()


@router.get("/summary", response_model=list[CustomerSummary])
async def search_customers(
    query: str = "", engine: InvoiceQueryEngine = Depends(get_query_engine),
):
    """Customers matching query by name or email, with invoice totals."""
    return await engine.search_customers(query)
