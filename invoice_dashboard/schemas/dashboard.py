"""Dashboard Schemas: summary cards and the revenue series."""

from pydantic import BaseModel


class CardSummary(BaseModel):
    """Unfiltered totals drawn from one snapshot. Sums are cents."""
    invoice_count: int
    customer_count: int
    total_paid: int
    total_pending: int


class RevenueRecord(BaseModel):
    month: str
    revenue: int
