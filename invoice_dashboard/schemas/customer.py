"""Customer Schemas: selection list entries and the searchable summary table."""

from uuid import UUID

from pydantic import BaseModel


class CustomerField(BaseModel):
    id: UUID
    name: str


class CustomerSummary(BaseModel):
    """Customer with per-status invoice totals (cents)."""
    id: UUID
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: int
    total_paid: int
