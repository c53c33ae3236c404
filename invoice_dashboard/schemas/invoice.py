"""Invoice Schemas: search rows, edit-form detail and mutation payloads.

Invariants:
    - InvoiceRow.amount is integer cents; InvoiceDetail.amount is major units
    - InvoiceCreate/InvoiceUpdate amounts are major units, non-negative, at most
      two decimal places and within the 32-bit cents column
    - status is restricted to InvoiceStatus
"""

import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from invoice_dashboard.core.domain_types import MAX_AMOUNT, InvoiceStatus


class InvoiceRow(BaseModel):
    """One invoice joined with its customer's display fields."""
    id: UUID
    amount: int
    date: datetime.date
    status: InvoiceStatus
    name: str
    email: str
    image_url: str


class InvoiceSearchResult(BaseModel):
    rows: list[InvoiceRow]


class InvoicePageResponse(BaseModel):
    """Search page plus page count, as returned by GET /invoices."""
    rows: list[InvoiceRow]
    page: int
    total_pages: int


class InvoiceDetail(BaseModel):
    """Edit-form population: amount converted back to major units."""
    id: UUID
    customer_id: UUID
    amount: float
    status: InvoiceStatus


class InvoiceCreate(BaseModel):
    customer_id: UUID
    amount: Decimal = Field(
        ge=0, le=MAX_AMOUNT, max_digits=10, decimal_places=2, allow_inf_nan=False,
    )
    status: InvoiceStatus


class InvoiceUpdate(InvoiceCreate):
    pass


class LatestInvoice(BaseModel):
    """Dashboard "latest invoices" entry with a formatted amount."""
    id: UUID
    amount: str
    name: str
    email: str
    image_url: str
