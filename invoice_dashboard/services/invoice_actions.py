"""Invoice Actions: create, update and delete invoices.

Invariants:
    - Amounts arrive in major units and are stored as exact integer cents
    - Unknown invoice or customer ids raise ResourceNotFoundError
    - Store failures raise DataAccessError tagged with the invoice id; a failed
      delete is never reported as success
"""

import logging
from datetime import date
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from invoice_dashboard.core.domain_types import parse_uuid
from invoice_dashboard.core.errors import ResourceNotFoundError
from invoice_dashboard.core.money import from_cents, to_cents
from invoice_dashboard.models.customer import Customer
from invoice_dashboard.models.invoice import Invoice
from invoice_dashboard.schemas.invoice import (
    InvoiceCreate, InvoiceDetail, InvoiceUpdate,
)
from invoice_dashboard.services.store_access import store_call

logger = logging.getLogger(__name__)


def _to_detail(invoice: Invoice) -> InvoiceDetail:
    return InvoiceDetail(
        id=invoice.id,
        customer_id=invoice.customer_id,
        amount=from_cents(invoice.amount),
        status=invoice.status,
    )


async def _require_customer(db: AsyncSession, customer_id: UUID) -> None:
    if await db.get(Customer, customer_id) is None:
        raise ResourceNotFoundError("Customer", str(customer_id))


async def _require_invoice(db: AsyncSession, invoice_id: str | UUID) -> Invoice:
    uid = parse_uuid(invoice_id)
    invoice = await db.get(Invoice, uid) if uid is not None else None
    if invoice is None:
        raise ResourceNotFoundError("Invoice", str(invoice_id))
    return invoice


class InvoiceActions:
    """Mutations behind the create/edit forms and the delete button."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def create_invoice(
        self, payload: InvoiceCreate, issued_on: date | None = None,
    ) -> InvoiceDetail:
        """Create an invoice dated today (or issued_on)."""
        async with store_call(
            self._session_factory, "create_invoice", "Failed to create invoice.",
        ) as db:
            await _require_customer(db, payload.customer_id)
            invoice = Invoice(
                customer_id=payload.customer_id,
                amount=to_cents(payload.amount),
                status=payload.status.value,
                date=issued_on or date.today(),
            )
            db.add(invoice)
            await db.commit()
        logger.info(
            f"Invoice {invoice.id} created",
            extra={"operation": "create_invoice", "invoice_id": str(invoice.id)},
        )
        return _to_detail(invoice)

    async def update_invoice(
        self, invoice_id: str | UUID, payload: InvoiceUpdate,
    ) -> InvoiceDetail:
        async with store_call(
            self._session_factory, "update_invoice", "Failed to update invoice.",
            invoice_id=str(invoice_id),
        ) as db:
            invoice = await _require_invoice(db, invoice_id)
            await _require_customer(db, payload.customer_id)
            invoice.customer_id = payload.customer_id
            invoice.amount = to_cents(payload.amount)
            invoice.status = payload.status.value
            await db.commit()
        logger.info(
            f"Invoice {invoice_id} updated",
            extra={"operation": "update_invoice", "invoice_id": str(invoice_id)},
        )
        return _to_detail(invoice)

    async def delete_invoice(self, invoice_id: str | UUID) -> None:
        async with store_call(
            self._session_factory, "delete_invoice", "Failed to delete invoice.",
            invoice_id=str(invoice_id),
        ) as db:
            invoice = await _require_invoice(db, invoice_id)
            await db.delete(invoice)
            await db.commit()
        logger.info(
            f"Invoice {invoice_id} deleted",
            extra={"operation": "delete_invoice", "invoice_id": str(invoice_id)},
        )
