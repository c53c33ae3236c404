"""Invoice actions: create/update/delete with visible failures.

Invariants:
    - Amounts are stored as exact cents
    - Missing invoices and customers raise ResourceNotFoundError
    - A failed delete raises DataAccessError instead of reporting success
"""

from datetime import date
from uuid import uuid4

import pytest
from sqlalchemy import select

from invoice_dashboard.core.errors import DataAccessError, ResourceNotFoundError
from invoice_dashboard.models.invoice import Invoice
from invoice_dashboard.schemas.invoice import InvoiceCreate, InvoiceUpdate
from invoice_dashboard.services.invoice_actions import InvoiceActions


async def _stored(test_db, invoice_id):
    result = await test_db.execute(select(Invoice).where(Invoice.id == invoice_id))
    return result.scalar_one_or_none()


async def test_create_stores_amount_in_cents(invoice_actions, alice, test_db):
    created = await invoice_actions.create_invoice(
        InvoiceCreate(customer_id=alice.id, amount=19.99, status="pending"),
        issued_on=date(2024, 5, 1),
    )
    stored = await _stored(test_db, created.id)
    assert stored.amount == 1999
    assert stored.status == "pending"
    assert stored.date == date(2024, 5, 1)
    assert created.amount == 19.99


async def test_create_defaults_date_to_today(invoice_actions, alice, test_db):
    created = await invoice_actions.create_invoice(
        InvoiceCreate(customer_id=alice.id, amount=1, status="paid"),
    )
    assert (await _stored(test_db, created.id)).date == date.today()


async def test_create_for_unknown_customer_raises_not_found(invoice_actions, alice):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await invoice_actions.create_invoice(
            InvoiceCreate(customer_id=uuid4(), amount=1, status="paid"),
        )
    assert exc_info.value.resource_type == "Customer"


async def test_update_changes_amount_and_status(invoice_actions, query_engine, alice):
    row = (await query_engine.search("alice", 1)).rows[0]
    updated = await invoice_actions.update_invoice(
        row.id, InvoiceUpdate(customer_id=alice.id, amount=75.5, status="pending"),
    )
    assert updated.amount == 75.5
    assert updated.status.value == "pending"
    detail = await query_engine.get_invoice_by_id(row.id)
    assert detail.amount == 75.5


async def test_update_unknown_invoice_raises_not_found(invoice_actions, alice):
    with pytest.raises(ResourceNotFoundError):
        await invoice_actions.update_invoice(
            uuid4(), InvoiceUpdate(customer_id=alice.id, amount=1, status="paid"),
        )


async def test_delete_removes_invoice(invoice_actions, query_engine, alice):
    row = (await query_engine.search("alice", 1)).rows[0]
    await invoice_actions.delete_invoice(row.id)
    assert await query_engine.get_invoice_by_id(row.id) is None
    assert (await query_engine.card_summary()).invoice_count == 0


async def test_delete_unknown_invoice_raises_not_found(invoice_actions):
    with pytest.raises(ResourceNotFoundError):
        await invoice_actions.delete_invoice("not-a-uuid")


async def test_delete_store_failure_is_raised(broken_session_factory):
    actions = InvoiceActions(broken_session_factory)
    invoice_id = uuid4()
    with pytest.raises(DataAccessError) as exc_info:
        await actions.delete_invoice(invoice_id)
    assert exc_info.value.operation == "delete_invoice"
    assert exc_info.value.context.invoice_id == str(invoice_id)


async def test_store_failure_logged_once_with_operation(broken_session_factory, caplog):
    actions = InvoiceActions(broken_session_factory)
    with pytest.raises(DataAccessError):
        await actions.delete_invoice(uuid4())
    errors = [r for r in caplog.records if r.levelname == "ERROR"]
    assert len(errors) == 1
    assert errors[0].operation == "delete_invoice"
