"""Invoice payload validation: status is closed, amounts fit the cents column."""

from decimal import Decimal
from uuid import uuid4

import pytest
from pydantic import ValidationError

from invoice_dashboard.core.domain_types import MAX_AMOUNT, InvoiceStatus
from invoice_dashboard.schemas.invoice import InvoiceCreate, InvoiceUpdate


def test_create_accepts_pending_and_paid():
    for status in ("pending", "paid"):
        body = InvoiceCreate(customer_id=uuid4(), amount=10, status=status)
        assert body.status == InvoiceStatus(status)


def test_create_rejects_other_statuses():
    with pytest.raises(ValidationError):
        InvoiceCreate(customer_id=uuid4(), amount=10, status="draft")


def test_create_rejects_negative_amount():
    with pytest.raises(ValidationError):
        InvoiceCreate(customer_id=uuid4(), amount=-1, status="paid")


def test_create_coerces_numeric_strings():
    body = InvoiceCreate(customer_id=str(uuid4()), amount="12.50", status="paid")
    assert body.amount == 12.5


def test_update_requires_customer_id():
    with pytest.raises(ValidationError):
        InvoiceUpdate(amount=1, status="paid")


@pytest.mark.parametrize("amount", ["inf", "-Infinity", "NaN", float("inf")])
def test_create_rejects_non_finite_amounts(amount):
    with pytest.raises(ValidationError):
        InvoiceCreate(customer_id=uuid4(), amount=amount, status="paid")


def test_create_rejects_amount_beyond_cents_column():
    with pytest.raises(ValidationError):
        InvoiceCreate(customer_id=uuid4(), amount=1e20, status="paid")
    with pytest.raises(ValidationError):
        InvoiceCreate(customer_id=uuid4(), amount=MAX_AMOUNT + Decimal("0.01"), status="paid")


def test_create_accepts_largest_storable_amount():
    body = InvoiceCreate(customer_id=uuid4(), amount=MAX_AMOUNT, status="paid")
    assert body.amount == Decimal("21474836.47")


def test_create_rejects_fractional_cents():
    with pytest.raises(ValidationError):
        InvoiceCreate(customer_id=uuid4(), amount="19.999", status="paid")
