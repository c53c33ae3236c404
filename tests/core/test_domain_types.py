"""Tests for domain enums and identifier parsing."""

from uuid import UUID, uuid4

import pytest

from invoice_dashboard.core.domain_types import AmountMatch, InvoiceStatus, parse_uuid


def test_invoice_status_is_closed_to_two_values():
    assert {s.value for s in InvoiceStatus} == {"pending", "paid"}
    with pytest.raises(ValueError):
        InvoiceStatus("overdue")


def test_amount_match_defaults_are_strings():
    assert AmountMatch("text") is AmountMatch.TEXT
    assert AmountMatch("numeric") is AmountMatch.NUMERIC


def test_parse_uuid_accepts_uuid_and_string():
    value = uuid4()
    assert parse_uuid(value) is value
    assert parse_uuid(str(value)) == value


def test_parse_uuid_rejects_garbage():
    assert parse_uuid("unknown-id") is None
    assert parse_uuid("") is None
    assert isinstance(parse_uuid("00000000-0000-0000-0000-000000000000"), UUID)
