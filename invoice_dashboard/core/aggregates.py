"""Aggregates: pure status totals for dashboard cards and customer summaries.

Invariants:
    - Sums only ever include the two InvoiceStatus values
    - Missing or NULL aggregates resolve to 0, never None
"""

from collections.abc import Iterable
from typing import Protocol

from invoice_dashboard.core.domain_types import InvoiceStatus


class AmountWithStatus(Protocol):
    amount: int
    status: str


def sum_by_status(invoices: Iterable[AmountWithStatus]) -> dict[InvoiceStatus, int]:
    """Sum amounts per status over an already-loaded invoice set."""
    totals = {status: 0 for status in InvoiceStatus}
    for invoice in invoices:
        totals[InvoiceStatus(invoice.status)] += invoice.amount
    return totals


def coalesce_total(value: int | None) -> int:
    return int(value) if value is not None else 0
