"""Invoice Filters: the one search predicate shared by page reads and page counts.

Invariants:
    - search() and count_pages() both build their WHERE clause here, so the
      rows on every page and the page count always agree on what matches
    - Matching is case-insensitive; LIKE wildcards in the query match literally
    - An empty query matches every invoice

Amount matching renders the stored cents as text and looks for the query as a
substring (so "50" finds 5000 and 1250). AmountMatch.NUMERIC switches that
branch to equality against the query parsed as an integral number.
"""

from decimal import Decimal, InvalidOperation

from sqlalchemy import ColumnElement, Select, String, cast, or_

from invoice_dashboard.core.domain_types import AmountMatch
from invoice_dashboard.models.customer import Customer
from invoice_dashboard.models.invoice import Invoice


def parse_amount(query: str) -> int | None:
    """Parse the query as an integral number, or None."""
    try:
        value = Decimal(query.strip())
    except InvalidOperation:
        return None
    if not value.is_finite() or value != value.to_integral_value():
        return None
    return int(value)


def _amount_branch(
    query: str, amount_match: AmountMatch,
) -> ColumnElement[bool] | None:
    if amount_match == AmountMatch.NUMERIC:
        amount = parse_amount(query)
        return Invoice.amount == amount if amount is not None else None
    return cast(Invoice.amount, String).icontains(query, autoescape=True)


def invoice_search_predicate(
    query: str, amount_match: AmountMatch = AmountMatch.TEXT,
) -> ColumnElement[bool]:
    """OR of customer name, customer email, amount, date and status matches."""
    branches = [
        Customer.name.icontains(query, autoescape=True),
        Customer.email.icontains(query, autoescape=True),
    ]
    amount = _amount_branch(query, amount_match)
    if amount is not None:
        branches.append(amount)
    branches.extend([
        cast(Invoice.date, String).icontains(query, autoescape=True),
        Invoice.status.icontains(query, autoescape=True),
    ])
    return or_(*branches)


def apply_invoice_search(
    stmt: Select, query: str, amount_match: AmountMatch = AmountMatch.TEXT,
) -> Select:
    """Join the owning customer and restrict to invoices matching query."""
    return stmt.join(Invoice.customer).where(
        invoice_search_predicate(query, amount_match),
    )
