"""Invoice Query Engine: filtered, paginated invoice reads and dashboard aggregates.

Invariants:
    - Read-only: no method adds, updates or deletes rows
    - search() and count_pages() share invoice_filters.apply_invoice_search
    - card_summary() reads every total from one SELECT inside one transaction
    - get_invoice_by_id() reports not-found as None, never as an exception
    - Store failures raise DataAccessError; no retries, no partial results

Design Decisions:
    - The session factory is injected at construction; the engine holds no
      connection of its own and opens one session per operation
"""

from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from invoice_dashboard.core.aggregates import coalesce_total, sum_by_status
from invoice_dashboard.core.domain_types import (
    ITEMS_PER_PAGE, LATEST_INVOICES_LIMIT, AmountMatch, InvoiceStatus, parse_uuid,
)
from invoice_dashboard.core.money import format_currency, from_cents
from invoice_dashboard.core.pagination import page_offset, total_pages
from invoice_dashboard.models.customer import Customer
from invoice_dashboard.models.invoice import Invoice
from invoice_dashboard.models.revenue import Revenue
from invoice_dashboard.schemas.customer import CustomerField, CustomerSummary
from invoice_dashboard.schemas.dashboard import CardSummary, RevenueRecord
from invoice_dashboard.schemas.invoice import (
    InvoiceDetail, InvoiceRow, InvoiceSearchResult, LatestInvoice,
)
from invoice_dashboard.services.invoice_filters import apply_invoice_search
from invoice_dashboard.services.store_access import store_call


def _status_total(status: InvoiceStatus):
    return (
        select(func.sum(Invoice.amount))
        .where(Invoice.status == status.value)
        .scalar_subquery()
    )


class InvoiceQueryEngine:
    """Read queries behind the invoices, customers and dashboard pages."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        amount_match: AmountMatch = AmountMatch.TEXT,
    ):
        self._session_factory = session_factory
        self.amount_match = amount_match

    async def search(self, query: str, page: int) -> InvoiceSearchResult:
        """Return one page (at most ITEMS_PER_PAGE rows) of matching invoices, newest first."""
        stmt = apply_invoice_search(
            select(
                Invoice.id, Invoice.amount, Invoice.date, Invoice.status,
                Customer.name, Customer.email, Customer.image_url,
            ).select_from(Invoice),
            query,
            self.amount_match,
        )
        stmt = (
            stmt.order_by(Invoice.date.desc(), Invoice.id)
            .offset(page_offset(page))
            .limit(ITEMS_PER_PAGE)
        )
        async with store_call(
            self._session_factory, "search", "Failed to fetch invoices.",
        ) as db:
            result = await db.execute(stmt)
            rows = [InvoiceRow.model_validate(row._asdict()) for row in result]
        return InvoiceSearchResult(rows=rows)

    async def count_pages(self, query: str) -> int:
        """Number of pages search() can return for query; at least 1."""
        stmt = apply_invoice_search(
            select(func.count(Invoice.id)).select_from(Invoice),
            query,
            self.amount_match,
        )
        async with store_call(
            self._session_factory, "count_pages",
            "Failed to fetch total number of invoices.",
        ) as db:
            count = (await db.execute(stmt)).scalar_one()
        return total_pages(count)

    async def card_summary(self) -> CardSummary:
        """Invoice/customer counts and paid/pending sums from a single snapshot."""
        stmt = select(
            select(func.count(Invoice.id)).scalar_subquery().label("invoice_count"),
            select(func.count(Customer.id)).scalar_subquery().label("customer_count"),
            _status_total(InvoiceStatus.PAID).label("total_paid"),
            _status_total(InvoiceStatus.PENDING).label("total_pending"),
        )
        async with store_call(
            self._session_factory, "card_summary", "Failed to fetch card data.",
        ) as db:
            async with db.begin():
                row = (await db.execute(stmt)).one()
        return CardSummary(
            invoice_count=coalesce_total(row.invoice_count),
            customer_count=coalesce_total(row.customer_count),
            total_paid=coalesce_total(row.total_paid),
            total_pending=coalesce_total(row.total_pending),
        )

    async def get_invoice_by_id(self, invoice_id: str | UUID) -> InvoiceDetail | None:
        """Invoice for the edit form with amount in major units, or None."""
        uid = parse_uuid(invoice_id)
        if uid is None:
            return None
        async with store_call(
            self._session_factory, "get_invoice_by_id", "Failed to fetch invoice.",
            invoice_id=str(uid),
        ) as db:
            invoice = await db.get(Invoice, uid)
        if invoice is None:
            return None
        return InvoiceDetail(
            id=invoice.id,
            customer_id=invoice.customer_id,
            amount=from_cents(invoice.amount),
            status=invoice.status,
        )

    async def list_customers(self) -> list[CustomerField]:
        stmt = select(Customer.id, Customer.name).order_by(Customer.name.asc())
        async with store_call(
            self._session_factory, "list_customers", "Failed to fetch all customers.",
        ) as db:
            result = await db.execute(stmt)
            return [CustomerField(id=row.id, name=row.name) for row in result]

    async def search_customers(self, query: str) -> list[CustomerSummary]:
        """Customers whose name or email contains query, with invoice totals."""
        stmt = (
            select(Customer)
            .options(selectinload(Customer.invoices))
            .where(or_(
                Customer.name.icontains(query, autoescape=True),
                Customer.email.icontains(query, autoescape=True),
            ))
            .order_by(Customer.name.asc())
        )
        async with store_call(
            self._session_factory, "search_customers",
            "Failed to fetch customer table.",
        ) as db:
            customers = (await db.execute(stmt)).scalars().all()

        summaries = []
        for customer in customers:
            totals = sum_by_status(customer.invoices)
            summaries.append(CustomerSummary(
                id=customer.id,
                name=customer.name,
                email=customer.email,
                image_url=customer.image_url,
                total_invoices=len(customer.invoices),
                total_pending=totals[InvoiceStatus.PENDING],
                total_paid=totals[InvoiceStatus.PAID],
            ))
        return summaries

    async def fetch_revenue(self) -> list[RevenueRecord]:
        async with store_call(
            self._session_factory, "fetch_revenue", "Failed to fetch revenue data.",
        ) as db:
            result = await db.execute(select(Revenue))
            return [
                RevenueRecord(month=r.month, revenue=r.revenue)
                for r in result.scalars()
            ]

    async def fetch_latest_invoices(self) -> list[LatestInvoice]:
        """The most recent invoices with amounts formatted for display."""
        stmt = (
            select(
                Invoice.id, Invoice.amount,
                Customer.name, Customer.email, Customer.image_url,
            )
            .select_from(Invoice)
            .join(Invoice.customer)
            .order_by(Invoice.date.desc(), Invoice.id)
            .limit(LATEST_INVOICES_LIMIT)
        )
        async with store_call(
            self._session_factory, "fetch_latest_invoices",
            "Failed to fetch the latest invoices.",
        ) as db:
            result = await db.execute(stmt)
            return [
                LatestInvoice(
                    id=row.id,
                    amount=format_currency(row.amount),
                    name=row.name,
                    email=row.email,
                    image_url=row.image_url,
                )
                for row in result
            ]
