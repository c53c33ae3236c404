"""Invoice ORM: an amount billed to one customer on an issue date.

Invariants:
    - Always belongs to a Customer (customer_id FK, non-nullable)
    - amount is integer cents, never negative
    - status is one of: pending, paid
"""

import datetime
import uuid

from sqlalchemy import CheckConstraint, Date, ForeignKey, Integer, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from invoice_dashboard.db.base import Base


class Invoice(Base):
    """Invoice entity: amount in cents with a closed payment status."""
    __tablename__ = "invoices"
    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_invoices_amount_non_negative"),
        CheckConstraint(
            "status IN ('pending', 'paid')", name="ck_invoices_status",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    customer_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(10), nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)

    # Relationships
    customer: Mapped["Customer"] = relationship(
        "Customer", back_populates="invoices",
    )
