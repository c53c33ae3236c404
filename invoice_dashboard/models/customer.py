"""Customer ORM: the billed party that owns invoices.

Invariants:
    - id is UUID primary key
    - name and email are non-nullable
    - deleting a customer cascades to its invoices
"""

import uuid

from sqlalchemy import String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from invoice_dashboard.db.base import Base


class Customer(Base):
    """Customer entity: name, contact email and avatar reference."""
    __tablename__ = "customers"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str] = mapped_column(String(500), nullable=False, default="")

    # Relationships
    invoices: Mapped[list["Invoice"]] = relationship(
        "Invoice", back_populates="customer",
        cascade="all, delete-orphan",
    )
