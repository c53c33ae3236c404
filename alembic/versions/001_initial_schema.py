"""Initial schema: customers, invoices, revenue.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "customers",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("image_url", sa.String(500), nullable=False, server_default=""),
    )
    op.create_index("ix_customers_name", "customers", ["name"])

    op.create_table(
        "invoices",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "customer_id", UUID(as_uuid=True),
            sa.ForeignKey("customers.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("amount", sa.Integer, nullable=False),
        sa.Column("status", sa.String(10), nullable=False),
        sa.Column("date", sa.Date, nullable=False),
        sa.CheckConstraint("amount >= 0", name="ck_invoices_amount_non_negative"),
        sa.CheckConstraint("status IN ('pending', 'paid')", name="ck_invoices_status"),
    )
    op.create_index("ix_invoices_customer_id", "invoices", ["customer_id"])
    op.create_index("ix_invoices_date", "invoices", ["date"])

    op.create_table(
        "revenue",
        sa.Column("month", sa.String(4), primary_key=True),
        sa.Column("revenue", sa.Integer, nullable=False),
    )


def downgrade() -> None:
    op.drop_table("revenue")
    op.drop_index("ix_invoices_date", table_name="invoices")
    op.drop_index("ix_invoices_customer_id", table_name="invoices")
    op.drop_table("invoices")
    op.drop_index("ix_customers_name", table_name="customers")
    op.drop_table("customers")
