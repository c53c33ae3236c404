"""Domain Types: enums, fixed constants and identifier parsing for the dashboard.

Invariants:
    - InvoiceStatus is closed: exactly "pending" and "paid"
    - ITEMS_PER_PAGE is fixed at 6 and shared by every paginated read
    - All valid states encoded as Enums: no raw string matching
"""

from decimal import Decimal
from enum import Enum
from uuid import UUID


# ─── Constants ───────────────────────────────────────────────────

ITEMS_PER_PAGE = 6
LATEST_INVOICES_LIMIT = 5

# amount is a 32-bit INTEGER column of cents
MAX_AMOUNT_CENTS = 2_147_483_647
MAX_AMOUNT = Decimal(MAX_AMOUNT_CENTS) / 100


# ─── Enums ───────────────────────────────────────────────────────

class InvoiceStatus(str, Enum):
    """Invoice payment states: maps to DB `status` column."""
    PENDING = "pending"
    PAID = "paid"


class AmountMatch(str, Enum):
    """How the free-text query is compared against invoice amounts.

    TEXT compares the amount's decimal rendering as a substring, so "50"
    matches 5000 and 1250. NUMERIC requires the query to parse as an
    integral number and compares it for equality.
    """
    TEXT = "text"
    NUMERIC = "numeric"


def parse_uuid(value: str | UUID) -> UUID | None:
    """Parse an identifier, returning None for anything that is not a UUID."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None
