"""Money: conversions between stored cents and major currency units.

Invariants:
    - Stored amounts are non-negative integers of cents
    - to_cents(x) / 100 == x for any x with at most two decimal places
"""

from decimal import ROUND_HALF_UP, Decimal


def to_cents(amount: float | Decimal | int) -> int:
    """Convert a major-unit amount to integer cents, rounding half up."""
    cents = (Decimal(str(amount)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(cents)


def from_cents(cents: int) -> float:
    return cents / 100


def format_currency(cents: int, symbol: str = "$") -> str:
    """Render cents as a display string, e.g. 123456 -> "$1,234.56"."""
    value = Decimal(cents) / 100
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"
