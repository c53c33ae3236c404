"""Pagination: offset and page-count arithmetic for fixed-size pages.

Invariants:
    - Pages are 1-based; anything below 1 is treated as page 1
    - total_pages is never below 1, even for zero matches
"""

import math

from invoice_dashboard.core.domain_types import ITEMS_PER_PAGE


def normalize_page(page: int) -> int:
    return max(page, 1)


def page_offset(page: int, page_size: int = ITEMS_PER_PAGE) -> int:
    """Number of matching rows skipped before the given page."""
    return (normalize_page(page) - 1) * page_size


def total_pages(count: int, page_size: int = ITEMS_PER_PAGE) -> int:
    """ceil(count / page_size), floored at one page."""
    return max(1, math.ceil(count / page_size))
