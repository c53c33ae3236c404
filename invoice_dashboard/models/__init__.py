"""ORM Models: SQLAlchemy declarative models for customers, invoices and revenue.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so string-based relationship() references
      resolve before any query runs
"""

from invoice_dashboard.models.customer import Customer  # noqa: F401
from invoice_dashboard.models.invoice import Invoice  # noqa: F401
from invoice_dashboard.models.revenue import Revenue  # noqa: F401
