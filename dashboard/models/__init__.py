"""ORM Models — SQLAlchemy declarative models for invoices, customers and users.

Invariants:
    - All models inherit from Base (db/base.py)
    - Identifiers are opaque strings (UUID text generated on insert)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from dashboard.models.customer import Customer  # noqa: F401
from dashboard.models.invoice import Invoice  # noqa: F401
from dashboard.models.user import User  # noqa: F401
