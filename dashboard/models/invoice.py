"""Invoice ORM — one billable amount owed by a customer.

Invariants:
    - id is opaque UUID text generated on insert
    - amount is integer minor units (cents) in a BIGINT column, never a float
    - status is "pending" or "paid"
    - date is set once at creation and never rewritten by updates
"""

import datetime
import uuid

from sqlalchemy import BigInteger, CheckConstraint, Date, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from dashboard.db.base import Base


class Invoice(Base):
    """Invoice row — mutated only through infrastructure/invoice_store.py."""
    __tablename__ = "invoices"
    __table_args__ = (
        CheckConstraint("amount > 0", name="invoices_amount_positive"),
        CheckConstraint("status IN ('pending', 'paid')", name="invoices_status_known"),
    )

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    customer_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("customers.id"), nullable=False, index=True,
    )
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    status: Mapped[str] = mapped_column(String(10), nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
