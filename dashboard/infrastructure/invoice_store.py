"""Invoice Store — parameterized insert/update/delete on the invoices table.

Invariants:
    - Every value travels as a bound parameter (SQLAlchemy Core constructs, never f-strings)
    - Each write is one statement committed on its own; no multi-statement transaction
    - update never touches `date`; update/delete matching zero rows is a silent no-op
    - best_effort=True: write errors are rolled back, logged and swallowed
    - best_effort=False: write errors are rolled back, logged and raised as PersistenceError
    - "Write error" covers SQLAlchemyError and raw OSError from the driver
      (asyncpg connect failures such as ConnectionRefusedError are not wrapped)

Design Decisions:
    - The failure policy lives here, at the store boundary, so the orchestrator
      sees either "done" or PersistenceError and nothing driver-specific
"""

import logging
from datetime import date

from sqlalchemy import delete, insert, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from dashboard.core.domain_types import (
    AmountMinorUnits, CustomerId, InvoiceId, InvoiceStatus,
)
from dashboard.core.errors import ErrorContext, PersistenceError
from dashboard.infrastructure.database import STORE_ERRORS
from dashboard.models.invoice import Invoice

logger = logging.getLogger(__name__)


class InvoiceStore:
    """Invoice mutations against one request-scoped session."""

    def __init__(self, db: AsyncSession, best_effort: bool = True):
        self.db = db
        self.best_effort = best_effort

    async def create(
        self, customer_id: CustomerId, amount: AmountMinorUnits,
        status: InvoiceStatus, invoice_date: date,
    ) -> None:
        stmt = insert(Invoice).values(
            customer_id=customer_id, amount=amount,
            status=status.value, date=invoice_date,
        )
        await self._write("create", stmt)

    async def update(
        self, invoice_id: InvoiceId, customer_id: CustomerId,
        amount: AmountMinorUnits, status: InvoiceStatus,
    ) -> None:
        stmt = (
            update(Invoice)
            .where(Invoice.id == invoice_id)
            .values(customer_id=customer_id, amount=amount, status=status.value)
        )
        rows = await self._write("update", stmt, invoice_id)
        if rows == 0:
            logger.warning(
                f"Update matched no invoice {invoice_id}",
                extra={"invoice_id": invoice_id, "rows": 0},
            )

    async def delete(self, invoice_id: InvoiceId) -> None:
        stmt = delete(Invoice).where(Invoice.id == invoice_id)
        rows = await self._write("delete", stmt, invoice_id)
        if rows == 0:
            logger.info(
                f"Delete matched no invoice {invoice_id}",
                extra={"invoice_id": invoice_id, "rows": 0},
            )

    async def _write(
        self, operation: str, stmt: Executable, invoice_id: str | None = None,
    ) -> int:
        """Execute + commit one statement. Returns affected rows (0 when swallowed)."""
        try:
            result = await self.db.execute(stmt)
            await self.db.commit()
        except STORE_ERRORS as e:
            await self._rollback(operation)
            logger.error(
                f"Error {operation} invoice: {e}",
                extra={"invoice_id": invoice_id, "operation": operation},
            )
            if not self.best_effort:
                raise PersistenceError(
                    operation,
                    ErrorContext(invoice_id=invoice_id, operation=operation),
                ) from e
            return 0
        return result.rowcount

    async def _rollback(self, operation: str) -> None:
        # The connection may already be gone; the write error is what gets reported.
        try:
            await self.db.rollback()
        except STORE_ERRORS as e:
            logger.warning(
                f"Rollback after failed {operation} also failed: {e}",
                extra={"operation": operation},
            )
