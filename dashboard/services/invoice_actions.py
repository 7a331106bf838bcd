"""Invoice Actions — validate → normalize → persist → revalidate → redirect.

Invariants:
    - Validation failure returns ErrorState and performs NO store write
    - Create/update: once validation passes, the outcome is Redirect(invoices_path)
      unless the store raises (strict persistence only)
    - Delete: no validation, no redirect; returns Revalidated(invoices_path)
    - revalidate() runs after the write and before the outcome is returned
    - Steps are strictly sequential; one awaited store round trip per action

Design Decisions:
    - Collaborators injected per request (store, revalidator, clock): the
      orchestrator holds no state between invocations
    - `today` injectable so creation dates are testable without freezing time
"""

import logging
from collections.abc import Callable, Mapping
from datetime import date

from dashboard.core.domain_types import InvoiceId
from dashboard.core.money import to_minor_units
from dashboard.core.outcomes import ActionOutcome, ErrorState, Redirect, Revalidated
from dashboard.core.repository_protocols import InvoiceWriter, PathRevalidator
from dashboard.core.validate_invoice import ValidationFailure, validate_invoice_form

logger = logging.getLogger(__name__)

DEFAULT_INVOICES_PATH = "/dashboard/invoices"


def missing_fields_message(verb: str) -> str:
    return f"Missing Fields. Failed to {verb} invoice"


class InvoiceActions:
    """Per-request orchestrator for invoice mutations."""

    def __init__(
        self,
        store: InvoiceWriter,
        revalidator: PathRevalidator,
        invoices_path: str = DEFAULT_INVOICES_PATH,
        today: Callable[[], date] = date.today,
    ):
        self.store = store
        self.revalidator = revalidator
        self.invoices_path = invoices_path
        self.today = today

    async def create(self, form: Mapping[str, object]) -> ActionOutcome:
        """Create an invoice dated today from a raw form."""
        validated = validate_invoice_form(form)
        if isinstance(validated, ValidationFailure):
            return self._rejected(validated, "create")

        await self.store.create(
            validated.customer_id,
            to_minor_units(validated.amount),
            validated.status,
            self.today(),
        )
        return self._accepted()

    async def update(
        self, invoice_id: InvoiceId, form: Mapping[str, object],
    ) -> ActionOutcome:
        """Replace customer, amount and status of an existing invoice."""
        validated = validate_invoice_form(form)
        if isinstance(validated, ValidationFailure):
            return self._rejected(validated, "update", invoice_id)

        await self.store.update(
            invoice_id,
            validated.customer_id,
            to_minor_units(validated.amount),
            validated.status,
        )
        return self._accepted()

    async def delete(self, invoice_id: InvoiceId) -> Revalidated:
        """Delete an invoice. Caller is assumed authorized for `invoice_id`."""
        await self.store.delete(invoice_id)
        self.revalidator.revalidate(self.invoices_path)
        return Revalidated(self.invoices_path)

    def _accepted(self) -> Redirect:
        self.revalidator.revalidate(self.invoices_path)
        return Redirect(self.invoices_path)

    def _rejected(
        self, failure: ValidationFailure, verb: str, invoice_id: str | None = None,
    ) -> ErrorState:
        errors = failure.field_errors
        logger.info(
            f"Invoice {verb} rejected by validation",
            extra={"invoice_id": invoice_id, "fields": sorted(errors)},
        )
        return ErrorState(message=missing_fields_message(verb), errors=errors)
