"""Invoice Form Validation — raw form mapping → ValidatedInvoice | ValidationFailure.

Invariants:
    - PURE: no IO, no async, no DB
    - Failure lists ALL field issues at once, never just the first
    - Issues are grouped by form field name (customerId, amount, status)

Design Decisions:
    - Return a failure value instead of raising: a rejected form is an expected
      outcome, not an exceptional one
    - Only the three known fields are read; any other form key is ignored
"""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal

from pydantic import ValidationError

from dashboard.core.domain_types import CustomerId, FieldErrorKind, InvoiceStatus
from dashboard.schemas.invoice import InvoiceForm

INVOICE_FIELDS = ("customerId", "amount", "status")


@dataclass(frozen=True)
class ValidatedInvoice:
    """Typed, normalized invoice fields (amount still in major units)."""
    customer_id: CustomerId
    amount: Decimal
    status: InvoiceStatus


@dataclass(frozen=True)
class FieldIssue:
    """One rejected field."""
    field: str
    kind: FieldErrorKind
    message: str


@dataclass(frozen=True)
class ValidationFailure:
    """Every issue found in one form submission."""
    issues: tuple[FieldIssue, ...]

    @property
    def field_errors(self) -> dict[str, list[str]]:
        """Messages grouped by field, in the order they were found."""
        grouped: dict[str, list[str]] = {}
        for issue in self.issues:
            grouped.setdefault(issue.field, []).append(issue.message)
        return grouped


def validate_invoice_form(
    form: Mapping[str, object],
) -> ValidatedInvoice | ValidationFailure:
    """Validate the invoice fields of a raw form submission."""
    raw = {name: form.get(name) for name in INVOICE_FIELDS}
    try:
        parsed = InvoiceForm.model_validate(raw)
    except ValidationError as exc:
        return ValidationFailure(
            issues=tuple(_to_issue(err) for err in exc.errors()),
        )
    return ValidatedInvoice(
        customer_id=CustomerId(parsed.customer_id),
        amount=parsed.amount,
        status=parsed.status,
    )


def _to_issue(err: dict) -> FieldIssue:
    """Map one pydantic error dict to a FieldIssue."""
    loc = err.get("loc") or ("form",)
    try:
        kind = FieldErrorKind(err.get("type"))
    except ValueError:
        kind = FieldErrorKind.INVALID_TYPE
    return FieldIssue(field=str(loc[0]), kind=kind, message=err["msg"])
