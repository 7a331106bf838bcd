"""Invoice Form Schema — coerces and constrains raw invoice form fields.

Invariants:
    - customerId: non-empty string, stripped
    - amount: plain decimal notation (no "_", "NaN", "Infinity"), rounded half-up
      to cents, strictly > 0 after rounding, at most MAX_AMOUNT
    - status: exactly "pending" or "paid"
    - Every field is checked even when another fails (pydantic collects all errors)

Design Decisions:
    - mode="before" validators own the whole coercion so each field emits exactly
      one message, typed via PydanticCustomError ("invalid_type" / "constraint_violation")
    - Missing or blank amount coerces to 0, so it reports the > $0 constraint
      rather than a type error
"""

import re
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from dashboard.core.domain_types import FieldErrorKind, InvoiceStatus
from dashboard.core.money import MAX_AMOUNT, round_to_minor_unit

CUSTOMER_REQUIRED = "Please select a customer"
AMOUNT_NOT_A_NUMBER = "Amount must be a number"
AMOUNT_NOT_POSITIVE = "Amount must be greater than $0"
STATUS_REQUIRED = "Please select a invoice status"
AMOUNT_TOO_LARGE = "Amount is too large"

# Plain decimal notation only; Decimal() alone would also take "1_000" and "NaN".
_PLAIN_DECIMAL = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


class InvoiceForm(BaseModel):
    """Create/update invoice input — the id and date are never user-supplied."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    customer_id: str = Field(alias="customerId")
    amount: Decimal
    status: InvoiceStatus

    @field_validator("customer_id", mode="before")
    @classmethod
    def require_customer(cls, v: object) -> str:
        if not isinstance(v, str) or not v.strip():
            raise PydanticCustomError(FieldErrorKind.INVALID_TYPE.value, CUSTOMER_REQUIRED)
        return v.strip()

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, v: object) -> Decimal:
        if v is None or (isinstance(v, str) and not v.strip()):
            v = "0"
        text = str(v).strip()
        if not _PLAIN_DECIMAL.fullmatch(text):
            raise PydanticCustomError(FieldErrorKind.INVALID_TYPE.value, AMOUNT_NOT_A_NUMBER)
        amount = Decimal(text)
        if amount > MAX_AMOUNT:
            raise PydanticCustomError(
                FieldErrorKind.CONSTRAINT_VIOLATION.value, AMOUNT_TOO_LARGE,
            )
        if amount > 0:
            amount = round_to_minor_unit(amount)
        if amount <= 0:
            raise PydanticCustomError(
                FieldErrorKind.CONSTRAINT_VIOLATION.value, AMOUNT_NOT_POSITIVE,
            )
        return amount

    @field_validator("status", mode="before")
    @classmethod
    def require_known_status(cls, v: object) -> InvoiceStatus:
        try:
            return InvoiceStatus(v)
        except (ValueError, TypeError):
            raise PydanticCustomError(
                FieldErrorKind.INVALID_TYPE.value, STATUS_REQUIRED,
            ) from None
