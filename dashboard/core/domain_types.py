"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - InvoiceId, CustomerId, UserId are opaque strings — never parsed or compared structurally
    - AmountMinorUnits is an integer count of cents, always > 0 once persisted
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and bind to SQL without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

InvoiceId = NewType("InvoiceId", str)
CustomerId = NewType("CustomerId", str)
UserId = NewType("UserId", str)


# ─── Value Types ─────────────────────────────────────────────────

AmountMinorUnits = NewType("AmountMinorUnits", int)     # major × 100


# ─── Enums ───────────────────────────────────────────────────────

class InvoiceStatus(str, Enum):
    """Invoice payment states — maps to DB `status` column."""
    PENDING = "pending"
    PAID = "paid"


class FieldErrorKind(str, Enum):
    """Why a form field was rejected."""
    INVALID_TYPE = "invalid_type"
    CONSTRAINT_VIOLATION = "constraint_violation"


class AuthErrorKind(str, Enum):
    """Sign-in failure classification. Never shown to the end user."""
    CREDENTIALS_SIGNIN = "CredentialsSignin"
    CALLBACK_ROUTE_ERROR = "CallbackRouteError"
