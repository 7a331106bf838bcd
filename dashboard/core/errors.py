"""Error Hierarchy — typed, categorized exceptions for all dashboard failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Field validation failures are NOT exceptions (see core/validate_invoice.py)
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with DashboardError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    invoice_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class DashboardError(Exception):
    """Base exception for all dashboard errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class NotAuthenticatedError(DashboardError):
    """Mutation attempted without an authenticated session."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Authentication required",
            "NOT_AUTHENTICATED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(DashboardError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class LookupFailure(DatabaseError):
    """User lookup could not reach or query the store."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("Error fetching user", "lookup", context)
        self.code = "LOOKUP_FAILURE"


class PersistenceError(DatabaseError):
    """Invoice insert/update/delete failed (raised only when persistence is strict)."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__("Invoice write rejected", operation, context)
        self.code = "PERSISTENCE_ERROR"


class AuthProviderError(DashboardError):
    """Sign-in failed for a reason other than wrong credentials."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "AUTH_PROVIDER_ERROR", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.ERROR, context, 503,
        )
