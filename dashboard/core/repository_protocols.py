"""Boundary Protocols — contracts between core/services and the shell.

Invariants:
    - Core NEVER imports from infrastructure — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Store methods are async because implementations do IO; revalidation and
      session establishment are synchronous in-process signals
"""

from datetime import date
from typing import Protocol

from dashboard.core.domain_types import (
    AmountMinorUnits, CustomerId, InvoiceId, InvoiceStatus,
)


class UserLike(Protocol):
    """Structural contract for user rows handed to the sign-in pipeline."""
    id: str
    email: str
    password: str


class InvoiceWriter(Protocol):
    """Contract for invoice mutations — implemented by infrastructure/invoice_store.py."""
    async def create(
        self, customer_id: CustomerId, amount: AmountMinorUnits,
        status: InvoiceStatus, invoice_date: date,
    ) -> None: ...
    async def update(
        self, invoice_id: InvoiceId, customer_id: CustomerId,
        amount: AmountMinorUnits, status: InvoiceStatus,
    ) -> None: ...
    async def delete(self, invoice_id: InvoiceId) -> None: ...


class UserReader(Protocol):
    """Contract for user lookup — raises LookupFailure when the store errors."""
    async def get_by_email(self, email: str) -> UserLike | None: ...


class PasswordVerifier(Protocol):
    """Contract for one-way password checks."""
    def verify(self, password: str, password_hash: str) -> bool: ...
    def dummy_verify(self) -> None: ...


class PathRevalidator(Protocol):
    """Contract for invalidating cached views of a logical path."""
    def revalidate(self, path: str) -> None: ...


class SessionEstablisher(Protocol):
    """Contract for turning a verified user into an authenticated session."""
    def establish(self, user: UserLike) -> None: ...
