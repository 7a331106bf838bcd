"""Route Dependencies — per-request wiring of services to their collaborators.

Invariants:
    - Every collaborator comes from app.state or settings, never a module global
    - require_user raises NotAuthenticatedError when the session has no user

Design Decisions:
    - Small Depends() functions so tests override exactly one seam each
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.config import Settings, get_settings
from dashboard.core.errors import NotAuthenticatedError
from dashboard.infrastructure.database import get_db
from dashboard.infrastructure.invoice_store import InvoiceStore
from dashboard.infrastructure.passwords import PasslibPasswordHasher
from dashboard.infrastructure.revalidation import VersionedPathRevalidator
from dashboard.infrastructure.session_auth import CookieSession
from dashboard.services.invoice_actions import InvoiceActions


def get_revalidator(request: Request) -> VersionedPathRevalidator:
    return request.app.state.revalidator


def get_password_hasher() -> PasslibPasswordHasher:
    return PasslibPasswordHasher()


def require_user(request: Request) -> str:
    """Signed-in user id, or 401."""
    user_id = CookieSession(request).user_id
    if not user_id:
        raise NotAuthenticatedError()
    return user_id


def get_invoice_actions(
    db: AsyncSession = Depends(get_db),
    revalidator: VersionedPathRevalidator = Depends(get_revalidator),
    settings: Settings = Depends(get_settings),
) -> InvoiceActions:
    store = InvoiceStore(db, best_effort=settings.persistence_best_effort)
    return InvoiceActions(store, revalidator, invoices_path=settings.invoices_path)
