"""Auth Routes — credentials sign-in and sign-out over a signed session cookie.

Invariants:
    - Sign-in success → 303 to sign_in_redirect_path with the session cookie set
    - Sign-in failure → 401 {"message": "Invalid Credentials" | "Unable to sign in"}
    - Failure responses never reveal which check failed
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.api.deps import get_password_hasher
from dashboard.config import Settings, get_settings
from dashboard.infrastructure.database import get_db
from dashboard.infrastructure.passwords import PasslibPasswordHasher
from dashboard.infrastructure.session_auth import CookieSession
from dashboard.infrastructure.user_store import UserStore
from dashboard.services.sign_in import authenticate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/sign-in")
async def sign_in(
    request: Request,
    db: AsyncSession = Depends(get_db),
    hasher: PasslibPasswordHasher = Depends(get_password_hasher),
    settings: Settings = Depends(get_settings),
):
    """Sign in with form fields email, password."""
    form = await request.form()
    failure = await authenticate(form, UserStore(db), hasher, CookieSession(request))
    if failure:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": failure.message},
        )
    return RedirectResponse(
        url=settings.sign_in_redirect_path, status_code=status.HTTP_303_SEE_OTHER,
    )


@router.post("/sign-out")
async def sign_out(request: Request, settings: Settings = Depends(get_settings)):
    """Drop the session cookie contents."""
    CookieSession(request).clear()
    return RedirectResponse(
        url=settings.sign_out_redirect_path, status_code=status.HTTP_303_SEE_OTHER,
    )
