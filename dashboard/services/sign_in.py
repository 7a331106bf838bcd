"""Sign-in — verify credentials, establish a session, classify failures.

Invariants:
    - Success establishes a session and returns None
    - No match → "Invalid Credentials" (kind CredentialsSignin)
    - LookupFailure / AuthProviderError / any other unexpected error →
      "Unable to sign in" (kind CallbackRouteError); unexpected ones log a traceback
    - The kind is logged and attached to the result, never shown to the user
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from dashboard.core.domain_types import AuthErrorKind
from dashboard.core.errors import AuthProviderError, LookupFailure
from dashboard.core.repository_protocols import (
    PasswordVerifier, SessionEstablisher, UserReader,
)
from dashboard.services.verify_credentials import verify_credentials

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid Credentials"
UNABLE_TO_SIGN_IN = "Unable to sign in"


@dataclass(frozen=True)
class SignInFailure:
    kind: AuthErrorKind
    message: str


async def authenticate(
    form: Mapping[str, object],
    users: UserReader,
    hasher: PasswordVerifier,
    session: SessionEstablisher,
) -> SignInFailure | None:
    """Attempt a credentials sign-in. None means the session was established."""
    try:
        user = await verify_credentials(form, users, hasher)
        if user is None:
            return _fail(AuthErrorKind.CREDENTIALS_SIGNIN, INVALID_CREDENTIALS)
        session.establish(user)
    except (LookupFailure, AuthProviderError) as e:
        logger.error(
            f"Sign-in failed: {e}",
            extra={"error_code": e.code,
                   "error_kind": AuthErrorKind.CALLBACK_ROUTE_ERROR.value},
        )
        return SignInFailure(AuthErrorKind.CALLBACK_ROUTE_ERROR, UNABLE_TO_SIGN_IN)
    except Exception as e:
        logger.error(
            f"Unexpected sign-in failure: {e}",
            extra={"error_kind": AuthErrorKind.CALLBACK_ROUTE_ERROR.value},
            exc_info=True,
        )
        return SignInFailure(AuthErrorKind.CALLBACK_ROUTE_ERROR, UNABLE_TO_SIGN_IN)
    return None


def _fail(kind: AuthErrorKind, message: str) -> SignInFailure:
    logger.info(f"Sign-in rejected: {kind.value}", extra={"error_kind": kind.value})
    return SignInFailure(kind, message)
