"""Credential Verification — shape check, user lookup, hash comparison.

Invariants:
    - Malformed input returns None BEFORE any store access
    - Unknown email and wrong password both return None (indistinguishable to callers)
    - LookupFailure from the store propagates; it is never turned into None
    - A found user is returned only on a positive hash match

Design Decisions:
    - dummy_verify on unknown email: both no-match paths cost one hash verification
"""

import logging
from collections.abc import Mapping

from pydantic import ValidationError

from dashboard.core.repository_protocols import PasswordVerifier, UserLike, UserReader
from dashboard.schemas.auth import Credentials

logger = logging.getLogger(__name__)


async def verify_credentials(
    form: Mapping[str, object],
    users: UserReader,
    hasher: PasswordVerifier,
) -> UserLike | None:
    """Return the user matching email + password, or None."""
    try:
        credentials = Credentials.model_validate({
            "email": form.get("email"),
            "password": form.get("password"),
        })
    except ValidationError:
        logger.info("Invalid credentials")
        return None

    user = await users.get_by_email(credentials.email)
    if user is None:
        hasher.dummy_verify()
        logger.info("Invalid credentials")
        return None

    if hasher.verify(credentials.password, user.password):
        return user

    logger.info("Invalid credentials")
    return None
