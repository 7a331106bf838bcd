"""Cookie Sessions — Starlette SessionMiddleware glue for the sign-in flow.

Invariants:
    - Only user_id and email are stored in the signed session cookie
    - Cookie signing, expiry and transport belong to SessionMiddleware
"""

from fastapi import Request

from dashboard.core.errors import AuthProviderError
from dashboard.core.repository_protocols import UserLike

SESSION_USER_KEY = "user_id"
SESSION_EMAIL_KEY = "email"


class CookieSession:
    """SessionEstablisher over request.session."""

    def __init__(self, request: Request):
        self.request = request

    def establish(self, user: UserLike) -> None:
        try:
            session = self.request.session
        except AssertionError as e:
            raise AuthProviderError("Session middleware is not installed") from e
        session.clear()
        session[SESSION_USER_KEY] = str(user.id)
        session[SESSION_EMAIL_KEY] = user.email

    def clear(self) -> None:
        self.request.session.clear()

    @property
    def user_id(self) -> str | None:
        return self.request.session.get(SESSION_USER_KEY)
