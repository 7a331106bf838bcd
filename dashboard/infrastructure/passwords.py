"""Password Hashing — passlib CryptContext with the argon2 scheme.

Invariants:
    - Passwords are only ever hashed or verified, never decoded
    - A stored hash passlib cannot parse raises AuthProviderError, not a mismatch
"""

from passlib.context import CryptContext

from dashboard.core.errors import AuthProviderError

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


class PasslibPasswordHasher:
    """PasswordVerifier backed by a passlib CryptContext."""

    def __init__(self, context: CryptContext = pwd_context):
        self.context = context

    def hash(self, password: str) -> str:
        result: str = self.context.hash(password)
        return result

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            result: bool = self.context.verify(password, password_hash)
        except (ValueError, TypeError) as e:
            raise AuthProviderError("Stored password hash is unreadable") from e
        return result

    def dummy_verify(self) -> None:
        """Spend one verification's worth of work when there is no user to check."""
        self.context.dummy_verify()
