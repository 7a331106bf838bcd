"""Sign-in Schema — shape check for credentials before any store lookup."""

from pydantic import BaseModel, EmailStr, Field

PASSWORD_MIN_LENGTH = 6


class Credentials(BaseModel):
    """Email + password pair submitted by the sign-in form."""
    email: EmailStr
    password: str = Field(min_length=PASSWORD_MIN_LENGTH)
