"""Credentials Schema — email format and minimum password length."""

import pytest
from pydantic import ValidationError

from dashboard.schemas.auth import Credentials


def test_valid_credentials():
    creds = Credentials(email="user@nextmail.com", password="123456")
    assert creds.email == "user@nextmail.com"


@pytest.mark.parametrize("email", ["not-an-email", "user@", "@nextmail.com", ""])
def test_malformed_email_rejected(email):
    with pytest.raises(ValidationError):
        Credentials(email=email, password="123456")


def test_password_shorter_than_six_rejected():
    with pytest.raises(ValidationError) as exc_info:
        Credentials(email="user@nextmail.com", password="12345")
    assert exc_info.value.errors()[0]["loc"] == ("password",)
