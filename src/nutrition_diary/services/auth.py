"""Registration, login and token checks on top of an auth provider."""

import re
from dataclasses import dataclass
from typing import Protocol

from nutrition_diary.domain.errors import InvalidAuthInputError, UnauthorizedError
from nutrition_diary.domain.models import AuthSession

_EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
MIN_PASSWORD_LENGTH = 6


class AuthProvider(Protocol):
    """Issues and validates opaque identity tokens."""

    def sign_up(self, email: str, password: str) -> AuthSession:
        """Create an account and return its session."""

    def sign_in(self, email: str, password: str) -> AuthSession:
        """Authenticate credentials and return a session."""

    def get_user_id(self, token: str) -> str | None:
        """Return the user id for a valid token, or None."""


@dataclass
class AuthService:
    """Application service for account and identity checks."""

    provider: AuthProvider

    def register(self, email: object, password: object) -> AuthSession:
        """Validate registration input and create the account."""
        email_value, password_value = _require_credentials(email, password)
        if not _EMAIL_PATTERN.search(email_value):
            raise InvalidAuthInputError("Invalid email format.")
        if len(password_value) < MIN_PASSWORD_LENGTH:
            raise InvalidAuthInputError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters."
            )
        return self.provider.sign_up(email_value, password_value)

    def login(self, email: object, password: object) -> AuthSession:
        """Authenticate an existing account."""
        email_value, password_value = _require_credentials(email, password)
        return self.provider.sign_in(email_value, password_value)

    def authenticate(self, token: str | None) -> str:
        """Return the caller's user id for a bearer token."""
        if not token:
            raise UnauthorizedError("Missing Authorization header")
        user_id = self.provider.get_user_id(token)
        if not user_id:
            raise UnauthorizedError("Invalid or expired token")
        return user_id


def _require_credentials(email: object, password: object) -> tuple[str, str]:
    if not isinstance(email, str) or not isinstance(password, str):
        raise InvalidAuthInputError("Email and password are required.")
    if not email or not password:
        raise InvalidAuthInputError("Email and password are required.")
    return email, password
