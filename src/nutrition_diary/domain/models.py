"""Domain models for the nutrition diary."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthSession:
    """Represents an authenticated user returned by the auth provider."""

    user_id: str
    email: str
    access_token: str | None
