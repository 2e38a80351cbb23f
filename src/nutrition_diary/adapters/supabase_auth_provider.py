"""Supabase Auth implementation of the auth provider."""

import logging
from dataclasses import dataclass

from supabase import AuthApiError, Client

from nutrition_diary.domain.errors import (
    EmailAlreadyRegisteredError,
    InvalidAuthInputError,
    InvalidCredentialsError,
)
from nutrition_diary.domain.models import AuthSession
from nutrition_diary.services.auth import AuthProvider

_logger = logging.getLogger(__name__)

SIGN_UP_REJECTED_MESSAGE = "Registration could not be completed."


@dataclass
class SupabaseAuthProvider(AuthProvider):
    """Delegates password storage and token issuance to Supabase Auth."""

    client: Client

    def sign_up(self, email: str, password: str) -> AuthSession:
        """Create a Supabase user."""
        try:
            response = self.client.auth.sign_up({"email": email, "password": password})
        except AuthApiError as exc:
            if "already" in str(exc).lower():
                raise EmailAlreadyRegisteredError from exc
            _logger.info("Sign up rejected: %s", exc)
            raise InvalidAuthInputError(SIGN_UP_REJECTED_MESSAGE) from exc
        user = response.user
        if user is None:
            raise RuntimeError("Supabase sign up returned no user")
        # Supabase hides duplicates behind a user with no identities.
        if user.identities is not None and not user.identities:
            raise EmailAlreadyRegisteredError
        return _to_session(user.id, user.email or email, response.session)

    def sign_in(self, email: str, password: str) -> AuthSession:
        """Authenticate with email and password."""
        try:
            response = self.client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except AuthApiError as exc:
            _logger.info("Sign in rejected: %s", exc)
            raise InvalidCredentialsError from exc
        user = response.user
        if user is None:
            raise InvalidCredentialsError
        return _to_session(user.id, user.email or email, response.session)

    def get_user_id(self, token: str) -> str | None:
        """Return the user id for a valid access token."""
        try:
            response = self.client.auth.get_user(token)
        except AuthApiError:
            return None
        if response is None or response.user is None:
            return None
        return str(response.user.id)


def _to_session(user_id: object, email: str, session: object | None) -> AuthSession:
    access_token = getattr(session, "access_token", None)
    return AuthSession(
        user_id=str(user_id),
        email=email,
        access_token=access_token,
    )
