"""Domain errors raised by diary services."""

from enum import Enum


class ValidationReason(Enum):
    """Reasons a meal entry request can be rejected."""

    INVALID_DATE = "Invalid or missing date (YYYY-MM-DD)."
    INVALID_MEAL_TYPE = (
        "mealType must be one of: breakfast, lunch, dinner, snack, other"
    )
    EMPTY_DESCRIPTION = "Description is required."
    INVALID_GRAMS = "grams must be a positive number."

    @property
    def message(self) -> str:
        """Return the human-readable message for this reason."""
        return self.value


class DiaryError(Exception):
    """Base class for errors that map to a client-facing response."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnauthorizedError(DiaryError):
    """Caller identity is missing or was rejected."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class MealValidationError(DiaryError):
    """A meal entry request failed validation."""

    def __init__(self, reason: ValidationReason, message: str | None = None) -> None:
        super().__init__(message or reason.message)
        self.reason = reason


class InvalidAuthInputError(DiaryError):
    """Registration or login input is malformed."""


class EmailAlreadyRegisteredError(DiaryError):
    """An account already exists for the email."""

    def __init__(self, message: str = "This email is already registered.") -> None:
        super().__init__(message)


class InvalidCredentialsError(DiaryError):
    """Email and password do not match an account."""

    def __init__(self, message: str = "Invalid credentials.") -> None:
        super().__init__(message)


class MealStoreError(DiaryError):
    """Persistence failure; details are logged, never returned to clients."""

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)
