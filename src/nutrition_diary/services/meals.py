"""Meal logging service."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeVar
from uuid import UUID

from nutrition_diary.domain.errors import MealStoreError, UnauthorizedError
from nutrition_diary.domain.meals import (
    DailySummary,
    LoggedMeal,
    MealEntry,
    MealEntryCommand,
)
from nutrition_diary.services.nutrition import aggregate, with_totals
from nutrition_diary.services.validation import QUERY_DATE_MESSAGE, MealEntryValidator

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class MealRepository(Protocol):
    """Persistence interface for meal entries."""

    def insert_meal(self, user_id: str, command: MealEntryCommand) -> MealEntry:
        """Insert a meal entry and return the stored row."""

    def list_meals(self, user_id: str, entry_date: str) -> list[MealEntry]:
        """Return the user's entries for a date, oldest first."""

    def delete_meal(self, user_id: str, meal_id: UUID) -> bool:
        """Delete an entry matching both id and owner; return True if removed."""


@dataclass
class MealLogService:
    """Service that validates, persists and summarizes meal entries.

    Every operation takes the caller's user id explicitly and only ever
    touches rows owned by that user.
    """

    repository: MealRepository
    validator: MealEntryValidator

    def create(self, user_id: str, command: MealEntryCommand) -> MealEntry:
        """Persist a validated command for the caller."""
        _require_user(user_id)
        if command.user_id != user_id:
            raise UnauthorizedError
        entry = self._call(
            "create",
            lambda: self.repository.insert_meal(user_id, command),
        )
        _logger.info(
            "Meal logged: meal_id=%s meal_type=%s date=%s",
            entry.id,
            entry.meal_type.value,
            entry.entry_date,
        )
        return entry

    def list_for_date(self, user_id: str, entry_date: str) -> list[MealEntry]:
        """Return the caller's entries for a date in display order.

        Entries are ordered by meal type, then by creation time.
        """
        _require_user(user_id)
        rows = self._call(
            "list",
            lambda: self.repository.list_meals(user_id, entry_date),
        )
        by_created = sorted(rows, key=lambda entry: entry.created_at)
        return sorted(by_created, key=lambda entry: entry.meal_type.position)

    def delete(self, user_id: str, meal_id: UUID) -> bool:
        """Delete the caller's entry; False when no owned entry matched."""
        _require_user(user_id)
        deleted = self._call(
            "delete",
            lambda: self.repository.delete_meal(user_id, meal_id),
        )
        if deleted:
            _logger.info("Meal deleted: meal_id=%s", meal_id)
        return deleted

    def log_meal(self, user_id: str, payload: dict[str, object]) -> LoggedMeal:
        """Validate a raw payload, persist it and compute its totals."""
        _require_user(user_id)
        command = self.validator.validate(payload, user_id)
        return with_totals(self.create(user_id, command))

    def list_logged(self, user_id: str, entry_date: object) -> list[LoggedMeal]:
        """Return the caller's entries for a date with per-entry totals."""
        _require_user(user_id)
        resolved = self.validator.validate_date(entry_date, QUERY_DATE_MESSAGE)
        return [with_totals(entry) for entry in self.list_for_date(user_id, resolved)]

    def daily_summary(self, user_id: str, entry_date: object) -> DailySummary:
        """Return the caller's entries for a date grouped by meal type."""
        _require_user(user_id)
        resolved = self.validator.validate_date(entry_date, QUERY_DATE_MESSAGE)
        return aggregate(resolved, self.list_for_date(user_id, resolved))

    def _call(self, action: str, func: Callable[[], T]) -> T:
        """Run a repository call, converting any fault into MealStoreError."""
        try:
            return func()
        except Exception as exc:
            _logger.exception("Meal store %s failed", action)
            raise MealStoreError from exc


def _require_user(user_id: str) -> None:
    if not user_id:
        raise UnauthorizedError
