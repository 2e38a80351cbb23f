"""Validation of inbound meal entry requests."""

import math
import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation

from nutrition_diary.domain.errors import MealValidationError, ValidationReason
from nutrition_diary.domain.meals import MealEntryCommand, MealType, NutrientProfile

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_MEAL_TYPES_BY_VALUE = {meal_type.value: meal_type for meal_type in MealType}

QUERY_DATE_MESSAGE = "Missing or invalid date parameter (YYYY-MM-DD)."


@dataclass
class MealEntryValidator:
    """Turns raw creation payloads into normalized commands.

    Checks run in a fixed order (date, meal type, description, grams) and the
    first failure is raised as a MealValidationError. Nutrient fields never
    fail validation: anything that is not a finite number is stored as
    unknown.
    """

    strict_calendar_dates: bool = False

    def validate(self, payload: dict[str, object], user_id: str) -> MealEntryCommand:
        """Validate a creation payload for the given caller."""
        entry_date = self.validate_date(payload.get("date"))
        meal_type = _parse_meal_type(payload.get("mealType"))
        description = _parse_description(payload.get("description"))
        grams = _parse_grams(payload.get("grams"))
        return MealEntryCommand(
            user_id=user_id,
            entry_date=entry_date,
            meal_type=meal_type,
            description=description,
            grams=grams,
            nutrients=NutrientProfile(
                energy=_to_optional_float(payload.get("energyPer100")),
                protein=_to_optional_float(payload.get("proteinPer100")),
                fat=_to_optional_float(payload.get("fatPer100")),
                carb=_to_optional_float(payload.get("carbPer100")),
            ),
        )

    def validate_date(self, value: object, message: str | None = None) -> str:
        """Return the date string if it is a YYYY-MM-DD date."""
        if not isinstance(value, str) or not _DATE_PATTERN.fullmatch(value):
            raise MealValidationError(ValidationReason.INVALID_DATE, message)
        if self.strict_calendar_dates and not _is_calendar_date(value):
            raise MealValidationError(ValidationReason.INVALID_DATE, message)
        return value


def _is_calendar_date(value: str) -> bool:
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def _parse_meal_type(value: object) -> MealType:
    if not isinstance(value, str) or value not in _MEAL_TYPES_BY_VALUE:
        raise MealValidationError(ValidationReason.INVALID_MEAL_TYPE)
    return _MEAL_TYPES_BY_VALUE[value]


def _parse_description(value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        raise MealValidationError(ValidationReason.EMPTY_DESCRIPTION)
    return value.strip()


def _parse_grams(value: object) -> Decimal:
    grams = _to_decimal(value)
    if grams is None or not grams.is_finite():
        raise MealValidationError(ValidationReason.INVALID_GRAMS)
    # Totals are scaled in float; the amount must survive that conversion.
    as_float = float(grams)
    if not math.isfinite(as_float) or as_float <= 0:
        raise MealValidationError(ValidationReason.INVALID_GRAMS)
    return grams


def _to_decimal(value: object) -> Decimal | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float | str):
        try:
            return Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            return None
    return None


def _to_optional_float(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None
