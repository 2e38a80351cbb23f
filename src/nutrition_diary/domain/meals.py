"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID


class MealType(Enum):
    """Closed set of meal categories, in display order."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"
    OTHER = "other"

    @property
    def position(self) -> int:
        """Return the index of this meal type in display order."""
        return _MEAL_TYPE_ORDER[self]


_MEAL_TYPE_ORDER = {meal_type: index for index, meal_type in enumerate(MealType)}


@dataclass(frozen=True)
class NutrientProfile:
    """Nutrient density per 100 grams; None means unknown."""

    energy: float | None = None
    protein: float | None = None
    fat: float | None = None
    carb: float | None = None


@dataclass(frozen=True)
class NutrientTotals:
    """Absolute nutrients for one entry; None means unknown."""

    calories: float | None
    protein: float | None
    fat: float | None
    carbs: float | None


@dataclass(frozen=True)
class DailyTotals:
    """Running nutrient sums for a day."""

    calories: float
    protein: float
    fat: float
    carbs: float


@dataclass(frozen=True)
class MealEntryCommand:
    """Validated request to log a meal entry for its owner."""

    user_id: str
    entry_date: str
    meal_type: MealType
    description: str
    grams: Decimal
    nutrients: NutrientProfile


@dataclass(frozen=True)
class MealEntry:
    """A stored meal entry owned by a single user."""

    id: UUID
    user_id: str
    entry_date: str
    meal_type: MealType
    description: str
    grams: Decimal
    nutrients: NutrientProfile
    created_at: datetime


@dataclass(frozen=True)
class LoggedMeal:
    """Meal entry together with its computed totals."""

    entry: MealEntry
    totals: NutrientTotals


@dataclass(frozen=True)
class DailySummary:
    """Entries for one date grouped by meal type, plus running totals."""

    entry_date: str
    meals: dict[MealType, list[LoggedMeal]]
    totals: DailyTotals
