"""Nutrient arithmetic for meal entries and daily summaries."""

from collections.abc import Iterable
from decimal import Decimal

from nutrition_diary.domain.meals import (
    DailySummary,
    DailyTotals,
    LoggedMeal,
    MealEntry,
    MealType,
    NutrientProfile,
    NutrientTotals,
)


def scale(profile: NutrientProfile, grams: Decimal | float) -> NutrientTotals:
    """Convert a per-100 g profile into totals for the consumed mass.

    Unknown per-100 values stay unknown in the result.
    """
    mass = float(grams)
    return NutrientTotals(
        calories=_scale_value(profile.energy, mass),
        protein=_scale_value(profile.protein, mass),
        fat=_scale_value(profile.fat, mass),
        carbs=_scale_value(profile.carb, mass),
    )


def with_totals(entry: MealEntry) -> LoggedMeal:
    """Pair an entry with its computed totals."""
    return LoggedMeal(entry=entry, totals=scale(entry.nutrients, entry.grams))


def aggregate(entry_date: str, entries: Iterable[MealEntry]) -> DailySummary:
    """Group entries by meal type and sum their totals.

    Unknown entry totals count as zero in the running sums only; each
    LoggedMeal still reports them as None.
    """
    meals: dict[MealType, list[LoggedMeal]] = {meal_type: [] for meal_type in MealType}
    total = DailyTotals(calories=0.0, protein=0.0, fat=0.0, carbs=0.0)
    for entry in entries:
        logged = with_totals(entry)
        meals[entry.meal_type].append(logged)
        total = DailyTotals(
            calories=total.calories + (logged.totals.calories or 0.0),
            protein=total.protein + (logged.totals.protein or 0.0),
            fat=total.fat + (logged.totals.fat or 0.0),
            carbs=total.carbs + (logged.totals.carbs or 0.0),
        )
    return DailySummary(entry_date=entry_date, meals=meals, totals=total)


def _scale_value(per100: float | None, grams: float) -> float | None:
    if per100 is None:
        return None
    return per100 * grams / 100.0
