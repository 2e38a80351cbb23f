"""Pydantic response models for the diary API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from nutrition_diary.domain.catalog import CatalogFood
from nutrition_diary.domain.meals import DailySummary, LoggedMeal, NutrientTotals
from nutrition_diary.domain.models import AuthSession


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class TotalsResponse(BaseModel):
    """Absolute nutrients; null when unknown."""

    calories: float | None
    protein: float | None
    fat: float | None
    carbs: float | None

    @classmethod
    def from_totals(cls, totals: NutrientTotals) -> "TotalsResponse":
        return cls(
            calories=totals.calories,
            protein=totals.protein,
            fat=totals.fat,
            carbs=totals.carbs,
        )


class MealEntryResponse(_CamelModel):
    """A logged meal entry with its totals."""

    id: UUID
    date: str
    meal_type: str = Field(alias="mealType")
    description: str
    grams: float
    energy_per100: float | None = Field(alias="energyPer100")
    protein_per100: float | None = Field(alias="proteinPer100")
    fat_per100: float | None = Field(alias="fatPer100")
    carb_per100: float | None = Field(alias="carbPer100")
    totals: TotalsResponse
    created_at: datetime = Field(alias="createdAt")

    @classmethod
    def from_logged(cls, logged: LoggedMeal) -> "MealEntryResponse":
        entry = logged.entry
        return cls(
            id=entry.id,
            date=entry.entry_date,
            meal_type=entry.meal_type.value,
            description=entry.description,
            grams=float(entry.grams),
            energy_per100=entry.nutrients.energy,
            protein_per100=entry.nutrients.protein,
            fat_per100=entry.nutrients.fat,
            carb_per100=entry.nutrients.carb,
            totals=TotalsResponse.from_totals(logged.totals),
            created_at=entry.created_at,
        )


class DailyTotalsResponse(BaseModel):
    """Running sums for a day."""

    calories: float
    protein: float
    fat: float
    carbs: float


class DailySummaryResponse(BaseModel):
    """Entries for one date grouped by meal type."""

    date: str
    meals: dict[str, list[MealEntryResponse]]
    totals: DailyTotalsResponse

    @classmethod
    def from_summary(cls, summary: DailySummary) -> "DailySummaryResponse":
        return cls(
            date=summary.entry_date,
            meals={
                meal_type.value: [MealEntryResponse.from_logged(m) for m in logged]
                for meal_type, logged in summary.meals.items()
            },
            totals=DailyTotalsResponse(
                calories=summary.totals.calories,
                protein=summary.totals.protein,
                fat=summary.totals.fat,
                carbs=summary.totals.carbs,
            ),
        )


class DeleteMealResponse(BaseModel):
    """Outcome of a delete; deleted is false for unknown or foreign ids."""

    success: bool = True
    deleted: bool


class FoodResponse(_CamelModel):
    """Food search hit, values per 100 g."""

    description: str
    energy_kcal: float | None = Field(alias="energyKcal")
    protein_g: float | None = Field(alias="proteinG")
    fat_g: float | None = Field(alias="fatG")
    carb_g: float | None = Field(alias="carbG")

    @classmethod
    def from_food(cls, food: CatalogFood) -> "FoodResponse":
        return cls(
            description=food.description,
            energy_kcal=food.energy_kcal,
            protein_g=food.protein_g,
            fat_g=food.fat_g,
            carb_g=food.carb_g,
        )


class AuthUserResponse(BaseModel):
    id: str
    email: str


class AuthResponse(BaseModel):
    """Register/login result."""

    message: str
    token: str | None
    user: AuthUserResponse

    @classmethod
    def from_session(cls, message: str, session: AuthSession) -> "AuthResponse":
        return cls(
            message=message,
            token=session.access_token,
            user=AuthUserResponse(id=session.user_id, email=session.email),
        )
