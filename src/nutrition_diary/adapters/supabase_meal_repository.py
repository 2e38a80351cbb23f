"""Supabase repository for meal entries."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from supabase import Client

from nutrition_diary.domain.meals import (
    MealEntry,
    MealEntryCommand,
    MealType,
    NutrientProfile,
)
from nutrition_diary.services.meals import MealRepository

_COLUMNS = (
    "id, user_id, meal_date, meal_type, description, grams, "
    "energy_per100, protein_per100, fat_per100, carb_per100, created_at"
)


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meal entries."""

    client: Client
    table: str = "meals"

    def insert_meal(self, user_id: str, command: MealEntryCommand) -> MealEntry:
        """Insert a meal row and return it as stored."""
        response = (
            self.client.table(self.table)
            .insert(
                {
                    "user_id": user_id,
                    "meal_date": command.entry_date,
                    "meal_type": command.meal_type.value,
                    "description": command.description,
                    # Sent as text so the NUMERIC column keeps the exact value.
                    "grams": str(command.grams),
                    "energy_per100": command.nutrients.energy,
                    "protein_per100": command.nutrients.protein,
                    "fat_per100": command.nutrients.fat,
                    "carb_per100": command.nutrients.carb,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal entry")
        return _parse_meal(response.data[0])

    def list_meals(self, user_id: str, entry_date: str) -> list[MealEntry]:
        """Return a user's meals for a date, oldest first."""
        response = (
            self.client.table(self.table)
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .eq("meal_date", entry_date)
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def delete_meal(self, user_id: str, meal_id: UUID) -> bool:
        """Delete a meal only when both id and owner match."""
        response = (
            self.client.table(self.table)
            .delete()
            .eq("id", str(meal_id))
            .eq("user_id", user_id)
            .execute()
        )
        return bool(response.data)


def _parse_meal(row: dict[str, object]) -> MealEntry:
    return MealEntry(
        id=UUID(str(row["id"])),
        user_id=str(row["user_id"]),
        entry_date=str(row["meal_date"]),
        meal_type=MealType(row["meal_type"]),
        description=str(row.get("description", "")),
        grams=Decimal(str(row["grams"])),
        nutrients=NutrientProfile(
            energy=_optional_float(row.get("energy_per100")),
            protein=_optional_float(row.get("protein_per100")),
            fat=_optional_float(row.get("fat_per100")),
            carb=_optional_float(row.get("carb_per100")),
        ),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)
