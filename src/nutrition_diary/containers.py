"""Dependency container wiring for the application."""

from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from nutrition_diary.adapters.csv_food_loader import load_catalog_foods
from nutrition_diary.adapters.supabase_auth_provider import SupabaseAuthProvider
from nutrition_diary.adapters.supabase_meal_repository import SupabaseMealRepository
from nutrition_diary.config import Settings
from nutrition_diary.services.auth import AuthService
from nutrition_diary.services.catalog import FoodCatalog
from nutrition_diary.services.meals import MealLogService
from nutrition_diary.services.validation import MealEntryValidator


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    meal_log_service: MealLogService
    food_catalog: FoodCatalog


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    meal_repository = SupabaseMealRepository(
        supabase_client, table=resolved_settings.meals_table
    )
    meal_log_service = MealLogService(
        repository=meal_repository,
        validator=MealEntryValidator(
            strict_calendar_dates=resolved_settings.strict_calendar_dates
        ),
    )
    auth_service = AuthService(SupabaseAuthProvider(supabase_client))
    food_catalog = FoodCatalog(
        foods=load_catalog_foods(Path(resolved_settings.foods_data_dir)),
        default_limit=resolved_settings.food_search_limit,
    )

    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        meal_log_service=meal_log_service,
        food_catalog=food_catalog,
    )
