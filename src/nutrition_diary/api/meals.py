"""Meal diary endpoints scoped to the authenticated caller."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from nutrition_diary.api.dependencies import (
    BadRequestError,
    get_container,
    read_json_object,
    require_user,
)
from nutrition_diary.api.schemas import (
    DailySummaryResponse,
    DeleteMealResponse,
    MealEntryResponse,
)
from nutrition_diary.containers import AppContainer

router = APIRouter(prefix="/api/meals", tags=["meals"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_meal(
    request: Request,
    user_id: str = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> MealEntryResponse:
    """Log a food for a date and meal type."""
    # The body is read only after the caller has been authenticated.
    payload = await read_json_object(request)
    logged = container.meal_log_service.log_meal(user_id, payload)
    return MealEntryResponse.from_logged(logged)


@router.get("")
async def list_meals(
    date: str | None = None,
    user_id: str = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> list[MealEntryResponse]:
    """Return the caller's entries for a date in display order."""
    logged = container.meal_log_service.list_logged(user_id, date)
    return [MealEntryResponse.from_logged(item) for item in logged]


@router.get("/summary")
async def daily_summary(
    date: str | None = None,
    user_id: str = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> DailySummaryResponse:
    """Return the caller's entries for a date grouped by meal type."""
    summary = container.meal_log_service.daily_summary(user_id, date)
    return DailySummaryResponse.from_summary(summary)


@router.delete("/{meal_id}")
async def delete_meal(
    meal_id: str,
    user_id: str = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> DeleteMealResponse:
    """Delete one of the caller's entries."""
    deleted = container.meal_log_service.delete(user_id, _parse_meal_id(meal_id))
    return DeleteMealResponse(deleted=deleted)


def _parse_meal_id(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError as exc:
        raise BadRequestError("Invalid meal id.") from exc
