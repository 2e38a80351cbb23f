"""Food catalog search endpoint."""

from fastapi import APIRouter, Depends

from nutrition_diary.api.dependencies import get_container
from nutrition_diary.api.schemas import FoodResponse
from nutrition_diary.containers import AppContainer

router = APIRouter(prefix="/api/foods", tags=["foods"])


@router.get("")
async def search_foods(
    q: str | None = None, container: AppContainer = Depends(get_container)
) -> list[FoodResponse]:
    """Search the static nutrient dataset by name."""
    return [FoodResponse.from_food(food) for food in container.food_catalog.search(q)]
