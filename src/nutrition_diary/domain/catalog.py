"""Food catalog domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogFood:
    """A food row from the static nutrient dataset, values per 100 g."""

    description: str
    energy_kcal: float | None
    protein_g: float | None
    fat_g: float | None
    carb_g: float | None
