"""Search over the static food catalog."""

from dataclasses import dataclass, field

from nutrition_diary.domain.catalog import CatalogFood


@dataclass
class FoodCatalog:
    """In-memory food catalog loaded once at startup."""

    foods: list[CatalogFood] = field(default_factory=list)
    default_limit: int = 50

    def __post_init__(self) -> None:
        self._index = [(food.description.lower(), food) for food in self.foods]

    def search(self, query: str | None, limit: int | None = None) -> list[CatalogFood]:
        """Return foods whose description contains the query, sorted by name."""
        needle = (query or "").strip().lower()
        matches = [food for name, food in self._index if needle in name]
        matches.sort(key=lambda food: food.description.lower())
        return matches[: limit or self.default_limit]

    def __len__(self) -> int:
        return len(self.foods)
