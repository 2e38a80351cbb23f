"""Loader for the FOOD-DATA-GROUP nutrient CSV files."""

import csv
import logging
import math
from pathlib import Path

from nutrition_diary.domain.catalog import CatalogFood

_FILE_PREFIX = "FOOD-DATA-GROUP"
_DESCRIPTION_COLUMNS = ("food", "Food", "FOOD")

_logger = logging.getLogger(__name__)


def load_catalog_foods(data_dir: Path) -> list[CatalogFood]:
    """Read every FOOD-DATA-GROUP*.csv file in a directory."""
    files = _find_data_files(data_dir)
    if not files:
        _logger.warning("No %s*.csv files found in %s", _FILE_PREFIX, data_dir)
        return []

    foods: list[CatalogFood] = []
    for path in files:
        try:
            foods.extend(_read_file(path))
        except (OSError, UnicodeDecodeError, csv.Error):
            _logger.exception("Failed to read nutrient file %s", path)
    _logger.info("Nutrient rows loaded: %s from %s files", len(foods), len(files))
    return foods


def _find_data_files(data_dir: Path) -> list[Path]:
    if not data_dir.is_dir():
        return []
    return sorted(
        path
        for path in data_dir.iterdir()
        if path.is_file()
        and path.name.upper().startswith(_FILE_PREFIX)
        and path.name.lower().endswith(".csv")
    )


def _read_file(path: Path) -> list[CatalogFood]:
    foods: list[CatalogFood] = []
    with path.open(encoding="utf-8-sig", newline="") as handle:
        for row in csv.DictReader(handle):
            food = _parse_row(row)
            if food is not None:
                foods.append(food)
    return foods


def _parse_row(row: dict[str, str | None]) -> CatalogFood | None:
    description = next(
        (row[column] for column in _DESCRIPTION_COLUMNS if row.get(column)), None
    )
    if not description:
        return None
    food = CatalogFood(
        description=description,
        energy_kcal=_parse_number(row.get("Caloric Value")),
        protein_g=_parse_number(row.get("Protein")),
        fat_g=_parse_number(row.get("Fat")),
        carb_g=_parse_number(row.get("Carbohydrates")),
    )
    values = (food.energy_kcal, food.protein_g, food.fat_g, food.carb_g)
    if all(value is None for value in values):
        return None
    return food


def _parse_number(value: str | None) -> float | None:
    """Parse a CSV number, accepting a decimal comma."""
    if value is None:
        return None
    try:
        number = float(value.strip().replace(",", ".", 1))
    except ValueError:
        return None
    return number if math.isfinite(number) else None
