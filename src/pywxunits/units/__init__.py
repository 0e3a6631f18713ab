"""Unit tables for weather measurements."""

from pywxunits.units._base import (
    AffineScale,
    Category,
    EmpiricalScale,
    LinearScale,
    Scale,
    UnitCategory,
)
from pywxunits.units.distance import DISTANCE
from pywxunits.units.pressure import PRESSURE
from pywxunits.units.speed import SPEED
from pywxunits.units.temperature import TEMPERATURE

__all__ = [
    "AffineScale",
    "Category",
    "EmpiricalScale",
    "LinearScale",
    "Scale",
    "UnitCategory",
    "DISTANCE",
    "PRESSURE",
    "SPEED",
    "TEMPERATURE",
    "get_category",
]

_REGISTRY: dict[str, UnitCategory] = {
    Category.SPEED: SPEED,
    Category.TEMPERATURE: TEMPERATURE,
    Category.DISTANCE: DISTANCE,
    Category.PRESSURE: PRESSURE,
}


def get_category(name: str) -> UnitCategory:
    """Get a unit category table by name.

    Args:
        name: Category name ("speed", "temperature", "distance", "pressure").

    Returns:
        The UnitCategory table.

    Raises:
        ValueError: If the category name is unknown.
    """
    table = _REGISTRY.get(name)
    if table is None:
        raise ValueError(
            f"unknown category: {name!r}. "
            f"Available: {', '.join(sorted(_REGISTRY))}"
        )
    return table
