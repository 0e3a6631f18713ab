"""UnitConverter - per-category pivot conversion between unit symbols."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pywxunits._constants import MAX_BEAUFORT_FORCE
from pywxunits._errors import UnsupportedConversionError
from pywxunits.units import (
    DISTANCE,
    PRESSURE,
    SPEED,
    TEMPERATURE,
    Category,
    UnitCategory,
    get_category,
)

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES: tuple[UnitCategory, ...] = (SPEED, TEMPERATURE, DISTANCE, PRESSURE)


class UnitConverter:
    """Converts values between unit symbols of the same category.

    Each value travels ``from_unit -> base unit -> to_unit`` using the scale
    of each unit, so linear, affine and empirical units mix freely within a
    category.
    """

    def __init__(self, categories: Iterable[UnitCategory] = DEFAULT_CATEGORIES) -> None:
        self._categories = tuple(categories)
        self._by_unit: dict[str, UnitCategory] = {}
        for table in self._categories:
            for unit in table.units:
                owner = self._by_unit.get(unit)
                if owner is not None:
                    raise ValueError(
                        f"unit {unit!r} registered in both "
                        f"{owner.category} and {table.category}"
                    )
                self._by_unit[unit] = table

    @property
    def categories(self) -> tuple[UnitCategory, ...]:
        return self._categories

    @property
    def all_units(self) -> tuple[str, ...]:
        return tuple(self._by_unit)

    def _lookup(self, from_unit: str, to_unit: str) -> UnitCategory:
        table = self._by_unit.get(from_unit)
        if table is None:
            err = UnsupportedConversionError(
                from_unit,
                to_unit,
                self.all_units,
                f"source unit {from_unit!r} is not in any category",
            )
            logger.debug(err.internal())
            raise err
        return table

    def category_of(self, unit: str) -> Category:
        """Return the category a unit symbol belongs to."""
        return self._lookup(unit, unit).category

    def convert(self, from_unit: str, to_unit: str, value: float) -> float:
        """Convert ``value`` from ``from_unit`` to ``to_unit``.

        Args:
            from_unit: Case-sensitive source unit symbol, e.g. ``"km/h"``.
            to_unit: Case-sensitive target unit symbol.
            value: Finite real number in source units.

        Returns:
            The value in target units. Returned unchanged when both units
            are the same.

        Raises:
            UnsupportedConversionError: If ``from_unit`` is unknown or
                ``to_unit`` is not in the same category.
        """
        table = self._lookup(from_unit, to_unit)
        if from_unit == to_unit:
            return value

        target = table.find_scale(to_unit)
        if target is None:
            err = UnsupportedConversionError(
                from_unit,
                to_unit,
                table.units,
                f"target unit {to_unit!r} is not a {table.category} unit",
            )
            logger.debug(err.internal())
            raise err

        source = table.find_scale(from_unit)
        return target.from_base(source.to_base(value))

    def beaufort_force(self, value: float, unit: str = "m/s") -> int:
        """Whole-number Beaufort force (0-12) for a wind speed.

        The continuous Beaufort value is rounded half-to-even by ``round()``
        and clamped to the traditional scale.
        """
        force = round(self.convert(unit, "Bft", value))
        return max(0, min(MAX_BEAUFORT_FORCE, force))


_default_converter = UnitConverter()


def convert(from_unit: str, to_unit: str, value: float) -> float:
    """Convert ``value`` between two units with the default unit tables.

    Raises:
        UnsupportedConversionError: If the pair is not convertible.
    """
    return _default_converter.convert(from_unit, to_unit, value)


def category_of(unit: str) -> Category:
    """Return the category a unit symbol belongs to.

    Raises:
        UnsupportedConversionError: If the unit is unknown; ``valid_targets``
            lists every known unit.
    """
    return _default_converter.category_of(unit)


def units_of(category: str) -> tuple[str, ...]:
    """Return the unit symbols of a category, in table order.

    Raises:
        ValueError: If the category name is unknown.
    """
    return get_category(category).units


def beaufort_force(value: float, unit: str = "m/s") -> int:
    """Whole-number Beaufort force (0-12) for a wind speed in ``unit``."""
    return _default_converter.beaufort_force(value, unit)
