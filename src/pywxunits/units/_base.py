"""Scale strategies and category tables for unit conversion."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType


class Category(enum.StrEnum):
    SPEED = "speed"
    TEMPERATURE = "temperature"
    DISTANCE = "distance"
    PRESSURE = "pressure"


ScaleFunc = Callable[[float], float]
"""One-way conversion between a unit and its category's base unit."""


class Scale(ABC):
    """How a single unit maps onto its category's base unit.

    Every unit carries a forward (to base) and inverse (from base) function,
    so a category needs one scale per unit rather than one per unit pair.
    """

    @abstractmethod
    def to_base(self, value: float) -> float: ...

    @abstractmethod
    def from_base(self, value: float) -> float: ...


@dataclass(frozen=True)
class LinearScale(Scale):
    """Pure multiplicative scale: ``base = value * numerator / denominator``.

    Keeping the factor as a ratio lets exact definitions such as
    1 atm = 760 mmHg survive as integers instead of a rounded quotient.
    """

    numerator: float
    denominator: float = 1

    def to_base(self, value: float) -> float:
        return value * self.numerator / self.denominator

    def from_base(self, value: float) -> float:
        return value * self.denominator / self.numerator


@dataclass(frozen=True)
class AffineScale(Scale):
    """Scale with offsets on both sides.

    ``base = (value - unit_offset) * numerator / denominator + base_offset``
    """

    numerator: float
    denominator: float
    unit_offset: float = 0
    base_offset: float = 0

    def to_base(self, value: float) -> float:
        return (value - self.unit_offset) * self.numerator / self.denominator + self.base_offset

    def from_base(self, value: float) -> float:
        return (value - self.base_offset) * self.denominator / self.numerator + self.unit_offset


@dataclass(frozen=True)
class EmpiricalScale(Scale):
    """Scale defined by a fitted formula and its inverse."""

    to_base_fn: ScaleFunc
    from_base_fn: ScaleFunc

    def to_base(self, value: float) -> float:
        return self.to_base_fn(value)

    def from_base(self, value: float) -> float:
        return self.from_base_fn(value)


class UnitCategory:
    """A group of mutually convertible units with O(1) symbol lookup."""

    def __init__(
        self,
        category: Category,
        base_unit: str,
        scales: Mapping[str, Scale],
    ) -> None:
        if base_unit not in scales:
            raise ValueError(
                f"base unit {base_unit!r} missing from {category} scales"
            )
        self.category = category
        self.base_unit = base_unit
        self._scales: Mapping[str, Scale] = MappingProxyType(dict(scales))

    @property
    def units(self) -> tuple[str, ...]:
        return tuple(self._scales)

    def find_scale(self, unit: str) -> Scale | None:
        return self._scales.get(unit)

    def __contains__(self, unit: object) -> bool:
        return unit in self._scales

    def __len__(self) -> int:
        return len(self._scales)

    def __repr__(self) -> str:
        return f"UnitCategory({self.category.value!r}, base={self.base_unit!r}, units={self.units!r})"
