"""Precipitation and distance units. Base unit: mm."""

from __future__ import annotations

from pywxunits._constants import MILLIMETERS_PER_INCH_X10, MILLIMETERS_PER_MILE
from pywxunits.units._base import Category, LinearScale, UnitCategory

DISTANCE = UnitCategory(
    Category.DISTANCE,
    base_unit="mm",
    scales={
        "mm": LinearScale(1),
        "in": LinearScale(MILLIMETERS_PER_INCH_X10, 10),
        "m": LinearScale(1000),
        "km": LinearScale(1_000_000),
        "mi": LinearScale(MILLIMETERS_PER_MILE),
    },
)
