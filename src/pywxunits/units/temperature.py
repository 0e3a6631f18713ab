"""Temperature units. Base unit: K.

All three units are affine in kelvin, so they share no common factor and
must each carry their own offsets.
"""

from __future__ import annotations

from pywxunits._constants import FAHRENHEIT_FREEZING, KELVIN_OFFSET
from pywxunits.units._base import AffineScale, Category, UnitCategory

TEMPERATURE = UnitCategory(
    Category.TEMPERATURE,
    base_unit="K",
    scales={
        "K": AffineScale(1, 1),
        # k = (f - 32) * 5/9 + 273.15
        "F": AffineScale(5, 9, unit_offset=FAHRENHEIT_FREEZING, base_offset=KELVIN_OFFSET),
        # k = c + 273.15
        "C": AffineScale(1, 1, base_offset=KELVIN_OFFSET),
    },
)
