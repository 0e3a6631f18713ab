"""Atmospheric pressure units. Base unit: hPa."""

from __future__ import annotations

from pywxunits._constants import MMHG_PER_ATMOSPHERE, PASCALS_PER_ATMOSPHERE
from pywxunits.units._base import Category, LinearScale, UnitCategory

PRESSURE = UnitCategory(
    Category.PRESSURE,
    base_unit="hPa",
    scales={
        "atm": LinearScale(PASCALS_PER_ATMOSPHERE, 100),
        "mbar": LinearScale(1),
        # 1 atm = 760 mmHg exactly
        "mmHg": LinearScale(PASCALS_PER_ATMOSPHERE, 100 * MMHG_PER_ATMOSPHERE),
        "kPa": LinearScale(10),
        "hPa": LinearScale(1),
    },
)
