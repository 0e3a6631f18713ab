"""Wind speed units. Base unit: m/s."""

from __future__ import annotations

import math

from pywxunits._constants import (
    BEAUFORT_COEFFICIENT,
    BEAUFORT_EXPONENT,
    METERS_PER_NAUTICAL_MILE,
    MILLIMETERS_PER_MILE,
    SECONDS_PER_HOUR,
)
from pywxunits.units._base import Category, EmpiricalScale, LinearScale, UnitCategory


def beaufort_to_mps(force: float) -> float:
    """Wind speed in m/s for a (possibly fractional) Beaufort force.

    Uses the empirical relation ``v = 0.836 * B ** 1.5``. Negative input is
    mirrored around zero so the curve stays real and monotonic.
    """
    return math.copysign(BEAUFORT_COEFFICIENT * abs(force) ** BEAUFORT_EXPONENT, force)


def mps_to_beaufort(speed: float) -> float:
    """Continuous Beaufort force for a speed in m/s; not rounded."""
    return math.copysign(
        (abs(speed) / BEAUFORT_COEFFICIENT) ** (1 / BEAUFORT_EXPONENT), speed
    )


SPEED = UnitCategory(
    Category.SPEED,
    base_unit="m/s",
    scales={
        "km/h": LinearScale(1000, SECONDS_PER_HOUR),
        "mph": LinearScale(MILLIMETERS_PER_MILE, 1000 * SECONDS_PER_HOUR),
        "m/s": LinearScale(1),
        "Bft": EmpiricalScale(beaufort_to_mps, mps_to_beaufort),
        "kt": LinearScale(METERS_PER_NAUTICAL_MILE, SECONDS_PER_HOUR),
    },
)
