"""Physical constants and tunables for unit and timestamp conversion.

Exact factors are written as the defining integers or decimals, never
derived from one another.
"""

KELVIN_OFFSET = 273.15
"""Kelvin value of 0 degrees Celsius."""

FAHRENHEIT_FREEZING = 32
"""Fahrenheit value of 0 degrees Celsius."""

MILLIMETERS_PER_INCH_X10 = 254
"""Tenths of a millimeter per inch (1 in = 25.4 mm exactly)."""

MILLIMETERS_PER_MILE = 1609344
"""Millimeters per statute mile (1 mi = 1609.344 m exactly)."""

METERS_PER_NAUTICAL_MILE = 1852
"""Meters per nautical mile; one knot is one nautical mile per hour."""

SECONDS_PER_HOUR = 3600

PASCALS_PER_ATMOSPHERE = 101325
"""Standard atmosphere in pascals."""

MMHG_PER_ATMOSPHERE = 760
"""Millimeters of mercury per standard atmosphere."""

BEAUFORT_COEFFICIENT = 0.836
"""Empirical Beaufort coefficient: v = 0.836 * B ** 1.5 (v in m/s)."""

BEAUFORT_EXPONENT = 1.5
"""Empirical Beaufort exponent."""

MAX_BEAUFORT_FORCE = 12
"""Highest force on the traditional whole-number Beaufort scale."""

SECONDS_PER_DAY = 86400
