"""Civil calendar arithmetic and digit helpers for the timestamp codec.

Day counts use the proleptic Gregorian calendar with day 0 = 1970-01-01.
All arithmetic is integer floor division, so negative timestamps need no
special casing.
"""

from __future__ import annotations

_DAYS_PER_ERA = 146097
"""Days in a 400-year Gregorian cycle."""

_EPOCH_SHIFT = 719468
"""Days from 0000-03-01 to 1970-01-01."""

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

TWO_DIGITS: tuple[str, ...] = tuple(f"{i:02d}" for i in range(100))
"""Zero-padded strings for 0-99, indexed by value."""


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Length of ``month`` (1-12) in ``year``."""
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a Gregorian date."""
    # Shift the year to start in March so the leap day is the last day.
    if month <= 2:
        year -= 1
    era = year // 400
    year_of_era = year - era * 400
    day_of_year = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * _DAYS_PER_ERA + day_of_era - _EPOCH_SHIFT


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Inverse of :func:`days_from_civil`; returns ``(year, month, day)``."""
    days += _EPOCH_SHIFT
    era = days // _DAYS_PER_ERA
    day_of_era = days - era * _DAYS_PER_ERA
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400
    if month <= 2:
        year += 1
    return year, month, day


def format_year(year: int) -> str:
    """Zero-pad a year to at least four digits; years before 0000 get a leading ``-``."""
    if 1000 <= year <= 9999:
        return str(year)
    if year < 0:
        return "-" + f"{-year:04d}"
    return f"{year:04d}"
