"""Timestamp <-> fixed-format date/time string conversion.

Formatting and parsing go through integer civil-date arithmetic
(see ``_utils``) instead of ``datetime``/``strftime``. The only platform
dependency is the UTC offset, which comes from an injected
:class:`~pywxunits.offsets.OffsetProvider`.
"""

from __future__ import annotations

import logging
import operator

from lark.exceptions import UnexpectedInput

from pywxunits._constants import SECONDS_PER_DAY
from pywxunits._errors import MalformedInputError
from pywxunits._parser import DateTimeFields, DateTimeParser
from pywxunits._utils import (
    TWO_DIGITS,
    civil_from_days,
    days_from_civil,
    days_in_month,
    format_year,
)
from pywxunits.offsets import LocalOffsetProvider, OffsetProvider

logger = logging.getLogger(__name__)

_parser = DateTimeParser()


def _check_range(raw: str, name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        err = MalformedInputError(
            raw,
            f"{name} {value} outside {low}-{high} in {raw!r}",
        )
        logger.debug(err.internal())
        raise err


def _validate_fields(raw: str, fields: DateTimeFields) -> None:
    _check_range(raw, "month", fields.month, 1, 12)
    _check_range(raw, "day", fields.day, 1, days_in_month(fields.year, fields.month))
    _check_range(raw, "hour", fields.hour, 0, 23)
    _check_range(raw, "minute", fields.minute, 0, 59)
    _check_range(raw, "second", fields.second, 0, 59)


class TimeCodec:
    """Converts epoch timestamps to and from date/time strings.

    Args:
        offsets: Source of the local UTC offset. Defaults to the OS local
            timezone.
    """

    def __init__(self, offsets: OffsetProvider | None = None) -> None:
        self.offsets = offsets if offsets is not None else LocalOffsetProvider()

    def timestamp_to_string(
        self, ts: int, iso_separator: bool = False, utc: bool = False
    ) -> str:
        """Format ``ts`` as ``YYYY-MM-DD HH:mm:ss``.

        Args:
            ts: Seconds since the Unix epoch; may be negative.
            iso_separator: Use ``T`` instead of a space between date and time.
            utc: Format in UTC and append ``Z``; otherwise use the local offset.

        Raises:
            TypeError: If ``ts`` is not an integer.
            MalformedInputError: If ``utc`` is false and the platform cannot
                resolve a local offset for ``ts`` (outside its ``time_t``
                range). ``raw`` holds the timestamp as a string.
        """
        ts = operator.index(ts)
        if not utc:
            ts += self._offset_at(str(ts), ts)

        days, secs = divmod(ts, SECONDS_PER_DAY)
        year, month, day = civil_from_days(days)
        hour, secs = divmod(secs, 3600)
        minute, second = divmod(secs, 60)

        return "".join((
            format_year(year),
            "-",
            TWO_DIGITS[month],
            "-",
            TWO_DIGITS[day],
            "T" if iso_separator else " ",
            TWO_DIGITS[hour],
            ":",
            TWO_DIGITS[minute],
            ":",
            TWO_DIGITS[second],
            "Z" if utc else "",
        ))

    def string_to_timestamp(self, s: str, utc: bool = False) -> int:
        """Parse ``YYYY-MM-DD[<sep>HH:mm:ss[Z]]`` into an epoch timestamp.

        ``<sep>`` may be any single non-digit character. A trailing ``Z``
        forces UTC even when ``utc`` is false.

        Raises:
            MalformedInputError: If the string has the wrong shape, a
                field is out of range, or a local time lies outside the
                range the platform can resolve an offset for.
            TypeError: If ``s`` is not a string.
        """
        if not isinstance(s, str):
            raise TypeError(f"expected str, got {type(s).__name__}")

        try:
            fields = _parser.parse(s)
        except UnexpectedInput as e:
            err = MalformedInputError(s, f"parse error in {s!r}: {e}", wrapped=e)
            logger.debug(err.internal())
            raise err from e

        _validate_fields(s, fields)

        naive = (
            days_from_civil(fields.year, fields.month, fields.day) * SECONDS_PER_DAY
            + fields.hour * 3600
            + fields.minute * 60
            + fields.second
        )
        if utc or fields.utc:
            return naive
        return self._resolve_local(s, naive)

    def _offset_at(self, raw: str, ts: int) -> int:
        try:
            return self.offsets.utc_offset(ts)
        except (OverflowError, OSError) as e:
            err = MalformedInputError(
                raw,
                f"no local UTC offset for timestamp {ts}: {e}",
                wrapped=e,
            )
            logger.debug(err.internal())
            raise err from e

    def _resolve_local(self, raw: str, naive: int) -> int:
        """Find the instant whose local wall-clock reading is ``naive``.

        The offset is first sampled at ``naive`` itself and then re-checked
        at the resulting instant. This is exact for every unambiguous
        wall-clock time. In the repeated hour after a backward transition the
        offset sampled at ``naive`` picks the occurrence; times in the
        skipped hour of a forward transition have no exact answer.
        """
        offset = self._offset_at(raw, naive)
        ts = naive - offset
        corrected = self._offset_at(raw, ts)
        if corrected != offset:
            candidate = naive - corrected
            if self._offset_at(raw, candidate) == corrected:
                ts = candidate
        return ts


_default_codec = TimeCodec()


def timestamp_to_string(ts: int, iso_separator: bool = False, utc: bool = False) -> str:
    """Format an epoch timestamp using the OS local timezone or UTC."""
    return _default_codec.timestamp_to_string(ts, iso_separator, utc)


def string_to_timestamp(s: str, utc: bool = False) -> int:
    """Parse a date/time string using the OS local timezone or UTC."""
    return _default_codec.string_to_timestamp(s, utc)
