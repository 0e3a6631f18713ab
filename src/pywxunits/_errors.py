"""Exception hierarchy for unit conversion and timestamp codec errors."""

from __future__ import annotations

from collections.abc import Iterable


class WxUnitsError(Exception):
    """Base exception for pywxunits errors.

    Provides dual messaging: a short user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class UnsupportedConversionError(WxUnitsError):
    """Raised when a unit pair cannot be converted.

    ``valid_targets`` lists every unit the source unit can be converted to,
    or every known unit when the source unit itself is unknown.
    """

    def __init__(
        self,
        from_unit: str,
        to_unit: str,
        valid_targets: Iterable[str],
        internal_details: str = "",
    ) -> None:
        self.from_unit = from_unit
        self.to_unit = to_unit
        self.valid_targets = tuple(valid_targets)
        super().__init__(
            f"{ERR_MSG_UNSUPPORTED_CONVERSION}: {from_unit!r} -> {to_unit!r}; "
            f"valid targets: {', '.join(self.valid_targets)}",
            internal_details,
        )


class MalformedInputError(WxUnitsError):
    """Raised when a date/time string has the wrong shape or a field out of range."""

    def __init__(
        self,
        raw: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        self.raw = raw
        super().__init__(
            f"{ERR_MSG_MALFORMED_DATETIME}: {raw!r}",
            internal_details,
            wrapped,
        )


# Sanitized user-facing error message constants
ERR_MSG_UNSUPPORTED_CONVERSION = "unsupported conversion"
ERR_MSG_MALFORMED_DATETIME = "malformed date/time"
