"""pywxunits - Weather unit conversion and fast timestamp formatting."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pywxunits")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0.dev0"

from pywxunits._converter import (
    UnitConverter,
    beaufort_force,
    category_of,
    convert,
    units_of,
)
from pywxunits._errors import MalformedInputError, UnsupportedConversionError, WxUnitsError
from pywxunits._timestamps import TimeCodec, string_to_timestamp, timestamp_to_string
from pywxunits.offsets import FixedOffsetProvider, LocalOffsetProvider, OffsetProvider
from pywxunits.units import Category

__all__ = [
    "beaufort_force",
    "category_of",
    "convert",
    "string_to_timestamp",
    "timestamp_to_string",
    "units_of",
    "Category",
    "FixedOffsetProvider",
    "LocalOffsetProvider",
    "OffsetProvider",
    "TimeCodec",
    "UnitConverter",
    "MalformedInputError",
    "UnsupportedConversionError",
    "WxUnitsError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
