"""UTC offset providers for local-time conversion."""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class OffsetProvider(Protocol):
    """Minimal protocol for resolving a UTC offset at an instant."""

    def utc_offset(self, timestamp: int, /) -> int:
        """Seconds east of UTC in effect at ``timestamp``."""
        ...


class LocalOffsetProvider:
    """Offset of the process's local timezone, as reported by the OS.

    Daylight-saving transitions come from ``time.localtime``; the zone is
    read on every call and assumed not to change while the process runs.
    """

    def utc_offset(self, timestamp: int, /) -> int:
        return time.localtime(timestamp).tm_gmtoff

    def __repr__(self) -> str:
        return "LocalOffsetProvider()"


class FixedOffsetProvider:
    """Constant offset, e.g. ``FixedOffsetProvider(3600)`` for UTC+01:00."""

    def __init__(self, seconds: int = 0) -> None:
        self.seconds = seconds

    def utc_offset(self, timestamp: int, /) -> int:
        return self.seconds

    def __repr__(self) -> str:
        return f"FixedOffsetProvider({self.seconds})"
