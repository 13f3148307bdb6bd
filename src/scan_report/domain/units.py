"""
Units for counters and timers.

Counter units are tags only. Time units carry their ratio to the
canonical unit (nanoseconds), which is what timers accumulate.
"""

from __future__ import annotations

from enum import Enum

from scan_report.errors import InvalidScanReportError


class MetricUnit(str, Enum):
    """Unit tag of a counter."""

    COUNT = "count"
    BYTES = "bytes"

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def from_display_name(cls, display_name: str) -> "MetricUnit":
        """Look up a unit by its wire name (case-insensitive)."""
        for unit in cls:
            if unit.value == display_name.lower():
                return unit
        raise InvalidScanReportError(f"Invalid unit: {display_name}")


_NANOS_PER_UNIT = {
    "nanoseconds": 1,
    "microseconds": 1_000,
    "milliseconds": 1_000_000,
    "seconds": 1_000_000_000,
    "minutes": 60 * 1_000_000_000,
    "hours": 60 * 60 * 1_000_000_000,
    "days": 24 * 60 * 60 * 1_000_000_000,
}


class TimeUnit(str, Enum):
    """Time unit of a recorded duration."""

    NANOSECONDS = "nanoseconds"
    MICROSECONDS = "microseconds"
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def nanos(self) -> int:
        """Number of nanoseconds in one unit."""
        return _NANOS_PER_UNIT[self.value]

    def to_nanos(self, amount: int) -> int:
        """Convert an amount of this unit to nanoseconds."""
        return amount * self.nanos

    @classmethod
    def from_display_name(cls, display_name: str) -> "TimeUnit":
        """Look up a time unit by its wire name (case-insensitive)."""
        for unit in cls:
            if unit.value == display_name.lower():
                return unit
        raise InvalidScanReportError(f"Invalid time unit: {display_name}")
