"""
Value Objects for metric snapshots.

A result is the frozen value of a counter or timer at the moment a scan
report was built.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Optional

from pydantic import BaseModel, Field

from scan_report.domain.units import MetricUnit, TimeUnit
from scan_report.interfaces.metrics_context import Counter, Timer
from scan_report.json_util import LONG_MAX


class CounterResult(BaseModel):
    """Snapshot of a counter."""

    unit: MetricUnit
    value: int = Field(ge=0, le=LONG_MAX)

    model_config = {"frozen": True}

    @classmethod
    def from_counter(
        cls, counter: Counter, include_untouched: bool = True
    ) -> Optional["CounterResult"]:
        """
        Snapshot a counter.

        Returns None for no-op counters, and for counters that were never
        incremented when ``include_untouched`` is False.
        """
        if counter.is_noop:
            return None
        value = counter.value
        if value == 0 and not include_untouched:
            return None
        return cls(unit=counter.unit, value=value)


class TimerResult(BaseModel):
    """Snapshot of a timer. Durations are always in nanoseconds."""

    count: int = Field(ge=0, le=LONG_MAX)
    total_duration_ns: int = Field(ge=0, le=LONG_MAX)

    model_config = {"frozen": True}

    @property
    def time_unit(self) -> TimeUnit:
        return TimeUnit.NANOSECONDS

    @property
    def total_duration(self) -> timedelta:
        """Total duration (truncated to microseconds)."""
        return timedelta(microseconds=self.total_duration_ns // 1_000)

    @classmethod
    def from_timer(
        cls, timer: Timer, include_untouched: bool = True
    ) -> Optional["TimerResult"]:
        """
        Snapshot a timer.

        Returns None for no-op timers, and for timers without samples when
        ``include_untouched`` is False.
        """
        if timer.is_noop:
            return None
        count, total = timer.snapshot()
        if count == 0 and not include_untouched:
            return None
        return cls(count=count, total_duration_ns=total)
