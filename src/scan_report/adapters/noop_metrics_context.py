"""
No-op Metrics Context.

Used when telemetry is disabled. Every counter and timer it hands out is
a shared stateless instance that drops updates and reports zero.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Callable, Tuple, TypeVar

from scan_report.domain.scan_metrics import ScanMetrics
from scan_report.domain.units import MetricUnit, TimeUnit

T = TypeVar("T")


class NoopCounter:
    """Counter that ignores all increments."""

    @property
    def name(self) -> str:
        return "noop"

    @property
    def unit(self) -> MetricUnit:
        return MetricUnit.COUNT

    @property
    def value(self) -> int:
        return 0

    @property
    def is_noop(self) -> bool:
        return True

    def increment(self, amount: int = 1) -> None:
        pass


class NoopTimed:
    """Timing handle that records nothing."""

    def stop(self) -> None:
        pass

    def __enter__(self) -> "NoopTimed":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        pass


class NoopTimer:
    """Timer that ignores all samples."""

    @property
    def name(self) -> str:
        return "noop"

    @property
    def unit(self) -> TimeUnit:
        return TimeUnit.NANOSECONDS

    @property
    def count(self) -> int:
        return 0

    @property
    def total_duration_ns(self) -> int:
        return 0

    @property
    def is_noop(self) -> bool:
        return True

    def snapshot(self) -> Tuple[int, int]:
        return 0, 0

    def record(self, amount: int, unit: TimeUnit) -> None:
        pass

    def record_duration(self, duration: timedelta) -> None:
        pass

    def start(self) -> NoopTimed:
        return NOOP_TIMED

    def time(self, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        return func(*args, **kwargs)


NOOP_COUNTER = NoopCounter()
NOOP_TIMED = NoopTimed()
NOOP_TIMER = NoopTimer()


class NoopMetricsContext:
    """Metrics context whose counters and timers do nothing."""

    @property
    def include_untouched(self) -> bool:
        return False

    def counter(self, name: str, unit: MetricUnit = MetricUnit.COUNT) -> NoopCounter:
        return NOOP_COUNTER

    def timer(self, name: str, unit: TimeUnit = TimeUnit.NANOSECONDS) -> NoopTimer:
        return NOOP_TIMER


ScanMetrics.NOOP = ScanMetrics(NoopMetricsContext())
