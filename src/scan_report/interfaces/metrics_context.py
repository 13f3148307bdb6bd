"""
Metrics Context Protocol.

Defines the abstract interface through which a scan engine creates its
counters and timers. The scan engine only ever talks to these protocols,
so telemetry can be switched between an active and a no-op
implementation without touching the engine.

The metrics context is responsible for:
    - Creating named counters (count or bytes)
    - Creating named timers (accumulated in nanoseconds)
    - Returning the same accumulator for a repeated name

Design Notes:
    - Updates never raise
    - Implementations must be safe under concurrent updates
    - No-op implementations report zero and flag themselves with is_noop
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Callable, Protocol, Tuple, TypeVar, runtime_checkable

from scan_report.domain.units import MetricUnit, TimeUnit

T = TypeVar("T")


@runtime_checkable
class Counter(Protocol):
    """Monotonically increasing accumulator with a unit tag."""

    @property
    def name(self) -> str:
        ...

    @property
    def unit(self) -> MetricUnit:
        ...

    @property
    def value(self) -> int:
        """Current accumulated value."""
        ...

    @property
    def is_noop(self) -> bool:
        ...

    def increment(self, amount: int = 1) -> None:
        """
        Add to the counter.

        Args:
            amount: Non-negative amount to add (not validated)
        """
        ...


@runtime_checkable
class Timed(Protocol):
    """Handle for a single in-flight timing."""

    def stop(self) -> None:
        """Record the elapsed time. Only the first call records."""
        ...

    def __enter__(self) -> "Timed":
        ...

    def __exit__(self, *exc_info: Any) -> None:
        ...


@runtime_checkable
class Timer(Protocol):
    """Accumulator of duration samples, kept in nanoseconds."""

    @property
    def name(self) -> str:
        ...

    @property
    def unit(self) -> TimeUnit:
        ...

    @property
    def count(self) -> int:
        """Number of recorded samples."""
        ...

    @property
    def total_duration_ns(self) -> int:
        """Sum of all recorded samples in nanoseconds."""
        ...

    @property
    def is_noop(self) -> bool:
        ...

    def snapshot(self) -> Tuple[int, int]:
        """Read (count, total_duration_ns) as one consistent pair."""
        ...

    def record(self, amount: int, unit: TimeUnit) -> None:
        """
        Record one duration sample.

        Args:
            amount: Duration expressed in ``unit``
            unit: Unit of ``amount``; converted to nanoseconds
        """
        ...

    def record_duration(self, duration: timedelta) -> None:
        """Record one sample given as a timedelta."""
        ...

    def start(self) -> Timed:
        """Start timing; the returned handle records on stop()."""
        ...

    def time(self, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Call ``func`` and record how long it took."""
        ...


@runtime_checkable
class MetricsContext(Protocol):
    """Factory for counters and timers."""

    @property
    def include_untouched(self) -> bool:
        """Whether snapshots keep metrics that were never updated."""
        ...

    def counter(self, name: str, unit: MetricUnit = MetricUnit.COUNT) -> Counter:
        """
        Get or create a counter.

        Args:
            name: Metric name (e.g., "result-data-files")
            unit: Unit tag of the counter

        Returns:
            The counter registered under ``name``
        """
        ...

    def timer(self, name: str, unit: TimeUnit = TimeUnit.NANOSECONDS) -> Timer:
        """
        Get or create a timer.

        Args:
            name: Metric name (e.g., "total-planning-duration")
            unit: Reporting unit of the timer

        Returns:
            The timer registered under ``name``
        """
        ...
