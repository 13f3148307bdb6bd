"""
Default Metrics Context.

Thread-safe in-memory counters and timers.
"""

from __future__ import annotations

import logging
import time
from datetime import timedelta
from threading import Lock
from typing import Any, Callable, Dict, Optional, Tuple, TypeVar

from scan_report.domain.units import MetricUnit, TimeUnit
from scan_report.json_util import LONG_MAX

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DefaultCounter:
    """Counter backed by a lock-protected integer."""

    def __init__(self, name: str, unit: MetricUnit) -> None:
        self._name = name
        self._unit = unit
        self._value = 0
        self._lock = Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def unit(self) -> MetricUnit:
        return self._unit

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    @property
    def is_noop(self) -> bool:
        return False

    def increment(self, amount: int = 1) -> None:
        """Add ``amount`` to the counter, saturating at the largest long."""
        with self._lock:
            self._value = min(self._value + amount, LONG_MAX)

    def __repr__(self) -> str:
        return f"DefaultCounter(name={self._name!r}, unit={self._unit.value}, value={self.value})"


class DefaultTimed:
    """In-flight timing started by DefaultTimer.start()."""

    def __init__(self, timer: "DefaultTimer") -> None:
        self._timer = timer
        self._start_ns = time.monotonic_ns()
        self._stopped = False

    def stop(self) -> None:
        if self._stopped:
            return
        self._stopped = True
        self._timer.record(time.monotonic_ns() - self._start_ns, TimeUnit.NANOSECONDS)

    def __enter__(self) -> "DefaultTimed":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.stop()


class DefaultTimer:
    """
    Timer accumulating a sample count and a total in nanoseconds.

    Every sample is converted to nanoseconds when it is recorded, so the
    unit a caller records in never affects the reported unit.
    Count and total saturate at the largest signed 64-bit value, the
    range the JSON form can carry.
    """

    def __init__(self, name: str, unit: TimeUnit = TimeUnit.NANOSECONDS) -> None:
        self._name = name
        self._unit = unit
        self._count = 0
        self._total_ns = 0
        self._lock = Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def unit(self) -> TimeUnit:
        return self._unit

    @property
    def count(self) -> int:
        with self._lock:
            return self._count

    @property
    def total_duration_ns(self) -> int:
        with self._lock:
            return self._total_ns

    @property
    def is_noop(self) -> bool:
        return False

    def snapshot(self) -> Tuple[int, int]:
        """Read (count, total_duration_ns) consistently."""
        with self._lock:
            return self._count, self._total_ns

    def record(self, amount: int, unit: TimeUnit) -> None:
        """Record one sample of ``amount`` ``unit``."""
        nanos = unit.to_nanos(amount)
        with self._lock:
            self._count = min(self._count + 1, LONG_MAX)
            self._total_ns = min(self._total_ns + nanos, LONG_MAX)

    def record_duration(self, duration: timedelta) -> None:
        """Record one sample given as a timedelta (microsecond precision)."""
        micros = (duration.days * 86_400 + duration.seconds) * 1_000_000 + duration.microseconds
        self.record(micros, TimeUnit.MICROSECONDS)

    def start(self) -> DefaultTimed:
        return DefaultTimed(self)

    def time(self, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Call ``func``; its duration is recorded even if it raises."""
        with self.start():
            return func(*args, **kwargs)

    def __repr__(self) -> str:
        count, total = self.snapshot()
        return f"DefaultTimer(name={self._name!r}, count={count}, total_duration_ns={total})"


class DefaultMetricsContext:
    """
    Active metrics context.

    Counters and timers are registered by name; asking twice for the
    same name returns the same accumulator.

    Args:
        include_untouched: Default for snapshots of metrics that were
            never updated (see ScanMetricsResult.from_scan_metrics)
    """

    def __init__(self, include_untouched: bool = True) -> None:
        self._include_untouched = include_untouched
        self._counters: Dict[str, DefaultCounter] = {}
        self._timers: Dict[str, DefaultTimer] = {}
        self._lock = Lock()

    @property
    def include_untouched(self) -> bool:
        return self._include_untouched

    def counter(self, name: str, unit: MetricUnit = MetricUnit.COUNT) -> DefaultCounter:
        """Get or create the counter registered under ``name``."""
        with self._lock:
            existing = self._counters.get(name)
            if existing is None:
                existing = DefaultCounter(name, unit)
                self._counters[name] = existing
                logger.debug(f"Registered counter {name} ({unit.value})")
            elif existing.unit != unit:
                logger.warning(
                    f"Counter {name} already registered with unit "
                    f"{existing.unit.value}, ignoring unit {unit.value}"
                )
            return existing

    def timer(self, name: str, unit: TimeUnit = TimeUnit.NANOSECONDS) -> DefaultTimer:
        """Get or create the timer registered under ``name``."""
        with self._lock:
            existing = self._timers.get(name)
            if existing is None:
                existing = DefaultTimer(name, unit)
                self._timers[name] = existing
                logger.debug(f"Registered timer {name}")
            elif existing.unit != unit:
                logger.warning(
                    f"Timer {name} already registered with unit "
                    f"{existing.unit.value}, ignoring unit {unit.value}"
                )
            return existing

    def get_counter(self, name: str) -> Optional[DefaultCounter]:
        """Return a registered counter without creating it."""
        with self._lock:
            return self._counters.get(name)

    def get_timer(self, name: str) -> Optional[DefaultTimer]:
        """Return a registered timer without creating it."""
        with self._lock:
            return self._timers.get(name)

    def get_metrics(self) -> Dict[str, Any]:
        """Summary of all registered metrics, keyed by name."""
        with self._lock:
            counters = list(self._counters.values())
            timers = list(self._timers.values())

        summary: Dict[str, Any] = {}
        for timer in timers:
            count, total = timer.snapshot()
            summary[timer.name] = {"count": count, "total_duration_ns": total}
        for counter in counters:
            summary[counter.name] = {"unit": counter.unit.value, "value": counter.value}
        return summary
