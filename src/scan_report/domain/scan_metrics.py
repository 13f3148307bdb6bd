"""
Scan Metrics - the fixed set of metrics a scan reports.

ScanMetrics is the live set of counters and timers a scan engine updates
while planning. ScanMetricsResult is its immutable snapshot, which is what
a ScanReport carries and what gets serialized.

The metric set is declared once in SCAN_METRIC_DEFINITIONS. Its order is
the order of the keys in the serialized "metrics" object.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, Iterator, Optional, Tuple, Union

from pydantic import BaseModel

from scan_report.domain.results import CounterResult, TimerResult
from scan_report.domain.units import MetricUnit, TimeUnit
from scan_report.interfaces.metrics_context import Counter, MetricsContext, Timer

logger = logging.getLogger(__name__)

MetricResult = Union[CounterResult, TimerResult]


class MetricKind(Enum):
    """Accumulator type of a metric."""

    COUNTER = "counter"
    TIMER = "timer"


@dataclass(frozen=True)
class MetricDefinition:
    """One entry of the fixed metric set."""

    key: str
    attribute: str
    kind: MetricKind
    unit: Union[MetricUnit, TimeUnit]


SCAN_METRIC_DEFINITIONS: Tuple[MetricDefinition, ...] = (
    MetricDefinition(
        "total-planning-duration", "total_planning_duration",
        MetricKind.TIMER, TimeUnit.NANOSECONDS,
    ),
    MetricDefinition(
        "result-data-files", "result_data_files", MetricKind.COUNTER, MetricUnit.COUNT
    ),
    MetricDefinition(
        "result-delete-files", "result_delete_files", MetricKind.COUNTER, MetricUnit.COUNT
    ),
    MetricDefinition(
        "total-data-manifests", "total_data_manifests", MetricKind.COUNTER, MetricUnit.COUNT
    ),
    MetricDefinition(
        "total-delete-manifests", "total_delete_manifests",
        MetricKind.COUNTER, MetricUnit.COUNT,
    ),
    MetricDefinition(
        "scanned-data-manifests", "scanned_data_manifests",
        MetricKind.COUNTER, MetricUnit.COUNT,
    ),
    MetricDefinition(
        "skipped-data-manifests", "skipped_data_manifests",
        MetricKind.COUNTER, MetricUnit.COUNT,
    ),
    MetricDefinition(
        "total-file-size-in-bytes", "total_file_size_in_bytes",
        MetricKind.COUNTER, MetricUnit.BYTES,
    ),
    MetricDefinition(
        "total-delete-file-size-in-bytes", "total_delete_file_size_in_bytes",
        MetricKind.COUNTER, MetricUnit.BYTES,
    ),
)


class ScanMetrics:
    """
    Live metrics of one scan.

    Every metric of SCAN_METRIC_DEFINITIONS is created through the given
    context when the object is constructed. Bound to a no-op context (see
    ScanMetrics.NOOP) all updates are discarded.
    """

    # bound by scan_report.adapters.noop_metrics_context
    NOOP: ClassVar["ScanMetrics"]

    def __init__(self, context: MetricsContext) -> None:
        self._context = context
        self._metrics: Dict[str, Union[Counter, Timer]] = {}
        for definition in SCAN_METRIC_DEFINITIONS:
            if definition.kind is MetricKind.TIMER:
                metric = context.timer(definition.key, definition.unit)
            else:
                metric = context.counter(definition.key, definition.unit)
            self._metrics[definition.attribute] = metric

    @property
    def context(self) -> MetricsContext:
        return self._context

    @property
    def total_planning_duration(self) -> Timer:
        return self._metrics["total_planning_duration"]

    @property
    def result_data_files(self) -> Counter:
        return self._metrics["result_data_files"]

    @property
    def result_delete_files(self) -> Counter:
        return self._metrics["result_delete_files"]

    @property
    def total_data_manifests(self) -> Counter:
        return self._metrics["total_data_manifests"]

    @property
    def total_delete_manifests(self) -> Counter:
        return self._metrics["total_delete_manifests"]

    @property
    def scanned_data_manifests(self) -> Counter:
        return self._metrics["scanned_data_manifests"]

    @property
    def skipped_data_manifests(self) -> Counter:
        return self._metrics["skipped_data_manifests"]

    @property
    def total_file_size_in_bytes(self) -> Counter:
        return self._metrics["total_file_size_in_bytes"]

    @property
    def total_delete_file_size_in_bytes(self) -> Counter:
        return self._metrics["total_delete_file_size_in_bytes"]

    def metric(self, definition: MetricDefinition) -> Union[Counter, Timer]:
        """Accumulator for a metric definition."""
        return self._metrics[definition.attribute]


class ScanMetricsResult(BaseModel):
    """
    Immutable snapshot of ScanMetrics.

    A metric set to None is absent: it is left out of the serialized form
    and reads back as None.
    """

    total_planning_duration: Optional[TimerResult] = None
    result_data_files: Optional[CounterResult] = None
    result_delete_files: Optional[CounterResult] = None
    total_data_manifests: Optional[CounterResult] = None
    total_delete_manifests: Optional[CounterResult] = None
    scanned_data_manifests: Optional[CounterResult] = None
    skipped_data_manifests: Optional[CounterResult] = None
    total_file_size_in_bytes: Optional[CounterResult] = None
    total_delete_file_size_in_bytes: Optional[CounterResult] = None

    model_config = {"frozen": True}

    @classmethod
    def empty(cls) -> "ScanMetricsResult":
        """Snapshot with every metric absent."""
        return cls()

    @classmethod
    def from_scan_metrics(
        cls,
        scan_metrics: ScanMetrics,
        include_untouched: Optional[bool] = None,
    ) -> "ScanMetricsResult":
        """
        Snapshot live scan metrics.

        Args:
            scan_metrics: Live metrics to copy
            include_untouched: Keep metrics of an active context whose value
                is still zero; defaults to the context setting. No-op
                metrics are always absent.

        Returns:
            Snapshot independent of further updates to ``scan_metrics``
        """
        if include_untouched is None:
            include_untouched = scan_metrics.context.include_untouched

        values: Dict[str, MetricResult] = {}
        for definition in SCAN_METRIC_DEFINITIONS:
            metric = scan_metrics.metric(definition)
            if definition.kind is MetricKind.TIMER:
                result = TimerResult.from_timer(metric, include_untouched)
            else:
                result = CounterResult.from_counter(metric, include_untouched)
            if result is not None:
                values[definition.attribute] = result

        logger.debug(f"Captured {len(values)} scan metrics")
        return cls(**values)

    def get(self, definition: MetricDefinition) -> Optional[MetricResult]:
        return getattr(self, definition.attribute)

    def present(self) -> Iterator[Tuple[MetricDefinition, MetricResult]]:
        """Present metrics in declaration order."""
        for definition in SCAN_METRIC_DEFINITIONS:
            result = self.get(definition)
            if result is not None:
                yield definition, result
