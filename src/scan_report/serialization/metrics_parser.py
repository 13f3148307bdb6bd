"""
Scan Metrics Parser - JSON form of ScanMetricsResult.

Counters are written as ``{"unit": ..., "value": ...}`` and timers as
``{"count": ..., "time-unit": "nanoseconds", "total-duration": ...}``.
Only present metrics are written, in declaration order. Unknown entries
are ignored on read.
"""

from __future__ import annotations

from typing import Any, Dict, Union

from scan_report import json_util
from scan_report.domain.results import CounterResult, TimerResult
from scan_report.domain.scan_metrics import (
    SCAN_METRIC_DEFINITIONS,
    MetricKind,
    MetricResult,
    ScanMetricsResult,
)
from scan_report.domain.units import MetricUnit, TimeUnit
from scan_report.errors import InvalidScanReportError

UNIT = "unit"
VALUE = "value"
COUNT = "count"
TIME_UNIT = "time-unit"
TOTAL_DURATION = "total-duration"


class CounterResultParser:
    @staticmethod
    def to_json_node(counter: CounterResult) -> Dict[str, Any]:
        return {UNIT: counter.unit.display_name, VALUE: counter.value}

    @staticmethod
    def from_json(key: str, node: Any) -> CounterResult:
        if not isinstance(node, dict):
            raise InvalidScanReportError(
                f"Cannot parse counter from non-object: {json_util.to_literal(node)}",
                field=key,
            )
        unit = MetricUnit.from_display_name(json_util.get_string(UNIT, node))
        value = json_util.get_long(VALUE, node)
        _check_unsigned(VALUE, value)
        return CounterResult(unit=unit, value=value)


class TimerResultParser:
    @staticmethod
    def to_json_node(timer: TimerResult) -> Dict[str, Any]:
        return {
            COUNT: timer.count,
            TIME_UNIT: timer.time_unit.display_name,
            TOTAL_DURATION: timer.total_duration_ns,
        }

    @staticmethod
    def from_json(key: str, node: Any) -> TimerResult:
        if not isinstance(node, dict):
            raise InvalidScanReportError(
                f"Cannot parse timer from non-object: {json_util.to_literal(node)}",
                field=key,
            )
        count = json_util.get_long(COUNT, node)
        _check_unsigned(COUNT, count)
        unit = TimeUnit.from_display_name(json_util.get_string(TIME_UNIT, node))
        duration = json_util.get_long(TOTAL_DURATION, node)
        _check_unsigned(TOTAL_DURATION, duration)
        nanos = unit.to_nanos(duration)
        if nanos > json_util.LONG_MAX:
            raise InvalidScanReportError(
                f"Cannot convert {TOTAL_DURATION} to nanoseconds: "
                f"{duration} {unit.display_name}",
                field=TOTAL_DURATION,
            )
        return TimerResult(count=count, total_duration_ns=nanos)


class ScanMetricsResultParser:
    """Converts ScanMetricsResult to and from the ``metrics`` object."""

    @staticmethod
    def to_json(result: ScanMetricsResult, pretty: bool = False) -> str:
        return json_util.generate(ScanMetricsResultParser.to_json_node(result), pretty)

    @staticmethod
    def to_json_node(result: ScanMetricsResult) -> Dict[str, Any]:
        if result is None:
            raise InvalidScanReportError("Invalid scan metrics: null")

        node: Dict[str, Any] = {}
        for definition, metric in result.present():
            if isinstance(metric, TimerResult):
                node[definition.key] = TimerResultParser.to_json_node(metric)
            else:
                node[definition.key] = CounterResultParser.to_json_node(metric)
        return node

    @staticmethod
    def from_json(json: Union[str, bytes, Any]) -> ScanMetricsResult:
        """
        Parse the ``metrics`` object.

        Raises:
            InvalidScanReportError: If the object or one of its known
                entries is malformed
        """
        if isinstance(json, (str, bytes, bytearray)):
            json = json_util.parse(json)
        return ScanMetricsResultParser.from_json_node(json)

    @staticmethod
    def from_json_node(node: Any) -> ScanMetricsResult:
        """Parse the ``metrics`` object from an already decoded JSON value."""
        if node is None:
            raise InvalidScanReportError("Cannot parse scan metrics from null object")
        if not isinstance(node, dict):
            raise InvalidScanReportError(
                f"Cannot parse scan metrics from non-object: {json_util.to_literal(node)}"
            )

        values: Dict[str, MetricResult] = {}
        for definition in SCAN_METRIC_DEFINITIONS:
            if definition.key not in node:
                continue
            entry = node[definition.key]
            if definition.kind is MetricKind.TIMER:
                values[definition.attribute] = TimerResultParser.from_json(
                    definition.key, entry
                )
            else:
                values[definition.attribute] = CounterResultParser.from_json(
                    definition.key, entry
                )
        return ScanMetricsResult(**values)


def _check_unsigned(key: str, value: int) -> None:
    if value < 0:
        raise InvalidScanReportError(
            f"Cannot parse to an unsigned long value: {key}: {value}", field=key
        )
