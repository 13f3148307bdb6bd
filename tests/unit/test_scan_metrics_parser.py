"""
Unit Tests for the metrics parsers.

Test Aspects Covered:
    ✅ Business Logic: Counter and timer wire form, declaration order
    ✅ Error Handling: Malformed entries, negative values, unknown units
    ✅ Edge Cases: Unknown entries ignored, time units normalized
"""

from __future__ import annotations

import pytest

from scan_report.domain.results import CounterResult, TimerResult
from scan_report.domain.scan_metrics import ScanMetrics, ScanMetricsResult
from scan_report.domain.units import MetricUnit
from scan_report.errors import InvalidScanReportError
from scan_report.json_util import LONG_MAX
from scan_report.serialization.metrics_parser import (
    CounterResultParser,
    ScanMetricsResultParser,
    TimerResultParser,
)


class TestCounterResultParser:
    """Test cases for counter entries."""

    def test_write(self) -> None:
        node = CounterResultParser.to_json_node(CounterResult(unit=MetricUnit.BYTES, value=23))

        assert node == {"unit": "bytes", "value": 23}

    def test_read(self) -> None:
        result = CounterResultParser.from_json("c", {"unit": "COUNT", "value": 5})

        assert result == CounterResult(unit=MetricUnit.COUNT, value=5)

    def test_non_object(self) -> None:
        with pytest.raises(InvalidScanReportError) as exc_info:
            CounterResultParser.from_json("result-data-files", 5)

        assert str(exc_info.value) == "Cannot parse counter from non-object: 5"
        assert exc_info.value.field == "result-data-files"

    def test_unknown_unit(self) -> None:
        with pytest.raises(InvalidScanReportError, match="Invalid unit: parsecs"):
            CounterResultParser.from_json("c", {"unit": "parsecs", "value": 1})

    def test_negative_value(self) -> None:
        with pytest.raises(InvalidScanReportError) as exc_info:
            CounterResultParser.from_json("c", {"unit": "count", "value": -1})

        assert str(exc_info.value) == "Cannot parse to an unsigned long value: value: -1"


class TestTimerResultParser:
    """Test cases for timer entries."""

    def test_write(self) -> None:
        node = TimerResultParser.to_json_node(TimerResult(count=1, total_duration_ns=10))

        assert node == {"count": 1, "time-unit": "nanoseconds", "total-duration": 10}

    def test_read_normalizes_unit(self) -> None:
        """
        SCENARIO: Timer written in milliseconds
        EXPECTED: Total converted to nanoseconds
        """
        # Act
        result = TimerResultParser.from_json(
            "t", {"count": 2, "time-unit": "milliseconds", "total-duration": 3}
        )

        # Assert
        assert result == TimerResult(count=2, total_duration_ns=3_000_000)

    def test_unknown_time_unit(self) -> None:
        with pytest.raises(InvalidScanReportError, match="Invalid time unit: fortnights"):
            TimerResultParser.from_json(
                "t", {"count": 1, "time-unit": "fortnights", "total-duration": 1}
            )

    def test_missing_count(self) -> None:
        with pytest.raises(InvalidScanReportError, match="Cannot parse missing long: count"):
            TimerResultParser.from_json("t", {"time-unit": "nanoseconds", "total-duration": 1})

    def test_non_object(self) -> None:
        with pytest.raises(InvalidScanReportError, match="Cannot parse timer from non-object"):
            TimerResultParser.from_json("t", [1])


class TestScanMetricsResultParser:
    """Test cases for the metrics object."""

    def test_write_in_declaration_order(self, scan_metrics: ScanMetrics) -> None:
        """
        SCENARIO: Write a full snapshot
        EXPECTED: Timer first, counters in declaration order
        """
        # Act
        node = ScanMetricsResultParser.to_json_node(
            ScanMetricsResult.from_scan_metrics(scan_metrics)
        )

        # Assert
        assert list(node)[:3] == [
            "total-planning-duration",
            "result-data-files",
            "result-delete-files",
        ]
        assert node["total-delete-manifests"] == {"unit": "count", "value": 0}

    def test_empty(self) -> None:
        assert ScanMetricsResultParser.to_json(ScanMetricsResult.empty()) == "{}"
        assert ScanMetricsResultParser.to_json(ScanMetricsResult.empty(), pretty=True) == "{ }"

    def test_round_trip(self, scan_metrics: ScanMetrics) -> None:
        # Arrange
        result = ScanMetricsResult.from_scan_metrics(scan_metrics)

        # Act
        parsed = ScanMetricsResultParser.from_json(ScanMetricsResultParser.to_json(result))

        # Assert
        assert parsed == result

    def test_unknown_entries_ignored(self) -> None:
        """
        SCENARIO: Object with an unknown metric
        EXPECTED: Known metrics read, unknown dropped
        """
        # Act
        result = ScanMetricsResultParser.from_json(
            {
                "result-data-files": {"unit": "count", "value": 1},
                "extra-metric": "extra-val",
            }
        )

        # Assert
        assert result.result_data_files == CounterResult(unit=MetricUnit.COUNT, value=1)
        assert len(list(result.present())) == 1

    def test_null(self) -> None:
        with pytest.raises(InvalidScanReportError) as exc_info:
            ScanMetricsResultParser.from_json(None)

        assert str(exc_info.value) == "Cannot parse scan metrics from null object"

    def test_non_object(self) -> None:
        with pytest.raises(InvalidScanReportError) as exc_info:
            ScanMetricsResultParser.from_json([])

        assert str(exc_info.value) == "Cannot parse scan metrics from non-object: []"

    def test_write_null(self) -> None:
        with pytest.raises(InvalidScanReportError, match="Invalid scan metrics: null"):
            ScanMetricsResultParser.to_json_node(None)

    def test_node_entry_point_does_not_parse_strings(self) -> None:
        """
        SCENARIO: Decoded node is a string holding a JSON object
        EXPECTED: Rejected as a non-object, string not parsed again
        """
        with pytest.raises(InvalidScanReportError) as exc_info:
            ScanMetricsResultParser.from_json_node("{}")

        assert str(exc_info.value) == 'Cannot parse scan metrics from non-object: "{}"'

    def test_saturated_timer_round_trip(self) -> None:
        """
        SCENARIO: Timer total at the largest long
        EXPECTED: Written and read back unchanged
        """
        # Arrange
        result = ScanMetricsResult(
            total_planning_duration=TimerResult(count=1, total_duration_ns=LONG_MAX)
        )

        # Act
        parsed = ScanMetricsResultParser.from_json(ScanMetricsResultParser.to_json(result))

        # Assert
        assert parsed == result
