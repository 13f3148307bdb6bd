"""
Unit Tests for NoopMetricsContext and create_metrics_context.

Test Aspects Covered:
    ✅ Business Logic: Updates are discarded, values stay zero
    ✅ Configuration: Factory honours metrics.enabled
"""

from __future__ import annotations

from scan_report.adapters import create_metrics_context
from scan_report.adapters.default_metrics_context import DefaultMetricsContext
from scan_report.adapters.noop_metrics_context import (
    NOOP_COUNTER,
    NOOP_TIMER,
    NoopMetricsContext,
)
from scan_report.config.models import MetricsConfig, ScanReportConfig
from scan_report.domain.scan_metrics import ScanMetrics, ScanMetricsResult
from scan_report.domain.units import MetricUnit, TimeUnit
from scan_report.interfaces.metrics_context import MetricsContext


class TestNoopMetricsContext:
    """Test cases for the no-op context."""

    def test_counter_discards_increments(self) -> None:
        """
        SCENARIO: Increment a no-op counter
        EXPECTED: Value stays 0
        """
        # Arrange
        counter = NoopMetricsContext().counter("result-data-files", MetricUnit.COUNT)

        # Act
        counter.increment(5)

        # Assert
        assert counter.value == 0
        assert counter.is_noop is True

    def test_timer_discards_samples(self) -> None:
        """
        SCENARIO: Record on a no-op timer in every supported way
        EXPECTED: No samples, zero duration
        """
        # Arrange
        timer = NoopMetricsContext().timer("total-planning-duration")

        # Act
        timer.record(10, TimeUnit.MINUTES)
        with timer.start():
            pass
        result = timer.time(lambda: 42)

        # Assert
        assert result == 42
        assert timer.count == 0
        assert timer.total_duration_ns == 0
        assert timer.snapshot() == (0, 0)
        assert timer.is_noop is True

    def test_hands_out_shared_instances(self) -> None:
        """
        SCENARIO: Request several metrics
        EXPECTED: Same stateless singletons every time
        """
        # Arrange
        context = NoopMetricsContext()

        # Assert
        assert context.counter("a") is NOOP_COUNTER
        assert context.counter("b", MetricUnit.BYTES) is NOOP_COUNTER
        assert context.timer("c") is NOOP_TIMER
        assert isinstance(context, MetricsContext)


class TestCreateMetricsContext:
    """Test cases for the context factory."""

    def test_default_is_active(self) -> None:
        """
        SCENARIO: No configuration given
        EXPECTED: Active context
        """
        assert isinstance(create_metrics_context(), DefaultMetricsContext)

    def test_disabled_config_gives_noop(self) -> None:
        """
        SCENARIO: metrics.enabled is false
        EXPECTED: No-op context
        """
        # Arrange
        config = ScanReportConfig(metrics=MetricsConfig(enabled=False))

        # Act
        context = create_metrics_context(config)

        # Assert
        assert isinstance(context, NoopMetricsContext)

    def test_accepts_metrics_section(self) -> None:
        """
        SCENARIO: Only the metrics section is passed
        EXPECTED: Section honoured
        """
        assert isinstance(
            create_metrics_context(MetricsConfig(enabled=True)), DefaultMetricsContext
        )

    def test_include_untouched_reaches_context(self) -> None:
        """
        SCENARIO: metrics.include_untouched is false
        EXPECTED: Context carries the setting, snapshots drop zero metrics
        """
        # Arrange
        config = ScanReportConfig(metrics=MetricsConfig(include_untouched=False))
        context = create_metrics_context(config)
        scan_metrics = ScanMetrics(context)
        scan_metrics.result_data_files.increment(2)

        # Act
        result = ScanMetricsResult.from_scan_metrics(scan_metrics)

        # Assert
        assert context.include_untouched is False
        assert result.result_data_files.value == 2
        assert result.total_delete_manifests is None
        assert result.total_planning_duration is None

    def test_noop_sentinel_uses_noop_context(self) -> None:
        assert isinstance(ScanMetrics.NOOP.context, NoopMetricsContext)
