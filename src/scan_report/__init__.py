"""
Scan Report - Structured Telemetry for Table Scans.

Captures performance telemetry for a single scan against a table
(files and manifests touched, planning time, bytes read) and converts
it to and from a canonical, strictly validated JSON document.

Architecture:
    - Ports & Adapters: metrics are created through a MetricsContext port
    - Immutable value objects (frozen pydantic models / dataclasses)
    - Builder for report construction
    - Configuration-driven behavior via YAML

Main Components:
    - interfaces: Counter, Timer and MetricsContext protocols
    - adapters: Default (thread-safe) and no-op metrics contexts
    - domain: ScanMetrics, ScanMetricsResult, ScanReport
    - expressions: Filter expressions and their JSON form
    - schema: Projection schema types and their JSON form
    - serialization: ScanReportParser (to_json / from_json)
    - config: Configuration models and loaders

Example:
    >>> from scan_report import DefaultMetricsContext, ScanMetrics, ScanReport
    >>> metrics = ScanMetrics(DefaultMetricsContext())
    >>> metrics.result_data_files.increment(5)
    >>> report = (
    ...     ScanReport.builder()
    ...     .with_table_name("db.events")
    ...     .with_snapshot_id(23)
    ...     .from_scan_metrics(metrics)
    ...     .build()
    ... )
    >>> print(to_json(report, pretty=True))

"""

import logging

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for scan_report.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import scan_report
        >>> scan_report.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("scan_report").setLevel(level)


from scan_report.errors import (  # noqa: E402
    IncompleteScanReportError,
    InvalidScanReportError,
    ScanReportError,
)
from scan_report.domain.units import MetricUnit, TimeUnit  # noqa: E402
from scan_report.adapters import (  # noqa: E402
    DefaultMetricsContext,
    NoopMetricsContext,
    create_metrics_context,
)
from scan_report.domain.scan_metrics import ScanMetrics, ScanMetricsResult  # noqa: E402
from scan_report.domain.scan_report import ScanReport, ScanReportBuilder  # noqa: E402
from scan_report.serialization.scan_report_parser import (  # noqa: E402
    ScanReportParser,
    from_json,
    to_json,
    to_json_node,
)

__all__ = [
    "configure_logging",
    "ScanReportError",
    "InvalidScanReportError",
    "IncompleteScanReportError",
    "MetricUnit",
    "TimeUnit",
    "DefaultMetricsContext",
    "NoopMetricsContext",
    "create_metrics_context",
    "ScanMetrics",
    "ScanMetricsResult",
    "ScanReport",
    "ScanReportBuilder",
    "ScanReportParser",
    "from_json",
    "to_json",
    "to_json_node",
]
