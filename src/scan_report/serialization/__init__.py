"""
Serialization Package - JSON Wire Format.

Parsers:
    - ScanReportParser: Whole report (to_json / from_json)
    - ScanMetricsResultParser: The "metrics" object
    - CounterResultParser / TimerResultParser: Single metric entries

Design Principles:
    - Deterministic output (fixed key order, Jackson-compatible layout)
    - Strict on known fields, unknown fields ignored
    - Stable error messages
"""

from scan_report.serialization.metrics_parser import (
    CounterResultParser,
    ScanMetricsResultParser,
    TimerResultParser,
)
from scan_report.serialization.scan_report_parser import (
    ScanReportParser,
    from_json,
    to_json,
    to_json_node,
)

__all__ = [
    "CounterResultParser",
    "ScanMetricsResultParser",
    "ScanReportParser",
    "TimerResultParser",
    "from_json",
    "to_json",
    "to_json_node",
]
