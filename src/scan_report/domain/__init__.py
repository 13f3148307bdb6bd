"""
Domain Layer - Scan Telemetry Values.

This package contains the core model of a scan report.

Entities:
    - ScanMetrics: Live counters and timers of one scan
    - ScanReport: Identity of a scan plus its metrics snapshot

Value Objects:
    - CounterResult / TimerResult: Frozen metric values
    - ScanMetricsResult: Frozen snapshot of ScanMetrics
    - MetricUnit / TimeUnit: Units of counters and timers

Design Principles:
    - Immutable where possible (frozen pydantic models)
    - Built through ScanReport.builder()
    - No infrastructure dependencies

Modules are imported directly (scan_report.domain.scan_report etc.);
this package does not re-export them to keep import order acyclic.
"""
