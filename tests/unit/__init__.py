"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_metrics_context.py: Default counters, timers and context
    - test_noop_metrics_context.py: No-op context
    - test_scan_metrics.py: Live metrics and snapshots
    - test_scan_report_builder.py: ScanReport construction
    - test_json_util.py: Typed getters and the JSON writer
    - test_expression_parser.py: Filter expression JSON form
    - test_schema_parser.py: Projection schema JSON form
    - test_scan_metrics_parser.py: Metrics object JSON form
    - test_scan_report_parser.py: Report encode/decode
    - test_config_loader.py: Configuration loading/validation
"""
