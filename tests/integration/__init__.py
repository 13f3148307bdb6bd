"""
Integration Tests - End-to-End Report Tests.

These tests verify that all components work together correctly:
metrics recorded concurrently, snapshotted into a report, encoded and
decoded again.

Test Files:
    - test_scan_report_round_trip.py: Full telemetry workflow
"""
