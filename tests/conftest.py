"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from scan_report.adapters.default_metrics_context import DefaultMetricsContext
from scan_report.config.models import ScanReportConfig
from scan_report.domain.scan_metrics import ScanMetrics
from scan_report.domain.scan_report import ScanReport
from scan_report.domain.units import TimeUnit
from scan_report.expressions.expressions import always_true
from scan_report.schema.types import Schema, StringType, required

TABLE_NAME = "roundTripTableName"

PROJECTION_JSON = (
    '{"type":"struct","schema-id":0,"fields":'
    '[{"id":1,"name":"c1","required":true,"type":"string","doc":"c1"}]}'
)

EXPECTED_PRETTY_JSON = (
    "{\n"
    '  "table-name" : "roundTripTableName",\n'
    '  "snapshot-id" : 23,\n'
    '  "filter" : true,\n'
    '  "projection" : {\n'
    '    "type" : "struct",\n'
    '    "schema-id" : 0,\n'
    '    "fields" : [ {\n'
    '      "id" : 1,\n'
    '      "name" : "c1",\n'
    '      "required" : true,\n'
    '      "type" : "string",\n'
    '      "doc" : "c1"\n'
    "    } ]\n"
    "  },\n"
    '  "metrics" : {\n'
    '    "total-planning-duration" : {\n'
    '      "count" : 1,\n'
    '      "time-unit" : "nanoseconds",\n'
    '      "total-duration" : 600000000000\n'
    "    },\n"
    '    "result-data-files" : {\n'
    '      "unit" : "count",\n'
    '      "value" : 5\n'
    "    },\n"
    '    "result-delete-files" : {\n'
    '      "unit" : "count",\n'
    '      "value" : 5\n'
    "    },\n"
    '    "total-data-manifests" : {\n'
    '      "unit" : "count",\n'
    '      "value" : 5\n'
    "    },\n"
    '    "total-delete-manifests" : {\n'
    '      "unit" : "count",\n'
    '      "value" : 0\n'
    "    },\n"
    '    "scanned-data-manifests" : {\n'
    '      "unit" : "count",\n'
    '      "value" : 5\n'
    "    },\n"
    '    "skipped-data-manifests" : {\n'
    '      "unit" : "count",\n'
    '      "value" : 5\n'
    "    },\n"
    '    "total-file-size-in-bytes" : {\n'
    '      "unit" : "bytes",\n'
    '      "value" : 1069\n'
    "    },\n"
    '    "total-delete-file-size-in-bytes" : {\n'
    '      "unit" : "bytes",\n'
    '      "value" : 23\n'
    "    }\n"
    "  }\n"
    "}"
)

EXPECTED_NOOP_PRETTY_JSON = (
    "{\n"
    '  "table-name" : "roundTripTableName",\n'
    '  "snapshot-id" : 23,\n'
    '  "filter" : true,\n'
    '  "projection" : {\n'
    '    "type" : "struct",\n'
    '    "schema-id" : 0,\n'
    '    "fields" : [ {\n'
    '      "id" : 1,\n'
    '      "name" : "c1",\n'
    '      "required" : true,\n'
    '      "type" : "string",\n'
    '      "doc" : "c1"\n'
    "    } ]\n"
    "  },\n"
    '  "metrics" : { }\n'
    "}"
)


def populate_scan_metrics(scan_metrics: ScanMetrics) -> ScanMetrics:
    """Record the standard set of sample metrics (total-delete-manifests untouched)."""
    scan_metrics.total_planning_duration.record(10, TimeUnit.MINUTES)
    scan_metrics.result_data_files.increment(5)
    scan_metrics.result_delete_files.increment(5)
    scan_metrics.scanned_data_manifests.increment(5)
    scan_metrics.skipped_data_manifests.increment(5)
    scan_metrics.total_file_size_in_bytes.increment(1024)
    scan_metrics.total_data_manifests.increment(5)
    scan_metrics.total_file_size_in_bytes.increment(45)
    scan_metrics.total_delete_file_size_in_bytes.increment(23)
    return scan_metrics


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def default_config() -> ScanReportConfig:
    """Create default configuration."""
    return ScanReportConfig()


@pytest.fixture
def metrics_context() -> DefaultMetricsContext:
    """Create an active metrics context."""
    return DefaultMetricsContext()


@pytest.fixture
def projection() -> Schema:
    """Single required string column c1."""
    return Schema(required(1, "c1", StringType, "c1"))


@pytest.fixture
def scan_metrics(metrics_context: DefaultMetricsContext) -> ScanMetrics:
    """Scan metrics populated with the sample values."""
    return populate_scan_metrics(ScanMetrics(metrics_context))


@pytest.fixture
def scan_report(scan_metrics: ScanMetrics, projection: Schema) -> ScanReport:
    """Report for the sample scan."""
    return (
        ScanReport.builder()
        .with_table_name(TABLE_NAME)
        .with_projection(projection)
        .with_snapshot_id(23)
        .with_filter(always_true())
        .from_scan_metrics(scan_metrics)
        .build()
    )


@pytest.fixture
def noop_scan_report(projection: Schema) -> ScanReport:
    """Report built from no-op metrics."""
    return (
        ScanReport.builder()
        .with_table_name(TABLE_NAME)
        .with_projection(projection)
        .with_snapshot_id(23)
        .with_filter(always_true())
        .from_scan_metrics(ScanMetrics.NOOP)
        .build()
    )
