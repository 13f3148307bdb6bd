"""
Scan Report entity.

A ScanReport is the immutable record of one scan: which table and snapshot
were scanned, with which filter and projection, and the metrics snapshot
taken when the scan finished. Reports are created through
ScanReport.builder().
"""

from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import BaseModel, Field

from scan_report.domain.scan_metrics import ScanMetrics, ScanMetricsResult
from scan_report.errors import IncompleteScanReportError
from scan_report.expressions.expressions import Expression, always_true
from scan_report.json_util import LONG_MAX, LONG_MIN
from scan_report.schema.types import Schema

logger = logging.getLogger(__name__)


class ScanReport(BaseModel):
    """Immutable report of a single table scan."""

    table_name: str = Field(..., min_length=1, strict=True)
    snapshot_id: int = Field(..., ge=LONG_MIN, le=LONG_MAX, strict=True)
    filter: Expression = Field(default_factory=always_true)
    projection: Schema = Field(default_factory=Schema)
    scan_metrics: ScanMetricsResult = Field(default_factory=ScanMetricsResult.empty)

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @staticmethod
    def builder() -> "ScanReportBuilder":
        return ScanReportBuilder()


class ScanReportBuilder:
    """
    Fluent builder for ScanReport.

    table_name and snapshot_id are required. The filter defaults to
    always-true, the projection to an empty schema and the metrics to an
    empty snapshot.

    Example:
        >>> report = (
        ...     ScanReport.builder()
        ...     .with_table_name("db.events")
        ...     .with_snapshot_id(23)
        ...     .from_scan_metrics(scan_metrics)
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        self._table_name: Optional[str] = None
        self._snapshot_id: Optional[int] = None
        self._filter: Expression = always_true()
        self._projection: Schema = Schema()
        self._scan_metrics: ScanMetricsResult = ScanMetricsResult.empty()

    def with_table_name(self, table_name: str) -> "ScanReportBuilder":
        self._table_name = table_name
        return self

    def with_snapshot_id(self, snapshot_id: int) -> "ScanReportBuilder":
        self._snapshot_id = snapshot_id
        return self

    def with_filter(self, filter: Expression) -> "ScanReportBuilder":
        self._filter = filter
        return self

    def with_projection(self, projection: Schema) -> "ScanReportBuilder":
        self._projection = projection
        return self

    def from_scan_metrics(
        self,
        scan_metrics: ScanMetrics,
        include_untouched: Optional[bool] = None,
    ) -> "ScanReportBuilder":
        """
        Snapshot live scan metrics into the report.

        The snapshot is taken now; later updates to ``scan_metrics`` do not
        reach the report. ``include_untouched`` defaults to the setting of
        the metrics context.
        """
        self._scan_metrics = ScanMetricsResult.from_scan_metrics(
            scan_metrics, include_untouched=include_untouched
        )
        return self

    def with_scan_metrics(self, scan_metrics: ScanMetricsResult) -> "ScanReportBuilder":
        self._scan_metrics = scan_metrics
        return self

    def build(self) -> ScanReport:
        """
        Build the report.

        Raises:
            IncompleteScanReportError: If table_name or snapshot_id is unset
            ValueError: If a supplied attribute is invalid
        """
        missing: List[str] = []
        if self._table_name is None:
            missing.append("table_name")
        if self._snapshot_id is None:
            missing.append("snapshot_id")
        if missing:
            raise IncompleteScanReportError(
                "Cannot build ScanReport, some of required attributes are not set "
                f"[{', '.join(missing)}]"
            )

        report = ScanReport(
            table_name=self._table_name,
            snapshot_id=self._snapshot_id,
            filter=self._filter,
            projection=self._projection,
            scan_metrics=self._scan_metrics,
        )
        logger.debug(
            f"Built scan report: table={report.table_name}, "
            f"snapshot_id={report.snapshot_id}"
        )
        return report
