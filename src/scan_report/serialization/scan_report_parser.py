"""
Scan Report Parser - JSON encode/decode of ScanReport.

Document layout (keys in this order):

    {
      "table-name" : string,
      "snapshot-id" : integer,
      "filter" : <expression>,
      "projection" : <schema>,
      "metrics" : { "<metric>" : {...}, ... }
    }

Decoding is strict about the fields it knows and ignores everything else,
so documents written by newer producers still parse. Error messages are
stable; consumers match on them.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, NamedTuple, Optional, Union

from scan_report import json_util
from scan_report.config.models import ScanReportConfig
from scan_report.domain.scan_report import ScanReport
from scan_report.errors import InvalidScanReportError
from scan_report.expressions.expressions import always_true
from scan_report.expressions.parser import ExpressionParser
from scan_report.schema.parser import SchemaParser
from scan_report.serialization.metrics_parser import ScanMetricsResultParser

logger = logging.getLogger(__name__)

TABLE_NAME = "table-name"
SNAPSHOT_ID = "snapshot-id"
FILTER = "filter"
PROJECTION = "projection"
METRICS = "metrics"


class ReportField(NamedTuple):
    """A top-level field: wire key, report attribute and its reader."""

    key: str
    attribute: str
    read: Callable[[str, Dict[str, Any]], Any]


def _read_filter(key: str, node: Dict[str, Any]) -> Any:
    if key not in node:
        return always_true()
    return ExpressionParser.from_json_node(node[key])


def _read_table_name(key: str, node: Dict[str, Any]) -> str:
    table_name = json_util.get_string(key, node)
    if not table_name:
        raise InvalidScanReportError(
            f"Invalid table name: {json_util.to_literal(table_name)}", field=key
        )
    return table_name


# Processed in order; the first failing field determines the error.
REPORT_FIELDS = (
    ReportField(TABLE_NAME, "table_name", _read_table_name),
    ReportField(SNAPSHOT_ID, "snapshot_id", json_util.get_long),
    ReportField(FILTER, "filter", _read_filter),
    ReportField(
        PROJECTION,
        "projection",
        lambda key, node: SchemaParser.from_json_node(json_util.get(key, node)),
    ),
    ReportField(
        METRICS,
        "scan_metrics",
        lambda key, node: ScanMetricsResultParser.from_json_node(json_util.get(key, node)),
    ),
)


class ScanReportParser:
    """
    Bidirectional JSON codec for ScanReport.

    Args:
        pretty: Default layout used by to_json when no flag is passed
    """

    def __init__(self, pretty: bool = False) -> None:
        self.pretty = pretty

    @classmethod
    def from_config(cls, config: ScanReportConfig) -> "ScanReportParser":
        return cls(pretty=config.serialization.pretty)

    def to_json(self, report: ScanReport, pretty: Optional[bool] = None) -> str:
        """
        Encode a report.

        Args:
            report: Report to encode
            pretty: Pretty-print; defaults to this parser's setting

        Raises:
            InvalidScanReportError: If report is None
        """
        layout = self.pretty if pretty is None else pretty
        return json_util.generate(self.to_json_node(report), pretty=layout)

    def to_json_node(self, report: ScanReport) -> Dict[str, Any]:
        """Encode a report to a dict whose key order is the wire order."""
        if report is None:
            raise InvalidScanReportError("Invalid scan report: null")

        return {
            TABLE_NAME: report.table_name,
            SNAPSHOT_ID: report.snapshot_id,
            FILTER: ExpressionParser.to_json_node(report.filter),
            PROJECTION: SchemaParser.to_json_node(report.projection),
            METRICS: ScanMetricsResultParser.to_json_node(report.scan_metrics),
        }

    def from_json(self, json: Union[str, bytes, Dict[str, Any], None]) -> ScanReport:
        """
        Decode a report from a JSON string or a decoded JSON object.

        Raises:
            InvalidScanReportError: If the document is not a valid scan report
        """
        if json is None:
            raise InvalidScanReportError("Cannot parse scan report from null object")

        try:
            if isinstance(json, (str, bytes, bytearray)):
                json = json_util.parse(json)
                if json is None:
                    raise InvalidScanReportError(
                        "Cannot parse scan report from null object"
                    )
            if not isinstance(json, dict):
                raise InvalidScanReportError(
                    f"Cannot parse scan report from non-object: {json_util.to_literal(json)}"
                )

            values = {field.attribute: field.read(field.key, json) for field in REPORT_FIELDS}
        except InvalidScanReportError as exc:
            logger.debug(f"Rejected scan report: {exc.message}")
            raise

        return (
            ScanReport.builder()
            .with_table_name(values["table_name"])
            .with_snapshot_id(values["snapshot_id"])
            .with_filter(values["filter"])
            .with_projection(values["projection"])
            .with_scan_metrics(values["scan_metrics"])
            .build()
        )


_DEFAULT_PARSER = ScanReportParser()


def to_json(report: ScanReport, pretty: bool = False) -> str:
    """Encode a report (compact unless ``pretty``)."""
    return _DEFAULT_PARSER.to_json(report, pretty)


def to_json_node(report: ScanReport) -> Dict[str, Any]:
    return _DEFAULT_PARSER.to_json_node(report)


def from_json(json: Union[str, bytes, Dict[str, Any], None]) -> ScanReport:
    """Decode a report from a JSON string or decoded JSON object."""
    return _DEFAULT_PARSER.from_json(json)
