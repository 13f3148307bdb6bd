"""
Exception hierarchy for scan reports.

All failures are raised synchronously and carry a human-readable message.
Parse messages are part of the wire compatibility contract and are kept
stable.
"""

from __future__ import annotations

from typing import Optional


class ScanReportError(Exception):
    """Base class for scan report errors."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class InvalidScanReportError(ScanReportError, ValueError):
    """Raised when a scan report cannot be parsed or serialized."""


class IncompleteScanReportError(ScanReportError, ValueError):
    """Raised when a ScanReport is built without its required attributes."""
