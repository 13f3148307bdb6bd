"""
Configuration Package - Models and Loaders.

This package handles the configuration of scan report telemetry:
    - Pydantic models for type-safe configuration
    - YAML loader with validation and overrides

Configuration Structure:
    - ScanReportConfig: Root configuration object
    - MetricsConfig: Active vs no-op metrics, zero-value reporting
    - SerializationConfig: JSON writer defaults

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
"""

from scan_report.config.loader import ConfigLoader, load_config
from scan_report.config.models import (
    MetricsConfig,
    ScanReportConfig,
    SerializationConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "MetricsConfig",
    "ScanReportConfig",
    "SerializationConfig",
]
