"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class MetricsConfig(BaseModel):
    """Configuration for metrics collection."""

    enabled: bool = Field(
        default=True, description="Use an active metrics context (False: no-op)"
    )
    include_untouched: bool = Field(
        default=True,
        description="Report metrics of an active context even when still zero",
    )


class SerializationConfig(BaseModel):
    """Configuration for the JSON writer."""

    pretty: bool = Field(default=False, description="Pretty-print by default")


class ScanReportConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    metrics: MetricsConfig = Field(default_factory=MetricsConfig)
    serialization: SerializationConfig = Field(default_factory=SerializationConfig)

    model_config = {"populate_by_name": True}
