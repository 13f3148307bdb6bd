"""
Metrics context factory.

Picks the metrics context implementation from configuration.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from scan_report.adapters.default_metrics_context import DefaultMetricsContext
from scan_report.adapters.noop_metrics_context import NoopMetricsContext
from scan_report.config.models import MetricsConfig, ScanReportConfig

logger = logging.getLogger(__name__)


def create_metrics_context(
    config: Optional[Union[ScanReportConfig, MetricsConfig]] = None,
) -> Union[DefaultMetricsContext, NoopMetricsContext]:
    """
    Create a metrics context.

    Args:
        config: Root or metrics configuration; defaults to an enabled context

    Returns:
        DefaultMetricsContext if metrics are enabled, else NoopMetricsContext
    """
    if isinstance(config, ScanReportConfig):
        config = config.metrics
    metrics_config = config or MetricsConfig()

    if metrics_config.enabled:
        return DefaultMetricsContext(include_untouched=metrics_config.include_untouched)

    logger.debug("Metrics disabled, using no-op metrics context")
    return NoopMetricsContext()
