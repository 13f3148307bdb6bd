"""
Adapters Package - Metrics Context Implementations.

This package contains concrete implementations of the MetricsContext
protocol defined in the interfaces package.

Contexts:
    - DefaultMetricsContext: Thread-safe in-memory counters and timers
    - NoopMetricsContext: Discards every update (telemetry disabled)

Factory:
    - create_metrics_context: Chooses an implementation from config

Design Principles:
    - All adapters implement the MetricsContext protocol
    - Easily swappable via Dependency Injection
"""

from scan_report.adapters.default_metrics_context import (
    DefaultCounter,
    DefaultMetricsContext,
    DefaultTimer,
)
from scan_report.adapters.noop_metrics_context import (
    NOOP_COUNTER,
    NOOP_TIMER,
    NoopMetricsContext,
)
from scan_report.adapters.context_factory import create_metrics_context

__all__ = [
    "DefaultCounter",
    "DefaultMetricsContext",
    "DefaultTimer",
    "NOOP_COUNTER",
    "NOOP_TIMER",
    "NoopMetricsContext",
    "create_metrics_context",
]
