"""
Interfaces Layer - Abstract Protocols for Dependencies.

This package defines the abstract interfaces (using typing.Protocol) that
a scan engine uses to record telemetry. Following the Dependency Inversion
Principle, the engine depends on these abstractions, not on concrete
implementations.

Protocols:
    - MetricsContext: Factory for counters and timers
    - Counter: Unit-tagged monotonic accumulator
    - Timer: Duration accumulator (nanoseconds)
    - Timed: Handle for an in-flight timing

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Interface Segregation: Small, focused interfaces
    - All methods have clear contracts in docstrings
"""

from scan_report.interfaces.metrics_context import (
    Counter,
    MetricsContext,
    Timed,
    Timer,
)

__all__ = [
    "Counter",
    "MetricsContext",
    "Timed",
    "Timer",
]
