"""Telemetry package - OpenTelemetry metrics and tracing for krazo."""

from .metrics import (
    binding_dispatch_latency_ms,
    record_dispatch,
    record_method_mismatch,
    record_resolution,
    violation_method_mismatch_total,
    violation_resolved_total,
    violation_unresolved_path_total,
)
from .runtime import get_tracer, meter

__all__ = [
    "binding_dispatch_latency_ms",
    "get_tracer",
    "meter",
    "record_dispatch",
    "record_method_mismatch",
    "record_resolution",
    "violation_method_mismatch_total",
    "violation_resolved_total",
    "violation_unresolved_path_total",
]
