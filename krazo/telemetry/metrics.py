# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for krazo."""

from __future__ import annotations

import logging
import time

from .runtime import meter

logger = logging.getLogger(__name__)

violation_resolved_total = meter.create_counter(
    name="krazo.violation.resolved.total",
    description="Counts constraint violations resolved to metadata, by path shape and binding.",
    unit="1",
)

violation_unresolved_path_total = meter.create_counter(
    name="krazo.violation.unresolved_path.total",
    description="Counts violations whose property path matched no known shape.",
    unit="1",
)

violation_method_mismatch_total = meter.create_counter(
    name="krazo.violation.method_mismatch.total",
    description="Counts parameter violations whose method could not be found on the root bean.",
    unit="1",
)

binding_dispatch_latency_ms = meter.create_histogram(
    name="krazo.binding.dispatch.latency.ms",
    description="Time taken to route a batch of violations to the binding result.",
    unit="ms",
)


def record_resolution(shape: str, bound: bool) -> None:
    """Count one violation resolution; failures here never reach the caller."""

    try:
        violation_resolved_total.add(1, {"shape": shape, "bound": bound})
        if shape == "unresolved":
            violation_unresolved_path_total.add(1)
    except Exception:
        logger.debug("Failed to record violation resolution metric", exc_info=True)


def record_method_mismatch(method_name: str) -> None:
    try:
        violation_method_mismatch_total.add(1, {"method": method_name})
    except Exception:
        logger.debug("Failed to record method mismatch metric", exc_info=True)


def record_dispatch(started_at: float, bound: int, unbound: int) -> None:
    """Record dispatch latency; *started_at* comes from ``time.perf_counter()``."""

    duration_ms = (time.perf_counter() - started_at) * 1000.0
    try:
        binding_dispatch_latency_ms.record(
            duration_ms,
            {"has_bound": bound > 0, "has_unbound": unbound > 0},
        )
    except Exception:
        logger.debug("Failed to record dispatch latency metric", exc_info=True)


__all__ = [
    "binding_dispatch_latency_ms",
    "record_dispatch",
    "record_method_mismatch",
    "record_resolution",
    "violation_method_mismatch_total",
    "violation_resolved_total",
    "violation_unresolved_path_total",
]
