# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""OpenTelemetry handles shared by the krazo instruments.

Only the OpenTelemetry API is used; without a configured SDK every
instrument and span is a no-op.
"""

from __future__ import annotations

from opentelemetry import metrics, trace

meter = metrics.get_meter("krazo")


def get_tracer(name: str = "krazo") -> trace.Tracer:
    return trace.get_tracer(name)


__all__ = ["get_tracer", "meter"]
