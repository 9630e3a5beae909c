"""Shared fixtures for the krazo test-suite."""
from __future__ import annotations

from typing import Any, List, Optional, Tuple

import pytest

from krazo.telemetry import metrics as krazo_metrics


class RecordingInstrument:
    """Stands in for an OpenTelemetry counter or histogram and keeps every call."""

    def __init__(self) -> None:
        self.calls: List[Tuple[Any, Optional[dict]]] = []

    def add(self, amount, attributes=None):  # noqa: D401
        self.calls.append((amount, attributes))

    def record(self, amount, attributes=None):  # noqa: D401
        self.calls.append((amount, attributes))


@pytest.fixture()
def recorded_metrics(monkeypatch):
    """Replace the krazo instruments with recorders; returns them by name."""

    instruments = {
        name: RecordingInstrument()
        for name in (
            "violation_resolved_total",
            "violation_unresolved_path_total",
            "violation_method_mismatch_total",
            "binding_dispatch_latency_ms",
        )
    }
    for name, instrument in instruments.items():
        monkeypatch.setattr(krazo_metrics, name, instrument)
    return instruments


@pytest.fixture(autouse=True)
def _clean_krazo_env(monkeypatch):
    monkeypatch.delenv("KRAZO_RAISE_UNBOUND", raising=False)
    monkeypatch.delenv("KRAZO_WARN_UNCONSUMED", raising=False)
