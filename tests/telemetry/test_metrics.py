# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests for the metrics emitted while resolving and routing violations."""
from typing import Annotated

import pytest

from krazo.binding import BindingResult
from krazo.binding.validate import KrazoValidated, bind_violations, get_metadata
from krazo.exceptions import MethodResolutionError
from krazo.params import QueryParam
from krazo.telemetry import metrics as krazo_metrics
from krazo.validation import (
    ConstraintViolation,
    MethodNode,
    ParameterNode,
    PropertyNode,
    PropertyPath,
)


@KrazoValidated()
class FilterForm:
    color: Annotated[str, QueryParam("color")]

    def __init__(self, color=""):
        self.color = color


class FilterController:
    def apply(self, color: Annotated[str, QueryParam("color")]) -> str:
        return color


def _property_violation():
    form = FilterForm()
    return ConstraintViolation(
        message="must not be blank",
        property_path=PropertyPath.of(
            MethodNode("apply", (FilterForm,)), ParameterNode("form", 0), PropertyNode("color")
        ),
        invalid_value="",
        root_bean=FilterController(),
        leaf_bean=form,
    )


def test_resolution_is_counted_by_shape_and_binding(recorded_metrics):
    get_metadata(_property_violation())

    assert recorded_metrics["violation_resolved_total"].calls == [
        (1, {"shape": "property", "bound": True})
    ]
    assert recorded_metrics["violation_unresolved_path_total"].calls == []


def test_unresolved_path_is_counted(recorded_metrics):
    get_metadata(ConstraintViolation(message="invalid", property_path=PropertyPath.of()))

    assert recorded_metrics["violation_resolved_total"].calls == [
        (1, {"shape": "unresolved", "bound": False})
    ]
    assert recorded_metrics["violation_unresolved_path_total"].calls == [(1, None)]


def test_method_mismatch_is_counted(recorded_metrics):
    violation = ConstraintViolation(
        message="invalid",
        property_path=PropertyPath.of(MethodNode("apply", (int,)), ParameterNode("color", 0)),
        root_bean=FilterController(),
    )

    with pytest.raises(MethodResolutionError):
        get_metadata(violation)

    assert recorded_metrics["violation_method_mismatch_total"].calls == [
        (1, {"method": "apply"})
    ]


def test_dispatch_latency_is_recorded(recorded_metrics):
    bind_violations([_property_violation()], BindingResult())

    [(duration_ms, attributes)] = recorded_metrics["binding_dispatch_latency_ms"].calls
    assert duration_ms >= 0
    assert attributes == {"has_bound": True, "has_unbound": False}


def test_failing_instrument_never_breaks_resolution(monkeypatch):
    """
    GIVEN: A metric instrument that raises on every call
    WHEN: A violation is resolved
    THEN: Resolution still returns metadata
    """

    class ExplodingCounter:
        def add(self, *_a, **_kw):
            raise RuntimeError("exporter down")

    monkeypatch.setattr(krazo_metrics, "violation_resolved_total", ExplodingCounter())

    metadata = get_metadata(_property_violation())

    assert metadata.mvc_bound_constraint is True
    assert metadata.get_param_name() == "color"
