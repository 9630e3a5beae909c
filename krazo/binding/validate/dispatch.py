# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Route a batch of violations to the binding result or the generic channel."""

from __future__ import annotations

import logging
import time
from typing import Iterable, List, Optional, Tuple

from ...config import raise_unbound_default
from ...exceptions import ConstraintViolationError
from ...telemetry.metrics import record_dispatch
from ...telemetry.runtime import get_tracer
from ...validation import ConstraintViolation
from ..result import BindingResult, ValidationError
from .violations import get_metadata

logger = logging.getLogger(__name__)


def bind_violations(
    violations: Iterable[ConstraintViolation],
    binding_result: BindingResult,
    *,
    raise_unbound: Optional[bool] = None,
) -> Tuple[ConstraintViolation, ...]:
    """Add MVC-bound violations to *binding_result* and handle the rest.

    :param violations: Violations from one validation call.
    :param binding_result: The binding result of the current request.
    :param raise_unbound: Raise :class:`ConstraintViolationError` for the
        violations that are not MVC bound. Defaults to the
        ``KRAZO_RAISE_UNBOUND`` environment flag (on when unset).
    :returns: The unbound violations, when they are not raised.
    :raises MethodResolutionError: a parameter violation names a method the
        root bean does not have.
    """

    effective_raise = raise_unbound if raise_unbound is not None else raise_unbound_default()
    pending = tuple(violations)
    bound: List[ValidationError] = []
    unbound: List[ConstraintViolation] = []

    started_at = time.perf_counter()
    with get_tracer("krazo.binding").start_as_current_span(
        "krazo.bind_violations",
        attributes={"krazo.violation.count": len(pending)},
    ) as span:
        for violation in pending:
            metadata = get_metadata(violation)
            if metadata.mvc_bound_constraint:
                bound.append(
                    ValidationError(metadata.get_param_name(), violation.message, violation)
                )
            else:
                unbound.append(violation)

        binding_result.add_validation_errors(bound)
        span.set_attribute("krazo.violation.bound", len(bound))
        span.set_attribute("krazo.violation.unbound", len(unbound))

    record_dispatch(started_at, len(bound), len(unbound))
    logger.debug(
        "Bound %d of %d violation(s) to the binding result", len(bound), len(pending)
    )

    if unbound and effective_raise:
        raise ConstraintViolationError(unbound)
    return tuple(unbound)


__all__ = ["bind_violations"]
