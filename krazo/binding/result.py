# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""The MVC binding-result channel.

A controller inspects the :class:`BindingResult` of its request to render
validation errors itself instead of failing the request.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from ..config import warn_unconsumed_default
from ..validation import ConstraintViolation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationError:
    """A bound violation.

    ``param_name`` is None for type-level constraints, which belong to no
    single request parameter.
    """

    param_name: Optional[str]
    message: str
    violation: Optional[ConstraintViolation] = field(default=None, repr=False, compare=False)


class BindingResult:
    """Collects the validation errors bound during one request."""

    def __init__(self, *, warn_unconsumed: Optional[bool] = None):
        self._errors: List[ValidationError] = []
        self._consumed = False
        self._warn_unconsumed = warn_unconsumed

    def add_validation_error(self, error: ValidationError) -> None:
        self._errors.append(error)

    def add_validation_errors(self, errors: Iterable[ValidationError]) -> None:
        self._errors.extend(errors)

    def is_failed(self) -> bool:
        self._consumed = True
        return bool(self._errors)

    def is_consumed(self) -> bool:
        return self._consumed

    def get_all_errors(self) -> Tuple[ValidationError, ...]:
        self._consumed = True
        return tuple(self._errors)

    def get_errors(self, param_name: Optional[str]) -> Tuple[ValidationError, ...]:
        self._consumed = True
        return tuple(error for error in self._errors if error.param_name == param_name)

    def get_all_messages(self) -> Tuple[str, ...]:
        self._consumed = True
        return tuple(error.message for error in self._errors)

    def warn_if_unconsumed(self) -> bool:
        """Log a warning when errors were bound but never inspected.

        Called at the end of a request. Returns True when a warning was logged.
        """

        warn = self._warn_unconsumed
        if warn is None:
            warn = warn_unconsumed_default()
        if not warn or self._consumed or not self._errors:
            return False

        logger.warning(
            "BindingResult with %d validation error(s) was never inspected: %s",
            len(self._errors),
            "; ".join(f"{error.param_name}: {error.message}" for error in self._errors),
        )
        return True

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"BindingResult(errors={len(self._errors)}, consumed={self._consumed})"


__all__ = ["BindingResult", "ValidationError"]
