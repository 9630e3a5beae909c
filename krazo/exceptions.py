# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for the krazo validation-binding core."""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple


class KrazoError(Exception):
    """Base class for all errors raised by krazo."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(KrazoError):
    """Raised when the environment carries an invalid krazo setting."""


class MethodResolutionError(KrazoError):
    """Raised when a violated parameter's method cannot be found on the root bean.

    The validation engine described a method (name plus declared parameter
    types) that the runtime class of the root bean does not expose with that
    exact signature. The engine and the binding layer disagree about the
    target type, so this is never recovered from.
    """

    def __init__(
        self,
        bean_class: type,
        method_name: str,
        parameter_types: Sequence[Any],
        reason: Optional[str] = None,
    ):
        self.bean_class = bean_class
        self.method_name = method_name
        self.parameter_types: Tuple[Any, ...] = tuple(parameter_types)
        self.reason = reason

        type_names = ", ".join(_type_name(t) for t in self.parameter_types)
        message = (
            f"No method {bean_class.__qualname__}.{method_name}({type_names}) "
            f"matching the violated parameter"
        )
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ConstraintViolationError(KrazoError):
    """Carries the violations that are not bound to the MVC binding result."""

    def __init__(self, violations: Sequence[Any]):
        self.violations = tuple(violations)
        count = len(self.violations)
        lines = [f"{count} constraint violation(s) not bound to the binding result:"]
        for violation in self.violations:
            lines.append(f" - {violation.property_path}: {violation.message}")
        super().__init__("\n".join(lines))


def _type_name(value: Any) -> str:
    return getattr(value, "__qualname__", None) or repr(value)


__all__ = [
    "ConfigurationError",
    "ConstraintViolationError",
    "KrazoError",
    "MethodResolutionError",
]
