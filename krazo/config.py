# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Environment-driven defaults.

Explicit keyword arguments always win over these values; the environment is
read at call time so tests and long-running processes see changes.
"""

from __future__ import annotations

import os

from .exceptions import ConfigurationError

RAISE_UNBOUND_ENV = "KRAZO_RAISE_UNBOUND"
WARN_UNCONSUMED_ENV = "KRAZO_WARN_UNCONSUMED"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment; unset or blank means *default*."""

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Environment variable {name} must be one of "
        f"{sorted(_TRUE_VALUES | _FALSE_VALUES)}, got {raw!r}"
    )


def raise_unbound_default() -> bool:
    return env_flag(RAISE_UNBOUND_ENV, True)


def warn_unconsumed_default() -> bool:
    return env_flag(WARN_UNCONSUMED_ENV, True)


__all__ = [
    "RAISE_UNBOUND_ENV",
    "WARN_UNCONSUMED_ENV",
    "env_flag",
    "raise_unbound_default",
    "warn_unconsumed_default",
]
