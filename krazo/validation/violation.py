# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Constraint violation records handed over by the validation engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..annotations import Annotation
from .path import PropertyPath


@dataclass(frozen=True, eq=False)
class ConstraintViolation:
    """One failed constraint.

    ``root_bean`` is the object validation started from (a controller for
    method validation), ``leaf_bean`` the object owning the violated property
    and ``invalid_value`` the value that failed the constraint.
    """

    message: str
    property_path: PropertyPath
    invalid_value: Any = None
    root_bean: Any = None
    leaf_bean: Any = None
    constraint: Optional[Annotation] = None


__all__ = ["ConstraintViolation"]
