# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Web parameter binding markers.

Each marker names the request value that feeds the annotated field, accessor
or controller parameter.
"""

from __future__ import annotations

from dataclasses import dataclass

from .annotations import Annotation


@dataclass(frozen=True)
class QueryParam(Annotation):
    value: str


@dataclass(frozen=True)
class PathParam(Annotation):
    value: str


@dataclass(frozen=True)
class FormParam(Annotation):
    value: str


@dataclass(frozen=True)
class MatrixParam(Annotation):
    value: str


@dataclass(frozen=True)
class CookieParam(Annotation):
    value: str


@dataclass(frozen=True)
class BeanParam(Annotation):
    """Marks a controller parameter aggregating several annotated values."""


__all__ = [
    "BeanParam",
    "CookieParam",
    "FormParam",
    "MatrixParam",
    "PathParam",
    "QueryParam",
]
