# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metadata about the property or parameter behind a constraint violation."""

from __future__ import annotations

from operator import attrgetter
from typing import Callable, Iterable, Optional, Tuple, Type, TypeVar

from ...annotations import Annotation, find_annotation, find_instance
from ...params import CookieParam, FormParam, MatrixParam, PathParam, QueryParam
from ...validation import ConstraintViolation

_A = TypeVar("_A", bound=Annotation)

# Marker kinds that name a request parameter, in lookup order.
PARAM_NAME_MARKERS: Tuple[Tuple[Type[Annotation], Callable[[Annotation], str]], ...] = (
    (QueryParam, attrgetter("value")),
    (PathParam, attrgetter("value")),
    (FormParam, attrgetter("value")),
    (MatrixParam, attrgetter("value")),
    (CookieParam, attrgetter("value")),
)


class ConstraintViolationMetadata:
    """Resolved markers of the violated element and its binding decision."""

    __slots__ = ("_violation", "_annotations", "_mvc_bound_constraint")

    def __init__(
        self,
        violation: ConstraintViolation,
        annotations: Iterable[Annotation],
        mvc_bound_constraint: bool,
    ):
        if violation is None:
            raise ValueError("violation must not be None")
        if annotations is None:
            raise ValueError("annotations must not be None")
        self._violation = violation
        self._annotations: Tuple[Annotation, ...] = tuple(annotations)
        self._mvc_bound_constraint = bool(mvc_bound_constraint)

    @property
    def violation(self) -> ConstraintViolation:
        return self._violation

    @property
    def annotations(self) -> Tuple[Annotation, ...]:
        return self._annotations

    @property
    def mvc_bound_constraint(self) -> bool:
        """True when the violation belongs in the MVC binding result."""

        return self._mvc_bound_constraint

    def get_annotation(self, kind: Type[_A]) -> Optional[_A]:
        return find_annotation(self._annotations, kind)

    def get_param_name(self) -> Optional[str]:
        """Return the request parameter name of the violated element, if any.

        Subclasses of the parameter markers name a parameter too.
        """

        for kind, name_of in PARAM_NAME_MARKERS:
            marker = find_instance(self._annotations, kind)
            if marker is not None:
                return name_of(marker)
        return None

    def __repr__(self) -> str:
        return (
            f"ConstraintViolationMetadata(path={str(self._violation.property_path)!r}, "
            f"mvc_bound_constraint={self._mvc_bound_constraint}, "
            f"annotations={self._annotations!r})"
        )


__all__ = ["ConstraintViolationMetadata", "PARAM_NAME_MARKERS"]
