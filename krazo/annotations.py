# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Marker annotations and helpers to read them back from program elements.

Markers are frozen dataclass instances deriving from :class:`Annotation`.
They reach a program element in one of two ways:

* applied as a decorator to a class or function, which records the marker in
  the element's own namespace::

      @KrazoValidated()
      class ColorForm: ...

* placed in ``typing.Annotated`` metadata of a class-level field or of a
  function parameter::

      color: Annotated[str, FormParam("color")]

Lookups only ever return markers declared on the element itself. A subclass
does not see the markers of its base, which is why proxy subclasses must be
unwrapped before reading class-level markers (see :mod:`krazo.proxy`).
"""

from __future__ import annotations

import functools
import inspect
import sys
import typing
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple, Type, TypeVar

ANNOTATIONS_ATTR = "__krazo_annotations__"

_A = TypeVar("_A", bound="Annotation")

# Raised while evaluating string annotations that refer to missing names.
_EVAL_ERRORS = (NameError, AttributeError, SyntaxError, TypeError)

# Hints are read in their deferred form; evaluation happens one hint at a time.
if sys.version_info >= (3, 14):
    import annotationlib

    _DEFERRED_HINTS = {"format": annotationlib.Format.FORWARDREF}
    _DEFERRED_SIGNATURE = {"annotation_format": annotationlib.Format.FORWARDREF}
else:
    _DEFERRED_HINTS = {}
    _DEFERRED_SIGNATURE = {}


@dataclass(frozen=True)
class Annotation:
    """Base class for all marker annotations."""

    @property
    def annotation_type(self) -> type:
        return type(self)

    def __call__(self, target):
        """Attach this marker to *target* and return *target* unchanged."""

        _attach(_annotation_holder(target), self)
        return target


def _annotation_holder(target: Any) -> Any:
    # Markers applied on top of a descriptor land on the wrapped function.
    if isinstance(target, property):
        return target.fget
    if isinstance(target, functools.cached_property):
        return target.func
    if isinstance(target, (staticmethod, classmethod)):
        return target.__func__
    return target


def _attach(holder: Any, annotation: Annotation) -> None:
    own = _own_namespace(holder).get(ANNOTATIONS_ATTR, ())
    setattr(holder, ANNOTATIONS_ATTR, tuple(own) + (annotation,))


def _own_namespace(target: Any):
    try:
        return vars(target)
    except TypeError:
        return {}


def annotations_of(target: Any) -> Tuple[Annotation, ...]:
    """Return the markers declared directly on *target* (class or function)."""

    if target is None:
        return ()
    holder = _annotation_holder(target)
    return tuple(_own_namespace(holder).get(ANNOTATIONS_ATTR, ()))


def metadata_annotations(hint: Any) -> Tuple[Annotation, ...]:
    """Return the markers carried in ``Annotated`` metadata of a type hint."""

    if typing.get_origin(hint) is not typing.Annotated:
        return ()
    return tuple(item for item in hint.__metadata__ if isinstance(item, Annotation))


def declared_type(hint: Any) -> Any:
    """Strip ``Annotated`` from *hint*, returning the underlying type."""

    if hint is inspect.Parameter.empty:
        return object
    if typing.get_origin(hint) is typing.Annotated:
        return hint.__origin__
    return hint


def field_annotations(cls: type, name: str) -> Tuple[Annotation, ...]:
    """Return the markers of field *name* declared on *cls* itself.

    Only the hint of *name* is evaluated, in the namespace of the module that
    defines *cls*. A missing field, or a field whose hint cannot be evaluated,
    yields an empty tuple.
    """

    try:
        hints = raw_hints(cls)
    except _EVAL_ERRORS:
        return ()
    if name not in hints:
        return ()
    module = sys.modules.get(cls.__module__)
    globalns = vars(module) if module is not None else {}
    try:
        hint = evaluate_hint(hints[name], globalns, dict(vars(cls)))
    except _EVAL_ERRORS:
        return ()
    return metadata_annotations(hint)


def raw_hints(target: Any) -> dict:
    """Return the own annotations of *target* without evaluating deferred ones."""

    return inspect.get_annotations(target, **_DEFERRED_HINTS)


def raw_signature(function: Any) -> inspect.Signature:
    """Return the signature of *function* with deferred hints left unevaluated."""

    return inspect.signature(function, **_DEFERRED_SIGNATURE)


def evaluate_hint(hint: Any, globalns: dict, localns: Optional[dict] = None) -> Any:
    """Evaluate a string or forward-reference hint, return any other hint as is.

    Raises the usual evaluation errors (``NameError`` and friends) when the
    hint refers to names that are not defined.
    """

    source = getattr(hint, "__forward_arg__", hint)
    if not isinstance(source, str):
        return hint
    return eval(source, globalns, localns)


def parameter_annotations(parameter: inspect.Parameter) -> Tuple[Annotation, ...]:
    """Return the markers on a single function parameter, not its function."""

    return metadata_annotations(parameter.annotation)


def find_annotation(annotations: Iterable[Annotation], kind: Type[_A]) -> Optional[_A]:
    """Return the first marker whose type is exactly *kind*."""

    for annotation in annotations:
        if type(annotation) is kind:
            return annotation
    return None


def find_instance(annotations: Iterable[Annotation], kind: Type[_A]) -> Optional[_A]:
    """Return the first marker that is an instance of *kind* or a subclass."""

    for annotation in annotations:
        if isinstance(annotation, kind):
            return annotation
    return None


def has_annotation(annotations: Iterable[Annotation], kind: Type[Annotation]) -> bool:
    return find_annotation(annotations, kind) is not None


def merge_annotations(*groups: Iterable[Annotation]) -> Tuple[Annotation, ...]:
    """Concatenate marker groups, dropping equal duplicates, first one wins."""

    merged: list = []
    for group in groups:
        for annotation in group:
            if annotation not in merged:
                merged.append(annotation)
    return tuple(merged)


__all__ = [
    "ANNOTATIONS_ATTR",
    "Annotation",
    "annotations_of",
    "declared_type",
    "evaluate_hint",
    "field_annotations",
    "find_annotation",
    "find_instance",
    "has_annotation",
    "merge_annotations",
    "metadata_annotations",
    "parameter_annotations",
    "raw_hints",
    "raw_signature",
]
