# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Create :class:`ConstraintViolationMetadata` from constraint violations.

The property path of a violation takes one of three shapes:

* ``..., property`` - a property of the leaf bean. Markers come from the
  field and its accessor pair.
* ``method, parameter`` - a parameter of a method on the root bean. Markers
  come from that parameter.
* ``method, parameter, bean`` - a type-level constraint on a parameter value.
  Markers come from the class of the invalid value.

Any other path yields empty metadata and a warning.
"""

from __future__ import annotations

import functools
import inspect
import logging
from dataclasses import dataclass
from typing import Any, FrozenSet, List, Optional, Sequence, Tuple

from ...annotations import (
    Annotation,
    annotations_of,
    declared_type,
    evaluate_hint,
    field_annotations,
    find_annotation,
    has_annotation,
    merge_annotations,
    parameter_annotations,
    raw_signature,
)
from ...exceptions import MethodResolutionError
from ...proxy import unwrap_proxy_class
from ...telemetry.metrics import record_method_mismatch, record_resolution
from ...validation import ConstraintViolation, ElementKind, MethodNode, ParameterNode
from ..markers import MvcBinding
from .metadata import ConstraintViolationMetadata
from .scope import FIELD_SCOPES, TYPE_SCOPES, KrazoValidatedScope
from .validated import KrazoValidated

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _ViolatedObject:
    annotations: Tuple[Annotation, ...]
    mvc_bound: bool
    shape: str


_UNRESOLVED = _ViolatedObject((), False, "unresolved")


def get_metadata(violation: ConstraintViolation) -> ConstraintViolationMetadata:
    """Resolve the markers behind *violation* and decide whether it is MVC bound.

    Raises:
        MethodResolutionError: the violation names a method parameter, but the
            root bean's class has no method with that exact signature.
    """

    violated = _violated_object_details(violation)
    record_resolution(violated.shape, violated.mvc_bound)
    logger.debug(
        "Resolved violation at '%s' as %s (mvc_bound=%s, annotations=%d)",
        violation.property_path,
        violated.shape,
        violated.mvc_bound,
        len(violated.annotations),
    )
    return ConstraintViolationMetadata(violation, violated.annotations, violated.mvc_bound)


def _violated_object_details(violation: ConstraintViolation) -> _ViolatedObject:
    nodes = tuple(violation.property_path)
    last_node = violation.property_path.leaf
    kind = last_node.kind if last_node is not None else None

    if kind is ElementKind.PROPERTY:
        leaf_class = unwrap_proxy_class(type(violation.leaf_bean))
        annotations = _property_annotations(leaf_class, last_node.name)
        mvc_bound = has_annotation(annotations, MvcBinding) or _has_scope(
            annotations_of(leaf_class), FIELD_SCOPES
        )
        return _ViolatedObject(annotations, mvc_bound, "property")

    if kind is ElementKind.PARAMETER and len(nodes) == 2 and nodes[0].kind is ElementKind.METHOD:
        annotations = _parameter_annotations(violation, nodes[0], last_node)
        # parameter-level binding markers are not inspected here
        return _ViolatedObject(annotations, False, "parameter")

    if kind is ElementKind.BEAN and len(nodes) == 3:
        invalid_class = unwrap_proxy_class(type(violation.invalid_value))
        annotations = annotations_of(invalid_class)
        mvc_bound = has_annotation(annotations, MvcBinding) or _has_scope(annotations, TYPE_SCOPES)
        return _ViolatedObject(annotations, mvc_bound, "bean")

    logger.warning("Could not read annotations for path: %s", violation.property_path)
    return _UNRESOLVED


def _has_scope(annotations: Sequence[Annotation], scopes: FrozenSet[KrazoValidatedScope]) -> bool:
    krazo_validated = find_annotation(annotations, KrazoValidated)
    return krazo_validated is not None and krazo_validated.validation_scope in scopes


def _property_annotations(bean_class: type, name: Optional[str]) -> Tuple[Annotation, ...]:
    if not name:
        return ()
    return merge_annotations(
        field_annotations(bean_class, name),
        _accessor_annotations(bean_class, name),
    )


def _accessor_annotations(bean_class: type, name: str) -> Tuple[Annotation, ...]:
    """Markers on the getter and setter of property *name*, empty if none."""

    try:
        descriptor = inspect.getattr_static(bean_class, name)
    except AttributeError:
        return ()

    try:
        getter, setter = _accessor_pair(descriptor)
    except (AttributeError, TypeError, ValueError) as exc:
        logger.warning(
            "Unable to introspect read and write methods for field '%s' on bean class '%s': %s",
            name,
            bean_class.__qualname__,
            exc,
        )
        return ()

    return merge_annotations(annotations_of(getter), annotations_of(setter))


def _accessor_pair(descriptor: Any) -> Tuple[Any, Any]:
    if isinstance(descriptor, property):
        return descriptor.fget, descriptor.fset
    if isinstance(descriptor, functools.cached_property):
        return descriptor.func, None
    # hybrid descriptors exposing the property protocol
    if hasattr(type(descriptor), "__get__") and hasattr(descriptor, "fget"):
        return descriptor.fget, getattr(descriptor, "fset", None)
    return None, None


def _parameter_annotations(
    violation: ConstraintViolation,
    method_node: MethodNode,
    parameter_node: ParameterNode,
) -> Tuple[Annotation, ...]:
    root_class = type(violation.root_bean)
    parameter_types = tuple(method_node.parameter_types)
    parameters = _resolve_method_parameters(root_class, method_node.name, parameter_types)

    index = parameter_node.parameter_index
    if not 0 <= index < len(parameters):
        record_method_mismatch(method_node.name or "")
        raise MethodResolutionError(
            root_class,
            method_node.name or "",
            parameter_types,
            f"parameter index {index} out of range",
        )
    return parameter_annotations(parameters[index])


def _resolve_method_parameters(
    bean_class: type,
    method_name: Optional[str],
    parameter_types: Tuple[Any, ...],
) -> List[inspect.Parameter]:
    """Find *method_name* on *bean_class* by exact parameter-type match.

    The receiver (``self`` or ``cls``) is not part of the returned parameters.
    Unannotated parameters are declared as ``object``.
    """

    def mismatch(reason: str) -> MethodResolutionError:
        record_method_mismatch(method_name or "")
        return MethodResolutionError(bean_class, method_name or "", parameter_types, reason)

    if not method_name:
        raise mismatch("method node carries no name")

    try:
        attribute = inspect.getattr_static(bean_class, method_name)
    except AttributeError as exc:
        raise mismatch("no such attribute") from exc

    if isinstance(attribute, staticmethod):
        function, skip = attribute.__func__, 0
    elif isinstance(attribute, classmethod):
        function, skip = attribute.__func__, 1
    elif inspect.isfunction(attribute):
        function, skip = attribute, 1
    else:
        raise mismatch(f"attribute is {type(attribute).__name__}, not a method")

    try:
        signature = raw_signature(function)
    except (NameError, TypeError, ValueError) as exc:
        raise mismatch(f"signature cannot be read: {exc}") from exc

    # the return annotation plays no part in matching and is never evaluated
    globalns = getattr(inspect.unwrap(function), "__globals__", {})
    parameters = []
    for parameter in list(signature.parameters.values())[skip:]:
        try:
            hint = evaluate_hint(parameter.annotation, globalns)
        except (NameError, AttributeError, SyntaxError, TypeError) as exc:
            reason = f"annotation of parameter '{parameter.name}' cannot be evaluated: {exc}"
            raise mismatch(reason) from exc
        parameters.append(parameter.replace(annotation=hint))

    declared = tuple(declared_type(parameter.annotation) for parameter in parameters)
    if declared != parameter_types:
        names = ", ".join(getattr(t, "__qualname__", None) or repr(t) for t in declared)
        raise mismatch(f"declared parameter types are ({names})")
    return parameters


__all__ = ["get_metadata"]
