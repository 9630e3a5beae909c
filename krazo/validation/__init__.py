"""Validation-engine data model: violations and their property paths."""

from .path import (
    BeanNode,
    ConstructorNode,
    ContainerElementNode,
    CrossParameterNode,
    ElementKind,
    MethodNode,
    Node,
    ParameterNode,
    PropertyNode,
    PropertyPath,
    ReturnValueNode,
)
from .violation import ConstraintViolation

__all__ = [
    "BeanNode",
    "ConstraintViolation",
    "ConstructorNode",
    "ContainerElementNode",
    "CrossParameterNode",
    "ElementKind",
    "MethodNode",
    "Node",
    "ParameterNode",
    "PropertyNode",
    "PropertyPath",
    "ReturnValueNode",
]
