# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Property paths describing how a validated root object reached a violation.

A path is an ordered tuple of nodes. Every node variant carries a fixed
:class:`ElementKind` tag; consumers dispatch on ``node.kind`` and then read
the payload of that variant.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Iterator, Optional, Tuple


class ElementKind(Enum):
    BEAN = "bean"
    PROPERTY = "property"
    METHOD = "method"
    CONSTRUCTOR = "constructor"
    PARAMETER = "parameter"
    CROSS_PARAMETER = "cross_parameter"
    RETURN_VALUE = "return_value"
    CONTAINER_ELEMENT = "container_element"


@dataclass(frozen=True)
class Node:
    name: Optional[str] = None

    kind: ClassVar[ElementKind]

    def __str__(self) -> str:
        return self.name or ""


@dataclass(frozen=True)
class BeanNode(Node):
    kind: ClassVar[ElementKind] = ElementKind.BEAN


@dataclass(frozen=True)
class PropertyNode(Node):
    kind: ClassVar[ElementKind] = ElementKind.PROPERTY


@dataclass(frozen=True)
class MethodNode(Node):
    """A method call; ``parameter_types`` are the declared parameter types."""

    parameter_types: Tuple[Any, ...] = ()

    kind: ClassVar[ElementKind] = ElementKind.METHOD


@dataclass(frozen=True)
class ConstructorNode(Node):
    parameter_types: Tuple[Any, ...] = ()

    kind: ClassVar[ElementKind] = ElementKind.CONSTRUCTOR


@dataclass(frozen=True)
class ParameterNode(Node):
    """A method parameter; the index is zero-based and excludes the receiver."""

    parameter_index: int = 0

    kind: ClassVar[ElementKind] = ElementKind.PARAMETER


@dataclass(frozen=True)
class CrossParameterNode(Node):
    kind: ClassVar[ElementKind] = ElementKind.CROSS_PARAMETER


@dataclass(frozen=True)
class ReturnValueNode(Node):
    kind: ClassVar[ElementKind] = ElementKind.RETURN_VALUE


@dataclass(frozen=True)
class ContainerElementNode(Node):
    index: Optional[int] = None
    key: Any = None

    kind: ClassVar[ElementKind] = ElementKind.CONTAINER_ELEMENT

    def __str__(self) -> str:
        if self.index is not None:
            return f"{self.name or ''}[{self.index}]"
        if self.key is not None:
            return f"{self.name or ''}[{self.key}]"
        return self.name or ""


@dataclass(frozen=True)
class PropertyPath:
    nodes: Tuple[Node, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, *nodes: Node) -> "PropertyPath":
        return cls(tuple(nodes))

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]

    @property
    def leaf(self) -> Optional[Node]:
        return self.nodes[-1] if self.nodes else None

    def __str__(self) -> str:
        return ".".join(text for text in (str(node) for node in self.nodes) if text)


__all__ = [
    "BeanNode",
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
