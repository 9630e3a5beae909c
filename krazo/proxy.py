# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Recognition of generated (synthetic) subclasses.

Dependency-injection containers and interceptors often hand out instances of a
generated subclass instead of the user's class. Such a subclass declares none
of the user's markers, so marker lookups have to happen on the real class.
A generated subclass announces itself through :data:`SYNTHETIC_ATTR` in its
own namespace.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, TypeVar

SYNTHETIC_ATTR = "__krazo_synthetic__"

_T = TypeVar("_T", bound=type)


def synthetic(cls: _T) -> _T:
    """Class decorator marking *cls* as a generated subclass of its first base."""

    setattr(cls, SYNTHETIC_ATTR, True)
    return cls


def is_synthetic(cls: type) -> bool:
    # Only the class's own namespace counts; subclasses of a proxy are real.
    return bool(vars(cls).get(SYNTHETIC_ATTR, False))


def unwrap_proxy_class(cls: type) -> type:
    """Return the real class behind a synthetic subclass, or *cls* itself."""

    if is_synthetic(cls) and cls.__bases__:
        return cls.__bases__[0]
    return cls


def make_proxy_class(
    cls: _T,
    name: Optional[str] = None,
    namespace: Optional[Mapping[str, Any]] = None,
) -> _T:
    """Build a synthetic subclass of *cls* the way a container would."""

    proxy_name = name or f"{cls.__name__}Proxy"
    body = dict(namespace or {})
    body[SYNTHETIC_ATTR] = True
    body.setdefault("__module__", cls.__module__)
    body.setdefault("__qualname__", f"{cls.__qualname__}Proxy" if name is None else name)
    return type(proxy_name, (cls,), body)


__all__ = [
    "SYNTHETIC_ATTR",
    "is_synthetic",
    "make_proxy_class",
    "synthetic",
    "unwrap_proxy_class",
]
