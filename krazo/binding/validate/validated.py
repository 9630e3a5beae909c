# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

from __future__ import annotations

from dataclasses import dataclass

from ...annotations import Annotation
from .scope import KrazoValidatedScope


@dataclass(frozen=True)
class KrazoValidated(Annotation):
    """Enables MVC-specific validation rules for a bean bound from a request.

    Similar to :class:`~krazo.binding.markers.MvcBinding`, but concerned with
    validation only. Placed on a bean class with the default scope, every
    field and accessor of that class is treated as if it carried
    ``MvcBinding``, and type-level constraints of the class are reported in the
    binding result as well. A failing type-level constraint is added to the
    binding result without a parameter name.

    Usage::

        @KrazoValidated(validation_scope=KrazoValidatedScope.FIELDS_ONLY)
        class ColorForm:
            ...
    """

    validation_scope: KrazoValidatedScope = KrazoValidatedScope.ALL


__all__ = ["KrazoValidated"]
