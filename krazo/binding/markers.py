# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""MVC binding markers."""

from __future__ import annotations

from dataclasses import dataclass

from ..annotations import Annotation


@dataclass(frozen=True)
class MvcBinding(Annotation):
    """Opts a field, accessor or parameter into MVC binding.

    Violations on an element carrying this marker are reported through the
    :class:`~krazo.binding.result.BindingResult` instead of being raised.
    """


__all__ = ["MvcBinding"]
