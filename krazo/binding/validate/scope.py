# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Scope values for :class:`~krazo.binding.validate.validated.KrazoValidated`."""

from __future__ import annotations

from enum import Enum


class KrazoValidatedScope(Enum):
    #: Consider constraints at the bean type level only.
    TYPE_ONLY = "type_only"

    #: Consider constraints on fields and field accessors only.
    FIELDS_ONLY = "fields_only"

    #: Consider type-level constraints and all annotated fields and accessors.
    ALL = "all"


FIELD_SCOPES = frozenset({KrazoValidatedScope.ALL, KrazoValidatedScope.FIELDS_ONLY})
TYPE_SCOPES = frozenset({KrazoValidatedScope.ALL, KrazoValidatedScope.TYPE_ONLY})


__all__ = ["FIELD_SCOPES", "KrazoValidatedScope", "TYPE_SCOPES"]
