# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""krazo - constraint-violation metadata for MVC parameter binding."""

from .annotations import Annotation
from .binding import BindingResult, MvcBinding, ValidationError
from .binding.validate import (
    ConstraintViolationMetadata,
    KrazoValidated,
    KrazoValidatedScope,
    bind_violations,
    get_metadata,
)
from .exceptions import (
    ConfigurationError,
    ConstraintViolationError,
    KrazoError,
    MethodResolutionError,
)
from .params import BeanParam, CookieParam, FormParam, MatrixParam, PathParam, QueryParam
from .proxy import make_proxy_class, synthetic, unwrap_proxy_class

__version__ = "0.1.0"

__all__ = [
    "Annotation",
    "BeanParam",
    "BindingResult",
    "ConfigurationError",
    "ConstraintViolationError",
    "ConstraintViolationMetadata",
    "CookieParam",
    "FormParam",
    "KrazoError",
    "KrazoValidated",
    "KrazoValidatedScope",
    "MatrixParam",
    "MethodResolutionError",
    "MvcBinding",
    "PathParam",
    "QueryParam",
    "ValidationError",
    "bind_violations",
    "get_metadata",
    "make_proxy_class",
    "synthetic",
    "unwrap_proxy_class",
]
