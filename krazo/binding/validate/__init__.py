"""Mapping of constraint violations onto MVC parameter bindings."""

from .dispatch import bind_violations
from .metadata import PARAM_NAME_MARKERS, ConstraintViolationMetadata
from .scope import KrazoValidatedScope
from .validated import KrazoValidated
from .violations import get_metadata

__all__ = [
    "ConstraintViolationMetadata",
    "KrazoValidated",
    "KrazoValidatedScope",
    "PARAM_NAME_MARKERS",
    "bind_violations",
    "get_metadata",
]
