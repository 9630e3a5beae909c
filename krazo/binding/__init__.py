"""MVC binding: markers, binding results and violation routing."""

from .markers import MvcBinding
from .result import BindingResult, ValidationError

__all__ = [
    "BindingResult",
    "MvcBinding",
    "ValidationError",
]
