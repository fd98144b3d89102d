"""Validation logic: rule registry and per-field rule resolution."""

from formcheck.logic.validators import ValidatorRegistry, create_default_registry
from formcheck.logic.field_validator import FieldValidator, KIND_RULES

__all__ = [
    "ValidatorRegistry",
    "create_default_registry",
    "FieldValidator",
    "KIND_RULES",
]
