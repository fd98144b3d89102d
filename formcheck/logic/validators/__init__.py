"""
Field Validators

Provides the rule registry and the built-in rules.
Custom rules can be added per form via ValidatorRegistry.register().
"""

import logging
from typing import Callable, Dict, List, Optional, Union

from formcheck.logic.validators.base import BaseValidator, FunctionValidator
from formcheck.logic.validators.birth_date import BirthDateValidator
from formcheck.logic.validators.email import EmailValidator
from formcheck.logic.validators.national_id import NationalIdValidator
from formcheck.logic.validators.phone import PhoneValidator
from formcheck.logic.validators.postal_code import PostalCodeValidator
from formcheck.logic.validators.selection import NonEmptySelectionValidator
from formcheck.logic.validators.text import MinLengthValidator, RequiredValidator

logger = logging.getLogger(__name__)


class ValidatorRegistry:
    """
    Name -> validator mapping owned by a single form.

    Usage:
        registry = create_default_registry()
        registry.register("zip_plus4", lambda v: None if len(v) == 10 else "bad zip")
        validator = registry.get("zip_plus4")
    """

    def __init__(self):
        self._validators: Dict[str, BaseValidator] = {}

    def register(self, name: str, validator: Union[BaseValidator, Callable]):
        """Store (or replace) a rule. Plain functions are wrapped."""
        if not isinstance(validator, BaseValidator):
            validator = FunctionValidator(validator)
        if name in self._validators:
            logger.info(f"Replacing validator: '{name}'")
        self._validators[name] = validator

    def get(self, name: str) -> Optional[BaseValidator]:
        """Get a validator by name. Returns None if not found."""
        return self._validators.get(name)

    @property
    def names(self) -> List[str]:
        return list(self._validators.keys())


def create_default_registry() -> ValidatorRegistry:
    """Build a fresh registry seeded with the built-in rules."""
    registry = ValidatorRegistry()
    registry.register("required", RequiredValidator())
    registry.register("email", EmailValidator())
    registry.register("national_id", NationalIdValidator())
    registry.register("phone", PhoneValidator())
    registry.register("postal_code", PostalCodeValidator())
    registry.register("birth_date", BirthDateValidator())
    registry.register("min_length", MinLengthValidator())
    registry.register("non_empty_selection", NonEmptySelectionValidator())
    return registry


__all__ = [
    "BaseValidator",
    "FunctionValidator",
    "ValidatorRegistry",
    "create_default_registry",
]
