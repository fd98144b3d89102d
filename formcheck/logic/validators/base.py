"""
Base Validator

Abstract base class for all field rules.
"""

import re
from abc import ABC, abstractmethod
from typing import Callable, Optional, Tuple

NON_DIGITS = re.compile(r"\D", re.ASCII)


def digits_only(value) -> str:
    """Strip everything but ASCII digits from a raw value."""
    return NON_DIGITS.sub("", str(value or ""))


class BaseValidator(ABC):
    """
    Abstract base class for field rules.

    All validators must implement the validate() method which returns
    a (is_valid, error_message) tuple. Validators are pure: they never
    touch the form, they only classify a value.
    """

    @abstractmethod
    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        """
        Validate a field value.

        Args:
            value: The raw field value
            **kwargs: Rule parameters (e.g. min_length)

        Returns:
            Tuple of (is_valid: bool, error_message: Optional[str])
            If valid, error_message is None.
        """
        pass


class FunctionValidator(BaseValidator):
    """
    Adapts a plain function into a validator.

    The function receives the value (plus the parameter values, in
    keyword order) and returns an error message, or None when valid.
    """

    def __init__(self, fn: Callable[..., Optional[str]]):
        self.fn = fn

    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        error = self.fn(value, *kwargs.values())
        if error:
            return False, error
        return True, None
