"""Text Validators"""

from typing import Tuple, Optional
from formcheck.logic.validators.base import BaseValidator


class RequiredValidator(BaseValidator):
    """Rejects missing or whitespace-only values."""

    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        if value is None or not str(value).strip():
            return False, "field is required"

        return True, None


class MinLengthValidator(BaseValidator):
    """Enforces a minimum character count (no trimming)."""

    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        min_length = kwargs.get("min_length", 0)
        text = "" if value is None else str(value)

        if len(text) < min_length:
            return False, f"must be at least {min_length} characters"

        return True, None
