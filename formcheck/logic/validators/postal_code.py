"""Postal Code Validator"""

from typing import Tuple, Optional
from formcheck.config.constants import POSTAL_CODE_DIGITS
from formcheck.logic.validators.base import BaseValidator, digits_only


class PostalCodeValidator(BaseValidator):
    """Validates 8-digit postal codes (CEP), with or without the dash."""

    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        if len(digits_only(value)) != POSTAL_CODE_DIGITS:
            return False, f"must have {POSTAL_CODE_DIGITS} digits"

        return True, None
