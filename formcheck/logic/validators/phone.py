"""Phone Validator"""

from typing import Tuple, Optional
from formcheck.config.constants import PHONE_MIN_DIGITS, PHONE_MAX_DIGITS
from formcheck.logic.validators.base import BaseValidator, digits_only


class PhoneValidator(BaseValidator):
    """Validates phone numbers with area code (10 or 11 digits)."""

    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        digits = digits_only(value)

        if not PHONE_MIN_DIGITS <= len(digits) <= PHONE_MAX_DIGITS:
            return False, f"must have {PHONE_MIN_DIGITS} or {PHONE_MAX_DIGITS} digits"

        return True, None
