"""
National ID Validator

Validates the Brazilian CPF: 11 digits where the last two are check
digits computed from weighted sums of the preceding ones.
"""

from typing import List, Tuple, Optional
from formcheck.config.constants import NATIONAL_ID_DIGITS
from formcheck.logic.validators.base import BaseValidator, digits_only


def check_digit(digits: List[int], count: int) -> int:
    """
    Compute the check digit over the first `count` digits.

    Weights run from count + 1 down to 2. A remainder of 10 or 11
    counts as 0.
    """
    total = sum(d * (count + 1 - i) for i, d in enumerate(digits[:count]))
    remainder = (total * 10) % 11
    if remainder in (10, 11):
        remainder = 0
    return remainder


class NationalIdValidator(BaseValidator):
    """Validates CPF numbers, punctuation allowed (000.000.000-00)."""

    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        cpf = digits_only(value)

        if len(cpf) != NATIONAL_ID_DIGITS:
            return False, "wrong length"

        # 000.000.000-00, 111.111.111-11, ... pass the checksum but are not issued
        if len(set(cpf)) == 1:
            return False, "invalid"

        digits = [int(c) for c in cpf]

        if check_digit(digits, 9) != digits[9]:
            return False, "invalid"

        if check_digit(digits, 10) != digits[10]:
            return False, "invalid"

        return True, None
