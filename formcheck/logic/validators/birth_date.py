"""Birth Date Validator"""

from datetime import date
from typing import Tuple, Optional
from formcheck.config.constants import MINIMUM_AGE
from formcheck.logic.validators.base import BaseValidator


class BirthDateValidator(BaseValidator):
    """
    Validates an ISO birth date (YYYY-MM-DD) for an adult.

    Age is the plain difference of calendar years; the month and day are
    not taken into account, so someone turning 18 later this year already
    passes. The age check runs before the future-date check.
    """

    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        today = kwargs.get("today") or date.today()

        try:
            birth = date.fromisoformat(str(value).strip())
        except ValueError:
            return False, "invalid date"

        age = today.year - birth.year

        if age < MINIMUM_AGE:
            return False, f"must be at least {MINIMUM_AGE} years old"

        if birth > today:
            return False, "cannot be in the future"

        return True, None
