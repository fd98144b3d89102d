"""Email Validator"""

import re
from typing import Tuple, Optional
from formcheck.logic.validators.base import BaseValidator


class EmailValidator(BaseValidator):
    """Validates local@domain.tld shaped addresses."""

    EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        if value and not self.EMAIL_PATTERN.fullmatch(str(value)):
            return False, "invalid e-mail format"

        return True, None
