"""Selection Validator"""

from typing import Tuple, Optional
from formcheck.logic.validators.base import BaseValidator


class NonEmptySelectionValidator(BaseValidator):
    """Requires a choice in a mandatory dropdown (e.g. a state picker)."""

    def validate(self, value, **kwargs) -> Tuple[bool, Optional[str]]:
        if not value:
            return False, "please choose a value"

        return True, None
