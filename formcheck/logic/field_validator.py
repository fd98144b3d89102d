"""
Field Validator

Resolves the rules that apply to a field and runs them in a fixed,
short-circuiting order so a field never carries more than one error:

    1. required            (only if the field is marked required)
    2. kind rule           (only if the value is non-empty)
    3. min_length          (only if declared and the value is non-empty)
"""

import logging
from typing import Dict, Optional

from formcheck.forms.elements import FormField
from formcheck.forms.fields import FieldKind
from formcheck.logic.validators import ValidatorRegistry

logger = logging.getLogger(__name__)

# Closed mapping from field kind to the rule it dispatches to
KIND_RULES: Dict[FieldKind, Optional[str]] = {
    FieldKind.TEXT: None,
    FieldKind.EMAIL: "email",
    FieldKind.NATIONAL_ID: "national_id",
    FieldKind.PHONE: "phone",
    FieldKind.POSTAL_CODE: "postal_code",
    FieldKind.BIRTH_DATE: "birth_date",
    FieldKind.SELECTION: "non_empty_selection",
}


class FieldValidator:
    """Evaluates a field against the rules of one registry."""

    def __init__(self, registry: ValidatorRegistry, verbose: bool = False):
        self.registry = registry
        self.verbose = verbose

    def validate(self, field: FormField) -> Optional[str]:
        """
        Validate a field's current value.

        Args:
            field: The field element to check

        Returns:
            The first error message produced, or None if the field is valid
        """
        value = field.value

        if field.required:
            error = self._run("required", field)
            if error:
                return error

        if not value:
            return None

        error = self._run(KIND_RULES.get(field.kind), field)

        if not error and field.min_length is not None:
            error = self._run("min_length", field, min_length=field.min_length)

        return error

    def _run(self, rule_name: Optional[str], field: FormField, **params) -> Optional[str]:
        if rule_name is None:
            return None

        validator = self.registry.get(rule_name)
        if validator is None:
            logger.warning(
                f"VALIDATE | Rule '{rule_name}' not registered, skipping for field '{field.field_id}'"
            )
            return None

        is_valid, error = validator.validate(field.value, **params)

        if self.verbose:
            logger.info(f"VALIDATE | {field.field_id}: {rule_name} -> {'ok' if is_valid else error}")

        return None if is_valid else error
