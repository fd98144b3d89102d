"""
Error Presenter

Applies and removes a field's error display: the invalid class and
aria flag on the field, the error node and errored class on its
container. Both directions are idempotent.
"""

import logging

from formcheck.forms.elements import (
    ERROR_CONTAINER_CLASS,
    INVALID_FIELD_CLASS,
    ErrorNode,
    Form,
)

logger = logging.getLogger(__name__)


class ErrorPresenter:
    """Renders per-field errors against the host form."""

    def __init__(self, form: Form):
        self.form = form

    def show_error(self, field_id: str, message: str):
        """Mark the field invalid and replace its error node with a fresh one."""
        field = self.form.get_field(field_id)
        if field is None:
            logger.warning(f"PRESENT | No field '{field_id}' to show error on")
            return

        field.classes.add(INVALID_FIELD_CLASS)
        field.attributes["aria-invalid"] = "true"

        existing = field.container.find_error_node()
        if existing is not None:
            field.container.remove(existing)

        field.container.children.append(ErrorNode(message))
        field.container.classes.add(ERROR_CONTAINER_CLASS)

    def clear_error(self, field_id: str):
        """Remove every trace of an error from the field."""
        field = self.form.get_field(field_id)
        if field is None:
            logger.warning(f"PRESENT | No field '{field_id}' to clear error on")
            return

        field.classes.discard(INVALID_FIELD_CLASS)
        field.attributes["aria-invalid"] = "false"

        existing = field.container.find_error_node()
        if existing is not None:
            field.container.remove(existing)

        field.container.classes.discard(ERROR_CONTAINER_CLASS)
