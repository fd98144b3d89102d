"""
Form Validation Node

Validates every field of the form, regardless of which ones were
blurred before, and records the aggregate outcome.
"""

import logging
from typing import TYPE_CHECKING

from formcheck.state.form_state import FormState

if TYPE_CHECKING:
    from formcheck.controller import FormController

logger = logging.getLogger(__name__)


def form_validation_node(
    state: FormState,
    controller: "FormController",
    verbose: bool = False,
) -> FormState:
    """
    Run the field validator over the whole form.

    Each field's error display is updated as a side effect, so a
    partially invalid form shows every failing field at once.

    Args:
        state: Current FormState
        controller: Controller owning the form and its error map
        verbose: Enable verbose logging

    Returns:
        FormState: Updated with captured values, errors and is_valid
    """
    is_valid = controller.validate_form()
    errors = controller.errors

    if verbose:
        logger.info(f"SUBMIT | Form '{state['form_id']}' valid={is_valid}")
        if errors:
            logger.info(f"SUBMIT | Errors: {errors}")

    return {
        **state,
        "field_values": controller.form.values(),
        "validation_errors": errors,
        "is_valid": is_valid,
    }
