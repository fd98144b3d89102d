"""
Conditional Routing Functions

Decide which node runs next in the submit graph.
"""

import logging

from formcheck.state.form_state import FormState

logger = logging.getLogger(__name__)


def route_after_form_validation(state: FormState) -> str:
    """
    Routes after the whole form has been validated.

    Decision:
    - If every field passed -> persistence
    - Else -> END (errors stay displayed per field)
    """
    if state.get("is_valid"):
        logger.info("ROUTE | form_validation -> persistence")
        return "persistence"

    logger.info(
        f"ROUTE | form_validation -> END ({len(state.get('validation_errors', {}))} invalid field(s))"
    )
    return "END"
