"""
Persistence Node

Hands an accepted submission to the submission store.
"""

import logging

from formcheck.db.stores import SubmissionStore
from formcheck.state.form_state import FormState

logger = logging.getLogger(__name__)


def persistence_node(
    state: FormState,
    store: SubmissionStore,
    verbose: bool = False,
) -> FormState:
    """Save the captured values; only reached when the form is valid."""
    submission = store.save(state["form_id"], state["field_values"])

    if verbose:
        logger.info(f"SUBMIT | Saved at {submission.timestamp}")

    return {
        **state,
        "submission": submission.to_record(),
    }
