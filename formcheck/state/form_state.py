"""
FormState - State schema for the submit workflow.

Carries one submit pass through the graph: the values captured from
the form, the errors found, and what the success path produced.
"""

from typing import TypedDict, Dict, Any, Optional


class FormState(TypedDict):
    """
    Complete state for one submit pass.

    - Form identity and captured values
    - Validation outcome
    - Persistence and feedback results
    """

    # =========================================================================
    # Form
    # =========================================================================
    form_id: str
    """Identifier used to key persisted submissions"""

    field_values: Dict[str, str]
    """Field values captured at submit time (field_id -> value)"""

    # =========================================================================
    # Validation
    # =========================================================================
    validation_errors: Dict[str, str]
    """Field-specific validation errors (field_id -> error_message)"""

    is_valid: bool
    """Whether every field passed"""

    # =========================================================================
    # Success path
    # =========================================================================
    submission: Optional[Dict[str, Any]]
    """Persisted submission record (values + timestamp)"""

    notification: Optional[Dict[str, Any]]
    """Success notice payload handed to the banner"""

    is_reset: bool
    """Whether the form values were cleared after saving"""


def create_initial_state(form_id: str) -> FormState:
    """
    Creates an empty FormState for a new submit pass.

    Args:
        form_id: Identifier of the submitted form

    Returns:
        FormState: Initial state with default values
    """
    return {
        "form_id": form_id,
        "field_values": {},
        "validation_errors": {},
        "is_valid": False,
        "submission": None,
        "notification": None,
        "is_reset": False,
    }


def get_state_summary(state: FormState) -> str:
    """
    Get a human-readable summary of a submit pass.
    Useful for debugging and logging.
    """
    errors = state.get("validation_errors", {})
    return f"""
Submit Summary (Form: {state['form_id']})
==========================================
Fields: {len(state.get('field_values', {}))}
Valid: {state.get('is_valid')}
Validation Errors: {sorted(errors.keys())}
Saved: {state.get('submission') is not None}
Reset: {state.get('is_reset')}
    """.strip()
