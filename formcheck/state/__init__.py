"""State management for form submission."""

from formcheck.state.form_state import FormState, create_initial_state, get_state_summary

__all__ = [
    "FormState",
    "create_initial_state",
    "get_state_summary",
]
