"""
Form Controller

Wires a form to its validator, error presenter and submission store,
and handles the three host events:

    change  -> drop a stale error immediately (no revalidation)
    blur    -> validate the field, show or clear its error
    submit  -> run the submit graph over the whole form
"""

import logging
from typing import Dict, Iterable, List, Optional

from formcheck.config.settings import SUCCESS_BANNER_SECONDS
from formcheck.db.storage import InMemoryStorage
from formcheck.db.stores import SubmissionStore
from formcheck.forms.elements import Form, FormField
from formcheck.forms.fields import FieldSpec, FieldStatus
from formcheck.graph.submit_graph import create_submit_graph
from formcheck.logic.field_validator import FieldValidator
from formcheck.logic.validators import ValidatorRegistry, create_default_registry
from formcheck.models import Submission
from formcheck.presentation.error_presenter import ErrorPresenter
from formcheck.presentation.success_banner import SuccessBanner
from formcheck.state.form_state import FormState, create_initial_state, get_state_summary

logger = logging.getLogger(__name__)


class FormController:
    """
    Owns the live error map and per-field status for one form.

    Usage:
        controller = create_form_controller("signup", specs, store=store)
        controller.on_change("email", "user@example.com")
        controller.on_blur("email")
        result = controller.on_submit()
    """

    def __init__(
        self,
        form: Form,
        registry: Optional[ValidatorRegistry] = None,
        store: Optional[SubmissionStore] = None,
        banner: Optional[SuccessBanner] = None,
        banner_seconds: float = SUCCESS_BANNER_SECONDS,
        verbose: bool = False,
    ):
        self.form = form
        self.registry = registry or create_default_registry()
        self.field_validator = FieldValidator(self.registry, verbose)
        self.presenter = ErrorPresenter(form)
        self.store = store or SubmissionStore(InMemoryStorage())
        self.banner = banner
        self.banner_seconds = banner_seconds
        self.verbose = verbose

        self._errors: Dict[str, str] = {}
        self._status: Dict[str, FieldStatus] = {
            field_id: FieldStatus.UNTOUCHED for field_id in form.field_ids
        }
        self._graph = create_submit_graph(self, verbose)

    # =========================================================================
    # Host events
    # =========================================================================

    def on_change(self, field_id: str, value: Optional[str] = None):
        """
        Handle a value change (keystroke).

        Optionally stores the new value. A recorded error is removed at once
        without revalidating; the field goes back to untouched until blurred.
        """
        field = self._get_field(field_id)
        if field is None:
            return

        if value is not None:
            field.value = value

        if field_id in self._errors:
            self._clear(field_id)
            self._status[field_id] = FieldStatus.UNTOUCHED

    def on_blur(self, field_id: str) -> bool:
        """Validate one field on blur. Returns whether it is valid."""
        field = self._get_field(field_id)
        if field is None:
            return True
        return self.validate_field(field)

    def on_submit(self) -> FormState:
        """
        Handle a submit. The submission never propagates anywhere else:
        the result is returned as the final FormState.
        """
        result = self._graph.invoke(create_initial_state(self.form.form_id))

        if self.verbose:
            logger.info(get_state_summary(result))

        return result

    # =========================================================================
    # Validation
    # =========================================================================

    def validate_field(self, field: FormField) -> bool:
        """Validate a field and update its error display and status."""
        error = self.field_validator.validate(field)

        if error:
            self._errors[field.field_id] = error
            self.presenter.show_error(field.field_id, error)
            self._status[field.field_id] = FieldStatus.INVALID
            return False

        self._clear(field.field_id)
        self._status[field.field_id] = FieldStatus.VALID
        return True

    def validate_form(self) -> bool:
        """Validate every field; the form is valid iff all of them are."""
        is_valid = True
        for field in self.form.fields:
            if not self.validate_field(field):
                is_valid = False
        return is_valid

    def reset(self):
        """Empty every field value and forget recorded errors."""
        self.form.reset()
        self._errors.clear()
        for field_id in self._status:
            self._status[field_id] = FieldStatus.UNTOUCHED

    # =========================================================================
    # Saved data
    # =========================================================================

    def load_saved(self) -> bool:
        """Prefill fields from the last saved submission. Returns whether any was found."""
        saved = self.store.load(self.form.form_id)
        if not saved:
            return False

        for field_id, value in saved.items():
            field = self.form.get_field(field_id)
            if field is not None:
                field.value = "" if value is None else str(value)

        logger.info(f"CONTROLLER | Prefilled form '{self.form.form_id}' from saved data")
        return True

    def history(self) -> List[Submission]:
        return self.store.history(self.form.form_id)

    def clear_history(self):
        self.store.clear_history(self.form.form_id)

    # =========================================================================
    # Introspection
    # =========================================================================

    @property
    def errors(self) -> Dict[str, str]:
        """Copy of the live error map (field_id -> message)."""
        return dict(self._errors)

    def field_status(self, field_id: str) -> Optional[FieldStatus]:
        return self._status.get(field_id)

    def _clear(self, field_id: str):
        self._errors.pop(field_id, None)
        self.presenter.clear_error(field_id)

    def _get_field(self, field_id: str) -> Optional[FormField]:
        field = self.form.get_field(field_id)
        if field is None:
            logger.warning(f"CONTROLLER | Unknown field '{field_id}' in form '{self.form.form_id}'")
        return field


def create_form_controller(
    form_id: str,
    specs: Iterable[FieldSpec],
    registry: Optional[ValidatorRegistry] = None,
    store: Optional[SubmissionStore] = None,
    banner: Optional[SuccessBanner] = None,
    banner_seconds: float = SUCCESS_BANNER_SECONDS,
    verbose: bool = False,
) -> FormController:
    """
    Build a form from field declarations and attach a controller to it.

    Args:
        form_id: Form identifier (keys the persisted submissions)
        specs: Field declarations, in display order
        registry: Rule registry (a fresh default one if omitted)
        store: Submission store (in-memory if omitted)
        banner: Success banner collaborator
        banner_seconds: How long the success notice stays up
        verbose: Enable verbose logging

    Returns:
        FormController bound to the new form
    """
    form = Form(form_id, specs)
    controller = FormController(
        form,
        registry=registry,
        store=store,
        banner=banner,
        banner_seconds=banner_seconds,
        verbose=verbose,
    )
    logger.info(f"CONTROLLER | Attached to form '{form.form_id}' ({len(form.field_ids)} fields)")
    return controller
