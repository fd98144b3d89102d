"""
Form Validation Engine

Validates form fields on blur and on submit, renders inline errors and
persists accepted submissions.
"""

from formcheck.controller import FormController, create_form_controller
from formcheck.forms import FieldKind, FieldSpec, FieldStatus, Form, infer_field_kind
from formcheck.logic.validators import ValidatorRegistry, create_default_registry
from formcheck.db import SubmissionStore, InMemoryStorage, SqliteStorage
from formcheck.presentation import ErrorPresenter, SuccessBanner

__all__ = [
    "FormController",
    "create_form_controller",
    "FieldKind",
    "FieldSpec",
    "FieldStatus",
    "Form",
    "infer_field_kind",
    "ValidatorRegistry",
    "create_default_registry",
    "SubmissionStore",
    "InMemoryStorage",
    "SqliteStorage",
    "ErrorPresenter",
    "SuccessBanner",
]
