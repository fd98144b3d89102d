"""Form structure: field kinds, declarations and host elements."""

from formcheck.forms.fields import FieldKind, FieldSpec, FieldStatus, infer_field_kind
from formcheck.forms.elements import ErrorNode, FieldContainer, FormField, Form

__all__ = [
    "FieldKind",
    "FieldSpec",
    "FieldStatus",
    "infer_field_kind",
    "ErrorNode",
    "FieldContainer",
    "FormField",
    "Form",
]
