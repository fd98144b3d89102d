"""
Host-side form structure.

These objects stand in for the page elements: each FormField holds its
current value, the CSS classes and attributes the presenter toggles, and
the container that receives the error node.
"""

import logging
from typing import Dict, Iterable, List, Optional, Set

from formcheck.config.constants import DEFAULT_FORM_ID
from formcheck.forms.fields import FieldKind, FieldSpec

logger = logging.getLogger(__name__)

ERROR_NODE_CLASS = "form-field__error"
INVALID_FIELD_CLASS = "is-invalid"
ERROR_CONTAINER_CLASS = "form-field--error"


class ErrorNode:
    """Inline error display appended to a field's container."""

    def __init__(self, message: str):
        self.message = message
        self.css_class = ERROR_NODE_CLASS
        self.role = "alert"

    def __repr__(self) -> str:
        return f"ErrorNode({self.message!r})"


class FieldContainer:
    """The wrapper element around a field (its parent)."""

    def __init__(self):
        self.classes: Set[str] = set()
        self.children: List[ErrorNode] = []

    def find_error_node(self) -> Optional[ErrorNode]:
        for child in self.children:
            if child.css_class == ERROR_NODE_CLASS:
                return child
        return None

    def remove(self, node: ErrorNode):
        self.children.remove(node)


class FormField:
    """A field element: declared spec plus live value and visual state."""

    def __init__(self, spec: FieldSpec):
        self.spec = spec
        self.value: str = spec.initial_value
        self.classes: Set[str] = set()
        self.attributes: Dict[str, str] = {}
        self.container = FieldContainer()

    @property
    def field_id(self) -> str:
        return self.spec.field_id

    @property
    def kind(self) -> FieldKind:
        return self.spec.kind

    @property
    def required(self) -> bool:
        return self.spec.required

    @property
    def min_length(self) -> Optional[int]:
        return self.spec.min_length

    @property
    def is_invalid(self) -> bool:
        return INVALID_FIELD_CLASS in self.classes

    @property
    def error_message(self) -> Optional[str]:
        node = self.container.find_error_node()
        return node.message if node else None


class Form:
    """
    Ordered collection of fields sharing a form id.

    Duplicate field ids are a configuration error: the first declaration
    is kept and later ones are dropped with a warning.
    """

    def __init__(self, form_id: str, specs: Iterable[FieldSpec]):
        self.form_id = form_id or DEFAULT_FORM_ID
        self._fields: Dict[str, FormField] = {}

        for spec in specs:
            if spec.field_id in self._fields:
                logger.warning(
                    f"Duplicate field id '{spec.field_id}' in form '{self.form_id}', ignoring"
                )
                continue
            self._fields[spec.field_id] = FormField(spec)

    @property
    def fields(self) -> List[FormField]:
        return list(self._fields.values())

    @property
    def field_ids(self) -> List[str]:
        return list(self._fields.keys())

    def get_field(self, field_id: str) -> Optional[FormField]:
        return self._fields.get(field_id)

    def values(self) -> Dict[str, str]:
        """Current values keyed by field id (form data at submit time)."""
        return {f.field_id: f.value for f in self._fields.values()}

    def reset(self):
        """Empty every field value."""
        for field in self._fields.values():
            field.value = ""
