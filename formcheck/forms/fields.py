"""
Field declarations.

A FieldSpec carries a field's identity, its semantic kind and its
declared constraints. The kind decides which single rule applies.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class FieldKind(str, Enum):
    """Semantic category of a form field."""
    TEXT = "text"
    EMAIL = "email"
    NATIONAL_ID = "national_id"
    PHONE = "phone"
    POSTAL_CODE = "postal_code"
    BIRTH_DATE = "birth_date"
    SELECTION = "selection"


class FieldStatus(str, Enum):
    """Per-field lifecycle: untouched -> invalid <-> valid."""
    UNTOUCHED = "untouched"
    INVALID = "invalid"
    VALID = "valid"


class FieldSpec(BaseModel):
    """Declared identity and constraints of one field."""
    field_id: str = Field(..., min_length=1, description="Unique id within the form")
    kind: FieldKind = Field(FieldKind.TEXT, description="Semantic kind driving rule dispatch")
    required: bool = Field(False, description="Whether an empty value is an error")
    min_length: Optional[int] = Field(None, ge=0, description="Minimum character count")
    initial_value: str = Field("", description="Value before any user input")


# Host ids used by the registration page this engine was first written for
_LEGACY_FIELD_IDS = {
    "cpf": FieldKind.NATIONAL_ID,
    "telefone": FieldKind.PHONE,
    "cep": FieldKind.POSTAL_CODE,
    "nasc": FieldKind.BIRTH_DATE,
    "estado": FieldKind.SELECTION,
}


def infer_field_kind(field_id: str, input_type: str = "text") -> FieldKind:
    """
    Infer a kind for hosts that only expose an element id and input type.

    An email input type wins over the id; unknown ids are plain text.
    """
    if (input_type or "").lower() == "email":
        return FieldKind.EMAIL
    return _LEGACY_FIELD_IDS.get(field_id, FieldKind.TEXT)
