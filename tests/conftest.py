"""Test fixtures for the form validation engine."""

import sys
from pathlib import Path
from typing import Callable, List, Tuple

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))

from formcheck.db.storage import InMemoryStorage
from formcheck.db.stores import SubmissionStore
from formcheck.forms.fields import FieldKind, FieldSpec

FIXED_TIMESTAMP = "2026-01-15T10:30:00.000Z"


class RecordingScheduler:
    """Captures scheduled callbacks instead of starting timers."""

    def __init__(self):
        self.calls: List[Tuple[float, Callable[[], None]]] = []

    def __call__(self, delay, callback):
        self.calls.append((delay, callback))

    def fire_all(self):
        for _, callback in self.calls:
            callback()


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def store(storage):
    return SubmissionStore(storage, history_limit=10, clock=lambda: FIXED_TIMESTAMP)


@pytest.fixture
def scheduler():
    return RecordingScheduler()


@pytest.fixture
def registration_specs():
    """The registration form: name, e-mail, CPF, phone, CEP, birth date, state."""
    return [
        FieldSpec(field_id="nome", kind=FieldKind.TEXT, required=True, min_length=3),
        FieldSpec(field_id="email", kind=FieldKind.EMAIL, required=True),
        FieldSpec(field_id="cpf", kind=FieldKind.NATIONAL_ID, required=True),
        FieldSpec(field_id="telefone", kind=FieldKind.PHONE),
        FieldSpec(field_id="cep", kind=FieldKind.POSTAL_CODE),
        FieldSpec(field_id="nasc", kind=FieldKind.BIRTH_DATE),
        FieldSpec(field_id="estado", kind=FieldKind.SELECTION, required=True),
    ]


@pytest.fixture
def valid_values():
    return {
        "nome": "Maria Silva",
        "email": "maria@example.com",
        "cpf": "529.982.247-25",
        "telefone": "(11) 91234-5678",
        "cep": "01310-100",
        "nasc": "1990-05-10",
        "estado": "SP",
    }
