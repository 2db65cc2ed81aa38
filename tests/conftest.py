"""
Fixtures communes aux tests.
"""
import pytest

from core.models.common import Signature
from core.models.form import FormData
from core.storage.form_store import FormStore


VALID_FIELDS = dict(
    first_name="Alice",
    middle_initial="B",
    last_name="Carter",
    display_name="alice",
    ssn="123456789",
    phone="4055551234",
    email="alice@example.com",
    address="12 Elm St",
)


def make_form(display_name: str = "alice", **overrides) -> FormData:
    fields = {**VALID_FIELDS, "display_name": display_name, **overrides}
    fields.setdefault("signature", Signature())
    return FormData(**fields)


@pytest.fixture
def valid_fields():
    """Jeu de champs valide, signature incluse."""
    return {**VALID_FIELDS, "signature": Signature.from_points([(1, 1), (2, 2)])}


@pytest.fixture
def default_form():
    return FormData.create_default()


@pytest.fixture
def abc_store():
    """Store non trié : Charlie, Alice, Bob."""
    return FormStore([make_form("Charlie"), make_form("Alice"), make_form("Bob")])


@pytest.fixture
def form_factory():
    """make_form(display_name, **overrides) -> FormData valide."""
    return make_form
