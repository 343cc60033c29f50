"""Contact Schemas — tests for contact validation rules and read views."""

import pytest
from pydantic import ValidationError

from northwind.schemas.contact import ContactIn, ContactView, NAME_MAX_LENGTH

VALID = {
    "first_name": "Maria",
    "last_name": "Anders",
    "contact_type_identifier": 1,
    "contact_type": {"contact_type_identifier": 1, "contact_title": "Owner"},
}


def _messages(exc: ValidationError) -> list[str]:
    return [e["msg"] for e in exc.errors()]


def test_valid_contact_passes_and_strips_names():
    contact = ContactIn(**{**VALID, "first_name": "  Maria  "})
    assert contact.first_name == "Maria"
    assert contact.contact_type.contact_title == "Owner"


@pytest.mark.parametrize("field,label", [
    ("first_name", "First name"),
    ("last_name", "Last name"),
])
@pytest.mark.parametrize("value", [None, "", "   "])
def test_names_required(field, label, value):
    with pytest.raises(ValidationError) as exc_info:
        ContactIn(**{**VALID, field: value})
    assert f"Value error, {label} is required." in _messages(exc_info.value)


def test_omitted_name_is_required():
    data = {k: v for k, v in VALID.items() if k != "last_name"}
    with pytest.raises(ValidationError) as exc_info:
        ContactIn(**data)
    assert "Value error, Last name is required." in _messages(exc_info.value)


def test_name_length_limit():
    ContactIn(**{**VALID, "first_name": "x" * NAME_MAX_LENGTH})
    with pytest.raises(ValidationError) as exc_info:
        ContactIn(**{**VALID, "first_name": "x" * (NAME_MAX_LENGTH + 1)})
    assert (
        "Value error, First name must not exceed 50 characters."
        in _messages(exc_info.value)
    )


def test_contact_type_identifier_required():
    with pytest.raises(ValidationError) as exc_info:
        ContactIn(**{**VALID, "contact_type_identifier": None})
    assert "Value error, Contact type is required." in _messages(exc_info.value)


@pytest.mark.parametrize("value", [0, -1])
def test_contact_type_identifier_positive(value):
    with pytest.raises(ValidationError) as exc_info:
        ContactIn(**{**VALID, "contact_type_identifier": value})
    assert (
        "Value error, Contact type identifier must be greater than zero."
        in _messages(exc_info.value)
    )


def test_contact_type_must_be_associated():
    with pytest.raises(ValidationError) as exc_info:
        ContactIn(**{**VALID, "contact_type": None})
    assert (
        "Value error, A valid contact type must be associated."
        in _messages(exc_info.value)
    )


def test_all_rule_failures_reported_together():
    with pytest.raises(ValidationError) as exc_info:
        ContactIn()
    assert len(exc_info.value.errors()) == 4


def test_contact_view_defaults():
    view = ContactView(contact_id=3)
    assert view.devices == []
    assert view.contact_type is None
