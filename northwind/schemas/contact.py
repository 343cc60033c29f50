"""Contact Schemas — Pydantic models with field-level validation for contacts.

Invariants:
    - ContactIn.first_name / last_name: required, stripped, at most 50 chars
    - ContactIn.contact_type_identifier: required and greater than zero
    - ContactIn.contact_type: a contact type must be associated
    - View schemas hold no back-references, so serialization never cycles

Design Decisions:
    - Rule messages live in field_validators (not Field constraints) so each rule reports
      the exact user-facing sentence
    - from_attributes=True on views: built straight from ORM rows
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

NAME_MAX_LENGTH: int = 50


def _require_name(v: str | None, label: str) -> str:
    v = (v or "").strip()
    if not v:
        raise ValueError(f"{label} is required.")
    if len(v) > NAME_MAX_LENGTH:
        raise ValueError(
            f"{label} must not exceed {NAME_MAX_LENGTH} characters.",
        )
    return v


class PhoneTypeView(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    phone_type_identifier: int
    phone_type_description: str | None = None


class ContactTypeView(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    contact_type_identifier: int
    contact_title: str | None = None


class DeviceView(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    contact_device_id: int
    phone_number: str | None = None
    phone_type: PhoneTypeView | None = None


class ContactView(BaseModel):
    """Contact with its type and devices, as shown in the JSON view."""
    model_config = ConfigDict(from_attributes=True)

    contact_id: int
    first_name: str | None = None
    last_name: str | None = None
    full_name: str | None = None
    contact_type: ContactTypeView | None = None
    devices: list[DeviceView] = Field(default_factory=list)


class ContactIn(BaseModel):
    """Contact submitted for create/edit — validated before it reaches the database."""
    # validate_default: omitted fields must hit the "required" rules too
    model_config = ConfigDict(from_attributes=True, validate_default=True)

    first_name: str | None = None
    last_name: str | None = None
    contact_type_identifier: int | None = None
    contact_type: ContactTypeView | None = None

    @field_validator("first_name", mode="before")
    @classmethod
    def check_first_name(cls, v):
        return _require_name(v, "First name")

    @field_validator("last_name", mode="before")
    @classmethod
    def check_last_name(cls, v):
        return _require_name(v, "Last name")

    @field_validator("contact_type_identifier", mode="before")
    @classmethod
    def check_contact_type_identifier(cls, v):
        if v is None:
            raise ValueError("Contact type is required.")
        return v

    @field_validator("contact_type_identifier")
    @classmethod
    def check_contact_type_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(
                "Contact type identifier must be greater than zero.",
            )
        return v

    @field_validator("contact_type", mode="before")
    @classmethod
    def check_contact_type(cls, v):
        if v is None:
            raise ValueError("A valid contact type must be associated.")
        return v


class SelectOption(BaseModel):
    """One entry of a selection list; value -1 marks the placeholder."""
    value: int
    text: str
