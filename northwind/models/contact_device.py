"""ContactDevice ORM — a phone number belonging to a contact.

Invariants:
    - contact_id and phone_type_identifier are nullable foreign keys, as in the source data
"""

from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from northwind.db.base import Base


class ContactDevice(Base):
    """Phone device of a contact."""
    __tablename__ = "contact_devices"

    contact_device_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    contact_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("contacts.contact_id"), nullable=True,
    )
    phone_type_identifier: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("phone_types.phone_type_identifier"),
        nullable=True,
    )
    phone_number: Mapped[str | None] = mapped_column(String(30), nullable=True)

    contact: Mapped["Contact"] = relationship(
        "Contact", back_populates="devices", lazy="raise",
    )
    phone_type: Mapped["PhoneType"] = relationship(
        "PhoneType", lazy="raise",
    )
