"""Contact ORM — a person with an optional contact type and phone devices.

Invariants:
    - contact_id is the integer primary key
    - contact_type_identifier is nullable (unassigned contacts exist in the data)
    - devices are deleted with their contact

Design Decisions:
    - full_name stored, not computed: the source data ships it precomputed
    - Relationships are lazy="raise": async sessions cannot lazy-load, so every
      query states its eager loads explicitly (see services/contact_operations.py)
"""

from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from northwind.db.base import Base


class Contact(Base):
    """Contact aggregate root."""
    __tablename__ = "contacts"

    contact_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    contact_type_identifier: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("contact_types.contact_type_identifier"),
        nullable=True,
    )
    full_name: Mapped[str | None] = mapped_column(String(101), nullable=True)

    # Relationships
    contact_type: Mapped["ContactType"] = relationship(
        "ContactType", back_populates="contacts", lazy="raise",
    )
    devices: Mapped[list["ContactDevice"]] = relationship(
        "ContactDevice", back_populates="contact",
        cascade="all, delete-orphan", lazy="raise",
    )
