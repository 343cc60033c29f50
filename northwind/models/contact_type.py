"""ContactType ORM — lookup table of contact titles (Owner, Sales Agent, ...)."""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from northwind.db.base import Base


class ContactType(Base):
    """Contact title lookup."""
    __tablename__ = "contact_types"

    contact_type_identifier: Mapped[int] = mapped_column(
        Integer, primary_key=True,
    )
    contact_title: Mapped[str | None] = mapped_column(String(50), nullable=True)

    contacts: Mapped[list["Contact"]] = relationship(
        "Contact", back_populates="contact_type", lazy="raise",
    )
