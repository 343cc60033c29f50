"""PhoneType ORM — lookup table of device kinds (Home, Cell, Office, ...)."""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from northwind.db.base import Base


class PhoneType(Base):
    __tablename__ = "phone_types"

    phone_type_identifier: Mapped[int] = mapped_column(
        Integer, primary_key=True,
    )
    phone_type_description: Mapped[str | None] = mapped_column(
        String(50), nullable=True,
    )
