"""Country ORM — lookup table used by selection lists."""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from northwind.db.base import Base


class Country(Base):
    __tablename__ = "countries"

    country_identifier: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str | None] = mapped_column(String(100), nullable=True)
