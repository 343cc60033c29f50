"""ORM Models — SQLAlchemy declarative models for the contacts read model.

Invariants:
    - All models inherit from Base (db/base.py)
    - Contact is the aggregate root; devices are owned by their contact

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from northwind.models.contact import Contact  # noqa: F401
from northwind.models.contact_type import ContactType  # noqa: F401
from northwind.models.contact_device import ContactDevice  # noqa: F401
from northwind.models.phone_type import PhoneType  # noqa: F401
from northwind.models.country import Country  # noqa: F401
