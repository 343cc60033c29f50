"""Service test fixtures — async in-memory DB seeded with a small contacts set.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Seed ids are explicit so tests can refer to them
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from northwind.db.base import Base
from northwind.models import (
    Contact, ContactDevice, ContactType, Country, PhoneType,
)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_db(test_engine):
    factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    async with factory() as session:
        yield session


@pytest.fixture
async def seed_contacts(test_db):
    """Two contacts (one with devices), two contact types, two countries."""
    owner = ContactType(contact_type_identifier=1, contact_title="Owner")
    agent = ContactType(contact_type_identifier=2, contact_title=None)
    home = PhoneType(phone_type_identifier=1, phone_type_description="Home")
    cell = PhoneType(phone_type_identifier=2, phone_type_description="Cell")
    test_db.add_all([
        owner, agent, home, cell,
        Country(country_identifier=1, name="Germany"),
        Country(country_identifier=2, name="Mexico"),
        Contact(
            contact_id=1, first_name="Maria", last_name="Anders",
            full_name="Maria Anders", contact_type_identifier=1,
        ),
        Contact(
            contact_id=5, first_name="Ana", last_name="Trujillo",
            full_name=None, contact_type_identifier=None,
        ),
        ContactDevice(
            contact_device_id=10, contact_id=1,
            phone_type_identifier=1, phone_number="030-0074321",
        ),
        ContactDevice(
            contact_device_id=11, contact_id=1,
            phone_type_identifier=2, phone_number="030-0076545",
        ),
    ])
    await test_db.commit()
    test_db.expunge_all()
