"""Contact Operations — read queries behind the contact pages.

Invariants:
    - get_by_identifier eager-loads type, devices and each device's phone type in one call;
      nothing is lazy-loaded afterwards (relationships are lazy="raise")
    - Every selection list starts with a placeholder whose value is -1
    - pick_random_contact_id returns None for an empty table, never raises
    - show_contact_json prints exactly the payload get_contact_json returns

Design Decisions:
    - selectinload chains mirror the original Include/ThenInclude shape
    - Selection lists are projected to (id, text) columns, not full rows
    - rng injectable so callers (and tests) control randomness
"""

import logging
import random
from dataclasses import dataclass, field

from rich.console import Console
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from northwind.core.errors import ResourceNotFoundError
from northwind.infrastructure.json_console import display_json_console
from northwind.models import Contact, ContactDevice, ContactType, Country
from northwind.schemas.contact import ContactView, SelectOption

logger = logging.getLogger(__name__)

PLACEHOLDER_VALUE: int = -1
CONTACT_PLACEHOLDER: str = "Select contact..."
CONTACT_TYPE_PLACEHOLDER: str = "Select contact type..."
COUNTRY_PLACEHOLDER: str = "Select country..."


@dataclass
class DefaultSelections:
    contacts: list[SelectOption] = field(default_factory=list)
    contact_types: list[SelectOption] = field(default_factory=list)
    countries: list[SelectOption] = field(default_factory=list)


async def get_by_identifier(
    db: AsyncSession, contact_id: int,
) -> Contact | None:
    """Load one contact with its type, devices and device phone types."""
    result = await db.execute(
        select(Contact)
        .options(
            selectinload(Contact.contact_type),
            selectinload(Contact.devices).selectinload(ContactDevice.phone_type),
        )
        .where(Contact.contact_id == contact_id),
    )
    return result.scalars().first()


async def _options(
    db: AsyncSession, id_col, text_col, placeholder: str,
) -> list[SelectOption]:
    rows = (await db.execute(select(id_col, text_col).order_by(id_col))).all()
    options = [SelectOption(value=PLACEHOLDER_VALUE, text=placeholder)]
    options.extend(SelectOption(value=value, text=text or "") for value, text in rows)
    return options


async def get_default_selections(db: AsyncSession) -> DefaultSelections:
    """Contacts, contact types and countries for dropdowns, placeholder first."""
    return DefaultSelections(
        contacts=await _options(
            db, Contact.contact_id, Contact.full_name, CONTACT_PLACEHOLDER,
        ),
        contact_types=await _options(
            db, ContactType.contact_type_identifier, ContactType.contact_title,
            CONTACT_TYPE_PLACEHOLDER,
        ),
        countries=await _options(
            db, Country.country_identifier, Country.name, COUNTRY_PLACEHOLDER,
        ),
    )


async def pick_random_contact_id(
    db: AsyncSession, rng: random.Random | None = None,
) -> int | None:
    """Random id between 1 and the highest contact id.

    The upper bound is inclusive on purpose so the newest contact can be picked.
    A table holding only id 1 always yields 1.
    """
    max_id = (await db.execute(select(func.max(Contact.contact_id)))).scalar()
    if max_id is None:
        return None
    return (rng or random).randint(1, max_id)


async def get_contact_json(db: AsyncSession, contact_id: int) -> str:
    """Indented JSON of a contact with its type and devices."""
    contact = await get_by_identifier(db, contact_id)
    if contact is None:
        raise ResourceNotFoundError("Contact", str(contact_id))
    payload = ContactView.model_validate(contact).model_dump_json(indent=2)
    logger.debug("Rendered contact JSON", extra={"contact_id": contact_id})
    return payload


async def show_contact_json(
    db: AsyncSession, contact_id: int, console: Console | None = None,
) -> str:
    """Print the contact JSON to the console under a "Contact" title and return it."""
    payload = await get_contact_json(db, contact_id)
    display_json_console(payload, "Contact", console)
    return payload
