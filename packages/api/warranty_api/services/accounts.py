# This project was developed with assistance from AI tools.
"""Account tree service: owners, property managers, properties, roofs, roof warranties."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from warranty_store import Owner, Property, PropertyManager, Roof, RoofWarranty

from ..core.errors import ConflictError, NotFoundError, ValidationError
from ..schemas.account import (
    OwnerCreate,
    PropertyCreate,
    PropertyManagerCreate,
    RoofCreate,
    RoofWarrantyCreate,
)
from .compliance import derive_compliance
from .records import new_id, reject_duplicate

logger = logging.getLogger(__name__)

_ACCOUNT_TREE = (
    selectinload(Owner.property_managers),
    selectinload(Owner.properties).selectinload(Property.roofs).selectinload(Roof.warranty),
)


async def _require(session: AsyncSession, model, entity: str, entity_id: str):
    obj = await session.get(model, entity_id)
    if obj is None:
        raise NotFoundError(entity, entity_id)
    return obj


async def list_accounts(session: AsyncSession) -> list[Owner]:
    """Every owner with managers and the property -> roof -> warranty tree loaded."""
    result = await session.execute(select(Owner).options(*_ACCOUNT_TREE).order_by(Owner.id))
    return list(result.scalars().all())


async def get_account(session: AsyncSession, owner_id: str) -> Owner:
    result = await session.execute(
        select(Owner).options(*_ACCOUNT_TREE).where(Owner.id == owner_id)
    )
    owner = result.scalar_one_or_none()
    if owner is None:
        raise NotFoundError("Owner", owner_id)
    return owner


async def create_owner(session: AsyncSession, data: OwnerCreate) -> Owner:
    owner_id = data.id or new_id("own")
    await reject_duplicate(session, Owner, "Owner", owner_id)

    owner = Owner(id=owner_id, **data.model_dump(exclude={"id"}))
    session.add(owner)
    await session.commit()
    await session.refresh(owner)
    logger.info("Owner %s created", owner_id)
    return owner


async def create_property_manager(
    session: AsyncSession, owner_id: str, data: PropertyManagerCreate
) -> PropertyManager:
    await _require(session, Owner, "Owner", owner_id)
    manager_id = data.id or new_id("pm")
    await reject_duplicate(session, PropertyManager, "Property manager", manager_id)

    manager = PropertyManager(id=manager_id, owner_id=owner_id, **data.model_dump(exclude={"id"}))
    session.add(manager)
    await session.commit()
    logger.info("Property manager %s created for owner %s", manager_id, owner_id)
    return manager


async def create_property(session: AsyncSession, owner_id: str, data: PropertyCreate) -> Property:
    """Create a property; a manager, when given, must serve the same owner."""
    await _require(session, Owner, "Owner", owner_id)

    if data.managed_by is not None:
        manager = await session.get(PropertyManager, data.managed_by)
        if manager is None or manager.owner_id != owner_id:
            raise ValidationError(
                f"Property manager {data.managed_by} does not serve owner {owner_id}",
                fields=[{"field": "managedBy", "message": "must be a manager of this owner"}],
            )

    property_id = data.id or new_id("prop")
    await reject_duplicate(session, Property, "Property", property_id)

    prop = Property(id=property_id, owner_id=owner_id, **data.model_dump(exclude={"id"}))
    session.add(prop)
    await session.commit()
    logger.info("Property %s created for owner %s", property_id, owner_id)
    return prop


def _build_warranty(roof_id: str, data: RoofWarrantyCreate) -> RoofWarranty:
    compliance = data.compliance or derive_compliance(
        data.last_inspection, data.next_inspection, data.requirements
    )
    return RoofWarranty(
        roof_id=roof_id,
        compliance=compliance,
        **data.model_dump(exclude={"compliance"}),
    )


async def create_roof(
    session: AsyncSession, property_id: str, data: RoofCreate
) -> tuple[Roof, RoofWarranty | None]:
    """Create a roof, and its warranty in the same transaction when supplied."""
    await _require(session, Property, "Property", property_id)
    roof_id = data.id or new_id("r")
    await reject_duplicate(session, Roof, "Roof", roof_id)

    roof = Roof(id=roof_id, property_id=property_id, **data.model_dump(exclude={"id", "warranty"}))
    session.add(roof)
    warranty = None
    if data.warranty is not None:
        warranty = _build_warranty(roof_id, data.warranty)
        session.add(warranty)
    await session.commit()
    logger.info("Roof %s created on property %s (warranty=%s)", roof_id, property_id, bool(warranty))
    return roof, warranty


async def create_roof_warranty(
    session: AsyncSession, roof_id: str, data: RoofWarrantyCreate
) -> RoofWarranty:
    """Attach the warranty to a roof. A roof carries at most one (409 otherwise)."""
    await _require(session, Roof, "Roof", roof_id)
    existing = await session.execute(select(RoofWarranty.id).where(RoofWarranty.roof_id == roof_id))
    if existing.scalar_one_or_none() is not None:
        raise ConflictError(f"Roof {roof_id} already has a warranty", code="duplicate")

    warranty = _build_warranty(roof_id, data)
    session.add(warranty)
    await session.commit()
    await session.refresh(warranty)
    logger.info("Warranty %s attached to roof %s", warranty.id, roof_id)
    return warranty
