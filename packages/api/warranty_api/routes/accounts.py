# This project was developed with assistance from AI tools.
"""Account tree routes: owners and everything beneath them."""

from typing import Any

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from warranty_store import get_db

from ..schemas.account import (
    OwnerCreate,
    PropertyCreate,
    PropertyManagerCreate,
    RoofCreate,
    RoofWarrantyCreate,
)
from ..services import accounts
from ..services.mapping import (
    map_owner,
    map_property,
    map_property_manager,
    map_roof,
    map_roof_warranty,
)

router = APIRouter()


@router.get("")
async def list_accounts(session: AsyncSession = Depends(get_db)) -> list[dict[str, Any]]:
    """Every owner with managers and the property -> roof -> warranty tree."""
    owners = await accounts.list_accounts(session)
    return [map_owner(owner, nested=True) for owner in owners]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_owner(
    body: OwnerCreate,
    session: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    return map_owner(await accounts.create_owner(session, body))


@router.get("/{owner_id}")
async def get_account(
    owner_id: str,
    session: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    return map_owner(await accounts.get_account(session, owner_id), nested=True)


@router.post("/{owner_id}/managers", status_code=status.HTTP_201_CREATED)
async def create_property_manager(
    owner_id: str,
    body: PropertyManagerCreate,
    session: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    return map_property_manager(await accounts.create_property_manager(session, owner_id, body))


@router.post("/{owner_id}/properties", status_code=status.HTTP_201_CREATED)
async def create_property(
    owner_id: str,
    body: PropertyCreate,
    session: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    return map_property(await accounts.create_property(session, owner_id, body))


@router.post("/properties/{property_id}/roofs", status_code=status.HTTP_201_CREATED)
async def create_roof(
    property_id: str,
    body: RoofCreate,
    session: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    """Create a roof; a nested ``warranty`` is stored in the same transaction."""
    roof, warranty = await accounts.create_roof(session, property_id, body)
    record = map_roof(roof)
    record["warranty"] = map_roof_warranty(warranty) if warranty is not None else None
    return record


@router.post("/roofs/{roof_id}/warranty", status_code=status.HTTP_201_CREATED)
async def create_roof_warranty(
    roof_id: str,
    body: RoofWarrantyCreate,
    session: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    return map_roof_warranty(await accounts.create_roof_warranty(session, roof_id, body))
