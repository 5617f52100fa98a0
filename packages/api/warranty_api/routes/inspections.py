# This project was developed with assistance from AI tools.
"""Roof inspection routes."""

from typing import Any

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from warranty_store import InspectionStatus, get_db

from ..schemas.records import InspectionCreate
from ..services.inspections import create_inspection, list_inspections
from ..services.mapping import map_inspection

router = APIRouter()


@router.get("")
async def list_all(
    session: AsyncSession = Depends(get_db),
    roof_id: str | None = Query(default=None, alias="roofId"),
    inspection_status: InspectionStatus | None = Query(default=None, alias="status"),
) -> list[dict[str, Any]]:
    found = await list_inspections(session, roof_id=roof_id, status=inspection_status)
    return [map_inspection(inspection) for inspection in found]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create(
    body: InspectionCreate,
    session: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    return map_inspection(await create_inspection(session, body))
