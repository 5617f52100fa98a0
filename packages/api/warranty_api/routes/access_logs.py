# This project was developed with assistance from AI tools.
"""Roof access log routes."""

from typing import Any

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from warranty_store import get_db

from ..schemas.records import AccessLogCreate
from ..services.access_logs import create_access_log, list_access_logs
from ..services.mapping import map_access_log

router = APIRouter()


@router.get("")
async def list_logs(
    session: AsyncSession = Depends(get_db),
    roof_id: str | None = Query(default=None, alias="roofId"),
) -> list[dict[str, Any]]:
    """Newest access first."""
    return [map_access_log(entry) for entry in await list_access_logs(session, roof_id=roof_id)]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_log(
    body: AccessLogCreate,
    session: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    return map_access_log(await create_access_log(session, body))
