# This project was developed with assistance from AI tools.
"""Roof inspections (completed, scheduled, overdue)."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from warranty_store import Inspection, InspectionStatus

from ..schemas.records import InspectionCreate
from .records import new_id, reject_duplicate, require_roof

logger = logging.getLogger(__name__)


async def list_inspections(
    session: AsyncSession,
    *,
    roof_id: str | None = None,
    status: InspectionStatus | None = None,
) -> list[Inspection]:
    stmt = select(Inspection).order_by(Inspection.inspection_date.desc(), Inspection.id)
    if roof_id is not None:
        stmt = stmt.where(Inspection.roof_id == roof_id)
    if status is not None:
        stmt = stmt.where(Inspection.status == status)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def create_inspection(session: AsyncSession, data: InspectionCreate) -> Inspection:
    await require_roof(session, data.roof_id)
    inspection_id = data.id or new_id("insp")
    await reject_duplicate(session, Inspection, "Inspection", inspection_id)

    inspection = Inspection(id=inspection_id, **data.model_dump(exclude={"id"}))
    session.add(inspection)
    await session.commit()
    logger.info("Inspection %s (%s) recorded for roof %s", inspection_id, data.status.value, data.roof_id)
    return inspection
