# This project was developed with assistance from AI tools.
"""Roof access log: append-only record of who went onto which roof."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from warranty_store import AccessLog

from ..schemas.records import AccessLogCreate
from .records import new_id, reject_duplicate, require_roof

logger = logging.getLogger(__name__)


async def list_access_logs(session: AsyncSession, *, roof_id: str | None = None) -> list[AccessLog]:
    """Newest first."""
    stmt = select(AccessLog).order_by(AccessLog.accessed_at.desc(), AccessLog.id)
    if roof_id is not None:
        stmt = stmt.where(AccessLog.roof_id == roof_id)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def create_access_log(session: AsyncSession, data: AccessLogCreate) -> AccessLog:
    await require_roof(session, data.roof_id)
    log_id = data.id or new_id("al")
    await reject_duplicate(session, AccessLog, "Access log", log_id)

    entry = AccessLog(id=log_id, **data.model_dump(exclude={"id"}))
    session.add(entry)
    await session.commit()
    logger.info("Access log %s recorded for roof %s", log_id, data.roof_id)
    return entry
