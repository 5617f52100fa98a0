# This project was developed with assistance from AI tools.
"""Warranty claims and their timelines.

A claim's events are ordered by ``sort_order`` only; event dates are
informational and may be out of order. Events are append-only and a new
one always goes to the end.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from warranty_store import Claim, ClaimEvent, ClaimStatus

from ..core.errors import NotFoundError
from ..schemas.records import ClaimCreate, ClaimEventCreate
from .records import new_id, reject_duplicate, require_roof

logger = logging.getLogger(__name__)


async def list_claims(
    session: AsyncSession,
    *,
    roof_id: str | None = None,
    status: ClaimStatus | None = None,
) -> list[Claim]:
    stmt = (
        select(Claim)
        .options(selectinload(Claim.events))
        .order_by(Claim.filed_on.desc(), Claim.id)
    )
    if roof_id is not None:
        stmt = stmt.where(Claim.roof_id == roof_id)
    if status is not None:
        stmt = stmt.where(Claim.status == status)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_claim(session: AsyncSession, claim_id: str) -> Claim:
    result = await session.execute(
        select(Claim).options(selectinload(Claim.events)).where(Claim.id == claim_id)
    )
    claim = result.scalar_one_or_none()
    if claim is None:
        raise NotFoundError("Claim", claim_id)
    return claim


async def create_claim(session: AsyncSession, data: ClaimCreate) -> Claim:
    """Insert the claim and its initial events in one transaction."""
    await require_roof(session, data.roof_id)
    claim_id = data.id or new_id("cl")
    await reject_duplicate(session, Claim, "Claim", claim_id)

    claim = Claim(id=claim_id, **data.model_dump(exclude={"id", "events"}))
    claim.events = [
        ClaimEvent(event_date=ev.event_date, event=ev.event, sort_order=position)
        for position, ev in enumerate(data.events)
    ]
    session.add(claim)
    await session.commit()
    logger.info("Claim %s filed for roof %s with %d events", claim_id, data.roof_id, len(data.events))
    return claim


async def add_claim_event(session: AsyncSession, claim_id: str, data: ClaimEventCreate) -> ClaimEvent:
    """Append an event after the claim's current last one."""
    # Row lock on the claim serializes concurrent appends
    locked = await session.execute(select(Claim.id).where(Claim.id == claim_id).with_for_update())
    if locked.scalar_one_or_none() is None:
        raise NotFoundError("Claim", claim_id)

    next_order = await session.execute(
        select(func.coalesce(func.max(ClaimEvent.sort_order) + 1, 0)).where(
            ClaimEvent.claim_id == claim_id
        )
    )
    event = ClaimEvent(
        claim_id=claim_id,
        event_date=data.event_date,
        event=data.event,
        sort_order=next_order.scalar_one(),
    )
    session.add(event)
    await session.commit()
    logger.info("Claim %s: event %d appended", claim_id, event.sort_order)
    return event
