# This project was developed with assistance from AI tools.
"""Shared helpers for the entity services."""

import uuid

from sqlalchemy.ext.asyncio import AsyncSession
from warranty_store import Roof

from ..core.errors import ConflictError, NotFoundError


def new_id(prefix: str) -> str:
    """Generated id in the seeded style, e.g. ``inv-3f9a1c02``."""
    return f"{prefix}-{uuid.uuid4().hex[:8]}"


async def require_roof(session: AsyncSession, roof_id: str) -> Roof:
    roof = await session.get(Roof, roof_id)
    if roof is None:
        raise NotFoundError("Roof", roof_id)
    return roof


async def reject_duplicate(session: AsyncSession, model, entity: str, entity_id: str) -> None:
    if await session.get(model, entity_id) is not None:
        raise ConflictError(f"{entity} {entity_id} already exists", code="duplicate")
