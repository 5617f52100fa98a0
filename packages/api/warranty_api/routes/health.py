# This project was developed with assistance from AI tools.
"""Liveness/readiness probe -- no authentication required."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from warranty_store import DatabaseService, get_db_service

from ..core.errors import StoreError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def health(db_service: DatabaseService = Depends(get_db_service)) -> dict[str, str]:
    """Report whether the store answers a trivial query."""
    try:
        await db_service.ping()
    except (SQLAlchemyError, OSError) as exc:
        logger.error("Health check failed: %s", exc)
        raise StoreError("Database unreachable", code="db_unavailable") from exc
    return {"status": "ok", "db": "connected"}
