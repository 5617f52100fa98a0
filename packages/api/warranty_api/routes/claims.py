# This project was developed with assistance from AI tools.
"""Warranty claim routes. Events are always returned in stored order."""

from typing import Any

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from warranty_store import ClaimStatus, get_db

from ..schemas.records import ClaimCreate, ClaimEventCreate
from ..services import claims
from ..services.mapping import map_claim, map_claim_event

router = APIRouter()


@router.get("")
async def list_claims(
    session: AsyncSession = Depends(get_db),
    roof_id: str | None = Query(default=None, alias="roofId"),
    claim_status: ClaimStatus | None = Query(default=None, alias="status"),
) -> list[dict[str, Any]]:
    found = await claims.list_claims(session, roof_id=roof_id, status=claim_status)
    return [map_claim(claim) for claim in found]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_claim(
    body: ClaimCreate,
    session: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    """File a claim together with its initial timeline."""
    return map_claim(await claims.create_claim(session, body))


@router.get("/{claim_id}")
async def get_claim(
    claim_id: str,
    session: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    return map_claim(await claims.get_claim(session, claim_id))


@router.post("/{claim_id}/events", status_code=status.HTTP_201_CREATED)
async def add_event(
    claim_id: str,
    body: ClaimEventCreate,
    session: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    """Append an event to the end of the claim's timeline."""
    return map_claim_event(await claims.add_claim_event(session, claim_id, body))
