# This project was developed with assistance from AI tools.
"""Repair invoice routes."""

from typing import Any

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from warranty_store import InvoiceStatus, get_db

from ..schemas.records import InvoiceCreate, InvoiceStatusUpdate
from ..services import invoices
from ..services.mapping import map_invoice

router = APIRouter()


@router.get("")
async def list_invoices(
    session: AsyncSession = Depends(get_db),
    roof_id: str | None = Query(default=None, alias="roofId"),
    flagged: bool | None = None,
    invoice_status: InvoiceStatus | None = Query(default=None, alias="status"),
) -> list[dict[str, Any]]:
    found = await invoices.list_invoices(
        session, roof_id=roof_id, flagged=flagged, status=invoice_status
    )
    return [map_invoice(invoice) for invoice in found]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_invoice(
    body: InvoiceCreate,
    session: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    return map_invoice(await invoices.create_invoice(session, body))


@router.patch("/{invoice_id}")
async def update_invoice_status(
    invoice_id: str,
    body: InvoiceStatusUpdate,
    session: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    """Settle a reviewed invoice as ``paid`` or ``warranty``."""
    return map_invoice(await invoices.update_invoice_status(session, invoice_id, body.status))
