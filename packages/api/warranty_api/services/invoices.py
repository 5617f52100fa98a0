# This project was developed with assistance from AI tools.
"""Repair invoices and their review workflow (review -> paid | warranty)."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from warranty_store import Invoice, InvoiceStatus

from ..core.errors import ConflictError, NotFoundError
from ..schemas.records import InvoiceCreate
from .records import new_id, reject_duplicate, require_roof

logger = logging.getLogger(__name__)


async def list_invoices(
    session: AsyncSession,
    *,
    roof_id: str | None = None,
    flagged: bool | None = None,
    status: InvoiceStatus | None = None,
) -> list[Invoice]:
    """Newest invoice date first."""
    stmt = select(Invoice).order_by(Invoice.invoice_date.desc(), Invoice.id)
    if roof_id is not None:
        stmt = stmt.where(Invoice.roof_id == roof_id)
    if flagged is not None:
        stmt = stmt.where(Invoice.flagged.is_(flagged))
    if status is not None:
        stmt = stmt.where(Invoice.status == status)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def create_invoice(session: AsyncSession, data: InvoiceCreate) -> Invoice:
    await require_roof(session, data.roof_id)
    invoice_id = data.id or new_id("inv")
    await reject_duplicate(session, Invoice, "Invoice", invoice_id)

    invoice = Invoice(id=invoice_id, **data.model_dump(exclude={"id"}))
    session.add(invoice)
    await session.commit()
    logger.info(
        "Invoice %s recorded for roof %s (flagged=%s)", invoice_id, data.roof_id, data.flagged
    )
    return invoice


async def update_invoice_status(
    session: AsyncSession, invoice_id: str, new_status: InvoiceStatus
) -> Invoice:
    """Apply a status transition. Raises ConflictError when it is not allowed."""
    invoice = await session.get(Invoice, invoice_id)
    if invoice is None:
        raise NotFoundError("Invoice", invoice_id)

    current = InvoiceStatus(invoice.status)
    if new_status not in InvoiceStatus.valid_transitions()[current]:
        raise ConflictError(
            f"Invoice {invoice_id} cannot move from {current.value} to {new_status.value}",
            code="invalid_transition",
        )

    invoice.status = new_status
    await session.commit()
    logger.info("Invoice %s: %s -> %s", invoice_id, current.value, new_status.value)
    return invoice
