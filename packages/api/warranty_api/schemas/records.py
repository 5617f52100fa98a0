# This project was developed with assistance from AI tools.
"""Request schemas for roof history records: access logs, invoices, inspections, claims."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import Field
from warranty_store import ClaimStatus, InspectionStatus, InvoiceStatus

from . import CamelModel

_ID = Field(default=None, min_length=1, max_length=64, pattern=r"^[A-Za-z0-9._-]+$")


class AccessLogCreate(CamelModel):
    """Someone went onto a roof. Append-only."""

    id: str | None = _ID
    roof_id: str = Field(min_length=1, max_length=64)
    person: str = Field(min_length=1, max_length=255)
    company: str | None = Field(default=None, max_length=255)
    purpose: str | None = None
    accessed_at: datetime
    duration: str | None = Field(default=None, max_length=64)
    notes: str | None = None


class InvoiceCreate(CamelModel):
    id: str | None = _ID
    roof_id: str = Field(min_length=1, max_length=64)
    vendor: str = Field(min_length=1, max_length=255)
    invoice_date: date
    amount: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    description: str | None = None
    flagged: bool = False
    flag_reason: str | None = None
    status: InvoiceStatus = InvoiceStatus.REVIEW


class InvoiceStatusUpdate(CamelModel):
    """Settle an invoice under review as owner-paid or warranty-covered."""

    status: InvoiceStatus


class InspectionCreate(CamelModel):
    id: str | None = _ID
    roof_id: str = Field(min_length=1, max_length=64)
    inspection_date: date
    inspector: str | None = Field(default=None, max_length=255)
    company: str | None = Field(default=None, max_length=255)
    inspection_type: str | None = Field(default=None, max_length=255)
    status: InspectionStatus
    score: int | None = Field(default=None, ge=0, le=100)
    photos: int = Field(default=0, ge=0)
    moisture_data: bool = False
    notes: str | None = None


class ClaimEventCreate(CamelModel):
    """Timeline entry; its position is assigned by the server."""

    event_date: date | None = None
    event: str = Field(min_length=1)


class ClaimCreate(CamelModel):
    """Claim plus its initial timeline, stored in the order given."""

    id: str | None = _ID
    roof_id: str = Field(min_length=1, max_length=64)
    manufacturer: str = Field(min_length=1, max_length=255)
    filed_on: date
    amount: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    status: ClaimStatus = ClaimStatus.IN_PROGRESS
    description: str | None = None
    events: list[ClaimEventCreate] = Field(default_factory=list)
