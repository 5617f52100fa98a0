# This project was developed with assistance from AI tools.
"""Account tree request schemas (owner -> manager / property -> roof -> warranty)."""

from datetime import date

from pydantic import Field, model_validator
from warranty_store import ComplianceStatus, WarrantyStatus

from . import CamelModel

_ID = Field(default=None, min_length=1, max_length=64, pattern=r"^[A-Za-z0-9._-]+$")


class ContactFields(CamelModel):
    contact: str | None = Field(default=None, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=64)
    notes: str | None = None


class OwnerCreate(ContactFields):
    """New owner account. ``id`` is generated when omitted."""

    id: str | None = _ID
    name: str = Field(min_length=1, max_length=255)


class PropertyManagerCreate(ContactFields):
    id: str | None = _ID
    name: str = Field(min_length=1, max_length=255)


class PropertyCreate(CamelModel):
    """New property. ``managed_by`` must be a manager serving the same owner."""

    id: str | None = _ID
    name: str = Field(min_length=1, max_length=255)
    address: str | None = None
    managed_by: str | None = None


class RoofWarrantyCreate(CamelModel):
    """Warranty for a roof. ``compliance`` is derived from inspections when omitted."""

    manufacturer: str = Field(min_length=1, max_length=255)
    warranty_type: str | None = Field(default=None, max_length=255)
    start_date: date
    end_date: date
    status: WarrantyStatus = WarrantyStatus.ACTIVE
    compliance: ComplianceStatus | None = None
    next_inspection: date | None = None
    last_inspection: date | None = None
    coverage: list[str] = Field(default_factory=list)
    exclusions: list[str] = Field(default_factory=list)
    requirements: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _end_after_start(self):
        if self.end_date <= self.start_date:
            raise ValueError("endDate must be after startDate")
        return self


class RoofCreate(CamelModel):
    id: str | None = _ID
    section: str = Field(min_length=1, max_length=255)
    sq_ft: int | None = Field(default=None, gt=0)
    membrane_type: str | None = Field(default=None, max_length=100)
    installed_on: date | None = None
    warranty: RoofWarrantyCreate | None = None
