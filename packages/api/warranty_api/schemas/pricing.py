# This project was developed with assistance from AI tools.
"""Pricing submission and spreadsheet schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import Field
from warranty_store import FeeType

from . import CamelModel


class PricingSubmissionCreate(CamelModel):
    """One fee quote for a catalog warranty."""

    warranty_id: str = Field(min_length=1, max_length=32)
    fee_type: FeeType
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=4)
    submitted_at: datetime | None = Field(
        default=None,
        description="Defaults to the time the server records the submission.",
    )
    submitted_by: str | None = Field(default=None, max_length=255)
    notes: str | None = None


class SheetPricingSubmission(CamelModel):
    """Row pushed to the external pricing spreadsheet."""

    manufacturer: str = Field(min_length=1)
    product: str = Field(min_length=1)
    warranty_term: str | int = Field(description="Term label as the sheet stores it, e.g. 20.")
    region_state: str | None = None
    sq_ft_cost: Decimal | None = Field(default=None, ge=0)
    total_project_cost: Decimal | None = Field(default=None, ge=0)
    project_size_sqft: Decimal | None = Field(default=None, ge=0)
    submitted_by: str | None = None
    notes: str | None = None
