# This project was developed with assistance from AI tools.
"""Pricing routes: fee quote submissions, per-warranty summaries, spreadsheet bridge."""

from typing import Any, Literal

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from warranty_store import FeeType, SubmissionStatus, get_db

from ..middleware.auth import CurrentUser
from ..schemas.pricing import PricingSubmissionCreate, SheetPricingSubmission
from ..services import pricing
from ..services.catalog import list_catalog
from ..services.mapping import map_pricing_submission
from ..services.sheets import (
    SheetsClient,
    get_sheets_client,
    groups_to_api,
    normalize_pricing_rows,
    to_submissions,
)

router = APIRouter()


@router.get("/submissions")
async def list_submissions(
    session: AsyncSession = Depends(get_db),
    warranty_id: str | None = Query(default=None, alias="warrantyId"),
    fee_type: FeeType | None = Query(default=None, alias="feeType"),
    submission_status: SubmissionStatus | None = Query(default=None, alias="status"),
) -> list[dict[str, Any]]:
    submissions = await pricing.list_submissions(
        session, warranty_id=warranty_id, fee_type=fee_type, status=submission_status
    )
    return [map_pricing_submission(s) for s in submissions]


@router.post("/submissions", status_code=status.HTTP_201_CREATED)
async def create_submission(
    body: PricingSubmissionCreate,
    user: CurrentUser,
    session: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    """Record a fee quote. ``submittedBy`` defaults to the caller's email."""
    submission = await pricing.create_submission(
        session,
        warranty_id=body.warranty_id,
        fee_type=body.fee_type,
        amount=body.amount,
        submitted_at=body.submitted_at,
        submitted_by=body.submitted_by or user.email or None,
        notes=body.notes,
    )
    return map_pricing_submission(submission)


@router.post("/submissions/{submission_id}/withdraw")
async def withdraw_submission(
    submission_id: int,
    session: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    return map_pricing_submission(await pricing.withdraw_submission(session, submission_id))


@router.get("/summary")
async def all_summaries(session: AsyncSession = Depends(get_db)) -> dict[str, Any]:
    """Summaries keyed by warranty id; warranties never priced are absent."""
    summaries = await pricing.get_all_summaries(session)
    return {warranty_id: pricing.summary_to_api(fees) for warranty_id, fees in summaries.items()}


@router.get("/summary/{warranty_id}")
async def warranty_summary(
    warranty_id: str,
    session: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    fees = await pricing.get_warranty_summary(session, warranty_id)
    return {"warrantyId": warranty_id, "fees": pricing.summary_to_api(fees)}


@router.get("/external")
async def fetch_external(
    session: AsyncSession = Depends(get_db),
    client: SheetsClient = Depends(get_sheets_client),
    action: Literal["all", "warranty_terms", "manufacturers", "products", "pricing"] = "pricing",
) -> dict[str, Any]:
    """Read from the pricing spreadsheet.

    ``action=pricing`` returns the grouped sheet rows plus the per-square-foot
    submission candidates that match catalog entries; other actions pass the
    sheet payload through.
    """
    data = await client.fetch(action)
    if action != "pricing":
        return data

    groups = normalize_pricing_rows(data.get("pricing"))
    catalog = await list_catalog(session)
    return {"groups": groups_to_api(groups), "submissions": to_submissions(groups, catalog)}


@router.post("/external", status_code=status.HTTP_201_CREATED)
async def submit_external(
    body: SheetPricingSubmission,
    client: SheetsClient = Depends(get_sheets_client),
) -> dict[str, Any]:
    return await client.submit_pricing(body)
