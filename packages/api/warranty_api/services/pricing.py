# This project was developed with assistance from AI tools.
"""Pricing submissions and their per-warranty summaries.

The aggregation itself (``summarize_submissions`` / ``aggregate_by_warranty``)
is pure: no I/O, exact ``Decimal`` arithmetic, no epsilon comparisons. The
async functions below it are thin store access around it.

Per warranty and fee type, only *active* submissions count. The summary is
``count``, ``min``, ``max``, ``mean`` and ``current`` (the amount of the
submission with the latest ``submitted_at``; on a timestamp tie the later
insert wins, i.e. the higher id, else the later position in the input).
A fee type whose submissions were all withdrawn summarizes to ``None``; a
fee type never submitted does not appear at all.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from warranty_store import FeeType, PricingSubmission, SubmissionStatus, WarrantyCatalogEntry

from ..core.errors import ConflictError, NotFoundError, ValidationError
from .mapping import to_api_value

logger = logging.getLogger(__name__)

MEAN_PRECISION: dict[str, Decimal] = {
    FeeType.BASE.value: Decimal("0.01"),
    FeeType.PSF.value: Decimal("0.0001"),
}
_DEFAULT_PRECISION = Decimal("0.0001")


@dataclass(frozen=True)
class FeeSummary:
    count: int
    min: Decimal
    max: Decimal
    mean: Decimal
    current: Decimal


FeeSummaries = dict[str, FeeSummary | None]


def _field(submission: Any, name: str) -> Any:
    if isinstance(submission, Mapping):
        return submission.get(name)
    return getattr(submission, name, None)


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(getattr(value, "value", value)).lower()


def to_decimal(amount: Any) -> Decimal:
    """Exact decimal for a stored amount; floats go through ``str`` first."""
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, float):
        return Decimal(str(amount))
    return Decimal(amount)


def _recency_key(position: int, submission: Any) -> tuple:
    submitted_at: datetime | None = _field(submission, "submitted_at")
    sub_id = _field(submission, "id")
    return (
        submitted_at is not None,
        submitted_at,
        sub_id is not None,
        sub_id if sub_id is not None else 0,
        position,
    )


def summarize_submissions(submissions: Iterable[Any]) -> FeeSummaries:
    """Summarize one warranty's submissions per fee type.

    Input order does not matter except as the last tie-breaker for
    ``current``.
    """
    partitions: dict[str, list[tuple[int, Any]]] = {}
    for position, submission in enumerate(submissions):
        fee_type = _text(_field(submission, "fee_type"))
        partitions.setdefault(fee_type, []).append((position, submission))

    summaries: FeeSummaries = {}
    for fee_type, entries in partitions.items():
        active = [
            (position, sub)
            for position, sub in entries
            if _text(_field(sub, "status")) == SubmissionStatus.ACTIVE.value
        ]
        if not active:
            summaries[fee_type] = None
            continue

        amounts = [to_decimal(_field(sub, "amount")) for _, sub in active]
        low, high = min(amounts), max(amounts)
        precision = MEAN_PRECISION.get(fee_type, _DEFAULT_PRECISION)
        mean = (sum(amounts) / len(amounts)).quantize(precision, rounding=ROUND_HALF_UP)
        # Quantized mean stays within [min, max]
        mean = min(max(mean, low), high)

        _, latest = max(active, key=lambda item: _recency_key(*item))
        summaries[fee_type] = FeeSummary(
            count=len(amounts),
            min=low,
            max=high,
            mean=mean,
            current=to_decimal(_field(latest, "amount")),
        )
    return summaries


def aggregate_by_warranty(submissions: Iterable[Any]) -> dict[str, FeeSummaries]:
    """Summaries keyed by warranty_id. Warranties without submissions are absent."""
    grouped: dict[str, list[Any]] = {}
    for submission in submissions:
        grouped.setdefault(_field(submission, "warranty_id"), []).append(submission)
    return {warranty_id: summarize_submissions(subs) for warranty_id, subs in grouped.items()}


def _display(amount: Decimal, fee_type: str) -> str:
    precision = MEAN_PRECISION.get(fee_type)
    if precision is None:
        return to_api_value(amount)
    # Stored amounts never carry more places than the fee precision
    return to_api_value(amount.quantize(precision))


def summary_to_api(fees: FeeSummaries) -> dict[str, dict[str, Any] | None]:
    """API shape of one warranty's summaries (amounts as exact decimal strings)."""
    shaped: dict[str, dict[str, Any] | None] = {}
    for fee_type, summary in fees.items():
        if summary is None:
            shaped[fee_type] = None
            continue
        shaped[fee_type] = {
            "count": summary.count,
            "min": _display(summary.min, fee_type),
            "max": _display(summary.max, fee_type),
            "mean": _display(summary.mean, fee_type),
            "current": _display(summary.current, fee_type),
        }
    return shaped


# ---------------------------------------------------------------------------
# Store access
# ---------------------------------------------------------------------------


async def _require_catalog_entry(session: AsyncSession, warranty_id: str) -> None:
    if await session.get(WarrantyCatalogEntry, warranty_id) is None:
        raise NotFoundError("Warranty", warranty_id)


async def list_submissions(
    session: AsyncSession,
    *,
    warranty_id: str | None = None,
    fee_type: FeeType | None = None,
    status: SubmissionStatus | None = None,
) -> list[PricingSubmission]:
    """Submissions in chronological order (insertion order on ties)."""
    stmt = select(PricingSubmission).order_by(
        PricingSubmission.submitted_at.asc(), PricingSubmission.id.asc()
    )
    if warranty_id is not None:
        stmt = stmt.where(PricingSubmission.warranty_id == warranty_id)
    if fee_type is not None:
        stmt = stmt.where(PricingSubmission.fee_type == fee_type)
    if status is not None:
        stmt = stmt.where(PricingSubmission.status == status)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def create_submission(
    session: AsyncSession,
    *,
    warranty_id: str,
    fee_type: FeeType,
    amount: Decimal,
    submitted_at: datetime | None = None,
    submitted_by: str | None = None,
    notes: str | None = None,
) -> PricingSubmission:
    """Append a new active submission for a catalog warranty."""
    amount = to_decimal(amount)
    if amount <= 0:
        raise ValidationError(
            "Amount must be positive",
            fields=[{"field": "amount", "message": "must be greater than 0"}],
        )
    await _require_catalog_entry(session, warranty_id)

    submission = PricingSubmission(
        warranty_id=warranty_id,
        fee_type=fee_type,
        amount=amount,
        status=SubmissionStatus.ACTIVE,
        submitted_by=submitted_by,
        notes=notes,
    )
    if submitted_at is not None:
        submission.submitted_at = submitted_at
    session.add(submission)
    await session.commit()
    await session.refresh(submission)

    logger.info(
        "Pricing submission %s recorded: warranty=%s fee_type=%s",
        submission.id,
        warranty_id,
        to_api_value(fee_type),
    )
    return submission


async def withdraw_submission(session: AsyncSession, submission_id: int) -> PricingSubmission:
    """Move a submission active -> withdrawn (the only permitted update)."""
    submission = await session.get(PricingSubmission, submission_id)
    if submission is None:
        raise NotFoundError("Pricing submission", submission_id)

    current = SubmissionStatus(to_api_value(submission.status))
    if SubmissionStatus.WITHDRAWN not in SubmissionStatus.valid_transitions()[current]:
        raise ConflictError(
            f"Pricing submission {submission_id} is already {current.value}",
            code="invalid_transition",
        )

    submission.status = SubmissionStatus.WITHDRAWN
    await session.commit()
    await session.refresh(submission)
    logger.info("Pricing submission %s withdrawn", submission_id)
    return submission


async def get_warranty_summary(session: AsyncSession, warranty_id: str) -> FeeSummaries:
    """Summaries for one catalog warranty (``{}`` when nothing was ever submitted)."""
    await _require_catalog_entry(session, warranty_id)
    submissions = await list_submissions(session, warranty_id=warranty_id)
    return summarize_submissions(submissions)


async def get_all_summaries(session: AsyncSession) -> dict[str, FeeSummaries]:
    submissions = await list_submissions(session)
    return aggregate_by_warranty(submissions)
