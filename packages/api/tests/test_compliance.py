# This project was developed with assistance from AI tools.
"""Tests for inspection-interval parsing and compliance derivation."""

from datetime import date

import pytest
from warranty_store import ComplianceStatus

from warranty_api.services.compliance import (
    DEFAULT_INTERVAL_MONTHS,
    add_months,
    derive_compliance,
    inspection_interval_months,
)

TODAY = date(2026, 1, 15)


@pytest.mark.parametrize(
    ("requirements", "months"),
    [
        (["Biannual inspection by certified contractor"], 6),
        (["Semi-annual inspection"], 6),
        (["Annual certified inspection"], 12),
        (["Quarterly roof inspection"], 3),
        # Drain cleaning cadence must not shorten the inspection interval
        (["Annual manufacturer inspection", "Quarterly drain cleaning"], 12),
        (["Maintain drainage"], DEFAULT_INTERVAL_MONTHS),
        ([], DEFAULT_INTERVAL_MONTHS),
        (None, DEFAULT_INTERVAL_MONTHS),
    ],
)
def test_inspection_interval(requirements, months):
    assert inspection_interval_months(requirements) == months


def test_add_months_clamps_day():
    assert add_months(date(2025, 8, 31), 6) == date(2026, 2, 28)
    assert add_months(date(2025, 11, 15), 3) == date(2026, 2, 15)


def test_no_inspection_data_is_at_risk():
    assert derive_compliance(None, None, ["Annual inspection"], today=TODAY) == ComplianceStatus.AT_RISK


def test_overdue_next_inspection_is_expired():
    status = derive_compliance(date(2023, 8, 15), date(2025, 8, 10), ["Annual inspection"], today=TODAY)
    assert status == ComplianceStatus.EXPIRED_INSPECTION


def test_due_soon_is_at_risk():
    status = derive_compliance(date(2025, 3, 1), date(2026, 2, 20), ["Annual inspection"], today=TODAY)
    assert status == ComplianceStatus.AT_RISK


def test_last_inspection_older_than_interval_is_at_risk():
    """Biannual requirement, last seen 14 months ago, next date far out."""
    status = derive_compliance(
        date(2024, 11, 20), date(2026, 5, 15), ["Biannual inspection"], today=TODAY
    )
    assert status == ComplianceStatus.AT_RISK


def test_recent_inspection_is_current():
    status = derive_compliance(
        date(2025, 12, 10), date(2026, 6, 15), ["Biannual inspection"], today=TODAY
    )
    assert status == ComplianceStatus.CURRENT


def test_due_date_derived_from_last_inspection():
    # Annual: due 2026-08-20, well outside the 60-day window
    assert derive_compliance(date(2025, 8, 20), None, ["Annual inspection"], today=TODAY) == (
        ComplianceStatus.CURRENT
    )
    # Quarterly: due 2025-11-20, already past
    assert derive_compliance(date(2025, 8, 20), None, ["Quarterly inspection"], today=TODAY) == (
        ComplianceStatus.EXPIRED_INSPECTION
    )
