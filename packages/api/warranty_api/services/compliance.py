# This project was developed with assistance from AI tools.
"""Roof warranty inspection compliance.

Pure date arithmetic, no I/O. The inspection interval comes from the
warranty's requirement text; the derived status compares inspection recency
and the next due date against ``today``.
"""

import calendar
import re
from collections.abc import Iterable
from datetime import date, timedelta

from warranty_store import ComplianceStatus

DEFAULT_INTERVAL_MONTHS = 12
DUE_SOON_WINDOW = timedelta(days=60)

# First match wins, so the more specific wording comes first
_INTERVAL_PATTERNS: tuple[tuple[re.Pattern, int], ...] = (
    (re.compile(r"\bquarterly\b", re.IGNORECASE), 3),
    (re.compile(r"\b(bi-?annual|semi-?annual|twice\s+(a|per)\s+year)\b", re.IGNORECASE), 6),
    (re.compile(r"\b(annual|yearly|once\s+(a|per)\s+year)\b", re.IGNORECASE), 12),
)
_INSPECTION_WORD = re.compile(r"\binspect", re.IGNORECASE)


def inspection_interval_months(requirements: Iterable[str] | None) -> int:
    """Months between required inspections, read from requirement lines.

    Lines that mention an inspection take precedence, so "Quarterly drain
    cleaning" does not shorten an "Annual manufacturer inspection".
    """
    lines = [line for line in requirements or [] if isinstance(line, str)]
    inspection_lines = [line for line in lines if _INSPECTION_WORD.search(line)]
    for candidates in (inspection_lines, lines):
        for line in candidates:
            for pattern, months in _INTERVAL_PATTERNS:
                if pattern.search(line):
                    return months
    return DEFAULT_INTERVAL_MONTHS


def add_months(start: date, months: int) -> date:
    """Calendar month arithmetic, clamping to the last day of the month."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def derive_compliance(
    last_inspection: date | None,
    next_inspection: date | None,
    requirements: Iterable[str] | None,
    today: date | None = None,
) -> ComplianceStatus:
    """Compliance status of a roof warranty on ``today``.

    - no inspection data at all -> at-risk
    - due date (``next_inspection``, else last + interval) already passed
      -> expired-inspection
    - due within 60 days, or last inspection older than the interval
      -> at-risk
    - otherwise current
    """
    today = today or date.today()
    if last_inspection is None and next_inspection is None:
        return ComplianceStatus.AT_RISK

    interval = inspection_interval_months(requirements)
    due = next_inspection or add_months(last_inspection, interval)

    if due < today:
        return ComplianceStatus.EXPIRED_INSPECTION
    if due - today <= DUE_SOON_WINDOW:
        return ComplianceStatus.AT_RISK
    if last_inspection is not None and add_months(last_inspection, interval) < today:
        return ComplianceStatus.AT_RISK
    return ComplianceStatus.CURRENT
