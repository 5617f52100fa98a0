# This project was developed with assistance from AI tools.
"""Adapter for the external pricing spreadsheet (Apps Script web app).

The sheet speaks in its own row shape (``Manufacturer``, ``Sq_Ft_Cost``, ...).
That shape stays inside this module: rows are normalized into groups keyed
by ``manufacturer|product|term`` and then translated into pricing
submission candidates for catalog entries. Nothing in the core depends on
this adapter; without ``SHEETS_API_URL`` every call answers 503.
"""

import logging
import re
from collections.abc import Iterable, Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

import httpx

from ..core.config import settings
from ..core.errors import IntegrationError, IntegrationUnavailableError
from ..schemas.pricing import SheetPricingSubmission
from .mapping import to_api_value

logger = logging.getLogger(__name__)

SHEET_ACTIONS = ("all", "warranty_terms", "manufacturers", "products", "pricing")


def _number(value: Any) -> Decimal:
    """Sheet cell -> Decimal; blanks and junk become 0."""
    if value is None or isinstance(value, bool):
        return Decimal(0)
    text = str(value).replace("$", "").replace(",", "").strip()
    if not text:
        return Decimal(0)
    try:
        number = Decimal(text)
    except InvalidOperation:
        return Decimal(0)
    return number if number.is_finite() else Decimal(0)


def group_key(manufacturer: Any, product: Any, term: Any) -> str:
    return f"{manufacturer}|{product}|{term}".lower()


def normalize_pricing_rows(rows: Iterable[Mapping[str, Any]] | None) -> dict[str, dict[str, Any]]:
    """Group raw ``Pricing_Submissions`` rows by manufacturer/product/term."""
    groups: dict[str, dict[str, Any]] = {}
    if not rows:
        return groups

    for row in rows:
        if not isinstance(row, Mapping):
            continue
        key = group_key(row.get("Manufacturer"), row.get("Product"), row.get("Warranty_Term"))
        group = groups.setdefault(
            key,
            {
                "manufacturer": row.get("Manufacturer"),
                "product": row.get("Product"),
                "warrantyTerm": row.get("Warranty_Term"),
                "submissions": [],
            },
        )
        group["submissions"].append(
            {
                "id": row.get("Submission_ID"),
                "date": row.get("Date"),
                "regionState": row.get("Region_State"),
                "sqFtCost": _number(row.get("Sq_Ft_Cost")),
                "totalProjectCost": _number(row.get("Total_Project_Cost")),
                "projectSizeSqft": _number(row.get("Project_Size_SqFt")),
                "submittedBy": row.get("Submitted_By"),
                "verified": str(row.get("Verified", "")).upper() == "TRUE",
                "notes": row.get("Notes"),
            }
        )
    return groups


def groups_to_api(groups: Mapping[str, Mapping[str, Any]]) -> dict[str, dict[str, Any]]:
    """JSON-ready copy of normalized groups (amounts as decimal strings)."""
    return {
        key: {
            **group,
            "submissions": [
                {name: to_api_value(value) for name, value in sub.items()}
                for sub in group.get("submissions", [])
            ],
        }
        for key, group in groups.items()
    }


def _term_years(value: Any) -> int | None:
    match = re.search(r"\d+", str(value or ""))
    return int(match.group()) if match else None


def _attr(entry: Any, name: str) -> Any:
    if isinstance(entry, Mapping):
        return entry.get(name)
    return getattr(entry, name, None)


def _matches(group: Mapping[str, Any], entry: Any) -> bool:
    manufacturer = str(group.get("manufacturer") or "").strip().lower()
    product = str(group.get("product") or "").strip().lower()
    if not manufacturer or manufacturer != str(_attr(entry, "manufacturer") or "").lower():
        return False
    term = _term_years(group.get("warrantyTerm"))
    if term is not None and term != _attr(entry, "term"):
        return False
    haystack = " ".join(
        str(_attr(entry, name) or "") for name in ("name", "warranty_name", "product_lines")
    ).lower()
    return bool(product) and product in haystack


def to_submissions(
    groups: Mapping[str, Mapping[str, Any]],
    catalog: Iterable[Any],
) -> list[dict[str, Any]]:
    """Per-square-foot submission candidates for groups that match a catalog entry.

    Only rows with ``Sq_Ft_Cost > 0`` yield a candidate. Groups matching no
    entry are skipped (logged at DEBUG).
    """
    catalog = list(catalog)
    candidates: list[dict[str, Any]] = []
    for key, group in groups.items():
        entry = next((e for e in catalog if _matches(group, e)), None)
        if entry is None:
            logger.debug("Sheet pricing group %r matches no catalog entry", key)
            continue
        for sub in group.get("submissions", []):
            if sub["sqFtCost"] <= 0:
                continue
            candidates.append(
                {
                    "warrantyId": _attr(entry, "id"),
                    "feeType": "psf",
                    "amount": to_api_value(sub["sqFtCost"]),
                    "submittedAt": sub.get("date"),
                    "submittedBy": sub.get("submittedBy"),
                    "notes": sub.get("notes"),
                    "sourceId": sub.get("id"),
                }
            )
    return candidates


class SheetsClient:
    """Async client for the spreadsheet web app."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport, follow_redirects=True
        )

    @staticmethod
    def _payload(response: httpx.Response) -> dict[str, Any]:
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise IntegrationError("Spreadsheet answered with an unexpected payload")
        if not data.get("success"):
            raise IntegrationError(f"Spreadsheet error: {data.get('error') or 'Unknown error'}")
        return data

    async def fetch(self, action: str = "all") -> dict[str, Any]:
        if action not in SHEET_ACTIONS:
            raise ValueError(f"Unknown sheet action {action!r}")
        async with self._client() as client:
            try:
                response = await client.get(self.base_url, params={"action": action})
                return self._payload(response)
            except httpx.HTTPError as exc:
                logger.error("Spreadsheet fetch failed (action=%s): %s", action, exc)
                raise IntegrationError(f"Spreadsheet fetch failed: {exc}") from exc
            except ValueError as exc:
                logger.error("Spreadsheet returned invalid JSON (action=%s)", action)
                raise IntegrationError("Spreadsheet returned invalid JSON") from exc

    async def fetch_pricing_groups(self) -> dict[str, dict[str, Any]]:
        data = await self.fetch("pricing")
        return normalize_pricing_rows(data.get("pricing"))

    async def submit_pricing(self, submission: SheetPricingSubmission) -> dict[str, Any]:
        """Push one pricing row to the sheet."""
        body = {
            "manufacturer": submission.manufacturer,
            "product": submission.product,
            "warranty_term": submission.warranty_term,
            "region_state": submission.region_state,
            "sq_ft_cost": to_api_value(submission.sq_ft_cost),
            "total_project_cost": to_api_value(submission.total_project_cost),
            "project_size_sqft": to_api_value(submission.project_size_sqft),
            "submitted_by": submission.submitted_by or "App User",
            "notes": submission.notes or "",
        }
        async with self._client() as client:
            try:
                response = await client.post(self.base_url, json=body)
                data = self._payload(response)
            except httpx.HTTPError as exc:
                logger.error("Spreadsheet submit failed: %s", exc)
                raise IntegrationError(f"Spreadsheet submit failed: {exc}") from exc
            except ValueError as exc:
                raise IntegrationError("Spreadsheet returned invalid JSON") from exc
        logger.info("Pricing row pushed to spreadsheet (submission_id=%s)", data.get("submission_id"))
        return data


def get_sheets_client() -> SheetsClient:
    """FastAPI dependency. Raises IntegrationUnavailableError when not configured."""
    if not settings.SHEETS_API_URL:
        raise IntegrationUnavailableError("Pricing spreadsheet integration is not configured")
    return SheetsClient(settings.SHEETS_API_URL, timeout=settings.SHEETS_TIMEOUT_SECONDS)
