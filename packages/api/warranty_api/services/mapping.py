# This project was developed with assistance from AI tools.
"""Storage row -> API record mapping.

Every mapper is a pure, total function: it accepts an ORM instance or a
plain mapping (e.g. a ``RowMapping``), renames each attribute to camelCase,
decodes ordered string-list columns into ``list[str]`` and never raises on
an unexpected row shape. Absent attributes come out as ``None``; absent
list attributes come out as ``[]``.

Values are made JSON-ready at this boundary: enums become their values and
``Decimal`` amounts become exact decimal strings.
"""

import enum
import json
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from pydantic.alias_generators import to_camel, to_snake

# ---------------------------------------------------------------------------
# String-list codec
# ---------------------------------------------------------------------------


def encode_string_list(values: Iterable[str] | None) -> str:
    """Serialize an ordered list of strings to its JSON text form."""
    return json.dumps(list(values or []))


def decode_string_list(value: Any) -> list[str]:
    """Parse a stored list value into ``list[str]``.

    Accepts native lists (JSONB) and JSON-serialized text. Malformed input
    degrades instead of failing: plain text becomes a one-element list, a
    JSON scalar a one-element list, a JSON object or ``null`` an empty list.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [_list_item(item) for item in value if item is not None]
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8", errors="replace")
    if isinstance(value, str):
        if not value.strip():
            return []
        try:
            parsed = json.loads(value)
        except ValueError:
            return [value]
        if isinstance(parsed, str):
            return [parsed]
        if isinstance(parsed, (dict, type(None))):
            return []
        return decode_string_list(parsed) if isinstance(parsed, list) else [json.dumps(parsed)]
    if isinstance(value, Mapping):
        return []
    return [str(value)]


def _list_item(item: Any) -> str:
    if isinstance(item, str):
        return item
    return json.dumps(item) if isinstance(item, (bool, int, float, dict, list)) else str(item)


# ---------------------------------------------------------------------------
# Generic row mapping
# ---------------------------------------------------------------------------


def _read(row: Any, name: str) -> Any:
    if row is None:
        return None
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def to_api_value(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, Decimal):
        return format(value, "f")
    return value


def map_row(
    row: Any,
    fields: Iterable[str],
    list_fields: Iterable[str] = (),
) -> dict[str, Any]:
    """Map the named attributes of ``row`` to a camelCase dict."""
    list_fields = frozenset(list_fields)
    record: dict[str, Any] = {}
    for name in fields:
        raw = _read(row, name)
        if name in list_fields:
            record[to_camel(name)] = decode_string_list(raw)
        else:
            record[to_camel(name)] = to_api_value(raw)
    return record


def unmap_record(record: Mapping[str, Any], fields: Iterable[str]) -> dict[str, Any]:
    """Inverse direction for imports: keep known keys, camelCase or snake_case."""
    allowed = frozenset(fields)
    columns: dict[str, Any] = {}
    for key, value in record.items():
        name = key if key in allowed else to_snake(key)
        if name in allowed:
            columns[name] = value
    return columns


# ---------------------------------------------------------------------------
# Field sets
# ---------------------------------------------------------------------------

CATALOG_LIST_FIELDS = ("membranes", "strengths", "weaknesses")
CATALOG_FIELDS = (
    "id",
    "category",
    "manufacturer",
    "name",
    "membranes",
    "term",
    "labor_covered",
    "material_covered",
    "consequential",
    "dollar_cap",
    "insp_freq",
    "insp_by",
    "transferable",
    "ponding_excluded",
    "wind_limit",
    "strengths",
    "weaknesses",
    "best_for",
    "rating",
    "product_lines",
    "warranty_name",
    "thickness",
    "installation_method",
    "ndl",
    "hail_coverage",
    "min_roof_size",
    "recover_eligible",
    "recover_max_years",
    "warranty_fee_per_sq",
    "min_warranty_fee",
    "reference_url",
    "notes",
    "maintenance_required",
    "transfer_policy",
)

ROOF_WARRANTY_LIST_FIELDS = ("coverage", "exclusions", "requirements")
ROOF_WARRANTY_FIELDS = (
    "id",
    "roof_id",
    "manufacturer",
    "warranty_type",
    "start_date",
    "end_date",
    "status",
    "compliance",
    "next_inspection",
    "last_inspection",
    "coverage",
    "exclusions",
    "requirements",
)

ROOF_FIELDS = ("id", "property_id", "section", "sq_ft", "membrane_type", "installed_on")
PROPERTY_FIELDS = ("id", "owner_id", "managed_by", "name", "address")
PROPERTY_MANAGER_FIELDS = ("id", "owner_id", "name", "contact", "email", "phone", "notes")
OWNER_FIELDS = ("id", "name", "contact", "email", "phone", "notes", "created_at")

PRICING_SUBMISSION_FIELDS = (
    "id",
    "warranty_id",
    "fee_type",
    "amount",
    "status",
    "submitted_at",
    "submitted_by",
    "notes",
)
ACCESS_LOG_FIELDS = (
    "id",
    "roof_id",
    "person",
    "company",
    "purpose",
    "accessed_at",
    "duration",
    "notes",
)
INVOICE_FIELDS = (
    "id",
    "roof_id",
    "vendor",
    "invoice_date",
    "amount",
    "description",
    "flagged",
    "flag_reason",
    "status",
)
INSPECTION_FIELDS = (
    "id",
    "roof_id",
    "inspection_date",
    "inspector",
    "company",
    "inspection_type",
    "status",
    "score",
    "photos",
    "moisture_data",
    "notes",
)
CLAIM_FIELDS = ("id", "roof_id", "manufacturer", "filed_on", "amount", "status", "description")
CLAIM_EVENT_FIELDS = ("id", "claim_id", "event_date", "event", "sort_order")
APP_USER_FIELDS = ("id", "email", "name", "created_at", "last_login_at")


# ---------------------------------------------------------------------------
# Entity mappers
# ---------------------------------------------------------------------------


def map_catalog_entry(row: Any) -> dict[str, Any]:
    return map_row(row, CATALOG_FIELDS, CATALOG_LIST_FIELDS)


def map_roof_warranty(row: Any) -> dict[str, Any]:
    return map_row(row, ROOF_WARRANTY_FIELDS, ROOF_WARRANTY_LIST_FIELDS)


def map_roof(row: Any, *, nested: bool = False) -> dict[str, Any]:
    record = map_row(row, ROOF_FIELDS)
    if nested:
        warranty = _read(row, "warranty")
        record["warranty"] = map_roof_warranty(warranty) if warranty is not None else None
    return record


def map_property(row: Any, *, nested: bool = False) -> dict[str, Any]:
    record = map_row(row, PROPERTY_FIELDS)
    if nested:
        record["roofs"] = [map_roof(roof, nested=True) for roof in _read(row, "roofs") or []]
    return record


def map_property_manager(row: Any) -> dict[str, Any]:
    return map_row(row, PROPERTY_MANAGER_FIELDS)


def map_owner(row: Any, *, nested: bool = False) -> dict[str, Any]:
    """Owner record; with ``nested`` the full account tree beneath it.

    Nested mapping reads ``property_managers`` and ``properties -> roofs ->
    warranty``; callers must have loaded those relationships.
    """
    record = map_row(row, OWNER_FIELDS)
    if nested:
        record["propertyManagers"] = [
            map_property_manager(pm) for pm in _read(row, "property_managers") or []
        ]
        record["properties"] = [
            map_property(prop, nested=True) for prop in _read(row, "properties") or []
        ]
    return record


def map_pricing_submission(row: Any) -> dict[str, Any]:
    return map_row(row, PRICING_SUBMISSION_FIELDS)


def map_access_log(row: Any) -> dict[str, Any]:
    return map_row(row, ACCESS_LOG_FIELDS)


def map_invoice(row: Any) -> dict[str, Any]:
    return map_row(row, INVOICE_FIELDS)


def map_inspection(row: Any) -> dict[str, Any]:
    return map_row(row, INSPECTION_FIELDS)


def map_claim_event(row: Any) -> dict[str, Any]:
    return map_row(row, CLAIM_EVENT_FIELDS)


def map_claim(row: Any, *, with_events: bool = True) -> dict[str, Any]:
    """Claim record; events keep the order they are given in (stored sort order)."""
    record = map_row(row, CLAIM_FIELDS)
    if with_events:
        record["events"] = [map_claim_event(ev) for ev in _read(row, "events") or []]
    return record


def map_app_user(row: Any) -> dict[str, Any]:
    """Public user record. The password hash is never part of it."""
    return map_row(row, APP_USER_FIELDS)
