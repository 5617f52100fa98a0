# This project was developed with assistance from AI tools.
"""Tests for the storage row -> API record mapping layer."""

from datetime import date
from decimal import Decimal

import pytest
from warranty_store import ClaimStatus, FeeType

from warranty_api.services.mapping import (
    CATALOG_FIELDS,
    decode_string_list,
    encode_string_list,
    map_app_user,
    map_catalog_entry,
    map_claim,
    map_owner,
    map_pricing_submission,
    map_roof_warranty,
    unmap_record,
)

from .factories import (
    make_catalog_entry,
    make_claim,
    make_owner_tree,
    make_roof_warranty,
    make_submission,
    make_user,
)

# ---------------------------------------------------------------------------
# String-list codec
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "values",
    [
        [],
        ["TPO"],
        ["Membrane material defects", "Seam failure", "Flashing defects"],
        ['quoted "text"', "comma, inside", "unicode éè"],
        ["", " padded "],
    ],
)
def test_string_list_round_trip(values):
    assert decode_string_list(encode_string_list(values)) == values


def test_decode_none_is_empty():
    assert decode_string_list(None) == []


def test_decode_native_list_passes_through():
    assert decode_string_list(["PVC", "TPO"]) == ["PVC", "TPO"]


def test_decode_plain_text_becomes_single_item():
    """Non-JSON text is not an error; it is one list entry."""
    assert decode_string_list("TPO") == ["TPO"]


def test_decode_blank_string_is_empty():
    assert decode_string_list("   ") == []


def test_decode_json_object_is_empty():
    assert decode_string_list('{"a": 1}') == []


def test_decode_json_scalar_is_single_item():
    assert decode_string_list("42") == ["42"]
    assert decode_string_list('"EPDM"') == ["EPDM"]


def test_decode_non_string_items_are_stringified():
    assert decode_string_list([1, True, "x"]) == ["1", "true", "x"]


# ---------------------------------------------------------------------------
# Entity mappers
# ---------------------------------------------------------------------------


def test_catalog_entry_camel_case_keys():
    record = map_catalog_entry(make_catalog_entry())
    assert record["id"] == "WT-115"
    assert record["laborCovered"] is True
    assert record["warrantyName"] == "Diamond Pledge"
    assert record["membranes"] == ["TPO"]
    assert "labor_covered" not in record


def test_catalog_entry_missing_lists_become_empty():
    record = map_catalog_entry(make_catalog_entry(strengths=None, weaknesses=None))
    assert record["strengths"] == []
    assert record["weaknesses"] == []


def test_catalog_entry_json_text_lists_are_decoded():
    """Rows migrated from text columns still come out as lists."""
    row = {"id": "WT-001", "membranes": '["TPO", "PVC"]', "strengths": "Solid"}
    record = map_catalog_entry(row)
    assert record["membranes"] == ["TPO", "PVC"]
    assert record["strengths"] == ["Solid"]
    assert record["rating"] is None


def test_mapping_is_total_on_empty_row():
    record = map_catalog_entry({})
    assert set(record) == {
        "id",
        "category",
        "manufacturer",
        "name",
        "membranes",
        "term",
        "laborCovered",
        "materialCovered",
        "consequential",
        "dollarCap",
        "inspFreq",
        "inspBy",
        "transferable",
        "pondingExcluded",
        "windLimit",
        "strengths",
        "weaknesses",
        "bestFor",
        "rating",
        "productLines",
        "warrantyName",
        "thickness",
        "installationMethod",
        "ndl",
        "hailCoverage",
        "minRoofSize",
        "recoverEligible",
        "recoverMaxYears",
        "warrantyFeePerSq",
        "minWarrantyFee",
        "referenceUrl",
        "notes",
        "maintenanceRequired",
        "transferPolicy",
    }


def test_roof_warranty_enums_become_values():
    record = map_roof_warranty(make_roof_warranty())
    assert record["status"] == "active"
    assert record["compliance"] == "current"
    assert record["startDate"] == date(2019, 6, 15)
    assert record["requirements"] == ["Biannual inspection by certified contractor"]


def test_pricing_submission_amount_is_exact_string():
    record = map_pricing_submission(make_submission(amount="0.085", fee_type=FeeType.PSF))
    assert record["amount"] == "0.085"
    assert record["feeType"] == "psf"
    assert record["status"] == "active"


def test_owner_nested_tree():
    record = map_owner(make_owner_tree(), nested=True)
    assert record["propertyManagers"][0]["id"] == "pm-1"
    prop = record["properties"][0]
    assert prop["managedBy"] == "pm-1"
    roof = prop["roofs"][0]
    assert roof["sqFt"] == 22000
    assert roof["warranty"]["manufacturer"] == "GAF"


def test_owner_flat_has_no_children():
    record = map_owner(make_owner_tree())
    assert "properties" not in record
    assert "propertyManagers" not in record


def test_claim_events_keep_stored_order():
    """Dates out of order do not reorder the timeline."""
    claim = make_claim(
        events=[
            (date(2025, 10, 8), "second by date"),
            (date(2025, 10, 1), "first by date"),
        ],
        status=ClaimStatus.IN_PROGRESS,
    )
    record = map_claim(claim)
    assert [e["event"] for e in record["events"]] == ["second by date", "first by date"]
    assert [e["sortOrder"] for e in record["events"]] == [0, 1]
    assert record["status"] == "in-progress"
    assert record["amount"] == "3200.00"


def test_app_user_never_exposes_password_hash():
    record = map_app_user(make_user(password_hash="$2b$12$secret"))
    assert "passwordHash" not in record
    assert record["email"] == "pat@example.com"


def test_unmap_record_accepts_camel_and_snake_keys():
    columns = unmap_record(
        {"id": "WT-9", "laborCovered": True, "ponding_excluded": False, "bogus": 1},
        CATALOG_FIELDS,
    )
    assert columns == {"id": "WT-9", "labor_covered": True, "ponding_excluded": False}


def test_decimal_mapping_keeps_all_digits():
    record = map_pricing_submission({"amount": Decimal("2650.0000")})
    assert record["amount"] == "2650.0000"
