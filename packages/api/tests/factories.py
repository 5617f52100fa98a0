# This project was developed with assistance from AI tools.
"""Shared test factory functions.

Builds transient (never persisted) ORM instances so the mapping layer sees
the same attribute shapes it gets from the store.
"""

from datetime import UTC, date, datetime
from decimal import Decimal

from warranty_store import (
    AccessLog,
    AppUser,
    Claim,
    ClaimEvent,
    ClaimStatus,
    ComplianceStatus,
    FeeType,
    Inspection,
    InspectionStatus,
    Invoice,
    InvoiceStatus,
    Owner,
    PricingSubmission,
    Property,
    PropertyManager,
    Roof,
    RoofWarranty,
    SubmissionStatus,
    WarrantyCatalogEntry,
    WarrantyStatus,
)


def make_catalog_entry(id="WT-115", **overrides) -> WarrantyCatalogEntry:
    fields = {
        "id": id,
        "category": "Single-Ply",
        "manufacturer": "GAF",
        "name": "GAF TPO Diamond Pledge NDL 15-Year",
        "membranes": ["TPO"],
        "term": 15,
        "labor_covered": True,
        "material_covered": True,
        "consequential": False,
        "dollar_cap": "NDL",
        "strengths": ["No dollar limit"],
        "weaknesses": [],
        "rating": 4.8,
        "warranty_name": "Diamond Pledge",
        "ndl": True,
    }
    fields.update(overrides)
    return WarrantyCatalogEntry(**fields)


def make_submission(
    id=1,
    warranty_id="WT-115",
    fee_type=FeeType.BASE,
    amount="2500",
    submitted_at=None,
    status=SubmissionStatus.ACTIVE,
    submitted_by="seed",
) -> PricingSubmission:
    return PricingSubmission(
        id=id,
        warranty_id=warranty_id,
        fee_type=fee_type,
        amount=Decimal(amount),
        status=status,
        submitted_at=submitted_at or datetime(2025, 11, 1, tzinfo=UTC),
        submitted_by=submitted_by,
    )


def make_roof_warranty(roof_id="r-1a", **overrides) -> RoofWarranty:
    fields = {
        "id": 1,
        "roof_id": roof_id,
        "manufacturer": "GAF",
        "warranty_type": "NDL (No Dollar Limit)",
        "start_date": date(2019, 6, 15),
        "end_date": date(2039, 6, 15),
        "status": WarrantyStatus.ACTIVE,
        "compliance": ComplianceStatus.CURRENT,
        "next_inspection": date(2026, 6, 15),
        "last_inspection": date(2025, 12, 10),
        "coverage": ["Membrane material defects", "Seam failure"],
        "exclusions": ["Foot traffic damage"],
        "requirements": ["Biannual inspection by certified contractor"],
    }
    fields.update(overrides)
    return RoofWarranty(**fields)


def make_roof(id="r-1a", property_id="prop-1", warranty=True) -> Roof:
    roof = Roof(
        id=id,
        property_id=property_id,
        section="Main Building - Flat",
        sq_ft=22000,
        membrane_type="TPO",
        installed_on=date(2019, 6, 15),
    )
    if warranty:
        roof.warranty = make_roof_warranty(roof_id=id)
    return roof


def make_owner_tree() -> Owner:
    """own-1 with one manager, one managed property and one roof under warranty."""
    owner = Owner(id="own-1", name="Vanderbilt Capital Partners", email="rv@vcpartners.com")
    manager = PropertyManager(id="pm-1", owner_id="own-1", name="Cornerstone Property Management")
    prop = Property(
        id="prop-1",
        owner_id="own-1",
        managed_by="pm-1",
        name="Riverside Office Complex",
        address="1420 Commerce Blvd, Nashville, TN",
    )
    prop.roofs = [make_roof("r-1a", "prop-1")]
    owner.property_managers = [manager]
    owner.properties = [prop]
    return owner


def make_access_log(id="al-1", roof_id="r-1a", **overrides) -> AccessLog:
    fields = {
        "id": id,
        "roof_id": roof_id,
        "person": "Mike Torres",
        "company": "Nashville HVAC Pro",
        "purpose": "HVAC unit service",
        "accessed_at": datetime(2025, 12, 8, 9, 30, tzinfo=UTC),
        "duration": "2.5 hrs",
        "notes": None,
    }
    fields.update(overrides)
    return AccessLog(**fields)


def make_invoice(id="inv-1", status=InvoiceStatus.REVIEW, **overrides) -> Invoice:
    fields = {
        "id": id,
        "roof_id": "r-1a",
        "vendor": "Riverland Roofing",
        "invoice_date": date(2025, 12, 20),
        "amount": Decimal("4200.00"),
        "description": "Seam repair - NE section near HVAC",
        "flagged": True,
        "flag_reason": "Seam separation may be covered under GAF NDL warranty",
        "status": status,
    }
    fields.update(overrides)
    return Invoice(**fields)


def make_inspection(id="insp-1", status=InspectionStatus.COMPLETED, **overrides) -> Inspection:
    fields = {
        "id": id,
        "roof_id": "r-1a",
        "inspection_date": date(2025, 12, 10),
        "inspector": "Billy Hargrove",
        "company": "Riverland Roofing",
        "inspection_type": "Biannual + MRI Scan",
        "status": status,
        "score": 87,
        "photos": 24,
        "moisture_data": True,
        "notes": None,
    }
    fields.update(overrides)
    return Inspection(**fields)


def make_claim(id="cl-1", events=None, **overrides) -> Claim:
    """Claim with events attached in the given order (sort_order = position)."""
    fields = {
        "id": id,
        "roof_id": "r-3b",
        "manufacturer": "Versico",
        "filed_on": date(2025, 10, 1),
        "amount": Decimal("3200.00"),
        "status": ClaimStatus.APPROVED,
        "description": "Membrane delamination - 200 sqft area, west section",
    }
    fields.update(overrides)
    claim = Claim(**fields)
    claim.events = [
        ClaimEvent(id=position + 1, claim_id=id, event_date=ev_date, event=text, sort_order=position)
        for position, (ev_date, text) in enumerate(events or [])
    ]
    return claim


def make_user(id=7, email="pat@example.com", password_hash="", name="Pat") -> AppUser:
    return AppUser(
        id=id,
        email=email,
        name=name,
        password_hash=password_hash,
        created_at=datetime(2026, 1, 1, tzinfo=UTC),
    )
