# This project was developed with assistance from AI tools.
"""
Demo fixture data for the roof warranty portfolio.

All fixture data is defined as Python dicts so enums can be referenced directly
and type-checked. Rows are keyed by column name; list-valued columns hold
plain Python lists.

Simulated for demonstration purposes -- not real customer data.
"""

import hashlib
import json
from datetime import UTC, date, datetime
from decimal import Decimal

from warranty_store import (
    ClaimStatus,
    ComplianceStatus,
    FeeType,
    InspectionStatus,
    InvoiceStatus,
    WarrantyStatus,
)

# ---------------------------------------------------------------------------
# Owners and property managers
# ---------------------------------------------------------------------------

OWNERS: list[dict] = [
    {
        "id": "own-1",
        "name": "Vanderbilt Capital Partners",
        "contact": "Richard Vanderbilt III",
        "email": "rvanderbilt@vcpartners.com",
        "phone": "(615) 555-0100",
        "notes": "Owns 12 commercial properties across Middle TN. Long-term hold strategy.",
    },
    {
        "id": "own-2",
        "name": "Greenway Health Systems",
        "contact": "Dr. Marcia Langford",
        "email": "mlangford@greenwayhealthsys.com",
        "phone": "(615) 555-0300",
        "notes": "Healthcare REIT. Extremely sensitive to leaks: medical equipment and patient safety.",
    },
    {
        "id": "own-3",
        "name": "Summit Retail Holdings",
        "contact": "James Thornton",
        "email": "jthornton@summitretail.com",
        "phone": "(615) 555-0400",
        "notes": "Strip mall portfolio. Price-sensitive, but understands warranty value after "
        "losing coverage on Cool Springs location.",
    },
]

PROPERTY_MANAGERS: list[dict] = [
    {
        "id": "pm-1",
        "owner_id": "own-1",
        "name": "Cornerstone Property Management",
        "contact": "Sarah Mitchell",
        "email": "smitchell@cornerstonepm.com",
        "phone": "(615) 555-0150",
        "notes": "Manages 6 of VCP's Nashville properties",
    },
    {
        "id": "pm-2",
        "owner_id": "own-3",
        "name": "Alliance Facility Services",
        "contact": "Mike Rodriguez",
        "email": "mrodriguez@alliancefs.com",
        "phone": "(615) 555-0450",
        "notes": "Handles all maintenance for Summit's retail portfolio",
    },
]

PROPERTIES: list[dict] = [
    {
        "id": "prop-1",
        "owner_id": "own-1",
        "managed_by": "pm-1",
        "name": "Riverside Office Complex",
        "address": "1420 Commerce Blvd, Nashville, TN",
    },
    {
        "id": "prop-2",
        "owner_id": "own-1",
        "managed_by": "pm-1",
        "name": "Commerce Park Building A",
        "address": "2200 West End Ave, Nashville, TN",
    },
    {
        "id": "prop-3",
        "owner_id": "own-2",
        "managed_by": None,
        "name": "Greenway Medical Center",
        "address": "800 Medical Center Dr, Franklin, TN",
    },
    {
        "id": "prop-4",
        "owner_id": "own-3",
        "managed_by": "pm-2",
        "name": "Harding Pike Shopping Center",
        "address": "4500 Harding Pike, Nashville, TN",
    },
    {
        "id": "prop-5",
        "owner_id": "own-3",
        "managed_by": "pm-2",
        "name": "Nolensville Road Plaza",
        "address": "3200 Nolensville Rd, Nashville, TN",
    },
]

# ---------------------------------------------------------------------------
# Roofs (each with its warranty)
# ---------------------------------------------------------------------------

ROOFS: list[dict] = [
    {
        "id": "r-1a",
        "property_id": "prop-1",
        "section": "Main Building - Flat",
        "sq_ft": 22000,
        "membrane_type": "TPO",
        "installed_on": date(2019, 6, 15),
        "warranty": {
            "manufacturer": "GAF",
            "warranty_type": "NDL (No Dollar Limit)",
            "start_date": date(2019, 6, 15),
            "end_date": date(2039, 6, 15),
            "status": WarrantyStatus.ACTIVE,
            "compliance": ComplianceStatus.CURRENT,
            "next_inspection": date(2026, 6, 15),
            "last_inspection": date(2025, 12, 10),
            "coverage": [
                "Membrane material defects",
                "Manufacturing flaws",
                "Seam failure",
                "Flashing defects",
            ],
            "exclusions": [
                "Foot traffic damage",
                "Acts of God (wind >74mph)",
                "Unauthorized modifications",
                "Ponding water >48hrs",
            ],
            "requirements": [
                "Biannual inspection by certified contractor",
                "Maintain drainage systems",
                "Report damage within 30 days",
                "No unauthorized penetrations",
            ],
        },
    },
    {
        "id": "r-1b",
        "property_id": "prop-1",
        "section": "Warehouse Wing",
        "sq_ft": 35000,
        "membrane_type": "EPDM",
        "installed_on": date(2017, 3, 20),
        "warranty": {
            "manufacturer": "Carlisle",
            "warranty_type": "Material Only",
            "start_date": date(2017, 3, 20),
            "end_date": date(2032, 3, 20),
            "status": WarrantyStatus.ACTIVE,
            "compliance": ComplianceStatus.AT_RISK,
            "next_inspection": date(2026, 3, 20),
            "last_inspection": date(2024, 9, 15),
            "coverage": ["Membrane material defects", "Adhesive failure"],
            "exclusions": [
                "Workmanship",
                "Foot traffic damage",
                "Chemical exposure",
                "Ponding water",
            ],
            "requirements": [
                "Annual inspection",
                "Maintain all flashings",
                "Professional repairs only",
            ],
        },
    },
    {
        "id": "r-2a",
        "property_id": "prop-2",
        "section": "Full Roof",
        "sq_ft": 18000,
        "membrane_type": "TPO",
        "installed_on": date(2021, 4, 10),
        "warranty": {
            "manufacturer": "GAF",
            "warranty_type": "NDL (No Dollar Limit)",
            "start_date": date(2021, 4, 10),
            "end_date": date(2041, 4, 10),
            "status": WarrantyStatus.ACTIVE,
            "compliance": ComplianceStatus.CURRENT,
            "next_inspection": date(2026, 10, 10),
            "last_inspection": date(2025, 10, 8),
            "coverage": ["Material defects", "Manufacturing flaws", "Membrane failure"],
            "exclusions": ["Foot traffic", "Acts of God", "Unauthorized modifications"],
            "requirements": ["Biannual inspection", "Maintain drainage", "30-day damage reporting"],
        },
    },
    {
        "id": "r-3a",
        "property_id": "prop-3",
        "section": "East Wing",
        "sq_ft": 45000,
        "membrane_type": "PVC",
        "installed_on": date(2020, 9, 1),
        "warranty": {
            "manufacturer": "Sika Sarnafil",
            "warranty_type": "Full System",
            "start_date": date(2020, 9, 1),
            "end_date": date(2040, 9, 1),
            "status": WarrantyStatus.ACTIVE,
            "compliance": ComplianceStatus.CURRENT,
            "next_inspection": date(2026, 9, 1),
            "last_inspection": date(2025, 8, 20),
            "coverage": [
                "Full system warranty",
                "Material and labor",
                "Consequential damages up to $500K",
            ],
            "exclusions": ["Acts of God", "Third-party damage", "Unauthorized modifications"],
            "requirements": [
                "Annual manufacturer inspection",
                "Maintain rooftop equipment pads",
                "Quarterly drain cleaning",
            ],
        },
    },
    {
        "id": "r-3b",
        "property_id": "prop-3",
        "section": "West Wing",
        "sq_ft": 38000,
        "membrane_type": "TPO",
        "installed_on": date(2018, 11, 15),
        "warranty": {
            "manufacturer": "Versico",
            "warranty_type": "Material + Labor",
            "start_date": date(2018, 11, 15),
            "end_date": date(2033, 11, 15),
            "status": WarrantyStatus.ACTIVE,
            "compliance": ComplianceStatus.AT_RISK,
            "next_inspection": date(2026, 5, 15),
            "last_inspection": date(2024, 11, 20),
            "coverage": ["Membrane defects", "Seam failure", "Labor for warranty repairs"],
            "exclusions": ["Ponding water", "Foot traffic", "HVAC damage"],
            "requirements": [
                "Biannual inspection",
                "No rooftop storage",
                "Report leaks within 14 days",
            ],
        },
    },
    {
        "id": "r-4a",
        "property_id": "prop-4",
        "section": "Main Retail Strip",
        "sq_ft": 52000,
        "membrane_type": "Modified Bitumen",
        "installed_on": date(2015, 8, 10),
        "warranty": {
            "manufacturer": "Firestone",
            "warranty_type": "Material Only",
            "start_date": date(2015, 8, 10),
            "end_date": date(2030, 8, 10),
            "status": WarrantyStatus.ACTIVE,
            "compliance": ComplianceStatus.EXPIRED_INSPECTION,
            "next_inspection": date(2025, 8, 10),
            "last_inspection": date(2023, 8, 15),
            "coverage": ["Membrane material defects only"],
            "exclusions": ["All workmanship", "Ponding", "Foot traffic", "HVAC discharge"],
            "requirements": [
                "Annual certified inspection",
                "Professional repairs within 30 days of discovery",
            ],
        },
    },
    {
        "id": "r-5a",
        "property_id": "prop-5",
        "section": "Full Roof",
        "sq_ft": 28000,
        "membrane_type": "TPO",
        "installed_on": date(2022, 3, 15),
        "warranty": {
            "manufacturer": "GAF",
            "warranty_type": "NDL",
            "start_date": date(2022, 3, 15),
            "end_date": date(2042, 3, 15),
            "status": WarrantyStatus.ACTIVE,
            "compliance": ComplianceStatus.CURRENT,
            "next_inspection": date(2026, 9, 15),
            "last_inspection": date(2025, 9, 10),
            "coverage": ["Full membrane coverage", "Manufacturing defects", "Seam integrity"],
            "exclusions": ["Foot traffic", "Unauthorized penetrations", "Wind >74mph"],
            "requirements": ["Biannual inspection", "Maintain drainage", "30-day reporting"],
        },
    },
]

# ---------------------------------------------------------------------------
# Warranty catalog sample
# ---------------------------------------------------------------------------
# The full catalog is loaded with ``--catalog``; these entries back the
# pricing seed below.

CATALOG: list[dict] = [
    {
        "id": "WT-004",
        "category": "Coating",
        "manufacturer": "GACO",
        "name": "GACO Silicone Labor & Material NDL 20-Year",
        "membranes": ["Silicone", "Metal", "Modified Bitumen", "EPDM", "TPO"],
        "term": 20,
        "labor_covered": True,
        "material_covered": True,
        "consequential": False,
        "dollar_cap": "NDL",
        "insp_freq": "Annual",
        "insp_by": "GACO-approved applicator",
        "transferable": True,
        "ponding_excluded": False,
        "wind_limit": "Up to 100 mph",
        "strengths": ["Ponding water allowed", "No dollar limit", "Fast restoration install"],
        "weaknesses": ["Requires dry film thickness testing", "Dirt pickup on silicone"],
        "best_for": "Restoring aged low-slope roofs without tear-off",
        "rating": 4.8,
        "warranty_name": "GacoFlex Silicone NDL",
        "thickness": "30 mils DFT",
        "installation_method": "Spray or roll applied",
        "ndl": True,
        "recover_eligible": True,
        "recover_max_years": 20,
    },
    {
        "id": "WT-051",
        "category": "Coating",
        "manufacturer": "Henry",
        "name": "Henry Pro-Grade 988 Gold Seal 20-Year",
        "membranes": ["Silicone", "Modified Bitumen", "BUR", "Metal"],
        "term": 20,
        "labor_covered": True,
        "material_covered": True,
        "consequential": False,
        "dollar_cap": "Original installed cost",
        "insp_freq": "Annual",
        "insp_by": "Henry Gold Seal contractor",
        "transferable": True,
        "ponding_excluded": True,
        "wind_limit": "Up to 90 mph",
        "strengths": ["Wide contractor network", "Good adhesion on BUR"],
        "weaknesses": ["Ponding water excluded", "Dollar cap at installed cost"],
        "best_for": "Budget-conscious coating restorations",
        "rating": 4.3,
        "product_lines": "Pro-Grade 988",
        "ndl": False,
    },
    {
        "id": "WT-115",
        "category": "Single-Ply",
        "manufacturer": "GAF",
        "name": "GAF TPO Diamond Pledge NDL 15-Year",
        "membranes": ["TPO"],
        "term": 15,
        "labor_covered": True,
        "material_covered": True,
        "consequential": False,
        "dollar_cap": "NDL",
        "insp_freq": "Biannual",
        "insp_by": "GAF certified contractor",
        "transferable": True,
        "ponding_excluded": True,
        "wind_limit": "Up to 72 mph",
        "strengths": ["No dollar limit", "Large certified installer base", "Seam coverage"],
        "weaknesses": ["Ponding water excluded", "Biannual inspection obligation"],
        "best_for": "Commercial TPO roofs with heavy rooftop equipment",
        "rating": 4.8,
        "warranty_name": "Diamond Pledge",
        "thickness": "60 mil",
        "installation_method": "Mechanically attached or fully adhered",
        "ndl": True,
        "hail_coverage": "Up to 2 in. with upgrade",
        "min_roof_size": "10,000 sq ft",
        "warranty_fee_per_sq": "$8-$10",
        "min_warranty_fee": "$2,500",
    },
    {
        "id": "WT-142",
        "category": "Single-Ply",
        "manufacturer": "Carlisle",
        "name": "Carlisle Sure-Seal EPDM Golden Seal 20-Year",
        "membranes": ["EPDM"],
        "term": 20,
        "labor_covered": True,
        "material_covered": True,
        "consequential": False,
        "dollar_cap": "NDL",
        "insp_freq": "Annual",
        "insp_by": "Carlisle authorized applicator",
        "transferable": True,
        "ponding_excluded": False,
        "wind_limit": "Up to 80 mph",
        "strengths": ["Proven EPDM track record", "Ponding water covered"],
        "weaknesses": ["Seam tape maintenance"],
        "best_for": "Large low-slope warehouses",
        "rating": 4.6,
        "ndl": True,
    },
    {
        "id": "WT-167",
        "category": "Single-Ply",
        "manufacturer": "Sika Sarnafil",
        "name": "Sika Sarnafil PVC NDL 20-Year",
        "membranes": ["PVC"],
        "term": 20,
        "labor_covered": True,
        "material_covered": True,
        "consequential": True,
        "dollar_cap": "NDL",
        "insp_freq": "Annual",
        "insp_by": "Sika Sarnafil technical representative",
        "transferable": True,
        "ponding_excluded": False,
        "wind_limit": "Up to 120 mph",
        "strengths": ["Consequential damage coverage", "Manufacturer inspections", "Chemical resistance"],
        "weaknesses": ["Highest fee tier", "Limited installer pool"],
        "best_for": "Healthcare and mission-critical facilities",
        "rating": 4.9,
        "thickness": "60-80 mil",
        "ndl": True,
        "hail_coverage": "Up to 3 in. with Hail Guard",
    },
    {
        "id": "WT-188",
        "category": "Single-Ply",
        "manufacturer": "Versico",
        "name": "Versico VersiWeld TPO Material + Labor 15-Year",
        "membranes": ["TPO"],
        "term": 15,
        "labor_covered": True,
        "material_covered": True,
        "consequential": False,
        "dollar_cap": "Original installed cost",
        "insp_freq": "Biannual",
        "insp_by": "Versico authorized contractor",
        "transferable": False,
        "ponding_excluded": True,
        "wind_limit": "Up to 55 mph",
        "strengths": ["Lower fee than NDL"],
        "weaknesses": ["Not transferable", "Low wind limit"],
        "best_for": "Owner-occupied buildings on a budget",
        "rating": None,
        "ndl": False,
    },
]

# ---------------------------------------------------------------------------
# Pricing submissions
# ---------------------------------------------------------------------------


def _ts(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=UTC)


PRICING_SUBMISSIONS: list[dict] = [
    # GAF TPO Diamond Pledge NDL
    {"warranty_id": "WT-115", "fee_type": FeeType.BASE, "amount": Decimal("2500"), "submitted_at": _ts(2025, 11, 1)},
    {"warranty_id": "WT-115", "fee_type": FeeType.BASE, "amount": Decimal("2800"), "submitted_at": _ts(2025, 12, 15)},
    {"warranty_id": "WT-115", "fee_type": FeeType.BASE, "amount": Decimal("2650"), "submitted_at": _ts(2026, 1, 20)},
    {"warranty_id": "WT-115", "fee_type": FeeType.PSF, "amount": Decimal("0.08"), "submitted_at": _ts(2025, 11, 1)},
    {"warranty_id": "WT-115", "fee_type": FeeType.PSF, "amount": Decimal("0.09"), "submitted_at": _ts(2025, 12, 15)},
    {"warranty_id": "WT-115", "fee_type": FeeType.PSF, "amount": Decimal("0.085"), "submitted_at": _ts(2026, 1, 20)},
    # GACO Silicone L&M NDL
    {"warranty_id": "WT-004", "fee_type": FeeType.BASE, "amount": Decimal("1800"), "submitted_at": _ts(2025, 10, 10)},
    {"warranty_id": "WT-004", "fee_type": FeeType.BASE, "amount": Decimal("2100"), "submitted_at": _ts(2025, 11, 22)},
    {"warranty_id": "WT-004", "fee_type": FeeType.BASE, "amount": Decimal("1950"), "submitted_at": _ts(2026, 1, 5)},
    {"warranty_id": "WT-004", "fee_type": FeeType.PSF, "amount": Decimal("0.06"), "submitted_at": _ts(2025, 10, 10)},
    {"warranty_id": "WT-004", "fee_type": FeeType.PSF, "amount": Decimal("0.07"), "submitted_at": _ts(2025, 11, 22)},
    {"warranty_id": "WT-004", "fee_type": FeeType.PSF, "amount": Decimal("0.065"), "submitted_at": _ts(2026, 1, 5)},
    # Henry Pro-Grade 988 Gold Seal
    {"warranty_id": "WT-051", "fee_type": FeeType.BASE, "amount": Decimal("2200"), "submitted_at": _ts(2025, 12, 1)},
    {"warranty_id": "WT-051", "fee_type": FeeType.BASE, "amount": Decimal("2400"), "submitted_at": _ts(2026, 1, 10)},
    {"warranty_id": "WT-051", "fee_type": FeeType.PSF, "amount": Decimal("0.07"), "submitted_at": _ts(2025, 12, 1)},
    {"warranty_id": "WT-051", "fee_type": FeeType.PSF, "amount": Decimal("0.075"), "submitted_at": _ts(2026, 1, 10)},
    # Sika Sarnafil PVC NDL
    {"warranty_id": "WT-167", "fee_type": FeeType.BASE, "amount": Decimal("4500"), "submitted_at": _ts(2025, 9, 15)},
    {"warranty_id": "WT-167", "fee_type": FeeType.BASE, "amount": Decimal("5000"), "submitted_at": _ts(2025, 11, 10)},
    {"warranty_id": "WT-167", "fee_type": FeeType.BASE, "amount": Decimal("4800"), "submitted_at": _ts(2026, 2, 1)},
    {"warranty_id": "WT-167", "fee_type": FeeType.PSF, "amount": Decimal("0.14"), "submitted_at": _ts(2025, 9, 15)},
    {"warranty_id": "WT-167", "fee_type": FeeType.PSF, "amount": Decimal("0.15"), "submitted_at": _ts(2025, 11, 10)},
    {"warranty_id": "WT-167", "fee_type": FeeType.PSF, "amount": Decimal("0.145"), "submitted_at": _ts(2026, 2, 1)},
]

# ---------------------------------------------------------------------------
# Roof history: access logs, invoices, inspections, claims
# ---------------------------------------------------------------------------

ACCESS_LOGS: list[dict] = [
    {
        "id": "al-1",
        "roof_id": "r-1a",
        "person": "Mike Torres",
        "company": "Nashville HVAC Pro",
        "purpose": "HVAC unit service",
        "accessed_at": datetime(2025, 12, 8, 9, 30, tzinfo=UTC),
        "duration": "2.5 hrs",
        "notes": "Routine condenser service. Used ladder at NE access.",
    },
    {
        "id": "al-2",
        "roof_id": "r-1a",
        "person": "Unknown",
        "company": "Unknown",
        "purpose": "Unauthorized access",
        "accessed_at": datetime(2025, 12, 12, 14, 15, tzinfo=UTC),
        "duration": "Unknown",
        "notes": "QR not scanned. Camera showed individual on roof near HVAC unit.",
    },
    {
        "id": "al-3",
        "roof_id": "r-1a",
        "person": "Billy Hargrove",
        "company": "Riverland Roofing",
        "purpose": "MRI moisture scan",
        "accessed_at": datetime(2025, 12, 18, 8, 0, tzinfo=UTC),
        "duration": "3 hrs",
        "notes": "Full scan completed. Puncture found near NE HVAC unit.",
    },
    {
        "id": "al-4",
        "roof_id": "r-3a",
        "person": "David Kim",
        "company": "Greenway Facilities",
        "purpose": "Drain inspection",
        "accessed_at": datetime(2026, 1, 5, 10, 0, tzinfo=UTC),
        "duration": "45 min",
        "notes": "Quarterly drain cleaning per warranty requirements.",
    },
    {
        "id": "al-5",
        "roof_id": "r-4a",
        "person": "Jeff Simmons",
        "company": "Pinnacle Signs",
        "purpose": "Sign installation",
        "accessed_at": datetime(2025, 11, 20, 13, 0, tzinfo=UTC),
        "duration": "4 hrs",
        "notes": "New tenant signage. Penetrations made without contractor notification.",
    },
    {
        "id": "al-6",
        "roof_id": "r-1b",
        "person": "Sarah Mitchell",
        "company": "Cornerstone PM",
        "purpose": "Annual walkthrough",
        "accessed_at": datetime(2026, 1, 15, 11, 0, tzinfo=UTC),
        "duration": "1 hr",
        "notes": "PM inspection. Noted ponding near drain #3.",
    },
]

INVOICES: list[dict] = [
    {
        "id": "inv-1",
        "roof_id": "r-1a",
        "vendor": "Riverland Roofing",
        "invoice_date": date(2025, 12, 20),
        "amount": Decimal("4200"),
        "description": "Seam repair - NE section near HVAC",
        "flagged": True,
        "flag_reason": "Seam separation may be covered under GAF NDL warranty",
        "status": InvoiceStatus.REVIEW,
    },
    {
        "id": "inv-2",
        "roof_id": "r-1b",
        "vendor": "Acme Roofing",
        "invoice_date": date(2025, 10, 15),
        "amount": Decimal("1800"),
        "description": "Flashing repair - west parapet",
        "flagged": False,
        "flag_reason": None,
        "status": InvoiceStatus.PAID,
    },
    {
        "id": "inv-3",
        "roof_id": "r-3b",
        "vendor": "Quality Roof Repair",
        "invoice_date": date(2025, 9, 22),
        "amount": Decimal("6500"),
        "description": "Membrane patch - 200 sqft area",
        "flagged": True,
        "flag_reason": "Membrane defect may fall under Versico Material + Labor coverage",
        "status": InvoiceStatus.REVIEW,
    },
    {
        "id": "inv-4",
        "roof_id": "r-4a",
        "vendor": "Pinnacle Roofing",
        "invoice_date": date(2025, 11, 30),
        "amount": Decimal("3200"),
        "description": "Emergency leak repair - tenant space",
        "flagged": True,
        "flag_reason": "Leak may be linked to unauthorized sign penetration: "
        "third-party liability, not warranty",
        "status": InvoiceStatus.REVIEW,
    },
    {
        "id": "inv-5",
        "roof_id": "r-5a",
        "vendor": "Riverland Roofing",
        "invoice_date": date(2026, 1, 10),
        "amount": Decimal("950"),
        "description": "Drain basket replacement x3",
        "flagged": False,
        "flag_reason": None,
        "status": InvoiceStatus.PAID,
    },
    {
        "id": "inv-6",
        "roof_id": "r-3a",
        "vendor": "Sika Sarnafil Direct",
        "invoice_date": date(2025, 7, 18),
        "amount": Decimal("0"),
        "description": "Warranty repair - manufacturer dispatched crew",
        "flagged": False,
        "flag_reason": None,
        "status": InvoiceStatus.WARRANTY,
    },
]

INSPECTIONS: list[dict] = [
    {
        "id": "insp-1",
        "roof_id": "r-1a",
        "inspection_date": date(2025, 12, 10),
        "inspector": "Billy Hargrove",
        "company": "Riverland Roofing",
        "inspection_type": "Biannual + MRI Scan",
        "status": InspectionStatus.COMPLETED,
        "score": 87,
        "photos": 24,
        "moisture_data": True,
        "notes": "Puncture found near NE HVAC. Seam wear on south section. Drains clear.",
    },
    {
        "id": "insp-2",
        "roof_id": "r-3a",
        "inspection_date": date(2025, 8, 20),
        "inspector": "Adam G.",
        "company": "Roof MRI",
        "inspection_type": "Annual + MRI Scan",
        "status": InspectionStatus.COMPLETED,
        "score": 94,
        "photos": 18,
        "moisture_data": True,
        "notes": "Excellent condition. All drains clear. No moisture detected.",
    },
    {
        "id": "insp-3",
        "roof_id": "r-1a",
        "inspection_date": date(2026, 6, 15),
        "inspector": "TBD",
        "company": "TBD",
        "inspection_type": "Biannual",
        "status": InspectionStatus.SCHEDULED,
        "score": None,
        "photos": 0,
        "moisture_data": False,
        "notes": "Due per GAF NDL requirements.",
    },
    {
        "id": "insp-4",
        "roof_id": "r-4a",
        "inspection_date": date(2025, 8, 10),
        "inspector": None,
        "company": None,
        "inspection_type": "Annual",
        "status": InspectionStatus.OVERDUE,
        "score": None,
        "photos": 0,
        "moisture_data": False,
        "notes": "OVERDUE. Last inspection Aug 2023. Warranty compliance at risk.",
    },
    {
        "id": "insp-5",
        "roof_id": "r-1b",
        "inspection_date": date(2026, 3, 20),
        "inspector": "TBD",
        "company": "TBD",
        "inspection_type": "Annual",
        "status": InspectionStatus.SCHEDULED,
        "score": None,
        "photos": 0,
        "moisture_data": False,
        "notes": "Carlisle requires annual inspection.",
    },
]

# Events are stored in list order; their position becomes sort_order.
CLAIMS: list[dict] = [
    {
        "id": "cl-1",
        "roof_id": "r-3b",
        "manufacturer": "Versico",
        "filed_on": date(2025, 10, 1),
        "amount": Decimal("3200"),
        "status": ClaimStatus.APPROVED,
        "description": "Membrane delamination - 200 sqft area, west section",
        "events": [
            {
                "event_date": date(2025, 10, 1),
                "event": "Claim filed with Versico. Included MRI scan data, photos, and inspection report.",
            },
            {
                "event_date": date(2025, 10, 8),
                "event": "Versico acknowledged receipt. Assigned claim #VER-2025-4412.",
            },
            {
                "event_date": date(2025, 10, 22),
                "event": "Versico field rep inspected. Confirmed manufacturing defect in membrane batch.",
            },
            {
                "event_date": date(2025, 11, 5),
                "event": "Claim approved. $3,200 repair authorized under Material + Labor warranty.",
            },
            {
                "event_date": date(2025, 11, 18),
                "event": "Repair completed by Versico-authorized contractor.",
            },
        ],
    },
    {
        "id": "cl-2",
        "roof_id": "r-1a",
        "manufacturer": "GAF",
        "filed_on": date(2026, 1, 10),
        "amount": Decimal("4200"),
        "status": ClaimStatus.IN_PROGRESS,
        "description": "Seam separation near HVAC unit - potential third-party cause",
        "events": [
            {
                "event_date": date(2026, 1, 10),
                "event": "Claim filed with GAF. Included MRI scan showing moisture at seam, "
                "QR access log showing unauthorized roof access 12/12.",
            },
            {
                "event_date": date(2026, 1, 15),
                "event": "GAF acknowledged. Requested additional documentation on HVAC contractor visits.",
            },
            {
                "event_date": date(2026, 1, 28),
                "event": "Submitted HVAC service records and QR access log timeline. "
                "Awaiting field inspection.",
            },
        ],
    },
]


def compute_config_hash(catalog: list[dict] | None = None) -> str:
    """Stable hash of the fixture set (plus an imported catalog, if any)."""
    payload = {
        "owners": OWNERS,
        "property_managers": PROPERTY_MANAGERS,
        "properties": PROPERTIES,
        "roofs": ROOFS,
        "catalog": catalog if catalog is not None else CATALOG,
        "pricing": PRICING_SUBMISSIONS,
        "access_logs": ACCESS_LOGS,
        "invoices": INVOICES,
        "inspections": INSPECTIONS,
        "claims": CLAIMS,
    }
    encoded = json.dumps(payload, sort_keys=True, default=str).encode("utf-8")
    return hashlib.sha256(encoded).hexdigest()[:16]
