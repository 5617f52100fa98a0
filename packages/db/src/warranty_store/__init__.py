# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .database import Base, DatabaseService, get_db, get_db_service
from .enums import (
    ClaimStatus,
    ComplianceStatus,
    FeeType,
    InspectionStatus,
    InvoiceStatus,
    SubmissionStatus,
    WarrantyStatus,
)
from .models import (
    AccessLog,
    AppUser,
    Claim,
    ClaimEvent,
    Inspection,
    Invoice,
    Owner,
    PricingSubmission,
    Property,
    PropertyManager,
    Roof,
    RoofWarranty,
    WarrantyCatalogEntry,
)

__all__ = [
    "Base",
    "DatabaseService",
    "get_db",
    "get_db_service",
    "__version__",
    # Enums
    "ClaimStatus",
    "ComplianceStatus",
    "FeeType",
    "InspectionStatus",
    "InvoiceStatus",
    "SubmissionStatus",
    "WarrantyStatus",
    # Models
    "AccessLog",
    "AppUser",
    "Claim",
    "ClaimEvent",
    "Inspection",
    "Invoice",
    "Owner",
    "PricingSubmission",
    "Property",
    "PropertyManager",
    "Roof",
    "RoofWarranty",
    "WarrantyCatalogEntry",
]
