# This project was developed with assistance from AI tools.
"""
Domain enums for roof warranty management.

Shared domain types used by both SQLAlchemy models (store package)
and Pydantic schemas (api package). Values are the exact strings stored
in the database and returned over the API.
"""

import enum


class WarrantyStatus(str, enum.Enum):
    ACTIVE = "active"
    EXPIRED = "expired"
    VOIDED = "voided"


class ComplianceStatus(str, enum.Enum):
    CURRENT = "current"
    AT_RISK = "at-risk"
    EXPIRED_INSPECTION = "expired-inspection"


class FeeType(str, enum.Enum):
    BASE = "base"
    PSF = "psf"


class SubmissionStatus(str, enum.Enum):
    ACTIVE = "active"
    WITHDRAWN = "withdrawn"

    @classmethod
    def valid_transitions(cls) -> dict["SubmissionStatus", frozenset["SubmissionStatus"]]:
        """Pricing submissions are append-only; they can only be withdrawn."""
        return {
            cls.ACTIVE: frozenset({cls.WITHDRAWN}),
            cls.WITHDRAWN: frozenset(),
        }


class InvoiceStatus(str, enum.Enum):
    REVIEW = "review"
    PAID = "paid"
    WARRANTY = "warranty"

    @classmethod
    def valid_transitions(cls) -> dict["InvoiceStatus", frozenset["InvoiceStatus"]]:
        """An invoice under review is settled either by the owner or the manufacturer."""
        return {
            cls.REVIEW: frozenset({cls.PAID, cls.WARRANTY}),
            cls.PAID: frozenset(),
            cls.WARRANTY: frozenset(),
        }


class InspectionStatus(str, enum.Enum):
    COMPLETED = "completed"
    SCHEDULED = "scheduled"
    OVERDUE = "overdue"


class ClaimStatus(str, enum.Enum):
    APPROVED = "approved"
    IN_PROGRESS = "in-progress"
    DENIED = "denied"
