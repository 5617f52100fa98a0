# This project was developed with assistance from AI tools.
"""
Roof warranty management -- domain models

Physical assets form a tree (owner -> property -> roof), each roof carrying
one warranty plus its access, invoice, inspection and claim history. The
warranty catalog (``warranty_db``) is reference data independent of any
roof; pricing submissions accumulate against catalog entries.

Ordered string lists (coverage, membranes, strengths, ...) are stored as
native JSONB arrays.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Enum,
    Float,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    func,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from .database import Base
from .enums import (
    ClaimStatus,
    ComplianceStatus,
    FeeType,
    InspectionStatus,
    InvoiceStatus,
    SubmissionStatus,
    WarrantyStatus,
)


def _enum_column_type(enum_cls: type, name: str) -> Enum:
    # Store enum values ("at-risk"), not member names ("AT_RISK").
    return Enum(
        enum_cls,
        name=name,
        native_enum=False,
        length=32,
        values_callable=lambda members: [m.value for m in members],
        validate_strings=True,
    )


def _string_list_column(**kwargs) -> Column:
    return Column(JSONB, nullable=False, server_default=text("'[]'::jsonb"), default=list, **kwargs)


class Owner(Base):
    """Property owner (the customer account)."""

    __tablename__ = "owners"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False)
    contact = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(64), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    property_managers = relationship(
        "PropertyManager", back_populates="owner", order_by="PropertyManager.id",
    )
    properties = relationship(
        "Property", back_populates="owner", cascade="all, delete-orphan", order_by="Property.id",
    )

    def __repr__(self):
        return f"<Owner(id={self.id!r}, name={self.name!r})>"


class PropertyManager(Base):
    """Management company serving exactly one owner."""

    __tablename__ = "property_managers"

    id = Column(String(64), primary_key=True)
    owner_id = Column(String(64), ForeignKey("owners.id"), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    contact = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(64), nullable=True)
    notes = Column(Text, nullable=True)

    owner = relationship("Owner", back_populates="property_managers")
    properties = relationship("Property", back_populates="manager")

    def __repr__(self):
        return f"<PropertyManager(id={self.id!r}, owner_id={self.owner_id!r})>"


class Property(Base):
    """A building site. ``managed_by`` is NULL for self-managed properties."""

    __tablename__ = "properties"

    id = Column(String(64), primary_key=True)
    owner_id = Column(String(64), ForeignKey("owners.id"), nullable=False, index=True)
    managed_by = Column(String(64), ForeignKey("property_managers.id"), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    address = Column(Text, nullable=True)

    owner = relationship("Owner", back_populates="properties")
    manager = relationship("PropertyManager", back_populates="properties")
    roofs = relationship(
        "Roof", back_populates="property", cascade="all, delete-orphan", order_by="Roof.id",
    )

    def __repr__(self):
        return f"<Property(id={self.id!r}, name={self.name!r})>"


class Roof(Base):
    """A roof section on a property."""

    __tablename__ = "roofs"

    id = Column(String(64), primary_key=True)
    property_id = Column(String(64), ForeignKey("properties.id"), nullable=False, index=True)
    section = Column(String(255), nullable=False)
    sq_ft = Column(Integer, nullable=True)
    membrane_type = Column(String(100), nullable=True)
    installed_on = Column(Date, nullable=True)

    property = relationship("Property", back_populates="roofs")
    warranty = relationship(
        "RoofWarranty", back_populates="roof", uselist=False, cascade="all, delete-orphan",
    )

    __table_args__ = (CheckConstraint("sq_ft IS NULL OR sq_ft > 0", name="ck_roofs_sq_ft_positive"),)

    def __repr__(self):
        return f"<Roof(id={self.id!r}, section={self.section!r})>"


class RoofWarranty(Base):
    """The manufacturer warranty attached to one roof (1:1)."""

    __tablename__ = "roof_warranties"

    id = Column(Integer, primary_key=True, autoincrement=True)
    roof_id = Column(String(64), ForeignKey("roofs.id"), nullable=False, unique=True, index=True)
    manufacturer = Column(String(255), nullable=False)
    warranty_type = Column(String(255), nullable=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    status = Column(
        _enum_column_type(WarrantyStatus, "warranty_status"),
        nullable=False,
        default=WarrantyStatus.ACTIVE,
    )
    compliance = Column(
        _enum_column_type(ComplianceStatus, "compliance_status"),
        nullable=False,
        default=ComplianceStatus.CURRENT,
    )
    next_inspection = Column(Date, nullable=True)
    last_inspection = Column(Date, nullable=True)
    coverage = _string_list_column()
    exclusions = _string_list_column()
    requirements = _string_list_column()

    roof = relationship("Roof", back_populates="warranty")

    __table_args__ = (
        CheckConstraint("end_date > start_date", name="ck_roof_warranties_date_order"),
    )

    def __repr__(self):
        return f"<RoofWarranty(roof_id={self.roof_id!r}, status='{self.status}')>"


class WarrantyCatalogEntry(Base):
    """Reference catalog of manufacturer warranty products (read-only to routes)."""

    __tablename__ = "warranty_db"

    id = Column(String(32), primary_key=True)
    category = Column(String(100), nullable=False, index=True)
    manufacturer = Column(String(255), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    membranes = _string_list_column()
    term = Column(Integer, nullable=True)
    labor_covered = Column(Boolean, nullable=True)
    material_covered = Column(Boolean, nullable=True)
    consequential = Column(Boolean, nullable=True)
    dollar_cap = Column(String(100), nullable=True)
    insp_freq = Column(String(100), nullable=True)
    insp_by = Column(String(255), nullable=True)
    transferable = Column(Boolean, nullable=True)
    ponding_excluded = Column(Boolean, nullable=True)
    wind_limit = Column(String(100), nullable=True)
    strengths = _string_list_column()
    weaknesses = _string_list_column()
    best_for = Column(Text, nullable=True)
    rating = Column(Float, nullable=True)

    # Optional detail fields
    product_lines = Column(Text, nullable=True)
    warranty_name = Column(String(255), nullable=True)
    thickness = Column(String(100), nullable=True)
    installation_method = Column(String(255), nullable=True)
    ndl = Column(Boolean, nullable=False, default=False, server_default=text("false"))
    hail_coverage = Column(String(255), nullable=True)
    min_roof_size = Column(String(100), nullable=True)
    recover_eligible = Column(Boolean, nullable=True)
    recover_max_years = Column(Integer, nullable=True)
    warranty_fee_per_sq = Column(String(100), nullable=True)
    min_warranty_fee = Column(String(100), nullable=True)
    reference_url = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    maintenance_required = Column(Text, nullable=True)
    transfer_policy = Column(Text, nullable=True)

    pricing_submissions = relationship("PricingSubmission", back_populates="warranty")

    __table_args__ = (
        CheckConstraint(
            "rating IS NULL OR (rating >= 0 AND rating <= 5)", name="ck_warranty_db_rating_range",
        ),
    )

    def __repr__(self):
        return f"<WarrantyCatalogEntry(id={self.id!r}, name={self.name!r})>"


class PricingSubmission(Base):
    """One fee quote for a catalog warranty. Append-only; may be withdrawn."""

    __tablename__ = "pricing_submissions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    warranty_id = Column(String(32), ForeignKey("warranty_db.id"), nullable=False, index=True)
    fee_type = Column(_enum_column_type(FeeType, "fee_type"), nullable=False)
    amount = Column(Numeric(12, 4), nullable=False)
    status = Column(
        _enum_column_type(SubmissionStatus, "submission_status"),
        nullable=False,
        default=SubmissionStatus.ACTIVE,
        server_default=SubmissionStatus.ACTIVE.value,
    )
    submitted_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    submitted_by = Column(String(255), nullable=True)
    notes = Column(Text, nullable=True)

    warranty = relationship("WarrantyCatalogEntry", back_populates="pricing_submissions")

    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_pricing_submissions_amount_positive"),
    )

    def __repr__(self):
        return (
            f"<PricingSubmission(id={self.id}, warranty_id={self.warranty_id!r}, "
            f"fee_type='{self.fee_type}', amount={self.amount})>"
        )


class AccessLog(Base):
    """Append-only record of someone going onto a roof."""

    __tablename__ = "access_logs"

    id = Column(String(64), primary_key=True)
    roof_id = Column(String(64), ForeignKey("roofs.id"), nullable=False, index=True)
    person = Column(String(255), nullable=False)
    company = Column(String(255), nullable=True)
    purpose = Column(Text, nullable=True)
    accessed_at = Column(DateTime(timezone=True), nullable=False)
    duration = Column(String(64), nullable=True)
    notes = Column(Text, nullable=True)

    def __repr__(self):
        return f"<AccessLog(id={self.id!r}, roof_id={self.roof_id!r})>"


class Invoice(Base):
    """Repair invoice; ``flagged`` marks a suspected warranty-covered cost."""

    __tablename__ = "invoices"

    id = Column(String(64), primary_key=True)
    roof_id = Column(String(64), ForeignKey("roofs.id"), nullable=False, index=True)
    vendor = Column(String(255), nullable=False)
    invoice_date = Column(Date, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    description = Column(Text, nullable=True)
    flagged = Column(Boolean, nullable=False, default=False, server_default=text("false"))
    flag_reason = Column(Text, nullable=True)
    status = Column(
        _enum_column_type(InvoiceStatus, "invoice_status"),
        nullable=False,
        default=InvoiceStatus.REVIEW,
    )

    __table_args__ = (CheckConstraint("amount >= 0", name="ck_invoices_amount_non_negative"),)

    def __repr__(self):
        return f"<Invoice(id={self.id!r}, status='{self.status}')>"


class Inspection(Base):
    """Completed, scheduled, or overdue roof inspection."""

    __tablename__ = "inspections"

    id = Column(String(64), primary_key=True)
    roof_id = Column(String(64), ForeignKey("roofs.id"), nullable=False, index=True)
    inspection_date = Column(Date, nullable=False)
    inspector = Column(String(255), nullable=True)
    company = Column(String(255), nullable=True)
    inspection_type = Column(String(255), nullable=True)
    status = Column(_enum_column_type(InspectionStatus, "inspection_status"), nullable=False)
    score = Column(Integer, nullable=True)
    photos = Column(Integer, nullable=False, default=0, server_default=text("0"))
    moisture_data = Column(Boolean, nullable=False, default=False, server_default=text("false"))
    notes = Column(Text, nullable=True)

    __table_args__ = (
        CheckConstraint("score IS NULL OR (score >= 0 AND score <= 100)", name="ck_inspections_score_range"),
    )

    def __repr__(self):
        return f"<Inspection(id={self.id!r}, status='{self.status}')>"


class Claim(Base):
    """Warranty claim filed with a manufacturer."""

    __tablename__ = "claims"

    id = Column(String(64), primary_key=True)
    roof_id = Column(String(64), ForeignKey("roofs.id"), nullable=False, index=True)
    manufacturer = Column(String(255), nullable=False)
    filed_on = Column(Date, nullable=False)
    amount = Column(Numeric(12, 2), nullable=True)
    status = Column(_enum_column_type(ClaimStatus, "claim_status"), nullable=False)
    description = Column(Text, nullable=True)

    events = relationship(
        "ClaimEvent",
        back_populates="claim",
        cascade="all, delete-orphan",
        order_by="ClaimEvent.sort_order",
    )

    def __repr__(self):
        return f"<Claim(id={self.id!r}, status='{self.status}')>"


class ClaimEvent(Base):
    """Timeline entry of a claim. Ordered by ``sort_order``; dates are informational."""

    __tablename__ = "claim_events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    claim_id = Column(String(64), ForeignKey("claims.id"), nullable=False, index=True)
    event_date = Column(Date, nullable=True)
    event = Column(Text, nullable=False)
    sort_order = Column(Integer, nullable=False)

    claim = relationship("Claim", back_populates="events")

    __table_args__ = (
        UniqueConstraint("claim_id", "sort_order", name="uq_claim_events_claim_sort_order"),
    )

    def __repr__(self):
        return f"<ClaimEvent(claim_id={self.claim_id!r}, sort_order={self.sort_order})>"


class AppUser(Base):
    """API user able to exchange credentials for tokens."""

    __tablename__ = "app_users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    name = Column(String(255), nullable=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    last_login_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<AppUser(id={self.id}, email={self.email!r})>"
