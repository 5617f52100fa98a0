# This project was developed with assistance from AI tools.
"""initial warranty schema

Revision ID: 3a7c1e9d2b40
Revises:
Create Date: 2026-02-02 10:12:41.508113

"""

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects.postgresql import JSONB

revision = "3a7c1e9d2b40"
down_revision = None
branch_labels = None
depends_on = None

_EMPTY_LIST = sa.text("'[]'::jsonb")


def _string_list(name: str) -> sa.Column:
    return sa.Column(name, JSONB(), nullable=False, server_default=_EMPTY_LIST)


def upgrade() -> None:
    op.create_table(
        "owners",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("contact", sa.String(255), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(64), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "property_managers",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("owner_id", sa.String(64), nullable=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("contact", sa.String(255), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(64), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["owner_id"], ["owners.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_property_managers_owner_id", "property_managers", ["owner_id"])

    op.create_table(
        "properties",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("owner_id", sa.String(64), nullable=False),
        sa.Column("managed_by", sa.String(64), nullable=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("address", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["owner_id"], ["owners.id"]),
        sa.ForeignKeyConstraint(["managed_by"], ["property_managers.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_properties_owner_id", "properties", ["owner_id"])
    op.create_index("ix_properties_managed_by", "properties", ["managed_by"])

    op.create_table(
        "roofs",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("property_id", sa.String(64), nullable=False),
        sa.Column("section", sa.String(255), nullable=False),
        sa.Column("sq_ft", sa.Integer(), nullable=True),
        sa.Column("membrane_type", sa.String(100), nullable=True),
        sa.Column("installed_on", sa.Date(), nullable=True),
        sa.ForeignKeyConstraint(["property_id"], ["properties.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("sq_ft IS NULL OR sq_ft > 0", name="ck_roofs_sq_ft_positive"),
    )
    op.create_index("ix_roofs_property_id", "roofs", ["property_id"])

    op.create_table(
        "roof_warranties",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("roof_id", sa.String(64), nullable=False),
        sa.Column("manufacturer", sa.String(255), nullable=False),
        sa.Column("warranty_type", sa.String(255), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("status", sa.String(32), nullable=False),
        sa.Column("compliance", sa.String(32), nullable=False),
        sa.Column("next_inspection", sa.Date(), nullable=True),
        sa.Column("last_inspection", sa.Date(), nullable=True),
        _string_list("coverage"),
        _string_list("exclusions"),
        _string_list("requirements"),
        sa.ForeignKeyConstraint(["roof_id"], ["roofs.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("roof_id"),
        sa.CheckConstraint("end_date > start_date", name="ck_roof_warranties_date_order"),
        sa.CheckConstraint(
            "status IN ('active', 'expired', 'voided')", name="warranty_status"
        ),
        sa.CheckConstraint(
            "compliance IN ('current', 'at-risk', 'expired-inspection')", name="compliance_status"
        ),
    )
    op.create_index("ix_roof_warranties_roof_id", "roof_warranties", ["roof_id"])

    op.create_table(
        "warranty_db",
        sa.Column("id", sa.String(32), nullable=False),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("manufacturer", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        _string_list("membranes"),
        sa.Column("term", sa.Integer(), nullable=True),
        sa.Column("labor_covered", sa.Boolean(), nullable=True),
        sa.Column("material_covered", sa.Boolean(), nullable=True),
        sa.Column("consequential", sa.Boolean(), nullable=True),
        sa.Column("dollar_cap", sa.String(100), nullable=True),
        sa.Column("insp_freq", sa.String(100), nullable=True),
        sa.Column("insp_by", sa.String(255), nullable=True),
        sa.Column("transferable", sa.Boolean(), nullable=True),
        sa.Column("ponding_excluded", sa.Boolean(), nullable=True),
        sa.Column("wind_limit", sa.String(100), nullable=True),
        _string_list("strengths"),
        _string_list("weaknesses"),
        sa.Column("best_for", sa.Text(), nullable=True),
        sa.Column("rating", sa.Float(), nullable=True),
        sa.Column("product_lines", sa.Text(), nullable=True),
        sa.Column("warranty_name", sa.String(255), nullable=True),
        sa.Column("thickness", sa.String(100), nullable=True),
        sa.Column("installation_method", sa.String(255), nullable=True),
        sa.Column("ndl", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("hail_coverage", sa.String(255), nullable=True),
        sa.Column("min_roof_size", sa.String(100), nullable=True),
        sa.Column("recover_eligible", sa.Boolean(), nullable=True),
        sa.Column("recover_max_years", sa.Integer(), nullable=True),
        sa.Column("warranty_fee_per_sq", sa.String(100), nullable=True),
        sa.Column("min_warranty_fee", sa.String(100), nullable=True),
        sa.Column("reference_url", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("maintenance_required", sa.Text(), nullable=True),
        sa.Column("transfer_policy", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "rating IS NULL OR (rating >= 0 AND rating <= 5)", name="ck_warranty_db_rating_range"
        ),
    )
    op.create_index("ix_warranty_db_category", "warranty_db", ["category"])
    op.create_index("ix_warranty_db_manufacturer", "warranty_db", ["manufacturer"])
    # Membrane containment filter (membranes @> '["TPO"]')
    op.create_index(
        "ix_warranty_db_membranes", "warranty_db", ["membranes"], postgresql_using="gin"
    )

    op.create_table(
        "pricing_submissions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("warranty_id", sa.String(32), nullable=False),
        sa.Column("fee_type", sa.String(32), nullable=False),
        sa.Column("amount", sa.Numeric(12, 4), nullable=False),
        sa.Column("status", sa.String(32), nullable=False, server_default="active"),
        sa.Column(
            "submitted_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.Column("submitted_by", sa.String(255), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["warranty_id"], ["warranty_db.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("amount > 0", name="ck_pricing_submissions_amount_positive"),
        sa.CheckConstraint("fee_type IN ('base', 'psf')", name="fee_type"),
        sa.CheckConstraint("status IN ('active', 'withdrawn')", name="submission_status"),
    )
    op.create_index(
        "ix_pricing_submissions_warranty_id", "pricing_submissions", ["warranty_id"]
    )

    op.create_table(
        "access_logs",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("roof_id", sa.String(64), nullable=False),
        sa.Column("person", sa.String(255), nullable=False),
        sa.Column("company", sa.String(255), nullable=True),
        sa.Column("purpose", sa.Text(), nullable=True),
        sa.Column("accessed_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("duration", sa.String(64), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["roof_id"], ["roofs.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_access_logs_roof_id", "access_logs", ["roof_id"])

    op.create_table(
        "invoices",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("roof_id", sa.String(64), nullable=False),
        sa.Column("vendor", sa.String(255), nullable=False),
        sa.Column("invoice_date", sa.Date(), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("flagged", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("flag_reason", sa.Text(), nullable=True),
        sa.Column("status", sa.String(32), nullable=False),
        sa.ForeignKeyConstraint(["roof_id"], ["roofs.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("amount >= 0", name="ck_invoices_amount_non_negative"),
        sa.CheckConstraint("status IN ('review', 'paid', 'warranty')", name="invoice_status"),
    )
    op.create_index("ix_invoices_roof_id", "invoices", ["roof_id"])

    op.create_table(
        "inspections",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("roof_id", sa.String(64), nullable=False),
        sa.Column("inspection_date", sa.Date(), nullable=False),
        sa.Column("inspector", sa.String(255), nullable=True),
        sa.Column("company", sa.String(255), nullable=True),
        sa.Column("inspection_type", sa.String(255), nullable=True),
        sa.Column("status", sa.String(32), nullable=False),
        sa.Column("score", sa.Integer(), nullable=True),
        sa.Column("photos", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("moisture_data", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["roof_id"], ["roofs.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "score IS NULL OR (score >= 0 AND score <= 100)", name="ck_inspections_score_range"
        ),
        sa.CheckConstraint(
            "status IN ('completed', 'scheduled', 'overdue')", name="inspection_status"
        ),
    )
    op.create_index("ix_inspections_roof_id", "inspections", ["roof_id"])

    op.create_table(
        "claims",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("roof_id", sa.String(64), nullable=False),
        sa.Column("manufacturer", sa.String(255), nullable=False),
        sa.Column("filed_on", sa.Date(), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=True),
        sa.Column("status", sa.String(32), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["roof_id"], ["roofs.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('approved', 'in-progress', 'denied')", name="claim_status"
        ),
    )
    op.create_index("ix_claims_roof_id", "claims", ["roof_id"])

    op.create_table(
        "claim_events",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("claim_id", sa.String(64), nullable=False),
        sa.Column("event_date", sa.Date(), nullable=True),
        sa.Column("event", sa.Text(), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["claim_id"], ["claims.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("claim_id", "sort_order", name="uq_claim_events_claim_sort_order"),
    )
    op.create_index("ix_claim_events_claim_id", "claim_events", ["claim_id"])

    op.create_table(
        "app_users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.Column("last_login_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_app_users_email", "app_users", ["email"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_app_users_email", table_name="app_users")
    op.drop_table("app_users")
    op.drop_index("ix_claim_events_claim_id", table_name="claim_events")
    op.drop_table("claim_events")
    op.drop_index("ix_claims_roof_id", table_name="claims")
    op.drop_table("claims")
    op.drop_index("ix_inspections_roof_id", table_name="inspections")
    op.drop_table("inspections")
    op.drop_index("ix_invoices_roof_id", table_name="invoices")
    op.drop_table("invoices")
    op.drop_index("ix_access_logs_roof_id", table_name="access_logs")
    op.drop_table("access_logs")
    op.drop_index("ix_pricing_submissions_warranty_id", table_name="pricing_submissions")
    op.drop_table("pricing_submissions")
    op.drop_index("ix_warranty_db_membranes", table_name="warranty_db")
    op.drop_index("ix_warranty_db_manufacturer", table_name="warranty_db")
    op.drop_index("ix_warranty_db_category", table_name="warranty_db")
    op.drop_table("warranty_db")
    op.drop_index("ix_roof_warranties_roof_id", table_name="roof_warranties")
    op.drop_table("roof_warranties")
    op.drop_index("ix_roofs_property_id", table_name="roofs")
    op.drop_table("roofs")
    op.drop_index("ix_properties_managed_by", table_name="properties")
    op.drop_index("ix_properties_owner_id", table_name="properties")
    op.drop_table("properties")
    op.drop_index("ix_property_managers_owner_id", table_name="property_managers")
    op.drop_table("property_managers")
    op.drop_table("owners")
