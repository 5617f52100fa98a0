# This project was developed with assistance from AI tools.
"""Demo data seeding service.

Loads the demo portfolio (owners, managers, properties, roofs with their
warranties, a catalog sample, pricing submissions, access logs, invoices,
inspections, and claims with their timelines) so every screen has data to
explore right after deployment.

The whole run is one transaction: the TRUNCATE and every insert commit
together, and any failure rolls all of it back, leaving the previous data
in place. ``app_users`` is never touched.

Simulated for demonstration purposes -- not real customer data.
"""

import logging
from datetime import UTC, datetime

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from warranty_store import (
    AccessLog,
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

from .fixtures import (
    ACCESS_LOGS,
    CATALOG,
    CLAIMS,
    INSPECTIONS,
    INVOICES,
    OWNERS,
    PRICING_SUBMISSIONS,
    PROPERTIES,
    PROPERTY_MANAGERS,
    ROOFS,
    compute_config_hash,
)

logger = logging.getLogger(__name__)

# Children first; CASCADE covers anything missed.
SEEDED_TABLES = (
    "claim_events",
    "claims",
    "inspections",
    "invoices",
    "access_logs",
    "pricing_submissions",
    "warranty_db",
    "roof_warranties",
    "roofs",
    "properties",
    "property_managers",
    "owners",
)


async def _clear_demo_data(session: AsyncSession) -> None:
    """Empty every seeded table. Runs inside the caller's transaction."""
    await session.execute(text(f"TRUNCATE {', '.join(SEEDED_TABLES)} RESTART IDENTITY CASCADE"))
    logger.info("Cleared %d seeded tables", len(SEEDED_TABLES))


async def _seed_accounts(session: AsyncSession) -> dict[str, int]:
    """Owners -> managers -> properties -> roofs (+ warranty), flushed level by level."""
    for owner in OWNERS:
        session.add(Owner(**owner))
    await session.flush()

    for manager in PROPERTY_MANAGERS:
        session.add(PropertyManager(**manager))
    await session.flush()

    for prop in PROPERTIES:
        session.add(Property(**prop))
    await session.flush()

    warranties = 0
    for roof_def in ROOFS:
        roof_data = {k: v for k, v in roof_def.items() if k != "warranty"}
        session.add(Roof(**roof_data))
        if roof_def.get("warranty"):
            session.add(RoofWarranty(roof_id=roof_def["id"], **roof_def["warranty"]))
            warranties += 1
    await session.flush()

    return {
        "owners": len(OWNERS),
        "property_managers": len(PROPERTY_MANAGERS),
        "properties": len(PROPERTIES),
        "roofs": len(ROOFS),
        "roof_warranties": warranties,
    }


async def _seed_catalog(session: AsyncSession, catalog: list[dict]) -> set[str]:
    for entry in catalog:
        session.add(WarrantyCatalogEntry(**entry))
    await session.flush()
    return {entry["id"] for entry in catalog}


async def _seed_pricing(session: AsyncSession, catalog_ids: set[str]) -> int:
    """Insert pricing rows whose warranty is in the loaded catalog."""
    seeded = 0
    for sub in PRICING_SUBMISSIONS:
        if sub["warranty_id"] not in catalog_ids:
            logger.warning("Skipping pricing seed for %s: not in catalog", sub["warranty_id"])
            continue
        session.add(PricingSubmission(submitted_by="seed", **sub))
        seeded += 1
    await session.flush()
    return seeded


async def _seed_roof_history(session: AsyncSession) -> dict[str, int]:
    for log in ACCESS_LOGS:
        session.add(AccessLog(**log))
    for invoice in INVOICES:
        session.add(Invoice(**invoice))
    for inspection in INSPECTIONS:
        session.add(Inspection(**inspection))

    events = 0
    for claim_def in CLAIMS:
        claim = Claim(**{k: v for k, v in claim_def.items() if k != "events"})
        claim.events = [
            ClaimEvent(sort_order=position, **event)
            for position, event in enumerate(claim_def["events"])
        ]
        events += len(claim.events)
        session.add(claim)
    await session.flush()

    return {
        "access_logs": len(ACCESS_LOGS),
        "invoices": len(INVOICES),
        "inspections": len(INSPECTIONS),
        "claims": len(CLAIMS),
        "claim_events": events,
    }


async def seed_demo_data(session: AsyncSession, catalog: list[dict] | None = None) -> dict:
    """Replace the demo dataset. Returns summary dict.

    Args:
        session: Store session; the seed owns its transaction.
        catalog: Catalog rows (snake_case column dicts) to load instead of
            the built-in sample.

    Returns:
        Summary dict with counts of seeded records.
    """
    catalog = CATALOG if catalog is None else catalog
    try:
        await _clear_demo_data(session)
        summary = await _seed_accounts(session)
        catalog_ids = await _seed_catalog(session, catalog)
        summary["catalog_entries"] = len(catalog_ids)
        summary["pricing_submissions"] = await _seed_pricing(session, catalog_ids)
        summary.update(await _seed_roof_history(session))
        await session.commit()
    except Exception:
        await session.rollback()
        logger.error("Demo data seeding failed; previous data left in place")
        raise

    logger.info("Demo data seeded: %s", summary)

    return {
        "status": "seeded",
        "seeded_at": datetime.now(UTC).isoformat(),
        "config_hash": compute_config_hash(catalog),
        **summary,
    }
