# This project was developed with assistance from AI tools.
"""CLI entrypoint for demo data seeding.

Usage:
    python -m warranty_api.seed                          # Seed demo data
    python -m warranty_api.seed --catalog warranties.json  # Seed with a full catalog

The catalog file is a JSON array of warranty records (camelCase or
snake_case keys, as returned by ``GET /api/warranties``). List fields may be
arrays or JSON-encoded strings.
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from warranty_store import DatabaseService
from warranty_store.config import DatabaseSettings

from .core.config import settings
from .core.logging import configure_logging
from .services.mapping import CATALOG_FIELDS, CATALOG_LIST_FIELDS, decode_string_list, unmap_record
from .services.seed.seeder import seed_demo_data


def load_catalog(path: Path) -> list[dict]:
    """Read a catalog export into column dicts for ``WarrantyCatalogEntry``."""
    records = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(records, list):
        raise ValueError(f"{path}: expected a JSON array of warranty records")

    catalog = []
    for record in records:
        columns = unmap_record(record, CATALOG_FIELDS)
        for name in CATALOG_LIST_FIELDS:
            columns[name] = decode_string_list(columns.get(name))
        catalog.append(columns)
    return catalog


async def main(catalog_path: Path | None = None) -> None:
    """Run demo data seeding."""
    configure_logging(settings.LOG_LEVEL)
    catalog = load_catalog(catalog_path) if catalog_path else None

    db_service = DatabaseService(
        settings=DatabaseSettings(DATABASE_URL=settings.DATABASE_URL, SQL_ECHO=settings.SQL_ECHO)
    )
    try:
        async with db_service.session() as session:
            result = await seed_demo_data(session, catalog=catalog)
            print(json.dumps(result, indent=2, default=str))
    finally:
        await db_service.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed roof warranty demo data")
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="JSON file with the full warranty catalog (replaces the built-in sample)",
    )
    args = parser.parse_args()
    if args.catalog is not None and not args.catalog.is_file():
        print(f"Catalog file not found: {args.catalog}", file=sys.stderr)
        sys.exit(2)
    asyncio.run(main(catalog_path=args.catalog))
