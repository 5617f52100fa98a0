# This project was developed with assistance from AI tools.
"""Warranty catalog queries.

Filters are normalized into a ``CatalogFilter`` first, so the statement that
reaches the database is the same whatever order the query parameters came
in. ``category`` is an exact match; ``membrane`` requires the entry's
membrane set to contain the value (JSONB ``@>``). Both combine with AND and
an empty or missing value imposes no constraint.
"""

import logging
from dataclasses import dataclass

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from warranty_store import WarrantyCatalogEntry

from ..core.errors import NotFoundError

logger = logging.getLogger(__name__)

# Highest rating first, unrated entries last, name breaks ties
CATALOG_ORDER = (
    WarrantyCatalogEntry.rating.desc().nulls_last(),
    WarrantyCatalogEntry.name.asc(),
    WarrantyCatalogEntry.id.asc(),
)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class CatalogFilter:
    category: str | None = None
    membrane: str | None = None

    @classmethod
    def from_params(cls, category: str | None = None, membrane: str | None = None):
        return cls(category=_clean(category), membrane=_clean(membrane))

    def apply(self, stmt: Select) -> Select:
        if self.category is not None:
            stmt = stmt.where(WarrantyCatalogEntry.category == self.category)
        if self.membrane is not None:
            stmt = stmt.where(WarrantyCatalogEntry.membranes.contains([self.membrane]))
        return stmt

    def statement(self) -> Select:
        return self.apply(select(WarrantyCatalogEntry)).order_by(*CATALOG_ORDER)


async def list_catalog(
    session: AsyncSession,
    catalog_filter: CatalogFilter | None = None,
) -> list[WarrantyCatalogEntry]:
    """Return catalog entries matching the filter in catalog order."""
    catalog_filter = catalog_filter or CatalogFilter()
    result = await session.execute(catalog_filter.statement())
    entries = list(result.scalars().all())
    logger.debug("Catalog query %s returned %d entries", catalog_filter, len(entries))
    return entries


async def get_catalog_entry(session: AsyncSession, warranty_id: str) -> WarrantyCatalogEntry:
    """Return one catalog entry. Raises NotFoundError when absent."""
    entry = await session.get(WarrantyCatalogEntry, warranty_id)
    if entry is None:
        raise NotFoundError("Warranty", warranty_id)
    return entry
