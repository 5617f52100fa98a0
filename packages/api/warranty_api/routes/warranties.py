# This project was developed with assistance from AI tools.
"""Warranty catalog routes (read-only)."""

from typing import Any

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from warranty_store import get_db

from ..services.catalog import CatalogFilter, get_catalog_entry, list_catalog
from ..services.mapping import map_catalog_entry

router = APIRouter()


@router.get("")
async def list_warranties(
    session: AsyncSession = Depends(get_db),
    category: str | None = Query(default=None, description="Exact category match."),
    membrane: str | None = Query(default=None, description="Entry must list this membrane."),
) -> list[dict[str, Any]]:
    """Catalog entries matching every given filter, best rated first."""
    entries = await list_catalog(session, CatalogFilter.from_params(category, membrane))
    return [map_catalog_entry(entry) for entry in entries]


@router.get("/{warranty_id}")
async def get_warranty(
    warranty_id: str,
    session: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    return map_catalog_entry(await get_catalog_entry(session, warranty_id))
