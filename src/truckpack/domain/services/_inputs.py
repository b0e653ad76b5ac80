"""Precondition checks shared by the pack analysis services."""

from __future__ import annotations

from typing import Iterable

from truckpack.domain.entities import Catalog, CatalogItem, Pack


def require_inputs(
    pack: Pack | None, catalog: Catalog | Iterable[CatalogItem] | None
) -> tuple[Pack, Catalog]:
    """Validate the (pack, catalog) pair every service consumes.

    A plain iterable of catalog items is accepted and wrapped in a Catalog.

    Raises:
        ValueError: If pack or catalog is None.
    """
    if pack is None:
        raise ValueError("pack is required")
    if catalog is None:
        raise ValueError("catalog is required")
    if not isinstance(catalog, Catalog):
        catalog = Catalog(catalog)
    return pack, catalog
