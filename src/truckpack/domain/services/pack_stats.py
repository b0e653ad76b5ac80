"""Capacity, containment and aggregate packing statistics."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from truckpack.domain.entities import Catalog, CatalogItem, Pack
from truckpack.domain.value_objects import AABB, Container, PackStats

from ._inputs import require_inputs
from .zones import decompose_zones

logger = logging.getLogger(__name__)


def compute_capacity(container: Container) -> float:
    """Usable capacity in cubic inches (sum of zone volumes).

    Returns 0.0 for a container with any non-positive dimension.
    """
    return _bounded_capacity(container, decompose_zones(container))


def _bounded_capacity(container: Container, zones: Iterable[AABB]) -> float:
    # Zone volumes summed in floating point can round past L x W x H.
    total = float(sum(zone.volume_in3 for zone in zones))
    return min(total, float(container.envelope_volume_in3))


def is_contained(aabb: AABB, zones: Iterable[AABB]) -> bool:
    """Check whether a box fits entirely inside a single zone.

    Partial coverage by several adjacent zones does not count: an item
    straddling a zone boundary (for example reaching over a wheel well)
    is not contained.

    Args:
        aabb: Item box in container space.
        zones: Usable zones from ``decompose_zones``.

    Returns:
        True if some zone contains the whole box.
    """
    return any(zone.contains(aabb) for zone in zones)


class PackStatsCalculator:
    """Computes PackStats for a pack snapshot.

    Example:
        stats = PackStatsCalculator().compute(pack, catalog)
        print(f"{stats.packed_count}/{stats.total_count} packed")
    """

    def compute(
        self,
        pack: Pack,
        catalog: Catalog | Iterable[CatalogItem],
        zones: Sequence[AABB] | None = None,
    ) -> PackStats:
        """Compute packing statistics.

        Args:
            pack: Pack snapshot to measure.
            catalog: Catalog used to resolve instance references.
            zones: Precomputed zones for ``pack.container``; decomposed
                here when omitted.

        Returns:
            PackStats for the visible instances.

        Raises:
            ValueError: If pack or catalog is None.
        """
        pack, catalog = require_inputs(pack, catalog)
        if zones is None:
            zones = decompose_zones(pack.container)
        capacity = _bounded_capacity(pack.container, zones)

        total_count = 0
        packed_count = 0
        used_volume = 0.0
        total_weight = 0.0

        for inst in pack.visible_instances():
            total_count += 1
            item = catalog.resolve(inst.catalog_item_id)
            if item is None:
                logger.debug(
                    f"Instance {inst.id} references unknown catalog item "
                    f"{inst.catalog_item_id!r}; skipped"
                )
                continue
            if not is_contained(inst.world_box(item), zones):
                continue
            packed_count += 1
            used_volume += item.dimensions.volume_in3
            total_weight += item.weight_lb

        percent = (used_volume / capacity) * 100 if capacity > 0 else 0.0
        logger.debug(
            f"Pack stats: {packed_count}/{total_count} packed, "
            f"{used_volume:.1f} in3 of {capacity:.1f} in3"
        )
        return PackStats(
            total_count=total_count,
            packed_count=packed_count,
            used_volume_in3=used_volume,
            used_volume_percent=percent,
            total_weight_lb=total_weight,
            capacity_in3=capacity,
        )


def compute_stats(pack: Pack, catalog: Catalog | Iterable[CatalogItem]) -> PackStats:
    """Compute aggregate packing statistics. See ``PackStatsCalculator``."""
    return PackStatsCalculator().compute(pack, catalog)


__all__ = [
    "PackStatsCalculator",
    "compute_capacity",
    "compute_stats",
    "is_contained",
]
