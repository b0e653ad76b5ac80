"""Pallet load validation.

Load on a pallet is estimated with an approximate footprint test rather
than exact rectangle intersection: an item counts as resting on a pallet
when its bottom face is at or above the pallet's top face and its center
lies within PALLET_FOOTPRINT_OVERLAP_FACTOR of the half-extent sum on both
horizontal axes. Everything that satisfies this is counted, including items
stacked on other items above the pallet.
"""

from __future__ import annotations

import logging
from typing import Iterable

from truckpack.domain.entities import Catalog, CatalogItem, Pack, PlacedInstance
from truckpack.domain.value_objects import PalletWarning

from ._inputs import require_inputs
from .constants import PALLET_FOOTPRINT_OVERLAP_FACTOR

logger = logging.getLogger(__name__)


def rests_on_pallet(
    pallet: PlacedInstance,
    pallet_item: CatalogItem,
    candidate: PlacedInstance,
    candidate_item: CatalogItem,
) -> bool:
    """Check whether a candidate instance counts as load on a pallet.

    Args:
        pallet: The pallet instance.
        pallet_item: Catalog item of the pallet.
        candidate: Instance that may be stacked on the pallet.
        candidate_item: Catalog item of the candidate.

    Returns:
        True if the candidate is above the pallet top and within the
        approximate footprint on both X and Z.
    """
    pallet_pos = pallet.position
    pallet_dims = pallet_item.dimensions
    pos = candidate.position
    dims = candidate_item.dimensions

    pallet_top = pallet_pos.y + pallet_dims.height / 2
    candidate_bottom = pos.y - dims.height / 2
    if candidate_bottom < pallet_top:
        return False

    reach_x = (pallet_dims.length / 2 + dims.length / 2) * PALLET_FOOTPRINT_OVERLAP_FACTOR
    reach_z = (pallet_dims.width / 2 + dims.width / 2) * PALLET_FOOTPRINT_OVERLAP_FACTOR
    return abs(pos.x - pallet_pos.x) < reach_x and abs(pos.z - pallet_pos.z) < reach_z


class PalletLoadValidator:
    """Flags pallets whose stacked load exceeds their rated maximum.

    Only visible pallets with a positive ``max_pallet_weight_lb`` are
    checked; a limit of 0 means unlimited.

    Example:
        warnings = PalletLoadValidator().validate(pack, catalog)
    """

    def validate(
        self, pack: Pack, catalog: Catalog | Iterable[CatalogItem]
    ) -> list[PalletWarning]:
        """Compute pallet overload warnings.

        Args:
            pack: Pack snapshot to check.
            catalog: Catalog used to resolve pallets and loads.

        Returns:
            One warning per overloaded pallet, in pack order.

        Raises:
            ValueError: If pack or catalog is None.
        """
        pack, catalog = require_inputs(pack, catalog)
        resolved = list(pack.resolved_instances(catalog))
        warnings: list[PalletWarning] = []

        for pallet, pallet_item in resolved:
            if not pallet_item.has_weight_limit:
                continue

            load_weight = 0.0
            loaded_ids: list[str] = []
            for candidate, candidate_item in resolved:
                if candidate.id == pallet.id:
                    continue
                if rests_on_pallet(pallet, pallet_item, candidate, candidate_item):
                    load_weight += candidate_item.weight_lb
                    loaded_ids.append(candidate.id)

            max_weight = pallet_item.max_pallet_weight_lb
            if load_weight <= max_weight:
                continue

            overload = ((load_weight - max_weight) / max_weight) * 100
            logger.debug(
                f"Pallet {pallet.id} carries {load_weight:.1f} lb "
                f"over its {max_weight:.1f} lb limit ({overload:.1f}%)"
            )
            warnings.append(
                PalletWarning(
                    pallet_instance_id=pallet.id,
                    max_weight_lb=max_weight,
                    actual_weight_lb=load_weight,
                    overload_percent=overload,
                    loaded_instance_ids=tuple(loaded_ids),
                    pallet_name=pallet_item.name,
                )
            )

        return warnings


def compute_pallet_warnings(
    pack: Pack, catalog: Catalog | Iterable[CatalogItem]
) -> list[PalletWarning]:
    """Compute pallet overload warnings. See ``PalletLoadValidator``."""
    return PalletLoadValidator().validate(pack, catalog)


__all__ = ["PalletLoadValidator", "compute_pallet_warnings", "rests_on_pallet"]
