"""Load analysis facade that runs every pack check on one snapshot.

This module provides the LoadAnalysisService class, which the owning
application calls after any instance add, remove or move, or any container
edit. The returned LoadReport is a fresh, self-contained snapshot; nothing
is cached between calls.
"""

from __future__ import annotations

import hashlib
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from truckpack.domain.entities import Catalog, CatalogItem, Pack
from truckpack.domain.value_objects import (
    AABB,
    CoGResult,
    CoGStatus,
    OOGWarning,
    PackStats,
    PalletWarning,
)

from ._inputs import require_inputs
from .center_of_gravity import CenterOfGravityAnalyzer
from .out_of_gauge import OutOfGaugeDetector
from .pack_stats import PackStatsCalculator
from .pallet_load import PalletLoadValidator
from .zones import ZoneDecomposer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadReport:
    """All derived outputs for one pack snapshot.

    Attributes:
        stats: Aggregate packing statistics.
        center_of_gravity: CoG result, or None if nothing carries weight.
        oog_warnings: Out-of-gauge instances.
        pallet_warnings: Overloaded pallets.
        zones: Usable zones the stats were computed against.
        snapshot_key: Content hash of the inputs this report derives from.
    """

    stats: PackStats
    center_of_gravity: CoGResult | None
    oog_warnings: list[OOGWarning] = field(default_factory=list)
    pallet_warnings: list[PalletWarning] = field(default_factory=list)
    zones: list[AABB] = field(default_factory=list)
    snapshot_key: str = ""

    @property
    def has_issues(self) -> bool:
        """True if any warning fired or the CoG is outside tolerance."""
        cog_off = (
            self.center_of_gravity is not None
            and self.center_of_gravity.status is not CoGStatus.OK
        )
        return bool(self.oog_warnings or self.pallet_warnings or cog_off)


def snapshot_key(pack: Pack, catalog: Catalog | Iterable[CatalogItem]) -> str:
    """Content hash of the inputs a LoadReport depends on.

    Covers the container, visible instance placements, and the names,
    dimensions, weights and pallet limits of referenced catalog items. Two
    snapshots with equal keys produce equal reports, so callers may cache
    on it.

    Args:
        pack: Pack snapshot.
        catalog: Catalog used to resolve instances.

    Returns:
        Hex SHA-256 digest.
    """
    pack, catalog = require_inputs(pack, catalog)
    container = pack.container

    payload: dict[str, Any] = {
        "container": {
            "envelope": list(container.envelope),
            "shape_mode": container.shape_mode.value,
            "shape_config": {k: repr(v) for k, v in container.shape_config.items()},
        },
        "instances": [],
    }
    for inst in pack.visible_instances():
        item = catalog.resolve(inst.catalog_item_id)
        entry: dict[str, Any] = {
            "id": inst.id,
            "position": [inst.position.x, inst.position.y, inst.position.z],
            "item": None,
        }
        if item is not None:
            entry["item"] = {
                "id": item.id,
                "name": item.name,
                "dimensions": [
                    item.dimensions.length,
                    item.dimensions.width,
                    item.dimensions.height,
                ],
                "weight_lb": item.weight_lb,
                "is_pallet": item.is_pallet,
                "max_pallet_weight_lb": item.max_pallet_weight_lb,
            }
        payload["instances"].append(entry)

    encoded = json.dumps(payload, sort_keys=True, separators=(",", ":"), default=repr)
    return hashlib.sha256(encoded.encode("utf-8")).hexdigest()


class LoadAnalysisService:
    """Facade over the zone, stats, CoG, gauge and pallet services.

    Example:
        service = LoadAnalysisService()
        report = service.analyze(pack, catalog)

        if report.has_issues:
            for warning in report.oog_warnings:
                print(warning.instance_id, warning.sorted_issues)
    """

    def __init__(
        self,
        zone_decomposer: ZoneDecomposer | None = None,
        stats_calculator: PackStatsCalculator | None = None,
        cog_analyzer: CenterOfGravityAnalyzer | None = None,
        oog_detector: OutOfGaugeDetector | None = None,
        pallet_validator: PalletLoadValidator | None = None,
    ) -> None:
        self.zone_decomposer = zone_decomposer or ZoneDecomposer()
        self.stats_calculator = stats_calculator or PackStatsCalculator()
        self.cog_analyzer = cog_analyzer or CenterOfGravityAnalyzer()
        self.oog_detector = oog_detector or OutOfGaugeDetector()
        self.pallet_validator = pallet_validator or PalletLoadValidator()

    def analyze(
        self, pack: Pack, catalog: Catalog | Iterable[CatalogItem]
    ) -> LoadReport:
        """Run every check against one pack snapshot.

        Args:
            pack: Pack snapshot to analyze.
            catalog: Catalog used to resolve instances.

        Returns:
            LoadReport bundling all derived outputs.

        Raises:
            ValueError: If pack or catalog is None.
        """
        pack, catalog = require_inputs(pack, catalog)

        zones = self.zone_decomposer.decompose(pack.container)
        report = LoadReport(
            stats=self.stats_calculator.compute(pack, catalog, zones=zones),
            center_of_gravity=self.cog_analyzer.analyze(pack, catalog),
            oog_warnings=self.oog_detector.detect(pack, catalog),
            pallet_warnings=self.pallet_validator.validate(pack, catalog),
            zones=zones,
            snapshot_key=snapshot_key(pack, catalog),
        )
        logger.debug(
            f"Analyzed pack: {len(report.oog_warnings)} OOG, "
            f"{len(report.pallet_warnings)} pallet warning(s)"
        )
        return report


__all__ = ["LoadAnalysisService", "LoadReport", "snapshot_key"]
