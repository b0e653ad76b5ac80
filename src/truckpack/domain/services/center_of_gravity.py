"""Center of gravity analysis for a pack's load.

The center of gravity is the weight-weighted centroid of instance centers.
Deviation is reported against the container midpoint along X and the
centerline along Z (containers are assumed laterally symmetric about
z = 0), and classified against fixed tolerance bands.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable

from truckpack.domain.entities import Catalog, CatalogItem, Pack
from truckpack.domain.value_objects import (
    CoGDeviation,
    CoGResult,
    CoGStatus,
    Container,
    Position3,
)

from ._inputs import require_inputs
from .constants import COG_TOLERANCE_PERCENT, COG_WARNING_PERCENT

logger = logging.getLogger(__name__)


def classify_deviation(deviation_x: float, deviation_z: float) -> tuple[bool, CoGStatus]:
    """Classify a CoG deviation pair.

    Args:
        deviation_x: Longitudinal deviation percent.
        deviation_z: Lateral deviation percent.

    Returns:
        (within_tolerance, status). OK when both |deviations| are within
        COG_TOLERANCE_PERCENT, WARNING when both are within
        COG_WARNING_PERCENT, CRITICAL otherwise.
    """
    abs_x = abs(deviation_x)
    abs_z = abs(deviation_z)
    within_tolerance = abs_x <= COG_TOLERANCE_PERCENT and abs_z <= COG_TOLERANCE_PERCENT
    if within_tolerance:
        return True, CoGStatus.OK
    if abs_x <= COG_WARNING_PERCENT and abs_z <= COG_WARNING_PERCENT:
        return False, CoGStatus.WARNING
    return False, CoGStatus.CRITICAL


def _deviation(container: Container, cog: Position3) -> CoGDeviation:
    """Percent offset of the CoG from the container's geometric center.

    An axis whose container extent is zero or negative (length for X,
    width for Z) reports 0% deviation, so it can never push the status
    to warning or critical.
    """
    length, width, _ = container.envelope
    deviation_x = ((cog.x - length / 2) / length) * 100 if length > 0 else 0.0
    deviation_z = (cog.z / (width / 2)) * 100 if width > 0 else 0.0
    return CoGDeviation(x=deviation_x, z=deviation_z)


class CenterOfGravityAnalyzer:
    """Computes the weighted center of gravity of a pack.

    Hidden instances, dangling catalog references and items with a weight
    of zero or less contribute nothing. A container length of zero or less
    yields 0% longitudinal deviation, and a width of zero or less yields 0%
    lateral deviation.

    Example:
        result = CenterOfGravityAnalyzer().analyze(pack, catalog)
        if result is not None and result.status is CoGStatus.CRITICAL:
            ...
    """

    def analyze(
        self, pack: Pack, catalog: Catalog | Iterable[CatalogItem]
    ) -> CoGResult | None:
        """Compute the load's center of gravity.

        Args:
            pack: Pack snapshot to analyze.
            catalog: Catalog used to resolve weights.

        Returns:
            CoGResult, or None if no instance carries positive weight.

        Raises:
            ValueError: If pack or catalog is None.
        """
        pack, catalog = require_inputs(pack, catalog)

        weights: list[float] = []
        moments_x: list[float] = []
        moments_y: list[float] = []
        moments_z: list[float] = []
        for inst, item in pack.resolved_instances(catalog):
            weight = item.weight_lb
            if not weight > 0:
                continue
            weights.append(weight)
            moments_x.append(inst.position.x * weight)
            moments_y.append(inst.position.y * weight)
            moments_z.append(inst.position.z * weight)

        # fsum keeps the result independent of instance order
        total_weight = math.fsum(weights)
        if total_weight <= 0:
            return None

        cog = Position3(
            x=math.fsum(moments_x) / total_weight,
            y=math.fsum(moments_y) / total_weight,
            z=math.fsum(moments_z) / total_weight,
        )
        deviation = _deviation(pack.container, cog)
        within_tolerance, status = classify_deviation(deviation.x, deviation.z)
        logger.debug(
            f"CoG at ({cog.x:.1f}, {cog.y:.1f}, {cog.z:.1f}) over "
            f"{total_weight:.1f} lb: {status.value}"
        )
        return CoGResult(
            position=cog,
            deviation_percent=deviation,
            total_weight_lb=total_weight,
            within_tolerance=within_tolerance,
            status=status,
        )


def compute_cog(
    pack: Pack, catalog: Catalog | Iterable[CatalogItem]
) -> CoGResult | None:
    """Compute a pack's center of gravity. See ``CenterOfGravityAnalyzer``."""
    return CenterOfGravityAnalyzer().analyze(pack, catalog)


__all__ = ["CenterOfGravityAnalyzer", "classify_deviation", "compute_cog"]
