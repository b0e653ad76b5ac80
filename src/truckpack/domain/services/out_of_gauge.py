"""Out-of-gauge (OOG) detection against the raw container envelope.

This check ignores the interior zone decomposition: an item sitting inside
a wheel well intrusion is in gauge, even though it is not contained by any
usable zone.
"""

from __future__ import annotations

import logging
from typing import Iterable

from truckpack.domain.entities import Catalog, CatalogItem, Pack
from truckpack.domain.value_objects import AABB, Container, OOGIssue, OOGWarning

from ._inputs import require_inputs

logger = logging.getLogger(__name__)


def find_oog_issues(box: AABB, container: Container) -> frozenset[OOGIssue]:
    """Boundary violations of a world box against a container envelope.

    Each face is tested independently with a strict comparison, so a box
    exactly touching a face is not flagged on that face.

    Args:
        box: Item box in container space.
        container: Container whose raw envelope is checked.

    Returns:
        Every violated boundary; empty if the box is in gauge.
    """
    length, width, height = container.envelope
    half_width = width / 2

    issues: set[OOGIssue] = set()

    # X bounds (length)
    if box.min.x < 0:
        issues.add(OOGIssue.PROTRUDES_REAR)
    if box.max.x > length:
        issues.add(OOGIssue.PROTRUDES_FRONT)

    # Y bounds (height)
    if box.min.y < 0:
        issues.add(OOGIssue.BELOW_FLOOR)
    if box.max.y > height:
        issues.add(OOGIssue.EXCEEDS_HEIGHT)

    # Z bounds (width, centered at 0)
    if box.min.z < -half_width:
        issues.add(OOGIssue.PROTRUDES_LEFT)
    if box.max.z > half_width:
        issues.add(OOGIssue.PROTRUDES_RIGHT)

    return frozenset(issues)


class OutOfGaugeDetector:
    """Flags placed instances that extend beyond the container envelope.

    Example:
        for warning in OutOfGaugeDetector().detect(pack, catalog):
            print(warning.instance_id, warning.sorted_issues)
    """

    def detect(
        self, pack: Pack, catalog: Catalog | Iterable[CatalogItem]
    ) -> list[OOGWarning]:
        """Compute OOG warnings for a pack.

        Args:
            pack: Pack snapshot to check.
            catalog: Catalog used to resolve item dimensions.

        Returns:
            One warning per out-of-gauge instance, in pack order.
            In-gauge instances are omitted.

        Raises:
            ValueError: If pack or catalog is None.
        """
        pack, catalog = require_inputs(pack, catalog)
        warnings: list[OOGWarning] = []

        for inst, item in pack.resolved_instances(catalog):
            issues = find_oog_issues(inst.world_box(item), pack.container)
            if not issues:
                continue
            warnings.append(
                OOGWarning(
                    instance_id=inst.id,
                    catalog_item_id=inst.catalog_item_id,
                    issues=issues,
                    item_name=item.name,
                )
            )

        if warnings:
            logger.debug(f"{len(warnings)} instance(s) out of gauge")
        return warnings


def compute_oog_warnings(
    pack: Pack, catalog: Catalog | Iterable[CatalogItem]
) -> list[OOGWarning]:
    """Compute out-of-gauge warnings. See ``OutOfGaugeDetector``."""
    return OutOfGaugeDetector().detect(pack, catalog)


__all__ = ["OutOfGaugeDetector", "compute_oog_warnings", "find_oog_issues"]
