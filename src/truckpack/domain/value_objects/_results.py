"""Derived analysis results.

Every result here is regenerable from (container, instances, catalog) and is
never the source of truth for a pack.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ._geometry import Position3


@dataclass(frozen=True)
class PackStats:
    """Aggregate packing statistics for one pack.

    Attributes:
        total_count: Non-hidden instances, packed or not.
        packed_count: Instances fully inside a single usable zone.
        used_volume_in3: Summed volume of packed instances.
        used_volume_percent: used_volume_in3 as a percentage of capacity.
        total_weight_lb: Summed weight of packed instances.
        capacity_in3: Usable capacity the percentage was computed against.
    """

    total_count: int = 0
    packed_count: int = 0
    used_volume_in3: float = 0.0
    used_volume_percent: float = 0.0
    total_weight_lb: float = 0.0
    capacity_in3: float = 0.0

    @property
    def unpacked_count(self) -> int:
        return self.total_count - self.packed_count


class CoGStatus(str, Enum):
    """Balance classification of a load's center of gravity."""

    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass(frozen=True)
class CoGDeviation:
    """Center-of-gravity deviation as percentages.

    Attributes:
        x: Longitudinal deviation from the container midpoint, as a
            percentage of container length.
        z: Lateral deviation from the centerline, as a percentage of
            half the container width.
    """

    x: float
    z: float


@dataclass(frozen=True)
class CoGResult:
    """Weighted centroid of a load and its balance classification."""

    position: Position3
    deviation_percent: CoGDeviation
    total_weight_lb: float
    within_tolerance: bool
    status: CoGStatus


class OOGIssue(str, Enum):
    """Container face an item protrudes through."""

    PROTRUDES_REAR = "protrudesRear"
    PROTRUDES_FRONT = "protrudesFront"
    BELOW_FLOOR = "belowFloor"
    EXCEEDS_HEIGHT = "exceedsHeight"
    PROTRUDES_LEFT = "protrudesLeft"
    PROTRUDES_RIGHT = "protrudesRight"


@dataclass(frozen=True)
class OOGWarning:
    """Out-of-gauge report for one placed instance.

    Attributes:
        instance_id: Offending placed instance.
        catalog_item_id: Catalog item the instance refers to.
        issues: Every boundary the instance violates (never empty).
        item_name: Display name of the catalog item.
    """

    instance_id: str
    catalog_item_id: str
    issues: frozenset[OOGIssue]
    item_name: str = ""

    def __post_init__(self) -> None:
        if not self.issues:
            raise ValueError("OOGWarning requires at least one issue")

    @property
    def sorted_issues(self) -> list[OOGIssue]:
        """Issues in declaration order, for stable display."""
        return [issue for issue in OOGIssue if issue in self.issues]


@dataclass(frozen=True)
class PalletWarning:
    """Overloaded pallet report.

    Attributes:
        pallet_instance_id: The overloaded pallet instance.
        max_weight_lb: Pallet's rated maximum load.
        actual_weight_lb: Weight of everything counted as stacked on it.
        overload_percent: Excess as a percentage of max_weight_lb.
        loaded_instance_ids: Instances counted as load, in pack order.
        pallet_name: Display name of the pallet catalog item.
    """

    pallet_instance_id: str
    max_weight_lb: float
    actual_weight_lb: float
    overload_percent: float
    loaded_instance_ids: tuple[str, ...] = field(default_factory=tuple)
    pallet_name: str = ""
