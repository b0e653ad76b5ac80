"""Usable-volume zone decomposition for container shapes.

A container's usable interior is described as a union of axis-aligned
zones. Each ShapeMode has its own decomposition strategy; the strategies
share one contract:

- Zones tile the interior with shared boundary faces and no overlap.
- Degenerate zones (any extent <= AABB_EPSILON) are dropped.
- An empty list is returned for a container without a positive, finite
  length, width and height.

Zone output feeds capacity, containment and every downstream percentage,
so all shape parameters are clamped into range before use.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from truckpack.domain.value_objects import AABB, Container, ShapeMode

from .constants import (
    FRONT_BONUS_HEIGHT_RATIO,
    FRONT_BONUS_LENGTH_RATIO,
    FRONT_BONUS_WIDTH_RATIO,
    WHEEL_WELL_HEIGHT_RATIO,
    WHEEL_WELL_LENGTH_RATIO,
    WHEEL_WELL_OFFSET_RATIO,
    WHEEL_WELL_WIDTH_RATIO,
)

logger = logging.getLogger(__name__)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _config_number(config: Mapping[str, Any], key: str) -> float | None:
    """Read a finite number from a shape config, or None if unusable.

    Numbers and numeric strings are accepted. Booleans, None, other
    strings and non-finite values are treated as absent.
    """
    raw = config.get(key)
    if raw is None or isinstance(raw, bool):
        return None
    try:
        number = float(raw)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _resolve(
    config: Mapping[str, Any], key: str, default: float, low: float, high: float
) -> float:
    """Configured value (or default) clamped into [low, high]."""
    number = _config_number(config, key)
    return _clamp(default if number is None else number, low, high)


@dataclass(frozen=True)
class FrontBonusParameters:
    """Resolved front bonus section, inches.

    Attributes:
        length: Bonus section length, measured back from the front wall.
        width: Bonus section width, centered on the container axis.
        height: Bonus section height from the floor.
    """

    length: float
    width: float
    height: float

    @classmethod
    def from_container(cls, container: Container) -> "FrontBonusParameters":
        length, width, height = container.envelope
        cfg = container.shape_config
        return cls(
            length=_resolve(
                cfg, "bonusLength", FRONT_BONUS_LENGTH_RATIO * length, 0.0, length
            ),
            width=_resolve(
                cfg, "bonusWidth", FRONT_BONUS_WIDTH_RATIO * width, 0.0, width
            ),
            height=_resolve(
                cfg, "bonusHeight", FRONT_BONUS_HEIGHT_RATIO * height, 0.0, height
            ),
        )


@dataclass(frozen=True)
class WheelWellParameters:
    """Resolved wheel well intrusion, inches.

    Attributes:
        height: Top of the wells above the floor.
        width: Lateral depth of each well from its side wall (<= width/2).
        length: Longitudinal extent of the well band.
        offset_from_rear: Start of the well band, measured from X = 0.
    """

    height: float
    width: float
    length: float
    offset_from_rear: float

    @classmethod
    def from_container(cls, container: Container) -> "WheelWellParameters":
        length, width, height = container.envelope
        cfg = container.shape_config
        return cls(
            height=_resolve(
                cfg, "wellHeight", WHEEL_WELL_HEIGHT_RATIO * height, 0.0, height
            ),
            width=_resolve(
                cfg, "wellWidth", WHEEL_WELL_WIDTH_RATIO * width, 0.0, width / 2
            ),
            length=_resolve(
                cfg, "wellLength", WHEEL_WELL_LENGTH_RATIO * length, 0.0, length
            ),
            offset_from_rear=_resolve(
                cfg,
                "wellOffsetFromRear",
                WHEEL_WELL_OFFSET_RATIO * length,
                0.0,
                length,
            ),
        )

    def band(self, container_length: float) -> tuple[float, float]:
        """Longitudinal (start, end) of the well band, clamped to the container."""
        start = self.offset_from_rear
        end = _clamp(start + self.length, start, container_length)
        return start, end


def _rect_zones(container: Container) -> list[AABB]:
    length, width, height = container.envelope
    return [AABB.from_bounds(0.0, 0.0, -width / 2, length, height, width / 2)]


def _front_bonus_zones(container: Container) -> list[AABB]:
    length, width, height = container.envelope
    bonus = FrontBonusParameters.from_container(container)
    split_x = length - bonus.length

    return [
        # Main body
        AABB.from_bounds(0.0, 0.0, -width / 2, split_x, height, width / 2),
        # Front bonus section
        AABB.from_bounds(
            split_x, 0.0, -bonus.width / 2, length, bonus.height, bonus.width / 2
        ),
    ]


def _wheel_well_zones(container: Container) -> list[AABB]:
    length, width, height = container.envelope
    wells = WheelWellParameters.from_container(container)
    wx0, wx1 = wells.band(length)
    half_w = width / 2
    corridor_half_w = max(0.0, half_w - wells.width)

    return [
        # Before the well band, full cross-section
        AABB.from_bounds(0.0, 0.0, -half_w, wx0, height, half_w),
        # Clear corridor between the wells, floor to ceiling
        AABB.from_bounds(wx0, 0.0, -corridor_half_w, wx1, height, corridor_half_w),
        # Above the left well, outside the corridor
        AABB.from_bounds(wx0, wells.height, -half_w, wx1, height, -corridor_half_w),
        # Above the right well, outside the corridor
        AABB.from_bounds(wx0, wells.height, corridor_half_w, wx1, height, half_w),
        # After the well band, full cross-section
        AABB.from_bounds(wx1, 0.0, -half_w, length, height, half_w),
    ]


ZoneStrategy = Callable[[Container], list[AABB]]

# One strategy per ShapeMode member
ZONE_STRATEGIES: Mapping[ShapeMode, ZoneStrategy] = {
    ShapeMode.RECT: _rect_zones,
    ShapeMode.FRONT_BONUS: _front_bonus_zones,
    ShapeMode.WHEEL_WELLS: _wheel_well_zones,
}


def sanitize_zones(zones: list[AABB]) -> list[AABB]:
    """Drop degenerate or inverted zones, keeping order."""
    return [zone for zone in zones if zone.is_valid]


def decompose_zones(container: Container) -> list[AABB]:
    """Decompose a container into its usable axis-aligned zones.

    Args:
        container: Container to decompose.

    Returns:
        Non-degenerate zones in inches. Empty if the container has no
        positive, finite volume.
    """
    if not container.has_volume:
        logger.debug(f"Container {container.envelope} has no volume; no zones")
        return []

    strategy = ZONE_STRATEGIES[container.shape_mode]
    zones = sanitize_zones(strategy(container))
    logger.debug(
        f"Decomposed {container.shape_mode.value} container into {len(zones)} zone(s)"
    )
    return zones


class ZoneDecomposer:
    """Service wrapper around ``decompose_zones``.

    Example:
        zones = ZoneDecomposer().decompose(container)
    """

    def decompose(self, container: Container) -> list[AABB]:
        """Decompose a container into usable zones. See ``decompose_zones``."""
        return decompose_zones(container)


__all__ = [
    "FrontBonusParameters",
    "WheelWellParameters",
    "ZONE_STRATEGIES",
    "ZoneDecomposer",
    "decompose_zones",
    "sanitize_zones",
]
