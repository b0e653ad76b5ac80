"""Container (truck) value objects."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class ShapeMode(str, Enum):
    """Interior shape of a cargo container.

    Attributes:
        RECT: Plain rectangular box.
        WHEEL_WELLS: Paired floor intrusions on both lateral sides over a
            longitudinal band.
        FRONT_BONUS: Raised or extended front section with its own
            cross-section.
    """

    RECT = "rect"
    WHEEL_WELLS = "wheelWells"
    FRONT_BONUS = "frontBonus"

    @classmethod
    def parse(cls, value: Any) -> "ShapeMode":
        """Resolve a raw shape mode value, falling back to RECT.

        Args:
            value: A ShapeMode, its string value, or anything else.

        Returns:
            The matching ShapeMode, or RECT for unrecognized input.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.RECT


def _finite_or_zero(value: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


@dataclass(frozen=True)
class Container:
    """A cargo container envelope in inches.

    Dimensions are deliberately not validated here: the zone and gauge
    services treat missing or invalid dimensions as an empty container.

    Attributes:
        length: Interior length along X.
        width: Interior width along Z (centered at 0).
        height: Interior height along Y (floor at 0).
        shape_mode: Interior shape variant.
        shape_config: Optional shape-specific overrides, e.g. ``wellHeight``
            or ``bonusLength``.
    """

    length: float
    width: float
    height: float
    shape_mode: ShapeMode = ShapeMode.RECT
    shape_config: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "shape_mode", ShapeMode.parse(self.shape_mode))
        # Freeze overrides so one computation pass sees a stable snapshot
        config = self.shape_config if isinstance(self.shape_config, Mapping) else {}
        object.__setattr__(self, "shape_config", MappingProxyType(dict(config)))

    @property
    def envelope(self) -> tuple[float, float, float]:
        """Raw (length, width, height); non-finite values read as 0."""
        return (
            _finite_or_zero(self.length),
            _finite_or_zero(self.width),
            _finite_or_zero(self.height),
        )

    @property
    def has_volume(self) -> bool:
        """True if every dimension is finite and positive."""
        return all(d > 0 for d in self.envelope)

    @property
    def envelope_volume_in3(self) -> float:
        """Raw box volume, ignoring the interior shape."""
        length, width, height = self.envelope
        if not self.has_volume:
            return 0.0
        return length * width * height
