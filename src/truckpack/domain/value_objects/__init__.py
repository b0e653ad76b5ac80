"""Value objects for the cargo-loading domain.

This module provides immutable data types used throughout the engine.
All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Core geometry
from ._geometry import (
    AABB,
    AABB_EPSILON,
    Dimensions3,
    Position3,
)

# Container envelope and interior shape
from ._container import (
    Container,
    ShapeMode,
)

# Derived analysis results
from ._results import (
    CoGDeviation,
    CoGResult,
    CoGStatus,
    OOGIssue,
    OOGWarning,
    PackStats,
    PalletWarning,
)

__all__ = [
    "AABB",
    "AABB_EPSILON",
    "CoGDeviation",
    "CoGResult",
    "CoGStatus",
    "Container",
    "Dimensions3",
    "OOGIssue",
    "OOGWarning",
    "PackStats",
    "PalletWarning",
    "Position3",
    "ShapeMode",
]
