"""Thresholds and default proportions used by the load analysis services.

These are fixed engine constants, not caller configuration.
"""

from __future__ import annotations

# ==============================================================================
# Front bonus defaults (fractions of the container dimension)
# ==============================================================================

FRONT_BONUS_LENGTH_RATIO: float = 0.12
FRONT_BONUS_WIDTH_RATIO: float = 1.0
FRONT_BONUS_HEIGHT_RATIO: float = 1.0


# ==============================================================================
# Wheel well defaults (fractions of the container dimension)
# ==============================================================================

WHEEL_WELL_HEIGHT_RATIO: float = 0.35
WHEEL_WELL_WIDTH_RATIO: float = 0.15
WHEEL_WELL_LENGTH_RATIO: float = 0.35
WHEEL_WELL_OFFSET_RATIO: float = 0.25


# ==============================================================================
# Center of gravity
# ==============================================================================

# Max |deviation| (percent) on both axes for a balanced load
COG_TOLERANCE_PERCENT: float = 10.0

# Max |deviation| (percent) on both axes before a load is critical
COG_WARNING_PERCENT: float = 15.0


# ==============================================================================
# Pallet loading
# ==============================================================================

# Fraction of the half-extent sum two centers must be within to overlap
PALLET_FOOTPRINT_OVERLAP_FACTOR: float = 0.8


__all__ = [
    "COG_TOLERANCE_PERCENT",
    "COG_WARNING_PERCENT",
    "FRONT_BONUS_HEIGHT_RATIO",
    "FRONT_BONUS_LENGTH_RATIO",
    "FRONT_BONUS_WIDTH_RATIO",
    "PALLET_FOOTPRINT_OVERLAP_FACTOR",
    "WHEEL_WELL_HEIGHT_RATIO",
    "WHEEL_WELL_LENGTH_RATIO",
    "WHEEL_WELL_OFFSET_RATIO",
    "WHEEL_WELL_WIDTH_RATIO",
]
