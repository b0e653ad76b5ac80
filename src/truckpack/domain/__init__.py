"""Domain layer - geometric validation and load metrics."""

from .entities import Catalog, CatalogItem, Pack, PlacedInstance
from .services import (
    LoadAnalysisService,
    LoadReport,
    compute_capacity,
    compute_cog,
    compute_oog_warnings,
    compute_pallet_warnings,
    compute_stats,
    decompose_zones,
    is_contained,
)
from .value_objects import (
    AABB,
    CoGResult,
    CoGStatus,
    Container,
    Dimensions3,
    OOGIssue,
    OOGWarning,
    PackStats,
    PalletWarning,
    Position3,
    ShapeMode,
)

__all__ = [
    "AABB",
    "Catalog",
    "CatalogItem",
    "CoGResult",
    "CoGStatus",
    "Container",
    "Dimensions3",
    "LoadAnalysisService",
    "LoadReport",
    "OOGIssue",
    "OOGWarning",
    "Pack",
    "PackStats",
    "PalletWarning",
    "PlacedInstance",
    "Position3",
    "ShapeMode",
    "compute_capacity",
    "compute_cog",
    "compute_oog_warnings",
    "compute_pallet_warnings",
    "compute_stats",
    "decompose_zones",
    "is_contained",
]
