"""Domain services for cargo load validation and metrics.

Every service is a pure function of (container, instances, catalog):
- Zone decomposition of container shapes into usable volumes
- Capacity, containment and aggregate pack statistics
- Center of gravity and balance classification
- Out-of-gauge detection against the raw container envelope
- Pallet overload validation
- LoadAnalysisService facade running all of the above on one snapshot
"""

from .center_of_gravity import (
    CenterOfGravityAnalyzer,
    classify_deviation,
    compute_cog,
)
from .constants import (
    COG_TOLERANCE_PERCENT,
    COG_WARNING_PERCENT,
    PALLET_FOOTPRINT_OVERLAP_FACTOR,
)
from .load_analysis import LoadAnalysisService, LoadReport, snapshot_key
from .out_of_gauge import OutOfGaugeDetector, compute_oog_warnings, find_oog_issues
from .pack_stats import (
    PackStatsCalculator,
    compute_capacity,
    compute_stats,
    is_contained,
)
from .pallet_load import PalletLoadValidator, compute_pallet_warnings, rests_on_pallet
from .zones import (
    FrontBonusParameters,
    WheelWellParameters,
    ZoneDecomposer,
    decompose_zones,
)

__all__ = [
    "COG_TOLERANCE_PERCENT",
    "COG_WARNING_PERCENT",
    "CenterOfGravityAnalyzer",
    "FrontBonusParameters",
    "LoadAnalysisService",
    "LoadReport",
    "OutOfGaugeDetector",
    "PALLET_FOOTPRINT_OVERLAP_FACTOR",
    "PackStatsCalculator",
    "PalletLoadValidator",
    "WheelWellParameters",
    "ZoneDecomposer",
    "classify_deviation",
    "compute_capacity",
    "compute_cog",
    "compute_oog_warnings",
    "compute_pallet_warnings",
    "compute_stats",
    "decompose_zones",
    "find_oog_issues",
    "is_contained",
    "rests_on_pallet",
    "snapshot_key",
]
