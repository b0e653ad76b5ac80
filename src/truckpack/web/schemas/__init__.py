"""Pydantic schemas for the REST API."""

from truckpack.web.schemas.requests import ZonesRequest
from truckpack.web.schemas.responses import (
    CoGSchema,
    DeviationSchema,
    ErrorResponseSchema,
    LoadReportSchema,
    OOGWarningSchema,
    PackStatsSchema,
    PalletWarningSchema,
    PositionSchema,
    PresetListSchema,
    PresetSchema,
    ZoneListSchema,
    ZoneSchema,
)

__all__ = [
    # Requests
    "ZonesRequest",
    # Responses
    "CoGSchema",
    "DeviationSchema",
    "ErrorResponseSchema",
    "LoadReportSchema",
    "OOGWarningSchema",
    "PackStatsSchema",
    "PalletWarningSchema",
    "PositionSchema",
    "PresetListSchema",
    "PresetSchema",
    "ZoneListSchema",
    "ZoneSchema",
]
