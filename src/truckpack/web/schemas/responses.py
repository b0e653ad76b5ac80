"""Pydantic response schemas for the REST API."""

from pydantic import BaseModel, Field


class PositionSchema(BaseModel):
    """Point in container space, inches."""

    x: float
    y: float
    z: float


class ZoneSchema(BaseModel):
    """Usable axis-aligned zone."""

    min: PositionSchema = Field(..., description="Minimum corner")
    max: PositionSchema = Field(..., description="Maximum corner")
    volume_in3: float = Field(..., description="Zone volume in cubic inches")


class PackStatsSchema(BaseModel):
    """Aggregate packing statistics."""

    total_count: int = Field(..., description="Visible instances")
    packed_count: int = Field(..., description="Instances inside a usable zone")
    used_volume_in3: float = Field(..., description="Packed volume in cubic inches")
    used_volume_percent: float = Field(..., description="Packed volume percentage")
    total_weight_lb: float = Field(..., description="Packed weight in pounds")
    capacity_in3: float = Field(..., description="Usable capacity in cubic inches")


class DeviationSchema(BaseModel):
    """Center of gravity deviation percentages."""

    x: float = Field(..., description="Longitudinal deviation percent")
    z: float = Field(..., description="Lateral deviation percent")


class CoGSchema(BaseModel):
    """Center of gravity result."""

    position: PositionSchema
    deviation_percent: DeviationSchema
    total_weight_lb: float
    within_tolerance: bool
    status: str = Field(..., description="ok, warning or critical")


class OOGWarningSchema(BaseModel):
    """Out-of-gauge instance."""

    instance_id: str
    catalog_item_id: str
    item_name: str = ""
    issues: list[str] = Field(..., description="Violated container boundaries")


class PalletWarningSchema(BaseModel):
    """Overloaded pallet."""

    pallet_instance_id: str
    pallet_name: str = ""
    max_weight_lb: float
    actual_weight_lb: float
    overload_percent: float
    loaded_instance_ids: list[str] = Field(default_factory=list)


class LoadReportSchema(BaseModel):
    """Response for pack analysis."""

    snapshot_key: str = Field(..., description="Content hash of the analyzed inputs")
    stats: PackStatsSchema
    center_of_gravity: CoGSchema | None = None
    oog_warnings: list[OOGWarningSchema] = Field(default_factory=list)
    pallet_warnings: list[PalletWarningSchema] = Field(default_factory=list)
    zones: list[ZoneSchema] = Field(default_factory=list)


class ZoneListSchema(BaseModel):
    """Response for zone decomposition."""

    shape_mode: str
    capacity_in3: float
    zones: list[ZoneSchema] = Field(default_factory=list)


class PresetSchema(BaseModel):
    """Trailer preset."""

    id: str
    label: str
    length: float
    width: float
    height: float
    shape_mode: str
    tags: list[str] = Field(default_factory=list)


class PresetListSchema(BaseModel):
    """Response for listing presets."""

    presets: list[PresetSchema] = Field(default_factory=list)


class ErrorResponseSchema(BaseModel):
    """Error response body."""

    error: str
    error_type: str
    details: list[dict] | None = None
