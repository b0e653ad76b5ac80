"""Trailer preset endpoints."""

from fastapi import APIRouter

from truckpack.application.presets import TrailerPreset
from truckpack.web.dependencies import PresetManagerDep
from truckpack.web.schemas.responses import (
    ErrorResponseSchema,
    PresetListSchema,
    PresetSchema,
)

router = APIRouter(prefix="/presets", tags=["presets"])


def _preset_to_schema(preset: TrailerPreset) -> PresetSchema:
    return PresetSchema(
        id=preset.id,
        label=preset.label,
        length=preset.length,
        width=preset.width,
        height=preset.height,
        shape_mode=preset.shape_mode.value,
        tags=list(preset.tags),
    )


@router.get("", response_model=PresetListSchema)
async def list_presets(manager: PresetManagerDep) -> PresetListSchema:
    """List all bundled trailer presets."""
    return PresetListSchema(
        presets=[_preset_to_schema(p) for p in manager.list_presets()]
    )


@router.get(
    "/{preset_id}",
    response_model=PresetSchema,
    responses={404: {"model": ErrorResponseSchema}},
)
async def get_preset(preset_id: str, manager: PresetManagerDep) -> PresetSchema:
    """Get a single trailer preset.

    Raises:
        PresetNotFoundError: If the preset does not exist (handled by exception handler).
    """
    return _preset_to_schema(manager.get_preset(preset_id))
