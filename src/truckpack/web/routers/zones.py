"""Zone decomposition endpoints."""

from fastapi import APIRouter

from truckpack.application.config import config_to_container
from truckpack.domain.services import compute_capacity, decompose_zones
from truckpack.infrastructure import JsonExporter
from truckpack.web.dependencies import PresetManagerDep
from truckpack.web.schemas.requests import ZonesRequest
from truckpack.web.schemas.responses import (
    ErrorResponseSchema,
    ZoneListSchema,
    ZoneSchema,
)

router = APIRouter(prefix="/zones", tags=["zones"])


@router.post(
    "",
    response_model=ZoneListSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def list_zones(
    request: ZonesRequest,
    presets: PresetManagerDep,
) -> ZoneListSchema:
    """Decompose a container into its usable zones.

    Args:
        request: Container and optional preset.
        presets: Injected PresetManager.

    Returns:
        Shape mode, usable capacity and the zone boxes.
    """
    container = config_to_container(request.container, request.preset, presets)
    zones = decompose_zones(container)
    return ZoneListSchema(
        shape_mode=container.shape_mode.value,
        capacity_in3=compute_capacity(container),
        zones=[
            ZoneSchema.model_validate(zone)
            for zone in JsonExporter().zones_to_list(zones)
        ],
    )
