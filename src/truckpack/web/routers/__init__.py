"""API routers for the REST API."""

from truckpack.web.routers.analyze import router as analyze_router
from truckpack.web.routers.presets import router as presets_router
from truckpack.web.routers.zones import router as zones_router

__all__ = [
    "analyze_router",
    "presets_router",
    "zones_router",
]
