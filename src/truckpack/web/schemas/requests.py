"""Pydantic request schemas for the REST API."""

from pydantic import BaseModel, Field

from truckpack.application.config import ContainerConfig


class ZonesRequest(BaseModel):
    """Request for decomposing a container into usable zones."""

    container: ContainerConfig | None = Field(
        default=None, description="Container envelope and shape"
    )
    preset: str | None = Field(
        default=None, description="Trailer preset applied over the container"
    )
