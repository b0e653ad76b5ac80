"""Pack document schema.

A pack document bundles everything one analysis needs: the container (or a
trailer preset), the catalog items it references, and the placed instances.

Container dimensions and shape mode are intentionally loose here. The engine
treats invalid dimensions as an empty container and unknown shape modes as
rect, so rejecting them at this boundary would hide that behavior.
"""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

# Supported schema versions for pack documents
# Version 1.0: Container, preset, catalog and instances
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class DimensionsConfig(BaseModel):
    """Item dimensions in inches."""

    model_config = ConfigDict(extra="forbid")

    length: float = Field(..., gt=0, description="Extent along X in inches")
    width: float = Field(..., gt=0, description="Extent along Z in inches")
    height: float = Field(..., gt=0, description="Extent along Y in inches")


class PositionConfig(BaseModel):
    """Box center in container space, inches."""

    model_config = ConfigDict(extra="forbid")

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class ContainerConfig(BaseModel):
    """Container envelope and interior shape.

    Attributes:
        length: Interior length in inches.
        width: Interior width in inches.
        height: Interior height in inches.
        shape_mode: One of rect, wheelWells, frontBonus; anything else is
            analyzed as rect.
        shape_config: Shape overrides such as wellHeight or bonusLength.
    """

    model_config = ConfigDict(extra="forbid")

    length: float = Field(default=636.0, description="Interior length in inches")
    width: float = Field(default=102.0, description="Interior width in inches")
    height: float = Field(default=98.0, description="Interior height in inches")
    shape_mode: str = Field(default="rect", description="Interior shape mode")
    shape_config: dict[str, Any] = Field(
        default_factory=dict, description="Shape-specific overrides"
    )


class CatalogItemConfig(BaseModel):
    """Catalog item definition.

    Attributes:
        id: Identifier referenced by instances.
        name: Display name.
        dimensions: Item size in inches.
        weight: Weight in pounds.
        is_pallet: True if items can be stacked on it.
        max_pallet_weight: Rated stacked load in pounds; 0 means unlimited.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str = ""
    dimensions: DimensionsConfig
    weight: float = Field(default=0.0, ge=0, description="Weight in pounds")
    is_pallet: bool = False
    max_pallet_weight: float = Field(
        default=0.0, ge=0, description="Max stacked load in pounds (0 = unlimited)"
    )


class InstanceConfig(BaseModel):
    """A placed catalog item."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    catalog_item_id: str = Field(..., min_length=1)
    position: PositionConfig = Field(default_factory=PositionConfig)
    hidden: bool = False


class PackDocument(BaseModel):
    """Root model for a pack analysis document.

    Example:
        >>> doc = PackDocument(
        ...     container=ContainerConfig(length=636, width=102, height=98),
        ...     catalog=[],
        ...     instances=[],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    container: ContainerConfig | None = None
    preset: str | None = Field(
        default=None, description="Trailer preset applied over the container"
    )
    catalog: list[CatalogItemConfig] = Field(default_factory=list)
    instances: list[InstanceConfig] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        """Ensure the schema version is supported."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "PackDocument":
        """Reject duplicate catalog ids and duplicate instance ids."""
        seen: set[str] = set()
        for item in self.catalog:
            if item.id in seen:
                raise ValueError(f"Duplicate catalog item id '{item.id}'")
            seen.add(item.id)

        seen = set()
        for inst in self.instances:
            if inst.id in seen:
                raise ValueError(f"Duplicate instance id '{inst.id}'")
            seen.add(inst.id)
        return self
