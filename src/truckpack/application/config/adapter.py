"""Conversion from pack documents to domain entities.

This module turns a validated PackDocument into the Container, Catalog and
Pack objects the domain services consume.
"""

from truckpack.application.config.loader import ConfigError
from truckpack.application.config.schema import (
    CatalogItemConfig,
    ContainerConfig,
    InstanceConfig,
    PackDocument,
)
from truckpack.application.presets import PresetManager, PresetNotFoundError
from truckpack.domain.entities import Catalog, CatalogItem, Pack, PlacedInstance
from truckpack.domain.value_objects import Container, Dimensions3, Position3


def config_to_container(
    config: ContainerConfig | None,
    preset: str | None = None,
    presets: PresetManager | None = None,
) -> Container:
    """Build the domain Container for a document.

    With a preset, the preset's envelope and shape mode are applied over
    the configured container (shape overrides are kept). With neither a
    container nor a preset, the default trailer is used.

    Raises:
        ConfigError: If the preset is unknown.
    """
    presets = presets or PresetManager()

    container: Container | None = None
    if config is not None:
        container = Container(
            length=config.length,
            width=config.width,
            height=config.height,
            shape_mode=config.shape_mode,
            shape_config=config.shape_config,
        )

    if preset is None:
        return container or presets.default_container()

    try:
        return presets.apply(preset, container)
    except PresetNotFoundError as e:
        available = ", ".join(p.id for p in presets.list_presets())
        raise ConfigError(
            message=f"Unknown preset '{e.name}'. Available: {available}",
            error_type="unknown_preset",
            details=[{"path": "preset", "message": "unknown preset", "value": e.name}],
        ) from e


def config_to_catalog_item(config: CatalogItemConfig) -> CatalogItem:
    dims = config.dimensions
    return CatalogItem(
        id=config.id,
        name=config.name,
        dimensions=Dimensions3(dims.length, dims.width, dims.height),
        weight_lb=config.weight,
        is_pallet=config.is_pallet,
        max_pallet_weight_lb=config.max_pallet_weight,
    )


def config_to_instance(config: InstanceConfig) -> PlacedInstance:
    pos = config.position
    return PlacedInstance(
        id=config.id,
        catalog_item_id=config.catalog_item_id,
        position=Position3(pos.x, pos.y, pos.z),
        hidden=config.hidden,
    )


def config_to_catalog(document: PackDocument) -> Catalog:
    """Build the read-only Catalog for a document."""
    return Catalog(config_to_catalog_item(item) for item in document.catalog)


def config_to_pack(
    document: PackDocument, presets: PresetManager | None = None
) -> Pack:
    """Build the domain Pack for a document.

    Instances referencing unknown catalog items are kept: the services
    treat them as contributing nothing.

    Raises:
        ConfigError: If the document names an unknown preset.
    """
    container = config_to_container(document.container, document.preset, presets)
    return Pack(
        container=container,
        instances=tuple(config_to_instance(inst) for inst in document.instances),
    )
