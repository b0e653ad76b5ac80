"""Pack document schema and loading.

This package provides JSON-based loading and validation of pack documents
(container, catalog and placed instances) and their conversion into domain
entities.

Public API:
    - PackDocument: Root document model
    - ContainerConfig, CatalogItemConfig, InstanceConfig: Document sections
    - load_pack_document: Load a document from a JSON file
    - load_pack_document_from_dict: Validate already-parsed data
    - ConfigError: Exception for loading and validation errors
    - config_to_pack, config_to_catalog, config_to_container: Domain adapters

Example:
    >>> from pathlib import Path
    >>> from truckpack.application.config import load_pack_document, ConfigError
    >>>
    >>> try:
    ...     doc = load_pack_document(Path("pack.json"))
    ...     print(f"{len(doc.instances)} instances")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from truckpack.application.config.adapter import (
    config_to_catalog,
    config_to_catalog_item,
    config_to_container,
    config_to_instance,
    config_to_pack,
)
from truckpack.application.config.loader import (
    ConfigError,
    load_pack_document,
    load_pack_document_from_dict,
)
from truckpack.application.config.schema import (
    SUPPORTED_VERSIONS,
    CatalogItemConfig,
    ContainerConfig,
    DimensionsConfig,
    InstanceConfig,
    PackDocument,
    PositionConfig,
)

__all__ = [
    "CatalogItemConfig",
    "ConfigError",
    "ContainerConfig",
    "DimensionsConfig",
    "InstanceConfig",
    "PackDocument",
    "PositionConfig",
    "SUPPORTED_VERSIONS",
    "config_to_catalog",
    "config_to_catalog_item",
    "config_to_container",
    "config_to_instance",
    "config_to_pack",
    "load_pack_document",
    "load_pack_document_from_dict",
]
