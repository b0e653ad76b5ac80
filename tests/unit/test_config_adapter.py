"""Unit tests for converting pack documents into domain entities."""

import pytest

from truckpack.application.config import (
    CatalogItemConfig,
    ConfigError,
    ContainerConfig,
    PackDocument,
    config_to_catalog,
    config_to_catalog_item,
    config_to_container,
    config_to_pack,
)
from truckpack.domain import Dimensions3, Position3, ShapeMode


class TestConfigToContainer:
    """Tests for container resolution."""

    def test_explicit_container(self) -> None:
        config = ContainerConfig(
            length=480, width=100, height=90,
            shape_mode="wheelWells", shape_config={"wellHeight": 20},
        )

        container = config_to_container(config)

        assert container.envelope == (480, 100, 90)
        assert container.shape_mode is ShapeMode.WHEEL_WELLS
        assert container.shape_config["wellHeight"] == 20

    def test_no_container_uses_default_preset(self) -> None:
        container = config_to_container(None)

        assert container.envelope == (636, 102, 98)
        assert container.shape_mode is ShapeMode.RECT

    def test_preset_replaces_envelope_and_keeps_overrides(self) -> None:
        config = ContainerConfig(length=100, shape_config={"wellWidth": 10})

        container = config_to_container(config, preset="53ft_dry_van_us_wheel_wells")

        assert container.envelope == (636, 102, 110)
        assert container.shape_mode is ShapeMode.WHEEL_WELLS
        assert container.shape_config["wellWidth"] == 10

    def test_preset_without_container(self) -> None:
        container = config_to_container(None, preset="sprinter_extended")

        assert container.envelope == (168, 70, 72)

    def test_unknown_preset(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            config_to_container(None, preset="hovercraft")

        error = exc_info.value
        assert error.error_type == "unknown_preset"
        assert error.details[0]["path"] == "preset"
        assert error.details[0]["value"] == "hovercraft"
        assert "53ft_dry_van_us" in error.message


class TestConfigToCatalog:
    """Tests for catalog conversion."""

    def test_catalog_item_fields(self) -> None:
        config = CatalogItemConfig(
            id="pallet",
            name="GMA Pallet",
            dimensions={"length": 48, "width": 40, "height": 6},
            weight=50,
            is_pallet=True,
            max_pallet_weight=2500,
        )

        item = config_to_catalog_item(config)

        assert item.id == "pallet"
        assert item.name == "GMA Pallet"
        assert item.dimensions == Dimensions3(48, 40, 6)
        assert item.weight_lb == 50
        assert item.is_pallet
        assert item.max_pallet_weight_lb == 2500

    def test_catalog_lookup(self) -> None:
        doc = PackDocument.model_validate(
            {
                "catalog": [
                    {"id": "a", "dimensions": {"length": 1, "width": 1, "height": 1}},
                    {"id": "b", "dimensions": {"length": 2, "width": 2, "height": 2}},
                ]
            }
        )

        catalog = config_to_catalog(doc)

        assert len(catalog) == 2
        assert catalog.resolve("b").dimensions.length == 2


class TestConfigToPack:
    """Tests for pack conversion."""

    def test_instances_keep_order_and_dangling_references(self) -> None:
        doc = PackDocument.model_validate(
            {
                "catalog": [
                    {"id": "a", "dimensions": {"length": 1, "width": 1, "height": 1}}
                ],
                "instances": [
                    {"id": "i2", "catalog_item_id": "ghost"},
                    {
                        "id": "i1",
                        "catalog_item_id": "a",
                        "position": {"x": 1, "y": 2, "z": -3},
                        "hidden": True,
                    },
                ],
            }
        )

        pack = config_to_pack(doc)

        assert [inst.id for inst in pack.instances] == ["i2", "i1"]
        assert pack.instances[0].catalog_item_id == "ghost"
        assert pack.instances[1].position == Position3(1, 2, -3)
        assert pack.instances[1].hidden
        assert pack.container.envelope == (636, 102, 98)
