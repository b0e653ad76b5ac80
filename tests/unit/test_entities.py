"""Unit tests for catalog, instance and pack entities."""

from truckpack.domain import (
    AABB,
    Catalog,
    CatalogItem,
    Dimensions3,
    Pack,
    PlacedInstance,
    Position3,
)


class TestCatalog:
    """Tests for Catalog lookups."""

    def test_resolve_known_item(self, catalog: Catalog, crate: CatalogItem) -> None:
        assert catalog.resolve("crate") is crate

    def test_resolve_unknown_item_returns_none(self, catalog: Catalog) -> None:
        assert catalog.resolve("ghost") is None

    def test_membership_and_length(self, catalog: Catalog) -> None:
        assert "crate" in catalog
        assert "ghost" not in catalog
        assert len(catalog) == 1
        assert repr(catalog) == "Catalog(1 items)"

    def test_last_definition_wins(self) -> None:
        first = CatalogItem("crate", Dimensions3(10, 10, 10), weight_lb=1)
        second = CatalogItem("crate", Dimensions3(20, 20, 20), weight_lb=2)

        catalog = Catalog([first, second])

        assert len(catalog) == 1
        assert catalog.resolve("crate") is second
        assert list(catalog) == [second]


class TestCatalogItem:
    """Tests for CatalogItem."""

    def test_weight_limit_only_for_pallets(self) -> None:
        dims = Dimensions3(48, 40, 6)

        assert CatalogItem("p", dims, is_pallet=True, max_pallet_weight_lb=500).has_weight_limit
        assert not CatalogItem("p", dims, is_pallet=True).has_weight_limit
        assert not CatalogItem("s", dims, max_pallet_weight_lb=500).has_weight_limit


class TestPlacedInstance:
    """Tests for PlacedInstance."""

    def test_default_position_is_origin(self) -> None:
        inst = PlacedInstance("c1", "crate")

        assert inst.position == Position3(0, 0, 0)
        assert not inst.hidden

    def test_world_box(self, crate: CatalogItem) -> None:
        inst = PlacedInstance("c1", "crate", Position3(100, 5, -20))

        assert inst.world_box(crate) == AABB.from_bounds(76, 0, -32, 124, 10, -8)


class TestPack:
    """Tests for Pack."""

    def test_instances_stored_as_tuple(self, rect_container, place) -> None:
        pack = Pack(rect_container, [place("c1", "crate")])

        assert isinstance(pack.instances, tuple)

    def test_visible_instances_keep_order(self, make_pack, place) -> None:
        pack = make_pack(
            place("b", "crate"),
            place("hidden", "crate", hidden=True),
            place("a", "crate"),
        )

        assert [inst.id for inst in pack.visible_instances()] == ["b", "a"]

    def test_resolved_instances_skip_dangling(self, make_pack, place, catalog) -> None:
        pack = make_pack(
            place("c1", "crate"),
            place("g1", "ghost"),
            place("c2", "crate", hidden=True),
        )

        resolved = list(pack.resolved_instances(catalog))

        assert [(inst.id, item.id) for inst, item in resolved] == [("c1", "crate")]
