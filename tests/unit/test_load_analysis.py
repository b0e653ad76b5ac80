"""Unit tests for the LoadAnalysisService facade."""

import pytest

from truckpack.domain import (
    Catalog,
    CatalogItem,
    CoGStatus,
    Container,
    Dimensions3,
    LoadAnalysisService,
    OOGIssue,
    Pack,
)
from truckpack.domain.services import (
    ZoneDecomposer,
    compute_cog,
    compute_oog_warnings,
    compute_stats,
    decompose_zones,
    snapshot_key,
)


@pytest.fixture
def service() -> LoadAnalysisService:
    return LoadAnalysisService()


@pytest.fixture
def balanced_pack(make_pack, place) -> Pack:
    """Two crates either side of the trailer midpoint."""
    return make_pack(
        place("c1", "crate", 100, 5, 0),
        place("c2", "crate", 536, 5, 0),
    )


class TestLoadAnalysisService:
    """Tests for running every check on one snapshot."""

    def test_report_matches_individual_services(
        self, service: LoadAnalysisService, balanced_pack: Pack, catalog: Catalog
    ) -> None:
        report = service.analyze(balanced_pack, catalog)

        assert report.stats == compute_stats(balanced_pack, catalog)
        assert report.center_of_gravity == compute_cog(balanced_pack, catalog)
        assert report.oog_warnings == compute_oog_warnings(balanced_pack, catalog)
        assert report.pallet_warnings == []
        assert report.zones == decompose_zones(balanced_pack.container)

    def test_clean_pack_has_no_issues(
        self, service: LoadAnalysisService, balanced_pack: Pack, catalog: Catalog
    ) -> None:
        report = service.analyze(balanced_pack, catalog)

        assert report.stats.packed_count == 2
        assert report.center_of_gravity.status is CoGStatus.OK
        assert not report.has_issues

    def test_oog_item_is_an_issue(
        self, service: LoadAnalysisService, make_pack, place, catalog: Catalog
    ) -> None:
        pack = make_pack(
            place("c1", "crate", 24, 5, 0),
            place("c2", "crate", 620, 5, 0),
        )

        report = service.analyze(pack, catalog)

        assert report.stats.packed_count == 1
        assert report.oog_warnings[0].issues == frozenset({OOGIssue.PROTRUDES_FRONT})
        assert report.has_issues

    def test_unbalanced_load_is_an_issue(
        self, service: LoadAnalysisService, make_pack, place, catalog: Catalog
    ) -> None:
        report = service.analyze(make_pack(place("c1", "crate", 50, 5, 0)), catalog)

        assert not report.oog_warnings
        assert report.center_of_gravity.status is CoGStatus.CRITICAL
        assert report.has_issues

    def test_empty_pack(self, service: LoadAnalysisService, make_pack) -> None:
        report = service.analyze(make_pack(), [])

        assert report.stats.total_count == 0
        assert report.center_of_gravity is None
        assert not report.has_issues

    def test_repeated_analysis_is_identical(
        self, service: LoadAnalysisService, balanced_pack: Pack, catalog: Catalog
    ) -> None:
        """Reports are a pure function of their inputs."""
        assert service.analyze(balanced_pack, catalog) == service.analyze(
            balanced_pack, catalog
        )

    def test_injected_decomposer_is_used(
        self, balanced_pack: Pack, catalog: Catalog
    ) -> None:
        class NoZones(ZoneDecomposer):
            def decompose(self, container: Container) -> list:
                return []

        report = LoadAnalysisService(zone_decomposer=NoZones()).analyze(
            balanced_pack, catalog
        )

        assert report.zones == []
        assert report.stats.packed_count == 0
        assert report.stats.capacity_in3 == 0

    def test_missing_inputs_raise(
        self, service: LoadAnalysisService, balanced_pack: Pack, catalog: Catalog
    ) -> None:
        with pytest.raises(ValueError, match="pack"):
            service.analyze(None, catalog)
        with pytest.raises(ValueError, match="catalog"):
            service.analyze(balanced_pack, None)


class TestSnapshotKey:
    """Tests for the report cache key."""

    def test_stable_for_equal_inputs(
        self, balanced_pack: Pack, catalog: Catalog, crate: CatalogItem
    ) -> None:
        key = snapshot_key(balanced_pack, catalog)

        assert len(key) == 64
        assert snapshot_key(balanced_pack, [crate]) == key

    def test_changes_when_instance_moves(self, make_pack, place, catalog) -> None:
        before = make_pack(place("c1", "crate", 100, 5, 0))
        after = make_pack(place("c1", "crate", 101, 5, 0))

        assert snapshot_key(before, catalog) != snapshot_key(after, catalog)

    def test_changes_when_catalog_weight_changes(self, balanced_pack: Pack) -> None:
        light = CatalogItem("crate", Dimensions3(48, 24, 10), weight_lb=100)
        heavy = CatalogItem("crate", Dimensions3(48, 24, 10), weight_lb=150)

        assert snapshot_key(balanced_pack, [light]) != snapshot_key(
            balanced_pack, [heavy]
        )

    def test_changes_when_item_renamed(self, balanced_pack: Pack) -> None:
        """Reports carry item names, so a rename must not reuse a cached report."""
        crate = CatalogItem("crate", Dimensions3(48, 24, 10), weight_lb=100, name="Crate")
        drum = CatalogItem("crate", Dimensions3(48, 24, 10), weight_lb=100, name="Drum")

        assert snapshot_key(balanced_pack, [crate]) != snapshot_key(
            balanced_pack, [drum]
        )

    def test_changes_when_shape_changes(self, balanced_pack: Pack, catalog) -> None:
        wells = Pack(
            Container(636, 102, 98, shape_mode="wheelWells"),
            balanced_pack.instances,
        )

        assert snapshot_key(balanced_pack, catalog) != snapshot_key(wells, catalog)

    def test_hidden_instances_do_not_change_key(
        self, make_pack, place, catalog
    ) -> None:
        visible = make_pack(place("c1", "crate", 100, 5, 0))
        with_hidden = make_pack(
            place("c1", "crate", 100, 5, 0),
            place("c2", "crate", 300, 5, 0, hidden=True),
        )

        assert snapshot_key(visible, catalog) == snapshot_key(with_hidden, catalog)

    def test_report_carries_key(
        self, service: LoadAnalysisService, balanced_pack: Pack, catalog: Catalog
    ) -> None:
        report = service.analyze(balanced_pack, catalog)

        assert report.snapshot_key == snapshot_key(balanced_pack, catalog)
