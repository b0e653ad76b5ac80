"""Unit tests for out-of-gauge detection."""

import pytest

from truckpack.domain import (
    AABB,
    Catalog,
    CatalogItem,
    Container,
    Dimensions3,
    OOGIssue,
)
from truckpack.domain.services import compute_oog_warnings, find_oog_issues


class TestFindOOGIssues:
    """Tests for per-face envelope checks."""

    @pytest.fixture
    def container(self) -> Container:
        return Container(636, 102, 98)

    def test_inside_box_has_no_issues(self, container: Container) -> None:
        box = AABB.from_bounds(26, 0, -12, 74, 10, 12)

        assert find_oog_issues(box, container) == frozenset()

    def test_touching_every_face_is_in_gauge(self, container: Container) -> None:
        """Faces are tested strictly; flush is not out of gauge."""
        box = AABB.from_bounds(0, 0, -51, 636, 98, 51)

        assert find_oog_issues(box, container) == frozenset()

    @pytest.mark.parametrize(
        "bounds,issue",
        [
            ((-1, 0, 0, 10, 10, 10), OOGIssue.PROTRUDES_REAR),
            ((600, 0, 0, 637, 10, 10), OOGIssue.PROTRUDES_FRONT),
            ((0, -0.5, 0, 10, 10, 10), OOGIssue.BELOW_FLOOR),
            ((0, 90, 0, 10, 98.1, 10), OOGIssue.EXCEEDS_HEIGHT),
            ((0, 0, -52, 10, 10, 0), OOGIssue.PROTRUDES_LEFT),
            ((0, 0, 0, 10, 10, 51.5), OOGIssue.PROTRUDES_RIGHT),
        ],
    )
    def test_single_face(
        self, container: Container, bounds: tuple, issue: OOGIssue
    ) -> None:
        box = AABB.from_bounds(*bounds)

        assert find_oog_issues(box, container) == frozenset({issue})

    def test_oversized_box_violates_every_face(self, container: Container) -> None:
        box = AABB.from_bounds(-10, -10, -100, 700, 200, 100)

        assert find_oog_issues(box, container) == frozenset(OOGIssue)

    def test_ignores_wheel_wells(self) -> None:
        """The envelope check ignores the interior shape."""
        container = Container(636, 102, 98, shape_mode="wheelWells")
        box = AABB.from_bounds(240, 5, -48, 260, 15, -38)

        assert find_oog_issues(box, container) == frozenset()

    def test_non_finite_envelope_reads_as_zero(self) -> None:
        """A NaN length is treated as 0, so anything forward of X = 0 protrudes."""
        container = Container(float("nan"), 102, 98)
        box = AABB.from_bounds(0, 0, -5, 10, 10, 5)

        assert find_oog_issues(box, container) == frozenset({OOGIssue.PROTRUDES_FRONT})


class TestComputeOOGWarnings:
    """Tests for per-instance warnings."""

    def test_front_protrusion(self, make_pack, place, catalog: Catalog) -> None:
        pack = make_pack(place("c1", "crate", 620, 5, 0))

        warnings = compute_oog_warnings(pack, catalog)

        assert len(warnings) == 1
        warning = warnings[0]
        assert warning.instance_id == "c1"
        assert warning.catalog_item_id == "crate"
        assert warning.item_name == "Crate"
        assert warning.issues == frozenset({OOGIssue.PROTRUDES_FRONT})

    def test_in_gauge_instances_are_omitted(
        self, make_pack, place, catalog: Catalog
    ) -> None:
        pack = make_pack(
            place("c1", "crate", 50, 5, 0),
            place("c2", "crate", 50, 0, 0),
            place("c3", "crate", 200, 5, 0),
        )

        warnings = compute_oog_warnings(pack, catalog)

        assert [w.instance_id for w in warnings] == ["c2"]
        assert warnings[0].sorted_issues == [OOGIssue.BELOW_FLOOR]

    def test_warnings_follow_pack_order(self, make_pack, place, catalog: Catalog) -> None:
        pack = make_pack(
            place("z", "crate", 620, 5, 0),
            place("a", "crate", 10, 5, 0),
        )

        warnings = compute_oog_warnings(pack, catalog)

        assert [w.instance_id for w in warnings] == ["z", "a"]

    def test_hidden_and_dangling_are_skipped(
        self, make_pack, place, catalog: Catalog
    ) -> None:
        pack = make_pack(
            place("c1", "crate", 620, 5, 0, hidden=True),
            place("g1", "ghost", 1000, 5, 0),
        )

        assert compute_oog_warnings(pack, catalog) == []

    def test_multiple_issues_sorted(self, make_pack, place) -> None:
        catalog = Catalog([CatalogItem("beam", Dimensions3(700, 4, 4), weight_lb=50)])
        pack = make_pack(place("b1", "beam", 318, 0, 50))

        warnings = compute_oog_warnings(pack, catalog)

        assert warnings[0].sorted_issues == [
            OOGIssue.PROTRUDES_REAR,
            OOGIssue.PROTRUDES_FRONT,
            OOGIssue.BELOW_FLOOR,
            OOGIssue.PROTRUDES_RIGHT,
        ]
