"""Pytest configuration and shared fixtures for truckpack tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from truckpack.domain import (
    Catalog,
    CatalogItem,
    Container,
    Dimensions3,
    Pack,
    PlacedInstance,
    Position3,
)

PACK_FIXTURES_PATH = Path(__file__).parent / "fixtures" / "packs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared domain fixtures
# =============================================================================


@pytest.fixture
def packs_path() -> Path:
    """Directory holding the JSON pack document fixtures."""
    return PACK_FIXTURES_PATH


@pytest.fixture
def rect_container() -> Container:
    """Default 636 x 102 x 98 inch rectangular trailer."""
    return Container(length=636, width=102, height=98)


@pytest.fixture
def crate() -> CatalogItem:
    """48 x 24 x 10 inch, 100 lb crate."""
    return CatalogItem(
        id="crate",
        dimensions=Dimensions3(length=48, width=24, height=10),
        weight_lb=100,
        name="Crate",
    )


@pytest.fixture
def catalog(crate: CatalogItem) -> Catalog:
    """Catalog containing only the crate."""
    return Catalog([crate])


@pytest.fixture
def place() -> Callable[..., PlacedInstance]:
    """Factory for placed instances: place("a", "crate", x, y, z)."""

    def _place(
        instance_id: str,
        item_id: str,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        hidden: bool = False,
    ) -> PlacedInstance:
        return PlacedInstance(
            id=instance_id,
            catalog_item_id=item_id,
            position=Position3(x, y, z),
            hidden=hidden,
        )

    return _place


@pytest.fixture
def make_pack(rect_container: Container) -> Callable[..., Pack]:
    """Factory for packs in the rect container unless one is given."""

    def _make_pack(*instances: PlacedInstance, container: Container | None = None) -> Pack:
        return Pack(container=container or rect_container, instances=instances)

    return _make_pack
