"""Domain entities: catalog items, placed instances and packs."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from .value_objects import AABB, Container, Dimensions3, Position3


@dataclass(frozen=True)
class CatalogItem:
    """A reusable item definition shared by many packs.

    Attributes:
        id: Catalog identifier referenced by placed instances.
        dimensions: Item size in inches.
        weight_lb: Item weight in pounds.
        is_pallet: True if other items can be stacked on it.
        max_pallet_weight_lb: Rated maximum stacked load; 0 means unlimited.
        name: Display name.
    """

    id: str
    dimensions: Dimensions3
    weight_lb: float = 0.0
    is_pallet: bool = False
    max_pallet_weight_lb: float = 0.0
    name: str = ""

    @property
    def has_weight_limit(self) -> bool:
        """True for pallets with a positive rated load."""
        return self.is_pallet and self.max_pallet_weight_lb > 0


class Catalog:
    """Read-only lookup of catalog items by id.

    Resolution is explicit: ``resolve`` returns None for a dangling
    reference and every caller decides what a missing item means.

    Example:
        catalog = Catalog([CatalogItem("crate", Dimensions3(48, 24, 10))])
        item = catalog.resolve(instance.catalog_item_id)
        if item is None:
            ...
    """

    def __init__(self, items: Iterable[CatalogItem] = ()) -> None:
        by_id: dict[str, CatalogItem] = {}
        for item in items:
            # Last definition wins, matching a map built from a list
            by_id[item.id] = item
        self._items: Mapping[str, CatalogItem] = MappingProxyType(by_id)

    def resolve(self, item_id: str) -> CatalogItem | None:
        """Look up a catalog item.

        Args:
            item_id: Catalog identifier.

        Returns:
            The item, or None if the id is unknown.
        """
        return self._items.get(item_id)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __iter__(self) -> Iterator[CatalogItem]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Catalog({len(self)} items)"


@dataclass(frozen=True)
class PlacedInstance:
    """One placement of a catalog item inside a pack.

    Attributes:
        id: Instance identifier, unique within its pack.
        catalog_item_id: Referenced catalog item.
        position: Box center in container space (inches).
        hidden: Hidden instances are excluded from every computation.
    """

    id: str
    catalog_item_id: str
    position: Position3 = field(default_factory=Position3.origin)
    hidden: bool = False

    def world_box(self, item: CatalogItem) -> AABB:
        """World-space box of this instance for the given catalog item."""
        return AABB.from_center(self.position, item.dimensions)


@dataclass(frozen=True)
class Pack:
    """A container plus its ordered placed instances.

    The unit of computation. Services read a pack, never mutate it.
    """

    container: Container
    instances: tuple[PlacedInstance, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "instances", tuple(self.instances))

    def visible_instances(self) -> list[PlacedInstance]:
        """Instances that take part in computation, in pack order."""
        return [inst for inst in self.instances if not inst.hidden]

    def resolved_instances(
        self, catalog: Catalog
    ) -> Iterator[tuple[PlacedInstance, CatalogItem]]:
        """Yield visible instances paired with their resolved catalog item.

        Instances with a dangling catalog reference are skipped.
        """
        for inst in self.visible_instances():
            item = catalog.resolve(inst.catalog_item_id)
            if item is not None:
                yield inst, item


__all__ = ["Catalog", "CatalogItem", "Pack", "PlacedInstance"]
