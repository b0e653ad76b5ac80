"""Core 3D geometry value objects.

Axis convention shared by every service:
    X - length (long axis), rear of the container at 0.
    Y - height, floor at 0.
    Z - width (lateral), centered at 0.
"""

from __future__ import annotations

from dataclasses import dataclass

# Minimum extent (inches) on every axis for a box to count as non-degenerate
AABB_EPSILON: float = 1e-9


@dataclass(frozen=True)
class Dimensions3:
    """Box dimensions in inches.

    Attributes:
        length: Extent along X.
        width: Extent along Z.
        height: Extent along Y.
    """

    length: float
    width: float
    height: float

    @property
    def volume_in3(self) -> float:
        """Volume in cubic inches (never negative)."""
        return max(0.0, self.length * self.width * self.height)

    @property
    def half_extents(self) -> tuple[float, float, float]:
        """Half extents in world axis order (x, y, z)."""
        return (self.length / 2, self.height / 2, self.width / 2)


@dataclass(frozen=True)
class Position3:
    """Point in container space, inches. Negative values are valid."""

    x: float
    y: float
    z: float

    @classmethod
    def origin(cls) -> "Position3":
        return cls(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class AABB:
    """Axis-aligned bounding box defined by its min and max corners.

    Unlike a panel bounding box, an AABB may be degenerate or inverted.
    Services check ``is_valid`` and drop such boxes instead of raising.
    """

    min: Position3
    max: Position3

    @classmethod
    def from_bounds(
        cls,
        x0: float,
        y0: float,
        z0: float,
        x1: float,
        y1: float,
        z1: float,
    ) -> "AABB":
        """Build a box from (x0, y0, z0) - (x1, y1, z1) bounds."""
        return cls(Position3(x0, y0, z0), Position3(x1, y1, z1))

    @classmethod
    def from_center(cls, center: Position3, dimensions: Dimensions3) -> "AABB":
        """Build the world box of an item centered at ``center``.

        Args:
            center: Box center in container space.
            dimensions: Item dimensions (length on X, height on Y, width on Z).

        Returns:
            AABB spanning ``center +/- dimensions/2``.
        """
        hx, hy, hz = dimensions.half_extents
        return cls.from_bounds(
            center.x - hx,
            center.y - hy,
            center.z - hz,
            center.x + hx,
            center.y + hy,
            center.z + hz,
        )

    @property
    def size(self) -> tuple[float, float, float]:
        """Extents along (x, y, z); negative for inverted boxes."""
        return (
            self.max.x - self.min.x,
            self.max.y - self.min.y,
            self.max.z - self.min.z,
        )

    @property
    def is_valid(self) -> bool:
        """True if every axis extent exceeds AABB_EPSILON."""
        return all(extent > AABB_EPSILON for extent in self.size)

    @property
    def volume_in3(self) -> float:
        """Volume in cubic inches; negative extents count as zero.

        Multiplied in length, width, height order to match Dimensions3.
        """
        dx, dy, dz = self.size
        return max(0.0, dx) * max(0.0, dz) * max(0.0, dy)

    def contains(self, other: "AABB") -> bool:
        """Check whether ``other`` lies entirely inside this box.

        Shared faces count as inside (``>=`` / ``<=`` on every axis).
        """
        return (
            other.min.x >= self.min.x
            and other.max.x <= self.max.x
            and other.min.y >= self.min.y
            and other.max.y <= self.max.y
            and other.min.z >= self.min.z
            and other.max.z <= self.max.z
        )
