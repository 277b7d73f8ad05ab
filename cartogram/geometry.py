"""Planar geometry primitives: points, bounding boxes and polygons."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple


class Point(NamedTuple):
    """A point in the plane. Points compare lexicographically by (x, y)."""

    x: float
    y: float


@dataclass(frozen=True)
class Bbox:
    """An axis-aligned bounding box."""

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    def __str__(self) -> str:
        return f"{self.xmin} {self.ymin} {self.xmax} {self.ymax}"


@dataclass(frozen=True)
class Polygon:
    """A closed ring given by its vertices; the closing vertex is implicit."""

    vertices: tuple[Point, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "vertices", tuple(Point(*v) for v in self.vertices)
        )

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices)

    def __getitem__(self, index: int) -> Point:
        return self.vertices[index]

    def area(self) -> float:
        """Signed area: positive for counter-clockwise rings."""
        if len(self.vertices) < 3:
            return 0.0
        shifted = self.vertices[1:] + self.vertices[:1]
        twice_area = sum(
            a.x * b.y - b.x * a.y for a, b in zip(self.vertices, shifted)
        )
        return twice_area / 2.0

    def bbox(self) -> Bbox:
        """Bounding box of all vertices."""
        if not self.vertices:
            raise ValueError("bounding box of an empty polygon")
        xs = [p.x for p in self.vertices]
        ys = [p.y for p in self.vertices]
        return Bbox(min(xs), min(ys), max(xs), max(ys))

    def reversed(self) -> Polygon:
        """The same ring with opposite orientation, keeping the first vertex."""
        if len(self.vertices) <= 1:
            return self
        first, *rest = self.vertices
        return Polygon((first, *reversed(rest)))


@dataclass(frozen=True)
class PolygonWithHoles:
    """An exterior ring together with any number of interior rings."""

    outer_boundary: Polygon
    holes: tuple[Polygon, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "holes", tuple(self.holes))

    def bbox(self) -> Bbox:
        """Bounding box of the exterior ring."""
        return self.outer_boundary.bbox()


def pwh_area(pwh: PolygonWithHoles) -> float:
    """Sum of the signed areas of the exterior ring and of every hole."""
    return pwh.outer_boundary.area() + sum(h.area() for h in pwh.holes)


def pwh_is_larger(pwh1: PolygonWithHoles, pwh2: PolygonWithHoles) -> bool:
    """Whether the first polygon with holes has the larger area."""
    return pwh_area(pwh1) > pwh_area(pwh2)