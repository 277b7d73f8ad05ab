"""Intersections of axis-parallel rays with polygon edges."""

from __future__ import annotations

from dataclasses import dataclass, field

from .geometry import Point, Polygon
from .round_point import almost_equal


@dataclass(order=True)
class Intersection:
    """Where a ray crosses a polygon edge; ordered by coordinate along the ray."""

    coord: float
    target_density: float = field(default=0.0, compare=False)
    is_x: bool = field(default=True, compare=False)
    geo_div_id: str = field(default="", compare=False)
    pwh_idx: int = field(default=0, compare=False)
    ray_enters: bool = field(default=False, compare=False)

    @property
    def x(self) -> float:
        return self.coord

    @property
    def y(self) -> float:
        return self.coord


def ray_intersection(
    a: Point,
    b: Point,
    ray: float,
    target_density: float,
    epsilon: float,
    is_x: bool,
) -> Intersection | None:
    """Intersection of the edge a-b with a ray, or None if they do not meet.

    For is_x the ray is the line y = ray, otherwise x = ray. Edges lying along
    the ray are ignored; an endpoint on the ray is nudged by epsilon so that a
    crossing through a vertex is counted once.
    """
    if not is_x:
        a = Point(a.y, a.x)
        b = Point(b.y, b.x)
    crosses = (a.y <= ray <= b.y) or (a.y >= ray >= b.y)
    if not crosses or almost_equal(a.y, b.y):
        return None
    if almost_equal(a.y, ray):
        a = Point(a.x, a.y + epsilon)
    elif almost_equal(b.y, ray):
        b = Point(b.x, b.y + epsilon)
    coord = (a.x * (b.y - ray) + b.x * (ray - a.y)) / (b.y - a.y)
    return Intersection(coord, target_density, is_x)


def intersections_with_ray(
    polygon: Polygon,
    ray: float,
    target_density: float,
    epsilon: float,
    gd_id: str,
    pwh_idx: int,
    axis: str,
) -> list[Intersection]:
    """All intersections of a ray parallel to axis with the edges of polygon."""
    if axis not in ("x", "y"):
        raise ValueError(f"invalid axis: {axis!r}")
    vertices = list(polygon)
    if not vertices:
        return []
    previous = [vertices[-1], *vertices[:-1]]
    found = []
    for curr, prev in zip(vertices, previous):
        hit = ray_intersection(curr, prev, ray, target_density, epsilon, axis == "x")
        if hit is not None:
            hit.geo_div_id = gd_id
            hit.pwh_idx = pwh_idx
            found.append(hit)
    return found