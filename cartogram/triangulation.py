"""Projection of points through a triangulated, transformed grid.

A grid of lx-by-ly cells has its nodes at (i + 0.5, j + 0.5). A projection
gives the position of every node after the cartogram transformation. Each
grid cell is split along one diagonal into two triangles. A point is mapped
by the affine transformation that carries its triangle onto the projected
triangle.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Any

import numpy as np

from .geometry import Point
from .matrix import Matrix
from .round_point import almost_equal, rounded_point

_log = logging.getLogger(__name__)

Triangle = tuple[Point, Point, Point]


class GridTopologyError(RuntimeError):
    """Raised when a projected grid cell or triangle is not valid."""


def _proj_at(proj: Any, i: int, j: int) -> Point:
    value = proj[i][j]
    return Point(float(value[0]), float(value[1]))


def check_on_grid_or_edge(point: Point, lx: int, ly: int) -> None:
    """Raise ValueError unless each coordinate is 0, the grid length or k + 0.5."""
    frac_x = point.x - math.floor(point.x)
    frac_y = point.y - math.floor(point.y)
    bad_x = (
        not almost_equal(point.x, 0.0)
        and not almost_equal(point.x, lx)
        and not almost_equal(frac_x, 0.5)
    )
    bad_y = (
        not almost_equal(point.y, 0.0)
        and not almost_equal(point.y, ly)
        and not almost_equal(frac_y, 0.5)
    )
    if bad_x or bad_y:
        raise ValueError(
            f"invalid input coordinate in triangulation: ({point.x}, {point.y})"
        )


def projected_point(point: Point, proj: Any, lx: int, ly: int) -> Point:
    """Position of a grid node (or boundary point) under the projection.

    Coordinates on the boundary of the grid stay where they are.
    """
    check_on_grid_or_edge(point, lx, ly)
    proj_x = min(lx - 1, int(point.x))
    proj_y = min(ly - 1, int(point.y))
    on_x_edge = almost_equal(point.x, 0.0) or almost_equal(point.x, lx)
    on_y_edge = almost_equal(point.y, 0.0) or almost_equal(point.y, ly)
    node = None if on_x_edge and on_y_edge else _proj_at(proj, proj_x, proj_y)
    return Point(
        point.x if on_x_edge else node.x,
        point.y if on_y_edge else node.y,
    )


def _cross(o: Point, a: Point, b: Point) -> float:
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def _is_convex(vertices: Sequence[Point]) -> bool:
    n = len(vertices)
    signs = set()
    for k, vertex in enumerate(vertices):
        turn = _cross(vertex, vertices[(k + 1) % n], vertices[(k + 2) % n])
        if turn > 0:
            signs.add(1)
        elif turn < 0:
            signs.add(-1)
    return len(signs) <= 1


def _on_segment(p: Point, a: Point, b: Point) -> bool:
    return (
        _cross(a, b, p) == 0
        and min(a.x, b.x) <= p.x <= max(a.x, b.x)
        and min(a.y, b.y) <= p.y <= max(a.y, b.y)
    )


def _strictly_inside(p: Point, vertices: Sequence[Point]) -> bool:
    edges = list(zip(vertices, [*vertices[1:], vertices[0]]))
    if any(_on_segment(p, a, b) for a, b in edges):
        return False
    inside = False
    for a, b in edges:
        if (a.y > p.y) != (b.y > p.y):
            x_cross = a.x + (p.y - a.y) * (b.x - a.x) / (b.y - a.y)
            if x_cross > p.x:
                inside = not inside
    return inside


def _cell_corners(i: int, j: int) -> tuple[Point, Point, Point, Point]:
    return (
        Point(i + 0.5, j + 0.5),
        Point(i + 1.5, j + 0.5),
        Point(i + 1.5, j + 1.5),
        Point(i + 0.5, j + 1.5),
    )


def _chosen_diag_and_convexity(
    corners: Sequence[Point], proj: Any, lx: int, ly: int
) -> tuple[int, bool]:
    for corner in corners:
        check_on_grid_or_edge(corner, lx, ly)
    tv = [projected_point(corner, proj, lx, ly) for corner in corners]
    convex = _is_convex(tv)
    midpoint_0 = Point((tv[0].x + tv[2].x) / 2, (tv[0].y + tv[2].y) / 2)
    if _strictly_inside(midpoint_0, tv):
        return 0, convex
    midpoint_1 = Point((tv[1].x + tv[3].x) / 2, (tv[1].y + tv[3].y) / 2)
    if _strictly_inside(midpoint_1, tv):
        return 1, convex
    projected = ", ".join(f"({p.x}, {p.y})" for p in tv)
    original = ", ".join(f"({p.x}, {p.y})" for p in corners)
    raise GridTopologyError(
        f"invalid grid cell: projected {projected}; original {original}"
    )


def chosen_diag(corners: Sequence[Point], proj: Any, lx: int, ly: int) -> int:
    """Which diagonal lies inside the projected cell with these four corners.

    0 for the diagonal from corners[0] to corners[2], 1 for corners[1] to
    corners[3]. Raises GridTopologyError if neither does.
    """
    return _chosen_diag_and_convexity(corners, proj, lx, ly)[0]


def fill_grid_diagonals(proj: Any, lx: int, ly: int) -> np.ndarray:
    """Chosen diagonal of every interior grid cell, as an (lx-1, ly-1) array."""
    diagonals = np.zeros((max(lx - 1, 0), max(ly - 1, 0)), dtype=np.int8)
    n_concave = 0
    for i in range(lx - 1):
        for j in range(ly - 1):
            diag, convex = _chosen_diag_and_convexity(
                _cell_corners(i, j), proj, lx, ly
            )
            diagonals[i, j] = diag
            if not convex:
                n_concave += 1
    _log.info("Number of concave grid cells: %d", n_concave)
    return diagonals


def is_on_triangle_boundary(point: Point, triangle: Sequence[Point]) -> bool:
    """Whether point is (almost) collinear with one of the triangle's edges."""
    n = len(triangle)
    for k, t1 in enumerate(triangle):
        t2 = triangle[(k + 1) % n]
        area = (t1.x - point.x) * (t2.y - point.y) - (t2.x - point.x) * (
            t1.y - point.y
        )
        if almost_equal(area, 0.0):
            return True
    return False


def untransformed_triangle(
    point: Point, grid_diagonals: Any, proj: Any, lx: int, ly: int
) -> Triangle:
    """The unprojected triangle of the grid that contains point."""
    if point.x < 0 or point.x > lx or point.y < 0 or point.y > ly:
        raise ValueError(
            f"coordinate outside bounding box: ({point.x}, {point.y})"
        )
    x0 = max(0.0, math.floor(point.x + 0.5) - 0.5)
    y0 = max(0.0, math.floor(point.y + 0.5) - 0.5)
    x1 = min(float(lx), math.floor(point.x + 0.5) + 0.5)
    y1 = min(float(ly), math.floor(point.y + 0.5) + 0.5)
    v = (Point(x0, y0), Point(x1, y0), Point(x1, y1), Point(x0, y1))

    on_edge = (
        almost_equal(x0, 0.0)
        or almost_equal(y0, 0.0)
        or almost_equal(x1, lx)
        or almost_equal(y1, ly)
    )
    if on_edge:
        diag = chosen_diag(v, proj, lx, ly)
    else:
        diag = int(grid_diagonals[int(x0)][int(y0)])

    if diag == 0:
        triangle1: Triangle = (v[0], v[1], v[2])
        triangle2: Triangle = (v[0], v[2], v[3])
    else:
        triangle1 = (v[0], v[1], v[3])
        triangle2 = (v[1], v[2], v[3])

    for triangle in (triangle1, triangle2):
        if _strictly_inside(point, triangle) or is_on_triangle_boundary(
            point, triangle
        ):
            return triangle
    corners = ", ".join(f"({p.x}, {p.y})" for p in v)
    raise GridTopologyError(
        f"point ({point.x}, {point.y}) not in grid cell {corners}; "
        f"chosen diagonal: {diag}"
    )


def transformed_triangle(
    tri: Sequence[Point], proj: Any, lx: int, ly: int
) -> Triangle:
    """The projected positions of the three vertices of tri."""
    a, b, c = (projected_point(p, proj, lx, ly) for p in tri)
    return a, b, c


def affine_transform(
    tri: Sequence[Point], org_tri: Sequence[Point], point: Point
) -> Point:
    """Map point by the affine transformation that carries org_tri onto tri."""
    abc = Matrix.from_points(*org_tri)
    pqr = Matrix.from_points(*tri)
    transformation = pqr @ abc.inverse()
    return transformation.transformed_point(Point(point.x, point.y))


def projected_point_with_triangulation(
    point: Point, grid_diagonals: Any, proj: Any, lx: int, ly: int
) -> Point:
    """Project a point through the triangulated grid, rounded to bicimals."""
    old_triangle = untransformed_triangle(point, grid_diagonals, proj, lx, ly)
    new_triangle = transformed_triangle(old_triangle, proj, lx, ly)
    return rounded_point(affine_transform(new_triangle, old_triangle, point), lx, ly)