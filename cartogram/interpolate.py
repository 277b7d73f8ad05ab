"""Bilinear interpolation on a grid with cell-centred values."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any, Union

from .geometry import Point

Grid = Union[Any, Callable[[int, int, str], float]]


def _value(grid: Grid, i: int, j: int, zero: str) -> float:
    if callable(grid):
        return float(grid(i, j, zero))
    return float(grid[i][j])


def interpolate_bilinearly(
    x: float, y: float, grid: Grid, zero: str, lx: int, ly: int
) -> float:
    """Interpolate grid values given at (i + 0.5, j + 0.5) at the point (x, y).

    grid is either indexable as grid[i][j] or a callable grid(i, j, zero).
    If zero is "x" the result is 0 on x = 0 and x = lx; if zero is "y" it is 0
    on y = 0 and y = ly. The other boundary continues the nearest value.
    """
    if x < 0 or x > lx or y < 0 or y > ly:
        raise ValueError(f"coordinate outside bounding box: x={x}, y={y}")
    if zero not in ("x", "y"):
        raise ValueError(f"unknown argument zero: {zero!r}")

    x0 = max(0.0, math.floor(x + 0.5) - 0.5)
    x1 = min(float(lx), math.floor(x + 0.5) + 0.5)
    y0 = max(0.0, math.floor(y + 0.5) - 0.5)
    y1 = min(float(ly), math.floor(y + 0.5) + 0.5)
    delta_x = (x - x0) / (x1 - x0)
    delta_y = (y - y0) / (y1 - y0)

    left = x < 0.5
    right = x >= lx - 0.5
    bottom = y < 0.5
    top = y >= ly - 0.5
    zx = zero == "x"
    zy = zero == "y"

    if (left and bottom) or (left and zx) or (bottom and zy):
        fx0y0 = 0.0
    else:
        fx0y0 = _value(grid, int(x0), int(y0), zero)

    if (left and top) or (left and zx) or (top and zy):
        fx0y1 = 0.0
    elif not left and top and zx:
        fx0y1 = _value(grid, int(x0), ly - 1, zero)
    else:
        fx0y1 = _value(grid, int(x0), int(y1), zero)

    if (right and bottom) or (right and zx) or (bottom and zy):
        fx1y0 = 0.0
    elif right and not bottom and zy:
        fx1y0 = _value(grid, lx - 1, int(y0), zero)
    else:
        fx1y0 = _value(grid, int(x1), int(y0), zero)

    if (right and top) or (right and zx) or (top and zy):
        fx1y1 = 0.0
    elif right and not top and zy:
        fx1y1 = _value(grid, lx - 1, int(y1), zero)
    elif not right and top and zx:
        fx1y1 = _value(grid, int(x1), ly - 1, zero)
    else:
        fx1y1 = _value(grid, int(x1), int(y1), zero)

    return (
        (1.0 - delta_x) * (1.0 - delta_y) * fx0y0
        + (1.0 - delta_x) * delta_y * fx0y1
        + delta_x * (1.0 - delta_y) * fx1y0
        + delta_x * delta_y * fx1y1
    )


def interpolate_point_bilinearly(
    point: Point, xdisp: Grid, ydisp: Grid, lx: int, ly: int
) -> Point:
    """Displace point by the interpolated x and y displacement grids."""
    dx = interpolate_bilinearly(point.x, point.y, xdisp, "x", lx, ly)
    dy = interpolate_bilinearly(point.x, point.y, ydisp, "y", lx, ly)
    return Point(point.x + dx, point.y + dy)