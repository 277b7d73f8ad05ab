"""Smyth equal-surface (Craster rectangular) projection."""

from __future__ import annotations

import math

from .geometry import Point


def point_after_smyth_craster_projection(point: Point) -> Point:
    """Project a (longitude, latitude) point in degrees."""
    return Point(
        point.x * math.sqrt(2.0 * math.pi) / 180.0,
        math.sin(point.y * math.pi / 180.0) * math.sqrt(0.5 * math.pi),
    )


def point_before_smyth_craster_projection(point: Point, lx: int, ly: int) -> Point:
    """Longitude and latitude of a projected point scaled to [0, lx] x [0, ly]."""
    return Point(
        point.x * 360.0 / lx - 180.0,
        180.0 * math.asin(2.0 * point.y / ly - 1.0) / math.pi,
    )