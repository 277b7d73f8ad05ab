"""Tolerant comparisons and rounding of coordinates."""

from __future__ import annotations

import math

from .geometry import Point

DBL_RESOLUTION = 1e-9


def almost_equal(a: float, b: float) -> bool:
    """Whether two numbers differ by at most DBL_RESOLUTION."""
    return math.fabs(a - b) <= DBL_RESOLUTION


def points_almost_equal(a: Point, b: Point) -> bool:
    """Whether both coordinates of two points are almost equal."""
    return almost_equal(a.x, b.x) and almost_equal(a.y, b.y)


def less_than(a, b) -> bool:
    """Strictly less than, treating almost equal values as equal.

    Works for numbers and for points (compared lexicographically).
    """
    if isinstance(a, Point) and isinstance(b, Point):
        return not (points_almost_equal(a, b) or a >= b)
    return not (almost_equal(a, b) or a >= b)


def _round_half_away(value: float) -> float:
    magnitude = math.fabs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), value)


def rounded_to_bicimal(d: float, lx: int, ly: int) -> float:
    """Round the fractional part of d to a number of binary digits.

    The number of binary digits shrinks as the grid grows, so that the
    total precision stays around 40 bits.
    """
    fractional, whole = math.modf(d)
    n_bicimals = 40 - max(lx, ly).bit_length()
    scale = float(1 << n_bicimals)
    return whole + _round_half_away(fractional * scale) / scale


def rounded_point(p: Point, lx: int, ly: int) -> Point:
    """Round both coordinates of p to bicimals suited to an lx-by-ly grid."""
    return Point(rounded_to_bicimal(p.x, lx, ly), rounded_to_bicimal(p.y, lx, ly))


def rounded_point_decimals(p: Point, n_decimals: int) -> Point:
    """Round both coordinates of p to n_decimals decimal places."""
    factor = math.pow(10, n_decimals)
    return Point(
        _round_half_away(p.x * factor) / factor,
        _round_half_away(p.y * factor) / factor,
    )