import pytest

from cartogram.geometry import Point
from cartogram.round_point import (
    DBL_RESOLUTION,
    almost_equal,
    less_than,
    points_almost_equal,
    rounded_point,
    rounded_point_decimals,
    rounded_to_bicimal,
)


def test_almost_equal_within_resolution():
    assert almost_equal(1.0, 1.0 + DBL_RESOLUTION / 2)
    assert almost_equal(5.0, 5.0)


def test_almost_equal_outside_resolution():
    assert not almost_equal(1.0, 1.0 + 10 * DBL_RESOLUTION)


def test_points_almost_equal():
    a = Point(1.0, 2.0)
    assert points_almost_equal(a, Point(1.0 + DBL_RESOLUTION / 2, 2.0))
    assert not points_almost_equal(a, Point(1.0, 2.0 + 10 * DBL_RESOLUTION))


def test_less_than_numbers():
    assert less_than(1.0, 2.0)
    assert not less_than(2.0, 1.0)
    assert not less_than(1.0, 1.0 + DBL_RESOLUTION / 2)


def test_less_than_points_lexicographic():
    assert less_than(Point(0, 5), Point(1, 0))
    assert less_than(Point(1, 0), Point(1, 1))
    assert not less_than(Point(1, 1), Point(1, 0))
    assert not less_than(Point(1, 1), Point(1 + DBL_RESOLUTION / 2, 1))


@pytest.mark.parametrize("value", [0.0, 3.0, -7.0, 512.0])
def test_integers_are_unchanged(value):
    assert rounded_to_bicimal(value, 512, 256) == value


@pytest.mark.parametrize("value", [0.1, 1.2345678901234, -3.3333333333, 100.9])
def test_rounding_properties(value):
    r = rounded_to_bicimal(value, 512, 512)
    assert abs(r - value) < DBL_RESOLUTION
    assert rounded_to_bicimal(r, 512, 512) == r
    assert rounded_to_bicimal(-value, 512, 512) == -r
    assert (r * 2**30).is_integer()


def test_rounded_point_rounds_both_coordinates():
    p = Point(0.1, 2.7)
    result = rounded_point(p, 64, 128)
    assert result == Point(
        rounded_to_bicimal(0.1, 64, 128), rounded_to_bicimal(2.7, 64, 128)
    )


def test_rounded_point_decimals():
    assert rounded_point_decimals(Point(1.23456, -1.23456), 2) == Point(1.23, -1.23)


def test_rounded_point_decimals_half_away_from_zero():
    assert rounded_point_decimals(Point(0.5, -0.5), 0) == Point(1.0, -1.0)