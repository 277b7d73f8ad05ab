import math

import pytest

from cartogram.geometry import Point
from cartogram.smyth import (
    point_after_smyth_craster_projection,
    point_before_smyth_craster_projection,
)

HALF_WIDTH = math.sqrt(2.0 * math.pi)
HALF_HEIGHT = math.sqrt(0.5 * math.pi)


def to_grid(p, lx, ly):
    return Point(
        (p.x + HALF_WIDTH) / (2 * HALF_WIDTH) * lx,
        (p.y + HALF_HEIGHT) / (2 * HALF_HEIGHT) * ly,
    )


def test_world_corners_match_bounding_box():
    low = point_after_smyth_craster_projection(Point(-180.0, -90.0))
    high = point_after_smyth_craster_projection(Point(180.0, 90.0))
    assert low.x == pytest.approx(-2.50663, abs=1e-5)
    assert low.y == pytest.approx(-1.25331, abs=1e-5)
    assert high.x == pytest.approx(2.50663, abs=1e-5)
    assert high.y == pytest.approx(1.25331, abs=1e-5)


def test_origin_stays_fixed():
    assert point_after_smyth_craster_projection(Point(0.0, 0.0)) == Point(0.0, 0.0)


def test_aspect_ratio_is_two_to_one():
    high = point_after_smyth_craster_projection(Point(180.0, 90.0))
    assert high.x / high.y == pytest.approx(2.0)


@pytest.mark.parametrize(
    "lon, lat", [(0.0, 0.0), (-120.5, 45.0), (179.0, -89.0), (33.3, 12.7)]
)
def test_round_trip(lon, lat):
    lx, ly = 512, 256
    projected = to_grid(point_after_smyth_craster_projection(Point(lon, lat)), lx, ly)
    back = point_before_smyth_craster_projection(projected, lx, ly)
    assert back.x == pytest.approx(lon)
    assert back.y == pytest.approx(lat)


def test_grid_corners_revert_to_world_corners():
    lx, ly = 64, 32
    assert point_before_smyth_craster_projection(Point(0, 0), lx, ly) == (
        Point(-180.0, -90.0)
    )
    assert point_before_smyth_craster_projection(Point(lx, ly), lx, ly) == (
        Point(180.0, 90.0)
    )


def test_outside_grid_raises():
    with pytest.raises(ValueError):
        point_before_smyth_craster_projection(Point(1.0, 40.0), 64, 32)