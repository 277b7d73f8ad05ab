import pytest

from cartogram.geometry import (
    Bbox,
    Point,
    Polygon,
    PolygonWithHoles,
    pwh_area,
    pwh_is_larger,
)


def _rectangle(x0, y0, x1, y1):
    return Polygon([(x0, y0), (x1, y0), (x1, y1), (x0, y1)])


def test_rectangle_area():
    assert _rectangle(0, 0, 2, 3).area() == pytest.approx(6.0)


def test_reversed_ring_has_negated_area():
    poly = _rectangle(1, 1, 4, 5)
    assert poly.reversed().area() == pytest.approx(-poly.area())


def test_reversed_keeps_first_vertex_and_is_involution():
    poly = _rectangle(0, 0, 2, 2)
    rev = poly.reversed()
    assert rev[0] == poly[0]
    assert rev.reversed() == poly
    assert list(rev)[1:] == list(reversed(list(poly)[1:]))


def test_vertices_are_points():
    poly = Polygon([(0, 0), (1, 0), (0, 1)])
    assert poly[1] == Point(1, 0)
    assert len(poly) == 3


def test_degenerate_polygon_area_is_zero():
    assert Polygon([(0, 0), (1, 1)]).area() == 0


def test_bbox_from_vertices():
    poly = Polygon([(3, -1), (7, 2), (-2, 5)])
    assert poly.bbox() == Bbox(-2, -1, 7, 5)


def test_empty_polygon_bbox_raises():
    with pytest.raises(ValueError):
        Polygon().bbox()


def test_pwh_bbox_is_outer_bbox():
    outer = _rectangle(0, 0, 10, 8)
    hole = _rectangle(2, 2, 3, 3).reversed()
    pwh = PolygonWithHoles(outer, [hole])
    assert pwh.bbox() == outer.bbox()


def test_pwh_area_subtracts_clockwise_holes():
    outer = _rectangle(0, 0, 10, 10)
    hole = _rectangle(2, 2, 4, 4).reversed()
    pwh = PolygonWithHoles(outer, [hole])
    assert pwh_area(pwh) == pytest.approx(outer.area() + hole.area())
    assert pwh_area(pwh) < outer.area()


def test_pwh_area_without_holes():
    outer = _rectangle(0, 0, 5, 5)
    assert pwh_area(PolygonWithHoles(outer)) == pytest.approx(outer.area())


def test_pwh_is_larger():
    big = PolygonWithHoles(_rectangle(0, 0, 10, 10))
    small = PolygonWithHoles(_rectangle(0, 0, 1, 1))
    assert pwh_is_larger(big, small)
    assert not pwh_is_larger(small, big)
    assert not pwh_is_larger(big, big)