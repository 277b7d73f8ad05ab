from dataclasses import astuple

import pytest

from cartogram.geometry import Point
from cartogram.matrix import Matrix, SingularMatrixError

IDENTITY = astuple(Matrix())


def _sample():
    return Matrix.from_points(Point(1, 2), Point(4, -1), Point(-3, 5))


def test_default_is_identity_with_unit_determinant():
    m = Matrix()
    assert m.det() == 1.0
    assert m.transformed_point(Point(3.5, -2.0)) == Point(3.5, -2.0)


def test_from_points_places_columns():
    a, b, c = Point(1, 2), Point(3, 4), Point(5, 6)
    m = Matrix.from_points(a, b, c)
    assert (m.p11, m.p21, m.p31) == (a.x, a.y, 1)
    assert (m.p12, m.p22, m.p32) == (b.x, b.y, 1)
    assert (m.p13, m.p23, m.p33) == (c.x, c.y, 1)


def test_scaled_multiplies_each_entry():
    m = Matrix().scaled(3.0)
    assert m.p11 == 3.0 and m.p22 == 3.0 and m.p33 == 3.0
    assert m.p12 == 0.0


def test_inverse_times_matrix_is_identity():
    m = _sample()
    assert astuple(m @ m.inverse()) == pytest.approx(IDENTITY)
    assert astuple(m.inverse().multiplied_with(m)) == pytest.approx(IDENTITY)


def test_adjugate_gives_determinant_times_identity():
    m = _sample()
    product = m.multiplied_with(m.adjugate())
    expected = astuple(Matrix().scaled(m.det()))
    assert astuple(product) == pytest.approx(expected)


def test_singular_matrix_raises():
    collinear = Matrix.from_points(Point(0, 0), Point(1, 1), Point(2, 2))
    with pytest.raises(SingularMatrixError):
        collinear.inverse()


def test_affine_transform_maps_triangle_vertices():
    a, b, c = Point(0, 0), Point(1, 0), Point(0, 1)
    p, q, r = Point(2, 3), Point(4, 3), Point(2, 5)
    transform = Matrix.from_points(p, q, r).multiplied_with(
        Matrix.from_points(a, b, c).inverse()
    )
    for src, dst in ((a, p), (b, q), (c, r)):
        assert transform.transformed_point(src) == pytest.approx(dst)