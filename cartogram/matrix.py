"""3x3 matrices for affine transformations of the plane."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from .geometry import Point

DBL_EPSILON = sys.float_info.epsilon


class SingularMatrixError(ArithmeticError):
    """Raised when inverting a (nearly) singular matrix."""


@dataclass(frozen=True)
class Matrix:
    """A 3x3 matrix; the default is the identity."""

    p11: float = 1.0
    p12: float = 0.0
    p13: float = 0.0
    p21: float = 0.0
    p22: float = 1.0
    p23: float = 0.0
    p31: float = 0.0
    p32: float = 0.0
    p33: float = 1.0

    @classmethod
    def from_points(cls, a: Point, b: Point, c: Point) -> Matrix:
        """Matrix whose columns are the homogeneous coordinates of a, b, c."""
        return cls(a.x, b.x, c.x, a.y, b.y, c.y, 1.0, 1.0, 1.0)

    def scaled(self, multiplier: float) -> Matrix:
        """Every entry multiplied by multiplier."""
        return Matrix(
            self.p11 * multiplier,
            self.p12 * multiplier,
            self.p13 * multiplier,
            self.p21 * multiplier,
            self.p22 * multiplier,
            self.p23 * multiplier,
            self.p31 * multiplier,
            self.p32 * multiplier,
            self.p33 * multiplier,
        )

    def det(self) -> float:
        return (
            self.p11 * (self.p22 * self.p33 - self.p23 * self.p32)
            - self.p12 * (self.p21 * self.p33 - self.p23 * self.p31)
            + self.p13 * (self.p21 * self.p32 - self.p22 * self.p31)
        )

    def adjugate(self) -> Matrix:
        return Matrix(
            p11=self.p22 * self.p33 - self.p23 * self.p32,
            p12=-(self.p12 * self.p33 - self.p13 * self.p32),
            p13=self.p12 * self.p23 - self.p13 * self.p22,
            p21=-(self.p21 * self.p33 - self.p23 * self.p31),
            p22=self.p11 * self.p33 - self.p13 * self.p31,
            p23=-(self.p11 * self.p23 - self.p13 * self.p21),
            p31=self.p21 * self.p32 - self.p22 * self.p31,
            p32=-(self.p11 * self.p32 - self.p12 * self.p31),
            p33=self.p11 * self.p22 - self.p12 * self.p21,
        )

    def inverse(self) -> Matrix:
        """The inverse matrix; raises SingularMatrixError if singular."""
        determinant = self.det()
        if abs(determinant) < DBL_EPSILON:
            raise SingularMatrixError(
                "matrix inversion for (nearly) singular input"
            )
        return self.adjugate().scaled(1.0 / determinant)

    def multiplied_with(self, other: Matrix) -> Matrix:
        """The product self * other."""
        a, b = self, other
        return Matrix(
            a.p11 * b.p11 + a.p12 * b.p21 + a.p13 * b.p31,
            a.p11 * b.p12 + a.p12 * b.p22 + a.p13 * b.p32,
            a.p11 * b.p13 + a.p12 * b.p23 + a.p13 * b.p33,
            a.p21 * b.p11 + a.p22 * b.p21 + a.p23 * b.p31,
            a.p21 * b.p12 + a.p22 * b.p22 + a.p23 * b.p32,
            a.p21 * b.p13 + a.p22 * b.p23 + a.p23 * b.p33,
            a.p31 * b.p11 + a.p32 * b.p21 + a.p33 * b.p31,
            a.p31 * b.p12 + a.p32 * b.p22 + a.p33 * b.p32,
            a.p31 * b.p13 + a.p32 * b.p23 + a.p33 * b.p33,
        )

    def __matmul__(self, other: Matrix) -> Matrix:
        return self.multiplied_with(other)

    def transformed_point(self, point: Point) -> Point:
        """Apply the affine part of the matrix to a point."""
        return Point(
            self.p11 * point.x + self.p12 * point.y + self.p13,
            self.p21 * point.x + self.p22 * point.y + self.p23,
        )