# -*- encoding: utf-8 -*-
#
# The MIT License (MIT)
#
# Copyright © 2021 Maurizio Tomasi
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
# documentation files (the “Software”), to deal in the Software without restriction, including without limitation the
# rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all copies or substantial portions of
# the Software. THE SOFTWARE IS PROVIDED “AS IS”, WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT
# LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT
# SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
# IN THE SOFTWARE.

import math
from dataclasses import dataclass

from raycore.misc import are_close


def _are_xyz_close(a, b, epsilon=1e-5):
    # Duck typing: works for any pair of objects with `x`, `y`, `z` fields
    return (are_close(a.x, b.x, epsilon=epsilon) and
            are_close(a.y, b.y, epsilon=epsilon) and
            are_close(a.z, b.z, epsilon=epsilon))


def _add_xyz(a, b, return_type):
    return return_type(a.x + b.x, a.y + b.y, a.z + b.z)


def _sub_xyz(a, b, return_type):
    return return_type(a.x - b.x, a.y - b.y, a.z - b.z)


def _mul_scalar_xyz(scalar, xyz, return_type):
    return return_type(scalar * xyz.x, scalar * xyz.y, scalar * xyz.z)


@dataclass(frozen=True)
class Vec:
    """A 3D vector.

    This class has three floating-point fields: `x`, `y`, and `z`. Vectors are not affected
    by translations."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def is_close(self, other, epsilon=1e-5):
        """Return True if the object and 'other' have roughly the same direction and orientation"""
        assert isinstance(other, Vec)
        return _are_xyz_close(self, other, epsilon=epsilon)

    def __add__(self, other):
        """Sum two vectors, or one vector and one point"""
        if isinstance(other, Vec):
            return _add_xyz(self, other, Vec)
        elif isinstance(other, Point):
            return _add_xyz(self, other, Point)
        else:
            raise TypeError(f"Unable to run Vec.__add__ on a {type(self)} and a {type(other)}.")

    def __sub__(self, other):
        """Subtract one vector from another"""
        if isinstance(other, Vec):
            return _sub_xyz(self, other, Vec)
        else:
            raise TypeError(f"Unable to run Vec.__sub__ on a {type(self)} and a {type(other)}.")

    def __mul__(self, scalar):
        """Compute the product between a vector and a scalar"""
        return _mul_scalar_xyz(scalar=scalar, xyz=self, return_type=Vec)

    def __neg__(self):
        """Return the reversed vector"""
        return Vec(-self.x, -self.y, -self.z)

    def dot(self, other):
        """Compute the dot product between two vectors"""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def squared_norm(self):
        """Return the squared norm (Euclidean length) of a vector

        This is faster than `Vec.norm` if you just need the squared norm."""
        return self.x ** 2 + self.y ** 2 + self.z ** 2

    def norm(self):
        """Return the norm (Euclidean length) of a vector"""
        return math.sqrt(self.squared_norm())

    def normalize(self):
        """Return a vector with the same direction and a norm equal to 1"""
        norm = self.norm()
        return Vec(self.x / norm, self.y / norm, self.z / norm)


@dataclass(frozen=True)
class Point:
    """A point in 3D space

    This class has three floating-point fields: `x`, `y`, and `z`."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def is_close(self, other, epsilon=1e-5):
        """Return True if the object and 'other' have roughly the same position"""
        assert isinstance(other, Point)
        return _are_xyz_close(self, other, epsilon=epsilon)

    def __add__(self, other):
        """Sum a point and a vector"""
        if isinstance(other, Vec):
            return _add_xyz(self, other, Point)
        else:
            raise TypeError(f"Unable to run Point.__add__ on a {type(self)} and a {type(other)}.")

    def __sub__(self, other):
        """Subtract a vector from a point, or compute the vector joining two points"""
        if isinstance(other, Vec):
            return _sub_xyz(self, other, Point)
        elif isinstance(other, Point):
            return _sub_xyz(self, other, Vec)
        else:
            raise TypeError(f"Unable to run __sub__ on a {type(self)} and a {type(other)}.")


@dataclass(frozen=True)
class Normal:
    """A surface normal in 3D space

    This type only exists to pick the right rule when multiplied by a
    :class:`.Transformation`: a normal follows the transpose of the inverse
    matrix, so that it stays perpendicular to the transformed surface. Convert
    it back with :meth:`.Normal.to_vec` for any other use."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_vec(self) -> Vec:
        """Convert a normal into a :class:`Vec` type"""
        return Vec(self.x, self.y, self.z)


ORIGIN = Point(0.0, 0.0, 0.0)

VEC_X = Vec(1.0, 0.0, 0.0)
VEC_Y = Vec(0.0, 1.0, 0.0)
VEC_Z = Vec(0.0, 0.0, 1.0)
