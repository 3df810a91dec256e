# -*- encoding: utf-8 -*-

from math import sin, cos, radians
from typing import List

from raycore.geometry import Vec, Point, Normal
from raycore.misc import are_close


Matrix = List[List[float]]


def _matr_prod(a: Matrix, b: Matrix) -> Matrix:
    result = [[0.0 for i in range(4)] for j in range(4)]
    for i in range(4):
        for j in range(4):
            for k in range(4):
                result[i][j] += a[i][k] * b[k][j]

    return result


def _are_matr_close(m1: Matrix, m2: Matrix, epsilon=1e-6) -> bool:
    for i in range(4):
        for j in range(4):
            if not are_close(m1[i][j], m2[i][j], epsilon=epsilon):
                return False

    return True


def _matr_inverse(m: Matrix) -> Matrix:
    """Invert a 4×4 matrix using Gauss-Jordan elimination with partial pivoting

    Raise a ``ValueError`` if the matrix is singular."""
    work = [list(row) + [1.0 if i == j else 0.0 for j in range(4)] for i, row in enumerate(m)]

    for col in range(4):
        pivot_row = max(range(col, 4), key=lambda r: abs(work[r][col]))
        if abs(work[pivot_row][col]) < 1e-12:
            raise ValueError("the matrix is singular and cannot be inverted")

        work[col], work[pivot_row] = work[pivot_row], work[col]

        pivot = work[col][col]
        work[col] = [x / pivot for x in work[col]]

        for row in range(4):
            if row == col:
                continue

            factor = work[row][col]
            if factor != 0.0:
                work[row] = [x - factor * y for (x, y) in zip(work[row], work[col])]

    return [row[4:] for row in work]


IDENTITY_MATR4x4 = [[1.0, 0.0, 0.0, 0.0],
                    [0.0, 1.0, 0.0, 0.0],
                    [0.0, 0.0, 1.0, 0.0],
                    [0.0, 0.0, 0.0, 1.0]]


class Transformation:
    """An invertible affine transformation.

    Both the 4×4 matrix `m` and its inverse `invm` are kept, so that asking for
    the inverse transformation never requires a matrix inversion. Use the
    factory functions in this module (:func:`.translation`, :func:`.scaling`,
    …) or :meth:`.Transformation.from_matrix` to build one.
    """

    def __init__(self, m=IDENTITY_MATR4x4, invm=IDENTITY_MATR4x4):
        self.m = m
        self.invm = invm

    @classmethod
    def from_matrix(cls, m: Matrix):
        """Build a transformation from a generic 4×4 matrix, computing its inverse"""
        return cls(m=[list(row) for row in m], invm=_matr_inverse(m))

    def __mul__(self, other):
        if isinstance(other, Vec):
            row0, row1, row2, _ = self.m
            return Vec(x=other.x * row0[0] + other.y * row0[1] + other.z * row0[2],
                       y=other.x * row1[0] + other.y * row1[1] + other.z * row1[2],
                       z=other.x * row2[0] + other.y * row2[1] + other.z * row2[2])
        elif isinstance(other, Point):
            row0, row1, row2, row3 = self.m
            p = Point(x=other.x * row0[0] + other.y * row0[1] + other.z * row0[2] + row0[3],
                      y=other.x * row1[0] + other.y * row1[1] + other.z * row1[2] + row1[3],
                      z=other.x * row2[0] + other.y * row2[1] + other.z * row2[2] + row2[3])
            w = other.x * row3[0] + other.y * row3[1] + other.z * row3[2] + row3[3]

            if w == 1.0:
                return p
            else:
                return Point(p.x / w, p.y / w, p.z / w)
        elif isinstance(other, Normal):
            # Normals follow the transpose of the inverse matrix
            row0, row1, row2, _ = self.invm
            return Normal(x=other.x * row0[0] + other.y * row1[0] + other.z * row2[0],
                          y=other.x * row0[1] + other.y * row1[1] + other.z * row2[1],
                          z=other.x * row0[2] + other.y * row1[2] + other.z * row2[2])
        elif isinstance(other, Transformation):
            result_m = _matr_prod(self.m, other.m)
            result_invm = _matr_prod(other.invm, self.invm)  # Reverse order! (A B)^-1 = B^-1 A^-1
            return Transformation(m=result_m, invm=result_invm)
        else:
            raise TypeError(f"Invalid type {type(other)} multiplied to a Transformation object")

    def is_consistent(self):
        """Return True if `invm` is really the inverse of `m`"""
        prod = _matr_prod(self.m, self.invm)
        return _are_matr_close(prod, IDENTITY_MATR4x4)

    def __repr__(self):
        fmtstring = "   [{0:6.3e} {1:6.3e} {2:6.3e} {3:6.3e}],\n"
        return "[\n" + "".join(fmtstring.format(*row) for row in self.m) + "]"

    def is_close(self, other):
        """Check if `other` represents the same transformation"""
        return _are_matr_close(self.m, other.m) and _are_matr_close(self.invm, other.invm)

    def inverse(self):
        """Return the inverse transformation (no matrix inversion is performed)"""
        return Transformation(m=self.invm, invm=self.m)


IDENTITY = Transformation()


def translation(vec: Vec):
    """Return a :class:`.Transformation` shifting points by `vec`"""
    return Transformation(
        m=[[1.0, 0.0, 0.0, vec.x],
           [0.0, 1.0, 0.0, vec.y],
           [0.0, 0.0, 1.0, vec.z],
           [0.0, 0.0, 0.0, 1.0]],
        invm=[[1.0, 0.0, 0.0, -vec.x],
              [0.0, 1.0, 0.0, -vec.y],
              [0.0, 0.0, 1.0, -vec.z],
              [0.0, 0.0, 0.0, 1.0]],
    )


def scaling(vec: Vec):
    """Return a :class:`.Transformation` scaling by `vec.x`, `vec.y`, `vec.z` along the three axes

    None of the three factors can be zero."""
    return Transformation(
        m=[[vec.x, 0.0, 0.0, 0.0],
           [0.0, vec.y, 0.0, 0.0],
           [0.0, 0.0, vec.z, 0.0],
           [0.0, 0.0, 0.0, 1.0]],
        invm=[[1 / vec.x, 0.0, 0.0, 0.0],
              [0.0, 1 / vec.y, 0.0, 0.0],
              [0.0, 0.0, 1 / vec.z, 0.0],
              [0.0, 0.0, 0.0, 1.0]],
    )


def _rotation(angle_deg: float, axis: int):
    # Rotation matrices are orthogonal: the inverse is the transpose
    sinang, cosang = sin(radians(angle_deg)), cos(radians(angle_deg))
    i, j = [k for k in range(3) if k != axis]
    if axis == 1:
        # Keep the right-hand rule around Y
        i, j = j, i

    m = [list(row) for row in IDENTITY_MATR4x4]
    m[i][i], m[i][j] = cosang, -sinang
    m[j][i], m[j][j] = sinang, cosang

    invm = [[m[col][row] for col in range(4)] for row in range(4)]
    return Transformation(m=m, invm=invm)


def rotation_x(angle_deg: float):
    """Return a rotation around the X axis; `angle_deg` follows the right-hand rule"""
    return _rotation(angle_deg, axis=0)


def rotation_y(angle_deg: float):
    """Return a rotation around the Y axis; `angle_deg` follows the right-hand rule"""
    return _rotation(angle_deg, axis=1)


def rotation_z(angle_deg: float):
    """Return a rotation around the Z axis; `angle_deg` follows the right-hand rule"""
    return _rotation(angle_deg, axis=2)


def shearing(xy=0.0, xz=0.0, yx=0.0, yz=0.0, zx=0.0, zy=0.0):
    """Return a shearing transformation

    Each parameter tells how much a coordinate moves in proportion to another one,
    e.g., `xy` is the shift along X caused by the Y coordinate."""
    return Transformation.from_matrix(
        [[1.0, xy, xz, 0.0],
         [yx, 1.0, yz, 0.0],
         [zx, zy, 1.0, 0.0],
         [0.0, 0.0, 0.0, 1.0]],
    )
