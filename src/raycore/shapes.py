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

from math import sqrt
from typing import List, Optional

from raycore.geometry import Point, Vec, Normal, ORIGIN
from raycore.intersections import Intersection, Intersections
from raycore.materials import Material
from raycore.ray import Ray
from raycore.transformations import Transformation, IDENTITY


class Shape:
    """A generic 3D shape

    This is an abstract class, and you should only use it to derive
    concrete classes. Be sure to redefine the methods
    :meth:`.Shape.local_intersect` and :meth:`.Shape.local_normal_at`,
    which work in the shape's own coordinate system: the conversion
    from and to world coordinates is done once here for every shape.

    """

    def __init__(self, transformation: Transformation = IDENTITY, material: Material = Material()):
        """Create a shape, potentially associating a transformation to it"""
        self.transformation = transformation
        self.material = material

    def local_intersect(self, local_ray: Ray) -> Optional[List[float]]:
        """Return the values of `t` where `local_ray` crosses the shape, or ``None``"""
        raise NotImplementedError(
            "Shape.local_intersect is an abstract method and cannot be called directly"
        )

    def local_normal_at(self, local_point: Point) -> Vec:
        """Return the outward normal at `local_point`, in the shape's coordinate system"""
        raise NotImplementedError(
            "Shape.local_normal_at is an abstract method and cannot be called directly"
        )

    def intersect(self, world_ray: Ray) -> Intersections:
        """Compute all the intersections between `world_ray` and this shape

        The ray is brought into the shape's coordinate system before calling
        :meth:`.Shape.local_intersect`; each resulting `t` is paired with this shape
        and with the untransformed `world_ray`. If the ray misses the shape, the
        result is an empty :class:`.Intersections` object."""
        local_ray = world_ray.transform(self.transformation.inverse())
        ts = self.local_intersect(local_ray)
        if not ts:
            return Intersections()

        return Intersections([Intersection(t=t, shape=self, ray=world_ray) for t in ts])

    def normal_at(self, world_point: Point) -> Vec:
        """Return the normalized outward normal at `world_point`"""
        local_point = self.transformation.inverse() * world_point
        local_normal = self.local_normal_at(local_point)
        world_normal = self.transformation * Normal(local_normal.x, local_normal.y, local_normal.z)
        return world_normal.to_vec().normalize()


class Sphere(Shape):
    """A 3D unit sphere centered on the origin of the axes"""

    def __init__(self, transformation: Transformation = IDENTITY, material: Material = Material()):
        """Create a unit sphere, potentially associating a transformation to it"""
        super().__init__(transformation, material)

    def local_intersect(self, local_ray: Ray) -> Optional[List[float]]:
        """Solve the quadratic equation for the unit sphere

        Return both roots, even when they coincide (tangent ray), or ``None`` if the
        ray misses the sphere. A ray with a null or NaN direction has no roots."""
        sphere_to_ray = local_ray.origin - ORIGIN
        a = local_ray.dir.squared_norm()
        b = 2.0 * local_ray.dir.dot(sphere_to_ray)
        c = sphere_to_ray.squared_norm() - 1.0

        delta = b * b - 4.0 * a * c
        # "not >=" also rejects a NaN discriminant
        if a == 0.0 or not delta >= 0.0:
            return None

        sqrt_delta = sqrt(delta)
        return [(-b - sqrt_delta) / (2.0 * a), (-b + sqrt_delta) / (2.0 * a)]

    def local_normal_at(self, local_point: Point) -> Vec:
        return local_point - ORIGIN
