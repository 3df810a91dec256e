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

from typing import List

from raycore.colors import Color, BLACK
from raycore.geometry import Point
from raycore.intersections import ComputedIntersection, Intersections
from raycore.lights import PointLight
from raycore.ray import Ray
from raycore.shapes import Shape


class World:
    """A class holding a list of shapes and point lights, which make a «world»

    You can add shapes and lights using :meth:`.World.add_shape` and :meth:`.World.add_light`.
    Typically, you call :meth:`.World.color_at` to compute the color seen along a ray.
    """

    shapes: List[Shape]
    point_lights: List[PointLight]

    def __init__(self, background_color: Color = BLACK):
        self.shapes = []
        self.point_lights = []
        self.background_color = background_color

    def add_shape(self, shape: Shape):
        """Append a new shape to this world"""
        self.shapes.append(shape)

    def add_light(self, light: PointLight):
        """Append a new point light to this world"""
        self.point_lights.append(light)

    def intersect(self, ray: Ray) -> Intersections:
        """Return all the intersections between `ray` and the shapes, sorted by distance"""
        result = Intersections()
        for shape in self.shapes:
            result.merge(shape.intersect(ray))

        return result

    def is_shadowed(self, point: Point, light: PointLight) -> bool:
        """Return True if some shape lies between `point` and `light`

        A point placed exactly on the light is never in shadow."""
        direction = light.position - point
        distance = direction.norm()
        if distance == 0.0:
            return False

        hit = self.intersect(Ray(origin=point, dir=direction.normalize())).hit()
        return (hit is not None) and (hit.t < distance)

    def shade_hit(self, computed: ComputedIntersection) -> Color:
        """Sum the contribution of every light to the color of a hit point"""
        result = BLACK
        for light in self.point_lights:
            shadowed = self.is_shadowed(computed.over_point, light)
            result += computed.shade(light, shadowed)

        return result

    def color_at(self, ray: Ray) -> Color:
        """Return the color seen along `ray`, or the background color if nothing is hit"""
        hit = self.intersect(ray).hit()
        if not hit:
            return self.background_color

        return self.shade_hit(hit.precompute())
