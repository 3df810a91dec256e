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

from dataclasses import dataclass
from math import pow

from raycore.colors import Color, BLACK, WHITE
from raycore.geometry import Point, Vec
from raycore.materials import Material


def reflect(in_dir: Vec, normal: Vec) -> Vec:
    """Reflect `in_dir` around `normal`, which must be normalized"""
    return in_dir - normal * (2.0 * in_dir.dot(normal))


@dataclass(frozen=True)
class PointLight:
    """A point light

    This class holds information about a point light (a Dirac's delta in the rendering equation). The class has
    the following fields:

    -   `position`: a :class:`Point` object holding the position of the point light in 3D space
    -   `intensity`: the color of the point light (an instance of :class:`.Color`)"""

    position: Point
    intensity: Color = WHITE

    def shade_phong(self, material: Material, point: Point, eyev: Vec, normal: Vec, in_shadow: bool) -> Color:
        """Compute the color of `point` using the Phong reflection model

        The vectors `eyev` (pointing towards the observer) and `normal` must be normalized. If
        `in_shadow` is True, only the ambient term is returned."""
        effective_color = material.color * self.intensity
        ambient = effective_color * material.ambient

        if in_shadow:
            return ambient

        lightv = (self.position - point).normalize()
        light_dot_normal = lightv.dot(normal)
        if light_dot_normal < 0.0:
            # The light is on the other side of the surface
            return ambient

        diffuse = effective_color * (material.diffuse * light_dot_normal)

        reflect_dot_eye = reflect(-lightv, normal).dot(eyev)
        if reflect_dot_eye <= 0.0:
            specular = BLACK
        else:
            factor = pow(reflect_dot_eye, material.shininess)
            specular = self.intensity * (material.specular * factor)

        return ambient + diffuse + specular
