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

from __future__ import annotations

from dataclasses import dataclass
from math import isnan
from typing import Iterator, List, Optional, TYPE_CHECKING

from raycore.colors import Color
from raycore.geometry import Point, Vec
from raycore.lights import PointLight
from raycore.ray import Ray

if TYPE_CHECKING:
    from raycore.shapes import Shape


# How much the shading point is moved along the normal to avoid acne
EPSILON = 1e-6


class DegenerateNormalError(ArithmeticError):
    """Raised when the normal at a hit point cannot be oriented against the eye vector

    This happens only if a NaN has crept into the normal or into the ray, and it always
    signals a bug upstream (e.g., a singular transformation)."""

    def __init__(self, error_message):
        super().__init__(error_message)


@dataclass(frozen=True)
class Intersection:
    """
    A ray-shape intersection

    The fields are the following:

    -   `t`: distance from the origin of the ray, in units of the length of `ray.dir`
    -   `shape`: the :class:`.Shape` that was hit (a reference, never a copy)
    -   `ray`: the :class:`.Ray` in world coordinates that produced the intersection
    """
    t: float
    shape: "Shape"
    ray: Ray

    def __post_init__(self):
        assert not isnan(self.t), "an intersection cannot be placed at t=NaN"

    def precompute(self) -> ComputedIntersection:
        """Compute the shading geometry at the intersection point

        If the observer is inside the shape, the normal is flipped so that it always
        points towards the eye."""
        target = self.ray.at(self.t)
        eyev = -self.ray.dir
        normal = self.shape.normal_at(target)

        normal_dot_eye = normal.dot(eyev)
        if normal_dot_eye < 0.0:
            inside = True
            normal = -normal
        elif normal_dot_eye >= 0.0:
            inside = False
        else:
            raise DegenerateNormalError(
                f"unable to orient normal {normal} against eye vector {eyev} at {target}"
            )

        return ComputedIntersection(
            t=self.t,
            shape=self.shape,
            ray=self.ray,
            target=target,
            eyev=eyev,
            normal=normal,
            inside=inside,
            over_point=target + normal * EPSILON,
        )


@dataclass(frozen=True)
class ComputedIntersection:
    """
    The shading geometry associated with an :class:`.Intersection`

    Besides the fields of the intersection it comes from (`t`, `shape`, `ray`), it holds:

    -   `target`: the :class:`.Point` where the ray hits the surface
    -   `eyev`: the direction pointing back towards the observer
    -   `normal`: the normalized normal, always on the same side as `eyev`
    -   `inside`: True if the ray originated inside the shape
    -   `over_point`: `target` moved by a tiny amount along `normal`; use it as the origin of
        secondary rays and for shading, so that the surface does not shadow itself
    """
    t: float
    shape: "Shape"
    ray: Ray

    target: Point
    eyev: Vec
    normal: Vec
    inside: bool
    over_point: Point

    def shade(self, light: PointLight, shadowed: bool) -> Color:
        """Return the color seen by the observer at this point, lit by `light`"""
        return light.shade_phong(
            material=self.shape.material,
            point=self.over_point,
            eyev=self.eyev,
            normal=self.normal,
            in_shadow=shadowed,
        )


class Intersections:
    """A list of :class:`.Intersection` objects, always sorted by increasing `t`

    Create an empty list with ``Intersections()``. If you pass a list of intersections, it
    must contain at least one element; it will be sorted.

    Insertion uses a linear scan, which is O(n) per call: this is fine for the few tens of
    intersections a ray collects in a typical scene. Scenes with thousands of objects would
    be better served by a bisection search or by sorting once after appending everything.
    """

    def __init__(self, intersections: Optional[List[Intersection]] = None):
        if intersections is None:
            self._intersections = []
        else:
            assert len(intersections) > 0, "use Intersections() to create an empty list of intersections"
            # sorted() is stable, so equal values of `t` keep their order
            self._intersections = sorted(intersections, key=lambda x: x.t)

    def insert(self, intersection: Intersection):
        """Add `intersection` to the list, keeping it sorted

        If other intersections share the same `t`, the new one is placed after them."""
        for idx, cur in enumerate(self._intersections):
            if intersection.t < cur.t:
                self._intersections.insert(idx, intersection)
                return

        self._intersections.append(intersection)

    def merge(self, other: Intersections):
        """Insert all the intersections in `other` into this list"""
        for intersection in other:
            self.insert(intersection)

    def hit(self) -> Optional[Intersection]:
        """Return the closest intersection with non-negative `t`, or ``None``

        Intersections with `t < 0` lie behind the origin of the ray and are not visible."""
        for intersection in self._intersections:
            if intersection.t >= 0.0:
                return intersection

        return None

    def __getitem__(self, item: int) -> Intersection:
        return self._intersections[item]

    def __len__(self):
        return len(self._intersections)

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._intersections)

    def __repr__(self):
        return f"Intersections({[x.t for x in self._intersections]})"
