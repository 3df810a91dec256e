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
from time import process_time
from typing import Tuple

from raycore.canvas import Canvas
from raycore.colors import Color, WHITE
from raycore.geometry import Point
from raycore.lights import PointLight
from raycore.materials import Material
from raycore.ray import Ray
from raycore.shapes import Sphere
from raycore.world import World

import click


@dataclass
class Parameters:
    """Settings for the «render» command

    The eye sits at `eye_z` on the Z axis and looks towards +Z; the image is the
    projection of the scene onto a square wall of side `wall_size` placed at `wall_z`."""
    width: int = 100
    eye_z: float = -5.0
    wall_z: float = 10.0
    wall_size: float = 7.0
    sphere_color: Tuple[float, float, float] = (1.0, 0.2, 1.0)
    light_position: Tuple[float, float, float] = (-10.0, 10.0, -10.0)


def build_world(params: Parameters) -> World:
    """Create a world with one unit sphere at the origin and one white point light"""
    world = World()
    world.add_shape(Sphere(material=Material(color=Color(*params.sphere_color))))
    world.add_light(PointLight(position=Point(*params.light_position), intensity=WHITE))
    return world


def render(params: Parameters, world: World, callback=None) -> Canvas:
    """Shoot one ray through each pixel of the wall and return the resulting image"""
    canvas = Canvas(params.width, params.width)
    eye = Point(0.0, 0.0, params.eye_z)
    pixel_size = params.wall_size / params.width
    half = params.wall_size / 2

    for row in range(canvas.height):
        world_y = half - pixel_size * (row + 0.5)
        for col in range(canvas.width):
            world_x = -half + pixel_size * (col + 0.5)
            target = Point(world_x, world_y, params.wall_z)
            ray = Ray(origin=eye, dir=(target - eye).normalize())
            canvas.set_pixel(col, row, world.color_at(ray))

        if callback:
            callback(row)

    return canvas


@click.group()
def cli():
    pass


@click.command("render")
@click.option("--width", type=int, default=100, help="Width and height of the (square) image to render")
@click.option(
    "--sphere-color",
    type=(float, float, float),
    default=(1.0, 0.2, 1.0),
    help="RGB color of the sphere, e.g. «--sphere-color 1 0.2 1»",
)
@click.option(
    "--light-position",
    type=(float, float, float),
    default=(-10.0, 10.0, -10.0),
    help="Position of the point light, e.g. «--light-position -10 10 -10»",
)
@click.option(
    "--ppm-output",
    type=str,
    default="output.ppm",
    help="Name of the PPM file to create",
)
@click.option(
    "--png-output",
    type=str,
    default=None,
    help="Name of the PNG file to create (optional)",
)
def render_cmd(width, sphere_color, light_position, ppm_output, png_output):
    if width <= 0:
        raise click.BadParameter(f"the width must be positive, got {width}", param_hint="--width")

    params = Parameters(width=width, sphere_color=sphere_color, light_position=light_position)
    world = build_world(params)
    print(f"Generating a {width}×{width} image")

    def print_progress(row):
        print(f"Rendering row {row + 1}/{width}\r", end="")

    start_time = process_time()
    canvas = render(params, world, callback=print_progress)
    elapsed_time = process_time() - start_time

    print(f"Rendering completed in {elapsed_time:.1f} s")

    with open(ppm_output, "wb") as outf:
        canvas.write_ppm(outf)
    print(f"PPM image written to {ppm_output}")

    if png_output:
        with open(png_output, "wb") as outf:
            canvas.write_ldr_image(outf, "PNG")
        print(f"PNG image written to {png_output}")


cli.add_command(render_cmd)

if __name__ == "__main__":
    cli()
