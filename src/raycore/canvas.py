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

from raycore.colors import Color

PPM_MAX_VALUE = 255
PPM_MAX_LINE_LENGTH = 70


def _to_byte(x: float) -> int:
    """Convert a color component into an integer in the range [0, 255]

    Values outside [0, 1] are clamped."""
    if x >= 1.0:
        return PPM_MAX_VALUE
    elif x <= 0.0:
        return 0

    return int(x * PPM_MAX_VALUE + 0.5)


class Canvas:
    """A 2D image made of :class:`.Color` pixels

    This class has the following members:

    -   `width` (int): number of columns in the 2D matrix of colors
    -   `height` (int): number of rows in the 2D matrix of colors
    -   `pixels` (array of `Color`): the 2D matrix, represented as a 1D array
    """

    def __init__(self, width=0, height=0):
        """Create a black image with the specified resolution"""
        (self.width, self.height) = (width, height)
        self.pixels = [Color() for i in range(self.width * self.height)]

    def valid_coordinates(self, x, y):
        """Return True if ``(x, y)`` are coordinates within the 2D matrix"""
        return ((x >= 0) and (x < self.width) and
                (y >= 0) and (y < self.height))

    def pixel_offset(self, x, y):
        """Return the position in the 1D array of the specified pixel"""
        return y * self.width + x

    def get_pixel(self, x, y):
        """Return the `Color` value for a pixel in the image

        The pixel at the top-left corner has coordinates (0, 0)."""
        assert self.valid_coordinates(x, y), f"invalid pixel coordinates ({x}, {y})"
        return self.pixels[self.pixel_offset(x, y)]

    def set_pixel(self, x, y, new_color):
        """Set the new color for a pixel in the image

        The pixel at the top-left corner has coordinates (0, 0)."""
        assert self.valid_coordinates(x, y), f"invalid pixel coordinates ({x}, {y})"
        self.pixels[self.pixel_offset(x, y)] = new_color

    def write_ppm(self, stream):
        """Write the image in a plain-text (P3) PPM file

        The `stream` parameter must be a binary I/O stream. Each row of the image starts on
        a new line; rows are wrapped so that no line is longer than 70 characters."""
        header = f"P3\n{self.width} {self.height}\n{PPM_MAX_VALUE}\n"
        stream.write(header.encode("ascii"))

        for y in range(self.height):
            line = ""
            for x in range(self.width):
                color = self.get_pixel(x, y)
                for component in (color.r, color.g, color.b):
                    value = str(_to_byte(component))
                    if line and len(line) + 1 + len(value) > PPM_MAX_LINE_LENGTH:
                        stream.write(f"{line}\n".encode("ascii"))
                        line = ""

                    line = f"{line} {value}" if line else value

            stream.write(f"{line}\n".encode("ascii"))

    def write_ldr_image(self, stream, format, gamma=1.0):
        """Save the image in a LDR format supported by Pillow (e.g., PNG)

        Color components are clamped to [0, 1] before applying the gamma correction."""
        from PIL import Image
        img = Image.new("RGB", (self.width, self.height))

        for y in range(self.height):
            for x in range(self.width):
                cur_color = self.get_pixel(x, y)
                img.putpixel(xy=(x, y), value=tuple(
                    int(255 * math.pow(min(max(c, 0.0), 1.0), 1 / gamma))
                    for c in (cur_color.r, cur_color.g, cur_color.b)
                ))

        img.save(stream, format=format)
