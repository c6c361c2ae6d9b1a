"""Off-screen 32-bit pixel images."""

from __future__ import annotations

import sys
from collections.abc import Sequence

_MASK32 = 0xFFFFFFFF


def good_color(color: int, depth: int, decrgb: Sequence[int]) -> int:
    """Convert 0xRRGGBB to a pixel value for a display of the given depth.

    ``decrgb`` holds, for red, green and blue in turn, the shift of the
    channel and its width in bits. Depths of 24 and more use the colour as is.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - decrgb[1])) << decrgb[0])
        + ((green >> (16 - decrgb[3])) << decrgb[2])
        + ((blue >> (16 - decrgb[5])) << decrgb[4])
    )


class Image:
    """A zero-filled image of 32-bit pixels stored row by row."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        self.width = width
        self.height = height
        self.bpp = 32
        self.size_line = width * 4
        self.endian = 0 if sys.byteorder == "little" else 1
        self.data = bytearray(self.size_line * height)
        self._pixels = memoryview(self.data).cast("I")

    def _index(self, y: int, x: int) -> int:
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise IndexError(f"pixel ({y}, {x}) outside {self.width}x{self.height} image")
        return y * self.width + x

    def put_pixel(self, y: int, x: int, color: int) -> None:
        """Store a colour at row y, column x."""
        self._pixels[self._index(y, x)] = color & _MASK32

    def get_pixel(self, y: int, x: int) -> int:
        """Return the stored value at row y, column x."""
        return self._pixels[self._index(y, x)]

    def draw_vertical_line(self, x: int, top: int, bottom: int, color: int) -> None:
        """Fill column x from row top to row bottom, both included."""
        for y in range(top, bottom + 1):
            self.put_pixel(y, x, color)

    def to_rgb_bytes(self) -> bytes:
        """Return the pixels as packed R, G, B bytes, row by row."""
        count = self.width * self.height
        out = bytearray(count * 3)
        if self.endian == 0:
            red, green, blue = 2, 1, 0
        else:
            red, green, blue = 1, 2, 3
        out[0::3] = self.data[red::4]
        out[1::3] = self.data[green::4]
        out[2::3] = self.data[blue::4]
        return bytes(out)