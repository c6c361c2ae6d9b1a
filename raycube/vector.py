"""Two-dimensional vectors in (y, x) order."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vec:
    """An immutable 2D vector whose first component is y."""

    y: float = 0.0
    x: float = 0.0

    def __add__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.y + other.y, self.x + other.x)

    def __mul__(self, num: float) -> Vec:
        if isinstance(num, Vec):
            return NotImplemented
        return Vec(self.y * num, self.x * num)

    __rmul__ = __mul__