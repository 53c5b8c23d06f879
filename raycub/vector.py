"""A small immutable 2D vector."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec:
    """A point or direction in the map plane."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x + other.x, self.y + other.y)

    def scaled(self, factor: float) -> Vec:
        """Return this vector multiplied by ``factor``."""
        return Vec(self.x * factor, self.y * factor)

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec:
        """Return a unit vector; the zero vector is returned unchanged."""
        length = self.length()
        if length == 0.0:
            return self
        return Vec(self.x / length, self.y / length)