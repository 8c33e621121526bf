"""Two-dimensional vector used for positions and directions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass
class Vector2:
    """A mutable 2D vector; screen coordinates grow rightwards and downwards."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def copy(self) -> Vector2:
        return Vector2(self.x, self.y)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalize(self) -> None:
        """Scale this vector to unit length in place; a zero vector is left as is."""
        length = self.magnitude()
        if length > 0:
            self.x /= length
            self.y /= length

    def normalized(self) -> Vector2:
        """Return a unit-length copy; a zero vector yields NaN components."""
        length = self.magnitude()
        if length == 0:
            return Vector2(math.nan, math.nan)
        return Vector2(self.x / length, self.y / length)

    @staticmethod
    def zero() -> Vector2:
        return Vector2(0.0, 0.0)

    @staticmethod
    def one() -> Vector2:
        return Vector2(1.0, 1.0)

    @staticmethod
    def right() -> Vector2:
        return Vector2(1.0, 0.0)

    @staticmethod
    def left() -> Vector2:
        return Vector2(-1.0, 0.0)

    @staticmethod
    def down() -> Vector2:
        return Vector2(0.0, 1.0)

    @staticmethod
    def up() -> Vector2:
        return Vector2(0.0, -1.0)