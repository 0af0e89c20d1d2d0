"""
2D Vector Helper
================

Minimal vector algebra for the circle/line projection test.
NaN and infinity propagate through standard float arithmetic.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2D:
    """Immutable 2D vector."""

    x: float
    y: float

    @classmethod
    def create(cls, x: float, y: float) -> "Vector2D":
        return cls(x, y)

    def minus(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def dot(self, other: "Vector2D") -> float:
        return self.x * other.x + self.y * other.y

    def modulus_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def modulus(self) -> float:
        return math.sqrt(self.modulus_squared())

    def times(self, factor: float) -> "Vector2D":
        return Vector2D(self.x * factor, self.y * factor)
