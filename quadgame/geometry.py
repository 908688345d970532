"""Two-dimensional vectors and small math helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TypeVar, Union

__all__ = ["Vec2", "polar_to_cartesian", "cartesian_to_polar", "clamp"]

T = TypeVar("T")


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[Vec2, float]) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        return Vec2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Union[Vec2, float]) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x / other.x, self.y / other.y)
        return Vec2(self.x / other, self.y / other)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def distance(self, other: Vec2) -> float:
        """Euclidean distance to another point."""
        return (self - other).length()


def polar_to_cartesian(rho: float, theta: float) -> Vec2:
    """Convert polar coordinates to a cartesian point."""
    return Vec2(rho * math.cos(theta), rho * math.sin(theta))


def cartesian_to_polar(cartesian: Vec2) -> Vec2:
    """Convert a cartesian point to ``Vec2(rho, theta)``."""
    return Vec2(
        math.sqrt(cartesian.x**2 + cartesian.y**2),
        math.atan2(cartesian.y, cartesian.x),
    )


def clamp(value: T, minimum: T, maximum: T) -> T:
    """Return ``value`` bounded to ``[minimum, maximum]``."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value