"""Three-component vectors used for points, directions and colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector; also used as a point and as an RGB colour."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, t: float) -> Vec3:
        if isinstance(t, Vec3) or not isinstance(t, (int, float)):
            return NotImplemented
        return Vec3(self.x * t, self.y * t, self.z * t)

    def __rmul__(self, t: float) -> Vec3:
        return self.__mul__(t)

    def __truediv__(self, t: float) -> Vec3:
        if isinstance(t, Vec3) or not isinstance(t, (int, float)):
            return NotImplemented
        return Vec3(self.x / t, self.y / t, self.z / t)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def dot(self, other: Vec3) -> float:
        """Scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Vector product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def unit(self) -> Vec3:
        """Vector of length one in the same direction.

        Raises ZeroDivisionError for the zero vector.
        """
        return self / self.length()

    def hadamard(self, other: Vec3) -> Vec3:
        """Component-wise product, used to tint one colour by another."""
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)

    def add_scalar(self, t: float) -> Vec3:
        """Add the same value to every component."""
        return Vec3(self.x + t, self.y + t, self.z + t)

    def max_normalized(self) -> Vec3:
        """Divide every component by one plus the largest component."""
        return self / (1 + max(self.x, self.y, self.z))