"""Three-component vectors and approximate float comparison."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

EPSILON = 0.0001


def double_equals(x: float, y: float) -> bool:
    """Return True when x and y differ by strictly less than EPSILON."""
    return -EPSILON < x - y < EPSILON


@dataclass(frozen=True)
class Vec:
    """An immutable 3D vector, also used for RGB colours in [0, 1]."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec) -> Vec:
        return Vec(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec) -> Vec:
        return Vec(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec:
        return Vec(-self.x, -self.y, -self.z)

    def __mul__(self, a: float) -> Vec:
        return self.scale(a)

    __rmul__ = __mul__

    def approx_eq(self, other: Vec) -> bool:
        """Component-wise comparison within EPSILON."""
        return all(double_equals(a, b) for a, b in zip(self, other))

    def elem_prod(self, other: Vec) -> Vec:
        """Component-wise (Hadamard) product."""
        return Vec(self.x * other.x, self.y * other.y, self.z * other.z)

    def scale(self, a: float) -> Vec:
        return Vec(a * self.x, a * self.y, a * self.z)

    def dot(self, other: Vec) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec) -> Vec:
        return Vec(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def distance(self, other: Vec) -> float:
        return (self - other).magnitude()

    def normalize(self) -> Vec:
        """Unit vector in the same direction; a near-zero vector gives zero."""
        if self.approx_eq(Vec()):
            return Vec()
        inv = 1 / self.magnitude()
        return self.scale(inv)

    def cosine(self, other: Vec) -> float:
        """Cosine of the angle between two vectors."""
        return self.normalize().dot(other.normalize())

    def scalar_proj(self, other: Vec) -> float:
        """Length of the projection of this vector onto other."""
        return self.dot(other.normalize())

    def proj(self, other: Vec) -> Vec:
        """Projection of this vector onto other."""
        unit = other.normalize()
        return unit.scale(self.dot(unit))

    def plane_proj(self, normal: Vec) -> Vec:
        """Projection of this vector onto the plane with the given normal."""
        return self - self.proj(normal)

    def reflect(self, normal: Vec) -> Vec:
        """Reflect this vector about the given normal."""
        return self - normal.scale(2 * self.dot(normal))