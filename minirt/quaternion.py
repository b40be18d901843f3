"""Quaternions and the vector rotations built on them."""

from __future__ import annotations

import math
from dataclasses import dataclass

from minirt.vector import Vec


@dataclass(frozen=True)
class Quat:
    """Quaternion w + i*I + j*J + k*K."""

    w: float = 0.0
    i: float = 0.0
    j: float = 0.0
    k: float = 0.0

    @property
    def vector(self) -> Vec:
        return Vec(self.i, self.j, self.k)

    def squared_magnitude(self) -> float:
        return self.w * self.w + self.i * self.i + self.j * self.j + self.k * self.k

    def conjugate(self) -> Quat:
        return Quat(self.w, -self.i, -self.j, -self.k)

    def scale(self, a: float) -> Quat:
        return Quat(a * self.w, a * self.i, a * self.j, a * self.k)

    def inverse(self) -> Quat:
        """Multiplicative inverse; a degenerate quaternion gives zero."""
        sm = self.squared_magnitude()
        if sm == 0 or math.isinf(sm):
            return Quat()
        return self.conjugate().scale(1 / sm)

    def prod(self, other: Quat) -> Quat:
        """Hamilton product self * other."""
        u = self.vector
        v = other.vector
        w = self.w * other.w - u.dot(v)
        vec = u.scale(other.w) + u.cross(v) + v.scale(self.w)
        return Quat(w, vec.x, vec.y, vec.z)

    def __mul__(self, other: Quat) -> Quat:
        return self.prod(other)


def _conjugate_by(u: Vec, q: Quat) -> Vec:
    p = Quat(0.0, u.x, u.y, u.z)
    return q.inverse().prod(p).prod(q).vector


def rotate_axis(u: Vec, axis: Vec, rad: float) -> Vec:
    """Rotate u by rad radians around axis."""
    s = math.sin(rad / 2)
    ax = axis.normalize().scale(s)
    q = Quat(1 - s * s, ax.x, ax.y, ax.z)
    return _conjugate_by(u, q)


def rotate_euler(u: Vec, euler: Vec) -> Vec:
    """Rotate u by Euler angles given as (x, y, z) radians."""
    hx, hy, hz = euler.x / 2, euler.y / 2, euler.z / 2
    cx, sx = math.cos(hx), math.sin(hx)
    cy, sy = math.cos(hy), math.sin(hy)
    cz, sz = math.cos(hz), math.sin(hz)
    q = Quat(
        w=cz * cy * cx + sz * sy * sx,
        i=cz * sy * cx + sz * cy * sx,
        j=cz * cy * sx - sz * sy * cx,
        k=sz * cy * cx - cz * sy * sx,
    )
    return _conjugate_by(u, q)