"""Rays, their intersections with objects and the collected hits."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

from minirt.objects import SceneObject
from minirt.shapes import ShapeType
from minirt.vector import EPSILON, Vec

INTERSECTION_BUFFER_STEP = 8


@dataclass(frozen=True)
class Ray:
    """A half-line starting at origin and pointing along direction."""

    origin: Vec
    direction: Vec

    def position(self, t: float) -> Vec:
        return self.origin + self.direction.scale(t)


@dataclass(frozen=True)
class Roots:
    """Up to two ray parameters; only the first ``count`` are meaningful."""

    count: int = 0
    x1: float = 0.0
    x2: float = 0.0


def quadratic_roots(a: float, b: float, c: float) -> Roots:
    """Real roots of a*t^2 + b*t + c, smaller first."""
    if a == 0:
        return Roots()
    delta = b * b - 4 * a * c
    if delta < 0:
        return Roots()
    if delta == 0:
        x = -b / (2 * a)
        return Roots(1, x, x)
    root = math.sqrt(delta)
    return Roots(2, (-b - root) / (2 * a), (-b + root) / (2 * a))


def intersect_sphere(ray: Ray, obj: SceneObject) -> Roots:
    """Intersect a local-frame ray with a sphere centred at the origin."""
    a = ray.direction.dot(ray.direction)
    b = 2 * ray.origin.dot(ray.direction)
    c = ray.origin.dot(ray.origin) - obj.shape.sradius
    return quadratic_roots(a, b, c)


def intersect_cylinder(ray: Ray, obj: SceneObject) -> Roots:
    """Intersect a local-frame ray with a z-aligned cylinder of half-height ``height``."""
    origin = Vec(ray.origin.x, ray.origin.y, 0.0)
    direction = Vec(ray.direction.x, ray.direction.y, 0.0)
    roots = quadratic_roots(
        direction.dot(direction),
        2 * origin.dot(direction),
        origin.dot(origin) - obj.shape.sradius,
    )
    count = roots.count
    if count == 2 and abs(ray.position(roots.x2).z) > obj.shape.height:
        count -= 1
    if count == 1 and abs(ray.position(roots.x1).z) > obj.shape.height:
        count -= 1
    return Roots(count, roots.x1, roots.x2)


def intersect_plane(ray: Ray) -> Roots:
    """Intersect a local-frame ray with the plane z = 0."""
    dz = ray.direction.z
    oz = ray.origin.z
    if dz == 0:
        t = math.nan if oz == 0 else math.copysign(math.inf, -oz)
    else:
        t = -oz / dz
    return Roots(1, t, 0.0)


def intersect_object(ray: Ray, obj: SceneObject) -> Roots:
    """Intersect a world-space ray with an object."""
    inverse = obj.rmat.inverse()
    local = Ray(inverse @ (ray.origin - obj.translation), inverse @ ray.direction)
    if obj.shape.type == ShapeType.SPHERE:
        return intersect_sphere(local, obj)
    if obj.shape.type == ShapeType.CYLINDER:
        return intersect_cylinder(local, obj)
    if obj.shape.type == ShapeType.PLANE:
        return intersect_plane(local)
    return Roots()


@dataclass(frozen=True)
class Touch:
    """One intersection: ray parameter and the object hit."""

    t: float
    obj: SceneObject


@dataclass
class Touches:
    """Intersections collected along a ray, tracking the visible one."""

    items: List[Touch] = field(default_factory=list)
    _hit: Optional[int] = field(default=None, init=False, repr=False)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Touch]:
        return iter(self.items)

    @property
    def hit(self) -> Optional[Touch]:
        """The touch currently taken as visible, or None."""
        return None if self._hit is None else self.items[self._hit]

    def add(self, t: float, obj: SceneObject) -> Touches:
        """Record a touch.

        The hit restarts at every INTERSECTION_BUFFER_STEP-th touch;
        otherwise a non-negative touch closer than the hit replaces it.
        """
        index = len(self.items)
        self.items.append(Touch(t, obj))
        if index % INTERSECTION_BUFFER_STEP == 0:
            self._hit = index
        elif t >= 0 and (self._hit is None or t < self.items[self._hit].t):
            self._hit = index
        return self

    def add_roots(self, roots: Roots, obj: SceneObject) -> Touches:
        if roots.count > 0:
            self.add(roots.x1, obj)
        if roots.count > 1:
            self.add(roots.x2, obj)
        return self


def world_hits(ray: Ray, objects: Iterable[SceneObject]) -> Touches:
    """Intersect a ray with every object, keeping roots beyond EPSILON."""
    touches = Touches()
    for obj in objects:
        roots = intersect_object(ray, obj)
        count, x1, x2 = roots.count, roots.x1, roots.x2
        if count > 1 and x2 <= EPSILON:
            x2 = 0.0
            count -= 1
        if count > 0 and x1 <= EPSILON:
            x1, x2 = x2, 0.0
            count -= 1
        touches.add_roots(Roots(count, x1, x2), obj)
    return touches