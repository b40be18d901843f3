"""The world being rendered and the shading of rays through it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from minirt.camera import Camera
from minirt.lighting import Spotlight, lighting
from minirt.objects import SceneObject
from minirt.ray import Ray, Touch, world_hits
from minirt.vector import EPSILON, Vec


@dataclass
class World:
    """Objects, lights, camera and interaction state."""

    objects: List[SceneObject] = field(default_factory=list)
    amb: Vec = field(default_factory=Vec)
    light: Spotlight = field(default_factory=Spotlight)
    camera: Camera = field(default_factory=Camera)
    dir_rot: Vec = field(default_factory=Vec)
    dir_move: Vec = field(default_factory=Vec)
    selected_obj: Optional[SceneObject] = None
    selected_light: bool = False

    def add_object(self, obj: SceneObject) -> World:
        """Put obj at the front of the object list."""
        self.objects.insert(0, obj)
        return self


@dataclass(frozen=True)
class Hit:
    """A visible intersection prepared for shading."""

    touch: Touch
    point: Vec
    normal: Vec
    eyev: Vec
    is_inside: bool


def make_hit(touch: Touch, ray: Ray) -> Hit:
    """Compute the point, eye vector and eye-facing normal of a touch."""
    point = ray.position(touch.t)
    normal = touch.obj.normal_at(point)
    eyev = -ray.direction
    is_inside = normal.dot(eyev) <= 0
    if is_inside:
        normal = -normal
    return Hit(touch, point, normal, eyev, is_inside)


def is_shadowed(point: Vec, normal: Vec, world: World) -> bool:
    """True when an object lies between point and the world's light."""
    lifted = point + normal.scale(10 * EPSILON)
    to_light = world.light.origin - lifted
    distance = to_light.magnitude()
    hit = world_hits(Ray(lifted, to_light.normalize()), world.objects).hit
    return hit is not None and -EPSILON <= hit.t <= distance + EPSILON


def shade_hit(world: World, hit: Hit) -> Vec:
    """Colour seen at a hit, lit by the world's light and ambient."""
    material = hit.touch.obj.material
    light = world.light
    shadow = is_shadowed(hit.point, hit.normal, world)
    phong = lighting(material, light, hit, shadow)
    amb = world.amb.scale(material.amb)
    total = amb + phong.dif + phong.spec
    return material.color.elem_prod(total).elem_prod(light.color)


def color_at(world: World, ray: Ray) -> Vec:
    """Colour seen along ray; black when nothing is hit."""
    touch = world_hits(ray, world.objects).hit
    if touch is None:
        return Vec()
    return shade_hit(world, make_hit(touch, ray))


def _pick_direction(world: World, x: int, y: int) -> Vec:
    cam = world.camera
    p = cam.axis.normalize()
    scalar = (x - cam.hsize / 2) * cam.pixel_size / cam.scale
    p = p + cam.right.normalize().scale(scalar)
    scalar = (y - cam.vsize / 2) * cam.pixel_size / cam.scale
    p = p + (-cam.up).normalize().scale(scalar)
    return p


def select_object(world: World, x: int, y: int) -> Optional[SceneObject]:
    """The object seen at canvas pixel (x, y), if any."""
    ray = Ray(world.camera.origin, _pick_direction(world, x, y).normalize())
    touch = world_hits(ray, world.objects).hit
    return None if touch is None else touch.obj