"""Point lights and the Phong reflection model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from minirt.scene import LightSpec
from minirt.shapes import Material
from minirt.vector import Vec


class SurfacePoint(Protocol):
    """What lighting needs to know about the point being shaded."""

    point: Vec
    normal: Vec
    eyev: Vec


@dataclass
class Spotlight:
    """A point light; intensity lies in [0, 1] and colour channels in [0, 1]."""

    origin: Vec = field(default_factory=Vec)
    intensity: float = 0.0
    color: Vec = field(default_factory=Vec)

    @staticmethod
    def from_spec(spec: LightSpec) -> Spotlight:
        color = Vec(spec.color.r, spec.color.g, spec.color.b).scale(1 / 255.0)
        return Spotlight(
            origin=Vec(spec.x, spec.y, spec.z),
            intensity=spec.brightness,
            color=color,
        )

    def translate(self, direction: Vec, shift: float) -> Spotlight:
        """Move the light shift units along direction."""
        self.origin = self.origin + direction.normalize().scale(shift)
        return self


@dataclass(frozen=True)
class Phong:
    """Ambient, diffuse and specular contributions at a point."""

    amb: Vec = field(default_factory=Vec)
    dif: Vec = field(default_factory=Vec)
    spec: Vec = field(default_factory=Vec)


def _specular(
    material: Material, light: Spotlight, lightv: Vec, normal: Vec, eyev: Vec
) -> Vec:
    reflectv = (-lightv).reflect(normal)
    cos_reflect_eye = reflectv.cosine(eyev)
    if cos_reflect_eye <= 0:
        return Vec()
    value = light.intensity * material.spec * cos_reflect_eye**material.shine
    return Vec(value, value, value)


def lighting(
    material: Material, light: Spotlight, hit: SurfacePoint, shadow: bool
) -> Phong:
    """Phong terms for a surface point lit by light, optionally in shadow."""
    color = material.color.scale(light.intensity)
    lightv = (light.origin - hit.point).normalize()
    amb = color.scale(material.amb)
    if shadow:
        return Phong(amb, Vec(), Vec())
    normal = hit.normal.normalize()
    cos_light_normal = lightv.cosine(normal)
    if cos_light_normal < 0:
        return Phong(amb, Vec(), Vec())
    dif = color.scale(material.dif * cos_light_normal)
    return Phong(amb, dif, _specular(material, light, lightv, normal, hit.eyev))