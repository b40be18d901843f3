"""Scene description records as read from a scene file."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


class SceneError(ValueError):
    """Raised when a scene description is malformed or incomplete."""


@dataclass(frozen=True)
class Color:
    """An RGB colour with integer channels in [0, 255]."""

    r: int = 0
    g: int = 0
    b: int = 0


@dataclass(frozen=True)
class Ambient:
    """Ambient lighting: a ratio in [0, 1] and a colour."""

    ratio: float = 0.0
    color: Color = field(default_factory=Color)


@dataclass(frozen=True)
class CameraSpec:
    """Camera position, viewing direction and horizontal field of view in degrees."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    dx: float = 0.0
    dy: float = 0.0
    dz: float = 0.0
    fov: float = 0.0


@dataclass(frozen=True)
class LightSpec:
    """Point light position, brightness in [0, 1] and colour."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    brightness: float = 0.0
    color: Color = field(default_factory=Color)


@dataclass(frozen=True)
class SphereSpec:
    """Sphere centre, diameter and colour."""

    x: float
    y: float
    z: float
    diameter: float
    color: Color


@dataclass(frozen=True)
class PlaneSpec:
    """Plane point, normal and colour."""

    x: float
    y: float
    z: float
    dx: float
    dy: float
    dz: float
    color: Color


@dataclass(frozen=True)
class CylinderSpec:
    """Cylinder centre, axis, diameter, height and colour."""

    x: float
    y: float
    z: float
    dx: float
    dy: float
    dz: float
    diameter: float
    height: float
    color: Color


@dataclass
class Scene:
    """Everything declared in a scene file."""

    ambient: Ambient = field(default_factory=Ambient)
    camera: CameraSpec = field(default_factory=CameraSpec)
    light: LightSpec = field(default_factory=LightSpec)
    spheres: List[SphereSpec] = field(default_factory=list)
    planes: List[PlaneSpec] = field(default_factory=list)
    cylinders: List[CylinderSpec] = field(default_factory=list)
    amb_count: int = 0
    cam_count: int = 0
    light_count: int = 0

    def ensure_complete(self) -> Scene:
        """Raise SceneError unless ambient, camera and light were all declared."""
        if not self.amb_count:
            raise SceneError("Missing Ambient element")
        if not self.cam_count:
            raise SceneError("Missing Camera element")
        if not self.light_count:
            raise SceneError("Missing Light element")
        return self