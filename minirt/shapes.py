"""Shape kinds, their geometric parameters and surface materials."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from minirt.vector import Vec


class ShapeType(IntEnum):
    """The kinds of primitive a scene object can be."""

    SPHERE = 0
    CONE = 1
    CYLINDER = 2
    PLANE = 3


@dataclass
class Shape:
    """Geometry of a primitive in its local frame.

    ``sradius`` is the squared radius; ``height`` is the half-height of a
    cylinder measured along its local z axis.
    """

    type: ShapeType
    height: float = 0.0
    sradius: float = 0.0
    scale: float = 0.0

    def rescale(self, scale: float) -> Shape:
        """Set the scale factor; planes always keep a scale of 1."""
        self.scale = 1.0 if self.type == ShapeType.PLANE else scale
        return self


@dataclass
class Material:
    """Surface colour (channels in [0, 1]) and Phong coefficients."""

    color: Vec = field(default_factory=Vec)
    amb: float = 1.0
    dif: float = 1.0
    spec: float = 1.0
    shine: float = 1.0


def sphere_shape() -> Shape:
    """A unit sphere."""
    return Shape(ShapeType.SPHERE, height=0.0, sradius=1.0, scale=1.0)


def cylinder_shape() -> Shape:
    """A unit cylinder."""
    return Shape(ShapeType.CYLINDER, height=1.0, sradius=1.0, scale=1.0)


def plane_shape() -> Shape:
    """A plane through the local origin with normal along z."""
    return Shape(ShapeType.PLANE, height=0.0, sradius=0.0, scale=0.0)