"""Scene objects: a shape placed in the world with a material."""

from __future__ import annotations

from dataclasses import dataclass, field

from minirt.matrix import Mat3, rotation_between
from minirt.scene import Color, CylinderSpec, PlaneSpec, SphereSpec
from minirt.shapes import Material, Shape, ShapeType
from minirt.vector import Vec

_Z_AXIS = Vec(0.0, 0.0, 1.0)


def _material(color: Color) -> Material:
    return Material(color=Vec(color.r, color.g, color.b).scale(1 / 255.0))


@dataclass
class SceneObject:
    """A shape with a position, an orientation and a material."""

    shape: Shape
    material: Material = field(default_factory=Material)
    axis: Vec = _Z_AXIS
    translation: Vec = field(default_factory=Vec)
    rmat: Mat3 = field(default_factory=Mat3.identity)

    @staticmethod
    def from_sphere(spec: SphereSpec) -> SceneObject:
        shape = Shape(
            ShapeType.SPHERE,
            height=0.0,
            sradius=(spec.diameter * spec.diameter) / 4,
            scale=1.0,
        )
        return SceneObject(
            shape=shape,
            material=_material(spec.color),
            axis=_Z_AXIS,
            translation=Vec(spec.x, spec.y, spec.z),
            rmat=Mat3.identity(),
        )

    @staticmethod
    def from_cylinder(spec: CylinderSpec) -> SceneObject:
        shape = Shape(
            ShapeType.CYLINDER,
            height=spec.height,
            sradius=(spec.diameter * spec.diameter) / 4,
            scale=1.0,
        )
        axis = Vec(spec.dx, spec.dy, spec.dz)
        return SceneObject(
            shape=shape,
            material=_material(spec.color),
            axis=axis,
            translation=Vec(spec.x, spec.y, spec.z),
            rmat=rotation_between(_Z_AXIS, axis),
        )

    @staticmethod
    def from_plane(spec: PlaneSpec) -> SceneObject:
        shape = Shape(ShapeType.PLANE, height=0.0, sradius=0.0, scale=0.0)
        axis = Vec(spec.dx, spec.dy, spec.dz)
        return SceneObject(
            shape=shape,
            material=_material(spec.color),
            axis=axis,
            translation=Vec(spec.x, spec.y, spec.z),
            rmat=rotation_between(_Z_AXIS, axis),
        )

    def translate(self, direction: Vec, shift: float) -> SceneObject:
        """Move the object by shift times direction."""
        self.translation = self.translation + direction.scale(shift)
        return self

    def rotate(self, euler: Vec) -> SceneObject:
        """Rotate the object by the opposite of the given Euler angles."""
        self.rmat = self.rmat.rotate_euler(-euler)
        self.axis = self.rmat @ _Z_AXIS
        return self

    def scale(self, factor: float) -> SceneObject:
        """Grow the object by factor; planes are left unchanged."""
        if self.shape.type == ShapeType.PLANE:
            return self
        self.shape.scale *= factor
        self.shape.sradius *= factor * factor
        return self

    def set_height(self, height: float) -> SceneObject:
        """Change the height of a cylinder; other shapes are left unchanged."""
        if self.shape.type == ShapeType.CYLINDER:
            self.shape.height = height
        return self

    def normal_at(self, point: Vec) -> Vec:
        """Surface normal at a world-space point on the object."""
        if self.shape.type == ShapeType.PLANE:
            return self.axis
        p = point - self.translation
        if self.shape.type == ShapeType.SPHERE:
            normal = p
        elif self.shape.type == ShapeType.CYLINDER:
            local = self.rmat.inverse() @ p
            normal = self.rmat @ local
        else:
            return Vec()
        return normal.normalize()