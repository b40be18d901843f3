"""The viewing camera built from a scene's camera declaration."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from minirt.matrix import Mat3, rotation_between
from minirt.scene import CameraSpec
from minirt.vector import Vec

CANVAS_PIXEL = 600


@dataclass
class Camera:
    """Camera position, orientation basis and canvas geometry."""

    scale: float = 0.0
    hsize: float = 0.0
    vsize: float = 0.0
    pixel_size: float = 0.0
    half_width: float = 0.0
    half_height: float = 0.0
    origin: Vec = field(default_factory=Vec)
    axis: Vec = field(default_factory=Vec)
    right: Vec = field(default_factory=Vec)
    up: Vec = field(default_factory=Vec)
    fov: float = 0.0
    rmat: Mat3 = field(default_factory=Mat3.zero)

    @staticmethod
    def from_spec(spec: CameraSpec) -> Camera:
        """Build a camera on a square canvas of CANVAS_PIXEL pixels."""
        axis = Vec(spec.dx, spec.dy, spec.dz)
        rmat = rotation_between(Vec(0.0, 0.0, 1.0), axis)
        hsize = float(CANVAS_PIXEL)
        vsize = float(CANVAS_PIXEL)
        fov = spec.fov * (math.pi / 180.0)
        half_view = math.tan(fov / 2)
        if hsize > vsize:
            half_width = half_view
            half_height = half_view / (hsize / vsize)
        else:
            half_width = half_view * (hsize / vsize)
            half_height = half_view
        scale = 3.0
        return Camera(
            scale=scale,
            hsize=hsize,
            vsize=vsize,
            pixel_size=(half_width * scale * 2) / hsize,
            half_width=half_width,
            half_height=half_height,
            origin=Vec(spec.x, spec.y, spec.z),
            axis=axis,
            right=rmat @ Vec(1.0, 0.0, 0.0),
            up=rmat @ Vec(0.0, 1.0, 0.0),
            fov=fov,
            rmat=rmat,
        )