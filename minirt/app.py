"""Scene loading, keyboard handling and the command-line entry point."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Optional, Sequence

from minirt.camera import Camera
from minirt.lighting import Spotlight
from minirt.objects import SceneObject
from minirt.parser import USAGE, check_filename, parse_scene
from minirt.scene import Scene, SceneError
from minirt.vector import Vec
from minirt.world import World


class Key(IntEnum):
    """X11 keysyms the viewer reacts to."""

    ESCAPE = 0xFF1B
    W = 0x0077
    S = 0x0073
    A = 0x0061
    D = 0x0064
    SPACE = 0x0020
    SHIFT = 0xFFE1
    UP = 0xFF52
    DOWN = 0xFF54
    LEFT = 0xFF51
    RIGHT = 0xFF53
    C = 0x0063
    L = 0x006C
    R = 0x0072


def build_world(scene: Scene) -> World:
    """Turn a parsed scene into a world ready for rendering."""
    world = World()
    c = scene.ambient.color
    world.amb = Vec(c.r, c.g, c.b).scale(1 / 255.0).scale(scene.ambient.ratio)
    world.light = Spotlight.from_spec(scene.light)
    world.camera = Camera.from_spec(scene.camera)
    for sphere in scene.spheres:
        world.add_object(SceneObject.from_sphere(sphere))
    for plane in scene.planes:
        world.add_object(SceneObject.from_plane(plane))
    for cylinder in scene.cylinders:
        world.add_object(SceneObject.from_cylinder(cylinder))
    return world


def handle_scaling(keycode: int, obj: SceneObject) -> SceneObject:
    """Arrow keys grow, shrink, lengthen or shorten the selected object."""
    if keycode == Key.UP:
        obj.scale(1.2)
    elif keycode == Key.DOWN:
        if obj.shape.scale > 0.1:
            obj.scale(0.833)
    elif keycode == Key.RIGHT:
        obj.set_height(obj.shape.height + 0.1)
    elif keycode == Key.LEFT:
        if obj.shape.height > 0.5:
            obj.set_height(obj.shape.height - 0.1)
    return obj


def movement_direction(keycode: int, camera: Camera) -> Optional[Vec]:
    """Direction of travel for a movement key, or None for other keys."""
    directions = {
        Key.W: camera.axis,
        Key.S: -camera.axis,
        Key.D: camera.right,
        Key.A: -camera.right,
        Key.SPACE: camera.up,
        Key.SHIFT: -camera.up,
    }
    return directions.get(keycode)


def handle_key(world: World, keycode: int) -> bool:
    """Apply a key press to the world; False means the viewer should quit."""
    if keycode == Key.ESCAPE:
        return False
    obj = world.selected_obj
    direction = movement_direction(keycode, world.camera)
    if direction is not None:
        world.dir_move = direction
    if obj is not None:
        handle_scaling(keycode, obj)
    if keycode == Key.C:
        world.selected_light = False
        world.selected_obj = None
    if keycode == Key.L:
        world.selected_light = True
    if keycode == Key.R:
        world.camera.scale = 3 - ((int(world.camera.scale) + 2) % 3)
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load and validate the scene file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) != 1:
            raise SceneError(USAGE)
        build_world(parse_scene(check_filename(args[0])))
    except SceneError as exc:
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())