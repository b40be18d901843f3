"""Reading scene descriptions into Scene records."""

from __future__ import annotations

import os
from typing import Callable, Iterable, List, Tuple, Union

from minirt.checker import (
    check_ambient,
    check_camera,
    check_cylinder,
    check_light,
    check_plane,
    check_sphere,
)
from minirt.lexer import Cursor
from minirt.scene import (
    Ambient,
    CameraSpec,
    CylinderSpec,
    LightSpec,
    PlaneSpec,
    Scene,
    SceneError,
    SphereSpec,
)

PathLike = Union[str, "os.PathLike[str]"]

USAGE = "Usage: minirt <scene.rt>"
EXTENSION = ".rt"


def _cursor_after(line: str, identifier_length: int) -> Cursor:
    cursor = Cursor(line)
    cursor.advance(identifier_length)
    cursor.skip_spaces()
    return cursor


def _triple(cursor: Cursor) -> Tuple[float, float, float]:
    """Read three floats separated by one character each."""
    x = cursor.parse_float()
    cursor.advance()
    y = cursor.parse_float()
    cursor.advance()
    z = cursor.parse_float()
    return x, y, z


def _orientation(cursor: Cursor, message: str) -> Tuple[float, float, float]:
    direction = _triple(cursor)
    if not all(-1.0 <= d <= 1.0 for d in direction):
        raise SceneError(message)
    return direction


def parse_ambient(line: str, scene: Scene) -> Ambient:
    """Parse an ambient line and store it in the scene."""
    cursor = _cursor_after(line, 1)
    ratio = cursor.parse_float()
    if not 0.0 <= ratio <= 1.0:
        raise SceneError("Ambient: Light ratio out of range [0.0, 1.0]")
    cursor.skip_spaces()
    scene.ambient = Ambient(ratio, cursor.parse_color())
    return scene.ambient


def parse_camera(line: str, scene: Scene) -> CameraSpec:
    """Parse a camera line and store it in the scene."""
    cursor = _cursor_after(line, 1)
    x, y, z = _triple(cursor)
    cursor.skip_spaces()
    dx, dy, dz = _orientation(cursor, "Camera: Orientation out of range [-1.0, 1.0]")
    cursor.skip_spaces()
    fov = cursor.parse_float()
    if not 0 <= fov <= 180:
        raise SceneError("Camera: FOV out of range [0, 180[")
    scene.camera = CameraSpec(x, y, z, dx, dy, dz, fov)
    return scene.camera


def parse_light(line: str, scene: Scene) -> LightSpec:
    """Parse a light line and store it in the scene."""
    cursor = _cursor_after(line, 1)
    x, y, z = _triple(cursor)
    cursor.skip_spaces()
    brightness = cursor.parse_float()
    if not 0.0 <= brightness <= 1.0:
        raise SceneError("Light: Brightness out of range [0.0, 1.0]")
    cursor.skip_spaces()
    scene.light = LightSpec(x, y, z, brightness, cursor.parse_color())
    return scene.light


def parse_sphere(line: str, scene: Scene) -> SphereSpec:
    """Parse a sphere line and append it to the scene."""
    cursor = _cursor_after(line, 2)
    x, y, z = _triple(cursor)
    cursor.skip_spaces()
    diameter = cursor.parse_float()
    if diameter <= 0.0:
        raise SceneError("Sphere: Diameter must be positive")
    cursor.skip_spaces()
    sphere = SphereSpec(x, y, z, diameter, cursor.parse_color())
    scene.spheres.append(sphere)
    return sphere


def parse_plane(line: str, scene: Scene) -> PlaneSpec:
    """Parse a plane line and append it to the scene."""
    cursor = _cursor_after(line, 2)
    x, y, z = _triple(cursor)
    cursor.skip_spaces()
    dx, dy, dz = _orientation(cursor, "Plane: Orientation out of range [-1.0, 1.0]")
    cursor.skip_spaces()
    plane = PlaneSpec(x, y, z, dx, dy, dz, cursor.parse_color())
    scene.planes.append(plane)
    return plane


def parse_cylinder(line: str, scene: Scene) -> CylinderSpec:
    """Parse a cylinder line and append it to the scene."""
    cursor = _cursor_after(line, 2)
    x, y, z = _triple(cursor)
    cursor.skip_spaces()
    dx, dy, dz = _orientation(cursor, "Cylinder: Orientation out of range [-1.0,1.0]")
    cursor.skip_spaces()
    diameter = cursor.parse_float()
    if diameter <= 0.0:
        raise SceneError("Cylinder: Diameter must be positive")
    cursor.skip_spaces()
    height = cursor.parse_float()
    if height <= 0.0:
        raise SceneError("Cylinder: Height must be positive")
    cursor.skip_spaces()
    cylinder = CylinderSpec(x, y, z, dx, dy, dz, diameter, height, cursor.parse_color())
    scene.cylinders.append(cylinder)
    return cylinder


_Checker = Callable[[str], List[str]]
_Parser = Callable[[str, Scene], object]

# Elements that may appear only once: first character, counter, duplicate message.
_UNIQUE: Tuple[Tuple[str, str, str, _Checker, _Parser], ...] = (
    ("A", "amb_count", "Ambient: More than one declared", check_ambient, parse_ambient),
    ("C", "cam_count", "Camera: more than one declared", check_camera, parse_camera),
    ("L", "light_count", "Light: More than one declared", check_light, parse_light),
)

_OBJECTS: Tuple[Tuple[str, _Checker, _Parser], ...] = (
    ("sp", check_sphere, parse_sphere),
    ("pl", check_plane, parse_plane),
    ("cy", check_cylinder, parse_cylinder),
)


def process_line(line: str, scene: Scene) -> Scene:
    """Validate and parse one scene line, dropping a trailing newline first."""
    if line.endswith("\n"):
        line = line[:-1]
    for first, counter, duplicate, check, parse in _UNIQUE:
        if line[:1] == first:
            count = getattr(scene, counter) + 1
            setattr(scene, counter, count)
            if count > 1:
                raise SceneError(duplicate)
            check(line)
            parse(line, scene)
            return scene
    for prefix, check, parse in _OBJECTS:
        if line.startswith(prefix):
            check(line)
            parse(line, scene)
            return scene
    raise SceneError("Invalid element")


def parse_lines(lines: Iterable[str]) -> Scene:
    """Build a complete Scene from lines, skipping blank ones."""
    scene = Scene()
    for line in lines:
        if not line or line.startswith("\n"):
            continue
        process_line(line, scene)
    return scene.ensure_complete()


def _split_lines(text: str) -> List[str]:
    """Split on '\\n' only, keeping the terminators."""
    pieces = text.split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


def parse_scene(path: PathLike) -> Scene:
    """Read and parse the scene file at path."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise SceneError("Failed to open file") from exc
    return parse_lines(_split_lines(text))


def check_filename(path: PathLike) -> str:
    """Return path as a string if it names a '.rt' file, else raise SceneError."""
    name = os.fspath(path)
    if len(name) < len(EXTENSION) or not name.endswith(EXTENSION):
        raise SceneError(USAGE)
    return name