"""Syntactic validation of scene file lines before they are parsed."""

from __future__ import annotations

from typing import List

from minirt.lexer import is_float, is_int, split_fields
from minirt.scene import SceneError


def check_vec(params: List[str], index: int) -> List[str]:
    """Check that params[index] holds three comma-separated numbers."""
    nbrs = split_fields(params[index], ",")
    if not all(is_float(n) for n in nbrs):
        raise SceneError("All parameters must be numbers")
    if len(nbrs) != 3:
        raise SceneError("Must input x,y,z axis")
    return nbrs


def check_colors(params: List[str], index: int) -> List[str]:
    """Check that params[index] holds three comma-separated integers."""
    nbrs = split_fields(params[index], ",")
    if not all(is_int(n) for n in nbrs):
        raise SceneError("RGB colors must be int")
    if len(nbrs) != 3:
        raise SceneError("Must input 3 integers for RGB colors")
    return nbrs


def _fields(line: str, count: int, message: str) -> List[str]:
    params = split_fields(line, " ")
    if len(params) != count:
        raise SceneError(message)
    return params


def _require_float(params: List[str], index: int, message: str) -> None:
    if not is_float(params[index]):
        raise SceneError(message)


def check_ambient(line: str) -> List[str]:
    """Validate an ambient line: identifier, ratio, colour."""
    params = _fields(line, 3, "Ambient: Invalid number of params")
    _require_float(params, 1, "Ambient: Light ratio must be float")
    check_colors(params, 2)
    return params


def check_camera(line: str) -> List[str]:
    """Validate a camera line: identifier, position, direction, field of view."""
    params = _fields(line, 4, "Camera: Invalid number of parameters")
    check_vec(params, 1)
    check_vec(params, 2)
    _require_float(params, 3, "Camera: FOV must be float")
    return params


def check_light(line: str) -> List[str]:
    """Validate a light line: identifier, position, brightness, colour."""
    params = _fields(line, 4, "Light: Invalid number of parameters")
    check_vec(params, 1)
    _require_float(params, 2, "Light: brightness ratio must be float")
    check_colors(params, 3)
    return params


def check_sphere(line: str) -> List[str]:
    """Validate a sphere line: identifier, centre, diameter, colour."""
    params = _fields(line, 4, "Sphere: Invalid number of parameters")
    check_vec(params, 1)
    _require_float(params, 2, "Sphere: Diameter must be float")
    check_colors(params, 3)
    return params


def check_plane(line: str) -> List[str]:
    """Validate a plane line: identifier, point, normal, colour."""
    params = _fields(line, 4, "Plane: Invalid number of parameters")
    check_vec(params, 1)
    check_vec(params, 2)
    check_colors(params, 3)
    return params


def check_cylinder(line: str) -> List[str]:
    """Validate a cylinder line: identifier, centre, axis, diameter, height, colour."""
    params = _fields(line, 6, "Cylinder: Invalid number of parameters")
    check_vec(params, 1)
    check_vec(params, 2)
    _require_float(params, 3, "Cylinder: Diameter must be float")
    _require_float(params, 4, "Cylinder: Height must be float")
    check_colors(params, 5)
    return params