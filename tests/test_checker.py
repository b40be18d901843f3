import pytest

from minirt.checker import (
    check_ambient,
    check_camera,
    check_colors,
    check_cylinder,
    check_light,
    check_plane,
    check_sphere,
    check_vec,
)
from minirt.scene import SceneError


def test_check_vec_returns_components():
    assert check_vec(["sp", "1,-2.5,3"], 1) == ["1", "-2.5", "3"]


@pytest.mark.parametrize(
    "field, message",
    [
        ("1,a,3", "All parameters must be numbers"),
        ("1,2", "Must input x,y,z axis"),
        ("1,2,3,4", "Must input x,y,z axis"),
        (",,", "Must input x,y,z axis"),
    ],
)
def test_check_vec_errors(field, message):
    with pytest.raises(SceneError, match=message):
        check_vec(["x", field], 1)


def test_check_colors_returns_components():
    assert check_colors(["A", "0.2", "255,0,10"], 2) == ["255", "0", "10"]


@pytest.mark.parametrize(
    "field, message",
    [
        ("1.5,2,3", "RGB colors must be int"),
        ("1,2", "Must input 3 integers for RGB colors"),
    ],
)
def test_check_colors_errors(field, message):
    with pytest.raises(SceneError, match=message):
        check_colors(["x", field], 1)


def test_valid_ambient_returns_fields():
    assert check_ambient("A 0.2 255,255,255") == ["A", "0.2", "255,255,255"]


def test_valid_camera_returns_fields():
    assert check_camera("C -50,0,20 0,0,1 70") == ["C", "-50,0,20", "0,0,1", "70"]


def test_valid_light_returns_fields():
    assert check_light("L -40,0,30 0.7 255,255,255") == [
        "L",
        "-40,0,30",
        "0.7",
        "255,255,255",
    ]


def test_valid_sphere_returns_fields():
    assert check_sphere("sp 0,0,20 20 255,0,0") == ["sp", "0,0,20", "20", "255,0,0"]


def test_valid_plane_returns_fields():
    assert check_plane("pl 0,0,0 0,1.0,0 255,0,225") == [
        "pl",
        "0,0,0",
        "0,1.0,0",
        "255,0,225",
    ]


def test_valid_cylinder_returns_fields():
    assert check_cylinder("cy 50,0,20.6 0,0,1.0 14.2 21.42 10,0,255") == [
        "cy",
        "50,0,20.6",
        "0,0,1.0",
        "14.2",
        "21.42",
        "10,0,255",
    ]


def test_multiple_spaces_between_fields():
    assert check_sphere("sp   0,0,0   1   1,2,3") == ["sp", "0,0,0", "1", "1,2,3"]


@pytest.mark.parametrize(
    "check, line, message",
    [
        (check_ambient, "A 0.2", "Ambient: Invalid number of params"),
        (check_ambient, "A x 1,2,3", "Ambient: Light ratio must be float"),
        (check_camera, "C 0,0,0 0,0,1", "Camera: Invalid number of parameters"),
        (check_camera, "C 0,0,0 0,0,1 wide", "Camera: FOV must be float"),
        (check_light, "L 0,0,0 1", "Light: Invalid number of parameters"),
        (check_light, "L 0,0,0 b 1,2,3", "Light: brightness ratio must be float"),
        (check_sphere, "sp 0,0,0 1", "Sphere: Invalid number of parameters"),
        (check_sphere, "sp 0,0,0 d 1,2,3", "Sphere: Diameter must be float"),
        (check_plane, "pl 0,0,0 0,1,0", "Plane: Invalid number of parameters"),
        (check_cylinder, "cy 0,0,0 0,0,1 1 1", "Cylinder: Invalid number of parameters"),
        (check_cylinder, "cy 0,0,0 0,0,1 d 1 1,2,3", "Cylinder: Diameter must be float"),
        (check_cylinder, "cy 0,0,0 0,0,1 1 h 1,2,3", "Cylinder: Height must be float"),
    ],
)
def test_line_errors(check, line, message):
    with pytest.raises(SceneError, match=message):
        check(line)


def test_vector_checked_before_scalar():
    with pytest.raises(SceneError, match="All parameters must be numbers"):
        check_cylinder("cy 0,q,0 0,0,1 d h 1,2,3")


def test_color_errors_surface_from_line_checks():
    with pytest.raises(SceneError, match="RGB colors must be int"):
        check_plane("pl 0,0,0 0,1,0 1.0,2,3")
    with pytest.raises(SceneError, match="Must input 3 integers for RGB colors"):
        check_light("L 0,0,0 0.5 1,2")