import pytest

from minirt.app import (
    Key,
    build_world,
    handle_key,
    handle_scaling,
    main,
    movement_direction,
)
from minirt.objects import SceneObject
from minirt.parser import USAGE, parse_lines
from minirt.scene import Color, CylinderSpec, PlaneSpec, SphereSpec
from minirt.shapes import ShapeType
from minirt.vector import Vec

SCENE = """A 0.2 255,255,255
C 0,0,-5 0,0,1 70
L 0,5,-5 0.7 255,255,255
sp 0,0,0 2 255,0,0
pl 0,-1,0 0,1,0 0,255,0
cy 0,0,5 0,1,0 1 2 0,0,255
"""


def _world():
    return build_world(parse_lines(SCENE.splitlines(keepends=True)))


def _sphere():
    return SceneObject.from_sphere(SphereSpec(0.0, 0.0, 0.0, 2.0, Color(1, 2, 3)))


def _cylinder(height=2.0):
    spec = CylinderSpec(0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 1.0, height, Color(1, 2, 3))
    return SceneObject.from_cylinder(spec)


def test_build_world_objects_in_prepended_order():
    world = _world()
    kinds = [obj.shape.type for obj in world.objects]
    assert kinds == [ShapeType.CYLINDER, ShapeType.PLANE, ShapeType.SPHERE]


def test_build_world_ambient_light_and_camera():
    world = _world()
    assert world.amb.approx_eq(Vec(0.2, 0.2, 0.2))
    assert world.light.intensity == pytest.approx(0.7)
    assert world.camera.origin == Vec(0.0, 0.0, -5.0)


def test_up_grows_object():
    obj = _sphere()
    before = obj.shape.sradius
    handle_scaling(Key.UP, obj)
    assert obj.shape.scale == pytest.approx(1.2)
    assert obj.shape.sradius == pytest.approx(before * obj.shape.scale**2)


def test_down_shrinks_only_above_threshold():
    obj = _sphere()
    handle_scaling(Key.DOWN, obj)
    assert obj.shape.scale == pytest.approx(0.833)
    obj.shape.scale = 0.1
    handle_scaling(Key.DOWN, obj)
    assert obj.shape.scale == 0.1


def test_up_leaves_plane_untouched():
    plane = SceneObject.from_plane(
        PlaneSpec(0.0, 0.0, 0.0, 0.0, 0.0, 1.0, Color(1, 2, 3))
    )
    handle_scaling(Key.UP, plane)
    assert plane.shape.scale == 0.0


def test_right_and_left_change_cylinder_height():
    obj = _cylinder(2.0)
    handle_scaling(Key.RIGHT, obj)
    assert obj.shape.height == pytest.approx(2.1)
    handle_scaling(Key.LEFT, obj)
    assert obj.shape.height == pytest.approx(2.0)


def test_left_stops_at_minimum_height():
    obj = _cylinder(0.5)
    handle_scaling(Key.LEFT, obj)
    assert obj.shape.height == 0.5


def test_height_keys_ignore_spheres():
    obj = _sphere()
    handle_scaling(Key.RIGHT, obj)
    assert obj.shape.height == 0.0


def test_movement_directions_follow_camera():
    camera = _world().camera
    assert movement_direction(Key.W, camera) == camera.axis
    assert movement_direction(Key.S, camera) == -camera.axis
    assert movement_direction(Key.D, camera) == camera.right
    assert movement_direction(Key.SHIFT, camera) == -camera.up
    assert movement_direction(Key.C, camera) is None


def test_escape_requests_quit():
    assert handle_key(_world(), Key.ESCAPE) is False


def test_movement_key_sets_direction():
    world = _world()
    assert handle_key(world, Key.A) is True
    assert world.dir_move == -world.camera.right


def test_selection_keys():
    world = _world()
    world.selected_obj = world.objects[0]
    handle_key(world, Key.L)
    assert world.selected_light is True
    handle_key(world, Key.C)
    assert world.selected_obj is None
    assert world.selected_light is False


def test_scaling_key_applies_to_selected_object():
    world = _world()
    sphere = world.objects[-1]
    world.selected_obj = sphere
    handle_key(world, Key.UP)
    assert sphere.shape.scale == pytest.approx(1.2)


def test_r_cycles_camera_scale():
    world = _world()
    handle_key(world, Key.R)
    assert world.camera.scale == 1
    handle_key(world, Key.R)
    assert world.camera.scale == 3


def test_main_usage_errors(capsys):
    assert main([]) == 1
    assert f"Error: {USAGE}" in capsys.readouterr().out
    assert main(["scene.txt"]) == 1
    assert USAGE in capsys.readouterr().out


def test_main_accepts_valid_scene(tmp_path):
    path = tmp_path / "scene.rt"
    path.write_text(SCENE)
    assert main([str(path)]) == 0


def test_main_reports_missing_ambient(tmp_path, capsys):
    path = tmp_path / "scene.rt"
    path.write_text("\n".join(SCENE.splitlines()[1:]) + "\n")
    assert main([str(path)]) == 1
    assert "Error: Missing Ambient element" in capsys.readouterr().out


def test_main_reports_unreadable_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.rt")]) == 1
    assert "Failed to open file" in capsys.readouterr().out