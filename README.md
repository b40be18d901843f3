# minirt

The core of a small ray tracer. It reads a scene from a `.rt` file, builds
spheres, planes and cylinders lit by one point light and an ambient light,
intersects rays with them and shades the visible point with the Phong model,
including hard shadows.

## Installing

```
pip install .
```

Install the test extra with `pip install .[test]` and run `pytest` to check it.

## Running

```
minirt scene.rt
```

The command loads the scene, validates it and builds the world from it. The
file name must end in `.rt`. If the arguments are wrong, or the scene cannot be
read or is invalid, it prints `Error: <reason>` and exits with status 1;
otherwise it exits with status 0.

## Scene files

Each non-empty line holds one element. Fields are separated by spaces, and the
parts of a vector or colour by commas.

```
A 0.2 255,255,255
C -50,0,20 0,0,1 70
L -40,0,30 0.7 255,255,255
sp 0,0,20 20 255,0,0
pl 0,0,0 0,1.0,0 255,0,225
cy 50.0,0.0,20.6 0,0,1.0 14.2 21.42 10,0,255
```

| Id   | Element  | Fields                                                 |
|------|----------|--------------------------------------------------------|
| `A`  | ambient  | ratio in [0, 1], RGB colour                            |
| `C`  | camera   | position, orientation (each in [-1, 1]), FOV [0, 180]  |
| `L`  | light    | position, brightness in [0, 1], RGB colour             |
| `sp` | sphere   | centre, diameter (> 0), RGB colour                     |
| `pl` | plane    | point, normal (each in [-1, 1]), RGB colour            |
| `cy` | cylinder | centre, axis (each in [-1, 1]), diameter (> 0), height (> 0), RGB colour |

Colour channels are integers in [0, 255]. The ambient light, the camera and the
light must each appear exactly once; any other leading identifier is rejected
with `Invalid element`.

## Library use

- `minirt.parser.parse_scene(path)` returns a `minirt.scene.Scene` or raises
  `minirt.scene.SceneError`; `minirt.parser.parse_lines(lines)` does the same
  for lines already in memory.
- `minirt.app.build_world(scene)` turns a scene into a `minirt.world.World`
  with a `minirt.camera.Camera`, a `minirt.lighting.Spotlight` and
  `minirt.objects.SceneObject` instances.
- `minirt.world.color_at(world, ray)` gives the colour (channels in [0, 1])
  seen along a `minirt.ray.Ray`, and `minirt.world.select_object(world, x, y)`
  returns the object seen at a canvas pixel, if any.
- `minirt.app.handle_key(world, keycode)` applies a key press (`minirt.app.Key`)
  to the world: movement keys set the direction of travel, arrow keys resize
  the selected object, `C` clears the selection, `L` selects the light, `R`
  cycles the camera scale; it returns `False` for Escape.
- The vector, quaternion and matrix types live in `minirt.vector`,
  `minirt.quaternion` and `minirt.matrix`.

## What it does not do

The package has no window or display and writes no image files. The `minirt`
command only checks and loads a scene; nothing renders a full picture, and
`handle_key` changes the world's state without moving or redrawing anything
itself.