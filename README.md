# minirt

The geometric core of a small ray tracer: vector arithmetic, a pinhole
camera, containers for spheres, planes and lights, ray/shape intersection,
and plain-text descriptions of a scene.

## Installation

```
pip install .
```

## Modules

- `minirt.vec3` – `Vec3`, an immutable three-component vector used for
  points, directions and RGB colours. It supports `+`, `-`, multiplication
  and division by a number, negation and iteration, and has `dot`, `cross`,
  `length`, `length_squared`, `unit`, `hadamard` (component-wise product),
  `add_scalar` and `max_normalized` (divides by one plus the largest
  component).
- `minirt.camera` – `Camera(center, direction, fov)` and
  `degrees_to_radians`. `Camera.update(width, height)` computes the viewport
  for an image of that size; `pixel_center(row, col)` and
  `pixel_top_left(row, col)` give pixel positions on it. `translate(x, y, z)`
  moves the camera along its right, up and forward axes, and
  `rotate(side, front)` tilts its direction; both raise `RuntimeError` if
  `update` has not been called yet.
- `minirt.scene` – frozen dataclasses `Sphere(center, radius, color)`,
  `Plane(point, normal, color)`, `Light(center, brightness, color)` and
  `Ambient(intensity, color)`, and `Scene`, which holds objects, lights, an
  optional ambient light and an optional camera. `Scene.add_object` and
  `Scene.add_light` raise `SceneError` once 100 entries (the default
  `capacity`) are held.
- `minirt.hit` – `Ray(direction, origin, t_min=0.0, t_max=5000.0)` with
  `Ray.at(t)`, the `Hit` record, `solve_quadratic`, `hit_sphere`,
  `hit_plane`, `hit_shape`, `hit_object` (closest hit in a scene) and
  `hit_occluded`. A successful intersection lowers the ray's `t_max` to the
  distance found, so later tests with the same ray only accept closer hits.
  Returned normals always face the incoming ray.
- `minirt.report` – `format_vec3`, `format_ambient`, `format_lights`,
  `format_objects` and `format_scene` return text descriptions of a scene;
  `help_text` returns a usage and keyboard-controls summary.

## Example

```python
from minirt.camera import Camera
from minirt.hit import Ray, hit_object
from minirt.report import format_scene
from minirt.scene import Ambient, Light, Scene, Sphere
from minirt.vec3 import Vec3

scene = Scene(ambient=Ambient(0.2, Vec3(1.0, 1.0, 1.0)))
scene.add_object(Sphere(Vec3(0, 0, 0), 1.0, Vec3(1.0, 0.0, 0.0)))
scene.add_light(Light(Vec3(-4, 4, -4), 0.7, Vec3(1.0, 1.0, 1.0)))

camera = Camera(center=Vec3(0, 0, -5), direction=Vec3(0, 0, 1), fov=70)
camera.update(320, 180)

target = camera.pixel_center(160, 90)
ray = Ray(direction=target - camera.center, origin=camera.center)
hit = hit_object(scene, ray)
if hit is not None:
    print(hit.t, hit.point, hit.normal)

print(format_scene(scene))
```

## What this package does not do

It does not read `.rt` scene files: scenes are built in code. It does not
compute lighting (ambient, diffuse, specular or shadows) or turn colours into
pixel values, and it does not render or save images. There is no command-line
program and no interactive window; the controls listed by `help_text` are
not bound to anything, though `Camera.translate` and `Camera.rotate` provide
the camera moves they describe.