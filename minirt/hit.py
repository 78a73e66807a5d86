"""Rays and their intersections with the shapes of a scene."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from minirt.scene import Plane, Scene, Shape, Sphere
from minirt.vec3 import Vec3

TMAX = 5000.0
EPSILON = 0.000001


@dataclass
class Ray:
    """A half-line ``origin + t * direction`` limited to ``t_min < t < t_max``.

    A successful intersection test lowers ``t_max`` to the distance found, so
    that later tests with the same ray only accept closer hits.
    """

    direction: Vec3
    origin: Vec3
    t_min: float = 0.0
    t_max: float = TMAX

    def at(self, t: float) -> Vec3:
        """The point reached after travelling ``t`` along the ray."""
        return self.direction * t + self.origin


@dataclass
class Hit:
    """Where a ray met a shape and what the surface looks like there."""

    point: Vec3
    normal: Vec3
    t: float
    color: Vec3
    inside_face: bool = False
    obj: Optional[Shape] = None


@dataclass(frozen=True)
class Quadratic:
    """Coefficients and roots of the ray/sphere equation ``a t^2 - 2 h t + c``."""

    a: float
    h: float
    c: float
    discriminant: float
    t_minus: Optional[float] = None
    t_plus: Optional[float] = None

    @property
    def has_solutions(self) -> bool:
        return self.discriminant >= 0


def solve_quadratic(sphere: Sphere, ray: Ray) -> Quadratic:
    """Solve for the distances at which ``ray`` crosses the surface of ``sphere``."""
    oc = sphere.center - ray.origin
    a = ray.direction.dot(ray.direction)
    h = oc.dot(ray.direction)
    c = oc.dot(oc) - sphere.radius * sphere.radius
    discriminant = h * h - a * c
    if discriminant < 0:
        return Quadratic(a, h, c, discriminant)
    root = math.sqrt(discriminant)
    return Quadratic(a, h, c, discriminant, (h - root) / a, (h + root) / a)


def _in_range(ray: Ray, t: float) -> bool:
    return ray.t_min < t < ray.t_max


def _record(ray: Ray, t: float, normal: Vec3, color: Vec3) -> Hit:
    ray.t_max = t
    return Hit(point=ray.at(t), normal=normal.unit(), t=t, color=color)


def hit_sphere(sphere: Sphere, ray: Ray) -> Optional[Hit]:
    """Nearest intersection of ``ray`` with ``sphere`` inside the ray's interval."""
    quad = solve_quadratic(sphere, ray)
    if not quad.has_solutions:
        return None
    root = quad.t_minus
    if not _in_range(ray, root):
        root = quad.t_plus
        if not _in_range(ray, root):
            return None
    outward = (ray.at(root) - sphere.center).unit()
    hit = _record(ray, root, outward, sphere.color)
    if ray.direction.dot(hit.normal) > 0.0:
        hit.inside_face = True
        hit.normal = -hit.normal
    return hit


def hit_plane(plane: Plane, ray: Ray) -> Optional[Hit]:
    """Intersection of ``ray`` with ``plane``; the normal faces the ray."""
    denominator = plane.normal.dot(ray.direction)
    if abs(denominator) < EPSILON:
        return None
    t = (plane.point - ray.origin).dot(plane.normal) / denominator
    if not _in_range(ray, t):
        return None
    hit = _record(ray, t, plane.normal, plane.color)
    if hit.normal.dot(ray.direction) > 0:
        hit.normal = -hit.normal
    return hit


def hit_shape(shape: object, ray: Ray) -> Optional[Hit]:
    """Intersect ``ray`` with any supported shape; other objects never hit."""
    if isinstance(shape, Sphere):
        return hit_sphere(shape, ray)
    if isinstance(shape, Plane):
        return hit_plane(shape, ray)
    return None


def hit_object(scene: Scene, ray: Ray) -> Optional[Hit]:
    """Closest intersection of ``ray`` with the objects of ``scene``."""
    closest: Optional[Hit] = None
    for obj in scene.objects:
        hit = hit_shape(obj, ray)
        if hit is not None:
            hit.obj = obj
            closest = hit
    return closest


def hit_occluded(scene: Scene, ray: Ray) -> bool:
    """Whether any object of ``scene`` lies on ``ray`` within its interval."""
    return any(hit_shape(obj, ray) is not None for obj in scene.objects)