"""Scene contents: shapes, lights, ambient light and camera."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from minirt.camera import Camera
from minirt.vec3 import Vec3

MAX_OBJECTS = 100


class SceneError(Exception):
    """Raised when a scene cannot hold what is added to it."""


@dataclass(frozen=True)
class Sphere:
    center: Vec3
    radius: float
    color: Vec3


@dataclass(frozen=True)
class Plane:
    point: Vec3
    normal: Vec3
    color: Vec3


@dataclass(frozen=True)
class Light:
    center: Vec3
    brightness: float
    color: Vec3


@dataclass(frozen=True)
class Ambient:
    intensity: float
    color: Vec3


Shape = Union[Sphere, Plane]


@dataclass
class Scene:
    """Everything that a scene file describes."""

    objects: list[Shape] = field(default_factory=list)
    lights: list[Light] = field(default_factory=list)
    ambient: Optional[Ambient] = None
    camera: Optional[Camera] = None
    capacity: int = MAX_OBJECTS

    def add_object(self, obj: Shape) -> None:
        """Append a shape; raises SceneError once the scene is full."""
        if len(self.objects) >= self.capacity:
            raise SceneError("Too many objects")
        self.objects.append(obj)

    def add_light(self, light: Light) -> None:
        """Append a light; raises SceneError once the scene is full."""
        if len(self.lights) >= self.capacity:
            raise SceneError("Too many lights")
        self.lights.append(light)