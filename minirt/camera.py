"""Pinhole camera: viewport geometry, pixel positions and movement."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from minirt.vec3 import Vec3

PI = 3.14159265


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * PI / 180.0


@dataclass
class Camera:
    """A camera at ``center`` looking along the unit vector ``direction``.

    The viewport fields are computed by :meth:`update` and recomputed after
    every move.
    """

    center: Vec3
    direction: Vec3
    fov: float
    focal_length: float = field(default=1.0, init=False)
    vp_height: float = field(default=0.0, init=False)
    vp_width: float = field(default=0.0, init=False)
    vec_right: Vec3 = field(default_factory=Vec3, init=False)
    vec_down: Vec3 = field(default_factory=Vec3, init=False)
    vec_focal: Vec3 = field(default_factory=Vec3, init=False)
    pixel_delta_right: Vec3 = field(default_factory=Vec3, init=False)
    pixel_delta_down: Vec3 = field(default_factory=Vec3, init=False)
    vp_upper_left: Vec3 = field(default_factory=Vec3, init=False)
    pixel00_center: Vec3 = field(default_factory=Vec3, init=False)
    width: int = field(default=0, init=False)
    height: int = field(default=0, init=False)

    def update(self, width: int, height: int) -> None:
        """Recompute the viewport for an image of ``width`` x ``height`` pixels."""
        self.width = width
        self.height = height
        self._viewport_size()
        up = self._orthogonal_vectors()
        self.vec_right = self.vec_right * self.vp_width
        self.vec_down = up * -self.vp_height
        self.vec_focal = self.direction * self.focal_length
        self.vp_upper_left = (
            self.center + self.vec_focal - self.vec_right / 2 - self.vec_down / 2
        )
        self.pixel_delta_right = self.vec_right / width
        self.pixel_delta_down = self.vec_down / height
        half_step = (self.pixel_delta_down + self.pixel_delta_right) / 2.0
        self.pixel00_center = self.vp_upper_left + half_step

    def _viewport_size(self) -> None:
        theta = degrees_to_radians(self.fov)
        h = math.tan(theta / 2)
        self.focal_length = 1.0
        self.vp_height = 2 * h * self.focal_length
        self.vp_width = self.vp_height * float(self.width) / float(self.height)

    def _orthogonal_vectors(self) -> Vec3:
        if abs(self.direction.y) < 0.9:
            up = Vec3(0.0, 1.0, 0.0)
        else:
            up = Vec3(0.0, 0.0, 1.0)
        self.vec_right = self.direction.cross(up).unit()
        return self.vec_right.cross(self.direction).unit()

    def pixel_center(self, row: int, col: int) -> Vec3:
        """Centre of the pixel ``row`` steps right and ``col`` steps down."""
        shift = self.pixel_delta_right * row + self.pixel_delta_down * col
        return self.pixel00_center + shift

    def pixel_top_left(self, row: int, col: int) -> Vec3:
        """Top-left corner of the pixel ``row`` steps right and ``col`` steps down."""
        shift = self.pixel_delta_right * row + self.pixel_delta_down * col
        return self.vp_upper_left + shift

    def _require_viewport(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise RuntimeError("camera viewport has not been computed")

    def translate(self, x_move: float, y_move: float, z_move: float) -> None:
        """Move along the right, up and forward axes, scaled by the viewport."""
        self._require_viewport()
        self.center = (
            self.center
            + self.vec_right * x_move
            + self.vec_down * -y_move
            + self.vec_focal * z_move
        )
        self.update(self.width, self.height)

    def rotate(self, side_rot: float, front_rot: float) -> None:
        """Tilt the view direction sideways and up or down."""
        self._require_viewport()
        focal_point = (
            self.center
            + self.vec_focal
            + self.vec_right * side_rot
            + self.vec_down * -front_rot
        )
        self.direction = (focal_point - self.center).unit()
        self.update(self.width, self.height)