"""Vectors, camera, scene containers and ray intersection for a small ray tracer."""

__version__ = "0.1.0"