"""Text descriptions of a loaded scene and the usage help."""

from __future__ import annotations

from minirt.scene import Plane, Scene, Shape, Sphere
from minirt.vec3 import Vec3


def format_vec3(v: Vec3) -> str:
    """One line with the three components."""
    return f"{v.x:f}; {v.y:f}; {v.z:f};\n"


def format_ambient(scene: Scene) -> str:
    """Description of the ambient light."""
    amb = scene.ambient
    if amb is None:
        return "No Ambient light loaded\n"
    return (
        "[Ambient Color]\n"
        "Ambient Color:"
        + format_vec3(amb.color)
        + f"Ambient Intensity: {amb.intensity:f}\n"
    )


def format_lights(scene: Scene) -> str:
    """Description of every light."""
    if not scene.lights:
        return "No Lights loaded\n"
    parts = [f"[{len(scene.lights)} Lights loaded]\n"]
    for i, light in enumerate(scene.lights):
        parts.append(f"[{i}] Brightness: {light.brightness:f}\n")
        parts.append(f"[{i}] Color:\n")
        parts.append(format_vec3(light.color))
        parts.append(f"[{i}] Center:\n")
        parts.append(format_vec3(light.center))
        parts.append("\n")
    return "".join(parts)


def _format_shape(obj: Shape) -> str:
    if isinstance(obj, Sphere):
        return (
            "[SPHERE]\nColor:\n"
            + format_vec3(obj.color)
            + "Center:\n"
            + format_vec3(obj.center)
            + f"Ray: {obj.radius:f}\n\n"
        )
    if isinstance(obj, Plane):
        return (
            "[PLANE]\nColor:\n"
            + format_vec3(obj.color)
            + "Normal:\n"
            + format_vec3(obj.normal)
            + "Point:\n"
            + format_vec3(obj.point)
            + "\n"
        )
    return ""


def format_objects(scene: Scene) -> str:
    """Description of every shape."""
    if not scene.objects:
        header = "No Objects loaded\n"
    else:
        header = f"[{len(scene.objects)} Objects loaded]\n"
    return header + "".join(_format_shape(obj) for obj in scene.objects)


def format_scene(scene: Scene) -> str:
    """Ambient light, lights and objects, in that order."""
    return format_ambient(scene) + format_lights(scene) + format_objects(scene)


_CONTROLS = """
╔════════════════════════════════════════════════════════════╗
║                     MINIRT CONTROLS                        ║
╚════════════════════════════════════════════════════════════╝

┌─ MOVEMENT / TRANSLATION ───────────────────────────────────┐
│                                                            │
│                           W (UP)                           │
│                             ▲                              │
│              A (LEFT) ◄─────┼─────► D (RIGHT)              │
│                             ▼                              │
│                          S (DOWN)                          │
│                                                            │
│                R (FORWARD)  /  F (BACKWARD)                │
│                                                            │
└────────────────────────────────────────────────────────────┘

┌─ ROTATION ─────────────────────────────────────────────────┐
│                                                            │
│                           I (UP)                           │
│                            ▲                               │
│             J (LEFT) ◄─────┼─────► L (RIGHT)               │
│                            ▼                               │
│                        K (DOWN)                            │
│                                                            │
└────────────────────────────────────────────────────────────┘

┌─ OTHER ────────────────────────────────────────────────────┐
│                                                            │
│           ESC - Close Application                          │
│                                                            │
└────────────────────────────────────────────────────────────┘

"""


def help_text() -> str:
    """Usage box followed by the keyboard controls."""
    blank = f" | {'':<45} |\n"
    lines = [
        "\n",
        " +--------------- Let me help you! --------------+\n",
        blank,
        f" | {'Usage: minirt [file.rt]':<45} |\n",
        blank,
        f" | {'e.g: minirt test1.rt':<45} |\n",
        blank,
        " +-----------------------------------------------+\n",
    ]
    return "".join(lines) + _CONTROLS