"""Transform, material, light and bounding-box records."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vector import Vector3, Vector4

# Only the first three rows are given; the last row stays zero.
DEFAULT_UV_TRANSFORM: tuple[tuple[float, ...], ...] = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 0.0),
)


@dataclass
class Transform:
    """Scale, rotation (radians) and position of an object."""

    scale: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    rotation: Vector3 = field(default_factory=Vector3)
    position: Vector3 = field(default_factory=Vector3)


@dataclass
class MaterialData:
    """Colour, lighting switch and UV transform of a drawn object."""

    color: Vector4 = field(default_factory=lambda: Vector4(1.0, 1.0, 1.0, 1.0))
    enable_lighting: bool = True
    uv_transform: tuple[tuple[float, ...], ...] = DEFAULT_UV_TRANSFORM


@dataclass
class DirectionalLightData:
    """A directional light: colour, direction and intensity."""

    color: Vector4 = field(default_factory=Vector4)
    direction: Vector3 = field(default_factory=Vector3)
    intensity: float = 0.0


@dataclass
class AABB:
    """An axis-aligned bounding box."""

    min: Vector3 = field(default_factory=Vector3)
    max: Vector3 = field(default_factory=Vector3)


def aabb_intersects(a: AABB, b: AABB) -> bool:
    """True when two boxes overlap or touch on every axis."""
    return (
        a.min.x <= b.max.x
        and a.max.x >= b.min.x
        and a.min.y <= b.max.y
        and a.max.y >= b.min.y
        and a.min.z <= b.max.z
        and a.max.z >= b.min.z
    )