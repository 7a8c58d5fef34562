"""Projection descriptions and a camera holding view and projection matrices."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, field
from typing import Union

from .matrix import (
    Matrix4x4,
    inverse,
    make_identity4x4,
    make_rotation_matrix,
    make_scale_matrix,
    make_translation_matrix,
)
from .transform import Transform
from .vector import Vector3, cot


@dataclass
class PerspectiveFovDesc:
    """Perspective projection parameters, defaulting to a 1280x720 screen."""

    fov_y: float = 0.45
    aspect_ratio: float = 1280.0 / 720.0
    near_clip: float = 0.1
    far_clip: float = 100.0


@dataclass
class OrthographicDesc:
    """Orthographic projection parameters."""

    left: float = -640.0
    top: float = 640.0
    right: float = -360.0
    bottom: float = 360.0
    near_clip: float = 0.0
    far_clip: float = 1000.0


def make_perspective_fov_matrix(fov_y, aspect_ratio, near_clip, far_clip) -> Matrix4x4:
    """A left-handed perspective projection."""
    c = cot(fov_y / 2)
    depth = far_clip - near_clip
    return Matrix4x4(
        (
            (c / aspect_ratio, 0.0, 0.0, 0.0),
            (0.0, c, 0.0, 0.0),
            (0.0, 0.0, far_clip / depth, 1.0),
            (0.0, 0.0, (-near_clip * far_clip) / depth, 0.0),
        )
    )


def make_orthographic_matrix(left, top, right, bottom, near_clip, far_clip) -> Matrix4x4:
    """An orthographic projection."""
    return Matrix4x4(
        (
            (2 / (right - left), 0.0, 0.0, 0.0),
            (0.0, 2 / (top - bottom), 0.0, 0.0),
            (0.0, 0.0, 1 / (far_clip - near_clip), 0.0),
            (
                (left + right) / (left - right),
                (top + bottom) / (bottom - top),
                near_clip / (near_clip - far_clip),
                1.0,
            ),
        )
    )


def make_viewport_matrix(left, top, width, height, min_depth, max_depth) -> Matrix4x4:
    """A viewport transform from normalised device to screen coordinates."""
    return Matrix4x4(
        (
            (width / 2, 0.0, 0.0, 0.0),
            (0.0, -height / 2, 0.0, 0.0),
            (0.0, 0.0, max_depth - min_depth, 0.0),
            (left + width / 2, top + height / 2, min_depth, 1.0),
        )
    )


@dataclass
class Camera:
    """A view matrix, a projection matrix and their product."""

    projection: Matrix4x4 = field(default_factory=make_identity4x4)
    view: Matrix4x4 = field(default_factory=Matrix4x4)
    combined: Matrix4x4 = field(default_factory=make_identity4x4)

    def set_projection(self, desc: Union[PerspectiveFovDesc, OrthographicDesc]) -> None:
        """Replace the projection matrix from a description."""
        if isinstance(desc, PerspectiveFovDesc):
            self.projection = make_perspective_fov_matrix(
                desc.fov_y, desc.aspect_ratio, desc.near_clip, desc.far_clip
            )
        elif isinstance(desc, OrthographicDesc):
            self.projection = make_orthographic_matrix(
                desc.left, desc.top, desc.right, desc.bottom, desc.near_clip, desc.far_clip
            )
        else:
            raise TypeError(f"unknown projection description {type(desc).__name__}")

    def make_matrix(self) -> None:
        """Recompute the view-projection product."""
        self.combined = self.view * self.projection

    def set_transform(self, transform: Transform) -> None:
        """Set the view from a camera transform."""
        self.view = (
            make_scale_matrix(transform.scale)
            * make_rotation_matrix(transform.rotation)
            * inverse(make_translation_matrix(transform.position))
        )

    def set_transform_matrix(self, matrix: Matrix4x4) -> None:
        """Set the view matrix directly."""
        self.view = matrix

    def vp_matrix(self) -> Matrix4x4:
        """The last computed view-projection matrix."""
        return self.combined

    def position(self) -> Vector3:
        """The camera position read back from the view matrix."""
        row = self.view[3]
        return Vector3(-row[0], -row[1], -row[2])

    def copy(self) -> "Camera":
        """An independent copy of this camera."""
        return _copy.copy(self)