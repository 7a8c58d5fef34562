"""A free camera driven by the mouse, for inspecting a scene."""

from __future__ import annotations

from typing import Optional

from .camera import Camera, PerspectiveFovDesc
from .input import InputState, Key
from .matrix import make_rotation_matrix
from .transform import Transform
from .vector import Vector3

_SPEED = 0.01


class DebugCamera:
    """Left drag rotates, shift + left drag pans, the wheel moves forward."""

    def __init__(self) -> None:
        self._camera = Camera()
        self._center = Vector3()
        self._distance = -10.0
        self._transform = Transform()

    def initialize(self, camera: Optional[Camera] = None) -> None:
        """Reset the position, optionally starting from a copy of ``camera``."""
        if camera is not None:
            self._camera = camera.copy()
        self._center = Vector3()
        self._transform.scale = Vector3(1.0, 1.0, 1.0)
        self._transform.position = Vector3(0.0, 0.0, -20.0)

    def update(self, inputs: InputState) -> None:
        """Move or rotate according to this frame's mouse input."""
        center_velocity = Vector3()
        if inputs.mouse_button(0):
            move = inputs.mouse_move()
            if inputs.is_pressed(Key.LSHIFT):
                center_velocity = Vector3(-move.x, move.y, 0.0) * _SPEED
            else:
                self._transform.rotation = (
                    self._transform.rotation + Vector3(move.y, move.x, 0.0) * _SPEED * 0.1
                )
        center_velocity.z += inputs.mouse_wheel() * _SPEED * 0.1
        self._transform.position = self._transform.position + center_velocity * make_rotation_matrix(
            self._transform.rotation
        )
        self._camera.set_transform(self._transform)
        self._camera.set_projection(PerspectiveFovDesc())

    def camera(self) -> Camera:
        """A copy of the camera this controller drives."""
        return self._camera.copy()