"""A full-screen black overlay that fades in or out."""

from __future__ import annotations

from typing import Optional

from .camera import Camera
from .matrix import make_transform_matrix
from .transform import DirectionalLightData, MaterialData, Transform
from .vector import Vector3, Vector4, lerp

_CORNERS = (
    Vector4(-5.0, 4.0, 0.0, 1.0),
    Vector4(5.0, 4.0, 0.0, 1.0),
    Vector4(-5.0, -4.0, 0.0, 1.0),
    Vector4(5.0, -4.0, 0.0, 1.0),
)


class FadeInOut:
    """Fades in by counting the timer up to ``fade_time``, out by counting down."""

    def __init__(self) -> None:
        self.camera: Optional[Camera] = None
        self.material = MaterialData()
        self.transform = Transform()
        self.fade_timer = 0
        self.fade_time = 0
        self.is_fade_in = False

    def initialize(self, fade_time: int, camera: Camera) -> None:
        """Set the fade length in frames and the camera to follow."""
        if fade_time <= 0:
            raise ValueError("fade_time must be positive")
        self.fade_time = fade_time
        self.camera = camera
        self.material = MaterialData(Vector4(0.0, 0.0, 0.0, 1.0), True)
        self.transform = Transform()
        self.transform.position.z = -1.0

    def update(self) -> None:
        """Advance one frame and place the overlay in front of the camera."""
        if self.camera is None:
            raise RuntimeError("FadeInOut used before initialize")
        if not self.is_fade_in:
            self.fade_timer -= 1
        elif self.fade_timer < self.fade_time:
            self.fade_timer += 1
        self.material.color.w = lerp(1.0, 0.0, self.fade_timer / self.fade_time)
        position = self.camera.position()
        position.z += 1
        self.transform.position = position

    def draw(self, renderer) -> None:
        """Draw the overlay."""
        renderer.draw_sprite(
            *_CORNERS,
            make_transform_matrix(self.transform),
            self.camera,
            self.material,
            DirectionalLightData(),
        )

    def switch(self, fade_in: bool) -> None:
        """Choose fading in (True) or out (False)."""
        self.is_fade_in = fade_in

    def set_position(self, position: Vector3) -> None:
        """Place and stretch the overlay relative to ``position``."""
        self.transform.position = position * 0.3
        self.transform.scale = Vector3(1.0 + position.x * 0.3, 1.0 + position.y * 0.3, 1.0)