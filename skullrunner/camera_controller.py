"""A camera that follows a moving target inside a bounded area."""

from __future__ import annotations

from typing import Optional

from .camera import Camera, PerspectiveFovDesc
from .mapchip import Rect
from .transform import Transform
from .vector import Vector3

TARGET_OFFSET = (0.0, 1.8, -32.0)
INTERPOLATION_RATE = 0.1
VELOCITY_BIAS = 5.0
MARGIN = Rect(left=-16.0, right=16.0, top=8.0, bottom=-8.0)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _lerp3(a: Vector3, b: Vector3, t: float) -> Vector3:
    return Vector3(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t, a.z + (b.z - a.z) * t)


def _same(a: Vector3, b: Vector3) -> bool:
    return (a.x, a.y, a.z) == (b.x, b.y, b.z)


class CameraController:
    """Eases a camera towards a target, leading it by the target's velocity.

    The target is any object with ``transform`` and ``velocity`` attributes.
    """

    def __init__(self) -> None:
        self._camera = Camera()
        self._target = None
        self._offset = Vector3(*TARGET_OFFSET)
        self._target_pos = Vector3()
        self._lerp_ratio = 0.0
        self._camera_pos = Vector3()
        self.movable_area = Rect()

    @property
    def camera(self) -> Camera:
        return self._camera

    @property
    def camera_position(self) -> Vector3:
        """A copy of the position the camera was last placed at."""
        return Vector3(*self._camera_pos)

    def initialize(self, area: Rect) -> None:
        """Set the area the camera may move in and forget the target."""
        self.movable_area = area
        self._target = None
        self._camera.set_projection(PerspectiveFovDesc())

    def update(self) -> None:
        """Move the camera one frame towards the target."""
        if self._target is None:
            raise RuntimeError("camera target not set")
        position = self._target.transform.position

        if not _same(self._target_pos, position):
            self._lerp_ratio = 0.0

        target = position + self._target.velocity * VELOCITY_BIAS
        target.y = position.y + self._offset.y
        self._target_pos = target

        if self._lerp_ratio < 1.0:
            self._lerp_ratio += INTERPOLATION_RATE

        pos = _lerp3(self._camera_pos, target + self._offset, self._lerp_ratio)
        pos.x = _clamp(pos.x, target.x + MARGIN.left, target.x + MARGIN.right)
        pos.y = _clamp(pos.y, target.y + MARGIN.bottom, target.y + MARGIN.top)
        area = self.movable_area
        pos.x = _clamp(pos.x, area.left, area.right)
        pos.y = _clamp(pos.y, area.bottom, area.top)
        self._camera_pos = pos

        self._camera.set_transform(Transform(position=Vector3(*pos)))
        self._camera.make_matrix()

    def reset(self) -> Optional[Transform]:
        """The transform that puts the camera straight at the target's offset.

        Returns None when there is no target.
        """
        if self._target is None:
            return None
        return Transform(position=self._target.transform.position + self._offset)

    def set_target(self, target) -> None:
        """Follow ``target``."""
        self._target = target

    def set_movable_area(self, area: Rect) -> None:
        """Change the area the camera may move in."""
        self.movable_area = area

    def set_camera(self, camera: Camera) -> None:
        """Replace the controlled camera's state with a copy of ``camera``."""
        self._camera = camera.copy()