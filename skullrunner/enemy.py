"""A skull that drifts left, rocking, and spins away when defeated."""

from __future__ import annotations

import math
from enum import Enum
from typing import Optional

from .camera import Camera
from .matrix import make_transform_matrix
from .transform import AABB, Transform
from .vector import Vector3

SIZE = 1.0
SPEED = 0.01
ROLL_TIME = 1.0
ROLL_ANGLE_START = 0.2
ROLL_ANGLE_END = 0.5
DEATH_TIME = 60
DEATH_ROLL_Y = 0.1
DEATH_ROLL_X = 1.57
FRAME_TIME = 1.0 / 60.0


class _Behavior(Enum):
    UNKNOWN = "unknown"
    ROOT = "root"
    DEATH = "death"


class Enemy:
    """An enemy identified by ``number``."""

    def __init__(self) -> None:
        self._transform = Transform()
        self.camera: Optional[Camera] = None
        self.skull = -1
        self.number = 0
        self._roll_timer = 0.0
        self._behavior = _Behavior.ROOT
        self._request = _Behavior.UNKNOWN
        self._death_time = 0
        self.is_invisible = False
        self.is_death = False

    @property
    def transform(self) -> Transform:
        """A copy of the enemy's transform."""
        t = self._transform
        return Transform(Vector3(*t.scale), Vector3(*t.rotation), Vector3(*t.position))

    def initialize(self, camera: Camera, skull: int, number: int) -> None:
        """Place the enemy at its start and set its model and number."""
        self.camera = camera
        self._transform = Transform(
            rotation=Vector3(0.0, -math.pi / 2.0, 0.0),
            position=Vector3(15.0, 1.5, 0.0),
        )
        self.skull = skull
        self.number = number

    def update(self) -> None:
        """Advance one frame."""
        self._behavior_update()
        if self._behavior is _Behavior.ROOT:
            self._move()
        elif self._behavior is _Behavior.DEATH:
            self._die()

    def draw(self, renderer) -> None:
        """Draw the skull model."""
        renderer.draw_model(self.skull, make_transform_matrix(self._transform), self.camera)

    def on_collision(self, player) -> None:
        """Start dying and stop taking part in collisions."""
        self._request = _Behavior.DEATH
        self.is_invisible = True

    def aabb(self) -> AABB:
        """The enemy's bounding box."""
        half = Vector3(SIZE / 2, SIZE / 2, SIZE / 2)
        return AABB(self._transform.position - half, self._transform.position + half)

    def set_position(self, position: Vector3) -> None:
        """Move the enemy to ``position``."""
        self._transform.position = Vector3(*position)

    def _behavior_update(self) -> None:
        if self._request is not _Behavior.UNKNOWN:
            self._behavior_initialize(self._request)
            self._behavior = self._request
            self._request = _Behavior.UNKNOWN

    def _behavior_initialize(self, behavior: _Behavior) -> None:
        if behavior is _Behavior.DEATH:
            self._death_time = 0
            self._transform.rotation.x = DEATH_ROLL_X

    def _move(self) -> None:
        self._roll_timer += FRAME_TIME
        if self._roll_timer > ROLL_TIME:
            self._roll_timer -= ROLL_TIME
        t = math.sin(self._roll_timer * 2.0 * math.pi / ROLL_TIME)
        self._transform.rotation.x = ROLL_ANGLE_START * (1.0 - t) + ROLL_ANGLE_END * t
        self._transform.position.x -= SPEED

    def _die(self) -> None:
        self._death_time += 1
        if self._death_time >= DEATH_TIME:
            self.is_death = True
            return
        self._transform.rotation.y += DEATH_ROLL_Y