"""Bursts of eight particles flying outwards and fading over three seconds."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from .camera import Camera
from .logger import Logger
from .matrix import make_transform_matrix
from .transform import MaterialData, Transform
from .vector import Vector3, Vector4

PARTICLES_PER_BURST = 8
LIFE_TIME = 3.0
SPEED = 0.01
FRAME_TIME = 0.016


@dataclass
class _Burst:
    transforms: list[Transform]
    colors: list[Vector4]
    timer: float = 0.0


_DIRECTIONS = tuple(
    Vector3(math.cos(theta), math.sin(theta), 0.0)
    for theta in (j / PARTICLES_PER_BURST * math.pi * 2.0 for j in range(PARTICLES_PER_BURST))
)


@dataclass
class DeathParticle:
    """Spawns and animates particle bursts."""

    logger: Optional[Logger] = None
    camera: Optional[Camera] = None
    model_handle: int = -1
    _bursts: list[_Burst] = field(default_factory=list)

    @property
    def bursts(self) -> tuple[_Burst, ...]:
        return tuple(self._bursts)

    def initialize(self, camera: Camera, model_handle: int) -> None:
        """Set the camera and the model each particle is drawn with."""
        self.camera = camera
        self.model_handle = model_handle

    def _log(self, message: str) -> None:
        if self.logger is not None:
            self.logger.log(message)

    def update(self) -> None:
        """Advance every burst by one frame and drop expired ones.

        The burst right after an expired one is left untouched that frame.
        """
        survivors = []
        skip_next = False
        for number, burst in enumerate(self._bursts):
            if skip_next:
                skip_next = False
                survivors.append(burst)
                continue
            burst.timer += FRAME_TIME
            self._log(f"now particle Num : {number * PARTICLES_PER_BURST}")
            if burst.timer > LIFE_TIME:
                skip_next = True
                continue
            t = burst.timer / LIFE_TIME
            for transform, color, normal in zip(burst.transforms, burst.colors, _DIRECTIONS):
                transform.position = transform.position + normal * SPEED
                color.w = 1.0 - t
            survivors.append(burst)
        self._bursts = survivors
        self._log(f"ended particle Num : {len(self._bursts)}")

    def draw(self, renderer) -> None:
        """Draw every live particle."""
        for burst in self._bursts:
            for transform, color in zip(burst.transforms, burst.colors):
                renderer.draw_model(
                    self.model_handle,
                    make_transform_matrix(transform),
                    self.camera,
                    MaterialData(Vector4(*color), True),
                )

    def boot(self, pos: Vector3) -> None:
        """Start a new burst at ``pos``."""
        self._bursts.append(
            _Burst(
                transforms=[
                    Transform(position=Vector3(*pos)) for _ in range(PARTICLES_PER_BURST)
                ],
                colors=[Vector4(1.0, 1.0, 1.0, 1.0) for _ in range(PARTICLES_PER_BURST)],
            )
        )