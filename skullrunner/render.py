"""A renderer that records the draw calls issued during a frame."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Mapping, Optional

from .camera import Camera
from .matrix import Matrix4x4
from .transform import DirectionalLightData, MaterialData
from .vector import Vector4

DEFAULT_TEXTURE = 1

_QUAD = (
    Vector4(-0.5, 0.5, 0.0, 1.0),
    Vector4(0.5, 0.5, 0.0, 1.0),
    Vector4(-0.5, -0.5, 0.0, 1.0),
    Vector4(0.5, -0.5, 0.0, 1.0),
)


class DrawKind(Enum):
    """The shapes the renderer can draw."""

    TRIANGLE = "triangle"
    SPHERE = "sphere"
    SPRITE = "sprite"
    PRISM = "prism"
    BOX = "box"
    MODEL = "model"


@dataclass(frozen=True)
class DrawCommand:
    """One recorded draw call."""

    kind: DrawKind
    world: Matrix4x4
    view_projection: Matrix4x4
    material: MaterialData
    light: DirectionalLightData
    texture: Optional[int] = None
    model_handle: Optional[int] = None
    vertices: tuple[Vector4, ...] = ()
    radius: Optional[float] = None


class Renderer:
    """Collects draw commands between :meth:`begin_frame` and :meth:`end_frame`.

    ``limits`` caps the draws per frame, keyed by :class:`DrawKind` for shapes
    and by model handle for models; going over a cap raises ``RuntimeError``.
    Draws issued outside a frame are ignored.
    """

    def __init__(self, limits: Optional[Mapping[Hashable, int]] = None) -> None:
        self._limits = dict(limits or {})
        self._commands: list[DrawCommand] = []
        self._counts: Counter = Counter()
        self._drawing = False

    @property
    def drawing(self) -> bool:
        return self._drawing

    @property
    def commands(self) -> tuple[DrawCommand, ...]:
        return tuple(self._commands)

    def begin_frame(self) -> None:
        """Start recording a new frame."""
        self._commands = []
        self._counts.clear()
        self._drawing = True

    def end_frame(self) -> tuple[DrawCommand, ...]:
        """Stop recording and return the frame's commands."""
        frame = tuple(self._commands)
        self._commands = []
        self._counts.clear()
        self._drawing = False
        return frame

    def _submit(self, key: Hashable, command: DrawCommand) -> None:
        if not self._drawing:
            return
        limit = self._limits.get(key)
        if limit is not None and self._counts[key] >= limit:
            raise RuntimeError(f"draw limit of {limit} exceeded for {key!r}")
        self._counts[key] += 1
        self._commands.append(command)

    def draw_triangle(self, left, top, right, world, camera: Camera,
                      material=None, light=None, texture=DEFAULT_TEXTURE) -> None:
        """Draw a textured triangle; triangles are always drawn unlit by default light."""
        self._submit(DrawKind.TRIANGLE, DrawCommand(
            DrawKind.TRIANGLE, world, camera.vp_matrix(),
            material or MaterialData(), DirectionalLightData(),
            texture=texture, vertices=(left, top, right),
        ))

    def draw_sphere(self, radius, world, camera: Camera,
                    material=None, light=None, texture=DEFAULT_TEXTURE) -> None:
        """Draw a sphere of ``radius``."""
        self._submit(DrawKind.SPHERE, DrawCommand(
            DrawKind.SPHERE, world, camera.vp_matrix(),
            material or MaterialData(), light or DirectionalLightData(),
            texture=texture, radius=radius,
        ))

    def draw_model(self, model_handle, world, camera: Camera,
                   material=None, light=None) -> None:
        """Draw a loaded model with its own texture."""
        self._submit(model_handle, DrawCommand(
            DrawKind.MODEL, world, camera.vp_matrix(),
            material or MaterialData(), light or DirectionalLightData(),
            model_handle=model_handle,
        ))

    def draw_sprite(self, lt, rt, lb, rb, world, camera: Camera,
                    material=None, light=None, texture=DEFAULT_TEXTURE) -> None:
        """Draw a quad from its four corners."""
        self._submit(DrawKind.SPRITE, DrawCommand(
            DrawKind.SPRITE, world, camera.vp_matrix(),
            material or MaterialData(), light or DirectionalLightData(),
            texture=texture, vertices=(lt, rt, lb, rb),
        ))

    def draw_quad(self, world, camera: Camera,
                  material=None, light=None, texture=DEFAULT_TEXTURE) -> None:
        """Draw a unit quad centred on the origin."""
        self.draw_sprite(*_QUAD, world, camera, material, light, texture)

    def draw_prism(self, world, camera: Camera,
                   material=None, light=None, texture=DEFAULT_TEXTURE) -> None:
        """Draw an octahedral prism."""
        self._submit(DrawKind.PRISM, DrawCommand(
            DrawKind.PRISM, world, camera.vp_matrix(),
            material or MaterialData(), light or DirectionalLightData(),
            texture=texture,
        ))

    def draw_box(self, world, camera: Camera,
                 material=None, light=None, texture=DEFAULT_TEXTURE) -> None:
        """Draw a unit cube."""
        self._submit(DrawKind.BOX, DrawCommand(
            DrawKind.BOX, world, camera.vp_matrix(),
            material or MaterialData(), light or DirectionalLightData(),
            texture=texture,
        ))