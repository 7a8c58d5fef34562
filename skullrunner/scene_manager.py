"""Runs the current scene and switches to the scene it hands over."""

from __future__ import annotations

from typing import Optional

from .input import InputState
from .render import DrawCommand, DrawKind, Renderer
from .scene import CommonData, ModelType, Scene

SHAPE_LIMITS = {DrawKind.BOX: 1000, DrawKind.SPRITE: 10}
MODEL_LIMITS = {
    ModelType.SKYDOME: 1,
    ModelType.PLAYER: 100,
    ModelType.SKULL: 10,
    ModelType.TITLE: 1,
}


def default_limits(common_data: CommonData) -> dict:
    """Per-frame draw limits for the game's shapes and models."""
    limits: dict = dict(SHAPE_LIMITS)
    for model_type, count in MODEL_LIMITS.items():
        limits[common_data.model(model_type)] = count
    return limits


class SceneManager:
    """Owns the active scene; starts on the title screen unless told otherwise."""

    def __init__(
        self,
        common_data: CommonData,
        renderer: Optional[Renderer] = None,
        first_scene: Optional[Scene] = None,
    ) -> None:
        self.common_data = common_data
        self.renderer = renderer or Renderer(default_limits(common_data))
        if first_scene is None:
            from .title_scene import TitleScene

            first_scene = TitleScene(common_data)
        self._scene = first_scene
        self._next_scene: Optional[Scene] = None
        self._scene.initialize()

    @property
    def scene(self) -> Scene:
        return self._scene

    def update(self, inputs: InputState) -> None:
        """Switch to a pending scene, then advance the current one."""
        if self._next_scene is not None:
            self._scene = self._next_scene
            self._next_scene = None
            self._scene.initialize()
        self._next_scene = self._scene.update(inputs)

    def draw(self) -> tuple[DrawCommand, ...]:
        """Draw the current scene as one frame and return its commands."""
        self.renderer.begin_frame()
        try:
            self._scene.draw(self.renderer)
        finally:
            commands = self.renderer.end_frame()
        return commands