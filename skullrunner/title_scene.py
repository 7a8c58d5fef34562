"""The title screen: shows the title and fades out when space is pressed."""

from __future__ import annotations

from typing import Callable, Optional

from .camera import Camera, PerspectiveFovDesc
from .fade import FadeInOut
from .input import InputState, Key
from .matrix import make_transform_matrix
from .scene import CommonData, ModelType, Scene
from .transform import Transform
from .vector import Vector3

FADE_TIME = 60
CAMERA_POSITION = (0.0, 0.0, -10.0)


def _game_scene(common_data: CommonData) -> Scene:
    from .game_scene import GameScene

    return GameScene(common_data)


class TitleScene(Scene):
    """Hands over to the next scene once the fade-out completes."""

    def __init__(
        self,
        common_data: CommonData,
        next_scene: Optional[Callable[[CommonData], Scene]] = None,
    ) -> None:
        super().__init__(common_data)
        self.title_handle = common_data.model(ModelType.TITLE)
        self._camera = Camera()
        self._fade = FadeInOut()
        self._next_scene = next_scene or _game_scene

    @property
    def camera(self) -> Camera:
        return self._camera

    @property
    def fade(self) -> FadeInOut:
        return self._fade

    def initialize(self) -> None:
        """Set up the fixed camera and start fading in."""
        self._camera.set_projection(PerspectiveFovDesc())
        self._camera.set_transform(Transform(position=Vector3(*CAMERA_POSITION)))
        self._camera.make_matrix()
        self._fade.initialize(FADE_TIME, self._camera)
        self._fade.switch(True)

    def update(self, inputs: InputState) -> Optional[Scene]:
        """Advance the fade; return the next scene once it has faded out."""
        self._fade.update()
        if inputs.is_pressed(Key.SPACE):
            self._fade.switch(False)
        if self._fade.fade_timer <= 0:
            return self._next_scene(self.common_data)
        return None

    def draw(self, renderer) -> None:
        """Draw the title model and the fade overlay."""
        transform = Transform()
        transform.position.z = 1.0
        renderer.draw_model(self.title_handle, make_transform_matrix(transform), self._camera)
        self._fade.draw(renderer)