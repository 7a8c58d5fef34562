"""The playing field: the player, the skulls, the block map and the camera."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .camera import Camera, PerspectiveFovDesc
from .camera_controller import CameraController
from .debug_camera import DebugCamera
from .enemy import Enemy
from .fade import FadeInOut
from .input import InputState, Key
from .logger import Logger
from .mapchip import MapChip, Rect
from .matrix import make_identity4x4
from .player import Player, PlayerState
from .scene import CommonData, ModelType, Scene, TextureType
from .transform import DirectionalLightData, MaterialData, aabb_intersects
from .vector import Vector3, Vector4

DEFAULT_MAP_PATH = "resources/blocks.csv"
FADE_TIME = 60
MOVABLE_AREA = (12.0, 88.0, 88.0, 7.2)
EXTRA_ENEMY_POSITIONS = ((15.0, 4.5, 0.0), (20.0, 1.5, 0.0))


def _assign(target: Camera, source: Camera) -> None:
    target.projection = source.projection
    target.view = source.view
    target.combined = source.combined


class GameScene(Scene):
    """The main game: R restarts, Enter toggles the free camera."""

    def __init__(
        self,
        common_data: CommonData,
        map_path: Union[str, Path] = DEFAULT_MAP_PATH,
        logger: Optional[Logger] = None,
    ) -> None:
        super().__init__(common_data)
        self.map_path = map_path
        self._logger = logger
        self._camera = Camera()
        self._debug_camera = DebugCamera()
        self._player = Player()
        self._camera_controller = CameraController()
        self._map_chip = MapChip()
        self._fade = FadeInOut()
        self._enemies: list[Enemy] = []
        self._skydome = -1
        self._is_debug_camera = False

    @property
    def camera(self) -> Camera:
        return self._camera

    @property
    def player(self) -> Player:
        return self._player

    @property
    def enemies(self) -> tuple[Enemy, ...]:
        return tuple(self._enemies)

    @property
    def map_chip(self) -> MapChip:
        return self._map_chip

    @property
    def fade(self) -> FadeInOut:
        return self._fade

    @property
    def is_debug_camera(self) -> bool:
        return self._is_debug_camera

    def _log(self, message: str) -> None:
        if self._logger is not None:
            self._logger.log(message)

    def _spawn(self, position: Optional[Vector3] = None) -> Enemy:
        enemy = Enemy()
        enemy.initialize(self._camera, self.common_data.model(ModelType.SKULL), 0)
        if position is not None:
            enemy.set_position(position)
        return enemy

    def initialize(self) -> None:
        """Place everything at its start and load the map."""
        data = self.common_data
        self._skydome = data.model(ModelType.SKYDOME)
        self._player.initialize(
            self._camera, data.model(ModelType.PLAYER), data.texture(TextureType.ATTACK_EFFECT)
        )

        self._enemies = [self._spawn()]
        self._enemies.extend(self._spawn(Vector3(*p)) for p in EXTRA_ENEMY_POSITIONS)

        left, right, top, bottom = MOVABLE_AREA
        self._camera_controller.initialize(Rect(left=left, right=right, top=top, bottom=bottom))
        self._camera_controller.set_target(self._player)

        self._map_chip.load(self.map_path, data.texture(TextureType.BLOCK), self._camera)
        self._player.set_map_chip(self._map_chip)

        self._debug_camera.initialize()

        self._fade.initialize(FADE_TIME, self._camera)
        self._fade.switch(True)

    def update(self, inputs: InputState) -> Optional[Scene]:
        """Advance the game one frame; the game scene never hands over."""
        if inputs.is_triggered(Key.R):
            self.initialize()

        self._camera_controller.update()
        if self._is_debug_camera:
            self._debug_camera.update(inputs)
            _assign(self._camera, self._debug_camera.camera())
        else:
            _assign(self._camera, self._camera_controller.camera)
            self._camera.set_projection(PerspectiveFovDesc())
        self._camera.make_matrix()
        self._log("Camera Complete")

        self._fade.update()

        if inputs.is_triggered(Key.RETURN):
            self._is_debug_camera = not self._is_debug_camera

        self._player.update(inputs)
        self._log("Player Update Complete")

        for enemy in self._enemies:
            enemy.update()
        self._enemies = [enemy for enemy in self._enemies if not enemy.is_death]
        self._log("Enemy Update Complete")

        self._check_all_collisions()
        self._log("Collision Check Complete")
        return None

    def draw(self, renderer) -> None:
        """Draw the sky, the player, the skulls, the map and the fade overlay."""
        renderer.draw_model(
            self._skydome,
            make_identity4x4(),
            self._camera,
            MaterialData(Vector4(1.0, 1.0, 1.0, 1.0), True),
            DirectionalLightData(),
        )
        self._player.draw(renderer)
        self._log("Player Draw Complete")
        for enemy in self._enemies:
            enemy.draw(renderer)
        self._log("Enemy Draw Complete")
        self._map_chip.draw(renderer)
        self._log("MapChip Draw Complete")
        self._log("Draw Complete\n")
        self._fade.draw(renderer)

    def _check_all_collisions(self) -> None:
        player_box = self._player.aabb()
        if self._player.state is not PlayerState.ALIVE:
            return
        for enemy in self._enemies:
            if enemy.is_invisible:
                continue
            if aabb_intersects(player_box, enemy.aabb()):
                if self._player.is_attack:
                    enemy.on_collision(self._player)
                else:
                    self._player.on_collision(enemy)
                break