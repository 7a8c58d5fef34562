"""The player: running, jumping, a dash attack and block collisions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .camera import Camera
from .death_particle import DeathParticle
from .input import InputState, Key
from .mapchip import MapChip, MapChipType
from .matrix import make_transform_matrix
from .transform import AABB, DirectionalLightData, MaterialData, Transform
from .vector import Vector3, Vector4, ease_out

SIZE = 0.8
ATTENUATION = 0.1
ACCELERATION = 0.01
RUN_SPEED_MAX = 0.2
TIME_TURN = 0.2
JUMP_SPEED = 0.8
GRAVITY_ACCELERATION = 0.05
FALL_SPEED_MAX = 1.0
BUFFER_POSITION = 0.01
ATTENUATION_LANDING = 0.5
ATTACK_COOLTIME = 30
ATTACK_TIME = 20
ACCUMULATE_TIME = 5
RUSH_TIME = 9
MAX_ATTACK_VELOCITY = 0.7
EFFECT_OFFSET = Vector3(1.2, 0.0, 0.0)
PARTICLE_COOLTIME = 90
GROUND_Y = 1.5
FRAME_TIME = 1.0 / 60.0

_SCALE_NORMAL = Vector3(1.0, 1.0, 1.0)
_SCALE_ACCUMULATE = Vector3(1.0, 1.3, 0.3)
_SCALE_RUSH = Vector3(1.0, 0.7, 1.3)


class PlayerState(Enum):
    """Whether the player is alive."""

    ALIVE = "alive"
    DEATH = "death"


@dataclass
class CollisionMapInfo:
    """The result of checking one frame's movement against the map."""

    is_roof: bool = False
    is_floor: bool = False
    is_wall: bool = False
    movement: Vector3 = field(default_factory=Vector3)


class _Corner(Enum):
    RIGHT_BOTTOM = (1.0, -1.0)
    LEFT_BOTTOM = (-1.0, -1.0)
    RIGHT_TOP = (1.0, 1.0)
    LEFT_TOP = (-1.0, 1.0)


class _Behavior(Enum):
    UNKNOWN = "unknown"
    ROOT = "root"
    ATTACK = "attack"


class _AttackPhase(Enum):
    ACCUMULATE = "accumulate"
    RUSH = "rush"
    FIN = "fin"


def _corner(center: Vector3, corner: _Corner) -> Vector3:
    sx, sy = corner.value
    return Vector3(center.x + sx * SIZE / 2.0, center.y + sy * SIZE / 2.0, center.z)


def _copy_transform(t: Transform) -> Transform:
    return Transform(Vector3(*t.scale), Vector3(*t.rotation), Vector3(*t.position))


class Player:
    """The player character, controlled with the arrow keys and space."""

    def __init__(self) -> None:
        self._death_particle = DeathParticle()
        self._transform = Transform()
        self.camera: Optional[Camera] = None
        self.model = -1
        self._state = PlayerState.ALIVE
        self._particle_cooltime: list[int] = []
        self._velocity = Vector3()
        self._begin_rotate_y = 0.0
        self._turn_timer = 0.0
        self._is_right = True
        self._on_ground = False
        self._map_chip: Optional[MapChip] = None
        self._request = _Behavior.ROOT
        self._behavior = _Behavior.ROOT
        self._attack_cooltime = 0
        self._attack_time = 0
        self._attack_phase = _AttackPhase.ACCUMULATE
        self._effect_transform = Transform()
        self.attack_effect = -1
        self._is_attack = False

    @property
    def state(self) -> PlayerState:
        return self._state

    @property
    def is_attack(self) -> bool:
        return self._is_attack

    @property
    def on_ground(self) -> bool:
        return self._on_ground

    @property
    def transform(self) -> Transform:
        """A copy of the player's transform."""
        return _copy_transform(self._transform)

    @property
    def velocity(self) -> Vector3:
        """A copy of the player's velocity."""
        return Vector3(*self._velocity)

    @property
    def death_particle(self) -> DeathParticle:
        return self._death_particle

    def initialize(self, camera: Camera, model: int, attack_effect: int) -> None:
        """Place the player at the start, facing right."""
        self.camera = camera
        self._transform = Transform(position=Vector3(1.5, 1.5, 0.0))
        self._transform.rotation.y = math.pi / 2.0
        self.model = model
        self._is_right = True
        self._state = PlayerState.ALIVE
        self._effect_transform = Transform()
        self.attack_effect = attack_effect
        self._death_particle.initialize(camera, model)

    def set_map_chip(self, map_chip: MapChip) -> None:
        """Set the map the player collides with."""
        self._map_chip = map_chip

    def update(self, inputs: InputState) -> None:
        """Advance one frame using this frame's input."""
        self._behavior_update(inputs)
        self._death_particle.update()
        if self._state is not PlayerState.ALIVE:
            return

        if self._behavior is _Behavior.ROOT:
            self._move(inputs)
        elif self._behavior is _Behavior.ATTACK:
            self._attack()

        if self._map_chip is None:
            raise RuntimeError("map chip not set")
        info = CollisionMapInfo(movement=Vector3(*self._velocity))
        self._check_roof(info)
        self._check_floor(info)
        self._check_right(info)
        self._check_left(info)

        self._transform.position = self._transform.position + self._velocity
        self._switch_landing(info)

        self._particle_cooltime = [t - 1 if t > 0 else t for t in self._particle_cooltime]
        if self._attack_cooltime > 0:
            self._attack_cooltime -= 1

        if self._turn_timer > 0.0:
            self._turn_timer -= FRAME_TIME
            destination = math.pi / 2.0 if self._is_right else math.pi * 3.0 / 2.0
            t = 1.0 - self._turn_timer / TIME_TURN
            self._transform.rotation.y = self._begin_rotate_y * (1.0 - t) + destination * t

    def draw(self, renderer) -> None:
        """Draw the particles, the player and, while attacking, the effect."""
        self._death_particle.draw(renderer)
        if self._state is PlayerState.DEATH:
            return
        renderer.draw_model(self.model, make_transform_matrix(self._transform), self.camera)
        if self._is_attack:
            renderer.draw_quad(
                make_transform_matrix(self._effect_transform),
                self.camera,
                MaterialData(Vector4(1.0, 1.0, 1.0, 1.0), True),
                DirectionalLightData(),
                self.attack_effect,
            )

    def aabb(self) -> AABB:
        """The player's bounding box."""
        half = Vector3(SIZE / 2.0, SIZE / 2.0, SIZE / 2.0)
        return AABB(self._transform.position - half, self._transform.position + half)

    def on_collision(self, enemy) -> None:
        """Die, bursting into particles unless this enemy did so recently."""
        self._state = PlayerState.DEATH
        number = enemy.number
        if number >= len(self._particle_cooltime):
            self._particle_cooltime.extend([0] * (number + 1 - len(self._particle_cooltime)))
        if self._particle_cooltime[number] <= 0:
            self._particle_cooltime[number] = PARTICLE_COOLTIME
            self._death_particle.boot(self._transform.position)

    def _move(self, inputs: InputState) -> None:
        v = self._velocity
        right = inputs.is_pressed(Key.RIGHTARROW)
        if inputs.is_pressed(Key.LEFTARROW) or right:
            if right:
                if not self._is_right:
                    self._start_turn(True)
                if v.x < 0:
                    v.x *= 1.0 - ATTENUATION
                v.x += ACCELERATION
            else:
                if self._is_right:
                    self._start_turn(False)
                if v.x > 0:
                    v.x *= 1.0 - ATTENUATION
                v.x -= ACCELERATION
        else:
            v.x *= 1.0 - ATTENUATION

        v.x = min(max(v.x, -RUN_SPEED_MAX), RUN_SPEED_MAX)

        if self._on_ground:
            if inputs.is_pressed(Key.UPARROW):
                v.y += JUMP_SPEED
                self._on_ground = False
        elif v.y < 0 and self._transform.position.y <= GROUND_Y + BUFFER_POSITION:
            self._transform.position.y = GROUND_Y
            v.x *= 1.0 - ATTENUATION
            v.y = 0.0
            self._on_ground = True
        else:
            v.y = max(v.y - GRAVITY_ACCELERATION, -FALL_SPEED_MAX)

    def _start_turn(self, to_right: bool) -> None:
        self._is_right = to_right
        self._begin_rotate_y = self._transform.rotation.y
        self._turn_timer = TIME_TURN

    def _direction(self) -> float:
        return 1.0 if self._is_right else -1.0

    def _attack(self) -> None:
        self._attack_time += 1
        if self._attack_time >= ATTACK_TIME:
            self._request = _Behavior.ROOT
            self._is_attack = False
            return

        if self._attack_phase is _AttackPhase.ACCUMULATE:
            t = self._attack_time / ACCUMULATE_TIME
            self._transform.scale = ease_out(_SCALE_NORMAL, _SCALE_ACCUMULATE, t)
            if self._attack_time >= ACCUMULATE_TIME:
                self._attack_phase = _AttackPhase.RUSH
                self._velocity.x += MAX_ATTACK_VELOCITY * self._direction()
                self._is_attack = True
        elif self._attack_phase is _AttackPhase.RUSH:
            t = (self._attack_time - ACCUMULATE_TIME) / RUSH_TIME
            self._transform.scale = ease_out(_SCALE_ACCUMULATE, _SCALE_RUSH, t)
            self._velocity.x *= 1.0 - ATTENUATION
            if self._attack_time >= RUSH_TIME + ACCUMULATE_TIME:
                self._attack_phase = _AttackPhase.FIN
                self._velocity = Vector3()
        else:
            t = (self._attack_time - ACCUMULATE_TIME - RUSH_TIME) / (
                ATTACK_TIME - ACCUMULATE_TIME - RUSH_TIME
            )
            self._transform.scale = ease_out(_SCALE_RUSH, _SCALE_NORMAL, t)

        self._effect_transform.position = (
            self._transform.position + EFFECT_OFFSET * self._direction()
        )

    def _wall_hit(self, moved: Vector3, corners, next_row: Optional[int] = None) -> bool:
        hit = False
        for corner in corners:
            index = self._map_chip.index_at(_corner(moved, corner))
            if self._map_chip.type_at(index.x, index.y) is not MapChipType.WALL:
                continue
            if (
                next_row is not None
                and self._map_chip.type_at(index.x, index.y + next_row) is MapChipType.WALL
            ):
                continue
            hit = True
        return hit

    def _check_roof(self, info: CollisionMapInfo) -> None:
        if info.movement.y <= 0:
            return
        pos = self._transform.position
        if not self._wall_hit(pos + info.movement, (_Corner.LEFT_TOP, _Corner.RIGHT_TOP), 1):
            return
        top = Vector3(pos.x, pos.y + SIZE / 2, pos.z)
        index = self._map_chip.index_at(top + info.movement)
        rect = self._map_chip.rect_at(index.x, index.y)
        buffer = rect.bottom - pos.y - SIZE / 2
        info.movement.y = 0.0 if buffer < 0.0 else buffer
        info.is_roof = True
        self._velocity.y = info.movement.y

    def _check_floor(self, info: CollisionMapInfo) -> None:
        if info.movement.y >= 0:
            return
        pos = self._transform.position
        if not self._wall_hit(
            pos + info.movement, (_Corner.LEFT_BOTTOM, _Corner.RIGHT_BOTTOM), -1
        ):
            return
        bottom = Vector3(pos.x, pos.y - SIZE / 2, pos.z)
        index = self._map_chip.index_at(bottom + info.movement)
        rect = self._map_chip.rect_at(index.x, index.y)
        buffer = rect.top - pos.y + 0.5 + BUFFER_POSITION
        info.movement.y = 0.0 if buffer > 0.0 else buffer
        info.is_floor = True
        self._velocity.y = info.movement.y

    def _check_right(self, info: CollisionMapInfo) -> None:
        if info.movement.x <= 0.0:
            return
        pos = self._transform.position
        if not self._wall_hit(pos + info.movement, (_Corner.RIGHT_TOP, _Corner.RIGHT_BOTTOM)):
            return
        right = Vector3(pos.x + SIZE / 2, pos.y, pos.z)
        index = self._map_chip.index_at(right + info.movement)
        rect = self._map_chip.rect_at(index.x, index.y)
        buffer = rect.left - pos.x - SIZE / 2 - BUFFER_POSITION
        info.movement.x = 0.0 if buffer < 0.0 else buffer
        info.is_wall = True
        self._velocity.x = info.movement.x

    def _check_left(self, info: CollisionMapInfo) -> None:
        if info.movement.x >= 0:
            return
        pos = self._transform.position
        if not self._wall_hit(pos + info.movement, (_Corner.LEFT_BOTTOM, _Corner.LEFT_TOP)):
            return
        left = Vector3(pos.x - SIZE / 2, pos.y, pos.z)
        index = self._map_chip.index_at(left + info.movement)
        rect = self._map_chip.rect_at(index.x, index.y)
        buffer = rect.right - pos.x + SIZE / 2 + BUFFER_POSITION
        info.movement.x = 0.0 if buffer > 0.0 else buffer
        info.is_wall = True
        self._velocity.x = info.movement.x

    def _switch_landing(self, info: CollisionMapInfo) -> None:
        if self._on_ground:
            if self._velocity.y > 0.0:
                self._on_ground = False
                return
            probe = self._transform.position - Vector3(0.0, BUFFER_POSITION + 0.3, 0.0)
            if not self._wall_hit(probe, (_Corner.LEFT_BOTTOM, _Corner.RIGHT_BOTTOM)):
                self._on_ground = False
        elif info.is_floor:
            self._on_ground = True
            self._velocity.x *= 1.0 - ATTENUATION_LANDING
            self._velocity.y = 0.0

    def _behavior_update(self, inputs: InputState) -> None:
        if self._state is not PlayerState.ALIVE:
            return
        if self._attack_cooltime > 0:
            self._attack_cooltime -= 1
        if self._request is not _Behavior.UNKNOWN:
            self._behavior = self._request
            self._behavior_initialize(self._request)
            self._request = _Behavior.UNKNOWN
        if inputs.is_triggered(Key.SPACE) and self._attack_cooltime <= 0:
            self._request = _Behavior.ATTACK
            self._attack_cooltime = ATTACK_COOLTIME

    def _behavior_initialize(self, behavior: _Behavior) -> None:
        if behavior is _Behavior.ROOT:
            self._velocity = Vector3()
        elif behavior is _Behavior.ATTACK:
            self._attack_time = 0
            self._velocity = Vector3()
            self._attack_phase = _AttackPhase.ACCUMULATE
            self._effect_transform.scale.x = self._direction()
            self._effect_transform.scale.y = self._direction() * 1.2