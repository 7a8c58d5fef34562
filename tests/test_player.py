import math

import pytest

from skullrunner.camera import Camera
from skullrunner.death_particle import PARTICLES_PER_BURST
from skullrunner.enemy import Enemy
from skullrunner.input import InputState, Key
from skullrunner.mapchip import MapChip
from skullrunner.player import Player, PlayerState
from skullrunner.render import DrawKind, Renderer
from skullrunner.vector import Vector3


def _map(walls=()):
    rows = [["0"] * 100 for _ in range(20)]
    rows[19] = ["1"] * 100
    for x, y in walls:
        rows[y][x] = "1"
    chip = MapChip()
    chip.load_text("\n".join(",".join(row) for row in rows), 0, Camera())
    return chip


def _player(walls=()):
    player = Player()
    player.initialize(Camera(), 4, 9)
    player.set_map_chip(_map(walls))
    return player


def _step(player, inputs, keys=(), frames=1):
    for _ in range(frames):
        inputs.update(keys=keys)
        player.update(inputs)


def _enemy(number):
    enemy = Enemy()
    enemy.initialize(Camera(), 2, number)
    return enemy


def test_initialize_sets_start_state():
    player = _player()
    assert player.transform.position == Vector3(1.5, 1.5, 0.0)
    assert player.transform.rotation.y == pytest.approx(math.pi / 2.0)
    assert player.state is PlayerState.ALIVE
    assert player.is_attack is False


def test_update_without_map_chip_raises():
    player = Player()
    player.initialize(Camera(), 4, 9)
    with pytest.raises(RuntimeError):
        player.update(InputState())


def test_settles_on_the_floor():
    player = _player()
    inputs = InputState()
    _step(player, inputs, frames=5)
    assert player.on_ground is True
    assert player.transform.position.y == pytest.approx(1.5)
    assert player.velocity == Vector3()


def test_running_right_is_capped():
    player = _player()
    inputs = InputState()
    _step(player, inputs, keys=[Key.RIGHTARROW], frames=40)
    assert player.velocity.x == pytest.approx(0.2)
    assert player.transform.position.x > 1.5


def test_jump_rises_and_lands_again():
    player = _player()
    inputs = InputState()
    _step(player, inputs, frames=3)
    _step(player, inputs, keys=[Key.UPARROW])
    assert player.on_ground is False
    assert player.velocity.y > 0
    heights = []
    for _ in range(80):
        _step(player, inputs)
        heights.append(player.transform.position.y)
    assert max(heights) > 2.0
    assert player.on_ground is True
    assert player.transform.position.y == pytest.approx(1.5, abs=0.05)
    assert player.velocity.y == 0.0


def test_wall_stops_running():
    player = _player(walls=[(5, 17), (5, 18)])
    inputs = InputState()
    _step(player, inputs, keys=[Key.RIGHTARROW], frames=100)
    box = player.aabb()
    assert box.max.x <= 5.0
    assert box.max.x > 4.5


def test_aabb_is_centred_on_position():
    player = _player()
    box = player.aabb()
    center = (box.min + box.max) * 0.5
    assert center == player.transform.position
    assert box.max.x - box.min.x == pytest.approx(0.8)


def test_attack_rushes_then_ends():
    player = _player()
    inputs = InputState()
    _step(player, inputs, frames=3)
    _step(player, inputs, keys=[Key.SPACE])
    _step(player, inputs, frames=5)
    assert player.is_attack is True
    assert player.velocity.x > 0
    _step(player, inputs, frames=15)
    assert player.is_attack is False


def test_draw_while_attacking_adds_effect_quad():
    player = _player()
    inputs = InputState()
    renderer = Renderer()
    renderer.begin_frame()
    player.draw(renderer)
    idle = renderer.end_frame()
    assert [c.kind for c in idle] == [DrawKind.MODEL]
    assert idle[0].model_handle == 4

    _step(player, inputs, keys=[Key.SPACE])
    _step(player, inputs, frames=5)
    renderer.begin_frame()
    player.draw(renderer)
    attacking = renderer.end_frame()
    assert [c.kind for c in attacking] == [DrawKind.MODEL, DrawKind.SPRITE]
    assert attacking[1].texture == 9


def test_collision_kills_and_bursts_once_per_enemy():
    player = _player()
    player.on_collision(_enemy(2))
    assert player.state is PlayerState.DEATH
    assert len(player.death_particle.bursts) == 1
    player.on_collision(_enemy(2))
    assert len(player.death_particle.bursts) == 1
    player.on_collision(_enemy(0))
    assert len(player.death_particle.bursts) == 2


def test_dead_player_does_not_move_or_draw_itself():
    player = _player()
    inputs = InputState()
    player.on_collision(_enemy(0))
    before = player.transform.position
    _step(player, inputs, keys=[Key.RIGHTARROW], frames=10)
    assert player.transform.position == before
    renderer = Renderer()
    renderer.begin_frame()
    player.draw(renderer)
    commands = renderer.end_frame()
    assert len(commands) == PARTICLES_PER_BURST
    assert all(c.kind is DrawKind.MODEL for c in commands)