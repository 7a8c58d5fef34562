import pytest

from skullrunner.game_scene import GameScene
from skullrunner.input import InputState, Key
from skullrunner.render import DrawKind, Renderer
from skullrunner.scene import CommonData
from skullrunner.title_scene import TitleScene


@pytest.fixture
def common():
    return CommonData(model_handles=[0, 1, 2, 3, 4], texture_handles=[7, 8])


def test_camera_placed_in_front_of_title(common):
    scene = TitleScene(common)
    scene.initialize()
    pos = scene.camera.position()
    assert pos.x == pytest.approx(0.0)
    assert pos.z == pytest.approx(-10.0)


def test_fades_in_without_input(common):
    scene = TitleScene(common)
    scene.initialize()
    inputs = InputState()
    timers = []
    for _ in range(5):
        inputs.update()
        assert scene.update(inputs) is None
        timers.append(scene.fade.fade_timer)
    assert timers == sorted(timers)
    assert timers[0] < timers[-1]


def test_space_fades_out_and_hands_over(common):
    made = []

    def factory(data):
        made.append(data)
        return "next"

    scene = TitleScene(common, next_scene=factory)
    scene.initialize()
    inputs = InputState()
    inputs.update(keys=[Key.SPACE])
    assert scene.update(inputs) is None
    inputs.update(keys=[Key.SPACE])
    assert scene.update(inputs) == "next"
    assert made == [common]


def test_longer_fade_in_takes_longer_to_leave(common):
    scene = TitleScene(common, next_scene=lambda data: "next")
    scene.initialize()
    inputs = InputState()
    for _ in range(10):
        inputs.update()
        scene.update(inputs)
    results = []
    for _ in range(20):
        inputs.update(keys=[Key.SPACE])
        results.append(scene.update(inputs))
    assert results.count("next") >= 1
    assert results.index("next") > 1


def test_default_next_scene_is_game_scene(common):
    scene = TitleScene(common)
    scene.initialize()
    inputs = InputState()
    inputs.update(keys=[Key.SPACE])
    scene.update(inputs)
    nxt = scene.update(inputs)
    assert isinstance(nxt, GameScene)
    assert nxt.common_data is common


def test_draw_title_then_overlay(common):
    scene = TitleScene(common)
    scene.initialize()
    renderer = Renderer()
    renderer.begin_frame()
    scene.draw(renderer)
    commands = renderer.end_frame()
    assert [c.kind for c in commands] == [DrawKind.MODEL, DrawKind.SPRITE]
    assert commands[0].model_handle == 4