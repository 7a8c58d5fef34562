import pytest

from skullrunner.camera import Camera
from skullrunner.camera_controller import CameraController
from skullrunner.mapchip import Rect
from skullrunner.transform import Transform
from skullrunner.vector import Vector3


class _Target:
    def __init__(self, position, velocity=None):
        self.transform = Transform(position=position)
        self.velocity = velocity or Vector3()


def _controller(area=None, target=None):
    controller = CameraController()
    controller.initialize(area or Rect(left=12.0, right=88.0, top=88.0, bottom=7.2))
    if target is not None:
        controller.set_target(target)
    return controller


def test_update_without_target_raises():
    controller = _controller()
    with pytest.raises(RuntimeError):
        controller.update()


def test_camera_stays_inside_movable_area():
    area = Rect(left=12.0, right=88.0, top=88.0, bottom=7.2)
    controller = _controller(area, _Target(Vector3(1.5, 1.5, 0.0)))
    for _ in range(30):
        controller.update()
        pos = controller.camera_position
        assert area.left <= pos.x <= area.right
        assert area.bottom <= pos.y <= area.top


def test_camera_stays_within_margin_of_target():
    controller = _controller(target=_Target(Vector3(50.0, 10.0, 0.0)))
    controller.update()
    pos = controller.camera_position
    assert 50.0 - 16.0 <= pos.x <= 50.0 + 16.0


def test_camera_converges_on_still_target():
    controller = _controller(target=_Target(Vector3(50.0, 40.0, 0.0)))
    for _ in range(300):
        controller.update()
    pos = controller.camera_position
    assert pos.x == pytest.approx(50.0, abs=1e-6)
    assert pos.z == pytest.approx(-32.0, abs=1e-6)


def test_camera_matrix_follows_position():
    controller = _controller(target=_Target(Vector3(40.0, 20.0, 0.0)))
    for _ in range(5):
        controller.update()
    pos = controller.camera_position
    read = controller.camera.position()
    assert read.x == pytest.approx(pos.x)
    assert read.y == pytest.approx(pos.y)
    assert read.z == pytest.approx(pos.z)


def test_small_area_clamps_camera():
    controller = _controller(target=_Target(Vector3(50.0, 40.0, 0.0)))
    controller.set_movable_area(Rect(left=0.0, right=5.0, top=5.0, bottom=0.0))
    for _ in range(20):
        controller.update()
    pos = controller.camera_position
    assert pos.x <= 5.0
    assert pos.y <= 5.0


def test_velocity_leads_the_camera():
    still = _controller(target=_Target(Vector3(40.0, 20.0, 0.0)))
    moving = _controller(target=_Target(Vector3(40.0, 20.0, 0.0), Vector3(1.0, 0.0, 0.0)))
    for _ in range(10):
        still.update()
        moving.update()
    assert moving.camera_position.x > still.camera_position.x


def test_reset_returns_offset_position():
    controller = _controller(target=_Target(Vector3(3.0, 4.0, 0.0)))
    transform = controller.reset()
    assert transform.position.x == pytest.approx(3.0)
    assert transform.position.y == pytest.approx(4.0 + 1.8)
    assert transform.position.z == pytest.approx(-32.0)


def test_reset_without_target_returns_none():
    controller = _controller()
    assert controller.reset() is None


def test_set_camera_copies_state():
    source = Camera()
    source.set_transform(Transform(position=Vector3(1.0, 2.0, 3.0)))
    controller = _controller()
    controller.set_camera(source)
    assert controller.camera.view == source.view
    source.set_transform(Transform(position=Vector3(9.0, 9.0, 9.0)))
    assert controller.camera.view != source.view
    assert controller.camera.position().x == pytest.approx(1.0)