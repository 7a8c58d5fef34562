import pytest

from skullrunner.scene import CommonData, ModelType, Scene, TextureType


class _Simple(Scene):
    def __init__(self, common_data):
        super().__init__(common_data)
        self.frames = 0

    def initialize(self):
        self.frames = 0

    def update(self, inputs):
        self.frames += 1
        return None

    def draw(self, renderer):
        renderer.append(self.frames)


def test_enum_order_matches_load_order():
    data = CommonData(model_handles=[0, 1, 2, 3, 4], texture_handles=[0, 1])
    assert data.model(ModelType.TITLE) == 4
    assert data.model(ModelType.SKYDOME) == 1
    assert data.texture(TextureType.ATTACK_EFFECT) == 1


def test_model_and_texture_lookup():
    data = CommonData(model_handles=[10, 11, 12, 13, 14], texture_handles=[20, 21])
    assert data.model(ModelType.PLAYER) == 12
    assert data.model(ModelType.TITLE) == 14
    assert data.texture(TextureType.BLOCK) == 20
    assert data.texture(TextureType.ATTACK_EFFECT) == 21


def test_missing_handles_raise():
    data = CommonData(model_handles=[1], texture_handles=[])
    with pytest.raises(LookupError):
        data.model(ModelType.SKULL)
    with pytest.raises(LookupError):
        data.texture(TextureType.BLOCK)


def test_scene_is_abstract():
    with pytest.raises(TypeError):
        Scene(CommonData())


def test_subclass_keeps_common_data_and_runs():
    data = CommonData(model_handles=[5])
    scene = _Simple(data)
    assert scene.common_data is data
    scene.initialize()
    assert scene.update(None) is None
    drawn = []
    scene.draw(drawn)
    assert drawn == [1]