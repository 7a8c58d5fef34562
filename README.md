# skullrunner

A small side-scrolling platformer in plain Python. The player runs and
jumps across a tile map and dashes into skull enemies to defeat them. A
skull that touches the player kills it, and the player bursts into
particles. A follow camera keeps the player in view. Scenes fade from the
title screen into the game.

Drawing goes through `skullrunner.render.Renderer`. It records a
`DrawCommand` for every draw call in a frame. You step the game, read
back what it would draw, and test it all without a graphics device. You
feed input in each frame through `skullrunner.input.InputState`.

## What is inside

- `skullrunner.vector`
  - `Vector2`, `Vector3` and `Vector4`, with `+`, `-`, `*` and `/`.
    Dividing by a component or scalar of magnitude 1e-6 or less raises
    `ZeroDivisionError`.
  - `lerp`, `lerp_color`, `ease_in`, `ease_out`, `cot`, `normalize` and
    `convert_vector`.
- `skullrunner.matrix`
  - `Matrix3x3` and `Matrix4x4`, and `inverse`.
  - Builders for identity, translation, rotation, scale and affine
    matrices in 3D and 2D (`make_*_2d`), and `make_transform_matrix`.
  - Matrices use the row-vector convention: scale, then rotate, then
    translate. `inverse` inverts a `Matrix4x4` and returns a `Matrix3x3`
    unchanged.
- `skullrunner.transform`: `Transform`, `MaterialData`,
  `DirectionalLightData`, `AABB` and `aabb_intersects`.
- `skullrunner.camera`
  - `Camera`, with perspective projections (`PerspectiveFovDesc`) and
    orthographic projections (`OrthographicDesc`).
  - `make_perspective_fov_matrix`, `make_orthographic_matrix` and
    `make_viewport_matrix`.
- `skullrunner.debug_camera.DebugCamera`: a free camera.
  - Left drag rotates.
  - Shift and left drag pans.
  - The wheel moves it forward.
- `skullrunner.input`
  - `Key`, the scan codes the game uses.
  - `InputState`, with `update`, `is_pressed`, `was_pressed`,
    `is_triggered`, `mouse_move`, `mouse_wheel`, `mouse_button` and
    `was_mouse_button`.
- `skullrunner.render`
  - `Renderer`, `DrawKind` and `DrawCommand`.
  - Draws are recorded only between `begin_frame` and `end_frame`. Draws
    outside a frame are ignored.
  - You can set per-frame limits, keyed by `DrawKind` or by model handle.
    Going over a limit raises `RuntimeError`.
- `skullrunner.mapchip`
  - `MapChip`, a grid 100 tiles wide and 20 high, read from
    comma-separated text. `0` is a blank tile and `1` is a wall. Any
    other value leaves the tile as it was.
  - `type_at`, `position_at`, `index_at` and `rect_at` convert between
    world positions, tile indices and tile rectangles.
- The game objects:
  - `skullrunner.player.Player`
  - `skullrunner.enemy.Enemy`
  - `skullrunner.death_particle.DeathParticle`
  - `skullrunner.fade.FadeInOut`
  - `skullrunner.camera_controller.CameraController`
- `skullrunner.scene`: `ModelType`, `TextureType`, `CommonData` (model and
  texture handles) and the abstract `Scene`.
- `skullrunner.title_scene.TitleScene` and
  `skullrunner.game_scene.GameScene`.
- `skullrunner.scene_manager.SceneManager`: switches to the scene that the
  current scene hands over. `draw()` returns the frame's draw commands.
- `skullrunner.audio`
  - `load_wave` and `parse_wave` read RIFF/WAVE data into `SoundData`.
    Bad data raises `WaveFormatError`.
  - `SoundLibrary` keeps loaded sounds. `request` queues a sound to play
    and `take_pending` hands back the first queued sound.
- `skullrunner.logger.Logger` writes messages to
  `Logs/<name>/<YYYYmmdd_HH.MM.SS>.log`. It also works as a context manager.

## Controls

| Key         | Action                                         |
|-------------|------------------------------------------------|
| Left/Right  | run                                            |
| Up          | jump                                           |
| Space       | fade out and start the game (title); dash attack |
| R           | restart the stage                              |
| Return      | toggle the debug camera                        |

## Examples

Vectors and bounding boxes:

```python
from skullrunner.vector import Vector3, lerp, ease_out
from skullrunner.transform import AABB, aabb_intersects

a = Vector3(1.0, 2.0, 3.0)
b = Vector3(0.5, 0.5, 0.5)
print(a + b, a * 2.0)

print(lerp(1.0, 0.0, 0.25))           # 0.75
print(ease_out(0.0, 10.0, 1.0))       # 10.0

box_a = AABB(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 1.0, 1.0))
box_b = AABB(Vector3(0.5, 0.5, 0.5), Vector3(2.0, 2.0, 2.0))
print(aabb_intersects(box_a, box_b))  # True
```

Tile maps are read from text, one row per line, top row first:

```python
from skullrunner.mapchip import MapChip, MapChipType

rows = ["0" * 100] * 19 + ["1" * 100]
text = "\n".join(",".join(row) for row in rows)

stage = MapChip()
stage.load_text(text, block_handle=0, camera=None)

print(stage.type_at(0, 19) is MapChipType.WALL)   # True
print(stage.index_at(stage.position_at(3, 19)))   # IndexSet(x=3, y=19)
```

Stepping the game one frame at a time:

```python
from skullrunner.game_scene import GameScene
from skullrunner.input import InputState, Key
from skullrunner.scene import CommonData
from skullrunner.scene_manager import SceneManager

common = CommonData(model_handles=[0, 1, 2, 3, 4], texture_handles=[0, 1])
scene = GameScene(common, map_path="stage.csv")
manager = SceneManager(common, first_scene=scene)

inputs = InputState()
inputs.update(keys=[Key.RIGHTARROW])
manager.update(inputs)
commands = manager.draw()
```

`SceneManager` starts on a `TitleScene` unless you pass it a
`first_scene`. The title hands over to a `GameScene`. By default,
`GameScene` reads its map from `resources/blocks.csv`.

## What this package does not do

The package has no window, no graphics device, no keyboard capture and no
sound output.

- There is no command to launch the game.
- A program using the package supplies its own main loop. It fills an
  `InputState` each frame, calls `SceneManager.update` and
  `SceneManager.draw`, and turns the returned `DrawCommand` entries into
  pixels itself.
- Model and texture handles are plain integers that the caller chooses.
  The package loads no model or image files.
- `SoundLibrary` only decodes sounds and queues play requests. Playing a
  sound is up to the caller.

## Running the tests

Install the `test` extra, then run `pytest` from the project directory.