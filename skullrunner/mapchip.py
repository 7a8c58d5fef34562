"""A fixed-size block map read from comma separated text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from .camera import Camera
from .matrix import make_transform_matrix
from .transform import DirectionalLightData, MaterialData, Transform
from .vector import Vector3, Vector4

BLOCK_SIZE = 1.0
HEIGHT = 20
WIDTH = 100


class MapChipType(Enum):
    """What occupies a map cell."""

    BLANK = "blank"
    WALL = "wall"


_TABLE = {"0": MapChipType.BLANK, "1": MapChipType.WALL}


@dataclass(frozen=True)
class IndexSet:
    """Column and row of a map cell; row 0 is the top of the map."""

    x: int
    y: int


@dataclass
class Rect:
    """An axis-aligned rectangle in world units."""

    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0


class MapChip:
    """A grid of blank and wall cells, 100 wide and 20 high."""

    def __init__(self) -> None:
        self._data = [[MapChipType.BLANK] * WIDTH for _ in range(HEIGHT)]
        self._transforms = [[Transform() for _ in range(WIDTH)] for _ in range(HEIGHT)]
        self.block_handle = -1
        self.camera: Optional[Camera] = None

    def load(self, path: Union[str, Path], block_handle: int, camera: Camera) -> None:
        """Read the map from a CSV file."""
        text = Path(path).read_text(encoding="utf-8")
        self.load_text(text, block_handle, camera)

    def load_text(self, text: str, block_handle: int, camera: Camera) -> None:
        """Read the map from CSV text; unknown values leave a cell unchanged."""
        for y, line in enumerate(text.splitlines()[:HEIGHT]):
            for x, value in enumerate(line.split(",")[:WIDTH]):
                chip = _TABLE.get(value)
                if chip is not None:
                    self._data[y][x] = chip
        self._transforms = [
            [Transform(position=self.position_at(x, y)) for x in range(WIDTH)]
            for y in range(HEIGHT)
        ]
        self.block_handle = block_handle
        self.camera = camera

    def draw(self, renderer) -> None:
        """Draw a box for every wall cell."""
        for data_row, transform_row in zip(self._data, self._transforms):
            for chip, transform in zip(data_row, transform_row):
                if chip is MapChipType.BLANK:
                    continue
                renderer.draw_box(
                    make_transform_matrix(transform),
                    self.camera,
                    MaterialData(Vector4(1.0, 1.0, 1.0, 1.0), True),
                    DirectionalLightData(),
                    self.block_handle,
                )

    def type_at(self, x_index: int, y_index: int) -> MapChipType:
        """The cell type, or blank outside the map."""
        if not (0 <= x_index < WIDTH and 0 <= y_index < HEIGHT):
            return MapChipType.BLANK
        return self._data[y_index][x_index]

    def position_at(self, x_index: int, y_index: int) -> Vector3:
        """World position of a cell's centre."""
        return Vector3(
            BLOCK_SIZE * x_index + BLOCK_SIZE / 2,
            BLOCK_SIZE * (HEIGHT - 1 - y_index) + BLOCK_SIZE / 2,
            0.0,
        )

    def index_at(self, position: Vector3) -> IndexSet:
        """The cell containing a world position."""
        return IndexSet(
            int(position.x / BLOCK_SIZE),
            HEIGHT - 1 - int(position.y / BLOCK_SIZE),
        )

    def rect_at(self, x_index: int, y_index: int) -> Rect:
        """The world rectangle of a cell."""
        center = self.position_at(x_index, y_index)
        half = BLOCK_SIZE / 2
        return Rect(
            left=center.x - half,
            right=center.x + half,
            top=center.y + half,
            bottom=center.y - half,
        )