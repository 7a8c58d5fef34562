"""Data shared between scenes and the scene interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional


class ModelType(IntEnum):
    """Positions of the loaded models in :attr:`CommonData.model_handles`."""

    BLOCK = 0
    SKYDOME = 1
    PLAYER = 2
    SKULL = 3
    TITLE = 4


class TextureType(IntEnum):
    """Positions of the loaded textures in :attr:`CommonData.texture_handles`."""

    BLOCK = 0
    ATTACK_EFFECT = 1


@dataclass
class CommonData:
    """Model and texture handles loaded once and shared by every scene."""

    model_handles: list[int] = field(default_factory=list)
    texture_handles: list[int] = field(default_factory=list)

    def model(self, model_type: ModelType) -> int:
        """The handle of a model."""
        index = int(model_type)
        if not 0 <= index < len(self.model_handles):
            raise LookupError(f"model {model_type!r} not loaded")
        return self.model_handles[index]

    def texture(self, texture_type: TextureType) -> int:
        """The handle of a texture."""
        index = int(texture_type)
        if not 0 <= index < len(self.texture_handles):
            raise LookupError(f"texture {texture_type!r} not loaded")
        return self.texture_handles[index]


class Scene(ABC):
    """A game screen: set up, advanced frame by frame and drawn."""

    def __init__(self, common_data: CommonData) -> None:
        self.common_data = common_data

    @abstractmethod
    def initialize(self) -> None:
        """Put the scene into its starting state."""

    @abstractmethod
    def update(self, inputs) -> Optional["Scene"]:
        """Advance one frame; return the scene to switch to, or None."""

    @abstractmethod
    def draw(self, renderer) -> None:
        """Issue the scene's draw calls."""