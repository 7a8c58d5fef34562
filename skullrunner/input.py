"""Keyboard and mouse state for one frame and the frame before it."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Union

from .vector import Vector2

_KEY_COUNT = 256
_MOUSE_BUTTONS = 4


class Key(IntEnum):
    """Keyboard scan codes used by the game."""

    R = 0x13
    RETURN = 0x1C
    LSHIFT = 0x2A
    SPACE = 0x39
    UPARROW = 0xC8
    LEFTARROW = 0xCB
    RIGHTARROW = 0xCD
    DOWNARROW = 0xD0


KeyCode = Union[Key, int]


def _checked(values: Iterable[int], limit: int, what: str) -> frozenset[int]:
    result = frozenset(int(v) for v in values)
    bad = [v for v in result if not 0 <= v < limit]
    if bad:
        raise ValueError(f"invalid {what}: {sorted(bad)}")
    return result


class InputState:
    """Current and previous keyboard and mouse state."""

    def __init__(self) -> None:
        self._keys: frozenset[int] = frozenset()
        self._pre_keys: frozenset[int] = frozenset()
        self._buttons: frozenset[int] = frozenset()
        self._pre_buttons: frozenset[int] = frozenset()
        self._move = Vector2()
        self._wheel = 0.0

    def update(self, keys=(), mouse_move=None, mouse_wheel=0.0, mouse_buttons=()) -> None:
        """Start a new frame with the given pressed keys and mouse state."""
        new_keys = _checked(keys, _KEY_COUNT, "key code")
        new_buttons = _checked(mouse_buttons, _MOUSE_BUTTONS, "mouse button")
        self._pre_keys, self._keys = self._keys, new_keys
        self._pre_buttons, self._buttons = self._buttons, new_buttons
        self._move = Vector2(*mouse_move) if mouse_move is not None else Vector2()
        self._wheel = float(mouse_wheel)

    def is_pressed(self, key: KeyCode) -> bool:
        """True when the key is down this frame."""
        return int(key) in self._keys

    def was_pressed(self, key: KeyCode) -> bool:
        """True when the key was down the frame before."""
        return int(key) in self._pre_keys

    def is_triggered(self, key: KeyCode) -> bool:
        """True on the frame the key goes down."""
        return self.is_pressed(key) and not self.was_pressed(key)

    def mouse_move(self) -> Vector2:
        """Relative mouse movement this frame."""
        return Vector2(self._move.x, self._move.y)

    def mouse_wheel(self) -> float:
        """Mouse wheel movement this frame."""
        return self._wheel

    def mouse_button(self, index: int) -> bool:
        """True when the mouse button is down this frame."""
        return index in self._buttons

    def was_mouse_button(self, index: int) -> bool:
        """True when the mouse button was down the frame before."""
        return index in self._pre_buttons