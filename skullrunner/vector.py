"""Small 2, 3 and 4 component vectors and scalar helpers used by the game."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Iterator, TypeVar, Union

_EPSILON = 1e-6

_V = TypeVar("_V", "Vector2", "Vector3", "Vector4")


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _iter(self) -> Iterator[float]:
    return iter(tuple(getattr(self, f.name) for f in fields(self)))


def _add(self, other):
    if type(other) is not type(self):
        return NotImplemented
    return type(self)(*(a + b for a, b in zip(self, other)))


def _sub(self, other):
    if type(other) is not type(self):
        return NotImplemented
    return type(self)(*(a - b for a, b in zip(self, other)))


def _mul(self, other):
    if type(other) is type(self):
        return type(self)(*(a * b for a, b in zip(self, other)))
    if _is_scalar(other):
        return type(self)(*(a * other for a in self))
    return NotImplemented


def _rmul(self, other):
    if _is_scalar(other):
        return type(self)(*(other * a for a in self))
    return NotImplemented


def _truediv(self, other):
    components = tuple(self)
    if type(other) is type(self):
        divisors = tuple(other)
    elif _is_scalar(other):
        divisors = (other,) * len(components)
    else:
        return NotImplemented
    if any(abs(d) <= _EPSILON for d in divisors):
        raise ZeroDivisionError(f"division by zero in {type(self).__name__}")
    return type(self)(*(a / d for a, d in zip(components, divisors)))


def _neg(self):
    return type(self)(*(-a for a in self))


@dataclass
class Vector2:
    """A two component vector."""

    x: float = 0.0
    y: float = 0.0

    __iter__ = _iter
    __neg__ = _neg

    def __add__(self, other):
        return _add(self, other)

    def __sub__(self, other):
        return _sub(self, other)

    def __mul__(self, other):
        return _mul(self, other)

    def __rmul__(self, other):
        return _rmul(self, other)

    def __truediv__(self, other):
        return _truediv(self, other)


@dataclass
class Vector3:
    """A three component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    __iter__ = _iter
    __neg__ = _neg

    def __add__(self, other):
        return _add(self, other)

    def __sub__(self, other):
        return _sub(self, other)

    def __mul__(self, other):
        return _mul(self, other)

    def __rmul__(self, other):
        return _rmul(self, other)

    def __truediv__(self, other):
        return _truediv(self, other)


@dataclass
class Vector4:
    """A four component vector, used for homogeneous positions and colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    __iter__ = _iter
    __neg__ = _neg

    def __add__(self, other):
        return _add(self, other)

    def __sub__(self, other):
        return _sub(self, other)

    def __mul__(self, other):
        return _mul(self, other)

    def __rmul__(self, other):
        return _rmul(self, other)

    def __truediv__(self, other):
        return _truediv(self, other)


Scalar = Union[int, float]


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between two scalars."""
    return a + (b - a) * t


def lerp_color(start: int, end: int, t: float) -> int:
    """Interpolate two packed 32-bit colours channel by channel.

    Channels are read from the lowest byte upwards and written back from the
    highest byte downwards, so the result has its byte order reversed.
    """
    starts = [(start >> shift) & 0xFF for shift in (0, 8, 16, 24)]
    ends = [(end >> shift) & 0xFF for shift in (0, 8, 16, 24)]
    result = 0
    for shift, (s, e) in zip((24, 16, 8, 0), zip(starts, ends)):
        result |= int(s + (e - s) * t) << shift
    return result & 0xFFFFFFFF


def ease_in(a, b, t: float):
    """Cubic ease-in between two scalars or two vectors."""
    return a + (b - a) * (t * t * t)


def ease_out(a, b, t: float):
    """Cubic ease-out between two scalars or two vectors."""
    u = 1.0 - t
    return a + (b - a) * (1.0 - u * u * u)


def convert_vector(v: Vector4) -> Vector3:
    """Drop the w component of a four component vector."""
    return Vector3(v.x, v.y, v.z)


def cot(radian: float) -> float:
    """Cotangent of an angle in radians."""
    return math.cos(radian) / math.sin(radian)


def normalize(vec: Vector3) -> Vector3:
    """Return a unit vector pointing the same way as ``vec``."""
    length = math.sqrt(vec.x * vec.x + vec.y * vec.y + vec.z * vec.z)
    if length == 0.0:
        raise ZeroDivisionError("cannot normalize a zero-length vector")
    return Vector3(vec.x / length, vec.y / length, vec.z / length)