"""Square matrices in row-vector convention and the builders for them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator, Optional, Sequence

from .transform import Transform
from .vector import Vector2, Vector3

_EPSILON = 1e-6

Rows = tuple[tuple[float, ...], ...]


def _zeros(size: int) -> Rows:
    return tuple((0.0,) * size for _ in range(size))


def _to_rows(values: Sequence[Sequence[float]], size: int) -> Rows:
    rows = tuple(tuple(float(v) for v in row) for row in values)
    if len(rows) != size or any(len(row) != size for row in rows):
        raise ValueError(f"expected a {size}x{size} matrix")
    return rows


def _minor(rows: Rows, skip_row: int, skip_col: int) -> Rows:
    return tuple(
        tuple(value for c, value in enumerate(row) if c != skip_col)
        for r, row in enumerate(rows)
        if r != skip_row
    )


def _determinant(rows: Rows) -> float:
    if len(rows) == 1:
        return rows[0][0]
    if len(rows) == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
    return sum(
        (-1) ** col * value * _determinant(_minor(rows, 0, col))
        for col, value in enumerate(rows[0])
    )


def _has_no_zero(rows: Rows) -> bool:
    return all(abs(value) > _EPSILON for row in rows for value in row)


def _elementwise(a: Rows, b: Rows, op) -> Rows:
    return tuple(
        tuple(op(x, y) for x, y in zip(row_a, row_b)) for row_a, row_b in zip(a, b)
    )


@dataclass(frozen=True)
class _SquareMatrix:
    m: Optional[Sequence[Sequence[float]]] = None

    size: ClassVar[int] = 0

    def __post_init__(self) -> None:
        rows = _zeros(self.size) if self.m is None else _to_rows(self.m, self.size)
        object.__setattr__(self, "m", rows)

    def __getitem__(self, row: int) -> tuple[float, ...]:
        return self.m[row]

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return iter(self.m)


@dataclass(frozen=True)
class Matrix3x3(_SquareMatrix):
    """A 3x3 matrix for 2D homogeneous transforms."""

    size: ClassVar[int] = 3

    def __add__(self, other):
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return Matrix3x3(_elementwise(self.m, other.m, lambda x, y: x + y))

    def __sub__(self, other):
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        # The left operand is read transposed.
        return Matrix3x3(
            tuple(
                tuple(self.m[j][i] - other.m[i][j] for j in range(3)) for i in range(3)
            )
        )

    def __mul__(self, other):
        if isinstance(other, Matrix3x3):
            result = [[0.0] * 3 for _ in range(3)]
            for i in range(3):
                for j in range(3):
                    result[j][i] = sum(self.m[k][i] * other.m[j][k] for k in range(3))
            return Matrix3x3(result)
        if isinstance(other, Vector2):
            return self._transform(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Vector2):
            return self._transform(other)
        return NotImplemented

    def _transform(self, v: Vector2) -> Vector2:
        m = self.m
        x = m[0][0] * v.x + m[0][1] * v.y + m[0][2]
        y = m[1][0] * v.x + m[1][1] * v.y + m[1][2]
        w = m[2][0] * v.x + m[2][1] * v.y + m[2][2]
        if abs(w) <= _EPSILON:
            raise ZeroDivisionError("division by zero transforming a Vector2")
        return Vector2(x / w, y / w)

    def __truediv__(self, other):
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        if _has_no_zero(other.m):
            raise ZeroDivisionError("division by zero in Matrix3x3")
        return self * inverse(other)


@dataclass(frozen=True)
class Matrix4x4(_SquareMatrix):
    """A 4x4 matrix for 3D homogeneous transforms, applied to row vectors."""

    size: ClassVar[int] = 4

    def __add__(self, other):
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4(_elementwise(self.m, other.m, lambda x, y: x + y))

    def __sub__(self, other):
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4(_elementwise(self.m, other.m, lambda x, y: x - y))

    def __mul__(self, other):
        if isinstance(other, Matrix4x4):
            return Matrix4x4(
                tuple(
                    tuple(
                        sum(self.m[i][k] * other.m[k][j] for k in range(4))
                        for j in range(4)
                    )
                    for i in range(4)
                )
            )
        if isinstance(other, Vector3):
            return self._transform(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Vector3):
            return self._transform(other)
        return NotImplemented

    def _transform(self, v: Vector3) -> Vector3:
        m = self.m
        x, y, z, w = (
            v.x * m[0][c] + v.y * m[1][c] + v.z * m[2][c] + m[3][c] for c in range(4)
        )
        if w == 0.0:
            raise ZeroDivisionError("homogeneous w is zero")
        return Vector3(x / w, y / w, z / w)

    def __truediv__(self, other):
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        if _has_no_zero(other.m):
            raise ZeroDivisionError("division by zero in Matrix4x4")
        return self * inverse(other)


def inverse(m):
    """Invert a 4x4 matrix; a 3x3 matrix is returned unchanged."""
    if isinstance(m, Matrix3x3):
        return m
    if not isinstance(m, Matrix4x4):
        raise TypeError(f"cannot invert {type(m).__name__}")
    det = _determinant(m.m)
    if det == 0.0:
        raise ZeroDivisionError("matrix is singular")
    return Matrix4x4(
        tuple(
            tuple((-1) ** (i + j) * _determinant(_minor(m.m, j, i)) / det for j in range(4))
            for i in range(4)
        )
    )


def make_identity3x3() -> Matrix3x3:
    """The 3x3 identity matrix."""
    return Matrix3x3(((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)))


def make_identity4x4() -> Matrix4x4:
    """The 4x4 identity matrix."""
    return Matrix4x4(tuple(tuple(1.0 if i == j else 0.0 for j in range(4)) for i in range(4)))


def make_translation_matrix(pos: Vector3) -> Matrix4x4:
    """Translation by ``pos``, stored in the last row."""
    return Matrix4x4(
        (
            (1.0, 0.0, 0.0, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (pos.x, pos.y, pos.z, 1.0),
        )
    )


def make_rotation_matrix(angle: Vector3) -> Matrix4x4:
    """Rotation about X, then Y, then Z, by the angles in ``angle``."""
    import math

    cx, sx = math.cos(angle.x), math.sin(angle.x)
    cy, sy = math.cos(angle.y), math.sin(angle.y)
    cz, sz = math.cos(angle.z), math.sin(angle.z)
    rx = Matrix4x4(((1, 0, 0, 0), (0, cx, sx, 0), (0, -sx, cx, 0), (0, 0, 0, 1)))
    ry = Matrix4x4(((cy, 0, -sy, 0), (0, 1, 0, 0), (sy, 0, cy, 0), (0, 0, 0, 1)))
    rz = Matrix4x4(((cz, sz, 0, 0), (-sz, cz, 0, 0), (0, 0, 1, 0), (0, 0, 0, 1)))
    return rx * ry * rz


def make_scale_matrix(scale: Vector3) -> Matrix4x4:
    """Scaling along each axis."""
    return Matrix4x4(
        (
            (scale.x, 0.0, 0.0, 0.0),
            (0.0, scale.y, 0.0, 0.0),
            (0.0, 0.0, scale.z, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def make_affine_matrix(pos: Vector3, angle: Vector3, scale: Vector3) -> Matrix4x4:
    """Scale, then rotate, then translate."""
    return make_scale_matrix(scale) * make_rotation_matrix(angle) * make_translation_matrix(pos)


def make_transform_matrix(transform: Transform) -> Matrix4x4:
    """The affine matrix of a :class:`Transform`."""
    return make_affine_matrix(transform.position, transform.rotation, transform.scale)


def make_translation_matrix_2d(pos: Vector2) -> Matrix3x3:
    """2D translation by ``pos``, stored in the last row."""
    return Matrix3x3(((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (pos.x, pos.y, 1.0)))


def make_rotation_matrix_2d(angle: float) -> Matrix3x3:
    """2D rotation by ``angle`` radians."""
    import math

    c, s = math.cos(angle), math.sin(angle)
    return Matrix3x3(((c, s, 0.0), (-s, c, 0.0), (0.0, 0.0, 1.0)))


def make_scale_matrix_2d(scale: Vector2) -> Matrix3x3:
    """2D scaling."""
    return Matrix3x3(((scale.x, 0.0, 0.0), (0.0, scale.y, 0.0), (0.0, 0.0, 1.0)))


def make_affine_matrix_2d(pos: Vector2, angle: float, scale: Vector2) -> Matrix3x3:
    """Translation, rotation and scale combined through the 3x3 product."""
    return make_translation_matrix_2d(pos) * make_rotation_matrix_2d(angle) * make_scale_matrix_2d(scale)