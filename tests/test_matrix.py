import math

import pytest

from skullrunner.matrix import (
    Matrix3x3,
    Matrix4x4,
    inverse,
    make_affine_matrix,
    make_identity3x3,
    make_identity4x4,
    make_rotation_matrix,
    make_scale_matrix,
    make_transform_matrix,
    make_translation_matrix,
)
from skullrunner.transform import Transform
from skullrunner.vector import Vector2, Vector3


def _assert_close(a, b):
    for row_a, row_b in zip(a, b):
        assert row_a == pytest.approx(row_b, abs=1e-9)


SAMPLE = Matrix4x4(
    (
        (2.0, 0.5, 0.0, 1.0),
        (0.0, 3.0, 1.0, 0.0),
        (1.0, 0.0, 4.0, 2.0),
        (0.0, 1.0, 0.0, 1.0),
    )
)


def test_identity_is_neutral():
    assert make_identity4x4() * SAMPLE == SAMPLE
    assert SAMPLE * make_identity4x4() == SAMPLE


def test_inverse_round_trip():
    _assert_close(inverse(SAMPLE) * SAMPLE, make_identity4x4())
    _assert_close(SAMPLE * inverse(SAMPLE), make_identity4x4())


def test_inverse_of_singular_matrix_raises():
    with pytest.raises(ZeroDivisionError):
        inverse(Matrix4x4())


def test_inverse_of_3x3_is_unchanged():
    m = Matrix3x3(((1, 2, 3), (4, 5, 6), (7, 8, 10)))
    assert inverse(m) == m


def test_translation_moves_row_vector():
    v = Vector3(1.0, 2.0, 3.0)
    offset = Vector3(10.0, 20.0, 30.0)
    assert v * make_translation_matrix(offset) == v + offset
    assert make_translation_matrix(offset) * v == v + offset


def test_translation_inverse_undoes_translation():
    offset = Vector3(4.0, -2.0, 7.5)
    v = Vector3(1.0, 1.0, 1.0)
    moved = v * make_translation_matrix(offset)
    back = moved * inverse(make_translation_matrix(offset))
    assert tuple(back) == pytest.approx(tuple(v))


def test_zero_w_raises():
    with pytest.raises(ZeroDivisionError):
        Vector3(1.0, 2.0, 3.0) * Matrix4x4()


def test_rotation_preserves_length():
    v = Vector3(1.0, 2.0, 3.0)
    rotated = v * make_rotation_matrix(Vector3(0.3, 1.1, -0.7))
    assert math.hypot(*rotated) == pytest.approx(math.hypot(*v))


def test_rotation_about_z_quarter_turn():
    rotated = Vector3(1.0, 0.0, 0.0) * make_rotation_matrix(Vector3(0.0, 0.0, math.pi / 2))
    assert tuple(rotated) == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)


def test_scale_matrix_diagonal():
    m = make_scale_matrix(Vector3(2.0, 3.0, 4.0))
    assert (m[0][0], m[1][1], m[2][2], m[3][3]) == (2.0, 3.0, 4.0, 1.0)


def test_affine_without_rotation_or_scale_is_translation():
    pos = Vector3(1.5, -3.0, 2.0)
    assert make_affine_matrix(pos, Vector3(), Vector3(1.0, 1.0, 1.0)) == make_translation_matrix(pos)


def test_transform_matrix_of_default_transform_is_identity():
    assert make_transform_matrix(Transform()) == make_identity4x4()
    t = Transform(position=Vector3(5.0, 6.0, 7.0))
    assert make_transform_matrix(t) == make_translation_matrix(t.position)


def test_add_sub_round_trip():
    other = make_translation_matrix(Vector3(1.0, 2.0, 3.0))
    assert (SAMPLE + other) - other == SAMPLE


def test_division_by_dense_matrix_raises():
    with pytest.raises(ZeroDivisionError):
        SAMPLE / Matrix4x4(((1.0,) * 4,) * 4)


def test_division_by_identity():
    assert SAMPLE / make_identity4x4() == SAMPLE


def test_3x3_identity_and_subtraction():
    sym = Matrix3x3(((1, 2, 3), (2, 5, 6), (3, 6, 9)))
    assert make_identity3x3() * sym == sym
    assert sym - sym == Matrix3x3()
    assert sym + Matrix3x3() == sym


def test_3x3_identity_transforms_vector_unchanged():
    v = Vector2(3.0, -4.0)
    assert make_identity3x3() * v == v
    assert v * make_identity3x3() == v


def test_bad_shape_raises():
    with pytest.raises(ValueError):
        Matrix4x4(((1, 2), (3, 4)))