import math

import pytest

from skullrunner.vector import (
    Vector2,
    Vector3,
    Vector4,
    convert_vector,
    cot,
    ease_in,
    ease_out,
    lerp,
    lerp_color,
    normalize,
)


@pytest.mark.parametrize(
    "a, b",
    [
        (Vector2(1, 2), Vector2(5, -3)),
        (Vector3(1, 2, 3), Vector3(-4, 6, 8)),
        (Vector4(1, 2, 3, 4), Vector4(7, -1, 0, 2)),
    ],
)
def test_add_then_sub_round_trips(a, b):
    assert (a + b) - b == a


@pytest.mark.parametrize("v", [Vector2(1, 2), Vector3(1, 2, 3), Vector4(1, 2, 3, 4)])
def test_scalar_multiplication_matches_addition(v):
    assert v * 2 == v + v
    assert 2 * v == v * 2


def test_componentwise_multiplication():
    a = Vector3(2, 3, 4)
    b = Vector3(5, 6, 7)
    assert a * b == Vector3(2 * 5, 3 * 6, 4 * 7)
    assert a * b == b * a


@pytest.mark.parametrize("v", [Vector2(3, 5), Vector3(3, 5, 7), Vector4(3, 5, 7, 9)])
def test_scalar_division_inverts_multiplication(v):
    assert (v / 4) * 4 == v


def test_vector_division_inverts_multiplication():
    a = Vector4(1, 2, 3, 4)
    b = Vector4(2, 4, 8, 16)
    assert (a * b) / b == a


@pytest.mark.parametrize(
    "cls, components, divisor",
    [
        (Vector2, (1, 1), 0.0),
        (Vector3, (1, 1, 1), 1e-7),
        (Vector4, (1, 1, 1, 1), 0),
        (Vector3, (1, 1, 1), (1, 0, 1)),
        (Vector2, (1, 1), (2, 0)),
    ],
)
def test_division_by_zero_raises(cls, components, divisor):
    if isinstance(divisor, tuple):
        divisor = cls(*divisor)
    with pytest.raises(ZeroDivisionError):
        cls(*components) / divisor


def test_mixing_vector_types_is_rejected():
    with pytest.raises(TypeError):
        Vector2(1, 2) + Vector3(1, 2, 3)


def test_in_place_add_updates_value():
    v = Vector3(1, 1, 1)
    original = Vector3(1, 1, 1)
    v += Vector3(2, 2, 2)
    assert v - Vector3(2, 2, 2) == original


def test_lerp_endpoints_and_midpoint():
    assert lerp(3.0, 9.0, 0.0) == 3.0
    assert lerp(3.0, 9.0, 1.0) == 9.0
    assert lerp(3.0, 9.0, 0.5) == pytest.approx((3.0 + 9.0) / 2)


def test_lerp_color_reverses_channel_order():
    assert lerp_color(0x11223344, 0x11223344, 0.5) == 0x44332211


def test_lerp_color_twice_restores_original():
    colour = 0xFF8040C0
    swapped = lerp_color(colour, colour, 0.0)
    assert lerp_color(swapped, swapped, 0.0) == colour


def test_lerp_color_endpoints():
    start, end = 0x00000000, 0xFFFFFFFF
    assert lerp_color(start, end, 0.0) == start
    assert lerp_color(start, end, 1.0) == end


def test_ease_in_and_out_endpoints():
    assert ease_in(2.0, 6.0, 0.0) == 2.0
    assert ease_in(2.0, 6.0, 1.0) == 6.0
    assert ease_out(2.0, 6.0, 0.0) == 2.0
    assert ease_out(2.0, 6.0, 1.0) == 6.0


@pytest.mark.parametrize("t", [0.1, 0.25, 0.5, 0.8])
def test_ease_out_mirrors_ease_in(t):
    assert ease_out(0.0, 1.0, t) + ease_in(0.0, 1.0, 1.0 - t) == pytest.approx(1.0)
    assert ease_in(0.0, 1.0, t) <= lerp(0.0, 1.0, t) <= ease_out(0.0, 1.0, t)


def test_convert_vector_drops_w():
    assert convert_vector(Vector4(1, 2, 3, 4)) == Vector3(1, 2, 3)


def test_cot_is_reciprocal_of_tan():
    angle = 0.45 / 2
    assert cot(angle) * math.tan(angle) == pytest.approx(1.0)


def test_cot_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        cot(0.0)


def test_normalize_gives_unit_length_same_direction():
    v = Vector3(3.0, -4.0, 12.0)
    n = normalize(v)
    assert math.sqrt(sum(c * c for c in n)) == pytest.approx(1.0)
    assert tuple(n * math.sqrt(sum(c * c for c in v))) == pytest.approx(tuple(v))


def test_normalize_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        normalize(Vector3())