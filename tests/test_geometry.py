import math

import pytest

from quadgame.geometry import Vec2, cartesian_to_polar, clamp, polar_to_cartesian


def test_vector_arithmetic_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(0.25, 4.0)
    assert (a + b) - b == a
    assert -(-a) == a


def test_scalar_multiplication_commutes():
    v = Vec2(1.5, -2.0)
    assert v * 2.0 == 2.0 * v
    assert (v * 2.0) / 2.0 == v


def test_length_pythagorean():
    assert Vec2(3.0, 4.0).length() == 5.0


def test_distance_is_symmetric_and_zero_for_self():
    a = Vec2(1.0, 2.0)
    b = Vec2(-3.0, 7.5)
    assert a.distance(b) == b.distance(a)
    assert a.distance(a) == 0.0


def test_polar_along_x_axis():
    assert polar_to_cartesian(2.0, 0.0) == Vec2(2.0, 0.0)


@pytest.mark.parametrize("rho,theta", [(1.0, 0.3), (5.0, -2.0), (0.5, 3.0)])
def test_polar_round_trip(rho, theta):
    back = cartesian_to_polar(polar_to_cartesian(rho, theta))
    assert back.x == pytest.approx(rho)
    assert back.y == pytest.approx(theta)


def test_cartesian_to_polar_angle_on_y_axis():
    assert cartesian_to_polar(Vec2(0.0, 2.0)).y == pytest.approx(math.pi / 2)


@pytest.mark.parametrize(
    "value,expected",
    [(-1, 0), (0, 0), (5, 5), (10, 10), (11, 10)],
)
def test_clamp(value, expected):
    assert clamp(value, 0, 10) == expected


def test_clamp_floats():
    assert clamp(0.5, 1.0, 2.0) == 1.0