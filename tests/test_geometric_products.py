"""Tests for the dot product, cross product, and norm-squared"""

from hypothesis import given
import pytest

from vector3d import Vector3d
from .hypothesis_extra_strategies import gen_fraction_vector, gen_integer_vector
from .utilities import Mat2, Quantity, meters, seconds


@given(a=gen_integer_vector(), b=gen_integer_vector(), c=gen_integer_vector())
def test_dot_is_bilinear(a, b, c):
    assert (a + b).dot(c) == a.dot(c) + b.dot(c)


@given(a=gen_fraction_vector(), b=gen_fraction_vector())
def test_dot_is_symmetric_for_commuting_scalars(a, b):
    assert a.dot(b) == b.dot(a)


def test_dot_value():
    assert Vector3d(1, 2, 3).dot(Vector3d(4, 5, 6)) == 32


def test_dot_returns_a_scalar():
    assert not isinstance(Vector3d(1, 2, 3).dot(Vector3d(1, 2, 3)), Vector3d)


def test_dot_multiplies_right_component_by_left_component(noncommuting_pair):
    p, q = noncommuting_pair
    z = Mat2.zero()
    a = Vector3d(p, z, z)
    b = Vector3d(q, z, z)
    assert a.dot(b) == q * p
    assert a.dot(b) == Mat2(1, 1, 1, 2)


def test_dot_changes_units():
    lengths = Vector3d(meters(1), meters(2), meters(3))
    times = Vector3d(seconds(4), seconds(5), seconds(6))
    assert lengths.dot(times) == Quantity(32, {"m": 1, "s": 1})


@pytest.mark.parametrize("other", [1, (1, 2, 3), None])
def test_dot_requires_a_vector(other):
    with pytest.raises(TypeError):
        Vector3d(1, 2, 3).dot(other)


@pytest.mark.parametrize(["a", "b", "expected"], [
    (Vector3d(1, 0, 0), Vector3d(0, 1, 0), Vector3d(0, 0, 1)),
    (Vector3d(0, 1, 0), Vector3d(0, 0, 1), Vector3d(1, 0, 0)),
    (Vector3d(0, 0, 1), Vector3d(1, 0, 0), Vector3d(0, 1, 0)),
    (Vector3d(0, 1, 0), Vector3d(1, 0, 0), Vector3d(0, 0, -1)),
    (Vector3d(1, 2, 3), Vector3d(4, 5, 6), Vector3d(-3, 6, -3)),
    ])
def test_cross_follows_right_hand_rule(a, b, expected):
    assert a.cross(b) == expected


@given(a=gen_integer_vector())
def test_cross_with_self_is_zero(a):
    assert a.cross(a) == Vector3d.default()


@given(a=gen_integer_vector(), b=gen_integer_vector())
def test_cross_is_anticommutative(a, b):
    assert a.cross(b) == -b.cross(a)


@given(a=gen_integer_vector(), b=gen_integer_vector())
def test_cross_is_orthogonal_to_both_operands(a, b):
    c = a.cross(b)
    assert c.dot(a) == 0
    assert c.dot(b) == 0


def test_cross_multiplies_right_component_by_left_component(noncommuting_pair):
    p, q = noncommuting_pair
    z = Mat2.zero()
    a = Vector3d(z, p, z)
    b = Vector3d(z, z, q)
    assert a.cross(b) == Vector3d(q * p, z, z)
    assert a.cross(b) != Vector3d(p * q, z, z)


def test_cross_changes_units():
    a = Vector3d(meters(1), meters(0), meters(0))
    b = Vector3d(seconds(0), seconds(1), seconds(0))
    ms = {"m": 1, "s": 1}
    assert a.cross(b) == Vector3d(Quantity(0, ms), Quantity(0, ms), Quantity(1, ms))


def test_cross_requires_a_vector():
    with pytest.raises(TypeError):
        Vector3d(1, 2, 3).cross((4, 5, 6))


@given(a=gen_integer_vector())
def test_norm2_is_self_dot(a):
    assert a.norm2() == a.dot(a)


def test_norm2_value_and_units():
    assert Vector3d(1, 2, 2).norm2() == 9
    assert Vector3d(meters(1), meters(2), meters(2)).norm2() == Quantity(9, {"m": 2})
