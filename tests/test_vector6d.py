import pytest
from dataclasses import astuple

from rmaim.vector6d import Vector6d


def test_defaults_are_zero():
    assert astuple(Vector6d()) == (0.0,) * 6


def test_partial_construction():
    v = Vector6d(1.0, 2.0, 3.0, 4.0)
    assert (v.x, v.y, v.z, v.yaw, v.pitch, v.roll) == (1.0, 2.0, 3.0, 4.0, 0.0, 0.0)


def test_scalar_operations():
    v = Vector6d(1, 2, 3, 4, 5, 6)
    assert astuple(v + 1) == (2, 3, 4, 5, 6, 7)
    assert astuple(v - 1) == (0, 1, 2, 3, 4, 5)
    assert astuple(v * 2) == (2, 4, 6, 8, 10, 12)
    assert astuple(v / 2) == (0.5, 1.0, 1.5, 2.0, 2.5, 3.0)


def test_vector_operations_are_elementwise():
    a = Vector6d(1, 2, 3, 4, 5, 6)
    b = Vector6d(6, 5, 4, 3, 2, 1)
    assert astuple(a + b) == (7,) * 6
    assert (a - b) + b == a
    assert astuple(a * b) == tuple(x * y for x, y in zip(astuple(a), astuple(b)))
    assert (a * b) / b == a


def test_division_by_zero_returns_copy():
    v = Vector6d(1, 2, 3, 4, 5, 6)
    assert v / 0 == v
    assert v / Vector6d(1, 1, 1, 1, 1, 0) == v
    assert (v / 0) is not v


def test_in_place_operator_rebinds():
    v = Vector6d(1, 1, 1, 1, 1, 1)
    v += Vector6d(1, 2, 3, 4, 5, 6)
    assert astuple(v) == (2, 3, 4, 5, 6, 7)


def test_unsupported_operand_raises():
    with pytest.raises(TypeError):
        Vector6d() + "x"