# -*- coding: utf-8 -*-
import math

import numpy as np
import pytest

from vecspace.math import vector as vector_mod
from vecspace.math.vector import Vector


def test_set_overloads():
    v = Vector(0, 0, 0)
    assert v.set(1, 2, 3).to_tuple() == (1.0, 2.0, 3.0)
    assert v.set(7).to_tuple() == (7.0, 7.0, 7.0)
    assert v.set(Vector(-1, 0.5, 2)).to_tuple() == (-1.0, 0.5, 2.0)


def test_bad_arity_raises():
    v = Vector(1, 1, 1)
    with pytest.raises(TypeError):
        v.add(1, 2)
    with pytest.raises(TypeError):
        v.add(Vector(1, 1, 1), 2, 3)
    with pytest.raises(TypeError):
        v.distance(3.0)


def test_chaining_returns_same_instance():
    v = Vector(1, 2, 3)
    out = v.add(1).subtract(1).multiply(2).divide(2).rotate_pitch(0).zero()
    assert out is v
    assert v.to_tuple() == (0.0, 0.0, 0.0)


def test_copy_is_independent():
    v = Vector(1.5, -2.25, 3.0)
    c = v.copy()
    assert c == v
    assert c is not v
    c.add(1)
    assert v.to_tuple() == (1.5, -2.25, 3.0)


def test_add_subtract_round_trip():
    v = Vector(0.5, -7.25, 1e10)
    before = v.to_tuple()
    v.add(3.0, 0.5, -2.0).subtract(3.0, 0.5, -2.0)
    assert v.to_tuple() == before


def test_divide_by_zero_axis_is_noop():
    v = Vector(4, 6, 8)
    v.divide(2, 0, 4)
    assert v.to_tuple() == (2.0, 6.0, 2.0)
    v.divide(0)
    assert v.to_tuple() == (2.0, 6.0, 2.0)


def test_normalize():
    v = Vector(3, 4, 12).normalize()
    assert v.length() == pytest.approx(1.0)
    assert np.allclose(v.as_np(), [3 / 13, 4 / 13, 12 / 13])

    zero = Vector(0, 0, 0).normalize()
    assert zero.to_tuple() == (0.0, 0.0, 0.0)


def test_length_and_distance():
    v = Vector(1, 2, 2)
    assert v.length() == 3.0
    assert v.distance(1, 2, 2) == 0.0
    assert v.distance(Vector(4, 6, 2)) == 5.0


@pytest.mark.parametrize("axis", ["rotate_pitch", "rotate_yaw", "rotate_roll"])
def test_rotation_identity_and_full_turn(axis):
    original = Vector(0.3, -1.7, 2.9)
    zero_turn = getattr(original.copy(), axis)(0)
    full_turn = getattr(original.copy(), axis)(360)
    assert np.allclose(zero_turn.as_np(), original.as_np())
    assert np.allclose(full_turn.as_np(), original.as_np())


def test_rotation_planes():
    # pitch: y → z, yaw: x → z, roll: x → y
    assert np.allclose(Vector(0, 1, 0).rotate_pitch(90).as_np(), [0, 0, 1])
    assert np.allclose(Vector(1, 0, 0).rotate_yaw(90).as_np(), [0, 0, 1])
    assert np.allclose(Vector(1, 0, 0).rotate_roll(90).as_np(), [0, 1, 0])
    # вращение не меняет длину
    v = Vector(1, 2, 3)
    assert v.copy().rotate_yaw(37).length() == pytest.approx(v.length())


def test_randomize_uses_given_generator():
    a = Vector(9, 9, 9).randomize(np.random.default_rng(7))
    b = Vector(0, 0, 0).randomize(np.random.default_rng(7))
    assert a == b
    assert all(0.0 <= c < 1.0 for c in a.to_tuple())


def test_equality_and_hash():
    a = Vector(1, 2, 3)
    b = Vector(1.0, 2.0, 3.0)
    assert a == b
    assert hash(a) == hash(b)
    assert a != Vector(1, 2, 3.0000001)
    assert a != (1, 2, 3)
    assert len({Vector(1, 0, 0), Vector(0, 1, 0), Vector(1, 0, 0)}) == 2
    nan = Vector(math.nan, 0, 0)
    assert nan != nan.copy()


def test_repr():
    assert repr(Vector(1, 2.5, -3)) == "Vector(1.0, 2.5, -3.0)"


def test_batch_rotation_in_place():
    vs = [Vector(1, 0, 0), Vector(0, 1, 0)]
    held = vs[0]
    vector_mod.rotate_roll(vs, 90)
    assert held is vs[0]
    assert np.allclose(vs[0].as_np(), [0, 1, 0])
    assert np.allclose(vs[1].as_np(), [-1, 0, 0])
    vector_mod.rotate_pitch(vs, 0)
    vector_mod.rotate_yaw(vs, 360)
    assert np.allclose(vs[1].as_np(), [-1, 0, 0])
