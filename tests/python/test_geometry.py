from __future__ import annotations

import math

import pytest
from pytest import approx

from microbes.sim.core.geometry import Point
from microbes.sim.utils.math2d import _clamp_value, _wrap_clamp


def test_distance_is_euclidean_and_symmetric():
    a = Point(10.0, 10.0)
    b = Point(13.0, 14.0)
    assert a.distance_to(b) == approx(5.0)
    assert b.distance_to(a) == approx(5.0)
    assert a.distance_to(a) == 0.0


def test_direction_uses_atan2_from_self_to_other():
    origin = Point(0.0, 0.0)
    assert origin.direction_to(Point(1.0, 0.0)) == approx(0.0)
    assert origin.direction_to(Point(0.0, 1.0)) == approx(math.pi / 2)
    assert origin.direction_to(Point(-1.0, 0.0)) == approx(math.pi)
    assert Point(1.0, 1.0).direction_to(Point(0.0, 0.0)) == approx(-3 * math.pi / 4)


def test_point_is_immutable_value():
    point = Point(1.0, 2.0)
    assert point == Point(1.0, 2.0)
    with pytest.raises(AttributeError):
        point.x = 5.0  # type: ignore[misc]


def test_offset_and_clamp_into_bounds():
    moved = Point(98.0, 50.0).offset(0.0, 9.0)
    assert moved.x == approx(107.0)
    clamped = moved.clamped(Point(100.0, 100.0))
    assert clamped == Point(100.0, 50.0)
    assert Point(-3.0, 120.0).clamped(Point(100.0, 100.0)) == Point(0.0, 100.0)


def test_to_vector_keeps_coordinates():
    vector = Point(3.5, -2.0).to_vector()
    assert (vector.x, vector.y) == (3.5, -2.0)


def test_wrap_clamp_squares_negative_values():
    assert _wrap_clamp(12.0, 10.0) == approx(2.0)
    assert _wrap_clamp(400.0, 360.0) == approx(40.0)
    assert _wrap_clamp(-3.0, 10.0) == approx(9.0)
    assert _wrap_clamp(-4.0, 10.0) == approx(6.0)
    assert _wrap_clamp(0.0, 10.0) == 0.0


def test_clamp_value():
    assert _clamp_value(5.0, 0.0, 3.0) == 3.0
    assert _clamp_value(-1.0, 0.0, 3.0) == 0.0
    assert _clamp_value(2.0, 0.0, 3.0) == 2.0
