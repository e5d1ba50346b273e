import numpy as np
import pytest

from kmeansplayground.model.geometry_primitives import Vector, Rect


def test_vector_arithmetic():
    a = Vector(1.0, 2.0)
    b = Vector(4.0, 6.0)
    assert a + b == Vector(5.0, 8.0)
    assert b - a == Vector(3.0, 4.0)
    assert a * 2 == Vector(2.0, 4.0)
    assert b / 2 == Vector(2.0, 3.0)
    assert -a == Vector(-1.0, -2.0)


def test_vector_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        Vector(1.0, 1.0) / 0.0


def test_distances():
    a = Vector(0.0, 0.0)
    b = Vector(3.0, 4.0)
    assert a.distance_squared_to(b) == 25.0
    assert a.distance_to(b) == 5.0
    assert (b - a).magnitude == 5.0


def test_lerp_moves_fraction_of_the_way():
    moved = Vector(0.0, 100.0).lerp(Vector(100.0, 0.0), 0.1)
    assert moved.x == pytest.approx(10.0)
    assert moved.y == pytest.approx(90.0)


def test_copy_is_independent():
    a = Vector(1.0, 1.0)
    b = a.copy()
    b.x = 5.0
    assert a.x == 1.0


def test_to_array():
    arr = Vector(3.0, -4.5).to_array()
    assert isinstance(arr, np.ndarray)
    assert arr.tolist() == [3.0, -4.5]


def test_rect_inset():
    r = Rect(0.0, 0.0, 200.0, 100.0).inset(0.1)
    assert (r.left, r.top, r.right, r.bottom) == pytest.approx((20.0, 10.0, 180.0, 90.0))
    assert r.center == Vector(100.0, 50.0)


def test_rect_random_point_stays_inside():
    r = Rect(20.0, 10.0, 160.0, 80.0)
    rng = np.random.default_rng(0)
    for _ in range(500):
        v = r.random_point(rng)
        assert r.left <= v.x < r.right
        assert r.top <= v.y < r.bottom


def test_rect_contains_edges():
    r = Rect(0.0, 0.0, 10.0, 10.0)
    assert r.contains(Vector(0.0, 10.0))
    assert not r.contains(Vector(-0.1, 5.0))
