import pytest

from kmeansplayground.utils import lerp, clamp


def test_lerp():
    assert lerp(0.0, 10.0, 0.1) == pytest.approx(1.0)
    assert lerp(5.0, 5.0, 0.1) == 5.0
    assert lerp(2.0, 4.0, 1.0) == 4.0


def test_clamp():
    assert clamp(11, 1, 10) == 10
    assert clamp(0, 1, 10) == 1
    assert clamp(4, 0, 10) == 4
