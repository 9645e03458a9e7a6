import math

import pytest

from quadkit.geometry import Rect, Vec2


def test_length_of_classic_triangle():
    assert Vec2(3.0, 4.0).length() == pytest.approx(5.0)


@pytest.mark.parametrize("x, y", [(3.0, 4.0), (-2.5, 0.1), (0.0, -7.0), (1e3, 1e3)])
def test_normalize_gives_unit_length_same_direction(x, y):
    v = Vec2(x, y)
    n = v.normalize()
    assert n.length() == pytest.approx(1.0)
    assert math.atan2(n.y, n.x) == pytest.approx(math.atan2(y, x))


def test_normalize_zero_raises():
    with pytest.raises(ValueError):
        Vec2(0.0, 0.0).normalize()


def test_arithmetic_round_trips():
    a = Vec2(1.5, -2.0)
    b = Vec2(0.25, 7.0)
    assert (a - b) + b == a
    assert (a * 4.0) / 4.0 == a
    assert -(-a) == a
    assert 2.0 * a == a * 2.0
    assert tuple(a) == (a.x, a.y)


def test_overlaps_is_symmetric_and_counts_touching_edges():
    a = Rect(0.0, 0.0, 2.0, 2.0)
    touching = Rect(2.0, 0.0, 2.0, 2.0)
    apart = Rect(2.5, 0.0, 2.0, 2.0)
    assert a.overlaps(touching) and touching.overlaps(a)
    assert not a.overlaps(apart)
    assert not apart.overlaps(a)


def test_contains_edges():
    r = Rect(0.0, 0.0, 2.0, 2.0)
    assert r.contains(Vec2(0.0, 0.0))
    assert r.contains(Vec2(1.0, 1.0))
    assert not r.contains(Vec2(2.0, 0.0))
    assert not r.contains(Vec2(0.0, 2.0))
    assert not r.contains(Vec2(-0.1, 1.0))


def test_edges_match_size():
    r = Rect(1.0, 2.0, 3.0, 4.0)
    assert r.right - r.left == r.w
    assert r.bottom - r.top == r.h