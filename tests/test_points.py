"""
Point and PointTrail tests.
"""

import pytest

from arcball import Point, PointTrail


def test_point_defaults():
    assert Point() == Point(0.0, 0.0, 1)


@pytest.mark.parametrize("direction", [0, 2, -2])
def test_point_rejects_bad_direction(direction):
    with pytest.raises(ValueError, match="direction"):
        Point(direction=direction)


def test_trail_starts_at_origin():
    trail = PointTrail(3)
    assert len(trail) == 3
    assert list(trail) == [Point(), Point(), Point()]


def test_trail_rejects_empty():
    with pytest.raises(ValueError):
        PointTrail(0)


def test_head_is_last_slot():
    trail = PointTrail(2)
    trail[1] = Point(5.0, 7.0, -1)
    assert trail.head == Point(5.0, 7.0, -1)


def test_shifted_drops_oldest_and_appends_head():
    a, b, c, d = (Point(float(i), float(10 * i), 1) for i in range(1, 5))
    trail = PointTrail(3)
    for slot, point in enumerate([a, b, c]):
        trail[slot] = point

    shifted = trail.shifted(d)

    assert list(shifted) == [b, c, d]
    assert list(trail) == [a, b, c]

