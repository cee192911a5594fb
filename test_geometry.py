import math

import pytest
import numpy as np

from geometry import (
    Point,
    Vector,
    angle_of,
    convex_hull_andrew,
    cross,
    distance,
    orientation,
    subtract,
)
from selection import min_item, min_items


def test_subtract_is_displacement_from_second_to_first():
    v = subtract(Point(5, 7), Point(2, 3))

    assert v == Vector(3, 4)
    assert Point(5, 7) - Point(2, 3) == v
    assert v.length() == 5


@pytest.mark.parametrize("v, expected", [
    (Vector(1, 0), 0.0),
    (Vector(0, 1), math.pi / 2),
    (Vector(-1, 0), math.pi),
    (Vector(0, -1), 3 * math.pi / 2),
    (Vector(1, -1), 7 * math.pi / 4),
])
def test_angle_in_full_turn_range(v, expected):
    a = angle_of(v)

    assert 0 <= a < 2 * math.pi
    assert np.isclose(a, expected)


def test_angle_is_monotonic_in_upper_half_plane():
    angles = np.linspace(0, np.pi, 50)
    values = [Vector(float(np.cos(a)), float(np.sin(a))).angle() for a in angles]

    assert values == sorted(values)


def test_distance():
    assert distance(Point(1, 1), Point(4, 5)) == 5
    assert distance(Point(2, 2), Point(2, 2)) == 0


@pytest.mark.parametrize("p1, p2, p3, sign", [
    (Point(0, 0), Point(1, 0), Point(1, 1), 1),
    (Point(0, 0), Point(1, 1), Point(1, 0), -1),
    (Point(0, 0), Point(1, 1), Point(3, 3), 0),
    (Point(2, 0), Point(2, 1), Point(2, -5), 0),
])
def test_orientation_sign(p1, p2, p3, sign):
    assert np.sign(orientation(p1, p2, p3)) == sign


def test_orientation_matches_cross_product():
    np.random.seed(1)
    for _ in range(100):
        a, b, c = (Point(*np.random.randint(-50, 50, size=2).tolist()) for _ in range(3))

        assert orientation(a, b, c) == cross(a, b, c)


def test_point_ordering_and_equality_are_exact():
    assert Point(0, 1) < Point(1, 0)
    assert Point(1, 0) < Point(1, 2)
    assert not Point(1, 2) < Point(1, 2)
    assert Point(0.1 + 0.2, 0) != Point(0.3, 0)
    assert len({Point(1, 2), Point(1.0, 2.0)}) == 1


def test_andrew_returns_counter_clockwise_chain():
    points = sorted([Point(0, 0), Point(2, 0), Point(1, 1), Point(2, 2), Point(0, 2), Point(1, 0)])

    hull = convex_hull_andrew(points)

    assert hull == [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]


def test_andrew_collinear():
    points = [Point(0, 0), Point(1, 1), Point(2, 2)]

    assert convex_hull_andrew(points) == [Point(0, 0), Point(2, 2)]


def test_min_items_keeps_all_ties_in_order():
    items = ["bb", "a", "cc", "d", "eee"]

    assert min_items(items, key=len) == ["a", "d"]
    assert min_item(items, key=len) == "a"


def test_min_items_empty():
    assert min_items([], key=len) == []
    with pytest.raises(ValueError):
        min_item([], key=len)
