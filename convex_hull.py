import logging
import math

from typing import Callable, Sequence, TypeVar

from geometry import Point, angle_of, distance, orientation, subtract
from selection import min_item, min_items

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _identity(item):
    return item


def is_ccw(item1: T, item2: T, item3: T, location: Callable[[T], Point]) -> bool:
    """
    True if the path item1 -> item2 -> item3 makes a strict left turn.
    """
    return orientation(location(item1), location(item2), location(item3)) > 0


def find_anchor(items: Sequence[T], location: Callable[[T], Point]) -> T:
    """
    Item with minimum Y; among several, the one with minimum X.
    """
    lowest = min_items(items, key=lambda item: location(item).y)
    return min_item(lowest, key=lambda item: location(item).x)


def radial_sort(items: Sequence[T], location: Callable[[T], Point]) -> list[T]:
    """
    Order items counter-clockwise around the anchor.

    The anchor comes first, followed by the remaining items in order of
    increasing polar angle of (item - anchor). Items tied on angle are
    ordered farthest from the anchor first, so a collinear run is always
    entered at its far end. Items located exactly at the anchor are dropped.
    """
    anchor = find_anchor(items, location)
    anchor_point = location(anchor)

    others = [item for item in items if location(item) != anchor_point]

    def polar_key(item: T) -> tuple[float, float]:
        p = location(item)
        return angle_of(subtract(p, anchor_point)), -distance(anchor_point, p)

    return [anchor] + sorted(others, key=polar_key)


def create(
    items: Sequence[T],
    location: Callable[[T], Point] = _identity,
    max_edge_length: float = math.inf,
) -> list[T]:
    """
    Convex hull of a set of located items (Graham scan).

    `location` maps an item to its Point and must be pure for the duration
    of the call. Returns the hull items in counter-clockwise order starting
    at the anchor (the lowest, then leftmost, item). Inputs of at most
    two items are returned unchanged.

    `max_edge_length` is accepted for interface compatibility and is not
    used: hull edges are never subdivided.
    """
    if len(items) <= 2:
        return list(items)

    ordered = radial_sort(items, location)
    logger.debug("Convex hull of %d items, anchor at %s", len(items), location(ordered[0]))
    if len(ordered) <= 2:
        return ordered

    stack = [ordered[0], ordered[1]]
    idx = 2
    while idx < len(ordered):
        top = stack.pop()
        second = stack.pop()
        nxt = ordered[idx]

        if is_ccw(second, top, nxt, location):
            stack.append(second)
            stack.append(top)
            stack.append(nxt)
            idx += 1
        elif stack:
            # not a left turn: drop top and retry against the previous edge
            stack.append(second)
        else:
            # nxt lies on the first edge, between the anchor and ordered[1]
            stack.append(second)
            stack.append(top)
            idx += 1

    logger.debug("Hull has %d of %d items", len(stack), len(items))
    return stack
