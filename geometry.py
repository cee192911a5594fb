import math

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    x: float
    y: float

    def angle(self) -> float:
        """
        Angle from the positive X axis, folded into [0, 2*pi).
        Undefined for the zero vector.
        """
        a = math.atan2(self.y, self.x)
        if a < 0:
            a += 2 * math.pi
        return a

    def length(self) -> float:
        return math.hypot(self.x, self.y)


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __lt__(self, other):
        # exact comparison, no tolerance
        return self.x < other.x or self.x == other.x and self.y < other.y

    def __sub__(self, other) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)


def subtract(a: Point, b: Point) -> Vector:
    """
    Displacement from b to a.
    """
    return Vector(a.x - b.x, a.y - b.y)


def angle_of(v: Vector) -> float:
    return v.angle()


def distance(p: Point, q: Point) -> float:
    return subtract(q, p).length()


def orientation(p1: Point, p2: Point, p3: Point) -> float:
    """
    Doubled signed area of triangle p1, p2, p3 (shoelace formula).
    Positive if the path p1 -> p2 -> p3 turns counter-clockwise,
    zero if the points are collinear, negative if it turns clockwise.
    """
    return (
        (p1.x * p2.y + p2.x * p3.y + p3.x * p1.y)
        - (p2.x * p1.y + p3.x * p2.y + p1.x * p3.y)
    )


def cross(o: Point, a: Point, b: Point) -> float:
    """
    Cross product of segments oa and ob.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def convex_hull_andrew(points: list[Point]) -> list[Point]:
        """
        Andrew's monotone chain algorithm for convex hull.
        Assumes input is sorted by (x, y) and has no duplicates.
        Returns the lower chain followed by the upper chain,
        i.e. counter-clockwise starting at the leftmost point.
        Time complexity: O(n).
        """
        if len(points) <= 2:
            return list(points)

        lower = []
        for p in points:
            while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
                lower.pop()
            lower.append(p)

        upper = []
        for p in reversed(points):
            while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
                upper.pop()
            upper.append(p)

        return lower[:-1] + upper[:-1]
