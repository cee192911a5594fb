from convex_hull import create
from geometry import Point, convex_hull_andrew


class GrahamHullBuilder:
    def compute_hull(self, points: list[Point]) -> list[Point]:
        return create(points, lambda p: p)


class AndrewHullBuilder:
    def compute_hull(self, points: list[Point]) -> list[Point]:
        return convex_hull_andrew(sorted(set(points)))


HULL_BUILDERS = {
    "Обход Грэхема": GrahamHullBuilder,
    "Монотонная цепочка Эндрю": AndrewHullBuilder,
}
