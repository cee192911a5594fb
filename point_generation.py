import numpy as np

from geometry import Point


DISTRIBUTIONS = ("uniform", "circle", "gaussian", "clusters")


def generate_random_points(n: int, distribution: str, seed: int = 42) -> list[Point]:
    """
    Random point sets for experiments, reproducible through `seed`.
    """
    if distribution not in DISTRIBUTIONS:
        raise ValueError(f"Unknown distribution: {distribution!r}")

    rng = np.random.RandomState(seed)

    if distribution == "uniform":
        xs = rng.uniform(0, 1000, n)
        ys = rng.uniform(0, 1000, n)
    elif distribution == "circle":
        angles = rng.uniform(0, 2 * np.pi, n)
        r = 500 * np.sqrt(rng.uniform(0, 1, n))
        xs = 500 + r * np.cos(angles)
        ys = 500 + r * np.sin(angles)
    elif distribution == "gaussian":
        xs = rng.normal(500, 150, n)
        ys = rng.normal(500, 150, n)
    else:
        n_clusters = 5
        centers = rng.uniform(100, 900, size=(n_clusters, 2))
        labels = np.arange(n) % n_clusters
        xs = rng.normal(centers[labels, 0], 50)
        ys = rng.normal(centers[labels, 1], 50)

    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def square_with_interior(
    left: int, bottom: int, right: int, top: int, n_inside: int, seed: int = 42
) -> list[Point]:
    """
    Corners of an axis-aligned rectangle followed by integer points
    strictly inside it.
    """
    rng = np.random.RandomState(seed)
    points = [
        Point(left, bottom),
        Point(right, bottom),
        Point(right, top),
        Point(left, top),
    ]
    xs = rng.randint(left + 1, right, size=n_inside)
    ys = rng.randint(bottom + 1, top, size=n_inside)
    points.extend(Point(int(x), int(y)) for x, y in zip(xs, ys))
    return points
