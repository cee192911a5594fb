import csv
import logging

from geometry import Point

logger = logging.getLogger(__name__)


class PointFileError(ValueError):
    pass


def load_points(filename: str) -> list[Point]:
    """
    Read a point file: the first line holds the number of points n,
    each of the following n non-blank lines holds "x y".
    """
    points = []
    with open(filename, 'r', encoding='utf-8') as f:
        header = f.readline().strip()
        try:
            n = int(header)
        except ValueError:
            raise PointFileError(f"{filename}:1: expected number of points, got {header!r}") from None
        if n < 0:
            raise PointFileError(f"{filename}:1: negative number of points {n}")

        line_no = 1
        for line in f:
            line_no += 1
            line = line.strip()
            if not line:
                continue
            if len(points) == n:
                break
            fields = line.split()
            if len(fields) != 2:
                raise PointFileError(f"{filename}:{line_no}: expected 'x y', got {line!r}")
            try:
                x, y = map(float, fields)
            except ValueError:
                raise PointFileError(f"{filename}:{line_no}: bad coordinate in {line!r}") from None
            points.append(Point(x, y))

    if len(points) < n:
        raise PointFileError(f"{filename}: expected {n} points, found {len(points)}")

    logger.info("Loaded %d points from %s", len(points), filename)
    return points


def save_points(filename: str, points: list[Point]):
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(f"{len(points)}\n")
        for p in points:
            f.write(f"{p.x} {p.y}\n")


def save_hull_csv(filename: str, hull: list[Point]):
    with open(filename, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(["index", "x", "y"])
        for i, p in enumerate(hull):
            writer.writerow([i, p.x, p.y])


def save_report(filename: str, report: str):
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(report)
