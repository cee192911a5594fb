import csv

import pytest
import numpy as np

from geometry import Point
from hull_report import compute_stats, format_report, polygon_area, polygon_perimeter
from point_generation import DISTRIBUTIONS, generate_random_points, square_with_interior
from point_io import PointFileError, load_points, save_hull_csv, save_points, save_report


def test_load_points(tmp_path):
    path = tmp_path / "points.txt"
    path.write_text("3\n0 0\n\n1.5 -2\n  4 5  \n", encoding="utf-8")

    points = load_points(str(path))

    assert points == [Point(0, 0), Point(1.5, -2), Point(4, 5)]


def test_save_and_load_points(tmp_path):
    path = tmp_path / "points.txt"
    points = generate_random_points(50, "gaussian", seed=3)

    save_points(str(path), points)

    assert load_points(str(path)) == points


@pytest.mark.parametrize("content, message", [
    ("three\n0 0\n", "expected number of points"),
    ("-1\n", "negative"),
    ("2\n0 0\n1\n", "expected 'x y'"),
    ("2\n0 0\n1 y\n", "bad coordinate"),
    ("3\n0 0\n1 1\n", "expected 3 points"),
])
def test_load_points_malformed(tmp_path, content, message):
    path = tmp_path / "bad.txt"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(PointFileError, match=message):
        load_points(str(path))


def test_save_hull_csv(tmp_path):
    path = tmp_path / "hull.csv"

    save_hull_csv(str(path), [Point(0, 0), Point(2.5, 1)])

    with open(path, newline='', encoding='utf-8') as f:
        rows = list(csv.reader(f))
    assert rows == [["index", "x", "y"], ["0", "0", "0"], ["1", "2.5", "1"]]


@pytest.mark.parametrize("distribution", DISTRIBUTIONS)
def test_generate_random_points(distribution):
    points = generate_random_points(100, distribution, seed=5)

    assert len(points) == 100
    assert points == generate_random_points(100, distribution, seed=5)
    assert points != generate_random_points(100, distribution, seed=6)


def test_generate_unknown_distribution():
    with pytest.raises(ValueError):
        generate_random_points(10, "spiral")


def test_square_with_interior_points_inside():
    points = square_with_interior(-10, -20, 10, 20, n_inside=200, seed=1)

    assert points[:4] == [Point(-10, -20), Point(10, -20), Point(10, 20), Point(-10, 20)]
    assert all(-10 < p.x < 10 and -20 < p.y < 20 for p in points[4:])
    assert len(points) == 204


def test_polygon_metrics():
    square = [Point(0, 0), Point(3, 0), Point(3, 3), Point(0, 3)]

    assert np.isclose(polygon_area(square), 9)
    assert np.isclose(polygon_perimeter(square), 12)
    assert polygon_area(square[:2]) == 0
    assert polygon_perimeter(square[:2]) == 6
    assert polygon_perimeter(square[:1]) == 0


def test_report(tmp_path):
    points = [Point(0, 0), Point(4, 0), Point(4, 3), Point(0, 3), Point(1, 1)]
    stats = compute_stats(points, points[:4], elapsed=0.5)

    assert stats.n_points == 5
    assert stats.n_hull == 4
    assert np.isclose(stats.area, 12)
    assert np.isclose(stats.perimeter, 14)

    report = format_report(stats, "Обход Грэхема", "points.txt")
    assert "Количество точек: 5" in report
    assert "Вершин оболочки: 4 (80.00%)" in report
    assert "points.txt" in report

    path = tmp_path / "report.txt"
    save_report(str(path), report)
    assert path.read_text(encoding="utf-8") == report
