import pytest

from matplotlib.figure import Figure

from convex_hull import create
from geometry import Point
from visualization import plot_hull, plot_points


@pytest.fixture
def ax():
    return Figure().add_subplot(111)


def test_plot_hull_polygon(ax):
    points = [Point(0, 0), Point(4, 0), Point(2, 1), Point(4, 4), Point(0, 4)]
    hull = create(points, lambda p: p)

    plot_points(points, ax=ax)
    plot_hull(hull, ax=ax, label="hull")

    assert len(ax.patches) == 1
    xs, ys = ax.lines[0].get_data()
    assert list(xs) == [0, 4, 4, 0, 0]
    assert list(ys) == [0, 0, 4, 4, 0]


@pytest.mark.parametrize("hull, n_points", [
    ([Point(0, 0), Point(1, 1)], 2),
    ([Point(3, 3)], 1),
])
def test_plot_degenerate_hull(ax, hull, n_points):
    plot_hull(hull, ax=ax)

    assert len(ax.patches) == 0
    assert len(ax.lines[0].get_xdata()) == n_points


def test_plot_empty_hull(ax):
    plot_hull([], ax=ax)

    assert not ax.lines
