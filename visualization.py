import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.patches import Polygon

from geometry import Point


def plot_points(points: list[Point], ax: Axes | None = None, **kwargs):
    x = [p.x for p in points]
    y = [p.y for p in points]
    if ax is None:
        plt.scatter(x, y, **kwargs)
    else:
        ax.scatter(x, y, **kwargs)


def plot_hull(hull: list[Point], ax: Axes | None = None, color: str = 'r', label: str | None = None):
    """
    Draw hull boundary as a closed polygon.
    Hull vertices are expected in boundary order.
    """
    if ax is None:
        ax = plt.gca()
    if not hull:
        return

    xs = [p.x for p in hull]
    ys = [p.y for p in hull]
    if len(hull) > 2:
        poly = Polygon(list(zip(xs, ys)), alpha=0.2, facecolor=color, edgecolor=color, linewidth=2)
        ax.add_patch(poly)
        ax.plot(xs + [xs[0]], ys + [ys[0]], 'o-', color=color, markersize=5, label=label)
    elif len(hull) == 2:
        ax.plot(xs, ys, 'o-', color=color, markersize=5, label=label)
    else:
        ax.plot(xs, ys, 'o', color=color, markersize=7, label=label)
