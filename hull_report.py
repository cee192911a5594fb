import time
import numpy as np

from dataclasses import dataclass

from geometry import Point, distance


@dataclass
class HullStats:
    n_points: int
    n_hull: int
    perimeter: float
    area: float
    elapsed: float = 0.0


def polygon_area(vertices: list[Point]) -> float:
    """
    Area of a simple polygon given by its vertices in order.
    https://stackoverflow.com/a/30408825/607528
    """
    if len(vertices) < 3:
        return 0.0
    x = np.array([p.x for p in vertices], dtype=float)
    y = np.array([p.y for p in vertices], dtype=float)
    return float(0.5 * np.abs(np.dot(x, np.roll(y, 1)) - np.dot(y, np.roll(x, 1))))


def polygon_perimeter(vertices: list[Point]) -> float:
    """
    Length of the closed boundary. A two-point hull is a degenerate
    polygon, so its segment is counted twice.
    """
    if len(vertices) < 2:
        return 0.0
    return sum(distance(vertices[i - 1], vertices[i]) for i in range(len(vertices)))


def compute_stats(points: list[Point], hull: list[Point], elapsed: float = 0.0) -> HullStats:
    return HullStats(
        n_points=len(points),
        n_hull=len(hull),
        perimeter=polygon_perimeter(hull),
        area=polygon_area(hull),
        elapsed=elapsed,
    )


def format_report(stats: HullStats, algorithm: str, source: str | None = None) -> str:
    speed = stats.n_points / stats.elapsed if stats.elapsed > 0 else 0
    share = stats.n_hull / stats.n_points * 100 if stats.n_points > 0 else 0

    return f"""
{'='*60}
ОТЧЕТ О ПОСТРОЕНИИ ВЫПУКЛОЙ ОБОЛОЧКИ
{'='*60}

ИСХОДНЫЕ ДАННЫЕ:
----------------
Файл: {source if source else 'Сгенерировано'}
Количество точек: {stats.n_points}
Алгоритм: {algorithm}

РЕЗУЛЬТАТЫ:
-----------
Вершин оболочки: {stats.n_hull} ({share:.2f}%)
Периметр: {stats.perimeter:.6f}
Площадь: {stats.area:.6f}
Время выполнения: {stats.elapsed:.6f} секунд
Скорость обработки: {speed:.0f} точек/сек

{'='*60}
Отчет сгенерирован: {time.strftime('%Y-%m-%d %H:%M:%S')}
{'='*60}
"""
