import pytest
import numpy as np

from geometry import Point, cross


def as_points(coords) -> list[Point]:
    return [Point(x, y) for x, y in coords]


def shuffled(points: list[Point]) -> list[Point]:
    return [points[i] for i in np.random.permutation(len(points))]


def float_line_points(n: int, seed: int, base: tuple, direction: tuple) -> tuple[list[Point], set[tuple]]:
    """
    n float points on the line base + t * direction, no two closer than half
    a step of t, in random order.
    Returns the points and the coordinates of the two endpoints.
    """
    np.random.seed(seed)
    step = 10.0 / (n - 1)
    ts = np.linspace(-4.0, 6.0, n) + np.random.uniform(-0.25, 0.25, n) * step
    np.random.shuffle(ts)

    points = [Point(float(base[0] + t * direction[0]), float(base[1] + t * direction[1])) for t in ts]
    ends = [points[int(np.argmin(ts))], points[int(np.argmax(ts))]]
    return points, {(p.x, p.y) for p in ends}


def regular_polygon(sides: int, radius: float = 50.0, center: tuple = (12.5, -7.25)) -> list[Point]:
    # rotated so that no edge is horizontal or vertical
    angles = 0.3 + 2 * np.pi * np.arange(sides) / sides
    return [
        Point(float(center[0] + radius * np.cos(a)), float(center[1] + radius * np.sin(a)))
        for a in angles
    ]


def random_triangle(min_area: float = 50.0) -> list[Point]:
    while True:
        a, b, c = as_points((np.random.rand(3, 2) * 100).tolist())
        if abs(cross(a, b, c)) >= 2 * min_area:
            return [a, b, c]


def with_edge_points(vertices: list[Point], per_edge: int = 5, inside: int = 10) -> list[Point]:
    """
    The polygon vertices, per_edge float points along each edge and `inside`
    points strictly inside it, in random order.
    """
    points = list(vertices)
    for a, b in zip(vertices, vertices[1:] + vertices[:1]):
        for s in np.random.uniform(0.01, 0.99, per_edge):
            points.append(Point(float(a.x + s * (b.x - a.x)), float(a.y + s * (b.y - a.y))))
    for weights in np.random.dirichlet(np.ones(len(vertices)), inside):
        points.append(Point(
            float(sum(w * p.x for w, p in zip(weights, vertices))),
            float(sum(w * p.y for w, p in zip(weights, vertices))),
        ))
    return shuffled(points)


@pytest.fixture
def ten_points():
    return as_points([
        (13, 5), (12, 8), (10, 3), (7, 7), (9, 6),
        (4, 0), (7, 1), (7, 4), (3, 3), (1, 1),
    ])


@pytest.fixture
def ten_points_hull():
    return {(4, 0), (7, 1), (13, 5), (12, 8), (7, 7), (1, 1)}


@pytest.fixture
def negative_x_points():
    return as_points([
        (0, 10),
        (-5, 5), (-2, 5), (2, 4), (6, 5),
        (-5, 1), (-2, 3), (1, 3), (4, 2), (7, 2),
        (-3, 0), (0, 0), (3, 0),
    ])


@pytest.fixture
def negative_x_hull():
    return {(3, 0), (-3, 0), (-5, 1), (-5, 5), (0, 10), (6, 5), (7, 2)}


@pytest.fixture
def general_points():
    return as_points([
        (5, 11), (-3, 10), (-6, -5), (14, 11),
        (-5, -14), (-16, 0), (2, -14), (8, -8),
        (-5, 0), (5, 4), (-10, 7), (0, -6),
        (-9, -8), (17, -9), (-16, -8), (10, 8),
        (2, -3), (0, 14), (-3, 4), (11, 0),
        (-12, -12), (-5, 7), (-14, -10),
    ])


@pytest.fixture
def general_hull():
    return {(2, -14), (-5, -14), (-12, -12), (-16, -8), (-16, 0), (-10, 7), (0, 14), (14, 11), (17, -9)}


@pytest.fixture
def collinear_points():
    return as_points([(1, 1), (-3, 1), (-10, 1), (10, 1)])


@pytest.fixture
def duplicated_points():
    distinct = [(0, 0), (4, 0), (4, 4), (0, 4), (2, 0), (1, 1), (2, 2), (3, 2)]
    # interleave the copies so duplicates are not adjacent
    return as_points(distinct[::-1] + distinct + distinct[::2] + distinct[1::2] + distinct)


@pytest.fixture
def duplicated_hull():
    return {(0, 0), (4, 0), (4, 4), (0, 4)}
