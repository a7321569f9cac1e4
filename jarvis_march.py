from typing import Iterable, Sequence

from geometry import PointLike, P, orientation, points_equal, square_distance, vertically_aligned


def is_more_clockwise(origin: PointLike, endpoint: PointLike, candidate: PointLike) -> bool:
    """
    True if `candidate` lies on the right of the vector origin -> endpoint.
    Collinear candidates win when they are farther from origin.
    """
    turn = orientation(origin, endpoint, candidate)
    if turn == 0:
        return square_distance(candidate, origin) > square_distance(endpoint, origin)
    return turn < 0


def next_hull_point(candidates: Iterable[P], current: P) -> P:
    """
    Gift wrapping step: the candidate q such that every other candidate lies
    on the left of current -> q (or on it, closer to current).
    Returns `current` itself if every candidate coincides with it.
    """
    endpoint = current
    for candidate in candidates:
        if points_equal(endpoint, current) or is_more_clockwise(current, endpoint, candidate):
            endpoint = candidate
    return endpoint


def closing_index(hull: Sequence[PointLike], point: PointLike) -> int | None:
    """
    Index of the wrapped vertex `point` returns to, None while the walk is open.
    """
    for i, vertex in enumerate(hull):
        if points_equal(vertex, point):
            return i
    return None


def leftmost_point(points: Sequence[P]) -> P:
    """
    Leftmost point, lowest y on ties.
    """
    best = points[0]
    for p in points[1:]:
        if vertically_aligned(p, best):
            if p.y < best.y:
                best = p
        elif p.x < best.x:
            best = p
    return best


def jarvis_march(points: Sequence[P]) -> list[P]:
    """
    Gift wrapping convex hull. The input is left untouched.

    Returns the hull vertices counter-clockwise, starting from the leftmost
    point (lowest y on ties).
    The walk stops as soon as it reaches a vertex it already holds, which
    bounds it by the number of distinct points. With floating coordinates
    that vertex can differ from the start when the start is within the
    collinearity tolerance of an edge; the closed part is returned then.
    Time complexity: O(n*h), where h is the number of hull vertices.
    """
    if len(points) <= 1:
        return list(points)

    hull = []
    point_on_hull = leftmost_point(points)
    while True:
        hull.append(point_on_hull)
        point_on_hull = next_hull_point(points, point_on_hull)
        closed = closing_index(hull, point_on_hull)
        if closed is not None:
            return hull[closed:]
