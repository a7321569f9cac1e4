from typing import MutableSequence

from angle import sort_by_polar_angle
from geometry import PointLike, orientation, points_equal


def _cyclic_index(first: int, n: int):
    """
    1-based accessor over points[first:first + n] where index 0 aliases index n,
    so the last sorted point acts as a sentinel in front of the pivot.
    """
    def index(i: int) -> int:
        return first + (i - 1) % n
    return index


def scan(points: MutableSequence[PointLike], first: int, last: int) -> int:
    """
    Selection step of Graham scan over a range already sorted by polar angle.
    Swaps hull vertices to the front of the range and returns their count.
    """
    n = last - first
    if n < 2:
        return n
    if points_equal(points[first], points[last - 1]):
        # every point is a duplicate of the pivot
        return 1

    at = _cyclic_index(first, n)
    m = 1
    i = 2
    while i <= n:
        while orientation(points[at(m - 1)], points[at(m)], points[at(i)]) <= 0:
            if m > 1:
                m -= 1
            elif i == n:
                # all points are collinear
                break
            else:
                i += 1

        m += 1
        points[at(m)], points[at(i)] = points[at(i)], points[at(m)]
        i += 1
    return m


def graham_scan(points: MutableSequence[PointLike], first: int = 0, last: int | None = None) -> int:
    """
    Graham scan convex hull, in place.

    Reorders points[first:last] so that the hull vertices occupy its leading
    part, counter-clockwise from the lowest point (lowest x on ties), and
    returns the exclusive end index of that part.
    Time complexity: O(n*log(n)).
    """
    if last is None:
        last = len(points)
    sort_by_polar_angle(points, first, last)
    return first + scan(points, first, last)
