from typing import MutableSequence

from geometry import PointLike, comparator, lexicographic_less, orientation, points_equal


def monotone_chain(points: MutableSequence[PointLike], destination: MutableSequence) -> int:
    """
    Andrew's monotone chain algorithm for convex hull.

    Sorts `points` by (x, y) in place, then writes the lower hull followed by
    the upper hull into `destination`, which must hold at least 2 * len(points)
    items. The endpoint shared by both chains is written once.
    Returns the exclusive end index of the hull in `destination`, whose
    vertices run counter-clockwise from the lowest x (lowest y on ties).
    Time complexity: O(n*log(n)).
    """
    n = len(points)
    if len(destination) < 2 * n:
        raise ValueError(
            f'Destination holds {len(destination)} items, at least {2 * n} are required'
        )

    points[:] = sorted(points, key=comparator(lexicographic_less))
    if n <= 1 or points_equal(points[0], points[-1]):
        destination[:min(n, 1)] = points[:1]
        return min(n, 1)

    k = 0

    def no_counter_clockwise(p: PointLike) -> bool:
        return orientation(destination[k - 2], destination[k - 1], p) <= 0

    # lower hull
    for p in points:
        while k >= 2 and no_counter_clockwise(p):
            k -= 1
        destination[k] = p
        k += 1

    # upper hull, stacked on top of the lower one
    t = k + 1
    for p in reversed(points[:-1]):
        while k >= t and no_counter_clockwise(p):
            k -= 1
        destination[k] = p
        k += 1

    # the last point written is points[0] again
    return k - 1
