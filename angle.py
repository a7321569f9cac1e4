"""
Polar angle facilities used to sort points around a pivot.

The fast comparator avoids trigonometry entirely. The `arctan2` based
helpers are slow reference versions kept to check the fast one.
"""
import numpy as np

from typing import MutableSequence

from geometry import (
    PointLike,
    comparator,
    equals,
    horizontally_aligned,
    lowest_point_index,
    make_point,
    orientation,
    square_norm,
    subtract,
)


def angle_with_x_axis(p: PointLike, origin: PointLike | None = None) -> float:
    """
    Signed angle between the x axis and the vector origin -> p, in [-pi, pi].
    """
    if origin is not None:
        p = subtract(p, origin)
    return float(np.arctan2(p.y, p.x))


def slow_compare_angles(p1: PointLike, p2: PointLike, origin: PointLike | None = None) -> bool:
    if origin is not None:
        p1, p2 = subtract(p1, origin), subtract(p2, origin)
    a1 = angle_with_x_axis(p1)
    a2 = angle_with_x_axis(p2)
    if equals(a1, a2):
        return square_norm(p1) < square_norm(p2)
    return a1 < a2


def compare_angles(p1: PointLike, p2: PointLike, origin: PointLike | None = None) -> bool:
    """
    True if the polar angle of p1 is smaller than the one of p2, closer point
    first on equal angles.

    Only meaningful when both points satisfy y >= 0 once translated by -origin,
    which holds for every point when origin is the lowest point of the set.
    On the horizontal axis, points with x >= 0 come before all points with
    y > 0, which come before points with x < 0.
    """
    if origin is not None:
        p1, p2 = subtract(p1, origin), subtract(p2, origin)
    zero = make_point(p1, 0, 0)

    on_axis_1 = horizontally_aligned(p1, zero)
    on_axis_2 = horizontally_aligned(p2, zero)
    if on_axis_1 and on_axis_2:
        if (p1.x >= 0) == (p2.x >= 0):
            return square_norm(p1) < square_norm(p2)
        return p1.x >= 0
    if on_axis_1:
        return p1.x >= 0
    if on_axis_2:
        return p2.x < 0

    # -x/y grows with the angle on the upper half-plane, and with y1 * y2 > 0
    # the ratio -x1/y1 < -x2/y2 exactly when zero -> p1 -> p2 turns left
    turn = orientation(zero, p1, p2)
    if turn == 0:
        return square_norm(p1) < square_norm(p2)
    return turn > 0


def sort_by_polar_angle(points: MutableSequence[PointLike], first: int = 0, last: int | None = None):
    """
    Move the lowest point of points[first:last] to `first` and sort the
    remaining points of the range by polar angle around it, in place.
    """
    if last is None:
        last = len(points)
    if last - first < 2:
        return

    lowest = lowest_point_index(points, first, last)
    points[first], points[lowest] = points[lowest], points[first]

    origin = points[first]
    points[first + 1:last] = sorted(
        points[first + 1:last],
        key=comparator(lambda p1, p2: compare_angles(p1, p2, origin)),
    )
