from typing import Sequence

from geometry import P, make_point


def bounding_box(points: Sequence[P]) -> list[P]:
    """
    Axis-aligned bounding box of a set of points.

    Returns its 4 corners counter-clockwise from the bottom-left one,
    or an empty list for an empty input. Time complexity: O(n).
    """
    if len(points) == 0:
        return []

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)

    template = points[0]
    return [
        make_point(template, min_x, min_y),
        make_point(template, max_x, min_y),
        make_point(template, max_x, max_y),
        make_point(template, min_x, max_y),
    ]
