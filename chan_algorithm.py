import itertools
import logging

from typing import MutableSequence

from geometry import P, horizontally_aligned
from graham_scan import graham_scan
from jarvis_march import closing_index, next_hull_point

logger = logging.getLogger(__name__)


def guess_hull_size(t: int, n: int) -> int:
    """
    Guessed hull size for attempt t: min(2^(2^t), n).
    Clamped to n before the power is computed.
    """
    if (1 << t) >= n.bit_length():
        return n
    return min(1 << (1 << t), n)


def bottommost_point(points: MutableSequence[P]) -> P:
    """
    Lowest point, greatest x on ties.
    """
    best = points[0]
    for p in points:
        if horizontally_aligned(p, best):
            if p.x > best.x:
                best = p
        elif p.y < best.y:
            best = p
    return best


def partial_hull(points: MutableSequence[P], m: int) -> list[P] | None:
    """
    One attempt of Chan's algorithm with guessed hull size m.

    Splits points into ceil(n/m) contiguous groups, hulls each group in place
    with Graham scan, then wraps the whole set for at most m steps, choosing
    each next vertex among the per-group gift wrapping candidates.

    Returns the hull counter-clockwise from the bottommost point (greatest x
    on ties), or None if m steps were not enough to close it.
    The wrap closes on any vertex it already holds, as in jarvis_march.
    """
    n = len(points)
    if n == 0:
        return []

    groups = []
    for first in range(0, n, m):
        last = min(first + m, n)
        groups.append((first, graham_scan(points, first, last)))

    hull = []
    point_on_hull = bottommost_point(points)
    for _ in range(m):
        hull.append(point_on_hull)
        candidates = [
            next_hull_point((points[i] for i in range(first, end)), point_on_hull)
            for first, end in groups
        ]
        point_on_hull = next_hull_point(candidates, point_on_hull)
        closed = closing_index(hull, point_on_hull)
        if closed is not None:
            return hull[closed:]
    return None


def chan(points: MutableSequence[P]) -> list[P]:
    """
    Chan's convex hull algorithm. Reorders the input in place.

    Retries partial_hull with m = min(2^(2^t), n) for t = 1, 2, ...
    The attempt with m == n always succeeds, since a wrap cannot visit more
    than n distinct points; RuntimeError is raised if it does not.
    Time complexity: O(n*log(h)), where h is the number of hull vertices.
    """
    n = len(points)
    if n == 0:
        return []

    for t in itertools.count(1):
        m = guess_hull_size(t, n)
        hull = partial_hull(points, m)
        if hull is not None:
            logger.debug('Chan hull of %d points closed with m=%d after %d attempt(s)', n, m, t)
            return hull
        if m == n:
            raise RuntimeError(f'Chan wrapping of {n} points did not close with m={n}')
        logger.debug('Guessed hull size m=%d too small for %d points, retrying', m, n)
