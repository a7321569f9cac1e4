import functools
import math
import numbers
import numpy as np

from dataclasses import dataclass
from typing import Callable, Protocol, Sequence, TypeVar


class PointLike(Protocol):
    """
    Anything with two same-typed numeric coordinates
    that can be rebuilt with `type(p)(x, y)`.
    """
    @property
    def x(self): ...

    @property
    def y(self): ...


P = TypeVar('P', bound=PointLike)


@functools.lru_cache(maxsize=None)
def _epsilon(type_a: type, type_b: type) -> float:
    return float(np.finfo(np.result_type(type_a, type_b)).eps)


def equals(a, b) -> bool:
    """
    Compare two coordinates. Integral values are compared exactly,
    floating values with the machine epsilon of their promoted dtype.
    """
    if isinstance(a, numbers.Integral) and isinstance(b, numbers.Integral):
        return a == b
    eps = _epsilon(type(a), type(b))
    return b - eps <= a <= b + eps


def points_equal(p1: PointLike, p2: PointLike) -> bool:
    return equals(p1.x, p2.x) and equals(p1.y, p2.y)


def make_point(template: P, x, y) -> P:
    """
    Build a point of the same type as `template`.
    """
    return type(template)(x, y)


@dataclass(frozen=True)
class Point:
    x: int | float
    y: int | float

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return points_equal(self, other)

    def __lt__(self, other):
        return lexicographic_less(self, other)

    def __sub__(self, other):
        return subtract(self, other)


def lexicographic_less(p1: PointLike, p2: PointLike) -> bool:
    """
    Order by x, then by y.
    """
    if vertically_aligned(p1, p2):
        return p1.y < p2.y
    return p1.x < p2.x


def cross(o: PointLike, a: PointLike, b: PointLike):
    """
    Cross product of segments oa and ob.

    Positive for a counter-clockwise turn o -> a -> b,
    negative for a clockwise one, zero when collinear.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


COLLINEAR_TOLERANCE = 1e-10
ROUNDING_ULPS = 16


def distance(p1: PointLike, p2: PointLike) -> float:
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


def magnitude(*points: PointLike) -> float:
    """
    Largest absolute coordinate among points.
    """
    return max(max(abs(p.x), abs(p.y)) for p in points)


def negligible(value, scale: float, rounding_scale: float, tol: float = COLLINEAR_TOLERANCE) -> bool:
    """
    True if the floating `value` is within `tol` of `scale`, or within the
    rounding error of its dtype at `rounding_scale`.
    """
    eps = _epsilon(type(value), type(value))
    return abs(value) <= tol * scale + ROUNDING_ULPS * eps * rounding_scale


def orientation(o: PointLike, a: PointLike, b: PointLike, tol: float = COLLINEAR_TOLERANCE) -> int:
    """
    Sign of the turn o -> a -> b: 1 counter-clockwise, -1 clockwise,
    0 collinear.

    Integral turns are exact. Floating turns count as collinear when the
    sine of the angle between oa and ob is within `tol`, or when b is off
    the line oa by no more than the rounding error of its coordinates.
    """
    turn = cross(o, a, b)
    if isinstance(turn, numbers.Integral):
        return (turn > 0) - (turn < 0)

    oa, ob = distance(a, o), distance(b, o)
    if negligible(turn, oa * ob, max(oa, ob) * magnitude(o, a, b), tol):
        return 0
    return 1 if turn > 0 else -1


def horizontally_aligned(p1: PointLike, p2: PointLike) -> bool:
    """
    True if p1 and p2 share the same y, up to the collinearity tolerance.
    """
    dy = p1.y - p2.y
    if isinstance(dy, numbers.Integral):
        return dy == 0
    return negligible(dy, distance(p1, p2), magnitude(p1, p2))


def vertically_aligned(p1: PointLike, p2: PointLike) -> bool:
    dx = p1.x - p2.x
    if isinstance(dx, numbers.Integral):
        return dx == 0
    return negligible(dx, distance(p1, p2), magnitude(p1, p2))


def subtract(p1: P, p2: PointLike) -> P:
    return make_point(p1, p1.x - p2.x, p1.y - p2.y)


def square_norm(p: PointLike):
    return p.x * p.x + p.y * p.y


def square_distance(p1: PointLike, p2: PointLike):
    return square_norm(subtract(p1, p2))


def lowest_point_index(points: Sequence[PointLike], first: int = 0, last: int | None = None) -> int:
    """
    Index of the point with the lowest y in points[first:last],
    ties (within the collinearity tolerance) broken by the lowest x.
    """
    if last is None:
        last = len(points)
    best = first
    for i in range(first + 1, last):
        p, q = points[i], points[best]
        if horizontally_aligned(p, q):
            if p.x < q.x:
                best = i
        elif p.y < q.y:
            best = i
    return best


def comparator(less: Callable[[PointLike, PointLike], bool]):
    """
    Turn a strict "less than" predicate into a sort key.
    """
    def compare(p1, p2):
        if less(p1, p2):
            return -1
        if less(p2, p1):
            return 1
        return 0
    return functools.cmp_to_key(compare)
