"""
Entry points: pick a hull algorithm by name, run it on a copy
of the input and report which algorithm produced the result.
"""
import logging
import time
import numpy as np

from typing import Callable, Iterable, NamedTuple

from bounding_box import bounding_box
from chan_algorithm import chan
from geometry import Point, PointLike
from graham_scan import graham_scan
from hull_config import HullAlgorithm, HullConfig
from jarvis_march import jarvis_march
from monotone_chain import monotone_chain

logger = logging.getLogger(__name__)


class HullResult(NamedTuple):
    vertices: list
    algorithm: HullAlgorithm


class AlgorithmTiming(NamedTuple):
    algorithm: HullAlgorithm
    seconds: float
    vertex_count: int


def _graham_scan(points: list) -> list:
    return points[:graham_scan(points)]


def _monotone_chain(points: list) -> list:
    destination = [None] * (2 * len(points))
    return destination[:monotone_chain(points, destination)]


ALGORITHMS: dict[HullAlgorithm, Callable[[list], list]] = {
    HullAlgorithm.GRAHAM_SCAN: _graham_scan,
    HullAlgorithm.MONOTONE_CHAIN: _monotone_chain,
    HullAlgorithm.JARVIS_MARCH: jarvis_march,
    HullAlgorithm.CHAN: chan,
}


def points_from_array(array) -> list[Point]:
    """
    Convert an (N, 2) array of coordinates to points.
    """
    array = np.asarray(array)
    if array.ndim != 2 or array.shape[1] != 2:
        raise ValueError(f'Expected an array of shape (N, 2), got {array.shape}')
    return [Point(x, y) for x, y in array.tolist()]


def hull_to_array(points: Iterable[PointLike]) -> np.ndarray:
    coords = [(p.x, p.y) for p in points]
    if not coords:
        return np.empty((0, 2))
    return np.array(coords)


def _prepare(points) -> list:
    """
    Copy the input into a fresh list and check
    that all points share the same type.
    """
    if isinstance(points, np.ndarray):
        return points_from_array(points)

    points = list(points)
    point_types = {type(p) for p in points}
    if len(point_types) > 1:
        names = sorted(t.__name__ for t in point_types)
        raise TypeError(f'All points must share one type, got: {", ".join(names)}')
    return points


def _resolve(algorithm: HullAlgorithm | str | None, config: HullConfig | None) -> HullAlgorithm:
    if algorithm is not None:
        return HullAlgorithm.parse(algorithm)
    return (config or HullConfig()).algorithm


def compute_convex_hull(
    points,
    algorithm: HullAlgorithm | str | None = None,
    config: HullConfig | None = None,
) -> HullResult:
    """
    Compute the convex hull of `points` with the chosen algorithm.

    An explicit `algorithm` wins over `config`; Graham scan is the default.
    The input is never modified. Vertices are returned counter-clockwise.
    """
    chosen = _resolve(algorithm, config)
    prepared = _prepare(points)
    logger.debug('Computing convex hull of %d points with %s', len(prepared), chosen.value)
    return HullResult(ALGORITHMS[chosen](prepared), chosen)


def compute_bounding_box(points) -> list:
    return bounding_box(_prepare(points))


def compare_algorithms(points, algorithms: Iterable[HullAlgorithm | str] | None = None) -> list[AlgorithmTiming]:
    """
    Run several hull algorithms on the same points, each on its own copy,
    and time them.
    """
    prepared = _prepare(points)
    chosen = [HullAlgorithm.parse(a) for a in (algorithms or HullAlgorithm)]

    results = []
    for algorithm in chosen:
        start = time.perf_counter()
        hull = ALGORITHMS[algorithm](list(prepared))
        seconds = time.perf_counter() - start
        results.append(AlgorithmTiming(algorithm, seconds, len(hull)))

    logger.info(
        'Compared %d algorithms on %d points: %s',
        len(results),
        len(prepared),
        ', '.join(f'{r.algorithm.value}={r.seconds:.6f}s' for r in results),
    )
    return results
