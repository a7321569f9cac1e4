import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import pytest

from convex_hull import compare_algorithms, compute_bounding_box, compute_convex_hull
from hull_config import HullAlgorithm
from visualization import plot_algorithm_timings, plot_bounding_box, plot_hull, plot_hulls, plot_points


@pytest.fixture
def ax():
    fig, ax = plt.subplots()
    yield ax
    plt.close(fig)


def test_plot_points(ax, ten_points):
    plot_points(ten_points, ax=ax)
    assert len(ax.collections) == 1
    assert len(ax.collections[0].get_offsets()) == len(ten_points)


def test_plot_hull_is_closed(ax, ten_points):
    hull = compute_convex_hull(ten_points).vertices
    plot_hull(hull, ax=ax)

    assert len(ax.lines) == 1
    xs, ys = ax.lines[0].get_data()
    assert len(xs) == len(hull) + 1
    assert (xs[0], ys[0]) == (xs[-1], ys[-1])


def test_plot_empty_hull_draws_nothing(ax):
    plot_hull([], ax=ax)
    plot_bounding_box([], ax=ax)
    assert len(ax.lines) == 0


def test_plot_hulls_overlays_each_algorithm(ax, ten_points):
    hulls = {a.value: compute_convex_hull(ten_points, a).vertices for a in HullAlgorithm}
    plot_hulls(hulls, ax=ax)

    assert len(ax.lines) == len(hulls)
    assert ax.get_legend() is not None
    assert len({line.get_color() for line in ax.lines}) == len(hulls)


def test_plot_bounding_box(ax, ten_points):
    plot_bounding_box(compute_bounding_box(ten_points), ax=ax)
    assert len(ax.lines) == 1
    assert ax.lines[0].get_linestyle() == '--'
    assert len(ax.lines[0].get_xdata()) == 5


def test_plot_algorithm_timings(ax, ten_points):
    timings = compare_algorithms(ten_points)
    plot_algorithm_timings(timings, ax=ax)

    assert len(ax.patches) == len(timings)
    assert [label.get_text() for label in ax.get_xticklabels()] == [t.algorithm.value for t in timings]


def test_plot_on_current_axes(ten_points):
    fig = plt.figure()
    plot_points(ten_points)
    assert len(plt.gca().collections) == 1
    plt.close(fig)
