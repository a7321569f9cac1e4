import itertools
import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from geometry import PointLike


def _axes(ax: Axes | None) -> Axes:
    return plt.gca() if ax is None else ax


def plot_points(points: list[PointLike], ax: Axes | None = None, s: float = 4):
    x = [p.x for p in points]
    y = [p.y for p in points]
    _axes(ax).scatter(x, y, s=s)


def plot_hull(hull: list[PointLike], ax: Axes | None = None, color: str = 'r', label: str | None = None):
    """
    Draw a hull as a closed polygon, in the given vertex order.
    """
    if not hull:
        return
    ax = _axes(ax)
    closed = list(hull) + [hull[0]]
    ax.plot([p.x for p in closed], [p.y for p in closed], c=color, label=label)
    ax.scatter([p.x for p in hull], [p.y for p in hull], c=color, s=8)


def plot_hulls(hulls: dict[str, list[PointLike]], ax: Axes | None = None):
    clrs = ['r', 'g', 'b', 'm', 'c', 'y', 'k']
    color_cycle = itertools.cycle(clrs)

    ax = _axes(ax)
    for name, hull in hulls.items():
        plot_hull(hull, ax=ax, color=next(color_cycle), label=name)
    if hulls:
        ax.legend()


def plot_bounding_box(box: list[PointLike], ax: Axes | None = None, color: str = 'k'):
    if not box:
        return
    ax = _axes(ax)
    closed = list(box) + [box[0]]
    ax.plot([p.x for p in closed], [p.y for p in closed], c=color, linestyle='--')


def plot_algorithm_timings(timings, ax: Axes | None = None):
    """
    Bar chart of `compare_algorithms` results.
    """
    ax = _axes(ax)
    names = [t.algorithm.value for t in timings]
    times = [t.seconds for t in timings]

    bars = ax.bar(range(len(names)), times)
    ax.set_xticks(range(len(names)))
    ax.set_xticklabels(names)
    ax.set_ylabel('Time (s)')
    ax.grid(True, alpha=0.3)

    for bar, t in zip(bars, times):
        height = bar.get_height()
        ax.text(bar.get_x() + bar.get_width() / 2., height, f'{t:.4f}s', ha='center', va='bottom')
