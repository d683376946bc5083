"""
pointvector/plotting.py
-----------------------
Matplotlib helpers for visual feedback on geometric queries.
Each function draws onto a given Axes and returns the artists it created;
none of them calls plt.show().

Not imported by `pointvector/__init__.py`, so the core never needs matplotlib.
"""
import numpy as np
import matplotlib.pyplot as plt

from pointcore import config
from .halfplane import half_plane_mask


def new_axes(title="", figsize=(6, 6)):
    """ Standard figure setup: equal aspect, grid, y axis pointing down. """
    fig, ax = plt.subplots(figsize=figsize)
    ax.set_title(title)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.grid(True)
    ax.set_aspect('equal')
    # Screen coordinates: y grows downward
    ax.invert_yaxis()
    return fig, ax


def plot_rect(ax, rect, color=config.RECT_COLOR, label=None):
    """ Draws the rect outline as a closed polyline. """
    corners = rect.corners()
    xs = [p.x for p in corners] + [corners[0].x]
    ys = [p.y for p in corners] + [corners[0].y]
    lines = ax.plot(xs, ys, '-', color=color, linewidth=1.5, label=label)
    return lines


def plot_anchored_vector(ax, vector, length=config.DEFAULT_VECTOR_DRAW_LENGTH,
                         color=config.VECTOR_COLOR, label=None):
    """ Draws the origin as a dot and the direction as an arrow of `length`. """
    tip = vector.point_at_distance(length)
    dot = ax.plot([vector.origin.x], [vector.origin.y], 'o', color=color, label=label)
    arrow = ax.annotate("", xy=(tip.x, tip.y), xytext=(vector.origin.x, vector.origin.y),
                        arrowprops=dict(arrowstyle='->', color=color, linewidth=2))
    return dot + [arrow]


def plot_line_through_rect(ax, vector, rect, color=config.LINE_COLOR, label=None):
    """
    Draws the part of the infinite line that lies inside `rect`.
    Returns an empty list when the line misses the rect.
    """
    hits = vector.points_intersecting_rect(rect)
    if hits is None:
        return []
    p1, p2 = hits
    return ax.plot([p1.x, p2.x], [p1.y, p2.y], 'o--', color=color, label=label)


def plot_half_plane(ax, reference, rect, samples=config.DEFAULT_HALF_PLANE_SAMPLES):
    """
    Scatters a samples x samples grid over `rect`, colored by half-plane membership.

    Returns:
        (inside_scatter, outside_scatter)
    """
    gx, gy = np.meshgrid(np.linspace(rect.min_x, rect.max_x, samples),
                         np.linspace(rect.min_y, rect.max_y, samples))
    pts = np.column_stack([gx.ravel(), gy.ravel()])
    mask = half_plane_mask(pts, reference)

    inside = ax.scatter(pts[mask, 0], pts[mask, 1], s=8, color=config.INSIDE_COLOR, label='Inside')
    outside = ax.scatter(pts[~mask, 0], pts[~mask, 1], s=8, color=config.OUTSIDE_COLOR, label='Outside')
    return inside, outside
