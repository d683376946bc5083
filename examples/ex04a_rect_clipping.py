"""
ex04a_rect_clipping.py
----------------------
Goal: Clip a fan of lines through one point to a canvas rect.
Every line either misses the rect or crosses its boundary exactly twice.
"""
import math

import matplotlib.pyplot as plt

from pointcore.display import Display
from pointvector import AnchoredVector, Point2D, Rect
from pointvector.plotting import new_axes, plot_anchored_vector, plot_line_through_rect, plot_rect


def run_clipping_demo(show=True, n_lines=12):
    disp = Display("Rect Clipping", "points_intersecting_rect")
    disp.header()

    canvas = Rect.from_origin_size(0, 0, 200, 120)
    # Pivot sits outside the canvas, so some lines miss it
    pivot = Point2D(-40, 60)

    disp.section("1. Fan of Lines")
    disp.setup_columns(["Angle", "x1", "y1", "x2", "y2"], widths=[8, 10, 10, 10, 10])
    fan = []
    for i in range(n_lines):
        vec = AnchoredVector.from_angle(pivot, i * math.pi / n_lines)
        fan.append(vec)
        hits = vec.points_intersecting_rect(canvas)
        label = f"{math.degrees(vec.angle):.0f}"
        if hits is None:
            disp.log_row(label, None, None, None, None)
            continue
        disp.log_row(label, hits[0], hits[1])
        disp.check(f"{label} deg crosses the boundary twice", len(hits) == 2)

    disp.section("2. Plot")
    fig, ax = new_axes("Lines through a pivot, clipped to the canvas")
    plot_rect(ax, canvas, label='Canvas')
    for vec in fan:
        plot_line_through_rect(ax, vec, canvas)
        plot_anchored_vector(ax, vec, length=20.0)
    if show:
        plt.show()

    disp.success("Clipping demo complete")


if __name__ == "__main__":
    run_clipping_demo()
