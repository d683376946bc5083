"""
ex03a_half_plane.py
-------------------
Goal: Classify points against a half plane, then plot the whole region.
The boundary line is perpendicular to the vector and counts as inside.
"""
import matplotlib.pyplot as plt

from pointcore.display import Display
from pointvector import AnchoredVector, Point2D, Rect, half_plane_mask
from pointvector.plotting import new_axes, plot_anchored_vector, plot_half_plane, plot_rect


def run_half_plane_demo(show=True):
    disp = Display("Half Planes", "is_in_half_plane / half_plane_mask")
    disp.header()

    ref = AnchoredVector.from_points(Point2D(0, 0), Point2D(1, 1))

    disp.section("1. Single Points")
    expected = {
        Point2D(1, 2): True,
        Point2D(-2, -2): False,
        Point2D(0, 0): True,    # origin, on the boundary
        Point2D(1, -1): True,   # on the boundary line
    }
    disp.setup_columns(["x", "y", "inside"])
    for pt, want in expected.items():
        got = pt.is_in_half_plane(ref)
        disp.log_row(pt, got)
        if got != want:
            disp.check(f"{pt} classified", False)

    disp.section("2. Vectorised")
    mask = half_plane_mask(list(expected), ref)
    disp.check("mask matches point-by-point results", list(mask) == list(expected.values()))

    disp.section("3. Plot")
    bounds = Rect(-3, -3, 3, 3)
    fig, ax = new_axes("Half plane toward (1, 1)")
    plot_rect(ax, bounds, label='Bounds')
    plot_half_plane(ax, ref, bounds)
    plot_anchored_vector(ax, ref, length=1.5, label='Reference')
    ax.legend()
    if show:
        plt.show()

    disp.success("Half-plane demo complete")


if __name__ == "__main__":
    run_half_plane_demo()
