"""
ex02a_intersections.py
----------------------
Goal: Intersect anchored vectors with each other, with axis lines and with a rect.
Verifies each intersection against the equations of the lines involved.
"""
from pointcore import config
from pointcore.display import Display
from pointvector import AnchoredVector, Point2D, Rect, Vector2D


def on_line(vec, pt):
    """ True if pt satisfies the line equation of vec (within VERIFY_TOL). """
    offset = Vector2D.from_points(vec.origin, pt)
    return abs(vec.vector.cross_product(offset)) < config.VERIFY_TOL


def run_intersection_demo(debug=False):
    config.setup_logging(debug)
    disp = Display("Intersections", "AnchoredVector")
    disp.header()

    disp.section("1. Two Lines")
    ab = AnchoredVector.from_points(Point2D(1, 1), Point2D(4, 4))
    cd = AnchoredVector.from_points(Point2D(1, 8), Point2D(2, 4))
    hit = ab.point_intersecting(cd)
    print(f"AB: {ab}")
    print(f"CD: {cd}")
    print(f"Intersection: {hit}")   # (2.4, 2.4)
    disp.check("point lies on both lines", on_line(ab, hit) and on_line(cd, hit))

    parallel = ab.with_origin(Point2D(0, 5))
    disp.check("parallel lines do not intersect", ab.point_intersecting(parallel) is None)

    disp.section("2. Axis Lines")
    ray = AnchoredVector(Point2D(0, 0), Vector2D(1, 2))
    print(f"y = 4  -> {ray.point_intersecting_y(4)}")
    print(f"x = -1 -> {ray.point_intersecting_x(-1)}")
    disp.check("ray does not reach x = -1 going forward",
               ray.point_intersecting_x(-1, allow_inverse=False) is None)

    disp.section("3. Rect Boundary")
    rect = Rect(0, 0, 10, 6)
    cases = [
        ("diagonal", AnchoredVector.from_points(Point2D(0, 0), Point2D(10, 6))),
        ("steep", AnchoredVector(Point2D(5, 3), Vector2D(1, 4))),
        ("vertical", AnchoredVector(Point2D(2, 0), Vector2D(0, 1))),
        ("above", AnchoredVector(Point2D(0, -5), Vector2D(1, 0.1))),
    ]
    disp.setup_columns(["Case", "x1", "y1", "x2", "y2"])
    for name, vec in cases:
        hits = vec.points_intersecting_rect(rect)
        if hits is None:
            disp.log_row(name, None, None, None, None)
        else:
            disp.log_row(name, hits[0], hits[1])

    disp.success("Intersection demo complete")


if __name__ == "__main__":
    run_intersection_demo()
