"""
ex01a_vector_math.py
--------------------
Goal: Walk through the Vector2D operations everything else is built on.
Angles, lengths, perpendiculars and the signed angle between two vectors.
"""
import math

from pointcore.display import Display
from pointvector import Vector2D, UNIT_RIGHT, UNIT_UP


def run_vector_demo():
    disp = Display("Vector Math", "Vector2D")
    disp.header()

    disp.section("1. Length and Angle")
    v = Vector2D(3.0, 4.0)
    print(f"Vector:  {v}")
    print(f"Length:  {v.length}")           # 5.0
    print(f"Angle:   {v.degrees:.4f} deg")
    disp.check("length is 5", v.length == 5.0)

    disp.section("2. Normalizing")
    unit = v.normalized()
    print(f"Unit:    {unit}")
    disp.check("normalized length is 1", math.isclose(unit.length, 1.0))

    disp.section("3. Perpendiculars")
    # CCW: (dx, dy) -> (-dy, dx)    CW: (dx, dy) -> (dy, dx)
    print(f"CCW:     {v.perpendicular}")
    print(f"CW:      {v.clockwise_perpendicular}")
    disp.check("perpendicular twice is the inverse", v.perpendicular.perpendicular == -v)

    disp.section("4. Signed Angles")
    disp.setup_columns(["Vector", "dx", "dy", "from +x", "from up"])
    for deg in (0, 45, 90, 135, -45):
        w = Vector2D.from_degrees(deg)
        disp.log_row(f"{deg} deg", w, math.degrees(w.radians()), math.degrees(w.radians(UNIT_UP)))

    disp.section("5. Rebuilding")
    longer = v.with_length(10.0)
    turned = UNIT_RIGHT.with_angle(math.pi / 2)
    print(f"with_length(10): {longer}")
    print(f"with_angle(pi/2): {turned}")
    disp.check("with_length keeps the angle", math.isclose(longer.angle, v.angle))

    disp.success("Vector demo complete")


if __name__ == "__main__":
    run_vector_demo()
