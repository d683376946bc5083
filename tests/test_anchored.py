import math
import unittest

from pointvector import AnchoredVector, Point2D, Vector2D, UNIT_RIGHT
from util import GeometryTestCase


class AnchoredConstructionTests(GeometryTestCase):
    def test_vector_is_normalized(self):
        av = AnchoredVector(Point2D(0, 0), Vector2D(3, 4))
        self.assertVecAlmostEqual(av.vector, (0.6, 0.8))
        self.assertAlmostEqual(av.vector.length, 1.0)

    def test_zero_vector_cannot_be_anchored(self):
        with self.assertRaises(ZeroDivisionError):
            AnchoredVector(Point2D(1, 1), Vector2D(0, 0))
        with self.assertRaises(ZeroDivisionError):
            AnchoredVector.from_points(Point2D(2, 2), Point2D(2, 2))

    def test_from_points(self):
        av = AnchoredVector.from_points(Point2D(0, 0), Point2D(0, 5))
        self.assertEqual(av.vector, Vector2D(0, 1))
        inv = AnchoredVector.from_points(Point2D(0, 0), Point2D(0, 5), invert=True)
        self.assertEqual(inv.vector, Vector2D(0, -1))
        self.assertEqual(inv.origin, Point2D(0, 0))

    def test_from_angle(self):
        av = AnchoredVector.from_angle(Point2D(1, 1), 0.0)
        self.assertEqual(av.vector, UNIT_RIGHT)
        down = AnchoredVector.from_angle(Point2D(1, 1), math.pi / 2)
        self.assertVecAlmostEqual(down.vector, (0.0, 1.0))

    def test_immutable(self):
        av = AnchoredVector(Point2D(0, 0), UNIT_RIGHT)
        with self.assertRaises(AttributeError):
            av.origin = Point2D(1, 1)

    def test_equality(self):
        a = AnchoredVector(Point2D(1, 2), Vector2D(0, 3))
        b = AnchoredVector(Point2D(1, 2), Vector2D(0, 1))
        self.assertEqual(a, b)
        self.assertNotEqual(a, a.inverse)


class AnchoredQueryTests(GeometryTestCase):
    def setUp(self):
        self.down = AnchoredVector(Point2D(0, 0), Vector2D(0, 1))

    def test_end_point_and_angle(self):
        av = AnchoredVector(Point2D(1, 1), Vector2D(0, 2))
        self.assertEqual(av.end_point, Point2D(1, 2))
        self.assertAlmostEqual(av.angle, math.pi / 2)

    def test_axis_flags(self):
        self.assertTrue(self.down.is_vertical)
        self.assertFalse(self.down.is_horizontal)
        flat = AnchoredVector(Point2D(3, 3), Vector2D(-2, 0))
        self.assertTrue(flat.is_horizontal)
        self.assertFalse(flat.is_vertical)

    def test_point_at_distance(self):
        av = AnchoredVector(Point2D(1, 1), Vector2D(3, 4))
        self.assertPointAlmostEqual(av.point_at_distance(5.0), (4.0, 5.0))
        self.assertPointAlmostEqual(av.point_at_distance(-5.0), (-2.0, -3.0))
        self.assertEqual(av.point_at_distance(0.0), Point2D(1, 1))

    def test_point_along_perpendicular(self):
        self.assertPointAlmostEqual(self.down.point_along_perpendicular(2.0), (-2.0, 0.0))
        self.assertPointAlmostEqual(self.down.point_along_perpendicular(2.0, clockwise=True), (2.0, 0.0))

    def test_clockwise_perpendicular_swaps_components(self):
        # (dx, dy) -> (dy, dx): for a horizontal vector both perpendicular points coincide
        right = AnchoredVector(Point2D(0, 0), UNIT_RIGHT)
        self.assertPointAlmostEqual(right.point_along_perpendicular(2.0), (0.0, 2.0))
        self.assertPointAlmostEqual(right.point_along_perpendicular(2.0, clockwise=True), (0.0, 2.0))

    def test_parallel_points(self):
        ccw, cw = self.down.parallel_points(4.0)
        self.assertPointAlmostEqual(ccw, (-2.0, 0.0))
        self.assertPointAlmostEqual(cw, (2.0, 0.0))

    def test_points_parallel_to_point(self):
        ccw, cw = self.down.points_parallel_to_point(3.0, 4.0)
        self.assertPointAlmostEqual(ccw, (-2.0, 3.0))
        self.assertPointAlmostEqual(cw, (2.0, 3.0))

    def test_closest_point(self):
        right = AnchoredVector(Point2D(0, 0), UNIT_RIGHT)
        self.assertPointAlmostEqual(right.closest_point(Point2D(3, 5)), (3.0, 0.0))
        self.assertPointAlmostEqual(right.closest_point(Point2D(-3, -5)), (-3.0, 0.0))
        diag = AnchoredVector.from_points(Point2D(0, 0), Point2D(4, 4))
        self.assertPointAlmostEqual(diag.closest_point(Point2D(2, 0)), (1.0, 1.0))

    def test_is_parallel(self):
        right = AnchoredVector(Point2D(0, 0), UNIT_RIGHT)
        self.assertTrue(right.is_parallel(right.inverse))
        self.assertTrue(right.is_parallel(right.with_origin(Point2D(4, -9))))
        self.assertTrue(right.is_parallel(Vector2D(-5, 0)))
        self.assertFalse(right.is_parallel(right.perpendicular))
        self.assertTrue(right.is_parallel(0.0))
        self.assertTrue(right.is_parallel(math.pi))
        self.assertFalse(right.is_parallel(math.pi / 2))

        a = AnchoredVector.from_points(Point2D(0, 0), Point2D(2, 2))
        b = AnchoredVector.from_points(Point2D(5, 0), Point2D(8, 3))
        self.assertTrue(a.is_parallel(b))


class AnchoredDerivationTests(GeometryTestCase):
    def setUp(self):
        self.down = AnchoredVector(Point2D(0, 0), Vector2D(0, 1))

    def test_with_origin(self):
        moved = self.down.with_origin(Point2D(5, 5))
        self.assertEqual(moved.origin, Point2D(5, 5))
        self.assertEqual(moved.vector, self.down.vector)
        self.assertEqual(self.down.origin, Point2D(0, 0))

    def test_with_origin_at_distance(self):
        moved = self.down.with_origin_at_distance(7.0)
        self.assertEqual(moved.origin, Point2D(0, 7))
        self.assertEqual(moved.vector, self.down.vector)

    def test_with_origin_along_perpendicular(self):
        moved = self.down.with_origin_along_perpendicular(2.0)
        self.assertPointAlmostEqual(moved.origin, (-2.0, 0.0))
        moved_cw = self.down.with_origin_along_perpendicular(2.0, clockwise=True)
        self.assertPointAlmostEqual(moved_cw.origin, (2.0, 0.0))
        self.assertEqual(moved_cw.vector, self.down.vector)

    def test_with_angle(self):
        turned = AnchoredVector(Point2D(1, 1), UNIT_RIGHT).with_angle(math.pi / 2)
        self.assertEqual(turned.origin, Point2D(1, 1))
        self.assertVecAlmostEqual(turned.vector, (0.0, 1.0))

    def test_perpendicular_and_inverse(self):
        self.assertEqual(self.down.perpendicular.vector, Vector2D(-1, 0))
        self.assertEqual(self.down.clockwise_perpendicular.vector, Vector2D(1, 0))
        self.assertEqual(self.down.inverse.vector, Vector2D(0, -1))
        self.assertEqual(self.down.perpendicular.origin, self.down.origin)

    def test_rotated(self):
        av = AnchoredVector(Point2D(2, 3), UNIT_RIGHT).rotated(math.pi / 2)
        self.assertEqual(av.origin, Point2D(2, 3))
        self.assertVecAlmostEqual(av.vector, (0.0, 1.0))
        self.assertAlmostEqual(av.vector.length, 1.0)


if __name__ == "__main__":
    unittest.main()
