import unittest


class GeometryTestCase(unittest.TestCase):
    def assertPointAlmostEqual(self, point, expected, places=7):
        self.assertIsNotNone(point)
        ex, ey = expected
        self.assertAlmostEqual(point.x, ex, places=places)
        self.assertAlmostEqual(point.y, ey, places=places)

    def assertVecAlmostEqual(self, vec, expected, places=7):
        ex, ey = expected
        self.assertAlmostEqual(vec.dx, ex, places=places)
        self.assertAlmostEqual(vec.dy, ey, places=places)
