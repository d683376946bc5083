import io
import unittest
from contextlib import redirect_stdout

import numpy as np

from pointcore.display import Display, GeometryDisplay, format_value
from pointvector import Point2D


class FormatValueTests(unittest.TestCase):
    def test_formats(self):
        self.assertEqual(format_value(3, 4), "   3")
        self.assertEqual(format_value(2.5, 8), "  2.5000")
        self.assertEqual(format_value(0.0, 6), "0.0000")
        self.assertEqual(format_value(1e-6, 10), "  1.00e-06")
        self.assertEqual(format_value(np.float64(123456.0), 10), "  1.23e+05")
        self.assertEqual(format_value(True, 4), " yes")
        self.assertEqual(format_value(None, 3), "  -")
        self.assertEqual(format_value("ab", 3), " ab")


class GeometryDisplayTests(unittest.TestCase):
    def run_quiet(self, fn, *args, **kwargs):
        buf = io.StringIO()
        with redirect_stdout(buf):
            result = fn(*args, **kwargs)
        return result, buf.getvalue()

    def test_alias(self):
        self.assertIs(Display, GeometryDisplay)

    def test_header(self):
        disp = Display("Rect Walk", "AnchoredVector")
        _, out = self.run_quiet(disp.header)
        self.assertIn("PointVector :: Rect Walk", out)
        self.assertIn("Context     :: AnchoredVector", out)

    def test_rows_expand_points(self):
        disp = Display("Rows")
        _, out = self.run_quiet(disp.setup_columns, ["Case", "x", "y"], [6, 8, 8])
        self.assertIn("Case", out)
        _, out = self.run_quiet(disp.log_row, "a", Point2D(1.5, -2.0))
        self.assertEqual(out, "     a    1.5000   -2.0000\n")

    def test_row_length_mismatch(self):
        disp = Display("Rows")
        self.run_quiet(disp.setup_columns, ["x", "y"])
        with self.assertRaises(ValueError):
            self.run_quiet(disp.log_row, 1.0)

    def test_check_counts_failures(self):
        disp = Display("Checks")
        passed, out = self.run_quiet(disp.check, "ok", True)
        self.assertTrue(passed)
        self.assertIn("SUCCESS: ok", out)
        passed, out = self.run_quiet(disp.check, "bad", False, "off by one")
        self.assertFalse(passed)
        self.assertIn("FAILURE: bad (off by one)", out)
        self.assertEqual(disp.failures, 1)
        _, out = self.run_quiet(disp.success)
        self.assertIn("1 failed check(s)", out)

    def test_error(self):
        _, out = self.run_quiet(Display("E").error, "boom")
        self.assertIn("!! CRITICAL ERROR: boom !!", out)


if __name__ == "__main__":
    unittest.main()
