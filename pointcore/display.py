"""
pointcore/display.py
--------------------
Standardized console output for pointvector scripts.
Provides headers, section breaks, tabular point listings and
pass/fail lines for geometric checks.
"""
import time
import numpy as np


def format_value(val, width):
    """ Right-justifies a value, picking fixed or scientific notation for floats. """
    if isinstance(val, (bool, np.bool_)):
        return ("yes" if val else "no").rjust(width)
    if isinstance(val, int):
        return f"{val:d}".rjust(width)
    if isinstance(val, (float, np.floating)):
        abs_val = abs(val)
        if abs_val == 0:
            return f"{0.0:.4f}".rjust(width)
        if abs_val < 1e-3 or abs_val >= 1e5:
            return f"{val:.2e}".rjust(width)
        return f"{val:.4f}".rjust(width)
    if val is None:
        return "-".rjust(width)
    return str(val).rjust(width)


class GeometryDisplay:
    def __init__(self, title, context_info=""):
        """
        Initialize the display manager.

        Args:
            title (str): Name of the script (e.g. "Rectangle Intersections")
            context_info (str): What is being exercised (e.g. "AnchoredVector | rect walk")
        """
        self.title = title
        self.context = context_info
        self.start_time = time.time()
        self._col_widths = []
        self._headers = []
        self.failures = 0

    def header(self):
        """Prints the header block."""
        width = 70
        print("-" * width)
        print(f"PointVector :: {self.title}")
        if self.context:
            print(f"Context     :: {self.context}")
        print("-" * width + "\n")

    def section(self, name):
        """Prints a visual break for a new phase of the script."""
        print(f"\n--- {name} ---")

    def setup_columns(self, headers, widths=None):
        """
        Defines the columns for the row log.

        Args:
            headers (list of str): Column names, e.g. ["Case", "x", "y"]
            widths (list of int, optional): Width of each column. Defaults to 12.
        """
        self._headers = list(headers)
        if widths is None:
            self._col_widths = [12] * len(self._headers)
        else:
            self._col_widths = list(widths)

        header_str = "  ".join([h.rjust(w) for h, w in zip(self._headers, self._col_widths)])
        print(header_str)
        print("-" * len(header_str))

    def log_row(self, *args):
        """
        Logs a row of data matching the columns defined in setup_columns.
        A Point2D or Vector2D argument fills two columns.
        """
        values = []
        for val in args:
            if hasattr(val, "to_array"):
                values.extend(float(c) for c in val.to_array())
            else:
                values.append(val)

        if len(values) != len(self._col_widths):
            raise ValueError(f"Expected {len(self._col_widths)} values, got {len(values)}: {values}")

        print("  ".join(format_value(v, w) for v, w in zip(values, self._col_widths)))

    def check(self, label, passed, detail=""):
        """Prints a SUCCESS / FAILURE line and counts failures."""
        if not passed:
            self.failures += 1
        status = "SUCCESS" if passed else "FAILURE"
        suffix = f" ({detail})" if detail else ""
        print(f" -> {status}: {label}{suffix}")
        return passed

    def success(self, message="Done"):
        """Prints the footer with elapsed time and the failure count."""
        elapsed = time.time() - self.start_time
        if self.failures:
            print(f"\n>> {message} with {self.failures} failed check(s) ({elapsed:.2f}s)\n")
        else:
            print(f"\n>> {message} ({elapsed:.2f}s)\n")

    def error(self, message):
        """Prints a critical error message."""
        print(f"\n!! CRITICAL ERROR: {message} !!\n")


# -- Convenience Alias --
Display = GeometryDisplay
