"""
pointcore/config.py
-------------------
Default values shared by the geometry library, the plotting helpers and
the example scripts. The library itself compares floats exactly; the
tolerances here are for checking results, not for computing them.
"""
import logging

# Absolute tolerance used when verifying an intersection point against
# the equations of the lines that produced it.
VERIFY_TOL = 1e-6

# --- Plotting ---
DEFAULT_VECTOR_DRAW_LENGTH = 1.0
DEFAULT_HALF_PLANE_SAMPLES = 25

RECT_COLOR = 'black'
LINE_COLOR = 'tab:blue'
VECTOR_COLOR = 'tab:red'
INSIDE_COLOR = 'tab:green'
OUTSIDE_COLOR = 'lightgray'

# --- Logging ---
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(debug=False):
    """
    Configures the root logger for scripts.

    Args:
        debug (bool): Emit the library's DEBUG records (degenerate-case
            short-circuits) in addition to INFO and above.
    """
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger(__name__).debug("logging configured (level=%s)",
                                      logging.getLevelName(level))
    return level
