# pointvector/__init__.py

__version__ = "1.0"

# Import Primitives
from .point import Point2D, Rect
from .vector import Vector2D, UNIT_RIGHT, UNIT_UP, UNIT_LEFT, UNIT_DOWN

# Import the Anchored Vector
from .anchored import AnchoredVector

# Import Half-Plane Queries
from .halfplane import is_in_half_plane, half_plane_mask
