''' point.py
    --------
    Immutable 2D point and axis-aligned rectangle values.
    All geometric queries in pointvector take and return these types.
'''
import math
import numpy as np


class Point2D:
    ''' A location in the plane.

    Points are values: arithmetic and geometric queries return new
    instances, and the coordinates are read-only. Coordinates are stored
    as plain floats; `to_array()` hands them to numpy when vectorised math
    is needed.

    Attributes:
        x (float): The X-coordinate
        y (float): The Y-coordinate (screen convention, grows downward)
    '''
    __slots__ = ['_x', '_y']

    def __init__(self, x, y):
        self._x = float(x)
        self._y = float(y)

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0)

    @classmethod
    def from_array(cls, arr):
        ''' Builds a point from the first two entries of a sequence or array. '''
        return cls(arr[0], arr[1])

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def to_array(self):
        ''' Returns the coordinates as a numpy array for calculation. '''
        return np.array([self._x, self._y], dtype=np.float64)

    def distance(self, to):
        ''' Euclidean distance to another point. '''
        return math.sqrt((self._x - to.x) ** 2 + (self._y - to.y) ** 2)

    def is_in_half_plane(self, reference):
        ''' True if this point lies in the half plane the anchored vector
            `reference` points into. See `halfplane.is_in_half_plane`. '''
        from .halfplane import is_in_half_plane
        return is_in_half_plane(self, reference)

    def __add__(self, vec):
        # point + vector -> translated point
        return Point2D(self._x + vec.dx, self._y + vec.dy)

    def __sub__(self, other):
        from .vector import Vector2D
        if isinstance(other, Point2D):
            return Vector2D(self._x - other.x, self._y - other.y)
        return Point2D(self._x - other.dx, self._y - other.dy)

    def __iter__(self):
        yield self._x
        yield self._y

    def __eq__(self, other):
        if not isinstance(other, Point2D):
            return NotImplemented
        return self._x == other.x and self._y == other.y

    def __hash__(self):
        return hash((Point2D, self._x, self._y))

    def __repr__(self):
        return f'Point2D(x = {self._x:.4f}, y = {self._y:.4f})'


class Rect:
    ''' An axis-aligned rectangle given by its bounds.

    Screen coordinates: `min_y` is the top edge and `max_y` the bottom edge.
    A rectangle with zero width or height is allowed but degenerate.

    Attributes:
        min_x, min_y, max_x, max_y (float): The inclusive bounds.
    '''
    __slots__ = ['_min_x', '_min_y', '_max_x', '_max_y']

    def __init__(self, min_x, min_y, max_x, max_y):
        if min_x > max_x or min_y > max_y:
            raise ValueError(f"Rect bounds are inverted: ({min_x}, {min_y}, {max_x}, {max_y})")
        self._min_x = float(min_x)
        self._min_y = float(min_y)
        self._max_x = float(max_x)
        self._max_y = float(max_y)

    @classmethod
    def from_origin_size(cls, x, y, width, height):
        ''' Builds a rect from a corner and a size. Negative sizes extend
            left / up from the corner. '''
        x0, x1 = sorted((x, x + width))
        y0, y1 = sorted((y, y + height))
        return cls(x0, y0, x1, y1)

    @property
    def min_x(self):
        return self._min_x

    @property
    def min_y(self):
        return self._min_y

    @property
    def max_x(self):
        return self._max_x

    @property
    def max_y(self):
        return self._max_y

    @property
    def width(self):
        return self._max_x - self._min_x

    @property
    def height(self):
        return self._max_y - self._min_y

    @property
    def is_degenerate(self):
        return self.width == 0 or self.height == 0

    def contains(self, point):
        ''' True if the point is inside or on the boundary. '''
        return (self._min_x <= point.x <= self._max_x and
                self._min_y <= point.y <= self._max_y)

    def corners(self):
        ''' Corners in drawing order: top-left, top-right, bottom-right, bottom-left. '''
        return (Point2D(self._min_x, self._min_y),
                Point2D(self._max_x, self._min_y),
                Point2D(self._max_x, self._max_y),
                Point2D(self._min_x, self._max_y))

    def __eq__(self, other):
        if not isinstance(other, Rect):
            return NotImplemented
        return ((self._min_x, self._min_y, self._max_x, self._max_y) ==
                (other.min_x, other.min_y, other.max_x, other.max_y))

    def __hash__(self):
        return hash((Rect, self._min_x, self._min_y, self._max_x, self._max_y))

    def __repr__(self):
        return (f'Rect(min_x = {self._min_x:.4f}, min_y = {self._min_y:.4f}, '
                f'max_x = {self._max_x:.4f}, max_y = {self._max_y:.4f})')
