''' vector.py
    ---------
    Free 2D vectors: direction and magnitude with no anchor point.

    Conventions:
      - Angles are in radians unless a name says degrees.
      - Screen coordinates: y grows downward, so UNIT_UP is (0, -1).
      - Equality checks against 0 and 1 are exact. They decide which
        degenerate cases short-circuit, so they are not tolerance based.
'''
import math
import numpy as np

from .point import Point2D


def _acos(ratio):
    # Rounding can push |ratio| a hair past 1.0
    return math.acos(float(np.clip(ratio, -1.0, 1.0)))


class Vector2D:
    ''' A 2D displacement (dx, dy).

    Vectors are immutable values. Operations that would change a vector
    (`with_angle`, `with_length`, `rotated`, `normalized`, ...) return a new one.

    Attributes:
        dx (float): Horizontal component
        dy (float): Vertical component
    '''
    __slots__ = ['_dx', '_dy']

    def __init__(self, dx, dy):
        self._dx = float(dx)
        self._dy = float(dy)

    # --- Construction ---

    @classmethod
    def from_points(cls, start, end):
        ''' The vector running from `start` to `end`. '''
        return cls(end.x - start.x, end.y - start.y)

    @classmethod
    def from_polar(cls, radians, length=1.0, reference=None):
        '''
        Creates a vector of the given length and angle.

        Args:
            radians (float): The angle of the vector.
            length (float): The length of the vector. Defaults to 1.
            reference (Vector2D, optional): If given, `radians` is measured
                from this vector's angle instead of the +x axis.
        '''
        if reference is not None:
            radians = radians + reference.angle
        return cls(length * math.cos(radians), length * math.sin(radians))

    @classmethod
    def from_degrees(cls, degrees, length=1.0, reference=None):
        return cls.from_polar(math.radians(degrees), length, reference)

    @classmethod
    def from_array(cls, arr):
        return cls(arr[0], arr[1])

    # --- Components ---

    @property
    def dx(self):
        return self._dx

    @property
    def dy(self):
        return self._dy

    def to_array(self):
        ''' Returns the components as a numpy array for calculation. '''
        return np.array([self._dx, self._dy], dtype=np.float64)

    # --- Magnitude ---

    @property
    def length(self):
        return math.sqrt(self._dx * self._dx + self._dy * self._dy)

    @property
    def length_squared(self):
        return self._dx * self._dx + self._dy * self._dy

    @property
    def is_unit(self):
        return self.length_squared == 1

    def normalized(self):
        ''' Same direction, length 1. A zero vector raises ZeroDivisionError. '''
        sq_len = self.length_squared
        if sq_len == 1:
            return self
        length = math.sqrt(sq_len)
        return Vector2D(self._dx / length, self._dy / length)

    def with_length(self, length):
        ''' Same angle, new length. '''
        return Vector2D.from_polar(self.angle, length)

    # --- Direction ---

    @property
    def angle(self):
        ''' Angle from the +x axis in radians, in [-pi, pi]. '''
        if self._dy < 0:
            return -_acos(self._dx / self.length)
        return _acos(self._dx / self.length)

    @property
    def degrees(self):
        return math.degrees(self.angle)

    def with_angle(self, radians):
        ''' Same length, new angle. '''
        return Vector2D.from_polar(radians, self.length)

    def radians(self, reference=None):
        '''
        Signed angle between this vector and `reference`.

        Without a reference the angle is measured from (1, 0). A dot
        product of exactly zero returns 0.0 without computing the ratio.
        The sign is negative when `self x reference` is positive.
        '''
        if reference is None:
            return self.angle

        dot = self.dot_product(reference)
        if dot == 0:
            return 0.0
        mag = math.sqrt(self.length_squared * reference.length_squared)
        if self.cross_product(reference) > 0:
            return -_acos(dot / mag)
        return _acos(dot / mag)

    @property
    def perpendicular(self):
        ''' Counter-clockwise perpendicular: (dx, dy) -> (-dy, dx). '''
        return Vector2D(-self._dy, self._dx)

    @property
    def clockwise_perpendicular(self):
        ''' Clockwise perpendicular: (dx, dy) -> (dy, dx).
            Half-plane and offset logic depend on this exact formula. '''
        return Vector2D(self._dy, self._dx)

    @property
    def inverse(self):
        return Vector2D(-self._dx, -self._dy)

    def rotated(self, radians):
        ''' Applies the 2D rotation matrix. '''
        cos_r = math.cos(radians)
        sin_r = math.sin(radians)
        return Vector2D(self._dx * cos_r - self._dy * sin_r,
                        self._dx * sin_r + self._dy * cos_r)

    def rotated_degrees(self, degrees):
        return self.rotated(math.radians(degrees))

    # --- Products ---

    def dot_product(self, other):
        return self._dx * other.dx + self._dy * other.dy

    def cross_product(self, other):
        ''' Scalar 2D cross product (perpendicular dot product). '''
        return self._dx * other.dy - self._dy * other.dx

    # --- Points ---

    def point_from(self, origin):
        ''' The end point of this vector when placed at `origin`. '''
        return Point2D(origin.x + self._dx, origin.y + self._dy)

    def point_at_distance(self, distance, origin=None):
        '''
        Travels `distance` along this vector's direction.

        Args:
            distance (float): Distance to travel. Negative goes backwards.
            origin (Point2D, optional): Start point. Defaults to (0, 0).
        '''
        if origin is None:
            origin = Point2D.zero()
        norm = self.normalized()
        return Point2D(origin.x + distance * norm.dx, origin.y + distance * norm.dy)

    def y_at_distance_along_x(self, distance, origin=None):
        ''' The y value reached after moving `distance` in x along the vector. '''
        if origin is None:
            origin = Point2D.zero()
        if self._dx == 0:
            return origin.y
        return origin.y + distance * self._dy / self._dx

    def x_at_distance_along_y(self, distance, origin=None):
        ''' The x value reached after moving `distance` in y along the vector. '''
        if origin is None:
            origin = Point2D.zero()
        if self._dy == 0:
            return origin.x
        return origin.x + distance * self._dx / self._dy

    # --- Arithmetic ---

    def __add__(self, other):
        return Vector2D(self._dx + other.dx, self._dy + other.dy)

    def __sub__(self, other):
        return Vector2D(self._dx - other.dx, self._dy - other.dy)

    def __mul__(self, scalar):
        return Vector2D(self._dx * scalar, self._dy * scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        return Vector2D(self._dx / scalar, self._dy / scalar)

    def __neg__(self):
        return self.inverse

    def __iter__(self):
        yield self._dx
        yield self._dy

    def __eq__(self, other):
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self._dx == other.dx and self._dy == other.dy

    def __hash__(self):
        return hash((Vector2D, self._dx, self._dy))

    def __repr__(self):
        return f'Vector2D(dx = {self._dx:.4f}, dy = {self._dy:.4f})'


# Unit vectors in screen coordinates
UNIT_RIGHT = Vector2D(1.0, 0.0)
UNIT_UP = Vector2D(0.0, -1.0)
UNIT_LEFT = Vector2D(-1.0, 0.0)
UNIT_DOWN = Vector2D(0.0, 1.0)
