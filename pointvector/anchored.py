''' anchored.py
    -----------
    A vector anchored at an origin point. It stands for the infinite line
    `origin + t * vector`; queries that take `allow_inverse=False` restrict
    it to the forward ray (t >= 0).

    Useful for drawing calculations (stroke outlines, guides clipped to a
    canvas) and for UIs that drag along an arbitrary line.
'''
import logging

from .point import Point2D
from .vector import Vector2D

logger = logging.getLogger(__name__)


class AnchoredVector:
    ''' A unit direction fixed at an origin point.

    The direction is normalized on construction, so every distance-based
    query treats `vector` as unit length. A zero vector cannot be anchored
    (normalizing it raises ZeroDivisionError).

    Attributes:
        origin (Point2D): The anchor point
        vector (Vector2D): Unit direction
    '''
    __slots__ = ['_origin', '_vector']

    def __init__(self, origin, vector):
        self._origin = origin
        self._vector = vector.normalized()

    @classmethod
    def _from_unit(cls, origin, unit_vector):
        # unit_vector must already be normalized
        av = cls.__new__(cls)
        av._origin = origin
        av._vector = unit_vector
        return av

    @classmethod
    def from_angle(cls, origin, radians):
        ''' A unit vector at `origin` pointing along `radians`. '''
        return cls(origin, Vector2D.from_polar(radians))

    @classmethod
    def from_points(cls, origin, distant_pt, invert=False):
        '''
        Anchors at `origin` and points toward `distant_pt`.

        Args:
            invert (bool): Point away from `distant_pt` instead.
        '''
        vec = Vector2D.from_points(origin, distant_pt)
        if invert:
            vec = vec.inverse
        return cls(origin, vec)

    @property
    def origin(self):
        return self._origin

    @property
    def vector(self):
        return self._vector

    @property
    def end_point(self):
        ''' The point one unit along the vector. '''
        return self._vector.point_from(self._origin)

    @property
    def angle(self):
        return self._vector.angle

    @property
    def is_horizontal(self):
        return self._vector.dy == 0

    @property
    def is_vertical(self):
        return self._vector.dx == 0

    def is_parallel(self, other):
        '''
        True if `other` runs along this vector or opposite to it.

        Args:
            other: An AnchoredVector, a Vector2D, or an angle in radians.
        '''
        if isinstance(other, AnchoredVector):
            other = other.vector
        if isinstance(other, Vector2D):
            return self._vector.cross_product(other) == 0
        return self.angle == other or self._vector.inverse.angle == other

    # --- Points along the vector ---

    def point_at_distance(self, distance):
        ''' The point `distance` along the vector from the origin. '''
        return Point2D(self._origin.x + distance * self._vector.dx,
                       self._origin.y + distance * self._vector.dy)

    def point_along_perpendicular(self, distance, clockwise=False):
        ''' The point `distance` from the origin along one of the perpendiculars. '''
        if clockwise:
            return self._vector.clockwise_perpendicular.point_at_distance(distance, self._origin)
        return self._vector.perpendicular.point_at_distance(distance, self._origin)

    def parallel_points(self, separation):
        '''
        Two points straddling the origin across the line, `separation` apart.

        Returns:
            (counter-clockwise point, clockwise point)
        '''
        half_sep = separation / 2.0
        return (self.point_along_perpendicular(half_sep),
                self.point_along_perpendicular(half_sep, clockwise=True))

    def points_parallel_to_point(self, distance, separation):
        ''' `parallel_points` taken `distance` along the vector. '''
        return self.with_origin_at_distance(distance).parallel_points(separation)

    def closest_point(self, point):
        ''' Orthogonal projection of `point` onto the line. '''
        d = Vector2D.from_points(self._origin, point).dot_product(self._vector)
        return self.point_at_distance(d)

    # --- Derived vectors ---

    def with_angle(self, radians):
        return AnchoredVector.from_angle(self._origin, radians)

    def with_origin(self, point):
        return AnchoredVector._from_unit(point, self._vector)

    def with_origin_at_distance(self, distance):
        ''' Same direction, re-anchored `distance` along the line. '''
        return AnchoredVector._from_unit(self.point_at_distance(distance), self._vector)

    def with_origin_along_perpendicular(self, distance, clockwise=False):
        ''' Same direction, re-anchored `distance` along a perpendicular. '''
        pt = self.point_along_perpendicular(distance, clockwise=clockwise)
        return AnchoredVector._from_unit(pt, self._vector)

    @property
    def perpendicular(self):
        return AnchoredVector._from_unit(self._origin, self._vector.perpendicular)

    @property
    def clockwise_perpendicular(self):
        return AnchoredVector._from_unit(self._origin, self._vector.clockwise_perpendicular)

    @property
    def inverse(self):
        return AnchoredVector._from_unit(self._origin, self._vector.inverse)

    def rotated(self, radians):
        return AnchoredVector(self._origin, self._vector.rotated(radians))

    # --- Intersections ---

    def point_intersecting_y(self, y, allow_inverse=True):
        '''
        Where the line crosses the horizontal line at `y`.

        Returns None if the vector is horizontal, or if `allow_inverse` is
        False and the crossing lies behind the origin.
        '''
        if self._vector.dy == 0:
            # Parallel: never crosses, or crosses everywhere
            return None
        dist = y - self._origin.y
        if not allow_inverse and dist / self._vector.dy < 0:
            return None
        x = self._vector.x_at_distance_along_y(dist, self._origin)
        return Point2D(x, y)

    def point_intersecting_x(self, x, allow_inverse=True):
        '''
        Where the line crosses the vertical line at `x`.

        Returns None if the vector is vertical, or if `allow_inverse` is
        False and the crossing lies behind the origin.
        '''
        if self._vector.dx == 0:
            return None
        dist = x - self._origin.x
        if not allow_inverse and dist / self._vector.dx < 0:
            return None
        y = self._vector.y_at_distance_along_x(dist, self._origin)
        return Point2D(x, y)

    def point_intersecting(self, other):
        '''
        Intersection of the two infinite lines.

        Each line is written as `dy*x - dx*y = c`, with `c` taken at its
        origin, and the 2x2 system is solved with Cramer's rule.

        Returns:
            Point2D, or None when the determinant is exactly zero (parallel
            or coincident lines).
        '''
        a = self._vector
        b = other.vector
        det = a.dx * b.dy - b.dx * a.dy
        if det == 0:
            logger.debug("parallel lines, no intersection: %r, %r", self, other)
            return None

        c1 = a.dy * self._origin.x - a.dx * self._origin.y
        c2 = b.dy * other.origin.x - b.dx * other.origin.y

        x = (a.dx * c2 - b.dx * c1) / det
        y = (a.dy * c2 - b.dy * c1) / det
        return Point2D(x, y)

    def points_intersecting_rect(self, rect):
        '''
        The two points where the line crosses the boundary of `rect`.

        Walks the left/right edge crossings and swaps in top or bottom
        crossings when a side crossing falls outside the rect's y span.

        Returns:
            (Point2D, Point2D), or None if the line misses the rect.
        '''
        left_pt = self.point_intersecting_x(rect.min_x)
        if left_pt is None:
            # Vertical line
            logger.debug("vertical line through rect at x=%s", self._origin.x)
            if rect.min_x <= self._origin.x <= rect.max_x:
                return (Point2D(self._origin.x, rect.min_y),
                        Point2D(self._origin.x, rect.max_y))
            return None
        right_pt = self.point_intersecting_x(rect.max_x)

        if left_pt.y < rect.min_y:
            # Enters above the left edge
            if right_pt.y < rect.min_y:
                return None
            top_pt = self.point_intersecting_y(rect.min_y)
            if right_pt.y <= rect.max_y:
                return (top_pt, right_pt)
            bot_pt = self.point_intersecting_y(rect.max_y)
            return (top_pt, bot_pt)

        if left_pt.y > rect.max_y:
            # Enters below the left edge
            if right_pt.y > rect.max_y:
                return None
            bot_pt = self.point_intersecting_y(rect.max_y)
            if right_pt.y >= rect.min_y:
                return (bot_pt, right_pt)
            top_pt = self.point_intersecting_y(rect.min_y)
            return (top_pt, bot_pt)

        # Crosses the left edge itself
        if right_pt.y < rect.min_y:
            return (left_pt, self.point_intersecting_y(rect.min_y))
        if right_pt.y > rect.max_y:
            return (left_pt, self.point_intersecting_y(rect.max_y))
        return (left_pt, right_pt)

    def __eq__(self, other):
        if not isinstance(other, AnchoredVector):
            return NotImplemented
        return self._origin == other.origin and self._vector == other.vector

    def __hash__(self):
        return hash((AnchoredVector, self._origin, self._vector))

    def __repr__(self):
        return (f'AnchoredVector(origin = ({self._origin.x:.4f}, {self._origin.y:.4f}), '
                f'vector = ({self._vector.dx:.4f}, {self._vector.dy:.4f}))')
