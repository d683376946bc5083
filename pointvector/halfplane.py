''' halfplane.py
    ------------
    Classifies points against the half plane an anchored vector points into.
    The boundary is the line through the vector's origin, perpendicular to
    the vector, and counts as inside.
'''
import logging
import numpy as np

from .vector import Vector2D

logger = logging.getLogger(__name__)


def is_in_half_plane(point, reference):
    '''
    True if `point` lies on the side of the boundary that `reference` points toward.

    Axis-aligned boundaries compare a single coordinate directly: a vertical
    reference has a horizontal boundary, so only y matters, and vice versa.
    Otherwise the sign of (perpendicular x offset-to-point) is compared with
    the sign of (perpendicular x direction).

    Args:
        point (Point2D): The point to classify
        reference (AnchoredVector): Origin on the boundary, direction into the half plane
    '''
    vec = reference.vector
    origin = reference.origin
    if reference.is_vertical:
        if vec.dy <= 0:
            return point.y <= origin.y
        return point.y >= origin.y
    if reference.is_horizontal:
        if vec.dx <= 0:
            return point.x <= origin.x
        return point.x >= origin.x

    perp = reference.perpendicular.vector
    cross = perp.cross_product(Vector2D.from_points(origin, point))
    if cross == 0:
        # On the boundary
        return True
    pt_sign = cross >= 0
    vec_sign = perp.cross_product(vec) >= 0
    return pt_sign == vec_sign


def half_plane_mask(points, reference):
    '''
    Vectorised `is_in_half_plane` over many points.

    Args:
        points: (N, 2) array-like of x, y coordinates (or Point2D objects)
        reference (AnchoredVector): The half plane

    Returns:
        np.ndarray: (N,) boolean mask, True where the point is inside
    '''
    pts = np.array([tuple(p) for p in points], dtype=np.float64).reshape(-1, 2)
    xs = pts[:, 0]
    ys = pts[:, 1]

    vec = reference.vector
    origin = reference.origin
    if reference.is_vertical:
        logger.debug("horizontal half-plane boundary for %d points", len(pts))
        if vec.dy <= 0:
            return ys <= origin.y
        return ys >= origin.y
    if reference.is_horizontal:
        logger.debug("vertical half-plane boundary for %d points", len(pts))
        if vec.dx <= 0:
            return xs <= origin.x
        return xs >= origin.x

    perp = reference.perpendicular.vector
    # Same operand order as Vector2D.cross_product so results match exactly
    cross = perp.dx * (ys - origin.y) - perp.dy * (xs - origin.x)
    vec_sign = perp.cross_product(vec) >= 0
    return (cross == 0) | ((cross >= 0) == vec_sign)
