from planeviz.common import linalg
from planeviz.common.plane import Plane
from planeviz.common.settings import PARALLEL_EPSILON
from planeviz.common.types.option import Option

import numpy as np

class Ray():
    """origin + t * direction. direction need not be unit length"""

    __slots__ = ('origin', 'direction')

    def __init__(self, origin, direction):
        self.origin = linalg.as_vector(origin)
        self.direction = linalg.as_vector(direction)
        if not np.any(self.direction):
            raise ValueError("Ray direction must be non-zero")

    def at(self, t:float) -> np.ndarray:
        return self.origin + self.direction * t

    def __repr__(self):
        return f"Ray(origin={self.origin.tolist()}, direction={self.direction.tolist()})"

def intersect(ray:Ray, plane:Plane, forward_only:bool = False) -> Option:
    """Point where ray crosses plane.

    Args:
        ray: the Ray
        plane: the Plane
        forward_only: if True, a crossing behind the ray origin (t < 0)
            counts as no intersection
    Returns:
        Option.some(point), or Option.none() if the ray is (nearly) parallel
        to the plane
    """
    n = plane.normal
    denom = np.dot(ray.direction, n)

    # |denom| / |direction| is the sine of the angle between the ray and the plane
    if abs(denom) < PARALLEL_EPSILON * np.linalg.norm(ray.direction):
        return Option.none()

    t = -(np.dot(ray.origin, n) + plane.offset) / denom

    if forward_only and t < 0:
        return Option.none()

    return Option.some(ray.at(t))

def intersect_rays(origins, directions, plane:Plane, forward_only:bool = False):
    """Vectorized intersect()

    Args:
        origins: Nx3 ray origins, or a single (3,) origin shared by all rays
        directions: Nx3 ray directions
        plane: the Plane
    Returns:
        (points, mask): Nx3 intersections and a boolean mask of the rays
        that hit the plane. Rows of points where mask is False are NaN.
    """
    directions = linalg.as_points(directions)
    origins = np.broadcast_to(np.asarray(origins, directions.dtype), directions.shape)
    n = plane.normal

    dens = np.dot(directions, n)
    mask = np.abs(dens) >= PARALLEL_EPSILON * np.linalg.norm(directions, axis = 1)

    t = np.full(dens.shape, np.nan)
    t[mask] = -(np.dot(origins[mask], n) + plane.offset) / dens[mask]

    if forward_only:
        mask &= ~(t < 0)
        t[~mask] = np.nan

    return origins + directions * t[:, None], mask
